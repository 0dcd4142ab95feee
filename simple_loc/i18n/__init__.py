"""
Nested-namespace translation lookups.

Design goals:
- Request-scoped locale and scope stack via ContextVar
- Helper names of the simple localization plugin (ll, lnc, l_scope, lc, ...)
- Missing entries degrade to defaults instead of raising, unless asked to
"""

from .context import ScopeStack, get_language, reset_language, scope_stack, set_language
from .helpers import ContextSensitiveHelpers, l_proxy, l_scope, lc, lc_proxy, ll, lnc
from .language import Language, default_language, get_language_facade
from .proxy import ProxyObject
from .resolver import ContextResolver, Frame, FrameProvider, LiveFrameProvider, StaticFrameProvider
from .store import NOT_FOUND, TranslationStore

__all__ = [
    "get_language",
    "set_language",
    "reset_language",
    "ScopeStack",
    "scope_stack",
    "Language",
    "default_language",
    "get_language_facade",
    "ProxyObject",
    "ContextResolver",
    "Frame",
    "FrameProvider",
    "LiveFrameProvider",
    "StaticFrameProvider",
    "TranslationStore",
    "NOT_FOUND",
    "ll",
    "lnc",
    "l_scope",
    "l_proxy",
    "lc",
    "lc_proxy",
    "ContextSensitiveHelpers",
]
