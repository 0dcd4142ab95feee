"""
simple-loc-compat: helper names and nested-namespace lookups of the simple
localization plugin on top of an in-memory translation store.
"""

from simple_loc.exceptions import EntryFormatError, EntryNotFound
from simple_loc.i18n import (
    ContextSensitiveHelpers,
    Language,
    l_proxy,
    l_scope,
    default_language,
    lc,
    lc_proxy,
    ll,
    lnc,
)

__version__ = "0.1.0"

__all__ = [
    "EntryFormatError",
    "EntryNotFound",
    "ContextSensitiveHelpers",
    "Language",
    "default_language",
    "ll",
    "lnc",
    "l_scope",
    "l_proxy",
    "lc",
    "lc_proxy",
]
