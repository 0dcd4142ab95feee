"""
Helper shortcuts.

Global helpers work everywhere:

    ll("headings", "welcome")          # scoped lookup
    lnc("headings", "welcome")         # unscoped lookup
    with l_scope("layout", "nav"):     # scope for ll
        ll("home")
    l_proxy("messages", "name_required")

Context-sensitive helpers add the namespace of the calling application file
(see simple_loc.i18n.resolver):

    # in app/controllers/users_controller.py
    lc("test")   # same as lnc("users", "test")
"""

from __future__ import annotations

from typing import Any

from simple_loc.i18n.language import get_language_facade
from simple_loc.i18n.proxy import ProxyObject


def ll(*keys: Any, **values: Any) -> Any:
    return get_language_facade().app_scoped(*keys, **values)


def lnc(*keys: Any, **values: Any) -> Any:
    return get_language_facade().app_not_scoped(*keys, **values)


def l_scope(*sections: Any):
    return get_language_facade().with_app_scope(*sections)


def l_proxy(*keys: Any, **values: Any) -> ProxyObject:
    return get_language_facade().app_proxy(*keys, **values)


def lc(*keys: Any, **values: Any) -> Any:
    """Unscoped lookup prefixed with the namespace of the calling file."""
    return get_language_facade().app_context_scoped(*keys, **values)


def lc_proxy(*keys: Any, **values: Any) -> ProxyObject:
    """Proxy over the calling file's namespace; the namespace is fixed at creation."""
    facade = get_language_facade()
    return facade.app_proxy(*facade.context_namespace(), *keys, **values)


class ContextSensitiveHelpers:
    """Mixin giving controllers, views and models ``lc`` / ``lc_proxy`` methods."""

    def lc(self, *keys: Any, **values: Any) -> Any:
        return lc(*keys, **values)

    def lc_proxy(self, *keys: Any, **values: Any) -> ProxyObject:
        return lc_proxy(*keys, **values)
