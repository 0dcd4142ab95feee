import pytest

from simple_loc.i18n.helpers import ContextSensitiveHelpers, l_proxy, l_scope, lc, lc_proxy, ll, lnc
from simple_loc.i18n.proxy import ProxyObject
from simple_loc.i18n.resolver import ContextResolver, StaticFrameProvider


def run_as(filename, source, **scope):
    """Execute ``source`` as if it lived in ``filename``."""
    scope.setdefault("__name__", "app_module")
    exec(compile(source, filename, "exec"), scope)
    return scope


@pytest.mark.unit
class TestGlobalHelpers:
    def test_ll_respects_scope(self, default_language):
        with l_scope("layout", "nav", "main"):
            assert ll("home") == "Homepage"
            assert ll("contact") == "Contact"
        assert ll("layout", "nav", "main", "home") == "Homepage"

    def test_lnc_ignores_scope(self, default_language):
        with l_scope("layout"):
            assert lnc("index", "title") == "Welcome to XYZ"

    def test_ll_default(self, default_language):
        with l_scope("index"):
            assert ll("I don't exist", default="I don't exist") == "I don't exist"

    def test_l_proxy(self, default_language):
        proxy = l_proxy("title")
        assert isinstance(proxy, ProxyObject)
        assert proxy == "English test"
        default_language.use("de")
        assert proxy == "Deutscher Test"


@pytest.mark.unit
class TestContextSensitiveHelpers:
    def test_lc_in_controller(self, default_language):
        scope = run_as(
            "/srv/shop/app/controllers/users_controller.py",
            "result = lc('test')\n",
            lc=lc,
        )
        assert scope["result"] == "Users test"

    def test_lc_in_nested_controller(self, default_language):
        scope = run_as(
            "/srv/shop/app/controllers/projects/tickets_controller.py",
            "result = lc('test')\n",
            lc=lc,
        )
        assert scope["result"] == "Tickets test"

    def test_lc_in_partial(self, default_language):
        default_language.resolver = ContextResolver(StaticFrameProvider(["/srv/shop/app/views/users/_summary.rhtml:3"]))
        assert lc("test") == "Summary test"

    def test_lc_outside_application(self, default_language):
        assert lc("index", "title") == "Welcome to XYZ"

    def test_lc_proxy_fixes_namespace_at_creation(self, default_language):
        scope = run_as(
            "/srv/shop/app/models/user.py",
            "proxy = lc_proxy('test')\n",
            lc_proxy=lc_proxy,
        )
        assert str(scope["proxy"]) == "User model test"

    def test_mixin_methods(self, default_language):
        scope = run_as(
            "/srv/shop/app/views/users/show.py",
            "class Page(Helpers):\n    pass\nresult = Page().lc('test')\n",
            Helpers=ContextSensitiveHelpers,
        )
        assert scope["result"] == "Show test"
