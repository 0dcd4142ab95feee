from __future__ import annotations

import pytest

from simple_loc.config import LocalizationSettings
from simple_loc.i18n.context import reset_language, scope_stack, set_language
from simple_loc.i18n.language import Language
from simple_loc.i18n.resolver import ContextResolver, LiveFrameProvider, StaticFrameProvider
from simple_loc.i18n.store import TranslationStore

EN_TRANSLATIONS = {
    "app": {
        "title": "English test",
        "options": ["this", "that", "other stuff"],
        "welcome": "Welcome :name, you have :number new messages.",
        "index": {
            "title": "Welcome to XYZ",
            "subtitle": "Have a nice day...",
        },
        "layout": {
            "nav": {
                "main": {
                    "home": "Homepage",
                    "contact": "Contact",
                },
            },
        },
        "users": {
            "test": "Users test",
            "show": {"test": "Show test"},
            "summary": {"test": "Summary test"},
        },
        "projects": {"tickets": {"test": "Tickets test"}},
        "user": {"test": "User model test"},
    },
    "active_record_messages": {
        "too_short": "is too short (minimum :count characters).",
    },
}

DE_TRANSLATIONS = {
    "app": {
        "title": "Deutscher Test",
        "options": ["dies", "das", "jenes"],
        "index": {"title": "Willkommen bei XYZ"},
    },
    "date": {"formats": {"attributes": "%d.%m.%Y"}},
    "time": {"formats": {"attributes": "%d.%m.%Y %H:%M"}},
    "number": {"format": {"separator": ",", "delimiter": ".", "precision": 2}},
}


def pytest_configure(config) -> None:
    config.addinivalue_line("markers", "unit: fast tests without external services")


@pytest.fixture(autouse=True)
def _isolated_locale():
    """Every test starts without a selected locale and with an empty scope stack."""
    token = set_language(None)
    depth = scope_stack.depth()
    try:
        yield
    finally:
        reset_language(token)
        assert scope_stack.depth() == depth


@pytest.fixture
def store() -> TranslationStore:
    store = TranslationStore()
    store.store_translations("en", EN_TRANSLATIONS)
    store.store_translations("de", DE_TRANSLATIONS)
    return store


@pytest.fixture
def settings() -> LocalizationSettings:
    return LocalizationSettings(default_locale="en")


@pytest.fixture
def frames() -> list:
    return []


@pytest.fixture
def language(store, settings, frames) -> Language:
    return Language(
        store=store,
        settings=settings,
        resolver=ContextResolver(StaticFrameProvider(frames)),
    )


@pytest.fixture
def default_language(monkeypatch, language) -> Language:
    """Route the module-level helpers to the test ``language``, resolving context from the live stack."""
    import simple_loc.i18n.language as language_module

    language.resolver = ContextResolver(LiveFrameProvider())
    monkeypatch.setattr(language_module, "default_language", language)
    return language
