"""
Language facade.

Bundles the translation store, the scope stack and the context resolver and
exposes the lookup methods the helpers delegate to.

Assuming the following translations:

    app:
      index:
        title: Welcome to XYZ
        subtitle: Have a nice day...

    language.app_not_scoped("index", "title")               # => "Welcome to XYZ"
    language.app_not_scoped("index", "motto", default="Hi")  # => "Hi"

    with language.with_app_scope("index"):
        language.app_scoped("title")                         # => "Welcome to XYZ"
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple

from simple_loc.config import LocalizationSettings, get_settings
from simple_loc.exceptions import EntryFormatError, EntryNotFound
from simple_loc.i18n.context import Namespace, ScopeStack, get_language, reset_language, scope_stack, set_language
from simple_loc.i18n.proxy import ProxyObject
from simple_loc.i18n.resolver import ContextResolver
from simple_loc.i18n.store import NOT_FOUND, TranslationStore, key_segment
from simple_loc.i18n.substitution import substitute
from simple_loc.utils.app_logger import get_i18n_logger
from simple_loc.utils.language import match_language, normalize_language

logger = get_i18n_logger("language")


def split_lookup_arguments(
    keys: Tuple[Any, ...],
    values: Mapping[str, Any],
    *,
    allow_default: bool = True,
) -> Tuple[List[Any], Dict[str, Any], Optional[str]]:
    """
    Separate key segments, substitution values and the literal default.

    A trailing positional mapping is merged into the substitution values.
    Positional format values (a trailing list or tuple) are not supported.
    """
    keys_list = list(keys)
    values = dict(values)
    default = values.pop("default", None) if allow_default else None

    if keys_list and isinstance(keys_list[-1], Mapping):
        values = {**keys_list.pop(), **values}
    elif keys_list and isinstance(keys_list[-1], (list, tuple)):
        raise TypeError(
            "Positional format values are not supported; "
            "pass named substitution values instead (e.g. name='Mr. X')"
        )

    if not keys_list:
        raise TypeError("At least one key is required for a lookup")
    if default is not None and not isinstance(default, str):
        raise TypeError(f"default must be a string, got {type(default).__name__}")

    return keys_list, values, default


class Language:
    """Lookup entry point for one translation store."""

    def __init__(
        self,
        store: Optional[TranslationStore] = None,
        settings: Optional[LocalizationSettings] = None,
        scope: Optional[ScopeStack] = None,
        resolver: Optional[ContextResolver] = None,
    ) -> None:
        self.store = store or TranslationStore()
        self._settings = settings
        self.scope = scope if scope is not None else scope_stack
        self.resolver = resolver or ContextResolver()

        locales_dir = self.settings.locales_dir
        if locales_dir:
            self.store.load_path(locales_dir)

    @property
    def settings(self) -> LocalizationSettings:
        return self._settings if self._settings is not None else get_settings()

    # ------------------------------------------------------------------
    # Locale selection
    # ------------------------------------------------------------------

    @property
    def current_locale(self) -> str:
        return get_language() or self.settings.default_locale

    @property
    def available_locales(self) -> List[str]:
        return self.store.available_locales

    def resolve_locale(self, locale: Optional[str]) -> str:
        return (
            match_language(locale, self.store.available_locales)
            or normalize_language(locale)
            or self.settings.default_locale
        )

    def use(self, locale: Optional[str]) -> str:
        """Select the locale for the current context. Returns the previous one."""
        previous = self.current_locale
        selected = self.resolve_locale(locale)
        set_language(selected)
        logger.debug(f"Locale changed from {previous} to {selected}")
        return previous

    @contextmanager
    def using(self, locale: Optional[str]) -> Iterator[str]:
        token = set_language(self.resolve_locale(locale))
        try:
            yield self.current_locale
        finally:
            reset_language(token)

    def has_translations(self, locale: Optional[str] = None) -> bool:
        return self.store.has_locale(locale or self.current_locale)

    def load_path(self, path) -> List[str]:
        return self.store.load_path(path)

    def store_translations(self, locale: str, data: Mapping[str, Any]) -> None:
        self.store.store_translations(locale, data)

    # ------------------------------------------------------------------
    # Raw entries
    # ------------------------------------------------------------------

    def entry_strict(self, *keys: Any, **values: Any) -> Any:
        """
        Return the entry at the given key path of the current locale.

        Nested entries are addressed with more than one key:

            language.entry_strict("active_record_messages", "too_short")

        Substitution values are passed as keyword arguments (or a trailing
        mapping) and replace ``:name`` placeholders.

        Raises:
            EntryNotFound: the entry does not exist
            EntryFormatError: substituting the values failed
        """
        keys_list, values, _ = split_lookup_arguments(keys, values, allow_default=False)
        locale = self.current_locale
        value = self.store.lookup(locale, keys_list[:-1], keys_list[-1], values)
        if value is NOT_FOUND:
            raise EntryNotFound(keys_list, locale)
        return value

    def entry(self, *keys: Any, **values: Any) -> Any:
        """Same as ``entry_strict`` but returns None for missing entries."""
        try:
            return self.entry_strict(*keys, **values)
        except EntryNotFound as e:
            logger.debug(e.message)
            return None
        except EntryFormatError as e:
            if self.settings.debug:
                raise
            logger.warning(e.message)
            return self._raw_entry(e.keys)

    def __getitem__(self, keys: Any) -> Any:
        if isinstance(keys, tuple):
            return self.entry(*keys)
        return self.entry(keys)

    def _raw_entry(self, keys: Tuple[Any, ...]) -> Any:
        value = self.store.lookup(self.current_locale, keys[:-1], keys[-1])
        return None if value is NOT_FOUND else value

    # ------------------------------------------------------------------
    # Application section
    # ------------------------------------------------------------------

    def app_not_scoped(self, *keys: Any, **values: Any) -> Any:
        """
        Look up an entry of the application section, ignoring any scope.

        If the entry does not exist the ``default`` keyword is returned, with
        the substitution values applied. Without a default the configured
        ``app_default_value`` is returned, and if that is not set either, a
        rendering of the key path.
        """
        keys_list, values, default = split_lookup_arguments(keys, values)
        section = self.settings.app_section
        path = [section, *keys_list[:-1]] if section else keys_list[:-1]

        try:
            value = self.store.lookup(self.current_locale, path, keys_list[-1], values)
        except EntryFormatError as e:
            if self.settings.debug:
                raise
            logger.warning(e.message)
            value = self.store.lookup(self.current_locale, path, keys_list[-1])

        if value is not NOT_FOUND:
            return value

        logger.debug(f"Missing application entry {keys_list!r} (locale: {self.current_locale})")

        if default is not None:
            try:
                return substitute(default, values, keys=keys_list)
            except EntryFormatError as e:
                if self.settings.debug:
                    raise
                logger.warning(e.message)
                return default

        if self.settings.app_default_value is not None:
            return self.settings.app_default_value

        return repr([key_segment(k) for k in keys_list])

    def app_scoped(self, *keys: Any, **values: Any) -> Any:
        """``app_not_scoped`` with the active ``with_app_scope`` prefix."""
        return self.app_not_scoped(*self.scope.current_prefix(), *keys, **values)

    def with_app_scope(self, *sections: Any):
        """
        Narrow down the scope of ``app_scoped`` inside a ``with`` block:

            with language.with_app_scope("layout", "nav", "main"):
                language.app_scoped("home")     # => "Homepage"
                language.app_scoped("contact")  # => "Contact"

        Scopes nest; the pushed sections are popped on every exit path.
        """
        return self.scope.with_scope(*sections)

    def context_namespace(self) -> Namespace:
        return self.resolver.namespace()

    def app_context_scoped(self, *keys: Any, **values: Any) -> Any:
        """``app_not_scoped`` prefixed with the namespace of the calling file."""
        return self.app_not_scoped(*self.context_namespace(), *keys, **values)

    def app_proxy(self, *keys: Any, original_receiver: Any = "", **values: Any) -> ProxyObject:
        """
        Create a proxy for an application entry.

        The proxy resolves the entry against the locale active when it is
        read. While the locale has no translations it reads as
        ``original_receiver``.
        """
        split_lookup_arguments(keys, values)

        def _resolve() -> Any:
            if not self.has_translations():
                return original_receiver
            return self.app_not_scoped(*keys, **values)

        return ProxyObject(_resolve)

    # Backward compatible names
    app = app_scoped
    app_with_scope = with_app_scope


default_language = Language()


def get_language_facade() -> Language:
    """Get the module-level Language instance."""
    return default_language
