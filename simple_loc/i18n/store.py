"""
In-memory translation tables.

Translation files are YAML documents, one per locale:

    # locales/de.yml
    de:
      app:
        index:
          title: Willkommen bei XYZ

The top-level locale key is optional; ``app: ...`` at the document root is
read the same way for a file named ``de.yml``.
"""

from __future__ import annotations

import copy
import threading
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

import yaml

from simple_loc.i18n.substitution import substitute
from simple_loc.utils.app_logger import get_i18n_logger

logger = get_i18n_logger("store")


class _NotFound:
    """Sentinel for a missing entry."""

    _instance: Optional["_NotFound"] = None

    def __new__(cls) -> "_NotFound":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NOT_FOUND"


NOT_FOUND = _NotFound()

_YAML_SUFFIXES = (".yml", ".yaml")


def key_segment(segment: Any) -> str:
    """Render a lookup key segment as the table key it names."""
    if isinstance(segment, Enum):
        return str(segment.value)
    return str(segment)


def deep_merge(target: Dict[str, Any], source: Mapping[str, Any]) -> Dict[str, Any]:
    for key, value in source.items():
        key = str(key)
        if isinstance(value, Mapping) and isinstance(target.get(key), dict):
            deep_merge(target[key], value)
        elif isinstance(value, Mapping):
            target[key] = deep_merge({}, value)
        else:
            target[key] = value
    return target


class TranslationStore:
    """Per-locale nested translation tables with path lookup."""

    def __init__(self) -> None:
        self._tables: Dict[str, Dict[str, Any]] = {}
        self._lock = threading.RLock()

    @property
    def available_locales(self) -> List[str]:
        with self._lock:
            return sorted(self._tables)

    def has_locale(self, locale: Optional[str]) -> bool:
        with self._lock:
            return bool(locale) and bool(self._tables.get(locale))

    def store_translations(self, locale: str, data: Mapping[str, Any]) -> None:
        """Deep-merge ``data`` into the table of ``locale``."""
        if not isinstance(data, Mapping):
            raise TypeError(f"translations for {locale!r} must be a mapping, got {type(data).__name__}")
        with self._lock:
            table = self._tables.setdefault(locale, {})
            deep_merge(table, data)
        logger.debug(f"Stored {len(data)} top-level entries for locale {locale}")

    def load_path(self, path: Union[str, Path]) -> List[str]:
        """
        Load YAML translation files.

        Args:
            path: A directory (every *.yml / *.yaml file is read) or a single file

        Returns:
            The locales that received translations
        """
        path = Path(path)
        if path.is_dir():
            files = sorted(p for p in path.iterdir() if p.suffix in _YAML_SUFFIXES)
        elif path.exists():
            files = [path]
        else:
            logger.warning(f"Translation path not found: {path}")
            return []

        loaded: List[str] = []
        for file in files:
            locale = file.stem
            with file.open("r", encoding="utf-8") as fh:
                data = yaml.safe_load(fh) or {}
            if not isinstance(data, dict):
                raise ValueError(f"Translation file {file} must contain a mapping")
            if len(data) == 1 and locale in data and isinstance(data[locale], dict):
                data = data[locale]
            self.store_translations(locale, data)
            loaded.append(locale)
            logger.debug(f"Loaded translations for {locale} from {file}")
        return loaded

    def reset(self) -> None:
        with self._lock:
            self._tables.clear()

    def lookup(
        self,
        locale: str,
        path_segments: Sequence[Any],
        key: Any,
        values: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        """
        Return the entry at ``path_segments + [key]`` with ``values`` applied,
        or ``NOT_FOUND``.

        Raises:
            EntryFormatError: the entry exists but substitution failed
        """
        keys = [*path_segments, key]
        with self._lock:
            current: Any = self._tables.get(locale)
            if current is None:
                return NOT_FOUND
            for segment in keys:
                if not isinstance(current, dict):
                    return NOT_FOUND
                segment = key_segment(segment)
                if segment not in current:
                    return NOT_FOUND
                current = current[segment]
            if current is None:
                return NOT_FOUND
            if isinstance(current, (dict, list)) and not values:
                return copy.deepcopy(current)
        return substitute(current, values, keys=keys)
