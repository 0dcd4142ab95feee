"""
번역 항목 예외 정의

Strict lookups surface exactly two failure kinds: the entry is missing, or
substituting values into it failed.
"""

from typing import Any, Mapping, Optional, Sequence

from .base import LocalizationError


class EntryNotFound(LocalizationError):
    """번역 항목을 찾을 수 없을 때 발생하는 예외"""

    def __init__(self, keys: Sequence[Any], locale: Optional[str] = None):
        self.keys = tuple(keys)
        self.locale = locale
        super().__init__(
            message=f"Entry not found: {list(self.keys)!r} (locale: {locale})",
            code="ENTRY_NOT_FOUND",
            details={"keys": [str(k) for k in self.keys], "locale": locale},
        )


class EntryFormatError(LocalizationError):
    """번역 항목에 값을 치환하지 못했을 때 발생하는 예외"""

    def __init__(
        self,
        entry: Any,
        values: Optional[Mapping[str, Any]] = None,
        original_exception: Optional[BaseException] = None,
        keys: Sequence[Any] = (),
    ):
        self.entry = entry
        self.values = dict(values or {})
        self.original_exception = original_exception
        self.keys = tuple(keys)
        reason = f"{type(original_exception).__name__}: {original_exception}" if original_exception else "unknown"
        super().__init__(
            message=f"Failed to substitute values into entry {entry!r}: {reason}",
            code="ENTRY_FORMAT_ERROR",
            details={
                "entry": repr(entry),
                "values": sorted(self.values),
                "keys": [str(k) for k in self.keys],
                "reason": reason,
            },
        )
