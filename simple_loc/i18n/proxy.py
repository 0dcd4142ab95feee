"""
Deferred lookups.

A ProxyObject stands in for a translated value and re-resolves it on every
read, so a proxy created at import time follows later locale switches:

    title = language.app_proxy("title")
    language.use("de"); str(title)  # => "Deutscher Test"
    language.use("en"); str(title)  # => "English test"
"""

from __future__ import annotations

from typing import Any, Callable


class ProxyObject:
    """Forwards reads to the value returned by ``resolve`` at read time."""

    __slots__ = ("_resolve",)

    def __init__(self, resolve: Callable[[], Any]) -> None:
        object.__setattr__(self, "_resolve", resolve)

    @property
    def value(self) -> Any:
        return self._resolve()

    def __getattr__(self, name: str) -> Any:
        return getattr(self._resolve(), name)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("ProxyObject is read-only")

    def __str__(self) -> str:
        return str(self._resolve())

    def __repr__(self) -> str:
        return repr(self._resolve())

    def __format__(self, format_spec: str) -> str:
        return format(self._resolve(), format_spec)

    def __bool__(self) -> bool:
        return bool(self._resolve())

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, ProxyObject):
            other = other.value
        return self._resolve() == other

    def __ne__(self, other: Any) -> bool:
        return not self == other

    def __lt__(self, other: Any) -> bool:
        if isinstance(other, ProxyObject):
            other = other.value
        return self._resolve() < other

    def __hash__(self) -> int:
        return hash(self._resolve())

    def __len__(self) -> int:
        return len(self._resolve())

    def __iter__(self):
        return iter(self._resolve())

    def __getitem__(self, item: Any) -> Any:
        return self._resolve()[item]

    def __contains__(self, item: Any) -> bool:
        return item in self._resolve()

    def __add__(self, other: Any) -> Any:
        if isinstance(other, ProxyObject):
            other = other.value
        return self._resolve() + other

    def __radd__(self, other: Any) -> Any:
        return other + self._resolve()

    def __mod__(self, other: Any) -> Any:
        return self._resolve() % other
