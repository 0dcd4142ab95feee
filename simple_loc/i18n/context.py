from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar, Token
from typing import Any, Iterator, Optional, Tuple

from simple_loc.i18n.store import key_segment

Namespace = Tuple[str, ...]

_LANGUAGE: ContextVar[Optional[str]] = ContextVar("simple_loc_language", default=None)
_SCOPE_STACK: ContextVar[Tuple[Namespace, ...]] = ContextVar("simple_loc_scope_stack", default=())


def set_language(lang: Optional[str]) -> Token:
    return _LANGUAGE.set((str(lang).strip() or None) if lang else None)


def reset_language(token: Token) -> None:
    _LANGUAGE.reset(token)


def get_language() -> Optional[str]:
    return _LANGUAGE.get()


def as_namespace(segments: Any) -> Namespace:
    return tuple(key_segment(s) for s in segments)


class ScopeStack:
    """
    LIFO stack of namespaces prefixed onto scoped lookups.

    The stack is held in a ContextVar as an immutable tuple, so every request,
    thread or asyncio task works on its own nesting. Each instance owns its
    ContextVar unless one is passed in.
    """

    def __init__(self, var: Optional[ContextVar[Tuple[Namespace, ...]]] = None) -> None:
        if var is None:
            var = ContextVar(f"simple_loc_scope_stack_{id(self)}", default=())
        self._var = var

    def push(self, namespace: Any) -> None:
        self._var.set(self._var.get() + (as_namespace(namespace),))

    def pop(self) -> Namespace:
        stack = self._var.get()
        if not stack:
            raise IndexError("pop from empty scope stack")
        self._var.set(stack[:-1])
        return stack[-1]

    def depth(self) -> int:
        return len(self._var.get())

    def current_prefix(self) -> Namespace:
        return tuple(segment for namespace in self._var.get() for segment in namespace)

    @contextmanager
    def with_scope(self, *segments: Any) -> Iterator[Namespace]:
        self.push(segments)
        try:
            yield self.current_prefix()
        finally:
            self.pop()


scope_stack = ScopeStack(_SCOPE_STACK)
