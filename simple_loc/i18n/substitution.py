"""
Named placeholder substitution.

Entries and literal defaults share one syntax:

    app:
      welcome: Welcome :name, you have :number new messages.

    substitute(entry, {"name": "Mr. X", "number": 5})
    # => "Welcome Mr. X, you have 5 new messages."

A backslash escapes colons and percent signs (``\\:name`` stays ``:name``).
Placeholders without a supplied value are left untouched.
"""

from __future__ import annotations

import re
from typing import Any, Mapping, Optional, Sequence

from simple_loc.exceptions import EntryFormatError

_PLACEHOLDER_RE = re.compile(r"\\([:%])|:([A-Za-z_][A-Za-z0-9_]*)")


def substitute(entry: Any, values: Optional[Mapping[str, Any]] = None, *, keys: Sequence[Any] = ()) -> Any:
    """
    Apply ``values`` to the ``:name`` placeholders of ``entry``.

    Raises:
        EntryFormatError: values were given for a non-string entry, or a value
            could not be rendered as text.
    """
    if not isinstance(entry, str):
        if values:
            raise EntryFormatError(
                entry,
                values,
                TypeError(f"cannot substitute into {type(entry).__name__} entry"),
                keys=keys,
            )
        return entry

    values = values or {}

    def _replace(match: re.Match) -> str:
        escaped = match.group(1)
        if escaped is not None:
            return escaped
        name = match.group(2)
        if name not in values:
            return match.group(0)
        return str(values[name])

    try:
        return _PLACEHOLDER_RE.sub(_replace, entry)
    except Exception as e:
        raise EntryFormatError(entry, values, e, keys=keys) from e
