"""
Context resolution for the context-sensitive helpers.

The namespace of an ``lc`` call depends on the application file it is called
from:

    app/controllers/users_controller.py           -> ("users",)
    app/controllers/projects/tickets_controller.py -> ("projects", "tickets")
    app/views/users/show.html.jinja                -> ("users", "show")
    app/views/users/_summary.html                  -> ("users", "summary")
    app/helpers/users_helper.py                    -> ("users",)
    app/models/user.py                             -> ("user",)
    app/models/user_observer.py                    -> ("user",)

Frames come from a FrameProvider, so tests can inject a fixed call stack
instead of the live one.
"""

from __future__ import annotations

import os
import posixpath
import re
import traceback
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

from simple_loc.i18n.context import Namespace
from simple_loc.utils.app_logger import get_i18n_logger

logger = get_i18n_logger("resolver")

APP_ROLES = ("controllers", "views", "helpers", "models")

_APP_FILE_RE = re.compile(r"^(?:.*/)?app/(%s)/(.+)$" % "|".join(APP_ROLES))
_FRAME_LINE_RE = re.compile(r"^(?P<path>.+?):(?P<line>\d+)(?::.*)?$")

_PACKAGE_PREFIX = str(Path(__file__).resolve().parents[1]) + os.sep


@dataclass(frozen=True)
class Frame:
    """One call-stack level: source file and line number."""

    file_path: str
    line_number: int = 0

    @classmethod
    def parse(cls, line: str) -> "Frame":
        """Parse a ``path:line`` (optionally ``path:line:in ...``) trace line."""
        match = _FRAME_LINE_RE.match(line.strip())
        if not match:
            return cls(file_path=line.strip())
        return cls(file_path=match.group("path"), line_number=int(match.group("line")))


FrameLike = Union[Frame, str]


def as_frame(value: FrameLike) -> Frame:
    if isinstance(value, Frame):
        return value
    if isinstance(value, str):
        return Frame.parse(value)
    raise TypeError(f"Unsupported frame descriptor: {type(value).__name__}")


class FrameProvider(ABC):
    """Source of call-stack frames, most recent call first."""

    @abstractmethod
    def frames(self) -> List[Frame]:
        raise NotImplementedError


class LiveFrameProvider(FrameProvider):
    """Captures the interpreter stack, skipping frames of this package."""

    def frames(self) -> List[Frame]:
        stack = traceback.extract_stack()
        frames: List[Frame] = []
        for summary in reversed(stack):
            filename = str(Path(summary.filename).resolve()) if summary.filename else ""
            if filename.startswith(_PACKAGE_PREFIX):
                continue
            frames.append(Frame(file_path=summary.filename, line_number=summary.lineno or 0))
        return frames


class StaticFrameProvider(FrameProvider):
    """Returns a fixed, injected list of frames."""

    def __init__(self, frames: Iterable[FrameLike] = ()) -> None:
        self._frames = [as_frame(f) for f in frames]

    def frames(self) -> List[Frame]:
        return list(self._frames)


def _strip_role_affix(role: str, segment: str) -> str:
    if role == "controllers":
        return re.sub(r"_controller$", "", segment)
    if role == "helpers":
        return re.sub(r"_helper$", "", segment)
    if role == "views":
        # partial marker, then the remaining format extension (show.html -> show)
        segment = re.sub(r"^_", "", segment)
        return re.sub(r"\.[^.]*$", "", segment)
    if role == "models":
        return re.sub(r"_observer$", "", segment)
    return segment


def namespace_from_frames(frames: Sequence[FrameLike]) -> Namespace:
    """
    Derive a namespace from the first application frame.

    Returns an empty namespace when no frame lives under ``app/<role>/``.
    """
    for value in frames:
        frame = as_frame(value)
        path = frame.file_path.replace("\\", "/")
        match = _APP_FILE_RE.match(path)
        if not match:
            continue

        role, rest = match.group(1), match.group(2)
        rest, _ext = posixpath.splitext(rest)
        segments = [s for s in rest.split("/") if s]
        if not segments:
            return ()
        segments[-1] = _strip_role_affix(role, segments[-1])
        return tuple(segments)

    return ()


class ContextResolver:
    """Infers the lookup namespace from the calling application file."""

    def __init__(self, frame_provider: Optional[FrameProvider] = None) -> None:
        self.frame_provider = frame_provider or LiveFrameProvider()

    def namespace(self) -> Namespace:
        namespace = namespace_from_frames(self.frame_provider.frames())
        if not namespace:
            logger.debug("No application frame found, using root namespace")
        return namespace
