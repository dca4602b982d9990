"""Call-site capture for diagnostic messages.

Responsibilities:
- Record the file and line of the caller that mutated a text value.
- Skip frames that belong to this package so recursion depth does not matter.
"""

from __future__ import annotations

from dataclasses import dataclass
import sys
from types import FrameType

_PACKAGE = __name__.partition(".")[0]


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Origin of the most recent mutating call.

    Attributes:
        origin: File name of the calling code.
        line: Line number within `origin`.
    """

    origin: str
    line: int


def _is_internal(frame: FrameType) -> bool:
    """Return whether a frame executes code from this package."""

    module = frame.f_globals.get("__name__", "")
    return module == _PACKAGE or module.startswith(f"{_PACKAGE}.")


def caller_location() -> SourceLocation:
    """Return the location of the nearest caller outside this package."""

    frame = sys._getframe(1)
    while frame.f_back is not None and _is_internal(frame):
        frame = frame.f_back
    return SourceLocation(origin=frame.f_code.co_filename, line=frame.f_lineno)


def external_stacklevel() -> int:
    """Return a `warnings.warn` stack level pointing at the first external caller.

    The level is relative to the function that calls this helper.
    """

    level = 1
    frame = sys._getframe(1)
    while frame.f_back is not None and _is_internal(frame):
        frame = frame.f_back
        level += 1
    return level
