"""Exceptions and warning categories for text value diagnostics."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .provenance import SourceLocation


class UsageError(TypeError):
    """Raised when a text method is called with an unusable argument shape."""

    def __init__(self, *, method: str, usage: str) -> None:
        """Initialize a usage error naming the offending method."""

        super().__init__(f"Usage: Text.{method}({usage})")
        self.method = method
        self.usage = usage


class DataTextWarning(UserWarning):
    """Base category for non-fatal text value diagnostics."""


class MissingTextWarning(DataTextWarning):
    """Issued when `set` or `append` receives no resolvable text."""

    def __init__(self, *, method: str) -> None:
        """Initialize a missing-text warning for one method call."""

        super().__init__(f"Text.{method}: no text given")
        self.method = method


class PunctuationConflictWarning(DataTextWarning):
    """Issued when an append would put punctuation next to punctuation."""

    def __init__(
        self,
        *,
        current: str,
        attempted: str,
        location: SourceLocation | None = None,
    ) -> None:
        """Initialize a conflict warning with the content on both sides."""

        where = f" at line {location.line} of {location.origin}" if location else ""
        super().__init__(
            "Text.append: attempt to add consecutive punctuation\n"
            f"\tCurrent = {current!r}{where}\n"
            f"\tAppend = {attempted!r}"
        )
        self.current = current
        self.attempted = attempted
        self.location = location


class TextOperationError(RuntimeError):
    """Raised when a failed chain result is unwrapped."""

    def __init__(self, failure: DataTextWarning) -> None:
        """Initialize from the warning that failed the chain."""

        super().__init__(str(failure))
        self.failure = failure
