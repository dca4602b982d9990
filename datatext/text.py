"""Mutable text value with guarded concatenation.

Responsibilities:
- Hold a string that is built up through chained `set`/`append` calls.
- Reject appends that would put punctuation directly after punctuation.
- Delegate trimming, word replacement and list joining to helper modules.

Key types:
- `Text`: the mutable text value.
- `TextResult`: outcome of a mutator that can fail; chainable.
- `Stringable`: anything with an `as_string()` method.
"""

from __future__ import annotations

from dataclasses import dataclass
import re
from typing import Any, Mapping, Protocol, runtime_checkable
import warnings

from .cleaner import CleanOptions, TextCleaner
from .config import DataTextConfig
from .errors import (
    DataTextWarning,
    MissingTextWarning,
    PunctuationConflictWarning,
    TextOperationError,
)
from .params import get_params
from .provenance import SourceLocation, caller_location, external_stacklevel
from .strings import rtrim, trim
from .telemetry import log_event

# Abbreviations such as "Mr." followed by ", " also trip the guard.
_TRAILING_PUNCTUATION_RE = re.compile(r"\s*[.,;]\s*$")
_LEADING_PUNCTUATION_RE = re.compile(r"\s*[.,;]")


@runtime_checkable
class Stringable(Protocol):
    """Protocol for values that can render themselves as text."""

    def as_string(self) -> str | None:
        """Return the text form of the value."""


@dataclass(frozen=True, slots=True)
class TextResult:
    """Outcome of a mutator that can fail.

    A failed result keeps the untouched text and the warning that was issued.
    Chain methods on a failed result do nothing and return the same result,
    so `text.append("a").append("b")` stops at the first failure.

    Attributes:
        text: The text value the call operated on.
        failure: Warning describing why the call failed, or `None` on success.
    """

    text: Text
    failure: DataTextWarning | None = None

    @property
    def ok(self) -> bool:
        """Return whether the call succeeded."""

        return self.failure is None

    def __bool__(self) -> bool:
        """Return whether the call succeeded, so failed results are falsy."""

        return self.ok

    def unwrap(self) -> Text:
        """Return the text, raising `TextOperationError` if the call failed."""

        if self.failure is not None:
            raise TextOperationError(self.failure)
        return self.text

    def as_string(self) -> str | None:
        """Return the current content of the underlying text."""

        return self.text.as_string()

    def set(self, *args: Any, **kwargs: Any) -> TextResult:
        """Call `Text.set` unless an earlier call in the chain failed."""

        if not self.ok:
            return self
        return self.text.set(*args, **kwargs)

    def append(self, *args: Any, **kwargs: Any) -> TextResult:
        """Call `Text.append` unless an earlier call in the chain failed."""

        if not self.ok:
            return self
        return self.text.append(*args, **kwargs)

    def appendconjunction(self, *items: object) -> TextResult:
        """Call `Text.appendconjunction` unless an earlier call in the chain failed."""

        if not self.ok:
            return self
        return self.text.appendconjunction(*items)

    def trim(self) -> TextResult:
        """Trim the text unless an earlier call in the chain failed."""

        if self.ok:
            self.text.trim()
        return self

    def rtrim(self) -> TextResult:
        """Right-trim the text unless an earlier call in the chain failed."""

        if self.ok:
            self.text.rtrim()
        return self

    def replace(
        self,
        pattern_map: Mapping[str, str],
        options: CleanOptions | Mapping[str, object] | None = None,
    ) -> TextResult:
        """Replace words in the text unless an earlier call in the chain failed."""

        if self.ok:
            self.text.replace(pattern_map, options)
        return self


class Text:
    """A piece of text that can be built up, compared and cleaned.

    The constructor takes the same arguments as `set`:

        Text("Hello, World!\\n")
        Text(["Hello", ", ", "World"])
        Text(text="Hello")
        Text({"text": "Hello"})

    Passing another `Text` copies its content; provenance and the replace
    helper are not shared.
    """

    def __init__(self, *args: Any, config: DataTextConfig | None = None, **kwargs: Any) -> None:
        """Initialize settings and optional content; a `Text` argument is cloned."""

        source = args[0] if args and isinstance(args[0], Text) else None
        if config is None:
            config = source._config if source is not None else DataTextConfig()
        config.validate()

        self._config = config
        self._content: str | None = None
        self._location: SourceLocation | None = None
        self._cleaner: TextCleaner | None = None

        if source is not None:
            self.set(source)
        elif args or kwargs:
            self.set(*args, **kwargs)

    @property
    def config(self) -> DataTextConfig:
        """Settings this text was created with."""

        return self._config

    @property
    def location(self) -> SourceLocation | None:
        """Call site of the most recent successful `set` or `append`."""

        return self._location

    def set(self, *args: Any, **kwargs: Any) -> TextResult:
        """Replace the content.

        A list or tuple is appended element by element, so the punctuation
        guard applies between elements. Objects with `as_string()` are
        resolved through it. The content is unchanged if the call fails.
        """

        value = get_params("text", args, kwargs, method="set").get("text")
        if value is None:
            return self._fail(MissingTextWarning(method="set"))

        if isinstance(value, (list, tuple)):
            if not value:
                return self._fail(MissingTextWarning(method="set"))
            result = self._append_sequence(value, reset=True)
            if not result.ok:
                return result
        else:
            text = self._resolve(value)
            if text is None:
                return self._fail(MissingTextWarning(method="set"))
            self._content = text

        self._location = caller_location()
        log_event(
            "DEBUG",
            "set",
            length=self.length(),
            origin=self._location.origin,
            line=self._location.line,
        )
        return TextResult(self)

    def append(self, *args: Any, **kwargs: Any) -> TextResult:
        """Add text to the end of the content.

        Fails without changing anything when the current content ends in
        `.`, `,` or `;` and the new text starts with one of them:

            Text("Hello,").append(".")        # fails, content stays "Hello,"
            Text("Hello").append(", World")   # "Hello, World"
        """

        value = get_params("text", args, kwargs, method="append").get("text")
        return self._append_value(value)

    def _append_value(self, value: object) -> TextResult:
        """Append one already-normalized value, recursing into sequences."""

        if value is None:
            return self._fail(MissingTextWarning(method="append"))

        if isinstance(value, (list, tuple)):
            if not value:
                return self._fail(MissingTextWarning(method="append"))
            return self._append_sequence(value, reset=False)

        text = self._resolve(value)
        if text is None:
            return self._fail(MissingTextWarning(method="append"))

        if self._conflicts_with(text):
            return self._fail(
                PunctuationConflictWarning(
                    current=self._content or "",
                    attempted=text,
                    location=self._location,
                )
            )

        self._content = (self._content or "") + text
        self._location = caller_location()
        log_event(
            "DEBUG",
            "append",
            length=self.length(),
            origin=self._location.origin,
            line=self._location.line,
        )
        return TextResult(self)

    def _append_sequence(
        self, items: list[object] | tuple[object, ...], *, reset: bool
    ) -> TextResult:
        """Append every item or none of them.

        Content and location are restored when an item fails, including when
        a warning filter turns the failure into a raised exception.
        """

        snapshot = (self._content, self._location)
        if reset:
            self._content = None
        try:
            for item in items:
                result = self._append_value(item)
                if not result.ok:
                    self._content, self._location = snapshot
                    return result
        except BaseException:
            self._content, self._location = snapshot
            raise
        return TextResult(self)

    def _conflicts_with(self, text: str) -> bool:
        """Return whether appending `text` would double up punctuation."""

        if not self._config.punctuation_guard or not self._content:
            return False
        return bool(
            _TRAILING_PUNCTUATION_RE.search(self._content)
            and _LEADING_PUNCTUATION_RE.match(text)
        )

    @staticmethod
    def _resolve(value: object) -> str | None:
        """Turn an argument into a plain string, or `None` if it has no text."""

        if isinstance(value, str):
            return value
        if isinstance(value, Stringable):
            return value.as_string()
        return str(value)

    def _fail(self, warning: DataTextWarning) -> TextResult:
        """Report a non-fatal failure and return a failed result."""

        if isinstance(warning, PunctuationConflictWarning):
            location = warning.location
            log_event(
                "WARNING",
                "punctuation_conflict",
                current=warning.current,
                attempted=warning.attempted,
                origin=location.origin if location else None,
                line=location.line if location else None,
            )
        else:
            log_event("WARNING", "missing_text", method=getattr(warning, "method", None))
        warnings.warn(warning, stacklevel=external_stacklevel())
        return TextResult(self, failure=warning)

    def equal(self, other: Stringable) -> bool:
        """Return whether both sides hold the same string."""

        return self.as_string() == other.as_string()

    def not_equal(self, other: Stringable) -> bool:
        """Return whether the two sides hold different strings."""

        return self.as_string() != other.as_string()

    def __eq__(self, other: object) -> bool:
        """Compare content with any `Stringable` value."""

        if not isinstance(other, Stringable):
            return NotImplemented
        return self.equal(other)

    def __ne__(self, other: object) -> bool:
        """Compare content with any `Stringable` value for inequality."""

        if not isinstance(other, Stringable):
            return NotImplemented
        return self.not_equal(other)

    __hash__ = None  # type: ignore[assignment]

    def as_string(self) -> str | None:
        """Return the content, or `None` if nothing has been set yet."""

        return self._content

    def length(self) -> int:
        """Return the number of characters in the content."""

        if self._content is None:
            return 0
        return len(self._content)

    def __len__(self) -> int:
        """Return the content length."""

        return self.length()

    def __bool__(self) -> bool:
        """Return `True`; an empty text is still a text."""

        return True

    def __str__(self) -> str:
        """Return the content, or an empty string when unset."""

        return self._content or ""

    def __repr__(self) -> str:
        """Return a debug representation showing the content."""

        return f"{type(self).__name__}({self._content!r})"

    def trim(self) -> Text:
        """Remove leading and trailing whitespace."""

        self._content = trim(self._content)
        return self

    def rtrim(self) -> Text:
        """Remove trailing whitespace."""

        self._content = rtrim(self._content)
        return self

    def replace(
        self,
        pattern_map: Mapping[str, str],
        options: CleanOptions | Mapping[str, object] | None = None,
    ) -> Text:
        """Replace words in the content.

            text = Text("Hello World")
            text.replace({"Hello": "Goodbye dear"})
            text.as_string()  # "Goodbye dear World"
        """

        if not self._content:
            return self
        if self._cleaner is None:
            self._cleaner = TextCleaner()
        resolved = CleanOptions.from_value(options, default=self._config.clean_options())
        self._content = self._cleaner.replace(pattern_map, self._content, resolved)
        return self

    def appendconjunction(self, *items: object) -> TextResult:
        """Append items joined as a list, e.g. "a, b and c".

        The joined string goes through `append`, so the punctuation guard
        still applies.
        """

        return self._append_value(self._config.conjunction_formatter().conjunction(*items))
