"""Pattern-based word replacement for text values.

Responsibilities:
- Replace or strip substrings and whole words from a piece of text.
- Accept options either as `CleanOptions` or as a plain mapping.
"""

from __future__ import annotations

from dataclasses import dataclass
import re
from typing import Iterable, Mapping

REPLACE_MODES = frozenset({"part", "word"})


def _option_token(value: object) -> str:
    """Return an option value as a lower-case token, empty when unset."""

    if value is None:
        return ""
    return str(value).strip().lower()


def _escape_flag(value: object, default: bool) -> bool:
    """Read a String::Clean style escape flag.

    Any token starting with `y` or `e` (`yes`, `escape`) turns escaping on;
    any other non-empty token turns it off.
    """

    if isinstance(value, bool):
        return value
    token = _option_token(value)
    if not token:
        return default
    return token[0] in "ye"


@dataclass(frozen=True, slots=True)
class CleanOptions:
    """Matching options for one replace call.

    Attributes:
        mode: `part` matches anywhere, `word` only on word boundaries.
        escape: Treat pattern keys as literal strings instead of regexes.
        ignore_case: Match pattern keys case-insensitively.
    """

    mode: str = "part"
    escape: bool = True
    ignore_case: bool = False

    def __post_init__(self) -> None:
        """Reject unknown replace modes."""

        if self.mode not in REPLACE_MODES:
            supported = ", ".join(sorted(REPLACE_MODES))
            raise ValueError(f"Unsupported replace mode `{self.mode}`; supported: {supported}.")

    @classmethod
    def from_value(
        cls,
        value: CleanOptions | Mapping[str, object] | None,
        default: CleanOptions | None = None,
    ) -> CleanOptions:
        """Build options from `None`, an options instance, or a mapping.

        Mapping keys are `replace` (`word`/`part`), `escape` (`yes`/`no`) and
        `opt` (regex flag letters; `i` ignores case). Missing keys fall back
        to `default`.
        """

        base = default or cls()
        if value is None:
            return base
        if isinstance(value, CleanOptions):
            return value

        mode = _option_token(value.get("replace"))
        return cls(
            mode=mode or base.mode,
            escape=_escape_flag(value.get("escape"), base.escape),
            ignore_case="i" in _option_token(value.get("opt")) or base.ignore_case,
        )


class TextCleaner:
    """Apply word and substring replacements to text."""

    def replace(
        self,
        pattern_map: Mapping[str, str],
        text: str,
        options: CleanOptions | Mapping[str, object] | None = None,
    ) -> str:
        """Replace each key of `pattern_map` with its value, in mapping order."""

        if not isinstance(text, str) or not text:
            raise ValueError("Text to clean must be a non-empty string.")

        resolved = CleanOptions.from_value(options)
        for search, replacement in pattern_map.items():
            pattern = self._compile(search, resolved)
            text = pattern.sub(lambda _match, value=replacement: value, text)
        return text

    def replace_word(
        self,
        pattern_map: Mapping[str, str],
        text: str,
        options: CleanOptions | Mapping[str, object] | None = None,
    ) -> str:
        """Replace whole words only."""

        resolved = CleanOptions.from_value(options)
        return self.replace(
            pattern_map,
            text,
            CleanOptions(mode="word", escape=resolved.escape, ignore_case=resolved.ignore_case),
        )

    def strip(
        self,
        words: Iterable[str],
        text: str,
        options: CleanOptions | Mapping[str, object] | None = None,
    ) -> str:
        """Remove every occurrence of the given words."""

        return self.replace({word: "" for word in words}, text, options)

    def strip_word(
        self,
        words: Iterable[str],
        text: str,
        options: CleanOptions | Mapping[str, object] | None = None,
    ) -> str:
        """Remove the given words where they appear as whole words."""

        return self.replace_word({word: "" for word in words}, text, options)

    @staticmethod
    def _compile(search: str, options: CleanOptions) -> re.Pattern[str]:
        """Compile one search key according to the matching options."""

        pattern = re.escape(search) if options.escape else search
        if options.mode == "word":
            pattern = rf"\b(?:{pattern})\b"
        return re.compile(pattern, re.IGNORECASE if options.ignore_case else 0)
