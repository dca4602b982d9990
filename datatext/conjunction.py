"""Natural-language list joining ("a, b and c").

Responsibilities:
- Join items with a separator and a final connector word.
- Switch to an alternate separator when an item already contains the separator.
"""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True, slots=True)
class ConjunctionFormatter:
    """Join items into a conjunction or disjunction phrase.

    Attributes:
        separator: Separator placed between leading items.
        alt_separator: Separator used when an item contains `separator`.
        connector: Word placed before the last item.
        penultimate: Also place the separator before the connector.
    """

    separator: str = ","
    alt_separator: str = ";"
    connector: str = "and"
    penultimate: bool = False

    def conjunction(self, *items: object) -> str:
        """Join items using the configured connector."""

        words = [_as_plain_string(item) for item in items if item is not None]
        if not words:
            return ""
        if len(words) == 1:
            return words[0]
        if len(words) == 2:
            return f"{words[0]} {self.connector} {words[1]}"

        separator = self.separator
        if any(self.separator in word for word in words):
            separator = self.alt_separator
        head = f"{separator} ".join(words[:-1])
        if self.penultimate:
            head += separator
        return f"{head} {self.connector} {words[-1]}"

    def disjunction(self, *items: object) -> str:
        """Join items using `or` as the connector."""

        return replace(self, connector="or").conjunction(*items)


def _as_plain_string(item: object) -> str:
    """Resolve an item through `as_string()` when it has one."""

    as_string = getattr(item, "as_string", None)
    if callable(as_string):
        return as_string() or ""
    return str(item)


_DEFAULT_FORMATTER = ConjunctionFormatter()


def conjunction(*items: object) -> str:
    """Join items as "a, b and c"."""

    return _DEFAULT_FORMATTER.conjunction(*items)


def disjunction(*items: object) -> str:
    """Join items as "a, b or c"."""

    return _DEFAULT_FORMATTER.disjunction(*items)
