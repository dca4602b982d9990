"""Whitespace trimming helpers that tolerate unset text."""

from __future__ import annotations


def trim(text: str | None) -> str | None:
    """Remove leading and trailing whitespace, passing `None` through."""

    if text is None:
        return None
    return text.strip()


def rtrim(text: str | None) -> str | None:
    """Remove trailing whitespace, passing `None` through."""

    if text is None:
        return None
    return text.rstrip()
