"""Structured event logging for text values.

Responsibilities:
- Emit concise, deterministic single-line events through `loguru`.
- Stay silent until an application opts in with `configure_logging`.
"""

from __future__ import annotations

import sys
from typing import TextIO

from loguru import logger

_PACKAGE = __name__.partition(".")[0]


def _format_context_value(value: object) -> str:
    """Render one context value; strings are quoted so whitespace stays visible."""

    if isinstance(value, str):
        return repr(value)
    if value is None:
        return "none"
    return str(value)


def _format_context(context: dict[str, object]) -> str:
    """Serialize context key/value pairs in deterministic key order."""

    if not context:
        return ""
    tokens = [
        f"{key}={_format_context_value(context[key])}"
        for key in sorted(context.keys())
    ]
    return " " + " ".join(tokens)


def log_event(level: str, event: str, **context: object) -> None:
    """Emit one structured text event line."""

    logger.log(level, f"[text] level={level} event={event}{_format_context(context)}")


def configure_logging(sink: TextIO | None = None, level: str = "WARNING") -> int:
    """Enable package events and route them to `sink`.

    Returns:
        The loguru handler id, for `logger.remove()`.
    """

    logger.enable(_PACKAGE)
    return logger.add(
        sink or sys.stderr,
        format="{message}",
        level=level,
        colorize=False,
        filter=_PACKAGE,
    )


def disable_logging(handler_id: int | None = None) -> None:
    """Silence package events and drop the handler added by `configure_logging`."""

    if handler_id is not None:
        logger.remove(handler_id)
    logger.disable(_PACKAGE)
