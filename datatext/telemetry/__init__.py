"""Logging helpers for text value events."""

from .logger import configure_logging, disable_logging, log_event

__all__ = ["configure_logging", "disable_logging", "log_event"]
