"""Shared pytest fixtures for the datatext test suite."""

from __future__ import annotations

from collections.abc import Iterator
import io

import pytest

from datatext.telemetry import configure_logging, disable_logging


@pytest.fixture
def log_output() -> Iterator[io.StringIO]:
    """Capture package log events at DEBUG level for the duration of a test."""

    buffer = io.StringIO()
    handler_id = configure_logging(buffer, level="DEBUG")
    yield buffer
    disable_logging(handler_id)
