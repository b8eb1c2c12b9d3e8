"""Pytest fixtures for shufflepolicy tests."""

from __future__ import annotations

import logging
from collections.abc import Generator

import pytest
import structlog

from shufflepolicy.core.errors import ErrorKind, ErrorSignal, Marker
from tests.helpers import trace_with


@pytest.fixture(autouse=True)
def reset_logging_state() -> Generator[None, None, None]:
    """Reset logging state before and after each test."""
    from shufflepolicy.cli import helpers

    helpers.reset_logging_state()
    structlog.reset_defaults()

    root_logger = logging.getLogger()
    original_handlers = root_logger.handlers[:]
    original_level = root_logger.level
    for handler in original_handlers:
        root_logger.removeHandler(handler)

    yield

    helpers.reset_logging_state()
    structlog.reset_defaults()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()
    for handler in original_handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(original_level)


@pytest.fixture
def stale_push_signal() -> ErrorSignal:
    return ErrorSignal.from_text(trace_with(Marker.TOO_LATE_OR_STALE_PUSH))


@pytest.fixture
def collision_signal() -> ErrorSignal:
    return ErrorSignal.from_text(trace_with(Marker.APPEND_COLLISION))


@pytest.fixture
def stale_fetch_signal() -> ErrorSignal:
    return ErrorSignal.from_text(trace_with(Marker.STALE_FETCH))


@pytest.fixture
def connection_refused_signal() -> ErrorSignal:
    return ErrorSignal.from_text(
        "java.io.IOException: Failed to connect to shuffle-host/10.0.0.7:7337\n",
        cause_kind=ErrorKind.CONNECT_FAILURE,
    )


@pytest.fixture
def plain_io_signal() -> ErrorSignal:
    return ErrorSignal.from_text("java.io.IOException: Connection reset by peer\n")
