"""Structured logging infrastructure for shufflepolicy.

Provides structured logging using structlog with transfer-specific context
such as shuffle_id, shuffle_merge_id and block_id. Supports console and JSON
output, with an optional rotating log file.

Example usage:
    from shufflepolicy.core.logging import get_logger, configure_logging, with_context

    # Configure once at startup
    configure_logging(level="DEBUG", format="console")

    # Get a component-specific logger
    logger = get_logger("policies")

    # Log with auto-context
    logger.info("failure_classified", retry=False)

    # Correlate every entry emitted while one transfer is being handled
    ctx = TransferContext(app_id="app-1", shuffle_id=3, shuffle_merge_id=1)
    with with_context(ctx.with_block("shufflePush_3_1_12_4")):
        logger.debug("classifying")  # Includes app_id, shuffle_id, block_id
"""

from __future__ import annotations

import logging
import sys
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field, replace
from datetime import UTC, datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Literal

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

# Field names whose values are never written to logs
SENSITIVE_PATTERNS = frozenset({
    "secret",
    "password",
    "token",
    "credential",
    "auth",
    "sasl",
})

TransferDirection = Literal["push", "fetch"]


@dataclass(frozen=True)
class TransferContext:
    """Immutable context for correlating log entries of one block transfer.

    Attributes:
        app_id: Application that owns the shuffle.
        shuffle_id: Shuffle identifier.
        shuffle_merge_id: Merge generation; a higher id supersedes a lower one.
        block_id: Block being pushed or fetched (None outside a block).
        direction: "push" or "fetch".
        attempt_id: Unique id for this transfer attempt.
    """

    app_id: str
    shuffle_id: int | None = None
    shuffle_merge_id: int | None = None
    block_id: str | None = None
    direction: TransferDirection | None = None
    attempt_id: str = field(default_factory=lambda: str(uuid.uuid4()))

    def with_block(self, block_id: str) -> TransferContext:
        """Return a copy of this context scoped to ``block_id``."""
        return replace(self, block_id=block_id)

    def with_direction(self, direction: TransferDirection) -> TransferContext:
        """Return a copy of this context for the given transfer direction."""
        return replace(self, direction=direction)

    def to_dict(self) -> dict[str, Any]:
        """Convert context to a dictionary for logging (None values omitted)."""
        result: dict[str, Any] = {
            "app_id": self.app_id,
            "attempt_id": self.attempt_id,
        }
        for key in ("shuffle_id", "shuffle_merge_id", "block_id", "direction"):
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        return result


# ContextVar keeps concurrent transfers (threads or tasks) isolated
_current_context: ContextVar[TransferContext | None] = ContextVar(
    "shufflepolicy_context", default=None
)


def get_current_context() -> TransferContext | None:
    """Get the current TransferContext if set."""
    return _current_context.get()


@contextmanager
def with_context(ctx: TransferContext) -> Iterator[TransferContext]:
    """Set ``ctx`` as the current TransferContext for the duration of a block.

    All log calls within the block include the context fields when the
    context processor is active.
    """
    token = _current_context.set(ctx)
    try:
        yield ctx
    finally:
        _current_context.reset(token)


def _sanitize_value(key: str, value: Any) -> Any:
    key_lower = key.lower()
    for pattern in SENSITIVE_PATTERNS:
        if pattern in key_lower:
            return "[REDACTED]"
    return value


def _sanitize_event_dict(
    logger: WrappedLogger,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """Structlog processor that redacts sensitive fields."""
    sanitized: EventDict = {}
    for key, value in event_dict.items():
        if isinstance(value, dict):
            sanitized[key] = {k: _sanitize_value(k, v) for k, v in value.items()}
        else:
            sanitized[key] = _sanitize_value(key, value)
    return sanitized


def _add_timestamp(
    logger: WrappedLogger,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """Structlog processor that adds an ISO8601 UTC timestamp."""
    event_dict["timestamp"] = datetime.now(UTC).isoformat()
    return event_dict


def _add_context(
    logger: WrappedLogger,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """Structlog processor that adds TransferContext fields to log entries.

    Explicitly bound keys take precedence over context fields.
    """
    ctx = get_current_context()
    if ctx is not None:
        for key, value in ctx.to_dict().items():
            if key not in event_dict:
                event_dict[key] = value
    return event_dict


class PolicyLogger:
    """Component logger wrapping structlog.

    The underlying structlog logger is fetched on every call, so loggers
    created at import time still honour a later configure_logging().
    """

    def __init__(self, component: str, **initial_context: Any) -> None:
        self._component = component
        self._context: dict[str, Any] = {"component": component, **initial_context}

    def _get_logger(self) -> structlog.stdlib.BoundLogger:
        logger: structlog.stdlib.BoundLogger = structlog.get_logger().bind(**self._context)
        return logger

    def bind(self, **context: Any) -> PolicyLogger:
        """Create a new logger with additional bound context."""
        new_logger = PolicyLogger.__new__(PolicyLogger)
        new_logger._component = self._component
        new_logger._context = {**self._context, **context}
        return new_logger

    def unbind(self, *keys: str) -> PolicyLogger:
        """Create a new logger with the given keys removed."""
        new_logger = PolicyLogger.__new__(PolicyLogger)
        new_logger._component = self._component
        new_logger._context = {k: v for k, v in self._context.items() if k not in keys}
        return new_logger

    def debug(self, event: str, **kw: Any) -> None:
        self._get_logger().debug(event, **kw)

    def info(self, event: str, **kw: Any) -> None:
        self._get_logger().info(event, **kw)

    def warning(self, event: str, **kw: Any) -> None:
        self._get_logger().warning(event, **kw)

    def error(self, event: str, **kw: Any) -> None:
        self._get_logger().error(event, **kw)

    def exception(self, event: str, **kw: Any) -> None:
        """Log an exception with traceback. Call from within an except block."""
        self._get_logger().exception(event, **kw)


def _get_processors(
    include_timestamps: bool,
    include_context: bool,
) -> list[Processor]:
    processors: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        _sanitize_event_dict,
    ]

    if include_context:
        processors.append(_add_context)

    if include_timestamps:
        processors.append(_add_timestamp)

    processors.extend([
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        # Rendering happens per handler, see _formatter()
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ])
    return processors


def _formatter(renderer: Processor) -> structlog.stdlib.ProcessorFormatter:
    return structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )


def configure_logging(
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO",
    format: Literal["json", "console", "both"] = "console",  # noqa: A002
    file_path: Path | None = None,
    max_file_size_mb: int = 50,
    backup_count: int = 5,
    include_timestamps: bool = True,
    include_context: bool = True,
) -> None:
    """Configure structured logging.

    Call once at application startup. Log output never goes to stdout, which
    is left to command output.

    Args:
        level: Minimum log level to capture.
        format: "json" for structured output, "console" for human-readable,
            "both" for console on stderr plus JSON to file (requires file_path).
        file_path: Optional log file. JSON goes here when given, else to stderr.
            Required if format="both".
        max_file_size_mb: Maximum log file size before rotation (MB).
        backup_count: Number of rotated log files to keep.
        include_timestamps: Whether to add ISO8601 timestamps.
        include_context: Whether to add TransferContext fields when set.

    Raises:
        ValueError: If format="both" but file_path is not provided.
    """
    if format == "both" and file_path is None:
        raise ValueError("file_path is required when format='both'")

    log_level = getattr(logging, level)
    handlers: list[logging.Handler] = []

    if format in ("console", "both"):
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(
            _formatter(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))
        )
        handlers.append(console_handler)

    if format in ("json", "both"):
        json_handler: logging.Handler
        if file_path:
            file_path.parent.mkdir(parents=True, exist_ok=True)
            json_handler = RotatingFileHandler(
                file_path,
                maxBytes=max_file_size_mb * 1024 * 1024,
                backupCount=backup_count,
                encoding="utf-8",
            )
        else:
            json_handler = logging.StreamHandler(sys.stderr)
        json_handler.setFormatter(_formatter(structlog.processors.JSONRenderer()))
        handlers.append(json_handler)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    for handler in handlers:
        handler.setLevel(log_level)
        root_logger.addHandler(handler)

    # cache_logger_on_first_use=False so import-time loggers pick up this config
    structlog.configure(
        processors=_get_processors(include_timestamps, include_context),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(component: str, **initial_context: Any) -> PolicyLogger:
    """Get a logger bound to ``component``.

    Example:
        logger = get_logger("policies")
        logger.warning("classification_failed", policy="push")
    """
    return PolicyLogger(component, **initial_context)


__all__ = [
    "PolicyLogger",
    "SENSITIVE_PATTERNS",
    "TransferContext",
    "TransferDirection",
    "configure_logging",
    "get_current_context",
    "get_logger",
    "with_context",
]
