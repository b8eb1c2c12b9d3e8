"""Shared utilities for shufflepolicy CLI commands.

Holds the CLI logging state set by the global options and applies it once
per session.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

import typer
from rich.console import Console

from shufflepolicy.core.logging import configure_logging


@dataclass
class CliLoggingConfig:
    """CLI logging configuration state."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    file: Path | None = None
    format: Literal["json", "console", "both"] = "console"
    configured: bool = False


_log_config = CliLoggingConfig()


def get_log_config() -> CliLoggingConfig:
    """Get the current CLI logging state."""
    return _log_config


def set_log_level(level: str) -> None:
    """Set the log level (DEBUG, INFO, WARNING, ERROR)."""
    _log_config.level = level.upper()  # type: ignore[assignment]


def set_log_file(path: Path | None) -> None:
    """Set the log file path; a file switches output to JSON in the file."""
    _log_config.file = path
    if path:
        _log_config.format = "json"


def set_log_format(fmt: str) -> None:
    """Set the log format (json, console, both)."""
    _log_config.format = fmt.lower()  # type: ignore[assignment]


def configure_global_logging(console: Console) -> None:
    """Configure logging from the global CLI options, once per session.

    Raises:
        typer.Exit: If the logging options are inconsistent.
    """
    if _log_config.configured:
        return

    try:
        if _log_config.format not in ("json", "console", "both"):
            raise ValueError(f"unknown log format '{_log_config.format}'")
        configure_logging(
            level=_log_config.level,
            format=_log_config.format,
            file_path=_log_config.file,
        )
        _log_config.configured = True
    except (ValueError, AttributeError) as e:
        console.print(f"[red]Logging configuration error:[/red] {e}")
        raise typer.Exit(1) from None


def reset_logging_state() -> None:
    """Reset CLI logging state (primarily for testing)."""
    global _log_config
    _log_config = CliLoggingConfig()
