"""shufflepolicy CLI.

Diagnostic commands for the classification policies:

    cli/
    ├── __init__.py        # App assembly and global options
    ├── helpers.py         # Logging state shared by commands
    ├── output.py          # Rich formatting
    └── commands/
        ├── classify.py    # classify a rendered trace
        ├── markers.py     # list the marker vocabulary
        └── validate.py    # validate a YAML policy config
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from shufflepolicy import __version__

from . import helpers as helpers
from .commands import classify, markers, validate
from .helpers import configure_global_logging, set_log_file, set_log_format, set_log_level
from .output import console

app = typer.Typer(
    name="shufflepolicy",
    help="Retry/log classification for shuffle block push and fetch failures",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"shufflepolicy v{__version__}")
        raise typer.Exit()


def log_level_callback(value: str | None) -> str | None:
    if value:
        set_log_level(value)
    return value


def log_file_callback(value: Path | None) -> Path | None:
    if value:
        set_log_file(value)
    return value


def log_format_callback(value: str | None) -> str | None:
    if value:
        set_log_format(value)
    return value


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    log_level: Annotated[
        str | None,
        typer.Option(
            "--log-level",
            "-L",
            callback=log_level_callback,
            help="Logging level (DEBUG, INFO, WARNING, ERROR)",
            envvar="SHUFFLEPOLICY_LOG_LEVEL",
        ),
    ] = None,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            callback=log_file_callback,
            help="Path for log file output",
            envvar="SHUFFLEPOLICY_LOG_FILE",
        ),
    ] = None,
    log_format: Annotated[
        str | None,
        typer.Option(
            "--log-format",
            callback=log_format_callback,
            help="Log format: json, console, or both",
            envvar="SHUFFLEPOLICY_LOG_FORMAT",
        ),
    ] = None,
) -> None:
    """shufflepolicy - retry/log decisions for shuffle transfer failures."""
    configure_global_logging(console)


app.command()(classify)
app.command()(markers)
app.command()(validate)


__all__ = ["app", "console", "main"]
