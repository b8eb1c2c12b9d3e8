"""Classify command: run a policy over a rendered failure trace."""

from __future__ import annotations

import json
import sys
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from shufflepolicy.core.errors import ErrorKind, ErrorSignal, find_markers, get_policy
from shufflepolicy.core.exceptions import UnknownPolicyError
from shufflepolicy.core.logging import get_logger

from ..helpers import configure_global_logging
from ..output import classification_table, console

_logger = get_logger("cli.classify")


class CauseOption(str, Enum):
    """Cause kinds selectable from the command line."""

    CONNECT = "connect"
    MISSING_FILE = "missing-file"

    def to_kind(self) -> ErrorKind:
        if self is CauseOption.CONNECT:
            return ErrorKind.CONNECT_FAILURE
        return ErrorKind.FILE_NOT_FOUND


def classify(
    trace_file: Annotated[
        Path | None,
        typer.Argument(help="File holding the rendered failure trace (stdin if omitted)"),
    ] = None,
    policy: Annotated[
        str,
        typer.Option("--policy", "-p", help="Policy to apply: push, fetch or noop"),
    ] = "push",
    cause: Annotated[
        CauseOption | None,
        typer.Option("--cause", help="Kind of the wrapped cause, if known"),
    ] = None,
    json_output: Annotated[
        bool,
        typer.Option("--json", "-j", help="Output the decision as JSON"),
    ] = False,
) -> None:
    """Show whether a failure would be retried and logged.

    Exit codes:
      0: Classified
      1: Unknown policy or unreadable trace file
    """
    configure_global_logging(console)

    try:
        selected = get_policy(policy)
    except UnknownPolicyError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from None

    if trace_file is None:
        text = sys.stdin.read()
    else:
        try:
            text = trace_file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            console.print(f"[red]Cannot read trace file:[/red] {escape(str(e))}")
            raise typer.Exit(1) from None

    signal = ErrorSignal.from_text(text, cause_kind=cause.to_kind() if cause else None)
    result = selected.classify(signal)
    markers = find_markers(text)
    _logger.debug("cli_classified", policy=selected.name, category=result.category.value)

    if json_output:
        payload = {
            "policy": selected.name,
            **result.to_dict(),
            "markers": [m.name for m in markers],
        }
        typer.echo(json.dumps(payload))
        return

    console.print(classification_table(selected.name, result, markers))
