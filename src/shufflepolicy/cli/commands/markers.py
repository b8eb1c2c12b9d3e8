"""Markers command: print the marker vocabulary shared with the shuffle service."""

from __future__ import annotations

import json
from typing import Annotated

import typer

from shufflepolicy.core.errors import MARKER_VOCABULARY_VERSION, MARKERS

from ..helpers import configure_global_logging
from ..output import console, markers_table


def markers(
    json_output: Annotated[
        bool,
        typer.Option("--json", "-j", help="Output the vocabulary as JSON"),
    ] = False,
) -> None:
    """List the marker strings matched in failure traces."""
    configure_global_logging(console)

    if json_output:
        typer.echo(json.dumps({"version": MARKER_VOCABULARY_VERSION, "markers": dict(MARKERS)}))
        return

    console.print(markers_table(MARKER_VOCABULARY_VERSION))
