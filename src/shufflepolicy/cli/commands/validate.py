"""Validate command: check a YAML policy configuration."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.markup import escape

from shufflepolicy.core.config import PolicyConfig
from shufflepolicy.core.errors import policies_from_config
from shufflepolicy.core.exceptions import PolicyConfigError

from ..helpers import configure_global_logging
from ..output import console


def validate(
    config_file: Path = typer.Argument(
        ...,
        help="Path to YAML policy configuration file",
    ),
) -> None:
    """Validate a policy configuration file.

    Exit codes:
      0: Valid
      1: Invalid or unreadable
    """
    configure_global_logging(console)

    try:
        config = PolicyConfig.from_yaml(config_file)
        policies = policies_from_config(config)
    except PolicyConfigError as e:
        console.print("[red]Invalid configuration:[/red]")
        console.print(escape(str(e)))
        raise typer.Exit(1) from None

    console.print("[green]Valid configuration[/green]")
    console.print(f"  push:  {policies.push.name}")
    console.print(f"  fetch: {policies.fetch.name}")
    console.print(f"  log level: {config.logging.level} ({config.logging.format})")
