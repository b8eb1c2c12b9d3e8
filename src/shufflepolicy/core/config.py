"""Configuration models for shufflepolicy.

Pydantic models for loading and validating YAML policy configuration.

Example::

    push: push
    fetch: noop
    logging:
      level: DEBUG
      format: json
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from shufflepolicy.core.exceptions import PolicyConfigError


class LogConfig(BaseModel):
    """Configuration for structured logging.

    Controls log level, output format, and file rotation settings.
    """

    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Minimum log level to capture",
    )
    format: Literal["json", "console", "both"] = Field(
        default="console",
        description="Output format: json for structured, console for human-readable, "
        "both for console to stderr and JSON to file",
    )
    file_path: Path | None = Field(
        default=None,
        description="Path for log file output (required if format='both')",
    )
    max_file_size_mb: int = Field(
        default=50,
        gt=0,
        le=1000,
        description="Maximum log file size before rotation (MB)",
    )
    backup_count: int = Field(
        default=5,
        ge=0,
        le=100,
        description="Number of rotated log files to keep",
    )
    include_timestamps: bool = Field(
        default=True,
        description="Include ISO8601 UTC timestamps in log entries",
    )
    include_context: bool = Field(
        default=True,
        description="Include bound transfer context (shuffle_id, block_id) in log entries",
    )

    @model_validator(mode="after")
    def _check_file_path_required(self) -> LogConfig:
        if self.format == "both" and self.file_path is None:
            raise ValueError(f"file_path is required when format='{self.format}'")
        return self


class PolicyConfig(BaseModel):
    """Which classification policy each transfer direction uses."""

    model_config = ConfigDict(extra="forbid")

    push: Literal["push", "noop"] = Field(
        default="push",
        description="Policy for block push failures",
    )
    fetch: Literal["fetch", "noop"] = Field(
        default="fetch",
        description="Policy for merged block fetch failures",
    )
    logging: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def from_yaml(cls, path: Path) -> PolicyConfig:
        """Load configuration from a YAML file.

        Raises:
            PolicyConfigError: If the file cannot be read, parsed or validated.
        """
        try:
            with open(path, encoding="utf-8") as f:
                text = f.read()
        except OSError as e:
            raise PolicyConfigError(f"Cannot read config {path}: {e}") from e
        return cls.from_yaml_string(text)

    @classmethod
    def from_yaml_string(cls, yaml_str: str) -> PolicyConfig:
        """Load configuration from a YAML string.

        An empty document yields the defaults.
        """
        try:
            data = yaml.safe_load(yaml_str)
        except yaml.YAMLError as e:
            raise PolicyConfigError(f"Invalid YAML: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise PolicyConfigError(
                f"Config must be a mapping, got {type(data).__name__}"
            )

        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise PolicyConfigError(str(e)) from e


__all__ = ["LogConfig", "PolicyConfig"]
