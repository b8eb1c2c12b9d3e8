"""CLI command implementations."""

from .classify import classify
from .markers import markers
from .validate import validate

__all__ = ["classify", "markers", "validate"]
