"""Result model for failure classification."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .codes import FailureCategory


@dataclass(frozen=True)
class ClassificationResult:
    """Retry/log decision for one failure.

    Derived from an ErrorSignal on every call; policies never store it.

    Attributes:
        retry: Whether the orchestrator should keep retrying.
        log: Whether the failure is worth a log record.
        category: What the failure means for the transfer.
    """

    retry: bool
    log: bool
    category: FailureCategory = FailureCategory.TRANSIENT

    @classmethod
    def safe_default(cls) -> ClassificationResult:
        """Result used when classification itself fails: retry and log."""
        return cls(retry=True, log=True, category=FailureCategory.UNKNOWN)

    def to_dict(self) -> dict[str, Any]:
        return {
            "retry": self.retry,
            "log": self.log,
            "category": self.category.value,
        }


__all__ = ["ClassificationResult"]
