"""Retry/log classification policies for shuffle block transfers.

The retry orchestrator hands a policy the ErrorSignal of an I/O failure
while the transfer still has retries left. ``should_retry`` decides whether
the retry sequence continues; ``should_log`` is asked independently and
decides whether the failure gets a log record.

Policies hold no state. One instance can be shared by any number of
concurrent transfers without locking.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import ClassVar

from shufflepolicy.core.logging import get_logger

from .classifier import categorize
from .markers import Marker
from .models import ClassificationResult
from .signals import ErrorSignal

_logger = get_logger("policies")


class ClassificationPolicy(ABC):
    """Decides whether a transfer failure is retried and whether it is logged.

    Subclasses implement ``_should_retry`` and optionally ``_should_log``.
    The public predicates wrap those hooks and never raise: a failing hook
    is logged as ``classification_failed`` and answers True, so a policy bug
    cannot silently abandon retriable work or hide a failure.
    """

    __slots__ = ()

    name: ClassVar[str] = "base"

    def should_retry(self, signal: ErrorSignal) -> bool:
        """Return True when the failure is worth another attempt. Never raises."""
        return self._guarded(self._should_retry, signal)

    def should_log(self, signal: ErrorSignal) -> bool:
        """Return True when the failure is worth a log record. Never raises."""
        return self._guarded(self._should_log, signal)

    @abstractmethod
    def _should_retry(self, signal: ErrorSignal) -> bool:
        """Policy-specific retry decision."""

    def _should_log(self, signal: ErrorSignal) -> bool:
        return True

    def classify(self, signal: ErrorSignal) -> ClassificationResult:
        """Return the full decision for ``signal``. Never raises.

        Any failure while deciding resolves to the safe default
        (retry, log, UNKNOWN) with a single warning.
        """
        try:
            result = ClassificationResult(
                retry=self._should_retry(signal),
                log=self._should_log(signal),
                category=categorize(signal),
            )
        except Exception as e:
            self._log_failure(e)
            return ClassificationResult.safe_default()

        _logger.debug(
            "failure_classified",
            policy=self.name,
            error_type=signal.error_type,
            **result.to_dict(),
        )
        return result

    def _guarded(self, hook: Callable[[ErrorSignal], bool], signal: ErrorSignal) -> bool:
        try:
            return bool(hook(signal))
        except Exception as e:
            self._log_failure(e)
            return True

    def _log_failure(self, e: Exception) -> None:
        _logger.warning(
            "classification_failed",
            policy=self.name,
            error_type=type(e).__name__,
            error=str(e),
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class NoopPolicy(ClassificationPolicy):
    """Always retry, always log. Used when no direction-specific policy applies."""

    __slots__ = ()

    name = "noop"

    def _should_retry(self, signal: ErrorSignal) -> bool:
        return True


class PushPolicy(ClassificationPolicy):
    """Policy for failures pushing shuffle blocks to a remote shuffle service."""

    __slots__ = ()

    name = "push"

    def _should_retry(self, signal: ErrorSignal) -> bool:
        # A refused/unreachable peer or a block file missing on the client
        # will not recover on retry. These are still logged once.
        cause_kind = signal.cause_kind
        if cause_kind is not None and cause_kind.is_terminal_cause:
            return False

        # Superseded by a higher shuffleMergeId or arrived after finalize
        return not Marker.TOO_LATE_OR_STALE_PUSH.found_in(signal.full_trace_text)

    def _should_log(self, signal: ErrorSignal) -> bool:
        text = signal.full_trace_text
        return not (
            Marker.APPEND_COLLISION.found_in(text)
            or Marker.TOO_LATE_OR_STALE_PUSH.found_in(text)
        )


class FetchPolicy(ClassificationPolicy):
    """Policy for failures fetching merged shuffle blocks."""

    __slots__ = ()

    name = "fetch"

    def _should_retry(self, signal: ErrorSignal) -> bool:
        return not Marker.STALE_FETCH.found_in(signal.full_trace_text)

    def _should_log(self, signal: ErrorSignal) -> bool:
        return not Marker.STALE_FETCH.found_in(signal.full_trace_text)

NOOP_POLICY = NoopPolicy()
"""Shared no-op policy instance."""


__all__ = [
    "NOOP_POLICY",
    "ClassificationPolicy",
    "FetchPolicy",
    "NoopPolicy",
    "PushPolicy",
]
