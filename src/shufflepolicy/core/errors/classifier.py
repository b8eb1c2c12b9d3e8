"""Map an ErrorSignal to its FailureCategory.

Cause kind is checked first, then service markers in a fixed priority
order. The first match wins; anything unmatched is TRANSIENT.
"""

from __future__ import annotations

from .codes import ErrorKind, FailureCategory
from .markers import Marker
from .signals import ErrorSignal

# Marker priority for categorisation; stale conditions outrank contention
MARKER_CATEGORIES: tuple[tuple[Marker, FailureCategory], ...] = (
    (Marker.TOO_LATE_OR_STALE_PUSH, FailureCategory.STALE_PUSH),
    (Marker.STALE_FINALIZE, FailureCategory.STALE_FINALIZE),
    (Marker.STALE_FETCH, FailureCategory.STALE_FETCH),
    (Marker.APPEND_COLLISION, FailureCategory.APPEND_COLLISION),
    (Marker.IO_EXCEPTIONS_EXCEEDED, FailureCategory.IO_EXCEPTIONS_EXCEEDED),
)

_CAUSE_CATEGORIES: dict[ErrorKind, FailureCategory] = {
    ErrorKind.CONNECT_FAILURE: FailureCategory.CONNECTION,
    ErrorKind.FILE_NOT_FOUND: FailureCategory.MISSING_FILE,
}


def categorize(signal: ErrorSignal) -> FailureCategory:
    """Return the failure category of ``signal``."""
    cause_kind = signal.cause_kind
    if cause_kind is not None and cause_kind in _CAUSE_CATEGORIES:
        return _CAUSE_CATEGORIES[cause_kind]

    text = signal.full_trace_text
    for marker, category in MARKER_CATEGORIES:
        if marker.found_in(text):
            return category
    return FailureCategory.TRANSIENT


__all__ = ["MARKER_CATEGORIES", "categorize"]
