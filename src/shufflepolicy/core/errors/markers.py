"""Marker vocabulary shared with the remote shuffle service.

The shuffle service embeds these strings verbatim in the error messages it
returns. Clients recognise a condition by finding the exact substring
anywhere in the rendered trace of a failure, so every string here is a
cross-process contract: changing one must be done in lock-step with the
service and bumps ``MARKER_VOCABULARY_VERSION``.

| Marker | Condition |
|--------|-----------|
| TOO_LATE_OR_STALE_PUSH | Push arrived after the merged shuffle was finalized, or a higher shuffleMergeId superseded it |
| APPEND_COLLISION | Server could not place the block after all write attempts (slot contention) |
| IO_EXCEPTIONS_EXCEEDED | Server hit its IOException ceiling for the shuffle partition |
| STALE_FINALIZE | Finalize request superseded by a higher shuffleMergeId |
| STALE_FETCH | Fetch request superseded by a higher shuffleMergeId |
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType

MARKER_VOCABULARY_VERSION = 1
"""Revision of the marker vocabulary below."""


class Marker(str, Enum):
    """Exact, case-sensitive substrings emitted by the shuffle service."""

    TOO_LATE_OR_STALE_PUSH = (
        "received after merged shuffle is finalized or stale block push as shuffle "
        "blocks of a higher shuffleMergeId for the shuffle is being pushed"
    )
    APPEND_COLLISION = "Couldn't find an opportunity to write block"
    IO_EXCEPTIONS_EXCEEDED = "IOExceptions exceeded the threshold"
    STALE_FINALIZE = (
        "stale shuffle finalize request as shuffle blocks of a higher shuffleMergeId "
        "for the shuffle is already being pushed"
    )
    STALE_FETCH = (
        "stale shuffle block fetch request as shuffle blocks of a higher "
        "shuffleMergeId for the shuffle is available"
    )

    def found_in(self, text: str | None) -> bool:
        """Return True when this marker occurs verbatim in ``text``.

        Empty or missing text contains no marker.
        """
        return bool(text) and self.value in text


MARKERS: MappingProxyType[str, str] = MappingProxyType(
    {marker.name: marker.value for marker in Marker}
)
"""Read-only name -> text table of the whole vocabulary."""


def contains(text: str | None, marker: Marker) -> bool:
    """Functional form of :meth:`Marker.found_in`."""
    return marker.found_in(text)


def find_markers(text: str | None) -> tuple[Marker, ...]:
    """Return every marker present in ``text``, in declaration order."""
    return tuple(marker for marker in Marker if marker.found_in(text))


__all__ = [
    "MARKERS",
    "MARKER_VOCABULARY_VERSION",
    "Marker",
    "contains",
    "find_markers",
]
