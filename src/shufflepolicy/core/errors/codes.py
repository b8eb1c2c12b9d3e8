"""Error kinds and failure categories.

ErrorKind describes what an exception *is* (derived from its type);
FailureCategory describes what a classified failure *means* for the
transfer that hit it.

Failure Taxonomy
================

| Category | Retry | Log | Notes |
|----------|-------|-----|-------|
| CONNECTION | No | Yes | Peer refused or unreachable |
| MISSING_FILE | No | Yes | Local block file gone before push |
| STALE_PUSH | No | No | Superseded by a higher shuffleMergeId or after finalize |
| STALE_FINALIZE | - | No | Finalize superseded by a higher shuffleMergeId |
| STALE_FETCH | No | No | Fetch superseded by a higher shuffleMergeId |
| APPEND_COLLISION | Yes | No | Server-side write slot contention |
| IO_EXCEPTIONS_EXCEEDED | - | Yes | Caller stops pushing blocks for the partition |
| TRANSIENT | Yes | Yes | Anything unrecognised |
| UNKNOWN | Yes | Yes | Classification itself failed |

Retry/log columns show what the push and fetch policies answer for the
category; "-" means the category is not decided by a marker check.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Type-derived kind of an exception in a failure chain."""

    CONNECT_FAILURE = "connect_failure"
    """Connection refused, or network/host unreachable."""

    FILE_NOT_FOUND = "file_not_found"
    """A local file needed for the transfer no longer exists."""

    IO = "io"
    """Any other OSError."""

    OTHER = "other"
    """Not an OSError."""

    @property
    def is_terminal_cause(self) -> bool:
        """True for kinds that will not resolve by retrying the transfer."""
        return self in (ErrorKind.CONNECT_FAILURE, ErrorKind.FILE_NOT_FOUND)


class FailureCategory(str, Enum):
    """Meaning of a classified transfer failure."""

    CONNECTION = "connection"
    MISSING_FILE = "missing_file"
    STALE_PUSH = "stale_push"
    STALE_FINALIZE = "stale_finalize"
    STALE_FETCH = "stale_fetch"
    APPEND_COLLISION = "append_collision"
    IO_EXCEPTIONS_EXCEEDED = "io_exceptions_exceeded"
    TRANSIENT = "transient"
    UNKNOWN = "unknown"

    @property
    def is_superseded(self) -> bool:
        """True when a newer shuffle merge attempt made the request obsolete."""
        return self in (
            FailureCategory.STALE_PUSH,
            FailureCategory.STALE_FINALIZE,
            FailureCategory.STALE_FETCH,
        )


__all__ = ["ErrorKind", "FailureCategory"]
