"""ErrorSignal: the immutable view of a failure that policies classify.

A signal carries the failure's type and message, a type-derived
:class:`ErrorKind`, at most one wrapped cause, and the full rendered trace
of the failure and its cause chain. Policies search the trace text for
service markers and look at the cause's kind; nothing else is consulted.
"""

from __future__ import annotations

import errno
import traceback
from dataclasses import dataclass

from .codes import ErrorKind

# errno values that mean the peer could not be reached at all
CONNECT_FAILURE_ERRNOS: frozenset[int] = frozenset({
    errno.ECONNREFUSED,
    errno.ENETUNREACH,
    errno.EHOSTUNREACH,
})


def kind_of(exc: BaseException) -> ErrorKind:
    """Derive the ErrorKind of an exception from its type and errno."""
    if isinstance(exc, ConnectionRefusedError):
        return ErrorKind.CONNECT_FAILURE
    if isinstance(exc, FileNotFoundError):
        return ErrorKind.FILE_NOT_FOUND
    if isinstance(exc, OSError):
        if exc.errno in CONNECT_FAILURE_ERRNOS:
            return ErrorKind.CONNECT_FAILURE
        return ErrorKind.IO
    return ErrorKind.OTHER


def _type_name(exc: BaseException) -> str:
    cls = type(exc)
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"


@dataclass(frozen=True)
class ErrorSignal:
    """Immutable view over a raised error.

    Attributes:
        error_type: Qualified type name of the error ("" when unknown).
        message: The error's own message.
        kind: Type-derived kind of the error.
        cause: The directly wrapped error, if any. Only this one level is
            consulted by policies.
        full_trace_text: Rendering of the error and its whole cause chain.
    """

    error_type: str = ""
    message: str = ""
    kind: ErrorKind = ErrorKind.OTHER
    cause: ErrorSignal | None = None
    full_trace_text: str = ""

    @property
    def cause_kind(self) -> ErrorKind | None:
        """Kind of the wrapped cause, or None without a cause."""
        if self.cause is None:
            return None
        return self.cause.kind

    @classmethod
    def from_exception(cls, exc: BaseException) -> ErrorSignal:
        """Build a signal from a raised exception.

        The trace text includes every chained exception, explicit or
        implicit, the same way the interpreter prints an unhandled error.
        """
        # Only an explicit ``raise ... from`` cause is wrapped. An error that
        # merely occurred while handling another one is not caused by it.
        cause_exc = exc.__cause__
        cause = cls._leaf(cause_exc) if cause_exc is not None else None
        return cls(
            error_type=_type_name(exc),
            message=str(exc),
            kind=kind_of(exc),
            cause=cause,
            full_trace_text="".join(traceback.format_exception(exc)),
        )

    @classmethod
    def from_text(
        cls,
        text: str,
        cause_kind: ErrorKind | None = None,
    ) -> ErrorSignal:
        """Build a signal from an already rendered trace.

        Args:
            text: Full trace text, searched for markers.
            cause_kind: Kind of the wrapped cause, when it is known.
        """
        cause = cls(kind=cause_kind) if cause_kind is not None else None
        first_line = text.strip().splitlines()[0] if text.strip() else ""
        return cls(message=first_line, cause=cause, full_trace_text=text)

    @classmethod
    def _leaf(cls, exc: BaseException) -> ErrorSignal:
        # Causes are not unwrapped further
        return cls(
            error_type=_type_name(exc),
            message=str(exc),
            kind=kind_of(exc),
            full_trace_text="".join(traceback.format_exception(exc)),
        )


__all__ = ["CONNECT_FAILURE_ERRNOS", "ErrorSignal", "kind_of"]
