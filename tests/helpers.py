"""Shared test helpers."""

from __future__ import annotations

from shufflepolicy.core.errors import Marker


def trace_with(marker: Marker, prefix: str = "java.lang.RuntimeException: ") -> str:
    """Render a server-style failure trace that embeds ``marker``."""
    return (
        f"{prefix}Block shufflePush_0_0_3_12, {marker.value}.\n"
        "\tat org.apache.spark.network.shuffle.RemoteBlockPushResolver.onComplete\n"
        "\tat org.apache.spark.network.server.TransportRequestHandler.processStreamUpload\n"
    )


def raise_wrapped(cause: BaseException, message: str = "Failure while pushing block") -> OSError:
    """Return an OSError raised ``from cause``, with a populated traceback."""
    try:
        try:
            raise cause
        except BaseException as inner:
            raise OSError(message) from inner
    except OSError as outer:
        return outer
