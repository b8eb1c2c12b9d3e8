"""shufflepolicy - retry/log classification for shuffle block transfers.

Decides, for a failure observed while pushing or fetching shuffle blocks,
whether the transfer is worth retrying and whether the failure is worth
logging.
"""

__version__ = "0.3.0"

from shufflepolicy.core.errors import (
    NOOP_POLICY,
    ClassificationPolicy,
    ClassificationResult,
    ErrorKind,
    ErrorSignal,
    FailureCategory,
    FetchPolicy,
    Marker,
    NoopPolicy,
    PushPolicy,
    get_policy,
)

__all__ = [
    "__version__",
    "NOOP_POLICY",
    "ClassificationPolicy",
    "ClassificationResult",
    "ErrorKind",
    "ErrorSignal",
    "FailureCategory",
    "FetchPolicy",
    "Marker",
    "NoopPolicy",
    "PushPolicy",
    "get_policy",
]
