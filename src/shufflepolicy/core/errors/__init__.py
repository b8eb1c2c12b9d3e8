"""Failure classification for shuffle block transfers.

Re-exports all public symbols.
"""

from shufflepolicy.core.errors.codes import ErrorKind, FailureCategory
from shufflepolicy.core.errors.markers import (
    MARKER_VOCABULARY_VERSION,
    MARKERS,
    Marker,
    contains,
    find_markers,
)
from shufflepolicy.core.errors.models import ClassificationResult
from shufflepolicy.core.errors.signals import ErrorSignal, kind_of
from shufflepolicy.core.errors.classifier import categorize
from shufflepolicy.core.errors.policies import (
    NOOP_POLICY,
    ClassificationPolicy,
    FetchPolicy,
    NoopPolicy,
    PushPolicy,
)
from shufflepolicy.core.errors.factory import (
    POLICIES,
    PolicySet,
    get_policy,
    policies_from_config,
)

__all__ = [
    "ErrorKind",
    "FailureCategory",
    "MARKER_VOCABULARY_VERSION",
    "MARKERS",
    "Marker",
    "contains",
    "find_markers",
    "ClassificationResult",
    "ErrorSignal",
    "kind_of",
    "categorize",
    "NOOP_POLICY",
    "ClassificationPolicy",
    "FetchPolicy",
    "NoopPolicy",
    "PushPolicy",
    "POLICIES",
    "PolicySet",
    "get_policy",
    "policies_from_config",
]
