"""Policy lookup by name and from configuration.

Policies are stateless, so the registry hands out one shared instance per
name instead of constructing new ones.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

from shufflepolicy.core.exceptions import UnknownPolicyError

from .policies import NOOP_POLICY, ClassificationPolicy, FetchPolicy, PushPolicy

if TYPE_CHECKING:
    from shufflepolicy.core.config import PolicyConfig

POLICIES: MappingProxyType[str, ClassificationPolicy] = MappingProxyType({
    NOOP_POLICY.name: NOOP_POLICY,
    PushPolicy.name: PushPolicy(),
    FetchPolicy.name: FetchPolicy(),
})


def get_policy(name: str) -> ClassificationPolicy:
    """Return the shared policy registered as ``name``.

    Raises:
        UnknownPolicyError: If no policy has that name.
    """
    try:
        return POLICIES[name]
    except KeyError:
        raise UnknownPolicyError(name, tuple(POLICIES)) from None


@dataclass(frozen=True)
class PolicySet:
    """Policies for both transfer directions."""

    push: ClassificationPolicy
    fetch: ClassificationPolicy


def policies_from_config(config: PolicyConfig) -> PolicySet:
    """Resolve the push and fetch policies named in ``config``."""
    return PolicySet(push=get_policy(config.push), fetch=get_policy(config.fetch))


__all__ = ["POLICIES", "PolicySet", "get_policy", "policies_from_config"]
