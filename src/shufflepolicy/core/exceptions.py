"""Exception hierarchy for shufflepolicy.

Classification never raises; these exceptions come from the configuration
and policy lookup paths. All inherit from ShufflePolicyError so callers can
catch broad or narrow.
"""

from __future__ import annotations


class ShufflePolicyError(Exception):
    """Base exception for all shufflepolicy errors."""


class PolicyConfigError(ShufflePolicyError):
    """Raised when a policy configuration cannot be read or validated.

    Examples: missing file, unparseable YAML, unknown field or policy name.
    """


class UnknownPolicyError(PolicyConfigError):
    """Raised when a policy name is not registered."""

    def __init__(self, name: str, known: tuple[str, ...]) -> None:
        self.name = name
        self.known = known
        super().__init__(
            f"Unknown policy '{name}' (expected one of: {', '.join(known)})"
        )
