"""Access decision outcomes.

AccessResult is the explicit result type of a remote access evaluation. It
keeps "the endpoint said no" apart from "we could not ask the endpoint".
Callers pick fail-open or fail-closed with AccessResult.is_allowed().
"""

from __future__ import annotations

__all__ = [
    "AccessResult",
    "Decision",
    "DecisionReason",
]

from dataclasses import dataclass
from enum import Enum

from claim_acp.exceptions import EvaluationError, SerializationError


class Decision(str, Enum):
    """Access decision outcome.

    Inherits from str for easy serialization and comparison.

    Attributes:
        ALLOW: The endpoint answered with an acceptable status code.
        DENY: The endpoint answered with another status code, or not at all.
        ERROR: The request could not be made (transport or serialization failure).
    """

    ALLOW = "allow"
    DENY = "deny"
    ERROR = "error"


class DecisionReason(str, Enum):
    """Why a decision was reached."""

    STATUS_ACCEPTED = "status_accepted"
    STATUS_REJECTED = "status_rejected"
    NO_RESPONSE = "no_response"
    TRANSPORT_ERROR = "transport_error"
    SERIALIZATION_ERROR = "serialization_error"


@dataclass(frozen=True, slots=True)
class AccessResult:
    """Outcome of one remote access evaluation.

    Attributes:
        decision: ALLOW, DENY or ERROR.
        reason: Why the decision was reached.
        status_code: HTTP status returned by the endpoint, if any.
        error: The evaluation error when decision is ERROR.
    """

    decision: Decision
    reason: DecisionReason
    status_code: int | None = None
    error: EvaluationError | None = None

    @property
    def allowed(self) -> bool:
        """True only for an explicit ALLOW."""
        return self.decision is Decision.ALLOW

    def is_allowed(self, *, fail_closed: bool = True) -> bool:
        """Resolve the result to allow/deny under the caller's failure policy.

        Args:
            fail_closed: If True (default), an ERROR denies access. If False,
                an ERROR allows access.

        Returns:
            True if access should be granted.
        """
        if self.decision is Decision.ERROR:
            return not fail_closed
        return self.allowed

    @classmethod
    def from_error(cls, error: EvaluationError) -> "AccessResult":
        """Build an ERROR result from an evaluation error."""
        reason = (
            DecisionReason.SERIALIZATION_ERROR
            if isinstance(error, SerializationError)
            else DecisionReason.TRANSPORT_ERROR
        )
        return cls(decision=Decision.ERROR, reason=reason, error=error)
