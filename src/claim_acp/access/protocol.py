"""Protocol for access evaluators (the EvaluateAccess capability).

External strategies implement this protocol via adapters without
inheriting from our code (structural subtyping).
"""

from __future__ import annotations

__all__ = ["AccessEvaluatorProtocol"]

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from claim_acp.access.decision import AccessResult
    from claim_acp.access.policy import RemoteAccessPolicy
    from claim_acp.context.request import AccessRequest


@runtime_checkable
class AccessEvaluatorProtocol(Protocol):
    """Decides whether a principal may access a registered service.

    Thread-safety:
    - evaluate() and check() must be safe for concurrent calls
    """

    def evaluate(self, policy: "RemoteAccessPolicy", request: "AccessRequest") -> bool:
        """Return the decision, raising EvaluationError when none can be made."""
        ...

    def check(self, policy: "RemoteAccessPolicy", request: "AccessRequest") -> "AccessResult":
        """Return the decision as an explicit result; never raises EvaluationError."""
        ...
