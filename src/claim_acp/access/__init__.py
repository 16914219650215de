"""Remote access decisions.

Structure:
    decision.py    - Decision enum and AccessResult
    policy.py      - RemoteAccessPolicy model
    serializer.py  - Access request serialization
    transport.py   - HTTP transport (httpx)
    evaluator.py   - RemoteAccessEvaluator
    protocol.py    - AccessEvaluatorProtocol
"""

from claim_acp.access.decision import AccessResult, Decision, DecisionReason
from claim_acp.access.evaluator import RemoteAccessEvaluator
from claim_acp.access.policy import RemoteAccessPolicy
from claim_acp.access.protocol import AccessEvaluatorProtocol
from claim_acp.access.serializer import AccessRequestSerializer, JsonRequestSerializer
from claim_acp.access.transport import USER_AGENT, HttpTransport, HttpxTransport

__all__ = [
    # Decision
    "AccessResult",
    "Decision",
    "DecisionReason",
    # Evaluator
    "AccessEvaluatorProtocol",
    "RemoteAccessEvaluator",
    # Policy
    "RemoteAccessPolicy",
    # Collaborators
    "AccessRequestSerializer",
    "HttpTransport",
    "HttpxTransport",
    "JsonRequestSerializer",
    "USER_AGENT",
]
