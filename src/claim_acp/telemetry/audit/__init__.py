"""Decision audit logging."""

from claim_acp.telemetry.audit.decision_logger import (
    DecisionLogger,
    create_decision_logger,
)

__all__ = [
    "DecisionLogger",
    "create_decision_logger",
]
