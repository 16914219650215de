"""Decision logging for access and release decisions.

Every remote access evaluation and every claim release is recorded as one
JSONL line in <log_dir>/audit/decisions.jsonl. Records carry claim NAMES
only; released claim values are never written to the audit trail.

If writing the audit record fails, the failure is reported to the system
logger and the decision itself is unaffected.
"""

from __future__ import annotations

__all__ = [
    "DecisionLogger",
    "create_decision_logger",
]

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from claim_acp.constants import APP_NAME
from claim_acp.telemetry.models.decision import AccessDecisionEvent, ClaimsReleasedEvent
from claim_acp.utils.logging.logger_setup import setup_jsonl_logger
from claim_acp.utils.logging.logging_helpers import serialize_audit_event

if TYPE_CHECKING:
    from claim_acp.access.decision import AccessResult
    from claim_acp.context.request import AccessRequest


def create_decision_logger(log_path: Path) -> logging.Logger:
    """Create the JSONL logger backing decisions.jsonl.

    Args:
        log_path: Path to decisions.jsonl file.

    Returns:
        Configured logger instance.
    """
    return setup_jsonl_logger(f"{APP_NAME}.audit.decisions", log_path, log_level=logging.INFO)


class DecisionLogger:
    """Writes access and release decision events.

    Usage:
        decisions = DecisionLogger(create_decision_logger(path), get_system_logger())
        evaluator = RemoteAccessEvaluator(transport, decision_logger=decisions)
    """

    def __init__(self, logger: logging.Logger, system_logger: logging.Logger) -> None:
        """Initialize decision logger.

        Args:
            logger: Primary logger for decision events (decisions.jsonl).
            system_logger: System logger used when the primary write fails.
        """
        self._logger = logger
        self._system_logger = system_logger

    def log_access(self, request: "AccessRequest", result: "AccessResult") -> None:
        """Record the outcome of a remote access evaluation.

        Args:
            request: The evaluated access request.
            result: Outcome of the evaluation (allow, deny or error).
        """
        error = result.error
        event = AccessDecisionEvent(
            service_id=request.service_id,
            principal_id=request.principal_id,
            decision=result.decision.value,
            reason=result.reason.value,
            status_code=result.status_code,
            error_type=type(error).__name__ if error is not None else None,
            error=str(error) if error is not None else None,
        )
        self._emit(event)

    def log_release(
        self,
        *,
        service_id: str | None,
        scope_types: list[str],
        requested_claims: list[str],
        released_claims: list[str],
    ) -> None:
        """Record which claims were released for a service.

        Args:
            service_id: Registered service the claims were released to.
            scope_types: Scope policies that took part in the release.
            requested_claims: Claims allowed by the scope policies.
            released_claims: Claims actually released (names only).
        """
        self._emit(
            ClaimsReleasedEvent(
                service_id=service_id,
                scope_types=scope_types,
                requested_claims=requested_claims,
                released_claims=released_claims,
                withheld_claims=[c for c in requested_claims if c not in released_claims],
            )
        )

    def _emit(self, event: AccessDecisionEvent | ClaimsReleasedEvent) -> None:
        try:
            self._logger.info(serialize_audit_event(event))
        except Exception as e:
            self._system_logger.error(
                {
                    "event": "decision_log_failed",
                    "message": f"Failed to write decision record: {e}",
                    "decision_event": event.event,
                }
            )
