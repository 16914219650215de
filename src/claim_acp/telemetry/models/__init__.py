"""Pydantic models for telemetry logs."""

from claim_acp.telemetry.models.decision import AccessDecisionEvent, ClaimsReleasedEvent

__all__ = [
    "AccessDecisionEvent",
    "ClaimsReleasedEvent",
]
