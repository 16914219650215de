"""Pydantic models for decision audit logs (audit/decisions.jsonl).

The 'time' field is Optional[str] = None because model instances are
created without timestamps; ISO8601Formatter adds the timestamp during
log serialization.

Records carry claim NAMES only. Released claim values never reach the
audit trail.
"""

from __future__ import annotations

__all__ = [
    "AccessDecisionEvent",
    "ClaimsReleasedEvent",
]

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class AccessDecisionEvent(BaseModel):
    """One remote access evaluation.

    Note: 'time' is None when created, populated by ISO8601Formatter during logging.
    """

    time: Optional[str] = Field(
        None,
        description="ISO 8601 timestamp, added by formatter during serialization",
    )
    event: Literal["access_decision"] = "access_decision"

    # --- request ---
    service_id: str
    principal_id: str

    # --- outcome ---
    decision: Literal["allow", "deny", "error"]
    reason: str  # DecisionReason value
    status_code: Optional[int] = None  # None when the endpoint never answered

    # --- error details ---
    error_type: Optional[str] = None  # Exception class, e.g. TransportError
    error: Optional[str] = None

    model_config = ConfigDict(extra="forbid")


class ClaimsReleasedEvent(BaseModel):
    """One attribute release for a service.

    Note: 'time' is None when created, populated by ISO8601Formatter during logging.
    """

    time: Optional[str] = Field(
        None,
        description="ISO 8601 timestamp, added by formatter during serialization",
    )
    event: Literal["claims_released"] = "claims_released"

    service_id: Optional[str] = None  # None when resolved without a registered service
    scope_types: list[str] = Field(default_factory=list)
    requested_claims: list[str] = Field(
        default_factory=list,
        description="Claims allowed by the scope policies, in release order",
    )
    released_claims: list[str] = Field(default_factory=list)
    withheld_claims: list[str] = Field(
        default_factory=list,
        description="Requested claims that were unsupported or unresolved",
    )

    model_config = ConfigDict(extra="forbid")
