"""Helpers shared by the audit loggers."""

from __future__ import annotations

__all__ = ["serialize_audit_event"]

from typing import Any

from pydantic import BaseModel


def serialize_audit_event(event: BaseModel) -> dict[str, Any]:
    """Serialize a Pydantic event model for audit logging.

    - Excludes the 'time' field (added by ISO8601Formatter at log time)
    - Excludes None values for cleaner logs

    Example:
        >>> serialize_audit_event(ClaimsReleasedEvent(service_id="app", released_claims=["email"]))
        {'event': 'claims_released', 'service_id': 'app', 'scope_types': [], ...}
    """
    return event.model_dump(mode="json", exclude={"time"}, exclude_none=True)
