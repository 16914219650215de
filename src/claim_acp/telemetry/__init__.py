"""Telemetry: operational logging and decision audit trail.

- system/: System logger for operational events (warnings, diagnostics)
- audit/: Decision logger recording every access and release decision
- models/: Pydantic models of the audit records
"""
