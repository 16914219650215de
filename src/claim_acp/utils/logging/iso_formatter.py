"""JSONL formatter with ISO 8601 timestamps."""

from __future__ import annotations

__all__ = ["ISO8601Formatter"]

import json
import logging
from datetime import datetime, timezone


class ISO8601Formatter(logging.Formatter):
    """Format log records as one JSON object per line.

    Dict messages are emitted as-is; anything else is wrapped as
    {"message": ...}. A UTC timestamp is always the first field.

    Format: YYYY-MM-DDTHH:MM:SS.sssZ
    Example: {"time": "2025-12-04T10:48:37.123Z", "event": "access_decision", ...}
    """

    def format(self, record: logging.LogRecord) -> str:
        timestamp = (
            datetime.fromtimestamp(record.created, tz=timezone.utc)
            .isoformat(timespec="milliseconds")
            .replace("+00:00", "Z")
        )

        if isinstance(record.msg, dict):
            log_data = record.msg
        else:
            log_data = {"message": record.getMessage()}

        log_entry = {"time": timestamp, "level": record.levelname, **log_data}
        # default=str keeps non-JSON values (sets, exceptions) loggable
        return json.dumps(log_entry, default=str)
