"""Tests for decision audit logging and the system logger.

Tests verify behavior through actual log output to temp files.
"""

import json
import logging
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from claim_acp.access import AccessResult, Decision, DecisionReason
from claim_acp.context import AccessRequest
from claim_acp.exceptions import TransportError
from claim_acp.telemetry.audit import DecisionLogger, create_decision_logger
from claim_acp.telemetry.models import AccessDecisionEvent, ClaimsReleasedEvent
from claim_acp.telemetry.system import (
    configure_system_logger_file,
    get_system_logger,
)


@pytest.fixture
def log_path(tmp_path: Path) -> Path:
    return tmp_path / "audit" / "decisions.jsonl"


@pytest.fixture
def decisions(log_path: Path) -> DecisionLogger:
    return DecisionLogger(create_decision_logger(log_path), MagicMock(spec=logging.Logger))



def _read_records(path: Path) -> list[dict]:
    for handler in logging.getLogger("claim-acp.audit.decisions").handlers:
        handler.flush()
    return [json.loads(line) for line in path.read_text().splitlines()]


class TestDecisionLogger:
    """JSONL decision records."""

    def test_access_decision_record(self, decisions: DecisionLogger, log_path: Path):
        # Arrange
        request = AccessRequest(principal_id="casuser", service_id="app")
        result = AccessResult(Decision.DENY, DecisionReason.STATUS_REJECTED, status_code=403)

        # Act
        decisions.log_access(request, result)

        # Assert
        (record,) = _read_records(log_path)
        assert record["event"] == "access_decision"
        assert record["service_id"] == "app"
        assert record["principal_id"] == "casuser"
        assert record["decision"] == "deny"
        assert record["reason"] == "status_rejected"
        assert record["status_code"] == 403
        assert record["time"].endswith("Z")

    def test_error_record_names_error_type(self, decisions: DecisionLogger, log_path: Path):
        request = AccessRequest(principal_id="casuser", service_id="app")

        decisions.log_access(request, AccessResult.from_error(TransportError("refused")))

        (record,) = _read_records(log_path)
        assert record["decision"] == "error"
        assert record["error_type"] == "TransportError"
        assert "status_code" not in record

    def test_release_record_has_names_only(self, decisions: DecisionLogger, log_path: Path):
        """Given a release, then claim names are logged and withheld claims listed."""
        # Act
        decisions.log_release(
            service_id="app",
            scope_types=["email"],
            requested_claims=["email", "email_verified"],
            released_claims=["email"],
        )

        # Assert
        (record,) = _read_records(log_path)
        assert record["released_claims"] == ["email"]
        assert record["withheld_claims"] == ["email_verified"]

    def test_records_match_event_models(self, decisions: DecisionLogger, log_path: Path):
        """Given both record kinds, then each validates against its event model."""
        # Arrange
        request = AccessRequest(principal_id="casuser", service_id="app")

        # Act
        decisions.log_access(request, AccessResult(Decision.ALLOW, DecisionReason.STATUS_ACCEPTED, status_code=200))
        decisions.log_release(service_id=None, scope_types=["custom"], requested_claims=["sub"], released_claims=[])

        # Assert
        access_record, release_record = (
            {k: v for k, v in record.items() if k != "level"} for record in _read_records(log_path)
        )
        assert AccessDecisionEvent.model_validate(access_record).decision == "allow"
        assert ClaimsReleasedEvent.model_validate(release_record).withheld_claims == ["sub"]
        assert "service_id" not in release_record

    def test_write_failure_reported_to_system_logger(self):
        # Arrange
        logger = MagicMock(spec=logging.Logger)
        logger.info.side_effect = OSError("disk full")
        system_logger = MagicMock(spec=logging.Logger)
        decisions = DecisionLogger(logger, system_logger)

        # Act
        decisions.log_release(service_id="app", scope_types=[], requested_claims=[], released_claims=[])

        # Assert
        assert system_logger.error.call_args.args[0]["event"] == "decision_log_failed"


class TestSystemLogger:
    """Singleton system logger."""

    def test_singleton(self):
        assert get_system_logger() is get_system_logger()

    def test_file_handler_writes_warnings_only(self, tmp_path: Path):
        # Arrange
        path = tmp_path / "system" / "system.jsonl"
        configure_system_logger_file(path)
        logger = get_system_logger()

        # Act
        logger.info({"event": "ignored"})
        logger.warning({"event": "mapping_not_found", "claim": "email"})
        for handler in logger.handlers:
            handler.flush()

        # Assert
        records = [json.loads(line) for line in path.read_text().splitlines()]
        assert [r["event"] for r in records] == ["mapping_not_found"]

    def test_reconfigure_replaces_file_handler(self, tmp_path: Path):
        configure_system_logger_file(tmp_path / "a.jsonl")
        configure_system_logger_file(tmp_path / "b.jsonl")

        file_handlers = [h for h in get_system_logger().handlers if isinstance(h, logging.FileHandler)]
        assert len(file_handlers) == 1
