"""Shared fixtures for claim-acp tests."""

import pytest

from claim_acp.telemetry.system import reset_system_logger


@pytest.fixture(autouse=True)
def fresh_system_logger():
    """Drop the system logger singleton so handlers never leak between tests."""
    reset_system_logger()
    yield
    reset_system_logger()
