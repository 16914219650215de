"""Tests for configuration models and load/save behavior."""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from claim_acp.config import AppConfig, HttpConfig, LoggingConfig, ProviderConfig
from claim_acp.constants import DEFAULT_SUPPORTED_CLAIMS
from claim_acp.exceptions import ConfigurationError


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def valid_config_dict() -> dict:
    """Configuration with one service."""
    return {
        "provider": {
            "supported_claims": ["sub", "email", "groups"],
            "claim_mappings": {"groups": "memberOf"},
        },
        "http": {"timeout_seconds": 10},
        "services": [
            {
                "id": "app",
                "scope_policies": [
                    {
                        "scope_type": "email",
                        "allowed_attributes": ["email"],
                        "claim_mappings": {"email": "mail"},
                    },
                    {"scope_type": "custom", "allowed_attributes": ["groups"]},
                ],
                "access_policy": {
                    "endpoint_url": "https://authz.example.com/check",
                    "acceptable_response_codes": "200, 202",
                },
            }
        ],
    }


@pytest.fixture
def config_file(tmp_path: Path, valid_config_dict: dict) -> Path:
    """Write valid config to temp file and return path."""
    path = tmp_path / "config.json"
    path.write_text(json.dumps(valid_config_dict))
    return path


# ============================================================================
# Model defaults and validation
# ============================================================================


class TestDefaults:
    """Sub-config defaults."""

    def test_provider_defaults_to_standard_claims(self):
        assert ProviderConfig().supported_claims == list(DEFAULT_SUPPORTED_CLAIMS)

    def test_http_timeout_bounds(self):
        with pytest.raises(ValidationError):
            HttpConfig(timeout_seconds=0)

    def test_logging_disabled_without_log_dir(self):
        config = LoggingConfig()

        assert config.system_log_path is None
        assert config.decisions_log_path is None

    def test_logging_paths(self, tmp_path: Path):
        config = LoggingConfig(log_dir=str(tmp_path))

        assert config.system_log_path == tmp_path / "system" / "system.jsonl"
        assert config.decisions_log_path == tmp_path / "audit" / "decisions.jsonl"

    def test_invalid_log_level_rejected(self):
        with pytest.raises(ValidationError):
            LoggingConfig(log_level="TRACE")


# ============================================================================
# Load / save
# ============================================================================


class TestLoadFromFile:
    """AppConfig.load_from_file()."""

    def test_loads_valid_file(self, config_file: Path):
        # Act
        config = AppConfig.load_from_file(config_file)

        # Assert
        assert config.http.timeout_seconds == 10
        assert config.services[0].access_policy.acceptable_codes == frozenset({"200", "202"})

    def test_missing_file_raises_configuration_error(self, tmp_path: Path):
        with pytest.raises(ConfigurationError, match="not found"):
            AppConfig.load_from_file(tmp_path / "missing.json")

    def test_invalid_json_raises_configuration_error(self, tmp_path: Path):
        path = tmp_path / "config.json"
        path.write_text("{not json")

        with pytest.raises(ConfigurationError, match="Invalid JSON"):
            AppConfig.load_from_file(path)

    def test_validation_errors_list_locations(self, tmp_path: Path, valid_config_dict: dict):
        """Given a bad field, then the error names its location."""
        # Arrange
        valid_config_dict["http"]["timeout_seconds"] = 9999
        path = tmp_path / "config.json"
        path.write_text(json.dumps(valid_config_dict))

        # Act & Assert
        with pytest.raises(ConfigurationError, match="http.timeout_seconds"):
            AppConfig.load_from_file(path)

    def test_duplicate_service_ids_rejected_at_load(self, tmp_path: Path, valid_config_dict: dict):
        valid_config_dict["services"].append({"id": "app"})
        path = tmp_path / "config.json"
        path.write_text(json.dumps(valid_config_dict))

        with pytest.raises(ConfigurationError, match="Duplicate"):
            AppConfig.load_from_file(path)

    def test_save_then_load_preserves_services(self, tmp_path: Path, config_file: Path):
        # Arrange
        config = AppConfig.load_from_file(config_file)
        saved_path = tmp_path / "nested" / "saved.json"

        # Act
        config.save_to_file(saved_path)
        reloaded = AppConfig.load_from_file(saved_path)

        # Assert
        assert reloaded == config


# ============================================================================
# Wiring
# ============================================================================


class TestBuilders:
    """build_registry() and build_release_engine()."""

    def test_registry_contains_services(self, config_file: Path):
        registry = AppConfig.load_from_file(config_file).build_registry()

        assert "app" in registry

    def test_release_engine_uses_provider_settings(self, config_file: Path):
        """Given provider mappings and supported claims, then the engine honours both."""
        # Arrange
        config = AppConfig.load_from_file(config_file)
        engine = config.build_release_engine()
        service = config.build_registry().get("app")

        # Act
        released = engine.release(
            service,
            {"mail": ["a@b.com"], "memberOf": ["admins"], "phone_number": ["555"]},
        )

        # Assert
        assert released == {"email": ["a@b.com"], "groups": ["admins"]}
