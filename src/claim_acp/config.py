"""Application configuration for claim-acp.

Defines configuration models for the OIDC provider, the remote access HTTP
client, logging, and registered services. Configuration is a single JSON
file validated with Pydantic; it is immutable once loaded.

Example config:
    {
      "provider": {
        "supported_claims": ["sub", "email", "groups"],
        "claim_mappings": {"name": "displayName"}
      },
      "http": {"timeout_seconds": 5},
      "logging": {"log_dir": "/var/log/claim-acp", "log_level": "INFO"},
      "services": [
        {
          "id": "my-app",
          "scope_policies": [
            {"scope_type": "email", "allowed_attributes": ["email"],
             "claim_mappings": {"email": "mail"}}
          ],
          "access_policy": {
            "endpoint_url": "https://authz.example.com/check",
            "acceptable_response_codes": "200,202"
          }
        }
      ]
    }

Example usage:
    config = AppConfig.load_from_file(config_path)
    registry = config.build_registry()
    engine = config.build_release_engine()
"""

from __future__ import annotations

__all__ = [
    "AppConfig",
    "HttpConfig",
    "LoggingConfig",
    "ProviderConfig",
]

import json
from pathlib import Path
from typing import TYPE_CHECKING, Literal

from pydantic import BaseModel, Field

from claim_acp.constants import (
    DECISIONS_LOG_FILENAME,
    DEFAULT_HTTP_TIMEOUT_SECONDS,
    DEFAULT_SUPPORTED_CLAIMS,
    MAX_HTTP_TIMEOUT_SECONDS,
    MIN_HTTP_TIMEOUT_SECONDS,
    SYSTEM_LOG_FILENAME,
)
from claim_acp.exceptions import ConfigurationError
from claim_acp.registry import RegisteredService, ServiceRegistry
from claim_acp.release import ClaimMapper, ReleaseEngine, StaticSupportedClaims
from claim_acp.utils.file_helpers import load_validated_json, require_file_exists

if TYPE_CHECKING:
    from claim_acp.telemetry.audit.decision_logger import DecisionLogger


class ProviderConfig(BaseModel):
    """OIDC provider settings shared by all services.

    Attributes:
        issuer: Optional issuer URL, informational.
        supported_claims: Claims advertised in discovery metadata. Nothing
            outside this set is ever released.
        claim_mappings: Provider-wide claim -> attribute mappings, used when
            a service does not map a claim itself.
    """

    issuer: str | None = None
    supported_claims: list[str] = Field(default_factory=lambda: list(DEFAULT_SUPPORTED_CLAIMS))
    claim_mappings: dict[str, str] = Field(default_factory=dict)


class HttpConfig(BaseModel):
    """HTTP client settings for the remote access check.

    Attributes:
        timeout_seconds: Default request timeout; a policy's own
            timeout_seconds takes precedence.
    """

    timeout_seconds: float = Field(
        default=DEFAULT_HTTP_TIMEOUT_SECONDS,
        ge=MIN_HTTP_TIMEOUT_SECONDS,
        le=MAX_HTTP_TIMEOUT_SECONDS,
    )


class LoggingConfig(BaseModel):
    """Logging configuration settings.

    Logs are stored under log_dir:
        <log_dir>/
        ├── system/
        │   └── system.jsonl       # WARNING and above
        └── audit/
            └── decisions.jsonl    # One line per access/release decision

    Attributes:
        log_dir: Base directory for logs. None disables file logging
            (stderr only, no decision audit trail).
        log_level: DEBUG also writes diagnostics to system.jsonl.
    """

    log_dir: str | None = None
    log_level: Literal["DEBUG", "INFO"] = "INFO"

    @property
    def system_log_path(self) -> Path | None:
        if self.log_dir is None:
            return None
        return Path(self.log_dir).expanduser() / "system" / SYSTEM_LOG_FILENAME

    @property
    def decisions_log_path(self) -> Path | None:
        if self.log_dir is None:
            return None
        return Path(self.log_dir).expanduser() / "audit" / DECISIONS_LOG_FILENAME


class AppConfig(BaseModel):
    """Main application configuration for claim-acp.

    Attributes:
        provider: OIDC provider settings (supported claims, default mappings).
        http: Remote access HTTP settings.
        logging: Logging configuration.
        services: Registered services with their policies.
    """

    provider: ProviderConfig = Field(default_factory=ProviderConfig)
    http: HttpConfig = Field(default_factory=HttpConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    services: list[RegisteredService] = Field(default_factory=list)

    def save_to_file(self, config_path: Path) -> None:
        """Save configuration to JSON file.

        Creates parent directories if they don't exist.

        Args:
            config_path: Path where the config JSON file should be saved.
        """
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(self.model_dump(mode="json", exclude_none=True), f, indent=2)

    @classmethod
    def load_from_file(cls, config_path: Path) -> "AppConfig":
        """Load configuration from JSON file.

        Args:
            config_path: Path to the config JSON file.

        Returns:
            Validated AppConfig.

        Raises:
            ConfigurationError: If the file is missing, not JSON, fails
                validation, or registers the same service id twice.
        """
        try:
            require_file_exists(config_path, file_type="configuration")
            config = load_validated_json(config_path, cls, file_type="config")
        except (FileNotFoundError, ValueError) as e:
            raise ConfigurationError(str(e)) from e

        # Surface duplicate ids at load time instead of first use
        config.build_registry()
        return config

    def build_registry(self) -> ServiceRegistry:
        """Build the service registry.

        Raises:
            ConfigurationError: If two services share an id.
        """
        return ServiceRegistry(self.services)

    def build_release_engine(self, decision_logger: "DecisionLogger | None" = None) -> ReleaseEngine:
        """Build a ReleaseEngine wired to the provider settings."""
        return ReleaseEngine(
            ClaimMapper(self.provider.claim_mappings),
            StaticSupportedClaims(self.provider.supported_claims),
            decision_logger=decision_logger,
        )
