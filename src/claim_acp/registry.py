"""Registered services and the in-memory service registry.

A registered service is a consumer application with its own release and
access policies. The registry supplies ScopePolicy and RemoteAccessPolicy
for a service id. It is built once from configuration and never mutated,
so lookups are safe from concurrent requests.
"""

from __future__ import annotations

__all__ = [
    "RegisteredService",
    "ServiceRegistry",
]

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

from claim_acp.access.policy import RemoteAccessPolicy
from claim_acp.exceptions import ConfigurationError, ServiceNotFoundError
from claim_acp.release.policy import ScopePolicy


class RegisteredService(BaseModel):
    """A consumer application with its access and release policies.

    Attributes:
        id: Unique service id (client id for OIDC relying parties).
        name: Optional display name.
        scope_policies: Release rules, one per scope. Earlier scopes win
            when two scopes release the same claim.
        access_policy: Remote endpoint access strategy. None means the
            service has no remote access check configured.
    """

    id: str = Field(min_length=1)
    name: str | None = None
    scope_policies: tuple[ScopePolicy, ...] = Field(default_factory=tuple)
    access_policy: RemoteAccessPolicy | None = None

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def unique_scope_types(self) -> Self:
        """Two policies for the same scope would make release order ambiguous."""
        seen: set[str] = set()
        for policy in self.scope_policies:
            if policy.scope_type in seen:
                raise ValueError(f"Duplicate scope policy '{policy.scope_type}' for service '{self.id}'")
            seen.add(policy.scope_type)
        return self

    @property
    def claim_mappings(self) -> Mapping[str, str]:
        """Claim mappings of all scope policies (first policy wins on conflicts)."""
        merged: dict[str, str] = {}
        for policy in self.scope_policies:
            for claim, attribute in policy.claim_mappings.items():
                merged.setdefault(claim, attribute)
        return MappingProxyType(merged)

    @property
    def scope_types(self) -> list[str]:
        """Scope names this service has release policies for."""
        return [policy.scope_type for policy in self.scope_policies]


class ServiceRegistry:
    """Read-only lookup of registered services by id.

    Usage:
        registry = ServiceRegistry(config.services)
        service = registry.get("my-app")
    """

    def __init__(self, services: Iterable[RegisteredService] = ()) -> None:
        """Build the registry.

        Args:
            services: Registered services.

        Raises:
            ConfigurationError: If two services share an id.
        """
        by_id: dict[str, RegisteredService] = {}
        for service in services:
            if service.id in by_id:
                raise ConfigurationError(f"Duplicate registered service id '{service.id}'")
            by_id[service.id] = service
        self._services: Mapping[str, RegisteredService] = MappingProxyType(by_id)

    def get(self, service_id: str) -> RegisteredService:
        """Get a registered service.

        Raises:
            ServiceNotFoundError: If no service has this id.
        """
        try:
            return self._services[service_id]
        except KeyError:
            raise ServiceNotFoundError(service_id) from None

    def find(self, service_id: str) -> RegisteredService | None:
        """Get a registered service, or None if unknown."""
        return self._services.get(service_id)

    def get_scope_policies(self, service_id: str) -> list[ScopePolicy]:
        """Scope policies of a service (see get() for errors)."""
        return list(self.get(service_id).scope_policies)

    def get_access_policy(self, service_id: str) -> RemoteAccessPolicy | None:
        """Remote access policy of a service (see get() for errors)."""
        return self.get(service_id).access_policy

    def __contains__(self, service_id: object) -> bool:
        return service_id in self._services

    def __iter__(self) -> Iterator[RegisteredService]:
        return iter(self._services.values())

    def __len__(self) -> int:
        return len(self._services)
