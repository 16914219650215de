"""Protocols for the release pipeline collaborators.

Collaborators are injected into ReleaseEngine at construction. Any object
implementing these protocols can be used (structural subtyping), e.g. a
mapper backed by a remote registry or a supported-claims source that reads
live discovery metadata.

Collaborators that cannot reach their backing store raise
ConfigurationUnavailable; the engine turns that into an empty release set.
"""

from __future__ import annotations

__all__ = [
    "AttributeReleaseProtocol",
    "ClaimMapperProtocol",
    "MappingOwner",
    "SupportedClaimsSource",
]

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from claim_acp.registry import RegisteredService
    from claim_acp.release.policy import ScopePolicy


@runtime_checkable
class MappingOwner(Protocol):
    """Anything that carries a claim -> attribute table.

    ScopePolicy and RegisteredService both satisfy this protocol.
    """

    @property
    def claim_mappings(self) -> Mapping[str, str]: ...


@runtime_checkable
class ClaimMapperProtocol(Protocol):
    """Per-service lookup of the attribute a claim is mapped to."""

    def contains_mapped_attribute(self, claim: str, service: MappingOwner) -> bool:
        """Return True when `claim` has a mapped attribute for `service`.

        Raises:
            ConfigurationUnavailable: If the mapping registry is unreachable.
        """
        ...

    def get_mapped_attribute(self, claim: str, service: MappingOwner) -> str:
        """Return the attribute name `claim` is mapped to for `service`.

        Raises:
            MappingNotFound: If no mapping exists for the claim.
            ConfigurationUnavailable: If the mapping registry is unreachable.
        """
        ...


@runtime_checkable
class SupportedClaimsSource(Protocol):
    """Provider-wide set of claims exposed by discovery metadata."""

    def get_supported_claims(self) -> frozenset[str]:
        """Return the supported claim names.

        Raises:
            ConfigurationUnavailable: If the discovery configuration is unreachable.
        """
        ...


@runtime_checkable
class AttributeReleaseProtocol(Protocol):
    """The ResolveAttributes capability.

    Implementations compute which resolved attributes are released as
    claims. They must be safe for concurrent calls and never raise for
    collaborator outages (fail-soft with an empty release set).
    """

    def resolve(
        self,
        scope_policy: "ScopePolicy",
        supported_claims: frozenset[str] | set[str] | None,
        resolved_attributes: Mapping[str, Any],
        service: MappingOwner | None = None,
    ) -> dict[str, list[Any]]: ...

    def determine_requested_attribute_definitions(self, scope_policy: "ScopePolicy") -> list[str]: ...

    def release(
        self,
        service: "RegisteredService",
        resolved_attributes: Mapping[str, Any],
    ) -> dict[str, list[Any]]: ...
