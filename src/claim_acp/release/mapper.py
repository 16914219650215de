"""Claim to attribute mapping.

Services may publish a claim under a custom attribute name: the "email"
claim can be backed by the "mail" attribute. The mapper is a pure table
read with no I/O:

1. The service's own claim_mappings
2. Provider-wide default mappings (from provider config)

Absence of an entry is not an error, just "no mapping".
"""

from __future__ import annotations

__all__ = ["ClaimMapper"]

from collections.abc import Mapping
from types import MappingProxyType

from claim_acp.exceptions import MappingNotFound
from claim_acp.release.protocol import MappingOwner


class ClaimMapper:
    """Looks up the custom attribute a claim is mapped to.

    Claim names are compared case-sensitively. Service-level mappings take
    precedence over provider-wide defaults.

    Usage:
        mapper = ClaimMapper(default_mappings={"name": "displayName"})
        if mapper.contains_mapped_attribute("email", service):
            attribute = mapper.get_mapped_attribute("email", service)
    """

    def __init__(self, default_mappings: Mapping[str, str] | None = None) -> None:
        """Initialize the mapper.

        Args:
            default_mappings: Provider-wide claim -> attribute mappings used
                when a service does not map a claim itself.
        """
        self._default_mappings: Mapping[str, str] = MappingProxyType(dict(default_mappings or {}))

    @property
    def default_mappings(self) -> Mapping[str, str]:
        """Provider-wide claim -> attribute mappings (read-only)."""
        return self._default_mappings

    def contains_mapped_attribute(self, claim: str, service: MappingOwner) -> bool:
        """Check whether a claim has a mapped attribute.

        Args:
            claim: Claim name.
            service: Service (or scope policy) owning the mapping table.

        Returns:
            True if the service or the provider maps the claim.
        """
        return claim in service.claim_mappings or claim in self._default_mappings

    def get_mapped_attribute(self, claim: str, service: MappingOwner) -> str:
        """Get the attribute a claim is mapped to.

        Args:
            claim: Claim name.
            service: Service (or scope policy) owning the mapping table.

        Returns:
            Mapped attribute name.

        Raises:
            MappingNotFound: If neither the service nor the provider maps the claim.
        """
        service_mappings = service.claim_mappings
        if claim in service_mappings:
            return service_mappings[claim]
        if claim in self._default_mappings:
            return self._default_mappings[claim]
        raise MappingNotFound(claim)
