"""Release engine - decide which resolved attributes are released as claims.

Evaluation flow for one scope policy:
1. allowed claims = allowed_attributes ∩ supported claims, in the order of
   allowed_attributes
2. Each allowed claim is resolved against the (case-insensitive) attributes:
   a. mapped attribute present → its values, keyed by the claim name
   b. mapped attribute absent, claim itself present → the claim's values
   c. mapped attribute and claim both absent → unresolved, dropped
   d. no mapping → the claim's values if present
3. Claims without a value are dropped; the rest keep step-2 order

Design principles:
1. Released claims are always a subset of allowed_attributes ∩ supported claims
2. An unresolved claim is omitted, never filled with a placeholder
3. Attribute lookups are case-insensitive; claim and mapping names are not
4. Collaborator outages fail soft: an empty release set, logged as a warning
5. Stateless: identical inputs always give identical outputs
"""

from __future__ import annotations

__all__ = ["ReleaseEngine"]

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import TYPE_CHECKING, Any

from claim_acp.context.attributes import AttributeValues, ResolvedAttributes
from claim_acp.exceptions import ConfigurationUnavailable, MappingNotFound
from claim_acp.release.policy import ScopePolicy
from claim_acp.release.protocol import ClaimMapperProtocol, MappingOwner, SupportedClaimsSource
from claim_acp.telemetry.system.system_logger import get_system_logger

if TYPE_CHECKING:
    from claim_acp.registry import RegisteredService
    from claim_acp.telemetry.audit.decision_logger import DecisionLogger


class ReleaseEngine:
    """Computes the claims released to a service under scope-based rules.

    Collaborators are injected at construction and never looked up at call
    time. The engine holds no per-request state, so one instance can serve
    concurrent requests.

    Usage:
        engine = ReleaseEngine(ClaimMapper(), StaticSupportedClaims())
        claims = engine.resolve(policy, None, {"mail": ["a@b.com"]})
    """

    def __init__(
        self,
        mapper: ClaimMapperProtocol,
        supported_claims_source: SupportedClaimsSource,
        *,
        decision_logger: "DecisionLogger | None" = None,
        system_logger: logging.Logger | None = None,
    ) -> None:
        """Initialize the release engine.

        Args:
            mapper: Claim -> attribute mapping lookup.
            supported_claims_source: Provider-wide supported claims.
            decision_logger: Optional audit logger for release decisions.
            system_logger: Logger for diagnostics (default: system logger).
        """
        self._mapper = mapper
        self._supported_claims_source = supported_claims_source
        self._decision_logger = decision_logger
        self._system_logger = system_logger or get_system_logger()

    # -------------------------------------------------------------------------
    # Entry points
    # -------------------------------------------------------------------------

    def resolve(
        self,
        scope_policy: ScopePolicy,
        supported_claims: Iterable[str] | None,
        resolved_attributes: Mapping[str, Any],
        service: MappingOwner | None = None,
    ) -> dict[str, AttributeValues]:
        """Compute the claims one scope policy releases.

        Args:
            scope_policy: Release rules of the scope.
            supported_claims: Provider-wide supported claims. None reads
                them from the injected supported-claims source.
            resolved_attributes: Principal attributes (looked up case-insensitively).
            service: Owner of the claim mapping table. Defaults to the
                scope policy itself.

        Returns:
            Claim name -> values, in allowed_attributes order. Empty if a
            configuration collaborator is unavailable.
        """
        attributes = ResolvedAttributes.coerce(resolved_attributes)
        try:
            supported = self._supported(supported_claims)
        except ConfigurationUnavailable as e:
            self._log_unavailable("supported_claims", e)
            return {}

        try:
            released = self._resolve_scope(scope_policy, supported, attributes, service)
        except ConfigurationUnavailable as e:
            self._log_unavailable("claim_mapper", e, service_id=getattr(service, "id", None))
            return {}
        self._log_release(service, [scope_policy], released)
        return released

    def release(
        self,
        service: "RegisteredService",
        resolved_attributes: Mapping[str, Any],
    ) -> dict[str, AttributeValues]:
        """Compute all claims released to a registered service.

        Resolves every scope policy of the service and merges the results.
        When two scopes release the same claim, the first scope wins.

        Args:
            service: Registered service with its scope policies and mappings.
            resolved_attributes: Principal attributes.

        Returns:
            Claim name -> values. Empty if a configuration collaborator is
            unavailable or the service has no scope policies.
        """
        attributes = ResolvedAttributes.coerce(resolved_attributes)
        try:
            supported = self._supported(None)
        except ConfigurationUnavailable as e:
            self._log_unavailable("supported_claims", e, service_id=service.id)
            return {}

        released: dict[str, AttributeValues] = {}
        try:
            for scope_policy in service.scope_policies:
                for claim, values in self._resolve_scope(scope_policy, supported, attributes, service).items():
                    released.setdefault(claim, values)
        except ConfigurationUnavailable as e:
            self._log_unavailable("claim_mapper", e, service_id=service.id)
            return {}

        self._log_release(service, service.scope_policies, released)
        return released

    def determine_requested_attribute_definitions(self, scope_policy: ScopePolicy) -> list[str]:
        """Claims a scope policy asks for.

        Args:
            scope_policy: Release rules of the scope.

        Returns:
            allowed_attributes in order, or an empty list when unset. Never None.
        """
        attributes = scope_policy.allowed_attributes
        return list(attributes) if attributes is not None else []

    # -------------------------------------------------------------------------
    # Resolution
    # -------------------------------------------------------------------------

    def _supported(self, supported_claims: Iterable[str] | None) -> frozenset[str]:
        if supported_claims is not None:
            return frozenset(supported_claims)
        return self._supported_claims_source.get_supported_claims()

    def _resolve_scope(
        self,
        scope_policy: ScopePolicy,
        supported: frozenset[str],
        attributes: ResolvedAttributes,
        service: MappingOwner | None,
    ) -> dict[str, AttributeValues]:
        """Resolve one scope policy.

        Raises:
            ConfigurationUnavailable: If the claim mapper is unreachable.
        """
        owner = service if service is not None else scope_policy
        allowed_claims = [
            claim for claim in self.determine_requested_attribute_definitions(scope_policy) if claim in supported
        ]
        self._system_logger.debug(
            {
                "event": "allowed_claims",
                "scope_type": scope_policy.scope_type,
                "allowed_attributes": scope_policy.allowed_attributes,
                "allowed_claims": allowed_claims,
            }
        )

        released: dict[str, AttributeValues] = {}
        for claim in allowed_claims:
            values = self._map_claim_to_attribute(claim, owner, attributes)
            if values is not None:
                released[claim] = values
        return released

    def _map_claim_to_attribute(
        self,
        claim: str,
        owner: MappingOwner,
        attributes: ResolvedAttributes,
    ) -> AttributeValues | None:
        """Resolve the values of a single claim.

        Returns:
            The claim's values, or None when the claim is unresolved.
        """
        mapped_attribute = self._mapped_attribute(claim, owner)
        if mapped_attribute is None:
            return attributes.get(claim)

        if mapped_attribute in attributes:
            return attributes[mapped_attribute]

        if claim in attributes:
            # The claim coincides with an existing attribute of the same name
            self._system_logger.debug(
                {
                    "event": "mapping_fallback",
                    "message": f"Attribute '{mapped_attribute}' mapped to claim '{claim}' not found; "
                    f"using attribute '{claim}' instead",
                    "claim": claim,
                    "mapped_attribute": mapped_attribute,
                }
            )
            return attributes[claim]

        self._system_logger.warning(
            {
                "event": "mapping_not_found",
                "message": f"Claim '{claim}' is mapped to attribute '{mapped_attribute}', "
                "but neither is present in the resolved attributes",
                "claim": claim,
                "mapped_attribute": mapped_attribute,
                "available_attributes": attributes.names(),
            }
        )
        return None

    def _mapped_attribute(self, claim: str, owner: MappingOwner) -> str | None:
        if not self._mapper.contains_mapped_attribute(claim, owner):
            return None
        try:
            return self._mapper.get_mapped_attribute(claim, owner)
        except MappingNotFound:
            return None

    # -------------------------------------------------------------------------
    # Logging
    # -------------------------------------------------------------------------

    def _log_unavailable(
        self,
        collaborator: str,
        error: ConfigurationUnavailable,
        service_id: str | None = None,
    ) -> None:
        self._system_logger.warning(
            {
                "event": "configuration_unavailable",
                "message": f"Cannot reach {collaborator}; releasing no claims: {error}",
                "collaborator": collaborator,
                "service_id": service_id,
            }
        )

    def _log_release(
        self,
        service: MappingOwner | None,
        scope_policies: Sequence[ScopePolicy],
        released: dict[str, AttributeValues],
    ) -> None:
        if self._decision_logger is None:
            return
        requested = list(
            dict.fromkeys(
                claim
                for policy in scope_policies
                for claim in self.determine_requested_attribute_definitions(policy)
            )
        )
        self._decision_logger.log_release(
            service_id=getattr(service, "id", None),
            scope_types=[policy.scope_type for policy in scope_policies],
            requested_claims=requested,
            released_claims=list(released),
        )
