"""Scope-based attribute release policy models.

A ScopePolicy is the release rule set configured for one scope of a
registered service. Policies are tagged variants rather than a class
hierarchy: the `scope_type` names the scope, and the standard OIDC scopes
come with their default claim bundles via standard_scope_policy().

Policy structure:
    ScopePolicy
    ├── scope_type: "profile" | "email" | "address" | "phone" | ... | custom name
    ├── allowed_attributes: ordered claim names (None = unset)
    └── claim_mappings: claim name -> custom attribute name

Policies are frozen after construction.
"""

from __future__ import annotations

__all__ = [
    "CUSTOM_SCOPE_TYPE",
    "OidcScope",
    "ScopePolicy",
    "standard_scope_policy",
]

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from claim_acp.constants import STANDARD_SCOPE_CLAIMS

# Scope type for administrator-defined scopes with their own claim list
CUSTOM_SCOPE_TYPE = "custom"


class OidcScope(str, Enum):
    """Standard OpenID Connect scopes.

    Inherits from str for easy serialization and comparison.
    """

    OPENID = "openid"
    PROFILE = "profile"
    EMAIL = "email"
    ADDRESS = "address"
    PHONE = "phone"
    OFFLINE_ACCESS = "offline_access"

    @property
    def claims(self) -> tuple[str, ...]:
        """Claims bundled by this scope."""
        return STANDARD_SCOPE_CLAIMS[self.value]


class ScopePolicy(BaseModel):
    """Release rules for one scope of a registered service.

    Attributes:
        scope_type: Scope this policy releases claims for. Standard OIDC
            scope name or a custom scope name.
        allowed_attributes: Claims the scope may release, in release order.
            Duplicates are dropped (first occurrence kept). None means unset.
        claim_mappings: Claim name -> attribute name used to look the claim
            up in the resolved attributes. Names are case-sensitive.
    """

    scope_type: str = Field(min_length=1)
    allowed_attributes: tuple[str, ...] | None = None
    claim_mappings: Mapping[str, str] = Field(default_factory=dict, validate_default=True)

    model_config = ConfigDict(frozen=True)

    @field_validator("allowed_attributes", mode="after")
    @classmethod
    def dedupe_allowed_attributes(cls, v: tuple[str, ...] | None) -> tuple[str, ...] | None:
        """Keep the first occurrence of each claim and reject blank names."""
        if v is None:
            return v
        for claim in v:
            if not claim.strip():
                raise ValueError("Allowed attribute names cannot be empty or whitespace-only")
        return tuple(dict.fromkeys(v))

    @field_validator("claim_mappings", mode="after")
    @classmethod
    def reject_blank_mappings(cls, v: Mapping[str, str]) -> Mapping[str, str]:
        """Reject blank names and store the table read-only."""
        for claim, attribute in v.items():
            if not claim.strip() or not attribute.strip():
                raise ValueError(f"Claim mapping '{claim}' -> '{attribute}' cannot be blank")
        return MappingProxyType(dict(v))

    @field_serializer("claim_mappings")
    def serialize_claim_mappings(self, v: Mapping[str, str]) -> dict[str, str]:
        return dict(v)

    @property
    def is_standard(self) -> bool:
        """True when scope_type names a standard OIDC scope."""
        return self.scope_type in STANDARD_SCOPE_CLAIMS


def standard_scope_policy(
    scope: OidcScope | str,
    *,
    claim_mappings: Mapping[str, str] | None = None,
) -> ScopePolicy:
    """Build the release policy of a standard OIDC scope.

    Args:
        scope: Standard scope (enum member or its name).
        claim_mappings: Optional claim -> attribute mappings for the scope.

    Returns:
        ScopePolicy allowing the claims the scope bundles.

    Raises:
        ValueError: If scope is not a standard OIDC scope.
    """
    oidc_scope = OidcScope(scope)
    return ScopePolicy(
        scope_type=oidc_scope.value,
        allowed_attributes=list(oidc_scope.claims),
        claim_mappings=dict(claim_mappings or {}),
    )
