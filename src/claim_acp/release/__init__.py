"""Attribute release - which resolved attributes become released claims.

The release engine is stateless and side-effect free apart from logging.

Structure:
    policy.py    - ScopePolicy model, standard OIDC scopes
    mapper.py    - ClaimMapper (claim -> custom attribute lookup)
    claims.py    - Supported-claims sources
    protocol.py  - Collaborator protocols (mapper, claims source, release capability)
    engine.py    - ReleaseEngine
"""

from claim_acp.release.claims import StaticSupportedClaims
from claim_acp.release.engine import ReleaseEngine
from claim_acp.release.mapper import ClaimMapper
from claim_acp.release.policy import (
    CUSTOM_SCOPE_TYPE,
    OidcScope,
    ScopePolicy,
    standard_scope_policy,
)
from claim_acp.release.protocol import (
    AttributeReleaseProtocol,
    ClaimMapperProtocol,
    MappingOwner,
    SupportedClaimsSource,
)

__all__ = [
    # Engine
    "ReleaseEngine",
    "AttributeReleaseProtocol",
    # Mapping
    "ClaimMapper",
    "ClaimMapperProtocol",
    "MappingOwner",
    # Supported claims
    "StaticSupportedClaims",
    "SupportedClaimsSource",
    # Policy models
    "CUSTOM_SCOPE_TYPE",
    "OidcScope",
    "ScopePolicy",
    "standard_scope_policy",
]
