"""Supported-claims sources.

The supported claims are the provider-wide universe of claim names that
discovery metadata advertises. Nothing outside this set is ever released,
whatever a scope policy allows.
"""

from __future__ import annotations

__all__ = ["StaticSupportedClaims"]

from collections.abc import Iterable

from claim_acp.constants import DEFAULT_SUPPORTED_CLAIMS


class StaticSupportedClaims:
    """Supported claims fixed at construction (from provider config)."""

    def __init__(self, claims: Iterable[str] = DEFAULT_SUPPORTED_CLAIMS) -> None:
        self._claims = frozenset(claims)

    def get_supported_claims(self) -> frozenset[str]:
        return self._claims

    def __repr__(self) -> str:
        return f"StaticSupportedClaims({sorted(self._claims)!r})"
