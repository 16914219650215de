"""Custom exceptions for claim-acp.

This module contains all custom exceptions used throughout the package.
Exceptions are organized into two categories:

Soft Failures (evaluation continues, logged only):
    - ConfigurationUnavailable: Mapping registry or supported-claims source
      cannot be reached. The release engine returns an empty release set.
    - MappingNotFound: A claim has no mapped attribute.

Hard Failures (propagate to the caller):
    - EvaluationError: Base for remote access evaluation failures
    - TransportError: The HTTP request failed (network fault, timeout, bad URL)
    - SerializationError: The access request could not be serialized
    - ServiceNotFoundError: No registered service for the given id
    - ConfigurationError: Configuration file missing or invalid

Usage:
    from claim_acp.exceptions import TransportError, ConfigurationUnavailable
"""

from __future__ import annotations

__all__ = [
    "ClaimAcpError",
    "ConfigurationError",
    "ConfigurationUnavailable",
    "EvaluationError",
    "MappingNotFound",
    "SerializationError",
    "ServiceNotFoundError",
    "TransportError",
]


class ClaimAcpError(Exception):
    """Base exception for all claim-acp errors."""


# =============================================================================
# Soft Failures (logged, never surfaced as hard errors by the engine)
# =============================================================================


class ConfigurationUnavailable(ClaimAcpError):
    """A required configuration collaborator cannot be reached.

    Raised by collaborators when:
    - The supported-claims source cannot produce the discovery claim set
    - The claim mapping registry is not available

    ReleaseEngine catches this and returns an empty release set.
    """


class MappingNotFound(ClaimAcpError, KeyError):
    """A claim has no mapped attribute for the given service.

    Raised by ClaimMapper.get_mapped_attribute() when asked for a claim
    without a mapping. Callers should check contains_mapped_attribute()
    first. Inherits from KeyError so it can be handled like a missing key.

    Attributes:
        claim: The claim name that has no mapping.
    """

    def __init__(self, claim: str) -> None:
        self.claim = claim
        super().__init__(f"No attribute mapping defined for claim '{claim}'")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])


# =============================================================================
# Hard Failures (remote access evaluation)
# =============================================================================


class EvaluationError(ClaimAcpError):
    """Remote access evaluation could not produce a decision.

    Distinct from an explicit deny: the caller decides whether an
    evaluation error is treated as deny (fail-closed) or surfaced as
    a system fault.
    """


class TransportError(EvaluationError):
    """The HTTP request to the remote endpoint failed.

    Raised when:
    - The endpoint URL is malformed or uses an unsupported scheme
    - The connection fails or is reset
    - The request exceeds its timeout

    Attributes:
        url: The endpoint URL that was queried.
    """

    def __init__(self, message: str, *, url: str | None = None) -> None:
        self.url = url
        super().__init__(message)


class SerializationError(EvaluationError):
    """The access request could not be serialized to JSON.

    Raised when the request context carries values that have no JSON
    representation.
    """


class ServiceNotFoundError(ClaimAcpError, LookupError):
    """No registered service exists for the given id.

    Attributes:
        service_id: The id that was looked up.
    """

    def __init__(self, service_id: str) -> None:
        self.service_id = service_id
        super().__init__(f"Registered service '{service_id}' not found")


class ConfigurationError(ClaimAcpError):
    """Configuration is invalid or incomplete.

    Raised when:
    - Config file does not exist
    - Config file contains invalid JSON
    - Config file fails Pydantic validation
    - Two registered services share an id
    """
