"""Access request serialization for the remote request body.

The payload omits fields at their default/empty value: endpoints only see
what the caller actually set, and unset fields are never leaked.
"""

from __future__ import annotations

__all__ = [
    "AccessRequestSerializer",
    "JsonRequestSerializer",
]

from typing import Protocol, runtime_checkable

from claim_acp.context.request import AccessRequest
from claim_acp.exceptions import SerializationError


@runtime_checkable
class AccessRequestSerializer(Protocol):
    """Converts an AccessRequest to the remote request body."""

    def serialize(self, request: AccessRequest) -> str:
        """Serialize the request.

        Raises:
            SerializationError: If the request cannot be represented.
        """
        ...


class JsonRequestSerializer:
    """Compact JSON with camelCase keys, defaults omitted.

    Example:
        >>> JsonRequestSerializer().serialize(AccessRequest(principal_id="casuser", service_id="app"))
        '{"principalId":"casuser","serviceId":"app"}'
    """

    def serialize(self, request: AccessRequest) -> str:
        try:
            return request.model_dump_json(by_alias=True, exclude_defaults=True)
        except (TypeError, ValueError) as e:
            # PydanticSerializationError is a ValueError
            raise SerializationError(
                f"Cannot serialize access request for principal '{request.principal_id}': {e}"
            ) from e
