"""Access request sent to remote access endpoints.

AccessRequest is request-scoped: built by the authentication pipeline for a
single evaluation and discarded afterwards. It serializes with camelCase
keys so remote endpoints see the same field names regardless of the Python
attribute names.
"""

from __future__ import annotations

__all__ = ["AccessRequest"]

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class AccessRequest(BaseModel):
    """A principal asking to access a registered service.

    Attributes:
        principal_id: Authenticated subject identifier. Sent as the
            `username` query parameter on the remote request.
        service_id: Id of the registered service being accessed.
        context: Opaque serializable metadata supplied by the caller
            (client address, user agent, ...). Must be JSON-serializable.
        attributes: Principal attributes the endpoint may use in its decision.
    """

    principal_id: str = Field(min_length=1)
    service_id: str = Field(min_length=1)
    context: dict[str, Any] = Field(default_factory=dict)
    attributes: dict[str, list[Any]] = Field(default_factory=dict)

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )
