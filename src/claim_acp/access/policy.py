"""Remote endpoint access policy model.

The access strategy asks a remote endpoint whether the principal may use
the service. It is a tagged variant (`type == "remote_endpoint"`) so other
strategies can be added without an inheritance chain.
"""

from __future__ import annotations

__all__ = ["RemoteAccessPolicy"]

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from claim_acp.constants import MAX_HTTP_TIMEOUT_SECONDS, MIN_HTTP_TIMEOUT_SECONDS


class RemoteAccessPolicy(BaseModel):
    """Access is granted when the remote endpoint answers with an accepted status.

    Attributes:
        type: Variant tag, always "remote_endpoint".
        endpoint_url: URL queried with GET ?username=<principal_id>. Not
            validated here: a malformed URL surfaces as a TransportError
            at evaluation time.
        acceptable_response_codes: Comma-delimited status codes that mean
            "allow" (e.g. "200,202"). Entries are whitespace-trimmed. Unset or
            empty accepts no status, so every request is denied.
        timeout_seconds: Per-policy request timeout. None uses the transport default.
    """

    type: Literal["remote_endpoint"] = "remote_endpoint"
    endpoint_url: str = Field(min_length=1)
    acceptable_response_codes: str = ""
    timeout_seconds: float | None = Field(
        default=None,
        ge=MIN_HTTP_TIMEOUT_SECONDS,
        le=MAX_HTTP_TIMEOUT_SECONDS,
    )

    model_config = ConfigDict(frozen=True)

    @field_validator("acceptable_response_codes", mode="before")
    @classmethod
    def join_code_lists(cls, v: Any) -> Any:
        """Accept a list of codes in config files and store it comma-delimited."""
        if isinstance(v, (list, tuple, set, frozenset)):
            return ",".join(str(code) for code in v)
        if isinstance(v, int):
            return str(v)
        return v

    @property
    def acceptable_codes(self) -> frozenset[str]:
        """Accepted status codes as a set of strings."""
        return frozenset(code.strip() for code in self.acceptable_response_codes.split(",") if code.strip())

    def accepts(self, status_code: int | str) -> bool:
        """Check whether a response status grants access.

        Args:
            status_code: HTTP status code returned by the endpoint.

        Returns:
            True if the status code is one of the acceptable codes.
        """
        return str(status_code).strip() in self.acceptable_codes
