"""HTTP transport for the remote access check.

The transport sends one GET request and returns its status code. It owns
timeouts and translates every httpx failure into TransportError so the
evaluator never sees library-specific exceptions. Retries and connection
pooling policy belong to the injected httpx.Client, not to this module.
"""

from __future__ import annotations

__all__ = [
    "HttpTransport",
    "HttpxTransport",
    "USER_AGENT",
]

from collections.abc import Mapping
from typing import Protocol, runtime_checkable

import httpx

from claim_acp import __version__
from claim_acp.constants import APP_NAME, DEFAULT_HTTP_TIMEOUT_SECONDS, JSON_CONTENT_TYPE
from claim_acp.exceptions import TransportError

# User-Agent header for remote access requests (informational, not security)
USER_AGENT = f"{APP_NAME}/{__version__}"


@runtime_checkable
class HttpTransport(Protocol):
    """Sends the remote access check."""

    def get(
        self,
        url: str,
        *,
        params: Mapping[str, str],
        body: str,
        timeout: float | None = None,
    ) -> int | None:
        """Send a GET request with query parameters and a JSON body.

        Args:
            url: Endpoint URL.
            params: Query parameters.
            body: JSON request body.
            timeout: Timeout in seconds. None uses the transport default.

        Returns:
            Response status code, or None if no response was received.

        Raises:
            TransportError: On malformed URL, network fault or timeout.
        """
        ...


class HttpxTransport:
    """HttpTransport backed by a synchronous httpx.Client.

    Usage:
        with HttpxTransport(timeout=5) as transport:
            status = transport.get(url, params={"username": "casuser"}, body="{}")
    """

    def __init__(
        self,
        client: httpx.Client | None = None,
        timeout: float = DEFAULT_HTTP_TIMEOUT_SECONDS,
    ) -> None:
        """Initialize the transport.

        Args:
            client: Optional httpx client (for testing or custom pooling).
            timeout: Default timeout in seconds for requests without an override.
        """
        self._timeout = timeout
        self._client = client or httpx.Client(
            timeout=httpx.Timeout(timeout),
            headers={"User-Agent": USER_AGENT},
        )
        self._owns_client = client is None

    def __enter__(self) -> "HttpxTransport":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        """Close HTTP client if we own it."""
        if self._owns_client:
            self._client.close()

    def get(
        self,
        url: str,
        *,
        params: Mapping[str, str],
        body: str,
        timeout: float | None = None,
    ) -> int | None:
        effective_timeout = timeout if timeout is not None else self._timeout
        try:
            # client.get() takes no body, so go through request()
            response = self._client.request(
                "GET",
                url,
                params=dict(params),
                content=body,
                headers={"Content-Type": JSON_CONTENT_TYPE},
                timeout=effective_timeout,
                follow_redirects=True,
            )
        except httpx.TimeoutException as e:
            raise TransportError(
                f"Remote access endpoint {url} timed out after {effective_timeout}s",
                url=url,
            ) from e
        except httpx.InvalidURL as e:
            raise TransportError(f"Invalid remote access endpoint URL {url!r}: {e}", url=url) from e
        except httpx.HTTPError as e:
            raise TransportError(f"HTTP error probing remote access endpoint {url}: {e}", url=url) from e

        if response is None:
            return None
        return response.status_code
