"""Tests for HttpxTransport using httpx.MockTransport."""

from unittest.mock import MagicMock

import httpx
import pytest

from claim_acp.access import USER_AGENT, HttpTransport, HttpxTransport
from claim_acp.exceptions import TransportError


def _client(handler) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler), headers={"User-Agent": USER_AGENT})


class TestHttpxTransport:
    """Request shape and error translation."""

    def test_implements_protocol(self):
        assert isinstance(HttpxTransport(client=MagicMock(spec=httpx.Client)), HttpTransport)

    def test_sends_get_with_username_and_json_body(self):
        """Given an access request, then it is a GET with ?username= and the JSON body."""
        # Arrange
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(202)

        transport = HttpxTransport(client=_client(handler))

        # Act
        status = transport.get(
            "https://authz.example.com/check",
            params={"username": "casuser"},
            body='{"principalId":"casuser"}',
        )

        # Assert
        assert status == 202
        request = seen[0]
        assert request.method == "GET"
        assert request.url.params["username"] == "casuser"
        assert request.content == b'{"principalId":"casuser"}'
        assert request.headers["Content-Type"] == "application/json"
        assert request.headers["User-Agent"] == USER_AGENT

    def test_error_status_is_returned_not_raised(self):
        transport = HttpxTransport(client=_client(lambda request: httpx.Response(500)))

        assert transport.get("https://authz.example.com", params={}, body="{}") == 500

    def test_timeout_becomes_transport_error(self):
        # Arrange
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("too slow", request=request)

        transport = HttpxTransport(client=_client(handler))

        # Act & Assert
        with pytest.raises(TransportError, match="timed out after 2s") as exc_info:
            transport.get("https://authz.example.com", params={}, body="{}", timeout=2)
        assert exc_info.value.url == "https://authz.example.com"

    def test_connection_error_becomes_transport_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        transport = HttpxTransport(client=_client(handler))

        with pytest.raises(TransportError, match="HTTP error"):
            transport.get("https://authz.example.com", params={}, body="{}")

    def test_invalid_url_becomes_transport_error(self):
        client = MagicMock(spec=httpx.Client)
        client.request.side_effect = httpx.InvalidURL("Invalid non-printable ASCII character in URL")
        transport = HttpxTransport(client=client)

        with pytest.raises(TransportError, match="Invalid remote access endpoint URL"):
            transport.get("https://authz example.com", params={}, body="{}")

    def test_timeout_override_passed_to_client(self):
        """Given a per-call timeout, then it replaces the transport default."""
        # Arrange
        client = MagicMock(spec=httpx.Client)
        client.request.return_value = httpx.Response(200)
        transport = HttpxTransport(client=client, timeout=5)

        # Act
        transport.get("https://authz.example.com", params={"username": "u"}, body="{}", timeout=9)

        # Assert
        assert client.request.call_args.kwargs["timeout"] == 9

    def test_default_timeout_used_without_override(self):
        client = MagicMock(spec=httpx.Client)
        client.request.return_value = httpx.Response(200)
        transport = HttpxTransport(client=client, timeout=5)

        transport.get("https://authz.example.com", params={}, body="{}")

        assert client.request.call_args.kwargs["timeout"] == 5

    def test_missing_response_returns_none(self):
        client = MagicMock(spec=httpx.Client)
        client.request.return_value = None
        transport = HttpxTransport(client=client)

        assert transport.get("https://authz.example.com", params={}, body="{}") is None


class TestClientOwnership:
    """Injected clients are never closed by the transport."""

    def test_injected_client_not_closed(self):
        client = MagicMock(spec=httpx.Client)

        with HttpxTransport(client=client):
            pass

        client.close.assert_not_called()

    def test_owned_client_closed(self):
        # Arrange
        transport = HttpxTransport(timeout=1)

        # Act
        transport.close()

        # Assert
        assert transport._client.is_closed
