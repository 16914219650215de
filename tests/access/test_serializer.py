"""Tests for access request serialization."""

import json

import pytest

from claim_acp.access import AccessRequestSerializer, JsonRequestSerializer
from claim_acp.context import AccessRequest
from claim_acp.exceptions import SerializationError


@pytest.fixture
def serializer() -> JsonRequestSerializer:
    return JsonRequestSerializer()


class TestJsonRequestSerializer:
    """Compact camelCase JSON with defaults omitted."""

    def test_implements_protocol(self, serializer: JsonRequestSerializer):
        assert isinstance(serializer, AccessRequestSerializer)

    def test_minimal_request_is_compact(self, serializer: JsonRequestSerializer):
        """Given no context or attributes, then only the ids are sent."""
        # Arrange
        request = AccessRequest(principal_id="casuser", service_id="app")

        # Act
        body = serializer.serialize(request)

        # Assert
        assert body == '{"principalId":"casuser","serviceId":"app"}'

    def test_context_and_attributes_included_when_set(self, serializer: JsonRequestSerializer):
        request = AccessRequest(
            principal_id="casuser",
            service_id="app",
            context={"clientIp": "10.0.0.1"},
            attributes={"groups": ["admins"]},
        )

        payload = json.loads(serializer.serialize(request))

        assert payload == {
            "principalId": "casuser",
            "serviceId": "app",
            "context": {"clientIp": "10.0.0.1"},
            "attributes": {"groups": ["admins"]},
        }

    def test_unserializable_context_raises_serialization_error(self, serializer: JsonRequestSerializer):
        """Given a context value with no JSON form, then SerializationError is raised."""
        # Arrange
        request = AccessRequest(principal_id="casuser", service_id="app", context={"handle": object()})

        # Act & Assert
        with pytest.raises(SerializationError, match="casuser"):
            serializer.serialize(request)


class TestAccessRequest:
    """AccessRequest model."""

    def test_accepts_camel_case_input(self):
        request = AccessRequest.model_validate({"principalId": "casuser", "serviceId": "app"})

        assert request.principal_id == "casuser"

    def test_empty_principal_rejected(self):
        with pytest.raises(ValueError):
            AccessRequest(principal_id="", service_id="app")
