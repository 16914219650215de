"""Tests for RemoteAccessPolicy parsing of acceptable response codes."""

import pytest
from pydantic import ValidationError

from claim_acp.access import RemoteAccessPolicy


class TestAcceptableCodes:
    """Comma-delimited status codes."""

    def test_unset_codes_accept_nothing(self):
        """Given no acceptable codes configured, then every status is denied."""
        # Act
        policy = RemoteAccessPolicy(endpoint_url="https://authz.example.com/check")

        # Assert
        assert policy.acceptable_codes == frozenset()
        assert not policy.accepts(200)
        assert not policy.accepts(202)

    def test_entries_are_trimmed_and_empty_entries_dropped(self):
        """Given ' 200 , ,201,', then the codes are {'200', '201'}."""
        # Act
        policy = RemoteAccessPolicy(endpoint_url="https://authz.example.com", acceptable_response_codes=" 200 , ,201,")

        # Assert
        assert policy.acceptable_codes == frozenset({"200", "201"})

    def test_list_of_codes_accepted(self):
        policy = RemoteAccessPolicy(endpoint_url="https://authz.example.com", acceptable_response_codes=[200, 204])

        assert policy.acceptable_response_codes == "200,204"
        assert policy.accepts(204)

    def test_single_int_code_accepted(self):
        policy = RemoteAccessPolicy(endpoint_url="https://authz.example.com", acceptable_response_codes=200)

        assert policy.accepts(200)
        assert not policy.accepts(202)

    @pytest.mark.parametrize("status,expected", [(200, True), ("201", True), (403, False), (500, False)])
    def test_accepts(self, status, expected):
        policy = RemoteAccessPolicy(endpoint_url="https://authz.example.com", acceptable_response_codes="200,201")

        assert policy.accepts(status) is expected

    def test_empty_code_string_accepts_nothing(self):
        policy = RemoteAccessPolicy(endpoint_url="https://authz.example.com", acceptable_response_codes="")

        assert not policy.accepts(200)


class TestValidation:
    """Model validation."""

    def test_type_tag(self):
        assert RemoteAccessPolicy(endpoint_url="https://x").type == "remote_endpoint"

    def test_other_type_rejected(self):
        with pytest.raises(ValidationError):
            RemoteAccessPolicy(type="http_request", endpoint_url="https://x")

    def test_empty_url_rejected(self):
        with pytest.raises(ValidationError):
            RemoteAccessPolicy(endpoint_url="")

    def test_timeout_out_of_range_rejected(self):
        with pytest.raises(ValidationError):
            RemoteAccessPolicy(endpoint_url="https://x", timeout_seconds=0.1)
