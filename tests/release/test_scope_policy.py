"""Tests for ScopePolicy models and standard OIDC scopes."""

import pytest
from pydantic import ValidationError

from claim_acp.release import CUSTOM_SCOPE_TYPE, OidcScope, ScopePolicy, standard_scope_policy


class TestScopePolicy:
    """ScopePolicy validation."""

    def test_duplicate_allowed_attributes_keep_first_occurrence(self):
        """Given duplicates, then the first occurrence keeps its position."""
        # Act
        policy = ScopePolicy(scope_type="custom", allowed_attributes=["email", "name", "email"])

        # Assert
        assert policy.allowed_attributes == ("email", "name")

    def test_allowed_attributes_default_to_unset(self):
        policy = ScopePolicy(scope_type="custom")

        assert policy.allowed_attributes is None
        assert policy.claim_mappings == {}

    def test_blank_allowed_attribute_rejected(self):
        with pytest.raises(ValidationError, match="empty or whitespace"):
            ScopePolicy(scope_type="custom", allowed_attributes=["email", "  "])

    def test_blank_mapping_rejected(self):
        with pytest.raises(ValidationError, match="cannot be blank"):
            ScopePolicy(scope_type="custom", claim_mappings={"email": ""})

    def test_empty_scope_type_rejected(self):
        with pytest.raises(ValidationError):
            ScopePolicy(scope_type="")

    def test_policy_is_frozen(self):
        # Arrange
        policy = ScopePolicy(scope_type="email", allowed_attributes=["email"])

        # Act & Assert
        with pytest.raises(ValidationError):
            policy.scope_type = "profile"

    def test_collections_cannot_be_mutated_in_place(self):
        """Given a built policy, then its claim list and mapping table are read-only."""
        # Arrange
        policy = ScopePolicy(scope_type="email", allowed_attributes=["email"], claim_mappings={"email": "mail"})

        # Act & Assert
        with pytest.raises(AttributeError):
            policy.allowed_attributes.append("phone_number")  # type: ignore[union-attr]
        with pytest.raises(TypeError):
            policy.claim_mappings["email"] = "primaryMail"  # type: ignore[index]
        assert policy.claim_mappings == {"email": "mail"}

    def test_default_mappings_are_read_only(self):
        with pytest.raises(TypeError):
            ScopePolicy(scope_type="custom").claim_mappings["email"] = "mail"  # type: ignore[index]

    def test_dump_gives_plain_json_types(self):
        policy = ScopePolicy(scope_type="email", allowed_attributes=["email"], claim_mappings={"email": "mail"})

        dumped = policy.model_dump(mode="json")

        assert dumped == {"scope_type": "email", "allowed_attributes": ["email"], "claim_mappings": {"email": "mail"}}

    def test_is_standard(self):
        assert ScopePolicy(scope_type="email").is_standard
        assert not ScopePolicy(scope_type=CUSTOM_SCOPE_TYPE).is_standard


class TestStandardScopes:
    """standard_scope_policy() factory."""

    def test_email_scope_claims(self):
        # Act
        policy = standard_scope_policy(OidcScope.EMAIL)

        # Assert
        assert policy.scope_type == "email"
        assert policy.allowed_attributes == ("email", "email_verified")

    def test_accepts_scope_name(self):
        policy = standard_scope_policy("phone", claim_mappings={"phone_number": "mobile"})

        assert policy.allowed_attributes == ("phone_number", "phone_number_verified")
        assert policy.claim_mappings == {"phone_number": "mobile"}

    def test_profile_scope_starts_with_name(self):
        assert OidcScope.PROFILE.claims[0] == "name"
        assert "preferred_username" in OidcScope.PROFILE.claims

    def test_offline_access_releases_nothing(self):
        assert standard_scope_policy(OidcScope.OFFLINE_ACCESS).allowed_attributes == ()

    def test_unknown_scope_raises_value_error(self):
        with pytest.raises(ValueError):
            standard_scope_policy("groups")
