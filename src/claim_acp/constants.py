"""Application-wide constants for claim-acp.

Constants that define application behavior.
For user-configurable settings per deployment, see config.py.
"""

__all__ = [
    # Application identity
    "APP_NAME",
    # Remote access check
    "USERNAME_QUERY_PARAM",
    "DEFAULT_HTTP_TIMEOUT_SECONDS",
    "MIN_HTTP_TIMEOUT_SECONDS",
    "MAX_HTTP_TIMEOUT_SECONDS",
    "JSON_CONTENT_TYPE",
    # OIDC scopes and claims
    "STANDARD_SCOPE_CLAIMS",
    "DEFAULT_SUPPORTED_CLAIMS",
    # Logging
    "SYSTEM_LOG_FILENAME",
    "DECISIONS_LOG_FILENAME",
]

# =============================================================================
# Application identity
# =============================================================================

APP_NAME = "claim-acp"

# =============================================================================
# Remote access check
# =============================================================================

# Query parameter carrying the principal id on the remote request
USERNAME_QUERY_PARAM = "username"

# Remote endpoint timeout (seconds). A request that exceeds it is a transport
# error, never a silent deny.
DEFAULT_HTTP_TIMEOUT_SECONDS = 5
MIN_HTTP_TIMEOUT_SECONDS = 1
MAX_HTTP_TIMEOUT_SECONDS = 300

JSON_CONTENT_TYPE = "application/json"

# =============================================================================
# OIDC scopes and claims
# =============================================================================

# Claims bundled by each standard OIDC scope (OpenID Connect Core 1.0, 5.4)
STANDARD_SCOPE_CLAIMS: dict[str, tuple[str, ...]] = {
    "openid": ("sub",),
    "profile": (
        "name",
        "family_name",
        "given_name",
        "middle_name",
        "nickname",
        "preferred_username",
        "profile",
        "picture",
        "website",
        "gender",
        "birthdate",
        "zoneinfo",
        "locale",
        "updated_at",
    ),
    "email": ("email", "email_verified"),
    "address": ("address",),
    "phone": ("phone_number", "phone_number_verified"),
    "offline_access": (),
}

# Claims advertised in discovery metadata when the provider config names none
DEFAULT_SUPPORTED_CLAIMS: tuple[str, ...] = (
    "sub",
    *STANDARD_SCOPE_CLAIMS["profile"],
    *STANDARD_SCOPE_CLAIMS["email"],
    *STANDARD_SCOPE_CLAIMS["address"],
    *STANDARD_SCOPE_CLAIMS["phone"],
)

# =============================================================================
# Logging
# =============================================================================

SYSTEM_LOG_FILENAME = "system.jsonl"
DECISIONS_LOG_FILENAME = "decisions.jsonl"
