"""Centralized constants for internal implementation details.

Values here are fixed properties of the remote API or of this client, NOT
per-deployment configuration. For configuration loaded from the
environment, use `synapsefi/core/config.py` instead.

Categories:
- Hosts: Production and sandbox base URLs
- Timeouts: Default per-call timeout
- Headers: Default authentication header names and content type
- Scopes: Default public-key scope
- Limits: Truncation and safety limits
"""

# =============================================================================
# Hosts
# =============================================================================

PRODUCTION_BASE_URL: str = "https://api.synapsefi.com/v3.1"
"""Base URL used when developer mode is off."""

SANDBOX_BASE_URL: str = "https://uat-api.synapsefi.com/v3.1"
"""Base URL used when developer mode is on."""


# =============================================================================
# Timeouts
# =============================================================================

REQUEST_TIMEOUT_DEFAULT: float = 30.0
"""Default timeout for a single API call in seconds."""


# =============================================================================
# Headers
# =============================================================================

# Deployment defaults; override via AuthHeaderNames or SYNAPSE_*_HEADER.
CLIENT_ID_HEADER_DEFAULT: str = "X-SP-CLIENT-ID"
CLIENT_SECRET_HEADER_DEFAULT: str = "X-SP-CLIENT-SECRET"
FINGERPRINT_HEADER_DEFAULT: str = "X-SP-USER-FINGERPRINT"
IP_ADDRESS_HEADER_DEFAULT: str = "X-SP-USER-IP"

JSON_CONTENT_TYPE: str = "application/json"
"""Content type sent and accepted on every call."""


# =============================================================================
# Public key issuance
# =============================================================================

DEFAULT_PUBLIC_KEY_SCOPE: str = (
    "OAUTH|POST,USERS|POST,USERS|GET,USER|GET,USER|PATCH,"
    "SUBSCRIPTIONS|GET,SUBSCRIPTIONS|POST,SUBSCRIPTION|GET,SUBSCRIPTION|PATCH,"
    "CLIENT|REPORTS,CLIENT|CONTROLS"
)
"""Scope requested when get_public_key is called without an explicit scope."""


# =============================================================================
# Response Limits
# =============================================================================

RESPONSE_BODY_MAX_LENGTH: int = 500
"""Maximum length for response body in error messages (truncation limit)."""
