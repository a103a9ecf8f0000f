"""Machine-readable error codes.

Codes follow the ENTITY_REASON naming convention and travel inside
DomainError instances returned through Result types.

Categories:
- Request construction errors (UNSUPPORTED_METHOD, INVALID_REQUEST)
- Transport errors (SYNAPSE_UNAVAILABLE, SYNAPSE_TIMEOUT)
- Remote status errors (SYNAPSE_*)
- Decoding errors (RESPONSE_*, ENTITY_MAPPING_FAILED)
"""

from enum import Enum


class ErrorCode(Enum):
    """Error codes for Synapse client failures."""

    # Request construction
    INVALID_REQUEST = "invalid_request"
    UNSUPPORTED_METHOD = "unsupported_method"

    # Transport
    SYNAPSE_UNAVAILABLE = "synapse_unavailable"
    SYNAPSE_TIMEOUT = "synapse_timeout"

    # Remote status
    SYNAPSE_AUTHENTICATION_FAILED = "synapse_authentication_failed"
    SYNAPSE_RATE_LIMITED = "synapse_rate_limited"
    SYNAPSE_RESOURCE_NOT_FOUND = "synapse_resource_not_found"
    SYNAPSE_UNEXPECTED_STATUS = "synapse_unexpected_status"

    # Decoding
    RESPONSE_BODY_EMPTY = "response_body_empty"
    RESPONSE_DECODE_FAILED = "response_decode_failed"
    ENTITY_MAPPING_FAILED = "entity_mapping_failed"
