"""Domain errors package.

Usage:
    from synapsefi.domain.errors import SynapseError, UnsupportedMethodError
"""

from synapsefi.domain.errors.synapse_error import (
    DecodeWarning,
    EntityMappingError,
    SynapseAuthenticationError,
    SynapseError,
    SynapseInvalidRequestError,
    SynapseInvalidResponseError,
    SynapseNotFoundError,
    SynapseRateLimitError,
    SynapseTransportError,
    UnsupportedMethodError,
)

__all__ = [
    "DecodeWarning",
    "EntityMappingError",
    "SynapseAuthenticationError",
    "SynapseError",
    "SynapseInvalidRequestError",
    "SynapseInvalidResponseError",
    "SynapseNotFoundError",
    "SynapseRateLimitError",
    "SynapseTransportError",
    "UnsupportedMethodError",
]
