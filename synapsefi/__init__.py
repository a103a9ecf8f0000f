"""synapsefi - Python client for the SynapseFI banking-as-a-service API.

Usage:
    from synapsefi import ClientConfig, ClientCredentials, Success, SynapseClient

    client = SynapseClient(
        ClientCredentials(
            client_id="client_id_abc",
            client_secret="client_secret_xyz",
            fingerprint="fp_123",
            ip_address="127.0.0.1",
        ),
        config=ClientConfig(developer_mode=True),
    )
    result = client.get_user("5c0abc...", partial_dehydrate=True)
    if isinstance(result, Success):
        print(result.value.legal_names)
"""

from synapsefi.core import Environment, ErrorCode, Failure, Result, Success
from synapsefi.core.config import Settings, get_settings
from synapsefi.domain.entities import User
from synapsefi.domain.enums import HttpMethod
from synapsefi.domain.errors import (
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
from synapsefi.domain.value_objects import (
    AuthHeaderNames,
    ClientConfig,
    ClientCredentials,
    RequestContext,
)
from synapsefi.infrastructure.synapse import SynapseClient, SynapseRequestBuilder

__version__ = "0.1.0"

__all__ = [
    "AuthHeaderNames",
    "ClientConfig",
    "ClientCredentials",
    "DecodeWarning",
    "EntityMappingError",
    "Environment",
    "ErrorCode",
    "Failure",
    "HttpMethod",
    "RequestContext",
    "Result",
    "Settings",
    "Success",
    "SynapseAuthenticationError",
    "SynapseClient",
    "SynapseError",
    "SynapseInvalidRequestError",
    "SynapseInvalidResponseError",
    "SynapseNotFoundError",
    "SynapseRateLimitError",
    "SynapseRequestBuilder",
    "SynapseTransportError",
    "UnsupportedMethodError",
    "User",
    "get_settings",
]
