"""SynapseFI API integration.

Provides the request builder (credential signing and dispatch), the
permissive response decoder, the declarative endpoint table and the
SynapseClient facade.

Reference:
    - https://docs.synapsefi.com
"""

from synapsefi.infrastructure.synapse.endpoints import ENDPOINTS, Endpoint
from synapsefi.infrastructure.synapse.mappers import SynapseUserMapper
from synapsefi.infrastructure.synapse.request_builder import (
    SynapseRequestBuilder,
    build_url,
)
from synapsefi.infrastructure.synapse.response_decoder import (
    decode_response,
    try_decode,
)
from synapsefi.infrastructure.synapse.synapse_client import SynapseClient

__all__ = [
    "ENDPOINTS",
    "Endpoint",
    "SynapseClient",
    "SynapseRequestBuilder",
    "SynapseUserMapper",
    "build_url",
    "decode_response",
    "try_decode",
]
