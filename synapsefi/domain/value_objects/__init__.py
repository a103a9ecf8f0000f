"""Domain value objects."""

from synapsefi.domain.value_objects.client_config import AuthHeaderNames, ClientConfig
from synapsefi.domain.value_objects.client_credentials import ClientCredentials
from synapsefi.domain.value_objects.request_context import RequestContext

__all__ = [
    "AuthHeaderNames",
    "ClientConfig",
    "ClientCredentials",
    "RequestContext",
]
