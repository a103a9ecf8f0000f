"""Per-call authenticated request state.

A RequestContext is derived from the current ClientCredentials for exactly
one outbound call and then discarded. Nothing caches it, so a credential
rotation is visible on the very next call.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from synapsefi.core.constants import JSON_CONTENT_TYPE
from synapsefi.domain.value_objects.client_config import AuthHeaderNames
from synapsefi.domain.value_objects.client_credentials import ClientCredentials


@dataclass(frozen=True)
class RequestContext:
    """Headers for one authenticated call.

    Attributes:
        client_id: Client ID the headers were built from (safe to log).
        headers: Read-only header mapping, authentication included.
    """

    client_id: str
    headers: Mapping[str, str] = field(repr=False)

    @classmethod
    def from_credentials(
        cls,
        credentials: ClientCredentials,
        header_names: AuthHeaderNames,
    ) -> "RequestContext":
        """Build headers from credentials.

        Args:
            credentials: Credentials current at call time.
            header_names: Header names for each credential field.

        Returns:
            RequestContext with all four authentication headers plus JSON
            content negotiation headers.
        """
        headers = {
            "Content-Type": JSON_CONTENT_TYPE,
            "Accept": JSON_CONTENT_TYPE,
            header_names.client_id: credentials.client_id,
            header_names.client_secret: credentials.client_secret,
            header_names.fingerprint: credentials.fingerprint,
            header_names.ip_address: credentials.ip_address,
        }
        return cls(client_id=credentials.client_id, headers=MappingProxyType(headers))
