"""Client identity value object.

Immutable value object holding the four identity fields the Synapse API
expects on every request. Rotation means building a new instance and
handing it to the client; the client derives request headers from its
current credentials on every call.

Usage:
    from synapsefi.domain.value_objects import ClientCredentials

    credentials = ClientCredentials(
        client_id="client_id_abc",
        client_secret="client_secret_xyz",
        fingerprint="e83cf6ddcf778e37bfe3d48fc78a6502062fc",
        ip_address="127.0.0.1",
    )
    rotated = credentials.with_changes(client_secret="new_secret")
"""

from dataclasses import dataclass, field, fields, replace
from typing import Any


@dataclass(frozen=True)
class ClientCredentials:
    """Identity attached to every outbound request.

    Attributes:
        client_id: Client ID issued by Synapse.
        client_secret: Client secret issued by Synapse.
        fingerprint: Device fingerprint used by the API for fraud detection.
        ip_address: IP address of the end user.

    Immutability:
        Frozen dataclass. Secret and fingerprint are excluded from repr so
        they never end up in logs or tracebacks.
    """

    client_id: str
    client_secret: str = field(repr=False)
    fingerprint: str = field(repr=False)
    ip_address: str

    def __post_init__(self) -> None:
        """Validate credentials after initialization.

        Raises:
            ValueError: If any field is not a non-blank string.
        """
        for credential_field in fields(self):
            value = getattr(self, credential_field.name)
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"{credential_field.name} must be a non-empty string")

    def with_changes(self, **changes: Any) -> "ClientCredentials":
        """Return a copy with the given fields replaced.

        Raises:
            ValueError: If a replaced field is invalid.
            TypeError: If an unknown field name is passed.
        """
        return replace(self, **changes)
