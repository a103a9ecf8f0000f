"""Client configuration value objects.

ClientConfig replaces process-wide state: developer mode, hosts, timeout
and header names are all fixed per client at construction time.
"""

from dataclasses import dataclass, field

from synapsefi.core.constants import (
    CLIENT_ID_HEADER_DEFAULT,
    CLIENT_SECRET_HEADER_DEFAULT,
    FINGERPRINT_HEADER_DEFAULT,
    IP_ADDRESS_HEADER_DEFAULT,
    PRODUCTION_BASE_URL,
    REQUEST_TIMEOUT_DEFAULT,
    SANDBOX_BASE_URL,
)
from synapsefi.core.enums import Environment


@dataclass(frozen=True)
class AuthHeaderNames:
    """Header names carrying each credential field.

    The defaults are deployment-supplied values, not fixed by this library.
    Set them per client (or via SYNAPSE_*_HEADER settings) to match the API
    or gateway actually in front of the client.
    """

    client_id: str = CLIENT_ID_HEADER_DEFAULT
    client_secret: str = CLIENT_SECRET_HEADER_DEFAULT
    fingerprint: str = FINGERPRINT_HEADER_DEFAULT
    ip_address: str = IP_ADDRESS_HEADER_DEFAULT

    def __post_init__(self) -> None:
        names = [self.client_id, self.client_secret, self.fingerprint, self.ip_address]
        if any(not name or not name.strip() for name in names):
            raise ValueError("header names must be non-empty")
        if len({name.lower() for name in names}) != len(names):
            raise ValueError("header names must be distinct")


@dataclass(frozen=True)
class ClientConfig:
    """Per-client configuration.

    Attributes:
        developer_mode: Route calls to the sandbox host.
        timeout: Per-call HTTP timeout in seconds.
        header_names: Authentication header names.
        production_base_url: Host used when developer_mode is False.
        sandbox_base_url: Host used when developer_mode is True.

    Example:
        >>> config = ClientConfig(developer_mode=True)
        >>> config.base_url
        'https://uat-api.synapsefi.com/v3.1'
    """

    developer_mode: bool = False
    timeout: float = REQUEST_TIMEOUT_DEFAULT
    header_names: AuthHeaderNames = field(default_factory=AuthHeaderNames)
    production_base_url: str = PRODUCTION_BASE_URL
    sandbox_base_url: str = SANDBOX_BASE_URL

    def __post_init__(self) -> None:
        """Validate configuration.

        Raises:
            ValueError: If timeout is not positive or a base URL is blank.
        """
        if self.timeout <= 0:
            raise ValueError("timeout must be greater than 0")
        if not self.production_base_url or not self.sandbox_base_url:
            raise ValueError("base URLs must be non-empty")

    @property
    def environment(self) -> Environment:
        """Environment selected by developer_mode."""
        return Environment.SANDBOX if self.developer_mode else Environment.PRODUCTION

    @property
    def base_url(self) -> str:
        """Base URL for the selected environment, without trailing slash."""
        if self.environment == Environment.SANDBOX:
            return self.sandbox_base_url.rstrip("/")
        return self.production_base_url.rstrip("/")
