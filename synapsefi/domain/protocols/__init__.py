"""Domain protocols (ports)."""

from synapsefi.domain.protocols.logger_protocol import LoggerProtocol
from synapsefi.domain.protocols.user_scoped_client_protocol import (
    UserScopedClientProtocol,
)

__all__ = ["LoggerProtocol", "UserScopedClientProtocol"]
