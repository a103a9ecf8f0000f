"""LoggerProtocol definition for structured logging.

The client logs through any object with this shape. A structlog bound
logger satisfies it structurally, as does ConsoleAdapter.

Security:
    - NEVER log client secrets or fingerprints
    - Client IDs and request paths are safe to log

Usage:
    from synapsefi.domain.protocols import LoggerProtocol

    def build(logger: LoggerProtocol) -> None:
        request_logger = logger.bind(client_id="client_id_abc")
        request_logger.info("synapse_api_request_started", method="GET")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    All logging calls are structured: event name + key-value context.
    """

    def debug(self, message: str, /, **context: Any) -> Any:
        """Log a debug-level message."""
        ...

    def info(self, message: str, /, **context: Any) -> Any:
        """Log an info-level message."""
        ...

    def warning(self, message: str, /, **context: Any) -> Any:
        """Log a warning-level message."""
        ...

    def error(self, message: str, /, **context: Any) -> Any:
        """Log an error-level message."""
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return a logger with context bound to all subsequent calls."""
        ...
