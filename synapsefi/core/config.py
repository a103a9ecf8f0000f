"""
Configuration management using Pydantic Settings.

Type-safe, validated configuration loaded from environment variables with
the ``SYNAPSE_`` prefix. Applications that build clients from code can skip
this module entirely and pass ClientCredentials/ClientConfig directly.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Type validation via Pydantic

Usage:
    from synapsefi.core.config import get_settings
    from synapsefi import SynapseClient

    settings = get_settings()
    client = SynapseClient.from_settings(settings)

    if settings.is_sandbox:
        # Developer mode: calls go to the UAT host
"""

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

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


class Settings(BaseSettings):
    """
    Client settings (flat structure).

    Configuration precedence:
        1. Environment variables (SYNAPSE_CLIENT_ID, SYNAPSE_DEVELOPER_MODE, ...)
        2. Default values (only for non-sensitive config)

    Credentials default to None so that settings can be loaded for logging
    or host configuration alone; SynapseClient.from_settings rejects
    incomplete credentials.
    """

    # Client identity
    client_id: str | None = Field(
        default=None,
        description="Synapse client ID issued from the dashboard",
    )
    client_secret: str | None = Field(
        default=None,
        description="Synapse client secret (never logged)",
    )
    fingerprint: str | None = Field(
        default=None,
        description="Device fingerprint sent with every request",
    )
    ip_address: str | None = Field(
        default=None,
        description="IP address of the end user on whose behalf calls are made",
    )

    # Environment selection
    developer_mode: bool = Field(
        default=False,
        description="Send calls to the sandbox host instead of production",
    )
    production_base_url: str = Field(
        default=PRODUCTION_BASE_URL,
        description="Production API base URL",
    )
    sandbox_base_url: str = Field(
        default=SANDBOX_BASE_URL,
        description="Sandbox (developer mode) API base URL",
    )
    timeout: float = Field(
        default=REQUEST_TIMEOUT_DEFAULT,
        description="Per-call HTTP timeout in seconds",
    )

    # Authentication header names (external API contract)
    client_id_header: str = Field(default=CLIENT_ID_HEADER_DEFAULT)
    client_secret_header: str = Field(default=CLIENT_SECRET_HEADER_DEFAULT)
    fingerprint_header: str = Field(default=FINGERPRINT_HEADER_DEFAULT)
    ip_address_header: str = Field(default=IP_ADDRESS_HEADER_DEFAULT)

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_json: bool = Field(
        default=False,
        description="Render console logs as JSON instead of colored text",
    )
    log_console: bool = Field(
        default=False,
        description="Configure structlog console output when building a client from settings",
    )

    model_config = SettingsConfigDict(
        env_prefix="SYNAPSE_",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """
        Validate timeout is positive.

        Raises:
            ValueError: If timeout is zero or negative.
        """
        if v <= 0:
            raise ValueError("timeout must be greater than 0")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize log level and reject unknown names."""
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level

    @property
    def environment(self) -> Environment:
        """Environment selected by developer_mode."""
        return Environment.SANDBOX if self.developer_mode else Environment.PRODUCTION

    @property
    def is_sandbox(self) -> bool:
        """Check if running against the sandbox host."""
        return self.environment == Environment.SANDBOX

    @property
    def missing_credentials(self) -> list[str]:
        """Names of credential fields that are unset or blank."""
        fields = ("client_id", "client_secret", "fingerprint", "ip_address")
        return [name for name in fields if not (getattr(self, name) or "").strip()]


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings: Singleton settings instance loaded from the environment.
    """
    return Settings()
