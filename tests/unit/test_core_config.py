"""
Unit tests for configuration management (flat Settings).

Tests cover:
- Settings loading from SYNAPSE_* environment variables
- Environment detection from developer_mode
- Validation (timeout, log level)
- Default values
- Cached singleton behavior
"""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from synapsefi.core.config import Settings, get_settings
from synapsefi.core.constants import (
    CLIENT_ID_HEADER_DEFAULT,
    PRODUCTION_BASE_URL,
    REQUEST_TIMEOUT_DEFAULT,
    SANDBOX_BASE_URL,
)
from synapsefi.core.enums import Environment


@pytest.fixture
def base_test_env():
    """Base environment dict for config tests."""
    return {
        "SYNAPSE_CLIENT_ID": "client_id_env",
        "SYNAPSE_CLIENT_SECRET": "client_secret_env",
        "SYNAPSE_FINGERPRINT": "fingerprint_env",
        "SYNAPSE_IP_ADDRESS": "10.0.0.1",
    }


@pytest.mark.unit
class TestEnvironmentEnum:
    """Test Environment enum."""

    def test_environment_values(self):
        assert Environment.PRODUCTION == "production"
        assert Environment.SANDBOX == "sandbox"


@pytest.mark.unit
class TestSettingsDefaults:
    """Test Settings default values."""

    def test_defaults_without_environment(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings()

        assert settings.client_id is None
        assert settings.developer_mode is False
        assert settings.timeout == REQUEST_TIMEOUT_DEFAULT
        assert settings.production_base_url == PRODUCTION_BASE_URL
        assert settings.sandbox_base_url == SANDBOX_BASE_URL
        assert settings.client_id_header == CLIENT_ID_HEADER_DEFAULT
        assert settings.log_level == "INFO"
        assert settings.log_console is False

    def test_missing_credentials_lists_all_unset_fields(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings()

        assert settings.missing_credentials == [
            "client_id",
            "client_secret",
            "fingerprint",
            "ip_address",
        ]

    def test_whitespace_credential_counts_as_missing(self, base_test_env):
        env_values = base_test_env | {"SYNAPSE_FINGERPRINT": "   "}
        with patch.dict(os.environ, env_values, clear=True):
            settings = Settings()

        assert settings.missing_credentials == ["fingerprint"]

    def test_loads_credentials_from_prefixed_env(self, base_test_env):
        with patch.dict(os.environ, base_test_env, clear=True):
            settings = Settings()

        assert settings.client_id == "client_id_env"
        assert settings.ip_address == "10.0.0.1"
        assert settings.missing_credentials == []


@pytest.mark.unit
class TestSettingsEnvironment:
    """Test developer mode → environment detection."""

    def test_production_by_default(self, base_test_env):
        with patch.dict(os.environ, base_test_env, clear=True):
            settings = Settings()

        assert settings.environment == Environment.PRODUCTION
        assert settings.is_sandbox is False

    def test_developer_mode_selects_sandbox(self, base_test_env):
        env_values = base_test_env | {"SYNAPSE_DEVELOPER_MODE": "true"}
        with patch.dict(os.environ, env_values, clear=True):
            settings = Settings()

        assert settings.environment == Environment.SANDBOX
        assert settings.is_sandbox is True


@pytest.mark.unit
class TestSettingsValidation:
    """Test Settings field validation."""

    def test_timeout_must_be_positive(self, base_test_env):
        env_values = base_test_env | {"SYNAPSE_TIMEOUT": "0"}
        with patch.dict(os.environ, env_values, clear=True):
            with pytest.raises(ValidationError) as exc_info:
                Settings()

        assert "timeout must be greater than 0" in str(exc_info.value)

    def test_log_level_is_normalized(self, base_test_env):
        env_values = base_test_env | {"SYNAPSE_LOG_LEVEL": "debug"}
        with patch.dict(os.environ, env_values, clear=True):
            settings = Settings()

        assert settings.log_level == "DEBUG"

    def test_unknown_log_level_rejected(self, base_test_env):
        env_values = base_test_env | {"SYNAPSE_LOG_LEVEL": "chatty"}
        with patch.dict(os.environ, env_values, clear=True):
            with pytest.raises(ValidationError):
                Settings()


@pytest.mark.unit
class TestGetSettings:
    """Test cached settings accessor."""

    def test_get_settings_is_cached(self, base_test_env):
        with patch.dict(os.environ, base_test_env, clear=True):
            first = get_settings()
            second = get_settings()

        assert first is second

    def test_cache_clear_reloads(self, base_test_env):
        with patch.dict(os.environ, base_test_env, clear=True):
            first = get_settings()
        get_settings.cache_clear()
        with patch.dict(os.environ, base_test_env | {"SYNAPSE_CLIENT_ID": "other"}, clear=True):
            second = get_settings()

        assert first is not second
        assert second.client_id == "other"
