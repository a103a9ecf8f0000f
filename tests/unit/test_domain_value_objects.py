"""Unit tests for client value objects.

Tests cover:
- ClientCredentials validation, immutability and rotation copies
- AuthHeaderNames validation
- ClientConfig validation and environment selection
- RequestContext header derivation
"""

from dataclasses import FrozenInstanceError

import pytest

from synapsefi.core.enums import Environment
from synapsefi.domain.value_objects import (
    AuthHeaderNames,
    ClientConfig,
    ClientCredentials,
    RequestContext,
)


# =============================================================================
# ClientCredentials
# =============================================================================


@pytest.mark.unit
class TestClientCredentials:
    """Test ClientCredentials value object."""

    def test_is_immutable(self, credentials: ClientCredentials):
        with pytest.raises(FrozenInstanceError):
            credentials.client_id = "other"  # type: ignore[misc]

    @pytest.mark.parametrize("field_name", ["client_id", "client_secret", "fingerprint", "ip_address"])
    def test_blank_field_rejected(self, field_name: str):
        values = {
            "client_id": "id",
            "client_secret": "secret",
            "fingerprint": "fp",
            "ip_address": "127.0.0.1",
        }
        values[field_name] = "  "

        with pytest.raises(ValueError, match=field_name):
            ClientCredentials(**values)

    def test_non_string_rejected(self):
        with pytest.raises(ValueError, match="ip_address"):
            ClientCredentials(
                client_id="id",
                client_secret="secret",
                fingerprint="fp",
                ip_address=None,  # type: ignore[arg-type]
            )

    def test_repr_hides_secret_and_fingerprint(self, credentials: ClientCredentials):
        text = repr(credentials)

        assert "client_id_test" in text
        assert "client_secret_test" not in text
        assert "fingerprint_test" not in text

    def test_with_changes_returns_new_instance(self, credentials: ClientCredentials):
        rotated = credentials.with_changes(client_secret="rotated_secret")

        assert rotated is not credentials
        assert rotated.client_secret == "rotated_secret"
        assert rotated.client_id == credentials.client_id
        assert credentials.client_secret == "client_secret_test"

    def test_with_changes_validates(self, credentials: ClientCredentials):
        with pytest.raises(ValueError):
            credentials.with_changes(fingerprint="")

    def test_with_changes_rejects_unknown_field(self, credentials: ClientCredentials):
        with pytest.raises(TypeError):
            credentials.with_changes(password="x")


# =============================================================================
# AuthHeaderNames / ClientConfig
# =============================================================================


@pytest.mark.unit
class TestAuthHeaderNames:
    """Test AuthHeaderNames validation."""

    def test_defaults(self):
        names = AuthHeaderNames()

        assert names.client_id == "X-SP-CLIENT-ID"
        assert names.ip_address == "X-SP-USER-IP"

    def test_empty_name_rejected(self):
        with pytest.raises(ValueError, match="non-empty"):
            AuthHeaderNames(fingerprint="")

    def test_duplicate_names_rejected_case_insensitively(self):
        with pytest.raises(ValueError, match="distinct"):
            AuthHeaderNames(client_id="X-Id", client_secret="x-id")


@pytest.mark.unit
class TestClientConfig:
    """Test ClientConfig."""

    def test_defaults_to_production(self):
        config = ClientConfig()

        assert config.environment == Environment.PRODUCTION
        assert config.base_url == "https://api.synapsefi.com/v3.1"

    def test_developer_mode_selects_sandbox(self, sandbox_config: ClientConfig):
        assert sandbox_config.environment == Environment.SANDBOX
        assert sandbox_config.base_url == "https://uat-api.synapsefi.com/v3.1"

    def test_base_url_strips_trailing_slash(self):
        config = ClientConfig(production_base_url="https://proxy.local/v3.1/")

        assert config.base_url == "https://proxy.local/v3.1"

    @pytest.mark.parametrize("timeout", [0, -1.5])
    def test_non_positive_timeout_rejected(self, timeout: float):
        with pytest.raises(ValueError, match="timeout"):
            ClientConfig(timeout=timeout)

    def test_blank_base_url_rejected(self):
        with pytest.raises(ValueError, match="base URLs"):
            ClientConfig(sandbox_base_url="")


# =============================================================================
# RequestContext
# =============================================================================


@pytest.mark.unit
class TestRequestContext:
    """Test RequestContext.from_credentials."""

    def test_carries_all_auth_headers(self, credentials: ClientCredentials):
        context = RequestContext.from_credentials(credentials, AuthHeaderNames())

        assert context.client_id == "client_id_test"
        assert context.headers["X-SP-CLIENT-ID"] == "client_id_test"
        assert context.headers["X-SP-CLIENT-SECRET"] == "client_secret_test"
        assert context.headers["X-SP-USER-FINGERPRINT"] == "fingerprint_test"
        assert context.headers["X-SP-USER-IP"] == "127.0.0.1"
        assert context.headers["Content-Type"] == "application/json"
        assert context.headers["Accept"] == "application/json"

    def test_custom_header_names(self, credentials: ClientCredentials):
        names = AuthHeaderNames(
            client_id="X-Gateway-Client",
            client_secret="X-Gateway-Secret",
            fingerprint="X-Gateway-Fp",
            ip_address="X-Gateway-Ip",
        )

        context = RequestContext.from_credentials(credentials, names)

        assert context.headers["X-Gateway-Secret"] == "client_secret_test"
        assert "X-SP-CLIENT-SECRET" not in context.headers

    def test_headers_are_read_only(self, credentials: ClientCredentials):
        context = RequestContext.from_credentials(credentials, AuthHeaderNames())

        with pytest.raises(TypeError):
            context.headers["X-SP-CLIENT-ID"] = "other"  # type: ignore[index]

    def test_repr_hides_headers(self, credentials: ClientCredentials):
        context = RequestContext.from_credentials(credentials, AuthHeaderNames())

        assert "client_secret_test" not in repr(context)
