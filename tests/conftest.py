"""Pytest configuration and shared fixtures.

This configuration ensures:
1. Markers for unit and integration tests are registered
2. Every test gets fresh credentials and configuration
3. Cached settings never leak between tests
"""

from collections.abc import Iterator

import httpx
import pytest

from synapsefi.core.config import get_settings
from synapsefi.domain.value_objects import ClientConfig, ClientCredentials

SANDBOX_URL = "https://uat-api.synapsefi.com/v3.1"
PRODUCTION_URL = "https://api.synapsefi.com/v3.1"


@pytest.fixture
def credentials() -> ClientCredentials:
    """Create test client credentials."""
    return ClientCredentials(
        client_id="client_id_test",
        client_secret="client_secret_test",
        fingerprint="fingerprint_test",
        ip_address="127.0.0.1",
    )


@pytest.fixture
def sandbox_config() -> ClientConfig:
    """Create developer-mode configuration with a short timeout."""
    return ClientConfig(developer_mode=True, timeout=5.0)


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Iterator[None]:
    """Ensure get_settings() is re-read for every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class RecordingTransport(httpx.MockTransport):
    """MockTransport that records every request it receives.

    Usage:
        transport = RecordingTransport(json={"users": []})
        ...
        assert transport.requests[0].method == "GET"
    """

    def __init__(
        self,
        *,
        status_code: int = 200,
        json: object | None = None,
        content: bytes | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        self.requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            if json is not None:
                return httpx.Response(status_code, json=json, headers=headers)
            return httpx.Response(status_code, content=content or b"", headers=headers)

        super().__init__(handler)


@pytest.fixture
def make_transport() -> type[RecordingTransport]:
    """Factory for recording transports with a canned response."""
    return RecordingTransport


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Client tests against a mocked HTTP layer"
    )
