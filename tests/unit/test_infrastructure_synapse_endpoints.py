"""Unit tests for the Synapse endpoint table."""

import pytest

from synapsefi.domain.enums import HttpMethod
from synapsefi.infrastructure.synapse.endpoints import ENDPOINTS, Endpoint


@pytest.mark.unit
class TestEndpointTable:
    """Test ENDPOINTS contents."""

    @pytest.mark.parametrize(
        ("name", "method", "path"),
        [
            ("get_nodes", HttpMethod.GET, "nodes"),
            ("get_crypto_market_data", HttpMethod.GET, "nodes/crypto-market-watch"),
            ("get_crypto_quotes", HttpMethod.GET, "nodes/crypto-quotes"),
            ("locate_atms", HttpMethod.GET, "nodes/atms"),
            ("get_institutions", HttpMethod.GET, "institutions"),
            ("get_subscriptions", HttpMethod.GET, "subscriptions"),
            ("create_subscription", HttpMethod.POST, "subscriptions"),
            ("get_transactions", HttpMethod.GET, "trans"),
            ("get_users", HttpMethod.GET, "users"),
            ("create_user", HttpMethod.POST, "users"),
        ],
    )
    def test_static_paths(self, name: str, method: HttpMethod, path: str):
        endpoint = ENDPOINTS[name]

        assert endpoint.method is method
        assert endpoint.render_path() == path

    def test_user_paths(self):
        assert ENDPOINTS["get_user"].render_path({"user_id": "u1"}) == "users/u1"
        assert ENDPOINTS["update_user"].method is HttpMethod.PATCH
        assert (
            ENDPOINTS["get_user_transactions"].render_path({"user_id": "u1"})
            == "users/u1/trans"
        )

    def test_subscription_paths(self):
        endpoint = ENDPOINTS["update_subscription"]

        assert endpoint.method is HttpMethod.PATCH
        assert endpoint.render_path({"subscription_id": "s1"}) == "subscriptions/s1"

    def test_public_key_path_embeds_scope_verbatim(self):
        path = ENDPOINTS["get_public_key"].render_path({"scope": "USERS|GET,USER|GET"})

        assert path == "client?issue_public_key=YES&scope=USERS|GET,USER|GET"

    def test_public_key_scope_is_not_quoted(self):
        path = ENDPOINTS["get_public_key"].render_path({"scope": "USERS|GET&x=1"})

        assert path.endswith("scope=USERS|GET&x=1")

    def test_body_required_only_for_writes(self):
        requiring = {name for name, e in ENDPOINTS.items() if e.requires_body}

        assert requiring == {
            "create_subscription",
            "update_subscription",
            "create_user",
            "update_user",
        }

    def test_names_match_keys(self):
        for name, endpoint in ENDPOINTS.items():
            assert endpoint.name == name


@pytest.mark.unit
class TestEndpointRenderPath:
    """Test Endpoint.render_path."""

    def test_missing_parameter_raises_key_error(self):
        endpoint = Endpoint(name="x", method=HttpMethod.GET, path_template="users/{user_id}")

        with pytest.raises(KeyError):
            endpoint.render_path({})
