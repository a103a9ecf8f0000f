"""Declarative table of Synapse API endpoints.

Each entry names one remote operation: its verb, path template and whether
a body is mandatory. SynapseClient.call interprets entries; the typed
wrapper methods on the client only pick an entry and fill in arguments.

Paths are relative to the environment base URL, e.g.
``https://api.synapsefi.com/v3.1`` + ``/users/{user_id}``.
"""

from dataclasses import dataclass
from typing import Any

from synapsefi.domain.enums import HttpMethod

NODES_PATH = "nodes"
INSTITUTIONS_PATH = "institutions"
SUBSCRIPTIONS_PATH = "subscriptions"
TRANSACTIONS_PATH = "trans"
USERS_PATH = "users"
CLIENT_PATH = "client"


@dataclass(frozen=True, slots=True, kw_only=True)
class Endpoint:
    """One remote operation.

    Attributes:
        name: Stable operation name (also used as the log ``operation``).
        method: HTTP verb.
        path_template: ``str.format`` template relative to the base URL.
        requires_body: Whether the call must carry a JSON body.
    """

    name: str
    method: HttpMethod
    path_template: str
    requires_body: bool = False

    def render_path(self, path_params: dict[str, Any] | None = None) -> str:
        """Fill in the path template.

        Raises:
            KeyError: If a template parameter is missing.
        """
        return self.path_template.format(**(path_params or {}))


_ENDPOINTS: tuple[Endpoint, ...] = (
    # Nodes
    Endpoint(name="get_nodes", method=HttpMethod.GET, path_template=NODES_PATH),
    Endpoint(
        name="get_crypto_market_data",
        method=HttpMethod.GET,
        path_template=f"{NODES_PATH}/crypto-market-watch",
    ),
    Endpoint(
        name="get_crypto_quotes",
        method=HttpMethod.GET,
        path_template=f"{NODES_PATH}/crypto-quotes",
    ),
    Endpoint(name="locate_atms", method=HttpMethod.GET, path_template=f"{NODES_PATH}/atms"),
    # Institutions
    Endpoint(name="get_institutions", method=HttpMethod.GET, path_template=INSTITUTIONS_PATH),
    # Client
    Endpoint(
        name="get_public_key",
        method=HttpMethod.GET,
        path_template=f"{CLIENT_PATH}?issue_public_key=YES&scope={{scope}}",
    ),
    # Subscriptions
    Endpoint(name="get_subscriptions", method=HttpMethod.GET, path_template=SUBSCRIPTIONS_PATH),
    Endpoint(
        name="get_subscription",
        method=HttpMethod.GET,
        path_template=f"{SUBSCRIPTIONS_PATH}/{{subscription_id}}",
    ),
    Endpoint(
        name="create_subscription",
        method=HttpMethod.POST,
        path_template=SUBSCRIPTIONS_PATH,
        requires_body=True,
    ),
    Endpoint(
        name="update_subscription",
        method=HttpMethod.PATCH,
        path_template=f"{SUBSCRIPTIONS_PATH}/{{subscription_id}}",
        requires_body=True,
    ),
    # Transactions
    Endpoint(name="get_transactions", method=HttpMethod.GET, path_template=TRANSACTIONS_PATH),
    # Users
    Endpoint(name="get_users", method=HttpMethod.GET, path_template=USERS_PATH),
    Endpoint(
        name="get_user",
        method=HttpMethod.GET,
        path_template=f"{USERS_PATH}/{{user_id}}",
    ),
    Endpoint(
        name="create_user",
        method=HttpMethod.POST,
        path_template=USERS_PATH,
        requires_body=True,
    ),
    Endpoint(
        name="update_user",
        method=HttpMethod.PATCH,
        path_template=f"{USERS_PATH}/{{user_id}}",
        requires_body=True,
    ),
    Endpoint(
        name="get_user_transactions",
        method=HttpMethod.GET,
        path_template=f"{USERS_PATH}/{{user_id}}/{TRANSACTIONS_PATH}",
    ),
)

ENDPOINTS: dict[str, Endpoint] = {endpoint.name: endpoint for endpoint in _ENDPOINTS}
"""Endpoints keyed by operation name."""
