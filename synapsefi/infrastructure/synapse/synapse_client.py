"""SynapseFI v3.1 API client.

Typed facade over the endpoint table. Every public method:
1. Picks an Endpoint from ENDPOINTS
2. Fills in path parameters, body and query strings
3. Dispatches through SynapseRequestBuilder with the credentials current
   at call time
4. Decodes the body permissively and, for user-shaped responses, maps it
   onto a User bound to this client

Configuration:
    Build from code (ClientCredentials + ClientConfig) or from environment
    variables via SynapseClient.from_settings (synapsefi/core/config.py).

Concurrency:
    Calls are synchronous and blocking, one HTTP round trip each. The
    credentials attribute is replaced atomically by assignment; callers
    rotating credentials while other threads issue calls must synchronize
    externally if they need a specific call to see a specific value.

Usage:
    client = SynapseClient(
        ClientCredentials(
            client_id="client_id_abc",
            client_secret="client_secret_xyz",
            fingerprint="fp_123",
            ip_address="127.0.0.1",
        ),
        config=ClientConfig(developer_mode=True),
    )
    match client.get_users("per_page=20"):
        case Success(value=payload):
            print(payload["users_count"])
        case Failure(error=error):
            print(f"Failed: {error.message}")
"""

from collections.abc import Iterable, Sequence
from typing import Any

import httpx
import structlog

from synapsefi.core.config import Settings, get_settings
from synapsefi.core.constants import DEFAULT_PUBLIC_KEY_SCOPE
from synapsefi.core.enums import Environment, ErrorCode
from synapsefi.core.result import Failure, Result, Success
from synapsefi.domain.entities import User
from synapsefi.domain.enums import HttpMethod
from synapsefi.domain.errors import SynapseError, SynapseInvalidRequestError
from synapsefi.domain.protocols import LoggerProtocol
from synapsefi.domain.types import GenericResponse
from synapsefi.domain.value_objects import AuthHeaderNames, ClientConfig, ClientCredentials
from synapsefi.infrastructure.logging import ConsoleAdapter
from synapsefi.infrastructure.synapse.endpoints import ENDPOINTS
from synapsefi.infrastructure.synapse.mappers import SynapseUserMapper
from synapsefi.infrastructure.synapse.request_builder import SynapseRequestBuilder
from synapsefi.infrastructure.synapse.response_decoder import decode_response

FULL_DEHYDRATE_PARAM = "full_dehydrate=yes"


class SynapseClient:
    """Client for the SynapseFI REST API.

    Attributes:
        credentials: Identity attached to every call. Replace it (or use
            rotate_credentials) to rotate; the next call picks it up.
        config: Immutable per-client configuration.
    """

    def __init__(
        self,
        credentials: ClientCredentials,
        *,
        config: ClientConfig | None = None,
        transport: httpx.BaseTransport | None = None,
        logger: LoggerProtocol | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            credentials: Client identity.
            config: Host, timeout and header configuration. Defaults to
                production with default header names.
            transport: Optional httpx transport for every call.
            logger: Structured logger; defaults to structlog.
        """
        self.credentials = credentials
        self._config = config or ClientConfig()
        self._logger: LoggerProtocol = logger or structlog.get_logger("synapse_api")
        self._builder = SynapseRequestBuilder(
            config=self._config,
            transport=transport,
            logger=self._logger,
        )
        self._user_mapper = SynapseUserMapper()

        self._logger.info(
            "synapse_client_initialized",
            client_id=credentials.client_id,
            environment=self._config.environment.value,
            base_url=self._config.base_url,
        )

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> "SynapseClient":
        """Build a client from environment-backed settings.

        Raises:
            ValueError: If any credential setting is missing.
        """
        settings = settings or get_settings()

        missing = settings.missing_credentials
        if missing:
            raise ValueError(f"Missing Synapse credential settings: {', '.join(missing)}")

        credentials = ClientCredentials(
            client_id=settings.client_id or "",
            client_secret=settings.client_secret or "",
            fingerprint=settings.fingerprint or "",
            ip_address=settings.ip_address or "",
        )
        config = ClientConfig(
            developer_mode=settings.developer_mode,
            timeout=settings.timeout,
            header_names=AuthHeaderNames(
                client_id=settings.client_id_header,
                client_secret=settings.client_secret_header,
                fingerprint=settings.fingerprint_header,
                ip_address=settings.ip_address_header,
            ),
            production_base_url=settings.production_base_url,
            sandbox_base_url=settings.sandbox_base_url,
        )
        logger = (
            ConsoleAdapter(use_json=settings.log_json, level=settings.log_level)
            if settings.log_console
            else None
        )
        return cls(credentials, config=config, transport=transport, logger=logger)

    # =========================================================================
    # Credentials and configuration
    # =========================================================================

    @property
    def credentials(self) -> ClientCredentials:
        return self._credentials

    @credentials.setter
    def credentials(self, value: ClientCredentials) -> None:
        if not isinstance(value, ClientCredentials):
            raise TypeError("credentials must be a ClientCredentials instance")
        self._credentials = value

    def rotate_credentials(self, **changes: Any) -> ClientCredentials:
        """Replace some credential fields; effective from the next call.

        Returns:
            The new credentials.
        """
        self.credentials = self._credentials.with_changes(**changes)
        self._logger.info(
            "synapse_client_credentials_rotated",
            client_id=self._credentials.client_id,
            fields=sorted(changes),
        )
        return self._credentials

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def environment(self) -> Environment:
        return self._config.environment

    # =========================================================================
    # Generic dispatch
    # =========================================================================

    def request(
        self,
        method: str | HttpMethod,
        path: str,
        data: str | None = None,
        *query_params: str,
    ) -> Result[GenericResponse, SynapseError]:
        """Issue an arbitrary call and decode its body.

        Args:
            method: HTTP verb. Unsupported verbs fail without network access.
            path: Path relative to the base URL.
            data: Pre-serialized JSON body (POST/PATCH).
            *query_params: Raw ``key=value`` strings, in order.
        """
        return self._send(
            method=method,
            path=path,
            data=data,
            query_params=query_params,
            operation="request",
        )

    def call(
        self,
        name: str,
        *,
        path_params: dict[str, Any] | None = None,
        data: str | None = None,
        query_params: Sequence[str] = (),
    ) -> Result[GenericResponse, SynapseError]:
        """Invoke a named endpoint from the endpoint table.

        Args:
            name: Key in ENDPOINTS (e.g. ``"get_subscription"``).
            path_params: Values for the path template.
            data: Pre-serialized JSON body.
            query_params: Raw ``key=value`` strings, in order.

        Returns:
            Success(dict): Decoded response (empty when the body is empty).
            Failure(SynapseError): On any failure.
        """
        endpoint = ENDPOINTS.get(name)
        if endpoint is None:
            return self._invalid(f"Unknown endpoint: {name}")

        if endpoint.requires_body and data is None:
            return self._invalid(f"{name} requires a request body")

        try:
            path = endpoint.render_path(path_params)
        except KeyError as e:
            return self._invalid(f"{name} is missing path parameter {e.args[0]!r}")

        return self._send(
            method=endpoint.method,
            path=path,
            data=data,
            query_params=query_params,
            operation=endpoint.name,
        )

    # =========================================================================
    # Nodes
    # =========================================================================

    def get_nodes(self, *query_params: str) -> Result[GenericResponse, SynapseError]:
        """Return all nodes for the client."""
        return self.call("get_nodes", query_params=query_params)

    def get_crypto_market_data(self) -> Result[GenericResponse, SynapseError]:
        """Return market data for cryptocurrencies."""
        return self.call("get_crypto_market_data")

    def get_crypto_quotes(self, *query_params: str) -> Result[GenericResponse, SynapseError]:
        """Return quotes for cryptocurrencies."""
        return self.call("get_crypto_quotes", query_params=query_params)

    def locate_atms(self, *query_params: str) -> Result[GenericResponse, SynapseError]:
        """Return nearby ATMs (e.g. ``"zip=94114"``, ``"radius=5"``)."""
        return self.call("locate_atms", query_params=query_params)

    # =========================================================================
    # Other
    # =========================================================================

    def get_institutions(self) -> Result[GenericResponse, SynapseError]:
        """Return supported banking institutions."""
        return self.call("get_institutions")

    def get_public_key(
        self, scope: str | Iterable[str] | None = None
    ) -> Result[GenericResponse, SynapseError]:
        """Issue a public key representing the client credentials.

        Args:
            scope: Scope string used verbatim, or scope items joined with
                commas. Defaults to DEFAULT_PUBLIC_KEY_SCOPE.

        Note:
            The scope is placed in the query string without percent-encoding.
            A scope containing ``&`` or ``#`` splits or truncates the query;
            quote such values before passing them.
        """
        if scope is None:
            scope_value = DEFAULT_PUBLIC_KEY_SCOPE
        elif isinstance(scope, str):
            scope_value = scope
        else:
            scope_value = ",".join(scope)
        return self.call("get_public_key", path_params={"scope": scope_value})

    # =========================================================================
    # Subscriptions
    # =========================================================================

    def get_subscriptions(self, *query_params: str) -> Result[GenericResponse, SynapseError]:
        """Return all webhook subscriptions."""
        return self.call("get_subscriptions", query_params=query_params)

    def get_subscription(
        self, subscription_id: str, *query_params: str
    ) -> Result[GenericResponse, SynapseError]:
        """Return a single subscription."""
        return self.call(
            "get_subscription",
            path_params={"subscription_id": subscription_id},
            query_params=query_params,
        )

    def create_subscription(
        self, data: str, *query_params: str
    ) -> Result[GenericResponse, SynapseError]:
        """Create a subscription from a JSON body."""
        return self.call("create_subscription", data=data, query_params=query_params)

    def update_subscription(
        self, subscription_id: str, data: str, *query_params: str
    ) -> Result[GenericResponse, SynapseError]:
        """Patch an existing subscription."""
        return self.call(
            "update_subscription",
            path_params={"subscription_id": subscription_id},
            data=data,
            query_params=query_params,
        )

    # =========================================================================
    # Transactions
    # =========================================================================

    def get_transactions(self, *query_params: str) -> Result[GenericResponse, SynapseError]:
        """Return transactions across all users of the client."""
        return self.call("get_transactions", query_params=query_params)

    def get_user_transactions(
        self, user_id: str, *query_params: str
    ) -> Result[GenericResponse, SynapseError]:
        """Return transactions made by one user."""
        return self.call(
            "get_user_transactions",
            path_params={"user_id": user_id},
            query_params=query_params,
        )

    # =========================================================================
    # Users
    # =========================================================================

    def get_users(self, *query_params: str) -> Result[GenericResponse, SynapseError]:
        """Return a page of users."""
        return self.call("get_users", query_params=query_params)

    def get_user(
        self,
        user_id: str,
        *query_params: str,
        partial_dehydrate: bool = False,
    ) -> Result[User, SynapseError]:
        """Return a single user.

        Args:
            user_id: User identifier.
            *query_params: Raw ``key=value`` strings, in order.
            partial_dehydrate: Send ``full_dehydrate=yes`` ahead of the
                other query strings. The returned User records the
                opposite in ``full_dehydrate``.

        Returns:
            Success(User): Fully mapped user bound to this client.
            Failure(EntityMappingError): With the partially mapped user.
            Failure(SynapseError): On any other failure.
        """
        params = (FULL_DEHYDRATE_PARAM, *query_params) if partial_dehydrate else query_params
        return self._to_user(
            self.call("get_user", path_params={"user_id": user_id}, query_params=params),
            full_dehydrate=not partial_dehydrate,
        )

    def create_user(self, data: str, *query_params: str) -> Result[User, SynapseError]:
        """Create a user from a JSON body and return it."""
        return self._to_user(
            self.call("create_user", data=data, query_params=query_params),
        )

    def update_user(
        self, user_id: str, data: str, *query_params: str
    ) -> Result[User, SynapseError]:
        """Patch a user and return the updated record."""
        return self._to_user(
            self.call(
                "update_user",
                path_params={"user_id": user_id},
                data=data,
                query_params=query_params,
            ),
        )

    # =========================================================================
    # Internals
    # =========================================================================

    def _send(
        self,
        *,
        method: str | HttpMethod,
        path: str,
        data: str | None,
        query_params: Sequence[str],
        operation: str,
    ) -> Result[GenericResponse, SynapseError]:
        result = self._builder.dispatch(
            method=method,
            path=path,
            credentials=self._credentials,
            data=data,
            query_params=query_params,
            operation=operation,
        )
        match result:
            case Success(value=body):
                return Success(value=decode_response(body, operation=operation))
            case Failure() as failure:
                return failure

    def _to_user(
        self,
        result: Result[GenericResponse, SynapseError],
        *,
        full_dehydrate: bool = False,
    ) -> Result[User, SynapseError]:
        match result:
            case Success(value=payload):
                return self._user_mapper.map_user(
                    payload,
                    full_dehydrate=full_dehydrate,
                    client=self,
                )
            case Failure() as failure:
                return failure

    def _invalid(self, message: str) -> Failure[SynapseError]:
        self._logger.warning("synapse_api_invalid_request", reason=message)
        return Failure(
            error=SynapseInvalidRequestError(
                code=ErrorCode.INVALID_REQUEST,
                message=message,
            )
        )
