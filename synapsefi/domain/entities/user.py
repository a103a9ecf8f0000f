"""User domain entity.

The one response shape the client models explicitly. Promoted fields cover
the parts of a Synapse user record callers use most; the complete decoded
response is kept in ``response`` for everything else.

A User remembers the client that produced it, so user-scoped calls can be
issued from the entity itself:

    match client.get_user(user_id):
        case Success(value=user):
            transactions = user.get_transactions("page=2")

The back-reference is a convenience, not ownership: the client reads its
credentials at call time, so rotating the client's credentials also
affects calls made through users it returned earlier.
"""

from dataclasses import dataclass, field
from typing import Any

from synapsefi.core.enums import ErrorCode
from synapsefi.core.result import Failure, Result
from synapsefi.domain.errors import SynapseError, SynapseInvalidRequestError
from synapsefi.domain.protocols.user_scoped_client_protocol import (
    UserScopedClientProtocol,
)
from synapsefi.domain.types import GenericResponse


@dataclass
class User:
    """Synapse user record.

    Attributes:
        user_id: User identifier (``_id`` in the API).
        legal_names: Legal names on file.
        logins: Login entries (email, scope).
        emails: Contact emails.
        phone_numbers: Contact phone numbers.
        permission: Account permission level (e.g. SEND-AND-RECEIVE).
        refresh_token: OAuth refresh token, excluded from repr.
        documents: KYC document bundles (full dehydrate only).
        is_hidden: Whether the user is hidden in the dashboard.
        client_info: Client the user belongs to (``client`` in the API).
        extra: Free-form extra data (supp_id, cip_tag, is_business...).
        full_dehydrate: Whether the full representation was requested.
        response: Raw decoded response.
    """

    user_id: str | None = None
    legal_names: list[str] = field(default_factory=list)
    logins: list[dict[str, Any]] = field(default_factory=list)
    emails: list[str] = field(default_factory=list)
    phone_numbers: list[str] = field(default_factory=list)
    permission: str | None = None
    refresh_token: str | None = field(default=None, repr=False)
    documents: list[dict[str, Any]] = field(default_factory=list)
    is_hidden: bool = False
    client_info: dict[str, Any] = field(default_factory=dict)
    extra: dict[str, Any] = field(default_factory=dict)
    full_dehydrate: bool = False
    response: GenericResponse = field(default_factory=dict, repr=False)
    _client: UserScopedClientProtocol | None = field(
        default=None, init=False, repr=False, compare=False
    )

    def bind_client(self, client: UserScopedClientProtocol) -> None:
        """Attach the client used for user-scoped calls."""
        self._client = client

    @property
    def has_client(self) -> bool:
        """Whether user-scoped calls can be made from this entity."""
        return self._client is not None

    def get_transactions(self, *query_params: str) -> Result[GenericResponse, SynapseError]:
        """Fetch this user's transactions.

        Args:
            *query_params: Raw ``key=value`` query strings, in order.

        Returns:
            Success(dict): Decoded response.
            Failure(SynapseError): On any failure, including a User with no
                id or no bound client.
        """
        match self._scope():
            case Failure() as failure:
                return failure
            case (client, user_id):
                return client.get_user_transactions(user_id, *query_params)

    def update(self, data: str, *query_params: str) -> Result["User", SynapseError]:
        """Patch this user with a pre-serialized JSON body.

        Returns:
            Success(User): Updated entity (a new instance).
            Failure(SynapseError): On any failure.
        """
        match self._scope():
            case Failure() as failure:
                return failure
            case (client, user_id):
                return client.update_user(user_id, data, *query_params)

    def _scope(
        self,
    ) -> tuple[UserScopedClientProtocol, str] | Failure[SynapseInvalidRequestError]:
        if self._client is None:
            return Failure(
                error=SynapseInvalidRequestError(
                    code=ErrorCode.INVALID_REQUEST,
                    message="User has no client bound for scoped calls",
                )
            )
        if not self.user_id:
            return Failure(
                error=SynapseInvalidRequestError(
                    code=ErrorCode.INVALID_REQUEST,
                    message="User has no id; scoped calls need a user id",
                )
            )
        return self._client, self.user_id
