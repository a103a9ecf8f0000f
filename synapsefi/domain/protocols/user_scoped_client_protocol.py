"""Protocol for the client a User entity calls back into.

User entities keep a reference to the client that produced them so that
user-scoped calls (transactions, updates) can be made from the entity. The
domain only knows this narrow interface; SynapseClient implements it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from synapsefi.core.result import Result
from synapsefi.domain.errors import SynapseError
from synapsefi.domain.types import GenericResponse

if TYPE_CHECKING:
    from synapsefi.domain.entities.user import User


class UserScopedClientProtocol(Protocol):
    """Operations a User can delegate to its issuing client."""

    def get_user_transactions(
        self, user_id: str, *query_params: str
    ) -> Result[GenericResponse, SynapseError]:
        """Fetch transactions for one user."""
        ...

    def update_user(
        self, user_id: str, data: str, *query_params: str
    ) -> Result[User, SynapseError]:
        """Patch one user and return the updated entity."""
        ...
