"""Synapse user mapper.

Converts a decoded user response into a User entity with an explicit
partial decode: every promoted field is type-checked, and problems are
reported instead of silently leaving defaults behind.

Synapse User Response Structure (abridged):
    {
        "_id": "5c0abc...",
        "client": {"id": "...", "name": "..."},
        "documents": [...],
        "emails": [],
        "extra": {"supp_id": "...", "is_business": false, ...},
        "is_hidden": false,
        "legal_names": ["Test User"],
        "logins": [{"email": "test@synapsefi.com", "scope": "READ_AND_WRITE"}],
        "permission": "SEND-AND-RECEIVE",
        "phone_numbers": ["901.111.1111"],
        "refresh_token": "refresh_..."
    }
"""

from typing import Any

import structlog

from synapsefi.core.enums import ErrorCode
from synapsefi.core.result import Failure, Result, Success
from synapsefi.domain.entities import User
from synapsefi.domain.errors import EntityMappingError
from synapsefi.domain.protocols import UserScopedClientProtocol
from synapsefi.domain.types import GenericResponse

logger = structlog.get_logger(__name__)


# =============================================================================
# Field Mapping
# =============================================================================

# Response keys tried in order → User attribute, expected type
USER_FIELD_MAP: tuple[tuple[tuple[str, ...], str, type | tuple[type, ...]], ...] = (
    (("_id", "id"), "user_id", str),
    (("legal_names",), "legal_names", list),
    (("logins",), "logins", list),
    (("emails",), "emails", list),
    (("phone_numbers",), "phone_numbers", list),
    (("permission",), "permission", str),
    (("refresh_token",), "refresh_token", str),
    (("documents",), "documents", list),
    (("is_hidden",), "is_hidden", bool),
    (("client",), "client_info", dict),
    (("extra",), "extra", dict),
)

# Attributes that must be present for a User to be usable
REQUIRED_USER_FIELDS: frozenset[str] = frozenset({"user_id"})


class SynapseUserMapper:
    """Mapper for converting decoded user responses to User entities.

    Thread-safe: No mutable state, can be shared across requests.

    Example:
        >>> mapper = SynapseUserMapper()
        >>> result = mapper.map_user({"_id": "u1", "legal_names": ["Ann"]})
        >>> result.value.user_id
        'u1'
    """

    def map_user(
        self,
        data: GenericResponse,
        *,
        full_dehydrate: bool = False,
        client: UserScopedClientProtocol | None = None,
    ) -> Result[User, EntityMappingError]:
        """Map a decoded response to a User.

        The raw mapping is always kept on ``User.response`` and the client
        back-reference is always attached, even when mapping is incomplete.

        Args:
            data: Decoded response mapping.
            full_dehydrate: Whether the full representation was requested.
            client: Client to bind for user-scoped calls.

        Returns:
            Success(User): All required fields present, no field mistyped.
            Failure(EntityMappingError): With the best-effort User in
                ``entity`` and the offending keys listed.
        """
        values: dict[str, Any] = {}
        missing: list[str] = []
        mistyped: list[str] = []

        for keys, attribute, expected_type in USER_FIELD_MAP:
            key = next((k for k in keys if k in data), None)
            if key is None:
                if attribute in REQUIRED_USER_FIELDS:
                    missing.append(keys[0])
                continue

            value = data[key]
            if value is None and attribute not in REQUIRED_USER_FIELDS:
                continue
            if not isinstance(value, expected_type):
                mistyped.append(key)
                continue
            values[attribute] = value

        user = User(**values, full_dehydrate=full_dehydrate, response=data)
        if client is not None:
            user.bind_client(client)

        if not missing and not mistyped:
            return Success(value=user)

        logger.warning(
            "synapse_user_mapping_incomplete",
            user_id=user.user_id,
            missing_fields=missing,
            mistyped_fields=mistyped,
        )
        return Failure(
            error=EntityMappingError(
                code=ErrorCode.ENTITY_MAPPING_FAILED,
                message=_describe(missing, mistyped),
                entity=user,
                missing_fields=tuple(missing),
                mistyped_fields=tuple(mistyped),
            )
        )


def _describe(missing: list[str], mistyped: list[str]) -> str:
    parts = []
    if missing:
        parts.append(f"missing fields: {', '.join(missing)}")
    if mistyped:
        parts.append(f"mistyped fields: {', '.join(mistyped)}")
    return "User response incomplete (" + "; ".join(parts) + ")"
