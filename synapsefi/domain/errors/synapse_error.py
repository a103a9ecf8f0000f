"""Synapse API error types.

These errors are the failure half of every client Result. They describe
what went wrong with a single call: the request could not be built, the
transport failed, the remote API refused it, or its answer could not be
mapped onto a typed entity.

Architecture:
- Inherit from DomainError (core layer)
- Returned inside Failure, never raised
- Infrastructure (request builder, mappers) constructs them

Usage:
    from synapsefi.domain.errors import SynapseError, SynapseRateLimitError

    match client.get_users():
        case Failure(error=SynapseRateLimitError(retry_after=seconds)):
            schedule_later(seconds)
        case Failure(error=error):
            log.warning("synapse_call_failed", error=str(error))
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from synapsefi.core.errors import DomainError

if TYPE_CHECKING:
    from synapsefi.domain.entities.user import User


@dataclass(frozen=True, slots=True, kw_only=True)
class SynapseError(DomainError):
    """Base error for a failed Synapse API call.

    Attributes:
        code: ErrorCode.
        message: Human-readable message.
        status_code: HTTP status returned by the API, if a response arrived.
        details: Additional context (API error_code, http_code).
    """

    status_code: int | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class UnsupportedMethodError(SynapseError):
    """HTTP verb outside GET, POST, PATCH, DELETE.

    Returned before any network activity.

    Attributes:
        method: The rejected verb as supplied by the caller.
    """

    method: str


@dataclass(frozen=True, slots=True, kw_only=True)
class SynapseInvalidRequestError(SynapseError):
    """Request could not be built from the supplied arguments.

    Returned when:
    - A body is passed to GET or DELETE
    - Query parameters are passed to DELETE
    - An endpoint that requires a body is called without one
    - A path template parameter is missing
    - A user-scoped call is made on a User with no id or no client
    """


@dataclass(frozen=True, slots=True, kw_only=True)
class SynapseTransportError(SynapseError):
    """Network failure or server-side (5xx) failure.

    Attributes:
        is_transient: Whether a later attempt may succeed. The client never
            retries on its own.
    """

    is_transient: bool = True


@dataclass(frozen=True, slots=True, kw_only=True)
class SynapseAuthenticationError(SynapseError):
    """API rejected the client credentials (401) or access (403)."""


@dataclass(frozen=True, slots=True, kw_only=True)
class SynapseRateLimitError(SynapseError):
    """API returned 429 Too Many Requests.

    Attributes:
        retry_after: Seconds to wait before retrying (from Retry-After header).
    """

    retry_after: int | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class SynapseNotFoundError(SynapseError):
    """Requested resource does not exist (404)."""


@dataclass(frozen=True, slots=True, kw_only=True)
class SynapseInvalidResponseError(SynapseError):
    """API answered with an unexpected non-2xx status.

    Attributes:
        response_body: Truncated raw body for debugging.
    """

    response_body: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class EntityMappingError(SynapseError):
    """Response could not fully populate a typed entity.

    The call itself succeeded; the best-effort entity is carried along so
    callers can still use the fields that did decode.

    Attributes:
        entity: Partially populated entity.
        missing_fields: Required response keys that were absent.
        mistyped_fields: Response keys present with an unexpected type.
    """

    entity: User | None = None
    missing_fields: tuple[str, ...] = ()
    mistyped_fields: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class DecodeWarning(DomainError):
    """Non-fatal decoding problem.

    Produced when a response body is absent, is not valid JSON, or is not a
    JSON object. The call still succeeds with an empty mapping.

    Attributes:
        is_empty: True when the body was absent rather than malformed.
        body_preview: Truncated body for debugging.
    """

    is_empty: bool = False
    body_preview: str | None = None
