"""Permissive JSON response decoding.

Bodies that are empty, malformed, or not a JSON object decode to an empty
mapping. The problem is reported as a DecodeWarning and logged; it never
fails the call, since some verbs (DELETE) legitimately return nothing.
"""

import json

import structlog

from synapsefi.core.constants import RESPONSE_BODY_MAX_LENGTH
from synapsefi.core.enums import ErrorCode
from synapsefi.core.result import Failure, Result, Success
from synapsefi.domain.errors import DecodeWarning
from synapsefi.domain.types import GenericResponse

logger = structlog.get_logger(__name__)


def try_decode(body: bytes | None) -> Result[GenericResponse, DecodeWarning]:
    """Decode a response body into a string-keyed mapping.

    Returns:
        Success(dict): Body was a JSON object.
        Failure(DecodeWarning): Body was empty, invalid JSON, or another
            JSON type.
    """
    if body is None or not body.strip():
        return Failure(
            error=DecodeWarning(
                code=ErrorCode.RESPONSE_BODY_EMPTY,
                message="Response body is empty",
                is_empty=True,
            )
        )

    preview = body[:RESPONSE_BODY_MAX_LENGTH].decode("utf-8", errors="replace")

    try:
        data = json.loads(body)
    except (ValueError, UnicodeDecodeError) as e:
        return Failure(
            error=DecodeWarning(
                code=ErrorCode.RESPONSE_DECODE_FAILED,
                message=f"Response body is not valid JSON: {e}",
                body_preview=preview,
            )
        )

    if not isinstance(data, dict):
        return Failure(
            error=DecodeWarning(
                code=ErrorCode.RESPONSE_DECODE_FAILED,
                message=f"Expected JSON object, got {type(data).__name__}",
                body_preview=preview,
            )
        )

    return Success(value=data)


def decode_response(body: bytes | None, *, operation: str = "request") -> GenericResponse:
    """Decode a body, degrading to an empty mapping on any problem."""
    match try_decode(body):
        case Success(value=data):
            return data
        case Failure(error=warning):
            if warning.is_empty:
                logger.debug("synapse_api_empty_body", operation=operation)
            else:
                logger.warning(
                    "synapse_api_decode_warning",
                    operation=operation,
                    reason=warning.message,
                    body_preview=warning.body_preview,
                )
            return {}
