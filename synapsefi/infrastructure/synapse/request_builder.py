"""Credential-signing request builder for the Synapse API.

Every API call funnels through SynapseRequestBuilder.dispatch, which:
- Resolves the verb against the closed HttpMethod set
- Enforces per-verb body/query rules
- Re-derives the authenticated RequestContext from the credentials it is
  handed (update_request), on every call
- Executes exactly one blocking HTTP round trip with httpx
- Interprets the status code and returns raw bytes or a SynapseError

Architecture:
    - Infrastructure layer (adapter for the external API)
    - Uses httpx for HTTP, one short-lived httpx.Client per call
    - Returns Result types (no exceptions for remote failures)
    - No retries, no backoff
"""

from collections.abc import Sequence
from typing import Any

import httpx
import structlog

from synapsefi.core.constants import RESPONSE_BODY_MAX_LENGTH
from synapsefi.core.enums import ErrorCode
from synapsefi.core.result import Failure, Result, Success
from synapsefi.domain.enums import HttpMethod
from synapsefi.domain.errors import (
    SynapseAuthenticationError,
    SynapseError,
    SynapseInvalidRequestError,
    SynapseInvalidResponseError,
    SynapseNotFoundError,
    SynapseRateLimitError,
    SynapseTransportError,
)
from synapsefi.domain.protocols import LoggerProtocol
from synapsefi.domain.value_objects import (
    ClientConfig,
    ClientCredentials,
    RequestContext,
)


def build_url(base_url: str, path: str, query_params: Sequence[str] = ()) -> str:
    """Join base URL, path and raw query strings.

    Query strings are appended verbatim in caller order. The first
    separator is ``?`` unless the path already carries a query string.
    Empty strings are skipped.

    Example:
        >>> build_url("https://api.synapsefi.com/v3.1", "users", ["a=1", "b=2"])
        'https://api.synapsefi.com/v3.1/users?a=1&b=2'
    """
    url = f"{base_url.rstrip('/')}/{path.lstrip('/')}"
    for param in query_params:
        if not param:
            continue
        separator = "&" if "?" in url else "?"
        url = f"{url}{separator}{param}"
    return url


class SynapseRequestBuilder:
    """Authenticated dispatcher for one client configuration.

    Attributes:
        _config: Client configuration (host, timeout, header names).
        _transport: Optional httpx transport (tests, proxies).
        _logger: Structured logger.

    Example:
        >>> builder = SynapseRequestBuilder(config=ClientConfig(developer_mode=True))
        >>> result = builder.dispatch(
        ...     method="GET",
        ...     path="users",
        ...     credentials=credentials,
        ...     query_params=["per_page=20"],
        ...     operation="get_users",
        ... )
    """

    def __init__(
        self,
        *,
        config: ClientConfig,
        transport: httpx.BaseTransport | None = None,
        logger: LoggerProtocol | None = None,
    ) -> None:
        self._config = config
        self._transport = transport
        self._logger: LoggerProtocol = logger or structlog.get_logger("synapse_api")

    @property
    def config(self) -> ClientConfig:
        return self._config

    def update_request(self, credentials: ClientCredentials) -> RequestContext:
        """Derive the authenticated request state for one call."""
        return RequestContext.from_credentials(credentials, self._config.header_names)

    def dispatch(
        self,
        *,
        method: str | HttpMethod,
        path: str,
        credentials: ClientCredentials,
        data: str | None = None,
        query_params: Sequence[str] = (),
        operation: str = "request",
    ) -> Result[bytes, SynapseError]:
        """Build, sign and execute one call.

        Args:
            method: HTTP verb; anything outside GET/POST/PATCH/DELETE fails.
            path: Path relative to the configured base URL. May already
                contain a query string.
            credentials: Credentials current at call time.
            data: Pre-serialized JSON body (POST/PATCH only).
            query_params: Raw ``key=value`` strings (not DELETE).
            operation: Operation name for logging.

        Returns:
            Success(bytes): Raw body of a 2xx response.
            Failure(SynapseError): On any failure. Request construction
                failures never touch the network.
        """
        parsed = HttpMethod.parse(method)
        if isinstance(parsed, Failure):
            self._logger.warning(
                "synapse_api_unsupported_method",
                operation=operation,
                method=str(method),
            )
            return parsed
        http_method = parsed.value

        if query_params and not http_method.accepts_query_params:
            return self._invalid_request(
                f"{http_method.value} does not accept query parameters", operation
            )
        if data is not None and not http_method.accepts_body:
            return self._invalid_request(
                f"{http_method.value} does not accept a request body", operation
            )

        context = self.update_request(credentials)
        url = build_url(self._config.base_url, path, query_params)

        self._logger.debug(
            "synapse_api_request_started",
            operation=operation,
            method=http_method.value,
            url=url,
            client_id=context.client_id,
            environment=self._config.environment.value,
        )

        result = self._execute_request(
            method=http_method,
            url=url,
            context=context,
            data=data,
            operation=operation,
        )
        if isinstance(result, Failure):
            return result

        response = result.value
        error_result = self._check_error_response(response, operation)
        if error_result is not None:
            return error_result

        self._logger.debug(
            "synapse_api_succeeded",
            operation=operation,
            status_code=response.status_code,
        )
        return Success(value=response.content)

    def _execute_request(
        self,
        *,
        method: HttpMethod,
        url: str,
        context: RequestContext,
        data: str | None,
        operation: str,
    ) -> Result[httpx.Response, SynapseError]:
        """Execute HTTP request with transport error handling.

        Returns:
            Success(httpx.Response): Raw HTTP response, any status.
            Failure(SynapseTransportError): On timeout or connection error.
            Failure(SynapseInvalidRequestError): If the URL, a header value
                or the body cannot be encoded onto the wire.
        """
        try:
            with httpx.Client(timeout=self._config.timeout, transport=self._transport) as client:
                response = client.request(
                    method=method.value,
                    url=url,
                    headers=dict(context.headers),
                    content=data.encode("utf-8") if data is not None else None,
                )
            return Success(value=response)

        except httpx.InvalidURL as e:
            return self._invalid_request(f"Invalid request URL: {e}", operation)

        except UnicodeEncodeError as e:
            return self._invalid_request(
                f"Request header or body cannot be encoded: {e.reason}", operation
            )

        except httpx.TimeoutException as e:
            self._logger.warning(
                "synapse_api_timeout",
                operation=operation,
                error=str(e),
            )
            return Failure(
                error=SynapseTransportError(
                    code=ErrorCode.SYNAPSE_TIMEOUT,
                    message="Synapse API request timed out",
                    is_transient=True,
                )
            )

        except httpx.RequestError as e:
            self._logger.warning(
                "synapse_api_connection_error",
                operation=operation,
                error=str(e),
            )
            return Failure(
                error=SynapseTransportError(
                    code=ErrorCode.SYNAPSE_UNAVAILABLE,
                    message=f"Failed to connect to Synapse API: {e}",
                    is_transient=True,
                )
            )

    def _check_error_response(
        self,
        response: httpx.Response,
        operation: str,
    ) -> Failure[SynapseError] | None:
        """Map a non-2xx response to a SynapseError.

        Returns:
            Failure(SynapseError) if error detected, None for any 2xx.
        """
        status = response.status_code

        if 200 <= status < 300:
            return None

        api_message, details = _extract_api_error(response)

        # Rate limiting (429)
        if status == 429:
            retry_after = response.headers.get("Retry-After")
            retry_seconds = int(retry_after) if retry_after and retry_after.isdigit() else None
            self._logger.warning(
                "synapse_api_rate_limited",
                operation=operation,
                retry_after=retry_seconds,
            )
            return Failure(
                error=SynapseRateLimitError(
                    code=ErrorCode.SYNAPSE_RATE_LIMITED,
                    message=api_message or "Synapse API rate limit exceeded",
                    status_code=status,
                    details=details,
                    retry_after=retry_seconds,
                )
            )

        # Authentication errors (401, 403)
        if status in (401, 403):
            self._logger.warning(
                "synapse_api_auth_failed",
                operation=operation,
                status_code=status,
            )
            return Failure(
                error=SynapseAuthenticationError(
                    code=ErrorCode.SYNAPSE_AUTHENTICATION_FAILED,
                    message=api_message or "Synapse API rejected the client credentials",
                    status_code=status,
                    details=details,
                )
            )

        # Not found (404)
        if status == 404:
            self._logger.warning(
                "synapse_api_not_found",
                operation=operation,
            )
            return Failure(
                error=SynapseNotFoundError(
                    code=ErrorCode.SYNAPSE_RESOURCE_NOT_FOUND,
                    message=api_message or "Synapse resource not found",
                    status_code=status,
                    details=details,
                )
            )

        # Server errors (5xx)
        if status >= 500:
            self._logger.warning(
                "synapse_api_server_error",
                operation=operation,
                status_code=status,
            )
            return Failure(
                error=SynapseTransportError(
                    code=ErrorCode.SYNAPSE_UNAVAILABLE,
                    message=api_message or f"Synapse API server error: {status}",
                    status_code=status,
                    details=details,
                    is_transient=True,
                )
            )

        # Unexpected status
        self._logger.warning(
            "synapse_api_unexpected_status",
            operation=operation,
            status_code=status,
        )
        return Failure(
            error=SynapseInvalidResponseError(
                code=ErrorCode.SYNAPSE_UNEXPECTED_STATUS,
                message=api_message or f"Unexpected response from Synapse: {status}",
                status_code=status,
                details=details,
                response_body=response.text[:RESPONSE_BODY_MAX_LENGTH],
            )
        )

    def _invalid_request(
        self, message: str, operation: str
    ) -> Failure[SynapseInvalidRequestError]:
        self._logger.warning(
            "synapse_api_invalid_request",
            operation=operation,
            reason=message,
        )
        return Failure(
            error=SynapseInvalidRequestError(
                code=ErrorCode.INVALID_REQUEST,
                message=message,
            )
        )


def _extract_api_error(response: httpx.Response) -> tuple[str | None, dict[str, Any] | None]:
    """Pull the message and codes out of the API's error envelope.

    Synapse errors look like
    ``{"error": {"en": "..."}, "error_code": "110", "http_code": "404"}``.
    """
    try:
        payload = response.json()
    except ValueError:
        return None, None

    if not isinstance(payload, dict):
        return None, None

    error = payload.get("error")
    if isinstance(error, dict):
        message = error.get("en")
    elif isinstance(error, str):
        message = error
    else:
        message = None

    details = {key: payload[key] for key in ("error_code", "http_code") if key in payload}
    return (message if isinstance(message, str) else None), (details or None)
