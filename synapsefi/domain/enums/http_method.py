"""HTTP verbs supported by the request builder.

The set is closed: anything else is rejected with UnsupportedMethodError
before a request is built.

Usage:
    from synapsefi.domain.enums import HttpMethod

    match HttpMethod.parse("PATCH"):
        case Success(value=method):
            assert method.accepts_body
"""

from enum import Enum

from synapsefi.core.enums import ErrorCode
from synapsefi.core.result import Failure, Result, Success
from synapsefi.domain.errors import UnsupportedMethodError


class HttpMethod(str, Enum):
    """Supported HTTP verb.

    String Enum:
        Values are the wire names, so members can be passed straight to httpx.
    """

    GET = "GET"
    POST = "POST"
    PATCH = "PATCH"
    DELETE = "DELETE"

    @property
    def accepts_body(self) -> bool:
        """Whether a JSON body may be sent with this verb."""
        return self in (HttpMethod.POST, HttpMethod.PATCH)

    @property
    def accepts_query_params(self) -> bool:
        """Whether query parameters may be appended for this verb."""
        return self is not HttpMethod.DELETE

    @classmethod
    def parse(cls, value: "str | HttpMethod") -> Result["HttpMethod", UnsupportedMethodError]:
        """Resolve a caller-supplied verb.

        Matching ignores surrounding whitespace and case.

        Args:
            value: Verb name or HttpMethod member.

        Returns:
            Success(HttpMethod): For GET, POST, PATCH, DELETE.
            Failure(UnsupportedMethodError): For anything else.
        """
        if isinstance(value, HttpMethod):
            return Success(value=value)

        normalized = value.strip().upper() if isinstance(value, str) else ""
        try:
            return Success(value=cls(normalized))
        except ValueError:
            return Failure(
                error=UnsupportedMethodError(
                    code=ErrorCode.UNSUPPORTED_METHOD,
                    message=f"Unsupported HTTP method: {value!r}",
                    method=str(value),
                )
            )
