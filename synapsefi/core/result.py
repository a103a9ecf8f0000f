"""Result types for railway-oriented programming.

Every client operation returns a Result instead of raising, so remote
failures are explicit values the caller must inspect.

Usage:
    result = client.get_user("5c0abc...")
    match result:
        case Success(value=user):
            print(user.user_id)
        case Failure(error=error):
            print(f"Request failed: {error}")
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


Result: TypeAlias = Success[T] | Failure[E]
