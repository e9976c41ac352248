"""Result types for railway-oriented programming.

Services and command handlers return a Result instead of raising, so every
failure path is visible at the call site and mapped explicitly at the HTTP
boundary.

Usage:
    async def validate(email: str, code: str) -> Result[None, str]:
        if record is None:
            return Failure(error="invalid_or_expired_otp")
        return Success(value=None)

    match await otp_service.validate(email, code):
        case Success():
            ...
        case Failure(error=error):
            ...
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful outcome.

    Attributes:
        value: The produced value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed outcome.

    Attributes:
        error: Machine-readable error (usually a string constant).
    """

    error: E


Result: TypeAlias = Success[T] | Failure[E]
