"""Authentication commands (CQRS write operations).

Commands represent user intent to change system state.
All commands are immutable (frozen=True) and use keyword-only arguments (kw_only=True).

Pattern:
- Commands are data containers (no logic)
- Handlers execute business logic
- Commands don't return values (handlers return Result types)
- Field types document the validation already applied by request schemas
"""

from dataclasses import dataclass

from src.domain.types import Email, OTPCode, Password, PersonName, RefreshToken


@dataclass(frozen=True, kw_only=True)
class Signup:
    """Create a new, unverified account and email it a verification code.

    Attributes:
        email: Account key (case-sensitive, trimmed).
        password: Plaintext password (validated strength, will be hashed).
        first_name: Given name.
        last_name: Family name.

    Example:
        >>> command = Signup(
        ...     email="user@example.com",
        ...     password="SecurePass123!",
        ...     first_name="Ada",
        ...     last_name="Lovelace",
        ... )
        >>> result = await handler.handle(command)
    """

    email: Email
    password: Password
    first_name: PersonName
    last_name: PersonName


@dataclass(frozen=True, kw_only=True)
class Login:
    """Exchange credentials for an access/refresh token pair.

    Attributes:
        email: Account key.
        password: Plaintext password.
    """

    email: Email
    password: str


@dataclass(frozen=True, kw_only=True)
class VerifyOTP:
    """Prove email ownership with a one-time code and activate the account.

    Attributes:
        email: Account key.
        otp: Numeric code from the verification email.
    """

    email: Email
    otp: OTPCode


@dataclass(frozen=True, kw_only=True)
class ResendOTP:
    """Issue a fresh verification code, invalidating earlier ones.

    Attributes:
        email: Account key.
    """

    email: Email


@dataclass(frozen=True, kw_only=True)
class RefreshAccessToken:
    """Exchange a refresh token for a new token pair (rotation).

    Attributes:
        refresh_token: Opaque refresh token previously issued at login.
    """

    refresh_token: RefreshToken
