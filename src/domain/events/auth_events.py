"""Authentication domain events.

Pattern: 3 events per workflow (ATTEMPTED -> SUCCEEDED/FAILED)
- *Attempted: User initiated action (before business logic)
- *Succeeded: Operation completed successfully (after commit)
- *Failed: Operation failed (carries the machine-readable reason)

Handlers:
- LoggingEventHandler: ALL events
"""

from dataclasses import dataclass
from uuid import UUID

from src.domain.events.base_event import DomainEvent


# ═══════════════════════════════════════════════════════════════
# Signup
# ═══════════════════════════════════════════════════════════════


@dataclass(frozen=True, kw_only=True)
class UserSignupAttempted(DomainEvent):
    """Signup attempt initiated.

    Attributes:
        email: Email address attempted.
    """

    email: str


@dataclass(frozen=True, kw_only=True)
class UserSignupSucceeded(DomainEvent):
    """Account created in UNVERIFIED_DISABLED state and OTP issued.

    Attributes:
        user_id: ID of the new user.
        email: User's email address.
    """

    user_id: UUID
    email: str


@dataclass(frozen=True, kw_only=True)
class UserSignupFailed(DomainEvent):
    """Signup failed.

    Attributes:
        email: Email address attempted.
        reason: Failure reason (e.g. "email_already_exists").
    """

    email: str
    reason: str


# ═══════════════════════════════════════════════════════════════
# Login
# ═══════════════════════════════════════════════════════════════


@dataclass(frozen=True, kw_only=True)
class UserLoginAttempted(DomainEvent):
    """Login attempt initiated.

    Attributes:
        email: Email address attempted.
    """

    email: str


@dataclass(frozen=True, kw_only=True)
class UserLoginSucceeded(DomainEvent):
    """Credentials accepted and tokens issued.

    Attributes:
        user_id: Authenticated user's ID.
        email: User's email address.
    """

    user_id: UUID
    email: str


@dataclass(frozen=True, kw_only=True)
class UserLoginFailed(DomainEvent):
    """Login rejected.

    Attributes:
        email: Email address attempted.
        reason: Failure reason (invalid_credentials, email_not_verified).
        user_id: Set when the account exists.
    """

    email: str
    reason: str
    user_id: UUID | None = None


# ═══════════════════════════════════════════════════════════════
# OTP verification
# ═══════════════════════════════════════════════════════════════


@dataclass(frozen=True, kw_only=True)
class OTPVerificationAttempted(DomainEvent):
    """OTP submitted for verification.

    Attributes:
        email: Email address the code was submitted for.
    """

    email: str


@dataclass(frozen=True, kw_only=True)
class OTPVerificationSucceeded(DomainEvent):
    """OTP accepted and account activated.

    Attributes:
        user_id: Activated user's ID.
        email: User's email address.
    """

    user_id: UUID
    email: str


@dataclass(frozen=True, kw_only=True)
class OTPVerificationFailed(DomainEvent):
    """OTP rejected.

    Attributes:
        email: Email address the code was submitted for.
        reason: Failure reason.
    """

    email: str
    reason: str


@dataclass(frozen=True, kw_only=True)
class OTPResent(DomainEvent):
    """A new OTP was issued on request, replacing earlier ones.

    Attributes:
        email: Recipient email address.
    """

    email: str


# ═══════════════════════════════════════════════════════════════
# Token refresh
# ═══════════════════════════════════════════════════════════════


@dataclass(frozen=True, kw_only=True)
class TokenRefreshAttempted(DomainEvent):
    """Refresh token presented for exchange."""


@dataclass(frozen=True, kw_only=True)
class TokenRefreshSucceeded(DomainEvent):
    """New access token minted and refresh token rotated.

    Attributes:
        user_id: Token owner's ID.
    """

    user_id: UUID


@dataclass(frozen=True, kw_only=True)
class TokenRefreshFailed(DomainEvent):
    """Refresh rejected.

    Attributes:
        reason: Failure reason (token_invalid, token_expired).
        user_id: Owner's ID when the token row was found.
    """

    reason: str
    user_id: UUID | None = None
