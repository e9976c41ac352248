"""Authentication DTOs (Data Transfer Objects).

Response/result dataclasses for authentication command handlers.
These carry data from handlers back to the presentation layer.

DTOs:
    - UserSummary: Public view of an account (no password hash)
    - AuthTokens: Result from Login and RefreshAccessToken
    - IssuedRefreshToken: Plain token plus its stored record
"""

from dataclasses import dataclass
from uuid import UUID

from src.domain.entities.user import User
from src.domain.protocols.refresh_token_repository import RefreshTokenData


@dataclass(frozen=True, kw_only=True)
class UserSummary:
    """Public account details returned alongside tokens.

    Attributes:
        id: User's unique identifier.
        email: Account key.
        first_name: Given name.
        last_name: Family name.
        email_verified: Verification flag.
        roles: Role tags (sorted).
    """

    id: UUID
    email: str
    first_name: str
    last_name: str
    email_verified: bool
    roles: list[str]

    @classmethod
    def from_user(cls, user: User) -> "UserSummary":
        """Build summary from a domain User."""
        return cls(
            id=user.id,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            email_verified=user.email_verified,
            roles=user.role_values(),
        )


@dataclass(frozen=True, kw_only=True)
class AuthTokens:
    """Response from successful login or refresh.

    Attributes:
        access_token: JWT access token (short-lived).
        refresh_token: Opaque refresh token (long-lived, rotated).
        token_type: Token type (always "Bearer").
        expires_in: Access token lifetime in seconds.
        user: Summary of the authenticated account.
    """

    access_token: str
    refresh_token: str
    expires_in: int
    user: UserSummary
    token_type: str = "Bearer"


@dataclass(frozen=True, kw_only=True)
class IssuedRefreshToken:
    """Freshly minted refresh token.

    Attributes:
        token: Plain token for the client (never persisted).
        record: Stored row (hash and expiry).
    """

    token: str
    record: RefreshTokenData
