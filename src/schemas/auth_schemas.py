"""Authentication request/response schemas.

Pydantic models for API request validation and response serialization.
Kept separate from domain entities - these are HTTP-layer concerns.

Endpoints:
    POST   /api/auth/signup          - Create account, send OTP
    POST   /api/auth/login           - Exchange credentials for tokens
    POST   /api/auth/verify-otp      - Activate account with OTP
    POST   /api/auth/resend-otp      - Issue a fresh OTP (?email=)
    POST   /api/auth/refresh-token   - Exchange refresh token for tokens

Wire format is camelCase (``firstName``, ``accessToken``); snake_case input
is accepted as well.
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from src.application.dtos import AuthTokens
from src.domain.types import Email, OTPCode, Password, PersonName, RefreshToken
from src.schemas.common_schemas import CamelModel


# =============================================================================
# Signup
# =============================================================================


class SignupRequest(CamelModel):
    """Request schema for account creation.

    POST /api/auth/signup
    Returns: 201 Created
    """

    email: Email
    password: Password
    first_name: PersonName
    last_name: PersonName

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "user@example.com",
                "password": "SecurePass123!",
                "firstName": "Ada",
                "lastName": "Lovelace",
            }
        }
    )


# =============================================================================
# Login
# =============================================================================


class LoginRequest(CamelModel):
    """Request schema for login.

    POST /api/auth/login
    Returns: 200 OK

    Password strength is not re-checked here; any non-empty value is
    compared against the stored hash.
    """

    email: Email
    password: str = Field(
        ...,
        min_length=1,
        max_length=128,
        description="User's password",
        examples=["SecurePass123!"],
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "user@example.com",
                "password": "SecurePass123!",
            }
        }
    )


class UserSummaryResponse(CamelModel):
    """Public view of the authenticated account."""

    id: UUID = Field(..., description="User ID")
    email: str = Field(..., description="User's email address")
    first_name: str = Field(..., description="Given name")
    last_name: str = Field(..., description="Family name")
    email_verified: bool = Field(..., description="Email ownership proven")
    roles: list[str] = Field(..., description="Role tags")


class AuthTokensResponse(CamelModel):
    """Token pair returned by login and refresh.

    Access token is a short-lived JWT; refresh token is opaque and is the
    only copy the client will ever receive.
    """

    access_token: str = Field(..., description="JWT access token")
    refresh_token: str = Field(..., description="Opaque refresh token")
    token_type: str = Field(default="Bearer", description="Token type")
    expires_in: int = Field(..., description="Access token lifetime in seconds")
    user: UserSummaryResponse

    @classmethod
    def from_tokens(cls, tokens: AuthTokens) -> "AuthTokensResponse":
        """Build the response from the handler's token bundle.

        Args:
            tokens: Result value of login or refresh.

        Returns:
            AuthTokensResponse ready for serialization.
        """
        return cls(
            access_token=tokens.access_token,
            refresh_token=tokens.refresh_token,
            token_type=tokens.token_type,
            expires_in=tokens.expires_in,
            user=UserSummaryResponse(
                id=tokens.user.id,
                email=tokens.user.email,
                first_name=tokens.user.first_name,
                last_name=tokens.user.last_name,
                email_verified=tokens.user.email_verified,
                roles=tokens.user.roles,
            ),
        )


# =============================================================================
# One-time password
# =============================================================================


class VerifyOTPRequest(CamelModel):
    """Request schema for OTP verification.

    POST /api/auth/verify-otp
    Returns: 200 OK
    """

    email: Email
    otp: OTPCode

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "user@example.com",
                "otp": "123456",
            }
        }
    )


class ResendOTPQuery(BaseModel):
    """Query parameters for OTP resend.

    POST /api/auth/resend-otp?email=user@example.com
    Returns: 200 OK
    """

    email: Email


# =============================================================================
# Token refresh
# =============================================================================


class RefreshTokenRequest(CamelModel):
    """Request schema for token refresh.

    POST /api/auth/refresh-token
    Returns: 200 OK
    """

    refresh_token: RefreshToken

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "refreshToken": "dGhpcyBpcyBhIHJhbmRvbSB0b2tlbg",
            }
        }
    )
