"""Request/response schemas for API endpoints.

All Pydantic models for HTTP request validation and response serialization.
Schemas are kept separate from domain entities (HTTP-layer concerns only).

Usage:
    from src.schemas import SignupRequest, AuthTokensResponse
"""

from src.schemas.auth_schemas import (
    AuthTokensResponse,
    LoginRequest,
    RefreshTokenRequest,
    ResendOTPQuery,
    SignupRequest,
    UserSummaryResponse,
    VerifyOTPRequest,
)
from src.schemas.common_schemas import AckResponse, CamelModel
from src.schemas.user_schemas import ProfileData, ProfileResponse

__all__ = [
    "AckResponse",
    "AuthTokensResponse",
    "CamelModel",
    "LoginRequest",
    "ProfileData",
    "ProfileResponse",
    "RefreshTokenRequest",
    "ResendOTPQuery",
    "SignupRequest",
    "UserSummaryResponse",
    "VerifyOTPRequest",
]
