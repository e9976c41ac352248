"""Application DTOs."""

from src.application.dtos.auth_dtos import AuthTokens, IssuedRefreshToken, UserSummary

__all__ = [
    "AuthTokens",
    "IssuedRefreshToken",
    "UserSummary",
]
