"""Repository implementations (adapters for hexagonal architecture).

This package contains concrete implementations of repository protocols
defined in the domain layer.
"""

from src.infrastructure.persistence.repositories.otp_repository import OTPRepository
from src.infrastructure.persistence.repositories.refresh_token_repository import (
    RefreshTokenRepository,
)
from src.infrastructure.persistence.repositories.user_repository import UserRepository

__all__ = [
    "OTPRepository",
    "RefreshTokenRepository",
    "UserRepository",
]
