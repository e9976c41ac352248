"""Database models for persistence layer.

This package contains SQLAlchemy database models that map to database
tables. These are infrastructure concerns and should not be imported by the
domain layer.

Models Organization:
    - user.py: User model
    - otp.py: Email verification code model
    - refresh_token.py: Refresh token model

Note:
    Domain entities (dataclasses) live in src/domain/entities/
    Database models live here in src/infrastructure/persistence/models/
    They are separate and mapped via repository layer.
"""

from src.infrastructure.persistence.models.otp import OTP
from src.infrastructure.persistence.models.refresh_token import RefreshToken
from src.infrastructure.persistence.models.user import User

__all__ = [
    "OTP",
    "RefreshToken",
    "User",
]
