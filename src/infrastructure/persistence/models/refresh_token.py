"""Refresh token database model for authentication.

Security:
    - token_hash: SHA-256 of the opaque token (plaintext never stored)
    - expires_at: Configurable TTL (default 7 days)
    - user_id: Unique, one live token per user, rotated in place
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseMutableModel


class RefreshToken(BaseMutableModel):
    """Refresh token model for the JWT refresh flow.

    Token Lifecycle:
        1. Created on first login
        2. Overwritten (new hash, new expiry) on each login and refresh
        3. Deleted when presented after expiry
        4. Deleted with the user (cascade)

    Fields:
        id: UUID primary key (from BaseMutableModel)
        created_at: Timestamp when row created (from BaseMutableModel)
        updated_at: Timestamp of last rotation (from BaseMutableModel)
        user_id: Foreign key to users table (unique, cascade delete)
        token_hash: SHA-256 hex digest of the token (unique)
        expires_at: Timestamp when token expires

    Foreign Keys:
        - user_id: References users(id) ON DELETE CASCADE
    """

    __tablename__ = "refresh_tokens"

    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
        index=True,
        comment="User who owns this refresh token",
    )

    token_hash: Mapped[str] = mapped_column(
        String(64),  # SHA-256 = 64 hex characters
        nullable=False,
        unique=True,
        index=True,
        comment="SHA-256 hashed refresh token (NEVER plaintext)",
    )

    expires_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        comment="Timestamp when token expires",
    )

    def __repr__(self) -> str:
        """String representation for debugging.

        Returns:
            str: Human-readable representation of refresh token.
        """
        return (
            f"<RefreshToken("
            f"id={self.id}, "
            f"user_id={self.user_id}, "
            f"expires_at={self.expires_at}"
            f")>"
        )
