"""RefreshTokenRepository protocol (port) for domain layer.

Defines the refresh token persistence the application layer needs.
Infrastructure provides concrete implementations.

Storage model: at most one row per user, rotated in place.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol
from uuid import UUID


@dataclass
class RefreshTokenData:
    """Data transfer object for refresh token information.

    Used by protocol methods to return token data without
    exposing infrastructure model classes to domain/application layers.
    """

    id: UUID
    user_id: UUID
    token_hash: str
    expires_at: datetime


class RefreshTokenRepository(Protocol):
    """Protocol for refresh token persistence operations.

    Token Lifecycle:
        1. Created on first login
        2. Rotated in place on every later login and refresh
        3. Deleted when found expired on use

    Implementations:
        - RefreshTokenRepository (SQLAlchemy): src/infrastructure/persistence/repositories/
    """

    async def upsert_for_user(
        self,
        user_id: UUID,
        token_hash: str,
        expires_at: datetime,
    ) -> RefreshTokenData:
        """Create or rotate the single refresh token row for a user.

        Lookup and overwrite run in one transaction. If a row exists its
        token hash and expiry are replaced in place; otherwise a row is
        inserted.

        Args:
            user_id: Owning user's identifier.
            token_hash: SHA-256 hash of the new token (never plaintext).
            expires_at: New expiration timestamp (UTC).

        Returns:
            The current RefreshTokenData for the user.
        """
        ...

    async def find_by_token_hash(self, token_hash: str) -> RefreshTokenData | None:
        """Find refresh token by hash.

        Does NOT check expiration - caller must verify expires_at.

        Args:
            token_hash: SHA-256 hash of the presented token.

        Returns:
            RefreshTokenData if found, None otherwise.
        """
        ...

    async def delete(self, token_id: UUID) -> None:
        """Delete a refresh token row.

        Args:
            token_id: Token's unique identifier.
        """
        ...
