"""Refresh token manager.

Issues, rotates and checks the single refresh token each user holds.

Rotation overwrites the user's row in place, so the previous token value
stops resolving the moment a new one is issued. Expired tokens are deleted
when presented; there is no background cleanup.
"""

from datetime import UTC, datetime
from uuid import UUID

from src.application.dtos import IssuedRefreshToken
from src.core.result import Failure, Result, Success
from src.domain.errors import AuthenticationError
from src.domain.protocols import (
    RefreshTokenData,
    RefreshTokenRepository,
    RefreshTokenServiceProtocol,
)


class RefreshTokenManager:
    """Refresh token lifecycle over the repository and token service."""

    def __init__(
        self,
        refresh_token_repo: RefreshTokenRepository,
        token_service: RefreshTokenServiceProtocol,
    ) -> None:
        self._refresh_token_repo = refresh_token_repo
        self._token_service = token_service

    async def issue_or_rotate(self, user_id: UUID) -> IssuedRefreshToken:
        """Mint a new token for the user, replacing any existing one.

        Args:
            user_id: Owning user's identifier.

        Returns:
            IssuedRefreshToken with the plain token and the stored record.
        """
        token, token_hash = self._token_service.generate_token()
        record = await self._refresh_token_repo.upsert_for_user(
            user_id=user_id,
            token_hash=token_hash,
            expires_at=self._token_service.calculate_expiration(),
        )
        return IssuedRefreshToken(token=token, record=record)

    async def find(self, token: str) -> RefreshTokenData | None:
        """Resolve a presented token to its stored record (expiry not checked)."""
        return await self._refresh_token_repo.find_by_token_hash(
            self._token_service.hash_token(token)
        )

    async def verify(self, record: RefreshTokenData) -> Result[RefreshTokenData, str]:
        """Check expiry, deleting the record if it has lapsed.

        Args:
            record: Stored refresh token.

        Returns:
            Success(record) if expires_at is now or later.
            Failure(TOKEN_EXPIRED) otherwise (record deleted).
        """
        if record.expires_at >= datetime.now(UTC):
            return Success(value=record)

        await self._refresh_token_repo.delete(record.id)
        return Failure(error=AuthenticationError.TOKEN_EXPIRED)
