"""RefreshTokenRepository - SQLAlchemy implementation for refresh token persistence.

One row per user, rotated in place on every login and refresh.
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.protocols.refresh_token_repository import RefreshTokenData
from src.infrastructure.persistence.base import as_utc
from src.infrastructure.persistence.models.refresh_token import RefreshToken


def _to_data(model: RefreshToken) -> RefreshTokenData:
    """Convert database model to domain DTO."""
    return RefreshTokenData(
        id=model.id,
        user_id=model.user_id,
        token_hash=model.token_hash,
        expires_at=as_utc(model.expires_at),
    )


class RefreshTokenRepository:
    """SQLAlchemy implementation for refresh token persistence.

    Manages refresh tokens with support for:
    - Create-or-rotate per user (single row)
    - Token validation (hash lookup)
    - Deletion of expired tokens on use

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with get_session() as session:
        ...     repo = RefreshTokenRepository(session)
        ...     token = await repo.find_by_token_hash(token_hash)
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def upsert_for_user(
        self,
        user_id: UUID,
        token_hash: str,
        expires_at: datetime,
    ) -> RefreshTokenData:
        """Insert the user's refresh token or overwrite it in place.

        Lookup and write share a single commit.

        Args:
            user_id: User's unique identifier.
            token_hash: SHA-256 hash of the refresh token.
            expires_at: Token expiration timestamp.

        Returns:
            Current RefreshTokenData for the user.
        """
        stmt = select(RefreshToken).where(RefreshToken.user_id == user_id)
        result = await self.session.execute(stmt)
        token_model = result.scalar_one_or_none()

        if token_model is None:
            token_model = RefreshToken(
                user_id=user_id,
                token_hash=token_hash,
                expires_at=expires_at,
            )
            self.session.add(token_model)
        else:
            token_model.token_hash = token_hash
            token_model.expires_at = expires_at

        await self.session.commit()
        await self.session.refresh(token_model)
        return _to_data(token_model)

    async def find_by_token_hash(self, token_hash: str) -> RefreshTokenData | None:
        """Find refresh token by hash.

        Args:
            token_hash: SHA-256 hash of the token.

        Returns:
            RefreshTokenData if found, None otherwise.
        """
        stmt = select(RefreshToken).where(RefreshToken.token_hash == token_hash)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return _to_data(model) if model else None

    async def delete(self, token_id: UUID) -> None:
        """Delete refresh token.

        Args:
            token_id: Token's unique identifier.
        """
        stmt = select(RefreshToken).where(RefreshToken.id == token_id)
        result = await self.session.execute(stmt)
        token = result.scalar_one()

        await self.session.delete(token)
        await self.session.commit()
