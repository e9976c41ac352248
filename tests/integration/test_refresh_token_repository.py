"""Integration tests for RefreshTokenRepository.

Tests cover:
- First issue inserts a row
- Rotation overwrites the same row (one row per user)
- The previous hash stops resolving after rotation
- Delete
- An expired token is deleted on first use and unknown afterwards

Architecture:
- Integration tests with a REAL database (in-memory SQLite)
- Uses test_database fixture (fresh instance per test)
"""

from datetime import UTC, datetime, timedelta

import pytest
from freezegun import freeze_time
from sqlalchemy import func, select
from uuid_extensions import uuid7

from src.application.services.refresh_token_manager import RefreshTokenManager
from src.core.config import settings
from src.core.result import Failure, Success
from src.domain.entities.user import User
from src.domain.enums import UserRole
from src.domain.errors import AuthenticationError
from src.infrastructure.persistence.models.refresh_token import RefreshToken
from src.infrastructure.persistence.repositories.refresh_token_repository import (
    RefreshTokenRepository,
)
from src.infrastructure.persistence.repositories.user_repository import (
    UserRepository,
)
from src.infrastructure.security.refresh_token_service import RefreshTokenService


async def create_user(test_database) -> User:
    """Persist an active user to own tokens."""
    user = User(
        id=uuid7(),
        email=f"{uuid7().hex[:12]}@example.com",
        password_hash="hashed_password",
        first_name="Ada",
        last_name="Lovelace",
        email_verified=True,
        enabled=True,
        roles={UserRole.USER},
    )
    async with test_database.get_session() as session:
        await UserRepository(session).save(user)
    return user


@pytest.mark.integration
class TestRefreshTokenRepository:
    """Integration tests for RefreshTokenRepository."""

    @pytest.mark.asyncio
    async def test_upsert_inserts_first_token(self, test_database):
        """Test a user's first token is stored and resolvable by hash."""
        user = await create_user(test_database)
        expires_at = datetime.now(UTC) + timedelta(days=7)

        async with test_database.get_session() as session:
            repo = RefreshTokenRepository(session)
            stored = await repo.upsert_for_user(
                user_id=user.id, token_hash="a" * 64, expires_at=expires_at
            )
            found = await repo.find_by_token_hash("a" * 64)

        assert found is not None
        assert found.id == stored.id
        assert found.user_id == user.id
        assert found.expires_at == expires_at

    @pytest.mark.asyncio
    async def test_rotation_overwrites_single_row(self, test_database):
        """Test a second upsert replaces the hash in the same row."""
        user = await create_user(test_database)

        async with test_database.get_session() as session:
            repo = RefreshTokenRepository(session)
            first = await repo.upsert_for_user(
                user_id=user.id,
                token_hash="a" * 64,
                expires_at=datetime.now(UTC) + timedelta(days=7),
            )
            second = await repo.upsert_for_user(
                user_id=user.id,
                token_hash="b" * 64,
                expires_at=datetime.now(UTC) + timedelta(days=7),
            )

            old = await repo.find_by_token_hash("a" * 64)
            current = await repo.find_by_token_hash("b" * 64)
            count = await session.scalar(
                select(func.count()).select_from(RefreshToken).where(
                    RefreshToken.user_id == user.id
                )
            )

        assert second.id == first.id
        assert old is None
        assert current is not None
        assert current.id == first.id
        assert count == 1

    @pytest.mark.asyncio
    async def test_find_unknown_returns_none(self, test_database):
        """Test an unknown hash returns None."""
        async with test_database.get_session() as session:
            repo = RefreshTokenRepository(session)

            assert await repo.find_by_token_hash("c" * 64) is None

    @pytest.mark.asyncio
    async def test_delete(self, test_database):
        """Test a deleted token no longer resolves."""
        user = await create_user(test_database)

        async with test_database.get_session() as session:
            repo = RefreshTokenRepository(session)
            stored = await repo.upsert_for_user(
                user_id=user.id,
                token_hash="d" * 64,
                expires_at=datetime.now(UTC) + timedelta(days=7),
            )

            await repo.delete(stored.id)

            assert await repo.find_by_token_hash("d" * 64) is None


@pytest.mark.integration
class TestRefreshTokenExpiryAgainstStore:
    """RefreshTokenManager over the real repository, with the clock moved."""

    @pytest.mark.asyncio
    async def test_expired_token_is_deleted_then_unknown(self, test_database):
        """Test expiry is reported once; the next lookup finds nothing."""
        # Arrange
        user = await create_user(test_database)
        issued_at = datetime(2026, 1, 1, 12, 0, tzinfo=UTC)
        lifetime = timedelta(seconds=settings.refresh_token_expiration_seconds)
        token_service = RefreshTokenService(
            expiration_seconds=settings.refresh_token_expiration_seconds
        )

        with freeze_time(issued_at, real_asyncio=True):
            async with test_database.get_session() as session:
                issued = await RefreshTokenManager(
                    RefreshTokenRepository(session), token_service
                ).issue_or_rotate(user.id)

        # Act
        expired_at = issued_at + lifetime + timedelta(seconds=1)
        with freeze_time(expired_at, real_asyncio=True):
            async with test_database.get_session() as session:
                manager = RefreshTokenManager(
                    RefreshTokenRepository(session), token_service
                )
                record = await manager.find(issued.token)
                assert record is not None
                result = await manager.verify(record)

                again = await manager.find(issued.token)
                count = await session.scalar(
                    select(func.count()).select_from(RefreshToken)
                )

        # Assert
        assert result == Failure(error=AuthenticationError.TOKEN_EXPIRED)
        assert again is None
        assert count == 0

    @pytest.mark.asyncio
    async def test_token_valid_at_exact_lifetime(self, test_database):
        """Test a token presented exactly at expires_at is still accepted."""
        user = await create_user(test_database)
        issued_at = datetime(2026, 1, 1, 12, 0, tzinfo=UTC)
        lifetime = timedelta(seconds=settings.refresh_token_expiration_seconds)
        token_service = RefreshTokenService(
            expiration_seconds=settings.refresh_token_expiration_seconds
        )

        with freeze_time(issued_at, real_asyncio=True):
            async with test_database.get_session() as session:
                issued = await RefreshTokenManager(
                    RefreshTokenRepository(session), token_service
                ).issue_or_rotate(user.id)

        with freeze_time(issued_at + lifetime, real_asyncio=True):
            async with test_database.get_session() as session:
                manager = RefreshTokenManager(
                    RefreshTokenRepository(session), token_service
                )
                record = await manager.find(issued.token)
                result = await manager.verify(record)

        assert isinstance(result, Success)
