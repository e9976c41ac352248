"""Unit tests for RefreshTokenHandler.

Tests cover:
- Valid token returns a new access token and a rotated refresh token
- Unknown token gives TOKEN_INVALID
- Expired token gives TOKEN_EXPIRED
- Token whose owner no longer exists gives TOKEN_INVALID
- Event publishing
"""

from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock, Mock

import pytest
from uuid_extensions import uuid7

from src.application.commands.auth_commands import RefreshAccessToken
from src.application.commands.handlers.refresh_token_handler import (
    RefreshTokenHandler,
)
from src.application.dtos import IssuedRefreshToken
from src.core.result import Failure, Success
from src.domain.entities.user import User
from src.domain.enums import UserRole
from src.domain.errors import AuthenticationError
from src.domain.events.auth_events import (
    TokenRefreshAttempted,
    TokenRefreshFailed,
    TokenRefreshSucceeded,
)
from src.domain.protocols import RefreshTokenData


def create_user() -> User:
    """Helper to create an active user."""
    return User(
        id=uuid7(),
        email="user@example.com",
        password_hash="hashed_password",
        first_name="Ada",
        last_name="Lovelace",
        email_verified=True,
        enabled=True,
        roles={UserRole.USER},
    )


def create_record(user: User) -> RefreshTokenData:
    """Helper to create a stored refresh token for the user."""
    return RefreshTokenData(
        id=uuid7(),
        user_id=user.id,
        token_hash="a" * 64,
        expires_at=datetime.now(UTC) + timedelta(days=1),
    )


def build_handler(
    user: User | None,
    record: RefreshTokenData | None,
    verify_result=None,
) -> tuple[RefreshTokenHandler, AsyncMock, Mock, AsyncMock, AsyncMock]:
    """Build a RefreshTokenHandler with mocked dependencies."""
    user_repo = AsyncMock()
    user_repo.find_by_id.return_value = user

    token_service = Mock()
    token_service.generate_access_token.return_value = "new.access.token"
    token_service.expiration_seconds = 900

    refresh_token_manager = AsyncMock()
    refresh_token_manager.find.return_value = record
    refresh_token_manager.verify.return_value = verify_result or Success(value=record)
    refresh_token_manager.issue_or_rotate.return_value = IssuedRefreshToken(
        token="rotated-refresh-token",
        record=record,
    )

    event_bus = AsyncMock()

    handler = RefreshTokenHandler(
        user_repo=user_repo,
        token_service=token_service,
        refresh_token_manager=refresh_token_manager,
        event_bus=event_bus,
    )
    return handler, user_repo, token_service, refresh_token_manager, event_bus


@pytest.mark.unit
class TestRefreshTokenHandlerSuccess:
    """Test successful refresh."""

    @pytest.mark.asyncio
    async def test_refresh_returns_rotated_pair(self):
        """Test success carries a new access token and the rotated refresh token."""
        # Arrange
        user = create_user()
        record = create_record(user)
        handler, _, _, refresh_manager, event_bus = build_handler(user, record)

        # Act
        result = await handler.handle(RefreshAccessToken(refresh_token="old-token"))

        # Assert
        assert isinstance(result, Success)
        assert result.value.access_token == "new.access.token"
        assert result.value.refresh_token == "rotated-refresh-token"
        assert result.value.expires_in == 900
        assert result.value.user.email == "user@example.com"
        refresh_manager.find.assert_awaited_once_with("old-token")
        refresh_manager.issue_or_rotate.assert_awaited_once_with(user.id)
        published = [type(c.args[0]) for c in event_bus.publish.await_args_list]
        assert published == [TokenRefreshAttempted, TokenRefreshSucceeded]


@pytest.mark.unit
class TestRefreshTokenHandlerFailure:
    """Test refresh failure paths."""

    @pytest.mark.asyncio
    async def test_unknown_token_is_invalid(self):
        """Test a token with no stored hash gives TOKEN_INVALID."""
        # Arrange
        handler, _, _, refresh_manager, event_bus = build_handler(
            user=create_user(), record=None
        )

        # Act
        result = await handler.handle(RefreshAccessToken(refresh_token="bogus"))

        # Assert
        assert result == Failure(error=AuthenticationError.TOKEN_INVALID)
        refresh_manager.verify.assert_not_called()
        refresh_manager.issue_or_rotate.assert_not_called()
        assert isinstance(event_bus.publish.await_args.args[0], TokenRefreshFailed)

    @pytest.mark.asyncio
    async def test_expired_token_is_expired(self):
        """Test an expired token gives TOKEN_EXPIRED and is not rotated."""
        # Arrange
        user = create_user()
        record = create_record(user)
        handler, _, token_service, refresh_manager, event_bus = build_handler(
            user,
            record,
            verify_result=Failure(error=AuthenticationError.TOKEN_EXPIRED),
        )

        # Act
        result = await handler.handle(RefreshAccessToken(refresh_token="stale"))

        # Assert
        assert result == Failure(error=AuthenticationError.TOKEN_EXPIRED)
        token_service.generate_access_token.assert_not_called()
        refresh_manager.issue_or_rotate.assert_not_called()
        failed_event = event_bus.publish.await_args.args[0]
        assert failed_event.reason == AuthenticationError.TOKEN_EXPIRED
        assert failed_event.user_id == user.id

    @pytest.mark.asyncio
    async def test_missing_owner_is_invalid(self):
        """Test a token whose user was removed gives TOKEN_INVALID."""
        # Arrange
        user = create_user()
        record = create_record(user)
        handler, _, _, refresh_manager, _ = build_handler(user=None, record=record)

        # Act
        result = await handler.handle(RefreshAccessToken(refresh_token="orphan"))

        # Assert
        assert result == Failure(error=AuthenticationError.TOKEN_INVALID)
        refresh_manager.issue_or_rotate.assert_not_called()
