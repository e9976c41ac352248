"""Unit tests for VerifyOTPHandler.

Tests cover:
- Valid code activates the user (both flags) and persists it
- Invalid or expired code gives INVALID_OR_EXPIRED_OTP
- Valid code for an email with no account gives USER_NOT_FOUND
"""

from unittest.mock import AsyncMock

import pytest
from uuid_extensions import uuid7

from src.application.commands.auth_commands import VerifyOTP
from src.application.commands.handlers.verify_otp_handler import VerifyOTPHandler
from src.core.result import Failure, Success
from src.domain.entities.user import User
from src.domain.enums import UserRole
from src.domain.errors import AuthenticationError
from src.domain.events.auth_events import (
    OTPVerificationAttempted,
    OTPVerificationFailed,
    OTPVerificationSucceeded,
)


def create_user() -> User:
    """Helper to create an unverified user."""
    return User(
        id=uuid7(),
        email="user@example.com",
        password_hash="hashed_password",
        first_name="Ada",
        last_name="Lovelace",
        roles={UserRole.USER},
    )


def build_handler(
    user: User | None = None,
    otp_result=None,
) -> tuple[VerifyOTPHandler, AsyncMock, AsyncMock, AsyncMock]:
    """Build a VerifyOTPHandler with mocked dependencies."""
    user_repo = AsyncMock()
    user_repo.find_by_email.return_value = user

    otp_service = AsyncMock()
    otp_service.validate.return_value = otp_result or Success(value=None)

    event_bus = AsyncMock()

    handler = VerifyOTPHandler(
        user_repo=user_repo,
        otp_service=otp_service,
        event_bus=event_bus,
    )
    return handler, user_repo, otp_service, event_bus


@pytest.mark.unit
class TestVerifyOTPHandler:
    """Test OTP verification."""

    @pytest.mark.asyncio
    async def test_valid_code_activates_user(self):
        """Test a valid code sets email_verified and enabled together."""
        # Arrange
        user = create_user()
        handler, user_repo, otp_service, event_bus = build_handler(user=user)

        # Act
        result = await handler.handle(VerifyOTP(email="user@example.com", otp="123456"))

        # Assert
        assert result == Success(value=None)
        otp_service.validate.assert_awaited_once_with("user@example.com", "123456")
        updated = user_repo.update.await_args.args[0]
        assert updated.email_verified is True
        assert updated.enabled is True
        published = [type(c.args[0]) for c in event_bus.publish.await_args_list]
        assert published == [OTPVerificationAttempted, OTPVerificationSucceeded]

    @pytest.mark.asyncio
    async def test_invalid_code_fails(self):
        """Test a rejected code returns INVALID_OR_EXPIRED_OTP and changes nothing."""
        # Arrange
        user = create_user()
        handler, user_repo, _, event_bus = build_handler(
            user=user,
            otp_result=Failure(error=AuthenticationError.INVALID_OR_EXPIRED_OTP),
        )

        # Act
        result = await handler.handle(VerifyOTP(email="user@example.com", otp="000000"))

        # Assert
        assert result == Failure(error=AuthenticationError.INVALID_OR_EXPIRED_OTP)
        user_repo.update.assert_not_called()
        assert user.can_login() is False
        failed_event = event_bus.publish.await_args_list[-1].args[0]
        assert isinstance(failed_event, OTPVerificationFailed)
        assert failed_event.reason == AuthenticationError.INVALID_OR_EXPIRED_OTP

    @pytest.mark.asyncio
    async def test_valid_code_without_account_is_user_not_found(self):
        """Test a consumed code for an unknown email gives USER_NOT_FOUND."""
        # Arrange
        handler, user_repo, _, _ = build_handler(user=None)

        # Act
        result = await handler.handle(
            VerifyOTP(email="ghost@example.com", otp="123456")
        )

        # Assert
        assert result == Failure(error=AuthenticationError.USER_NOT_FOUND)
        user_repo.update.assert_not_called()
