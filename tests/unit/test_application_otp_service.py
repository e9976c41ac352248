"""Unit tests for OTPService.

Tests cover:
- issue() stores the code before sending it
- Delivery failure maps to DELIVERY_FAILED (code stays stored)
- validate() consumes a fresh code exactly once, even when raced
- Expired or unknown codes fail with INVALID_OR_EXPIRED_OTP
- resend() re-issues

Architecture:
- Mocked repository, code generator, notifier and logger
"""

from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock, Mock

import pytest
from freezegun import freeze_time
from uuid_extensions import uuid7

from src.application.services.otp_service import OTPService
from src.core.result import Failure, Success
from src.domain.errors import AuthenticationError
from src.domain.protocols import OTPData


def create_otp_data(
    email: str = "user@example.com",
    otp_code: str = "123456",
    expires_at: datetime | None = None,
    verified: bool = False,
) -> OTPData:
    """Helper to create OTPData records."""
    now = datetime.now(UTC)
    return OTPData(
        id=uuid7(),
        email=email,
        otp_code=otp_code,
        expires_at=expires_at or now + timedelta(minutes=5),
        verified=verified,
        created_at=now,
    )


def build_service(
    otp_repo=None,
    notifier_result=None,
) -> tuple[OTPService, AsyncMock, Mock, AsyncMock, Mock]:
    """Build an OTPService with mocked collaborators."""
    otp_repo = otp_repo or AsyncMock()
    otp_repo.replace_for_email.return_value = create_otp_data()
    otp_repo.mark_verified.return_value = True

    code_service = Mock()
    code_service.generate_code.return_value = "123456"
    code_service.calculate_expiration.return_value = datetime.now(UTC) + timedelta(
        minutes=5
    )

    notifier = AsyncMock()
    notifier.send_otp_email.return_value = notifier_result or Success(value=None)

    logger = Mock()

    service = OTPService(
        otp_repo=otp_repo,
        code_service=code_service,
        notifier=notifier,
        logger=logger,
    )
    return service, otp_repo, code_service, notifier, logger


@pytest.mark.unit
class TestOTPServiceIssue:
    """Test code issuance."""

    @pytest.mark.asyncio
    async def test_issue_replaces_stored_code_and_sends(self):
        """Test issue stores the generated code, then emails it."""
        # Arrange
        service, otp_repo, code_service, notifier, _ = build_service()

        # Act
        result = await service.issue("user@example.com")

        # Assert
        assert result == Success(value=None)
        otp_repo.replace_for_email.assert_awaited_once_with(
            email="user@example.com",
            otp_code="123456",
            expires_at=code_service.calculate_expiration.return_value,
        )
        notifier.send_otp_email.assert_awaited_once_with("user@example.com", "123456")

    @pytest.mark.asyncio
    async def test_issue_commits_before_sending(self):
        """Test the store write happens before the notifier is called."""
        # Arrange
        calls: list[str] = []
        service, otp_repo, _, notifier, _ = build_service()
        otp_repo.replace_for_email.side_effect = lambda **_: (
            calls.append("store") or create_otp_data()
        )
        notifier.send_otp_email.side_effect = lambda *_: (
            calls.append("send") or Success(value=None)
        )

        # Act
        await service.issue("user@example.com")

        # Assert
        assert calls == ["store", "send"]

    @pytest.mark.asyncio
    async def test_issue_delivery_failure_returns_delivery_failed(self):
        """Test a notifier failure is reported as DELIVERY_FAILED."""
        # Arrange
        service, otp_repo, _, _, logger = build_service(
            notifier_result=Failure(error="ses_rejected")
        )

        # Act
        result = await service.issue("user@example.com")

        # Assert
        assert result == Failure(error=AuthenticationError.DELIVERY_FAILED)
        otp_repo.replace_for_email.assert_awaited_once()
        assert [name for name, _, _ in otp_repo.method_calls] == ["replace_for_email"]
        logger.warning.assert_called_once()

    @pytest.mark.asyncio
    async def test_issue_never_logs_code(self):
        """Test the otp_issued log line carries no code."""
        # Arrange
        service, _, _, _, logger = build_service()

        # Act
        await service.issue("user@example.com")

        # Assert
        _, kwargs = logger.info.call_args
        assert "otp_code" not in kwargs
        assert "123456" not in kwargs.values()

    @pytest.mark.asyncio
    async def test_resend_issues_new_code(self):
        """Test resend delegates to the issue flow."""
        # Arrange
        service, otp_repo, _, notifier, _ = build_service()

        # Act
        result = await service.resend("user@example.com")

        # Assert
        assert isinstance(result, Success)
        otp_repo.replace_for_email.assert_awaited_once()
        notifier.send_otp_email.assert_awaited_once()


@pytest.mark.unit
class TestOTPServiceValidate:
    """Test code validation and consumption."""

    @pytest.mark.asyncio
    async def test_validate_fresh_code_marks_verified(self):
        """Test a matching unexpired code is consumed."""
        # Arrange
        otp = create_otp_data()
        service, otp_repo, _, _, _ = build_service()
        otp_repo.find_unverified.return_value = otp

        # Act
        result = await service.validate("user@example.com", "123456")

        # Assert
        assert result == Success(value=None)
        otp_repo.find_unverified.assert_awaited_once_with("user@example.com", "123456")
        otp_repo.mark_verified.assert_awaited_once_with(otp.id)

    @pytest.mark.asyncio
    async def test_validate_unknown_code_fails(self):
        """Test a code with no unconsumed match fails."""
        # Arrange
        service, otp_repo, _, _, _ = build_service()
        otp_repo.find_unverified.return_value = None

        # Act
        result = await service.validate("user@example.com", "000000")

        # Assert
        assert result == Failure(error=AuthenticationError.INVALID_OR_EXPIRED_OTP)
        otp_repo.mark_verified.assert_not_called()

    @pytest.mark.asyncio
    async def test_validate_expired_code_fails(self):
        """Test a code past its TTL fails with the same error."""
        # Arrange
        with freeze_time("2026-01-01 12:00:00"):
            otp = create_otp_data(expires_at=datetime.now(UTC) + timedelta(minutes=5))
        service, otp_repo, _, _, _ = build_service()
        otp_repo.find_unverified.return_value = otp

        # Act
        with freeze_time("2026-01-01 12:05:01"):
            result = await service.validate("user@example.com", "123456")

        # Assert
        assert result == Failure(error=AuthenticationError.INVALID_OR_EXPIRED_OTP)
        otp_repo.mark_verified.assert_not_called()

    @pytest.mark.asyncio
    async def test_validate_at_exact_expiry_still_passes(self):
        """Test expires_at equal to now is still valid."""
        # Arrange
        with freeze_time("2026-01-01 12:00:00"):
            otp = create_otp_data(expires_at=datetime.now(UTC) + timedelta(minutes=5))
        service, otp_repo, _, _, _ = build_service()
        otp_repo.find_unverified.return_value = otp

        # Act
        with freeze_time("2026-01-01 12:05:00"):
            result = await service.validate("user@example.com", "123456")

        # Assert
        assert isinstance(result, Success)

    @pytest.mark.asyncio
    async def test_validate_fails_when_code_consumed_concurrently(self):
        """Test losing the consume race fails like an already-used code."""
        # Arrange - lookup still saw the row, but another request consumed it
        otp = create_otp_data()
        service, otp_repo, _, _, _ = build_service()
        otp_repo.find_unverified.return_value = otp
        otp_repo.mark_verified.return_value = False

        # Act
        result = await service.validate("user@example.com", "123456")

        # Assert
        assert result == Failure(error=AuthenticationError.INVALID_OR_EXPIRED_OTP)
        otp_repo.mark_verified.assert_awaited_once_with(otp.id)
