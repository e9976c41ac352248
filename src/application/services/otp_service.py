"""One-time password service.

Issues, validates and re-issues email verification codes.

Issue flow:
    1. Generate code and expiry
    2. Replace every stored code for the email (one transaction)
    3. Send the code (after the commit)

A delivery failure leaves the stored code in place; the caller reports it
and the user can ask for a resend.
"""

from datetime import UTC, datetime

from src.core.result import Failure, Result, Success
from src.domain.errors import AuthenticationError
from src.domain.protocols import (
    LoggerProtocol,
    OTPCodeProtocol,
    OTPNotifierProtocol,
    OTPRepository,
)


class OTPService:
    """Verification code lifecycle.

    Example:
        >>> service = OTPService(otp_repo, code_service, notifier, logger)
        >>> await service.issue("user@example.com")
        Success(value=None)
        >>> await service.validate("user@example.com", "000000")
        Failure(error='invalid_or_expired_otp')
    """

    def __init__(
        self,
        otp_repo: OTPRepository,
        code_service: OTPCodeProtocol,
        notifier: OTPNotifierProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._otp_repo = otp_repo
        self._code_service = code_service
        self._notifier = notifier
        self._logger = logger

    async def issue(self, email: str) -> Result[None, str]:
        """Generate, store and send a new code.

        Args:
            email: Recipient and owning email address.

        Returns:
            Success(None) once the code is stored and handed to the notifier.
            Failure(DELIVERY_FAILED) if sending failed (code stays stored).
        """
        otp_code = self._code_service.generate_code()
        expires_at = self._code_service.calculate_expiration()

        otp = await self._otp_repo.replace_for_email(
            email=email,
            otp_code=otp_code,
            expires_at=expires_at,
        )
        self._logger.info(
            "otp_issued",
            email=email,
            otp_id=str(otp.id),
            expires_at=expires_at.isoformat(),
        )

        match await self._notifier.send_otp_email(email, otp_code):
            case Failure(error=error):
                self._logger.warning("otp_delivery_failed", email=email, reason=error)
                return Failure(error=AuthenticationError.DELIVERY_FAILED)
            case _:
                return Success(value=None)

    async def validate(self, email: str, otp_code: str) -> Result[None, str]:
        """Consume a code if it matches, is unconsumed and has not expired.

        Args:
            email: Owning email address.
            otp_code: Code submitted by the user.

        Returns:
            Success(None) on first valid use.
            Failure(INVALID_OR_EXPIRED_OTP) otherwise (no separate expiry signal).
        """
        otp = await self._otp_repo.find_unverified(email, otp_code)
        if otp is None:
            return Failure(error=AuthenticationError.INVALID_OR_EXPIRED_OTP)

        if otp.expires_at < datetime.now(UTC):
            return Failure(error=AuthenticationError.INVALID_OR_EXPIRED_OTP)

        # A concurrent call may have consumed the same row since the lookup
        if not await self._otp_repo.mark_verified(otp.id):
            return Failure(error=AuthenticationError.INVALID_OR_EXPIRED_OTP)

        return Success(value=None)

    async def resend(self, email: str) -> Result[None, str]:
        """Re-issue a code. Earlier codes are removed by the replace step."""
        return await self.issue(email)
