"""Verify OTP handler.

Flow:
1. Emit OTPVerificationAttempted event
2. Validate and consume the code
3. Load the user
4. Activate (email_verified and enabled together) and persist
5. Emit OTPVerificationSucceeded event
6. Return Success(None)

On failure:
- Emit OTPVerificationFailed event
- Return Failure(error)
"""

from src.application.commands.auth_commands import VerifyOTP
from src.application.services.otp_service import OTPService
from src.core.result import Failure, Result, Success
from src.domain.errors import AuthenticationError
from src.domain.events.auth_events import (
    OTPVerificationAttempted,
    OTPVerificationFailed,
    OTPVerificationSucceeded,
)
from src.domain.protocols import EventBusProtocol, UserRepository


class VerifyOTPHandler:
    """Handler for the VerifyOTP command."""

    def __init__(
        self,
        user_repo: UserRepository,
        otp_service: OTPService,
        event_bus: EventBusProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._otp_service = otp_service
        self._event_bus = event_bus

    async def handle(self, cmd: VerifyOTP) -> Result[None, str]:
        """Handle OTP verification.

        Returns:
            Success(None) when the account is now active.
            Failure(INVALID_OR_EXPIRED_OTP | USER_NOT_FOUND).
        """
        # Step 1: Emit ATTEMPTED event
        await self._event_bus.publish(OTPVerificationAttempted(email=cmd.email))

        # Step 2: Validate code (single use)
        match await self._otp_service.validate(cmd.email, cmd.otp):
            case Failure():
                return await self._fail(
                    cmd.email, AuthenticationError.INVALID_OR_EXPIRED_OTP
                )
            case _:
                pass

        # Step 3: Load user
        user = await self._user_repo.find_by_email(cmd.email)
        if user is None:
            return await self._fail(cmd.email, AuthenticationError.USER_NOT_FOUND)

        # Step 4: Activate
        user.activate()
        await self._user_repo.update(user)

        # Step 5: Emit SUCCEEDED event
        await self._event_bus.publish(
            OTPVerificationSucceeded(user_id=user.id, email=user.email)
        )

        return Success(value=None)

    async def _fail(self, email: str, error: str) -> Failure[str]:
        await self._event_bus.publish(OTPVerificationFailed(email=email, reason=error))
        return Failure(error=error)
