"""Resend OTP handler.

Issues a fresh verification code for a known account. Earlier codes for the
email are deleted as part of the issue step.
"""

from src.application.commands.auth_commands import ResendOTP
from src.application.services.otp_service import OTPService
from src.core.result import Failure, Result, Success
from src.domain.errors import AuthenticationError
from src.domain.events.auth_events import OTPResent
from src.domain.protocols import EventBusProtocol, UserRepository


class ResendOTPHandler:
    """Handler for the ResendOTP command."""

    def __init__(
        self,
        user_repo: UserRepository,
        otp_service: OTPService,
        event_bus: EventBusProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._otp_service = otp_service
        self._event_bus = event_bus

    async def handle(self, cmd: ResendOTP) -> Result[None, str]:
        """Handle resend.

        Returns:
            Success(None) once the new code is sent.
            Failure(USER_NOT_FOUND | DELIVERY_FAILED).
        """
        if not await self._user_repo.exists_by_email(cmd.email):
            return Failure(error=AuthenticationError.USER_NOT_FOUND)

        match await self._otp_service.resend(cmd.email):
            case Failure(error=error):
                return Failure(error=error)
            case _:
                await self._event_bus.publish(OTPResent(email=cmd.email))
                return Success(value=None)
