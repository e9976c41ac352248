"""Stub email service for development and testing.

Logs verification emails instead of sending them. The code itself is only
written to the log outside production.
"""

from src.core.result import Result, Success
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.infrastructure.email.otp_message import (
    OTP_EMAIL_SUBJECT,
    build_otp_email_body,
)


class StubEmailService:
    """Email adapter that logs instead of sending.

    Attributes:
        sent: (recipient, code) pairs in send order, for inspection in tests.

    Example:
        >>> service = StubEmailService(logger=logger, expires_in_seconds=300)
        >>> await service.send_otp_email("user@example.com", "123456")
        Success(value=None)
    """

    def __init__(
        self,
        logger: LoggerProtocol,
        expires_in_seconds: int,
        *,
        include_code_in_logs: bool = True,
    ) -> None:
        """Initialize stub email service.

        Args:
            logger: Structured logger.
            expires_in_seconds: OTP lifetime shown in the message body.
            include_code_in_logs: Log the code itself (never in production).
        """
        self._logger = logger
        self._expires_in_seconds = expires_in_seconds
        self._include_code_in_logs = include_code_in_logs
        self.sent: list[tuple[str, str]] = []

    async def send_otp_email(self, to_email: str, otp_code: str) -> Result[None, str]:
        """Log the verification email.

        Args:
            to_email: Recipient email address.
            otp_code: One-time code.

        Returns:
            Success(None). The stub never fails.
        """
        self.sent.append((to_email, otp_code))

        context: dict[str, str] = {"to_email": to_email, "subject": OTP_EMAIL_SUBJECT}
        if self._include_code_in_logs:
            context["otp_code"] = otp_code
            context["body"] = build_otp_email_body(otp_code, self._expires_in_seconds)

        self._logger.info("otp_email_stubbed", **context)
        return Success(value=None)
