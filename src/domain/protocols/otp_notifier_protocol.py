"""OTPNotifierProtocol - Domain protocol for delivering verification codes.

Infrastructure provides concrete implementations (stub, AWS SES).
"""

from typing import Protocol

from src.core.result import Result


class OTPNotifierProtocol(Protocol):
    """Protocol for sending one-time codes to an email address.

    Delivery is fire-once: implementations do not retry. Transport failures
    are returned as Failure(AuthenticationError.DELIVERY_FAILED) rather than
    raised, so callers can report them separately from validation failures.

    Implementations:
        - StubEmailService: src/infrastructure/email/stub_email_service.py (dev/test)
        - SESEmailService: src/infrastructure/email/ses_email_service.py (production)
    """

    async def send_otp_email(self, to_email: str, otp_code: str) -> Result[None, str]:
        """Send a verification code.

        Args:
            to_email: Recipient email address.
            otp_code: The one-time code.

        Returns:
            Success(None) once the message is handed off, Failure(reason) otherwise.
        """
        ...
