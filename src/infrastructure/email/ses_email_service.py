"""AWS SES email service for production.

Sends verification codes as plain-text email through Amazon SES (boto3).
Transport errors are logged and returned as Failure(DELIVERY_FAILED).
"""

import asyncio
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from src.core.result import Failure, Result, Success
from src.domain.errors import AuthenticationError
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.infrastructure.email.otp_message import (
    OTP_EMAIL_SUBJECT,
    build_otp_email_body,
)


class SESEmailService:
    """Email adapter backed by Amazon SES.

    Attributes:
        from_email: Configured sender email address
        from_name: Configured sender display name
    """

    def __init__(
        self,
        logger: LoggerProtocol,
        from_email: str,
        from_name: str,
        region: str,
        expires_in_seconds: int,
        ses_client: Any | None = None,
    ) -> None:
        """Initialize SES email service.

        Args:
            logger: Structured logger.
            from_email: Sender address (must be verified in SES).
            from_name: Sender display name.
            region: AWS region of the SES endpoint.
            expires_in_seconds: OTP lifetime shown in the message body.
            ses_client: Pre-built boto3 SES client (tests inject a stub).
                Credentials come from the standard AWS provider chain.
        """
        self._logger = logger
        self.from_email = from_email
        self.from_name = from_name
        self._expires_in_seconds = expires_in_seconds
        self._client = ses_client or boto3.client("ses", region_name=region)

    async def send_otp_email(self, to_email: str, otp_code: str) -> Result[None, str]:
        """Send the verification email.

        Args:
            to_email: Recipient email address.
            otp_code: One-time code.

        Returns:
            Success(None) if SES accepted the message,
            Failure(DELIVERY_FAILED) otherwise. No retry is attempted.
        """
        try:
            # boto3 is synchronous; keep the event loop free
            response = await asyncio.to_thread(
                self._client.send_email,
                Source=f"{self.from_name} <{self.from_email}>",
                Destination={"ToAddresses": [to_email]},
                Message={
                    "Subject": {"Charset": "UTF-8", "Data": OTP_EMAIL_SUBJECT},
                    "Body": {
                        "Text": {
                            "Charset": "UTF-8",
                            "Data": build_otp_email_body(
                                otp_code, self._expires_in_seconds
                            ),
                        }
                    },
                },
            )
        except ClientError as e:
            self._logger.error(
                "otp_email_send_failed",
                error=e,
                to_email=to_email,
                error_code=e.response.get("Error", {}).get("Code", "unknown"),
            )
            return Failure(error=AuthenticationError.DELIVERY_FAILED)
        except BotoCoreError as e:
            self._logger.error("otp_email_send_failed", error=e, to_email=to_email)
            return Failure(error=AuthenticationError.DELIVERY_FAILED)

        self._logger.info(
            "otp_email_sent",
            to_email=to_email,
            message_id=response.get("MessageId", "unknown"),
        )
        return Success(value=None)
