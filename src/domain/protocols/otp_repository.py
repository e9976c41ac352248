"""OTPRepository protocol (port) for one-time password persistence.

Infrastructure provides the SQLAlchemy implementation.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol
from uuid import UUID


@dataclass
class OTPData:
    """Data transfer object for a stored OTP record.

    Keeps infrastructure model classes out of the application layer.
    """

    id: UUID
    email: str
    otp_code: str
    expires_at: datetime
    verified: bool
    created_at: datetime


class OTPRepository(Protocol):
    """Protocol for OTP persistence operations.

    Record Lifecycle:
        1. Created on signup or resend (all previous rows for the email deleted)
        2. Matched on verification (email + code, unconsumed only)
        3. Marked verified by a conditional update (single use)
        4. Otherwise left to expire; expiry is checked at read time

    Implementations:
        - OTPRepository (SQLAlchemy): src/infrastructure/persistence/repositories/
    """

    async def replace_for_email(
        self,
        email: str,
        otp_code: str,
        expires_at: datetime,
    ) -> OTPData:
        """Delete every OTP for the email and insert a new one.

        Both statements run in one transaction, so readers never observe
        an email with zero rows mid-replacement.

        Args:
            email: Owning email address.
            otp_code: Numeric code.
            expires_at: Expiration timestamp (UTC).

        Returns:
            The newly created OTPData (verified=False).
        """
        ...

    async def find_unverified(self, email: str, otp_code: str) -> OTPData | None:
        """Find an unconsumed OTP matching email and code exactly.

        Does NOT check expiration - caller must verify expires_at.

        Args:
            email: Owning email address.
            otp_code: Code submitted by the user.

        Returns:
            OTPData if an unconsumed match exists, None otherwise.
        """
        ...


    async def mark_verified(self, otp_id: UUID) -> bool:
        """Consume an OTP (verified=True) if it is still unconsumed.

        Check and write are one conditional statement, so a code can be
        consumed at most once even under concurrent verification.

        Args:
            otp_id: OTP record identifier.

        Returns:
            True if this call consumed the code, False otherwise.
        """
        ...
