"""One-time password database model for email verification.

Security:
    - otp_code: Short numeric code from a CSPRNG
    - expires_at: Configurable TTL (default 5 minutes)
    - verified: Single use (set on first successful match)
"""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseModel


class OTP(BaseModel):
    """Email verification code keyed by email address.

    At most one row per email is expected at any time: issuing a new code
    deletes every earlier row for that email in the same transaction.

    Fields:
        id: UUID primary key (from BaseModel)
        created_at: Timestamp when code issued (from BaseModel)
        email: Owning email address (indexed, not a foreign key)
        otp_code: Numeric code sent to the user
        expires_at: Timestamp after which the code is rejected
        verified: True once the code has been consumed

    Note:
        Inherits from BaseModel (NOT BaseMutableModel) because codes are
        only inserted, consumed once, and deleted.
    """

    __tablename__ = "otps"

    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        index=True,
        comment="Email address the code was sent to",
    )

    otp_code: Mapped[str] = mapped_column(
        String(10),
        nullable=False,
        comment="Numeric verification code",
    )

    expires_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        comment="Timestamp when code expires",
    )

    verified: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        comment="Consumed flag (single use)",
    )

    # Lookup index for verification (email + code, unconsumed)
    __table_args__ = (Index("idx_otps_email_code", "email", "otp_code"),)

    def __repr__(self) -> str:
        """String representation for debugging.

        Returns:
            str: Human-readable representation (code omitted).
        """
        return (
            f"<OTP("
            f"id={self.id}, "
            f"email={self.email!r}, "
            f"expires_at={self.expires_at}, "
            f"verified={self.verified}"
            f")>"
        )
