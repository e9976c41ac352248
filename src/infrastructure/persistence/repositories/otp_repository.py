"""OTPRepository - SQLAlchemy implementation for one-time password persistence.

Handles issue (replace), lookup and consumption of email verification codes.
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.protocols.otp_repository import OTPData
from src.infrastructure.persistence.base import as_utc
from src.infrastructure.persistence.models.otp import OTP


def _to_data(model: OTP) -> OTPData:
    """Convert database model to domain DTO."""
    return OTPData(
        id=model.id,
        email=model.email,
        otp_code=model.otp_code,
        expires_at=as_utc(model.expires_at),
        verified=model.verified,
        created_at=as_utc(model.created_at),
    )


class OTPRepository:
    """SQLAlchemy implementation for OTP persistence.

    Manages verification codes with support for:
    - Atomic replacement (delete all for email, insert one)
    - Lookup by email and code among unconsumed rows
    - Single-use consumption (mark verified)

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with get_session() as session:
        ...     repo = OTPRepository(session)
        ...     otp = await repo.find_unverified("user@example.com", "123456")
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def replace_for_email(
        self,
        email: str,
        otp_code: str,
        expires_at: datetime,
    ) -> OTPData:
        """Delete all codes for the email and insert a fresh one.

        Delete and insert share a single commit.

        Args:
            email: Owning email address.
            otp_code: Numeric code.
            expires_at: Code expiration timestamp.

        Returns:
            Created OTPData.
        """
        await self.session.execute(delete(OTP).where(OTP.email == email))

        otp_model = OTP(
            email=email,
            otp_code=otp_code,
            expires_at=expires_at,
            verified=False,
        )
        self.session.add(otp_model)
        await self.session.commit()
        await self.session.refresh(otp_model)
        return _to_data(otp_model)

    async def find_unverified(self, email: str, otp_code: str) -> OTPData | None:
        """Find an unconsumed code for the email.

        Args:
            email: Owning email address.
            otp_code: Code submitted by the user.

        Returns:
            OTPData if an unconsumed match exists, None otherwise.
        """
        stmt = (
            select(OTP)
            .where(OTP.email == email)
            .where(OTP.otp_code == otp_code)
            .where(OTP.verified.is_(False))
            .order_by(OTP.created_at.desc())
            .limit(1)
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return _to_data(model) if model else None

    async def mark_verified(self, otp_id: UUID) -> bool:
        """Consume a code if it is still unconsumed.

        The flag flips in a single conditional UPDATE, so of two concurrent
        callers holding the same row only one sees True.

        Args:
            otp_id: Code's unique identifier.

        Returns:
            True if this call consumed the code, False if it was already
            consumed or no longer exists.
        """
        stmt = (
            update(OTP)
            .where(OTP.id == otp_id, OTP.verified.is_(False))
            .values(verified=True)
        )
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount == 1
