# mypy: disable-error-code="arg-type"
"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Database (PostgreSQL / SQLite in tests)
- Password hashing (bcrypt)
- Token generation (JWT) and refresh tokens (opaque)
- One-time codes
- Email (stub/AWS SES)
- Logging (structlog console)
"""

from functools import lru_cache
from typing import TYPE_CHECKING, AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import settings
from src.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from src.domain.protocols.logger_protocol import LoggerProtocol
    from src.domain.protocols.otp_code_protocol import OTPCodeProtocol
    from src.domain.protocols.otp_notifier_protocol import OTPNotifierProtocol
    from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
    from src.domain.protocols.refresh_token_service_protocol import (
        RefreshTokenServiceProtocol,
    )
    from src.domain.protocols.token_generation_protocol import TokenGenerationProtocol


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Returns Database instance with connection pool.
    Use get_db_session() for per-request sessions.

    Returns:
        Database manager instance.
    """
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
    )


# ============================================================================
# Request-Scoped Dependencies (Per-Request)
# ============================================================================


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session (request-scoped).

    Creates new session per request with automatic transaction management:
        - Commits on success
        - Rolls back on exception
        - Always closes session

    Yields:
        Database session for request duration.

    Usage:
        @router.post("/signup")
        async def signup(session: AsyncSession = Depends(get_db_session)):
            ...
    """
    db = get_database()
    async with db.get_session() as session:
        yield session


# ============================================================================
# Security Services (Application-Scoped)
# ============================================================================


@lru_cache()
def get_password_service() -> "PasswordHashingProtocol":
    """Get password hashing service singleton (app-scoped).

    Cost factor comes from settings.bcrypt_rounds (12 by default).

    Returns:
        Password hashing service implementing PasswordHashingProtocol.
    """
    from src.infrastructure.security import BcryptPasswordService

    return BcryptPasswordService(cost_factor=settings.bcrypt_rounds)


@lru_cache()
def get_dummy_password_hash() -> str:
    """Hash verified by login when the email is unknown.

    Computed once per process with the configured cost factor, so unknown
    and known emails cost the same bcrypt work.
    """
    import secrets

    return get_password_service().hash_password(secrets.token_urlsafe(24))


@lru_cache()
def get_token_service() -> "TokenGenerationProtocol":
    """Get JWT token service singleton (app-scoped).

    Returns:
        Token generation service implementing TokenGenerationProtocol.
    """
    from src.infrastructure.security import JWTService

    return JWTService(
        secret_key=settings.secret_key,
        expiration_minutes=settings.access_token_expire_minutes,
        algorithm=settings.algorithm,
    )


@lru_cache()
def get_refresh_token_service() -> "RefreshTokenServiceProtocol":
    """Get refresh token service singleton (app-scoped)."""
    from src.infrastructure.security import RefreshTokenService

    return RefreshTokenService(
        expiration_seconds=settings.refresh_token_expiration_seconds
    )


@lru_cache()
def get_otp_code_service() -> "OTPCodeProtocol":
    """Get one-time code generator singleton (app-scoped)."""
    from src.infrastructure.security import OTPCodeService

    return OTPCodeService(
        length=settings.otp_length,
        expiration_seconds=settings.otp_expiration_seconds,
    )


# ============================================================================
# Email Service (Application-Scoped)
# ============================================================================


@lru_cache()
def get_email_service() -> "OTPNotifierProtocol":
    """Get email service singleton (app-scoped).

    Container owns factory logic - decides which adapter based on ENVIRONMENT:
        - development/testing/ci: StubEmailService (logs to console)
        - production: SESEmailService (AWS SES)

    Returns:
        Email service implementing OTPNotifierProtocol.
    """
    if settings.is_production:
        from src.infrastructure.email import SESEmailService

        return SESEmailService(
            logger=get_logger(),
            from_email=settings.email_from_address,
            from_name=settings.email_from_name,
            region=settings.aws_region,
            expires_in_seconds=settings.otp_expiration_seconds,
        )

    from src.infrastructure.email import StubEmailService

    return StubEmailService(
        logger=get_logger(),
        expires_in_seconds=settings.otp_expiration_seconds,
    )


# ============================================================================
# Logging (Application-Scoped)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from src.infrastructure.logging import ConsoleAdapter

    logger = ConsoleAdapter(
        use_json=not settings.is_development,
        level=settings.log_level,
    )
    return logger.bind(
        app=settings.app_name,
        environment=settings.environment.value,
    )
