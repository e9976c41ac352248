"""Authentication handler dependency factories.

Request-scoped handler instances for authentication operations:
- Signup, login
- OTP verification and resend
- Token refresh

All repositories for one request share the request's session.
"""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import settings
from src.core.container.events import get_event_bus
from src.core.container.infrastructure import (
    get_db_session,
    get_dummy_password_hash,
    get_email_service,
    get_logger,
    get_otp_code_service,
    get_password_service,
    get_refresh_token_service,
    get_token_service,
)
from src.domain.protocols.otp_notifier_protocol import OTPNotifierProtocol

if TYPE_CHECKING:
    from src.application.commands.handlers.login_handler import LoginHandler
    from src.application.commands.handlers.refresh_token_handler import (
        RefreshTokenHandler,
    )
    from src.application.commands.handlers.resend_otp_handler import (
        ResendOTPHandler,
    )
    from src.application.commands.handlers.signup_handler import SignupHandler
    from src.application.commands.handlers.verify_otp_handler import (
        VerifyOTPHandler,
    )
    from src.application.services import OTPService, RefreshTokenManager


# ============================================================================
# Application Service Factories (Request-Scoped)
# ============================================================================


async def get_otp_service(
    session: AsyncSession = Depends(get_db_session),
    notifier: OTPNotifierProtocol = Depends(get_email_service),
) -> "OTPService":
    """Get OTP service (request-scoped).

    The notifier is injected with Depends so tests can override it through
    app.dependency_overrides[get_email_service].
    """
    from src.application.services import OTPService
    from src.infrastructure.persistence.repositories import OTPRepository

    return OTPService(
        otp_repo=OTPRepository(session=session),
        code_service=get_otp_code_service(),
        notifier=notifier,
        logger=get_logger(),
    )


async def get_refresh_token_manager(
    session: AsyncSession = Depends(get_db_session),
) -> "RefreshTokenManager":
    """Get refresh token manager (request-scoped)."""
    from src.application.services import RefreshTokenManager
    from src.infrastructure.persistence.repositories import RefreshTokenRepository

    return RefreshTokenManager(
        refresh_token_repo=RefreshTokenRepository(session=session),
        token_service=get_refresh_token_service(),
    )


# ============================================================================
# Authentication Handler Factories
# ============================================================================


async def get_signup_handler(
    session: AsyncSession = Depends(get_db_session),
    otp_service: "OTPService" = Depends(get_otp_service),
) -> "SignupHandler":
    """Get Signup command handler (request-scoped).

    Dependencies:
    - UserRepository (request-scoped, uses session)
    - OTPService (request-scoped, same session)
    - BcryptPasswordService (app-scoped singleton)
    - EventBus (app-scoped singleton)

    Usage:
        @router.post("/signup")
        async def signup(handler: SignupHandler = Depends(get_signup_handler)):
            result = await handler.handle(command)
    """
    from src.application.commands.handlers.signup_handler import SignupHandler
    from src.infrastructure.persistence.repositories import UserRepository

    return SignupHandler(
        user_repo=UserRepository(session=session),
        password_service=get_password_service(),
        otp_service=otp_service,
        event_bus=get_event_bus(),
        default_role=settings.default_user_role,
    )


async def get_login_handler(
    session: AsyncSession = Depends(get_db_session),
    refresh_token_manager: "RefreshTokenManager" = Depends(get_refresh_token_manager),
) -> "LoginHandler":
    """Get Login command handler (request-scoped)."""
    from src.application.commands.handlers.login_handler import LoginHandler
    from src.infrastructure.persistence.repositories import UserRepository

    return LoginHandler(
        user_repo=UserRepository(session=session),
        password_service=get_password_service(),
        token_service=get_token_service(),
        refresh_token_manager=refresh_token_manager,
        event_bus=get_event_bus(),
        dummy_password_hash=get_dummy_password_hash(),
    )


async def get_verify_otp_handler(
    session: AsyncSession = Depends(get_db_session),
    otp_service: "OTPService" = Depends(get_otp_service),
) -> "VerifyOTPHandler":
    """Get VerifyOTP command handler (request-scoped)."""
    from src.application.commands.handlers.verify_otp_handler import (
        VerifyOTPHandler,
    )
    from src.infrastructure.persistence.repositories import UserRepository

    return VerifyOTPHandler(
        user_repo=UserRepository(session=session),
        otp_service=otp_service,
        event_bus=get_event_bus(),
    )


async def get_resend_otp_handler(
    session: AsyncSession = Depends(get_db_session),
    otp_service: "OTPService" = Depends(get_otp_service),
) -> "ResendOTPHandler":
    """Get ResendOTP command handler (request-scoped)."""
    from src.application.commands.handlers.resend_otp_handler import (
        ResendOTPHandler,
    )
    from src.infrastructure.persistence.repositories import UserRepository

    return ResendOTPHandler(
        user_repo=UserRepository(session=session),
        otp_service=otp_service,
        event_bus=get_event_bus(),
    )


async def get_refresh_token_handler(
    session: AsyncSession = Depends(get_db_session),
    refresh_token_manager: "RefreshTokenManager" = Depends(get_refresh_token_manager),
) -> "RefreshTokenHandler":
    """Get RefreshAccessToken command handler (request-scoped)."""
    from src.application.commands.handlers.refresh_token_handler import (
        RefreshTokenHandler,
    )
    from src.infrastructure.persistence.repositories import UserRepository

    return RefreshTokenHandler(
        user_repo=UserRepository(session=session),
        token_service=get_token_service(),
        refresh_token_manager=refresh_token_manager,
        event_bus=get_event_bus(),
    )
