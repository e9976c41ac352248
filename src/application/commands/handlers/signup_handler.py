"""Signup handler.

Flow:
1. Emit UserSignupAttempted event
2. Check email uniqueness
3. Resolve the default role (fails closed)
4. Hash password
5. Save unverified, disabled User
6. Issue verification code (store, then email)
7. Emit UserSignupSucceeded event
8. Return Success(user_id)

On failure:
- Emit UserSignupFailed event
- Return Failure(error)

A delivery failure in step 6 is reported but not rolled back: the account
and the stored code both remain, and the user can request a resend.
"""

from uuid import UUID

from uuid_extensions import uuid7

from src.application.commands.auth_commands import Signup
from src.application.services.otp_service import OTPService
from src.core.result import Failure, Result, Success
from src.domain.entities.user import User
from src.domain.enums import UserRole
from src.domain.errors import AuthenticationError
from src.domain.events.auth_events import (
    UserSignupAttempted,
    UserSignupFailed,
    UserSignupSucceeded,
)
from src.domain.protocols import (
    EventBusProtocol,
    PasswordHashingProtocol,
    UserRepository,
)


class SignupHandler:
    """Handler for the Signup command."""

    def __init__(
        self,
        user_repo: UserRepository,
        password_service: PasswordHashingProtocol,
        otp_service: OTPService,
        event_bus: EventBusProtocol,
        default_role: str,
    ) -> None:
        """Initialize signup handler with dependencies.

        Args:
            user_repo: User repository for persistence
            password_service: Password hashing service
            otp_service: Verification code service
            event_bus: Event bus for publishing domain events
            default_role: Role tag granted to every new account
        """
        self._user_repo = user_repo
        self._password_service = password_service
        self._otp_service = otp_service
        self._event_bus = event_bus
        self._default_role = default_role

    async def handle(self, cmd: Signup) -> Result[UUID, str]:
        """Handle signup command.

        Returns:
            Success(user_id) on success.
            Failure(EMAIL_ALREADY_EXISTS | DEFAULT_ROLE_NOT_FOUND | DELIVERY_FAILED).
        """
        # Step 1: Emit ATTEMPTED event
        await self._event_bus.publish(UserSignupAttempted(email=cmd.email))

        # Step 2: Check email uniqueness
        if await self._user_repo.exists_by_email(cmd.email):
            return await self._fail(cmd.email, AuthenticationError.EMAIL_ALREADY_EXISTS)

        # Step 3: Resolve default role
        if not UserRole.is_valid(self._default_role):
            return await self._fail(
                cmd.email, AuthenticationError.DEFAULT_ROLE_NOT_FOUND
            )

        # Step 4: Hash password
        password_hash = self._password_service.hash_password(cmd.password)

        # Step 5: Create and save User (UNVERIFIED_DISABLED)
        user = User(
            id=uuid7(),
            email=cmd.email,
            password_hash=password_hash,
            first_name=cmd.first_name,
            last_name=cmd.last_name,
            email_verified=False,
            enabled=False,
            roles={UserRole(self._default_role)},
        )
        match await self._user_repo.save(user):
            case Failure(error=error):
                # Lost a race with a concurrent signup for the same email
                return await self._fail(cmd.email, error)
            case _:
                pass

        # Step 6: Issue verification code
        match await self._otp_service.issue(cmd.email):
            case Failure(error=error):
                return await self._fail(cmd.email, error)
            case _:
                pass

        # Step 7: Emit SUCCEEDED event
        await self._event_bus.publish(
            UserSignupSucceeded(user_id=user.id, email=cmd.email)
        )

        # Step 8: Return Success
        return Success(value=user.id)

    async def _fail(self, email: str, error: str) -> Failure[str]:
        await self._event_bus.publish(UserSignupFailed(email=email, reason=error))
        return Failure(error=error)
