"""Login handler.

Flow:
1. Emit UserLoginAttempted event
2. Find user by email
3. Verify password (against a dummy hash when the email is unknown)
4. Check activation (email verified and enabled)
5. Generate JWT access token
6. Issue or rotate the user's refresh token
7. Emit UserLoginSucceeded event
8. Return Success(AuthTokens)

On failure:
- Emit UserLoginFailed event
- Return Failure(error)

Unknown email and wrong password both produce INVALID_CREDENTIALS and cost
one bcrypt verification each. The activation check runs only after the
password has been accepted.
"""

from uuid import UUID

from src.application.commands.auth_commands import Login
from src.application.dtos import AuthTokens, UserSummary
from src.application.services.refresh_token_manager import RefreshTokenManager
from src.core.result import Failure, Result, Success
from src.domain.errors import AuthenticationError
from src.domain.events.auth_events import (
    UserLoginAttempted,
    UserLoginFailed,
    UserLoginSucceeded,
)
from src.domain.protocols import (
    EventBusProtocol,
    PasswordHashingProtocol,
    TokenGenerationProtocol,
    UserRepository,
)


class LoginHandler:
    """Handler for the Login command."""

    def __init__(
        self,
        user_repo: UserRepository,
        password_service: PasswordHashingProtocol,
        token_service: TokenGenerationProtocol,
        refresh_token_manager: RefreshTokenManager,
        event_bus: EventBusProtocol,
        dummy_password_hash: str,
    ) -> None:
        """Initialize login handler with dependencies.

        Args:
            user_repo: User repository for lookups
            password_service: Password verification
            token_service: JWT access token generation
            refresh_token_manager: Refresh token issue/rotation
            event_bus: Event bus for publishing domain events
            dummy_password_hash: Hash verified when the email is unknown
        """
        self._user_repo = user_repo
        self._password_service = password_service
        self._token_service = token_service
        self._refresh_token_manager = refresh_token_manager
        self._event_bus = event_bus
        self._dummy_password_hash = dummy_password_hash

    async def handle(self, cmd: Login) -> Result[AuthTokens, str]:
        """Handle login command.

        Returns:
            Success(AuthTokens) on success.
            Failure(INVALID_CREDENTIALS | EMAIL_NOT_VERIFIED).
        """
        # Step 1: Emit ATTEMPTED event
        await self._event_bus.publish(UserLoginAttempted(email=cmd.email))

        # Step 2: Find user
        user = await self._user_repo.find_by_email(cmd.email)

        # Step 3: Verify password
        if user is None:
            self._password_service.verify_password(
                cmd.password, self._dummy_password_hash
            )
            return await self._fail(cmd, AuthenticationError.INVALID_CREDENTIALS)

        if not self._password_service.verify_password(cmd.password, user.password_hash):
            return await self._fail(
                cmd, AuthenticationError.INVALID_CREDENTIALS, user_id=user.id
            )

        # Step 4: Check activation
        if not user.can_login():
            return await self._fail(
                cmd, AuthenticationError.EMAIL_NOT_VERIFIED, user_id=user.id
            )

        # Step 5: Generate access token
        access_token = self._token_service.generate_access_token(
            user_id=user.id,
            email=user.email,
            roles=user.role_values(),
        )

        # Step 6: Issue or rotate refresh token
        issued = await self._refresh_token_manager.issue_or_rotate(user.id)

        # Step 7: Emit SUCCEEDED event
        await self._event_bus.publish(
            UserLoginSucceeded(user_id=user.id, email=user.email)
        )

        # Step 8: Return tokens
        return Success(
            value=AuthTokens(
                access_token=access_token,
                refresh_token=issued.token,
                expires_in=self._token_service.expiration_seconds,
                user=UserSummary.from_user(user),
            )
        )

    async def _fail(
        self, cmd: Login, error: str, user_id: UUID | None = None
    ) -> Failure[str]:
        await self._event_bus.publish(
            UserLoginFailed(email=cmd.email, reason=error, user_id=user_id)
        )
        return Failure(error=error)
