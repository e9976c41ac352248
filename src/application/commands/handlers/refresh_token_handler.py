"""Refresh access token handler.

Flow:
1. Emit TokenRefreshAttempted event
2. Resolve the presented token by hash
3. Check expiry (expired rows are deleted)
4. Load the owning user
5. Generate new JWT access token
6. Rotate the refresh token in place
7. Emit TokenRefreshSucceeded event
8. Return Success(AuthTokens)

On failure:
- Emit TokenRefreshFailed event
- Return Failure(error)
"""

from uuid import UUID

from src.application.commands.auth_commands import RefreshAccessToken
from src.application.dtos import AuthTokens, UserSummary
from src.application.services.refresh_token_manager import RefreshTokenManager
from src.core.result import Failure, Result, Success
from src.domain.errors import AuthenticationError
from src.domain.events.auth_events import (
    TokenRefreshAttempted,
    TokenRefreshFailed,
    TokenRefreshSucceeded,
)
from src.domain.protocols import (
    EventBusProtocol,
    TokenGenerationProtocol,
    UserRepository,
)


class RefreshTokenHandler:
    """Handler for the RefreshAccessToken command."""

    def __init__(
        self,
        user_repo: UserRepository,
        token_service: TokenGenerationProtocol,
        refresh_token_manager: RefreshTokenManager,
        event_bus: EventBusProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._token_service = token_service
        self._refresh_token_manager = refresh_token_manager
        self._event_bus = event_bus

    async def handle(self, cmd: RefreshAccessToken) -> Result[AuthTokens, str]:
        """Handle token refresh.

        Returns:
            Success(AuthTokens) with a new access token and rotated refresh token.
            Failure(TOKEN_INVALID | TOKEN_EXPIRED).
        """
        # Step 1: Emit ATTEMPTED event
        await self._event_bus.publish(TokenRefreshAttempted())

        # Step 2: Resolve token
        record = await self._refresh_token_manager.find(cmd.refresh_token)
        if record is None:
            return await self._fail(AuthenticationError.TOKEN_INVALID)

        # Step 3: Check expiry
        match await self._refresh_token_manager.verify(record):
            case Failure(error=error):
                return await self._fail(error, user_id=record.user_id)
            case _:
                pass

        # Step 4: Load owner
        user = await self._user_repo.find_by_id(record.user_id)
        if user is None:
            return await self._fail(
                AuthenticationError.TOKEN_INVALID, user_id=record.user_id
            )

        # Step 5: Generate access token
        access_token = self._token_service.generate_access_token(
            user_id=user.id,
            email=user.email,
            roles=user.role_values(),
        )

        # Step 6: Rotate refresh token
        issued = await self._refresh_token_manager.issue_or_rotate(user.id)

        # Step 7: Emit SUCCEEDED event
        await self._event_bus.publish(TokenRefreshSucceeded(user_id=user.id))

        return Success(
            value=AuthTokens(
                access_token=access_token,
                refresh_token=issued.token,
                expires_in=self._token_service.expiration_seconds,
                user=UserSummary.from_user(user),
            )
        )

    async def _fail(self, error: str, user_id: UUID | None = None) -> Failure[str]:
        await self._event_bus.publish(TokenRefreshFailed(reason=error, user_id=user_id))
        return Failure(error=error)
