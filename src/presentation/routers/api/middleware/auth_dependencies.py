"""JWT authentication dependencies.

FastAPI dependencies for extracting and validating access tokens.
Use these dependencies to protect routes that require authentication.

Usage:
    @router.get("/protected")
    async def protected_route(
        current_user: Annotated[CurrentUser, Depends(get_current_user)],
    ):
        return {"email": current_user.email}
"""

from dataclasses import dataclass
from typing import Annotated
from uuid import UUID

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.core.container import get_token_service
from src.core.result import Failure, Success
from src.domain.protocols import TokenGenerationProtocol

# auto_error=False so a missing header is reported as 401 with our own
# WWW-Authenticate challenge instead of the framework default.
bearer_scheme = HTTPBearer(auto_error=False)

_UNAUTHORIZED_HEADERS = {"WWW-Authenticate": "Bearer"}


@dataclass(frozen=True, slots=True, kw_only=True)
class CurrentUser:
    """Authenticated user information from JWT.

    Attributes:
        user_id: User's unique identifier (from JWT 'sub' claim).
        email: User's email address (from JWT 'email' claim).
        roles: User's role tags (from JWT 'roles' claim).
        token_jti: JWT unique identifier.
    """

    user_id: UUID
    email: str
    roles: list[str]
    token_jti: str | None = None


async def get_current_user(
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
    ],
    token_service: Annotated[TokenGenerationProtocol, Depends(get_token_service)],
) -> CurrentUser:
    """Get current authenticated user from the access token.

    Args:
        credentials: Bearer token from Authorization header.
        token_service: JWT token service (injected).

    Returns:
        CurrentUser with identity from a valid JWT.

    Raises:
        HTTPException 401: If token is missing, invalid, or expired.
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers=_UNAUTHORIZED_HEADERS,
        )

    match token_service.validate_access_token(credentials.credentials):
        case Success(value=payload):
            try:
                roles_raw = payload.get("roles", [])
                jti_raw = payload.get("jti")
                return CurrentUser(
                    user_id=UUID(str(payload["sub"])),
                    email=str(payload["email"]),
                    roles=roles_raw if isinstance(roles_raw, list) else [],
                    token_jti=str(jti_raw) if jti_raw else None,
                )
            except (KeyError, ValueError) as e:
                raise HTTPException(
                    status_code=status.HTTP_401_UNAUTHORIZED,
                    detail="Invalid token payload",
                    headers=_UNAUTHORIZED_HEADERS,
                ) from e

        case Failure(error=error):
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail=error,
                headers=_UNAUTHORIZED_HEADERS,
            )
