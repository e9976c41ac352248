"""Token generation protocol for domain layer.

Interface for JWT access token signing and verification.

Token Strategy:
    - Access tokens: Short-lived JWT, verified by signature only
    - Refresh tokens: Long-lived opaque tokens (RefreshTokenServiceProtocol)
"""

from typing import Protocol
from uuid import UUID

from src.core.result import Result


class TokenGenerationProtocol(Protocol):
    """JWT access token generation and validation interface.

    Implementations:
        - JWTService: HMAC-SHA256 (src/infrastructure/security/jwt_service.py)

    Usage:
        token = token_service.generate_access_token(
            user_id=user.id,
            email=user.email,
            roles=user.role_values(),
        )

        match token_service.validate_access_token(token):
            case Success(value=payload):
                email = payload["email"]
            case Failure(error=error):
                ...
    """

    @property
    def expiration_seconds(self) -> int:
        """Access token lifetime in seconds (reported as expires_in)."""
        ...

    def generate_access_token(
        self,
        user_id: UUID,
        email: str,
        roles: list[str],
    ) -> str:
        """Generate JWT access token.

        Args:
            user_id: User's unique identifier (stored in 'sub' claim).
            email: User's email address.
            roles: Role tags (e.g., ["ROLE_USER"]).

        Returns:
            JWT access token string (header.payload.signature).

        Note:
            Includes iat, exp and a unique jti, so two tokens minted for the
            same user in the same second still differ.
        """
        ...

    def validate_access_token(
        self, token: str
    ) -> Result[dict[str, str | int | list[str]], str]:
        """Validate JWT access token and extract payload.

        Args:
            token: JWT access token string to validate.

        Returns:
            Success(payload) if valid, Failure(error) if expired or invalid.
        """
        ...
