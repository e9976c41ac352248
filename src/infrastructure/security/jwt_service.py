"""JWT token service (adapter).

This service implements the TokenGenerationProtocol using PyJWT with HMAC-SHA256.

Architecture:
    - Implements TokenGenerationProtocol (no inheritance required)
    - Structural typing via Protocol
    - Injected via dependency container

Security:
    - HMAC-SHA256 (HS256) algorithm
    - 256-bit secret key minimum
    - Short expiration (default 15 minutes)
    - Unique JWT ID (jti) per token
"""

from datetime import UTC, datetime, timedelta
from uuid import UUID

import jwt
from jwt.exceptions import ExpiredSignatureError, InvalidTokenError
from uuid_extensions import uuid7

from src.core.result import Failure, Result, Success
from src.domain.errors import AuthenticationError


class JWTService:
    """JWT token generation and validation service.

    Usage:
        from src.core.container import get_token_service

        token_service = get_token_service()

        token = token_service.generate_access_token(
            user_id=user_id,
            email=user.email,
            roles=["ROLE_USER"],
        )
        result = token_service.validate_access_token(token)
    """

    def __init__(
        self,
        secret_key: str,
        expiration_minutes: int = 15,
        algorithm: str = "HS256",
    ) -> None:
        """Initialize JWT service.

        Args:
            secret_key: Secret key for HMAC signing.
                MUST be at least 256 bits (32 bytes) for security.
            expiration_minutes: Token expiration in minutes (default: 15).
            algorithm: JWT signing algorithm (default: HS256).

        Raises:
            ValueError: If secret_key is too short (< 32 bytes).
        """
        if len(secret_key) < 32:
            msg = "JWT secret key must be at least 32 bytes (256 bits)"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._expiration_minutes = expiration_minutes
        self._algorithm = algorithm

    @property
    def expiration_seconds(self) -> int:
        """Access token lifetime in seconds."""
        return self._expiration_minutes * 60

    def generate_access_token(
        self,
        user_id: UUID,
        email: str,
        roles: list[str],
    ) -> str:
        """Generate JWT access token.

        Args:
            user_id: User's unique identifier.
            email: User's email address.
            roles: List of role tags.

        Returns:
            JWT access token string.

        Example:
            >>> service = JWTService(secret_key="x" * 32)
            >>> token = service.generate_access_token(
            ...     user_id=uuid7(),
            ...     email="user@example.com",
            ...     roles=["ROLE_USER"],
            ... )
            >>> len(token.split("."))
            3
        """
        now = datetime.now(UTC)
        expires_at = now + timedelta(minutes=self._expiration_minutes)

        payload = {
            "sub": str(user_id),  # Subject (user ID)
            "email": email,
            "roles": roles,
            "iat": int(now.timestamp()),  # Issued at
            "exp": int(expires_at.timestamp()),  # Expires at
            "jti": str(uuid7()),  # JWT ID (unique identifier)
        }

        token: str = jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
        return token

    def validate_access_token(
        self, token: str
    ) -> Result[dict[str, str | int | list[str]], str]:
        """Validate JWT access token and extract payload.

        Args:
            token: JWT access token string to validate.

        Returns:
            Success(payload) if valid.
            Failure(TOKEN_EXPIRED) if the signature is valid but exp has passed.
            Failure(TOKEN_INVALID) for any other problem.
        """
        try:
            # PyJWT validates signature and exp; sub and email must be present
            payload: dict[str, str | int | list[str]] = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require": ["sub", "email", "exp"]},
            )
            return Success(value=payload)

        except ExpiredSignatureError:
            return Failure(error=AuthenticationError.TOKEN_EXPIRED)
        except InvalidTokenError:
            return Failure(error=AuthenticationError.TOKEN_INVALID)
