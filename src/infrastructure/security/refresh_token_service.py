"""Refresh token service.

This service handles generation and hashing of opaque refresh tokens.

Token Strategy:
    - Opaque tokens (NOT JWT)
    - 32-byte random string (urlsafe base64)
    - SHA-256 hex digest stored for lookup (plaintext never persisted)
    - Configurable expiration (default 7 days)
    - Rotated on every login and refresh

Note:
    A deterministic hash (rather than bcrypt) is required because tokens are
    looked up by hash. 256 bits of entropy make brute force infeasible.
"""

import hashlib
import secrets
from datetime import UTC, datetime, timedelta


class RefreshTokenService:
    """Refresh token generation service.

    Usage:
        service = RefreshTokenService(expiration_seconds=604800)

        token, token_hash = service.generate_token()

        # Store token_hash in database, return token to user
        await refresh_token_repo.upsert_for_user(
            user_id=user_id,
            token_hash=token_hash,
            expires_at=service.calculate_expiration(),
        )

        # Later: look up by hash of presented token
        stored = await refresh_token_repo.find_by_token_hash(service.hash_token(token))
    """

    def __init__(self, expiration_seconds: int = 604_800) -> None:
        """Initialize refresh token service.

        Args:
            expiration_seconds: Token lifetime in seconds (default: 7 days).

        Note:
            Expiration is tracked in database, not in token itself.
        """
        self._expiration_seconds = expiration_seconds

    def generate_token(self) -> tuple[str, str]:
        """Generate refresh token and its hash.

        Returns:
            Tuple of (token, token_hash):
                - token: Plain token to return to user (urlsafe base64)
                - token_hash: SHA-256 hex digest to store in database

        Example:
            >>> service = RefreshTokenService()
            >>> token, token_hash = service.generate_token()
            >>> len(token)
            43
            >>> len(token_hash)
            64
        """
        # 32 bytes = 256 bits of entropy
        token = secrets.token_urlsafe(32)
        return token, self.hash_token(token)

    def hash_token(self, token: str) -> str:
        """Hash a token for storage or lookup.

        Args:
            token: Plain token.

        Returns:
            SHA-256 hex digest (64 characters).
        """
        return hashlib.sha256(token.encode("utf-8")).hexdigest()

    def calculate_expiration(self) -> datetime:
        """Calculate expiration timestamp for new token.

        Returns:
            Expiration datetime (UTC).
        """
        return datetime.now(UTC) + timedelta(seconds=self._expiration_seconds)
