"""RefreshTokenServiceProtocol - Domain protocol for refresh token material.

Generates opaque refresh tokens and the lookup hash stored in the database.
Infrastructure provides the concrete implementation (RefreshTokenService).
"""

from datetime import datetime
from typing import Protocol


class RefreshTokenServiceProtocol(Protocol):
    """Protocol for refresh token generation.

    Implementations:
        - RefreshTokenService: src/infrastructure/security/refresh_token_service.py
    """

    def generate_token(self) -> tuple[str, str]:
        """Generate refresh token and its lookup hash.

        Returns:
            Tuple of (token, token_hash):
                - token: Plain token returned to the client (>= 256 bits)
                - token_hash: Deterministic hash stored in the database
        """
        ...

    def hash_token(self, token: str) -> str:
        """Hash a presented token for lookup.

        Args:
            token: Plain token from the client.

        Returns:
            Hash matching the one produced by generate_token().
        """
        ...

    def calculate_expiration(self) -> datetime:
        """Calculate expiration timestamp for a newly issued token.

        Returns:
            Expiration datetime (UTC).
        """
        ...
