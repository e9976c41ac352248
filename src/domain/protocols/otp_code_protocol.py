"""OTPCodeProtocol - Domain protocol for one-time code generation."""

from datetime import datetime
from typing import Protocol


class OTPCodeProtocol(Protocol):
    """Protocol for generating verification codes and their expiry.

    Implementations:
        - OTPCodeService: src/infrastructure/security/otp_code_service.py
    """

    @property
    def length(self) -> int:
        """Number of digits in generated codes."""
        ...

    def generate_code(self) -> str:
        """Generate a numeric code.

        Returns:
            String of `length` digits, each drawn uniformly from 0-9.
        """
        ...

    def calculate_expiration(self) -> datetime:
        """Calculate expiration timestamp for a newly issued code.

        Returns:
            Expiration datetime (UTC).
        """
        ...
