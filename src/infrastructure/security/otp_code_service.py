"""One-time password code service.

Generates short numeric codes for email verification.

Security:
    - Digits drawn independently from the OS CSPRNG (secrets)
    - Leading zeros preserved (codes are strings, not integers)
"""

import secrets
from datetime import UTC, datetime, timedelta


class OTPCodeService:
    """Verification code generator.

    Usage:
        service = OTPCodeService(length=6, expiration_seconds=300)
        code = service.generate_code()  # e.g. "048213"
        expires_at = service.calculate_expiration()
    """

    def __init__(self, length: int = 6, expiration_seconds: int = 300) -> None:
        """Initialize code service.

        Args:
            length: Number of digits per code (4-10).
            expiration_seconds: Code lifetime in seconds.

        Raises:
            ValueError: If length is out of range.
        """
        if not 4 <= length <= 10:
            msg = "OTP length must be between 4 and 10"
            raise ValueError(msg)

        self._length = length
        self._expiration_seconds = expiration_seconds

    @property
    def length(self) -> int:
        """Number of digits in generated codes."""
        return self._length

    def generate_code(self) -> str:
        """Generate a numeric code.

        Returns:
            String of `length` ASCII digits.
        """
        return "".join(str(secrets.randbelow(10)) for _ in range(self._length))

    def calculate_expiration(self) -> datetime:
        """Calculate expiration timestamp for a new code.

        Returns:
            Expiration datetime (UTC).
        """
        return datetime.now(UTC) + timedelta(seconds=self._expiration_seconds)
