"""Annotated types with centralized validation (DRY principle).

Define validation once, use everywhere: commands and request schemas share
these types.

Usage:
    from src.domain.types import Email, Password

    @dataclass(frozen=True, kw_only=True)
    class Signup:
        email: Email
        password: Password
"""

from typing import Annotated

from pydantic import AfterValidator, Field

from src.domain.validators import (
    validate_email,
    validate_person_name,
    validate_strong_password,
)

# ============================================================================
# Authentication Types
# ============================================================================

Email = Annotated[
    str,
    Field(
        min_length=5,
        max_length=255,
        description="Email address",
        examples=["user@example.com"],
    ),
    AfterValidator(validate_email),
]
"""Email address (trimmed, case preserved)."""

Password = Annotated[
    str,
    Field(
        min_length=8,
        max_length=128,
        description="Password with strength requirements",
        examples=["SecurePass123!"],
    ),
    AfterValidator(validate_strong_password),
]
"""Password with strength validation.

Requirements:
- At least 8 characters
- At least one uppercase letter
- At least one lowercase letter
- At least one digit
- At least one special character (!@#$%^&*(),.?":{}|<>)
"""

OTPCode = Annotated[
    str,
    Field(
        min_length=1,
        max_length=32,
        description="One-time code from the verification email",
        examples=["123456"],
    ),
]
"""One-time code as submitted.

Format is not checked here: a code of the wrong length or alphabet simply
matches no stored row and fails as invalid or expired.
"""

RefreshToken = Annotated[
    str,
    Field(
        min_length=1,
        max_length=512,
        description="Opaque refresh token",
        examples=["dGhpcyBpcyBhIHJhbmRvbSB0b2tlbg"],
    ),
]
"""Opaque refresh token as submitted; unknown values fail as token_invalid."""

PersonName = Annotated[
    str,
    Field(
        min_length=1,
        max_length=100,
        description="First or last name",
        examples=["Ada"],
    ),
    AfterValidator(validate_person_name),
]
"""Non-blank personal name."""
