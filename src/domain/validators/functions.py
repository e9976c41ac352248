"""Centralized validation functions (DRY principle).

All validation logic defined once, reused everywhere via Annotated types.
Validators are pure functions that raise ValueError on validation failure.
"""

import re

_SPECIAL_CHARACTERS = '!@#$%^&*(),.?":{}|<>'


def validate_email(v: str) -> str:
    """Validate email format.

    The email is the account key and is case-sensitive, so it is only
    trimmed, never lowercased.

    Args:
        v: Email address to validate.

    Returns:
        Email with surrounding whitespace removed.

    Raises:
        ValueError: If email format is invalid.

    Example:
        >>> validate_email(" User@Example.com ")
        'User@Example.com'
    """
    v = v.strip()
    pattern = r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$"
    if not re.match(pattern, v):
        raise ValueError(f"Invalid email format: {v}")
    return v


def validate_strong_password(v: str) -> str:
    """Validate password strength.

    Args:
        v: Password to validate.

    Returns:
        Password unchanged (validation only).

    Raises:
        ValueError: If password doesn't meet requirements.

    Example:
        >>> validate_strong_password("SecurePass123!")
        'SecurePass123!'
        >>> validate_strong_password("weak")
        ValueError: Password must be at least 8 characters
    """
    if len(v) < 8:
        raise ValueError("Password must be at least 8 characters")
    if not any(c.isupper() for c in v):
        raise ValueError("Password must contain uppercase letter")
    if not any(c.islower() for c in v):
        raise ValueError("Password must contain lowercase letter")
    if not any(c.isdigit() for c in v):
        raise ValueError("Password must contain digit")
    if not any(c in _SPECIAL_CHARACTERS for c in v):
        raise ValueError("Password must contain special character")
    return v


def validate_person_name(v: str) -> str:
    """Validate a first or last name.

    Args:
        v: Name to validate.

    Returns:
        Name with surrounding whitespace removed.

    Raises:
        ValueError: If the name is blank.
    """
    v = v.strip()
    if not v:
        raise ValueError("Name cannot be blank")
    return v
