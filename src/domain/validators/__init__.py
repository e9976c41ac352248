"""Validators package exports."""

from src.domain.validators.functions import (
    validate_email,
    validate_person_name,
    validate_strong_password,
)

__all__ = [
    "validate_email",
    "validate_person_name",
    "validate_strong_password",
]
