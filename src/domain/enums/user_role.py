"""User role tags.

Roles are a flat set of tags attached to each user. There is no hierarchy
and no permission table; the tags are carried in the access token's
``roles`` claim for consumers to inspect.

Usage:
    from src.domain.enums import UserRole

    if UserRole.ADMIN in user.roles:
        ...
"""

from enum import Enum


class UserRole(str, Enum):
    """Role tags assignable to a user.

    String Enum:
        Inherits from str for easy serialization into JWT claims and the
        JSON ``roles`` column.
    """

    USER = "ROLE_USER"
    """Standard account role, assigned at signup by default."""

    ADMIN = "ROLE_ADMIN"
    """Administrative role. Never assigned by signup."""

    @classmethod
    def values(cls) -> list[str]:
        """Get all role values as strings.

        Returns:
            list[str]: List of role values ['ROLE_USER', 'ROLE_ADMIN'].
        """
        return [role.value for role in cls]

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Check if a string is a valid role tag.

        Args:
            value: String to check.

        Returns:
            bool: True if value is a valid role.
        """
        return value in cls.values()
