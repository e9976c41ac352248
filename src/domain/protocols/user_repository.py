"""UserRepository protocol for user persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.
"""

from typing import Protocol
from uuid import UUID

from src.core.result import Result
from src.domain.entities.user import User


class UserRepository(Protocol):
    """User repository protocol (port).

    This is a Protocol (not ABC) for structural typing.
    Implementations don't need to inherit from this.

    Methods:
        find_by_id: Retrieve user by ID
        find_by_email: Retrieve user by email (exact match)
        exists_by_email: Duplicate check before signup
        save: Create new user
        update: Persist activation flags and profile fields
    """

    async def find_by_id(self, user_id: UUID) -> User | None:
        """Find user by ID.

        Args:
            user_id: User's unique identifier.

        Returns:
            User if found, None otherwise.
        """
        ...

    async def find_by_email(self, email: str) -> User | None:
        """Find user by email address.

        Email is the account key and is compared exactly (case-sensitive).

        Args:
            email: User's email address.

        Returns:
            User if found, None otherwise.

        Example:
            >>> user = await repo.find_by_email("user@example.com")
            >>> if user:
            ...     print(user.id)
        """
        ...

    async def exists_by_email(self, email: str) -> bool:
        """Check if a user with this email exists.

        Args:
            email: Email address to check.

        Returns:
            True if user exists, False otherwise.
        """
        ...

    async def save(self, user: User) -> Result[None, str]:
        """Create new user.

        Args:
            user: User entity to persist.

        Returns:
            Success(None) once stored.
            Failure(EMAIL_ALREADY_EXISTS) if another user already holds the
            email, including one inserted after the caller's existence check.
        """
        ...

    async def update(self, user: User) -> None:
        """Update an existing user in a single committed write.

        email_verified and enabled are written together so the activation
        transition is never observed half-applied.

        Args:
            user: User entity with updated fields.

        Raises:
            NoResultFound: If user doesn't exist.
        """
        ...
