"""UserRepository - SQLAlchemy implementation of UserRepository protocol.

Adapter for hexagonal architecture.
Maps between domain User entities and database UserModel.
"""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.result import Failure, Result, Success
from src.domain.entities.user import User
from src.domain.enums import UserRole
from src.domain.errors import AuthenticationError
from src.infrastructure.persistence.base import as_utc
from src.infrastructure.persistence.models.user import User as UserModel


class UserRepository:
    """SQLAlchemy implementation of UserRepository protocol.

    This is an adapter that implements the UserRepository port.
    It handles the mapping between domain User entities and database UserModel.

    This class does NOT inherit from UserRepository protocol (Protocol uses structural typing).

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with get_session() as session:
        ...     repo = UserRepository(session)
        ...     user = await repo.find_by_email("user@example.com")
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def find_by_id(self, user_id: UUID) -> User | None:
        """Find user by ID.

        Args:
            user_id: User's unique identifier.

        Returns:
            Domain User entity if found, None otherwise.
        """
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self.session.execute(stmt)
        user_model = result.scalar_one_or_none()

        if user_model is None:
            return None

        return self._to_domain(user_model)

    async def find_by_email(self, email: str) -> User | None:
        """Find user by email address.

        Email is the account key and is compared exactly.

        Args:
            email: User's email address (case-sensitive).

        Returns:
            Domain User entity if found, None otherwise.
        """
        stmt = select(UserModel).where(UserModel.email == email)
        result = await self.session.execute(stmt)
        user_model = result.scalar_one_or_none()

        if user_model is None:
            return None

        return self._to_domain(user_model)

    async def exists_by_email(self, email: str) -> bool:
        """Check if user with email exists.

        Args:
            email: Email address to check (case-sensitive).

        Returns:
            True if user exists, False otherwise.
        """
        stmt = select(UserModel.id).where(UserModel.email == email)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def save(self, user: User) -> Result[None, str]:
        """Create new user in database.

        The unique index on email is the final arbiter: a concurrent signup
        that passed the existence check first wins, and this call rolls back.

        Args:
            user: Domain User entity to persist.

        Returns:
            Success(None) once committed.
            Failure(EMAIL_ALREADY_EXISTS) if the email is already taken.
        """
        user_model = self._to_model(user)
        self.session.add(user_model)
        try:
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            return Failure(error=AuthenticationError.EMAIL_ALREADY_EXISTS)
        await self.session.refresh(user_model)
        return Success(value=None)

    async def update(self, user: User) -> None:
        """Update existing user in database.

        All mutable fields are written in one commit, so the activation
        flags never land separately.

        Args:
            user: Domain User entity with updated fields.

        Raises:
            NoResultFound: If user doesn't exist (caught by SQLAlchemy).
        """
        stmt = select(UserModel).where(UserModel.id == user.id)
        result = await self.session.execute(stmt)
        user_model = result.scalar_one()

        # Update fields from domain entity
        user_model.password_hash = user.password_hash
        user_model.first_name = user.first_name
        user_model.last_name = user.last_name
        user_model.email_verified = user.email_verified
        user_model.enabled = user.enabled
        user_model.roles = user.role_values()
        user_model.updated_at = user.updated_at

        await self.session.commit()
        await self.session.refresh(user_model)

    def _to_domain(self, user_model: UserModel) -> User:
        """Convert database model to domain entity.

        Args:
            user_model: SQLAlchemy UserModel instance.

        Returns:
            Domain User entity.
        """
        return User(
            id=user_model.id,
            email=user_model.email,
            password_hash=user_model.password_hash,
            first_name=user_model.first_name,
            last_name=user_model.last_name,
            email_verified=user_model.email_verified,
            enabled=user_model.enabled,
            roles={UserRole(role) for role in user_model.roles or []},
            created_at=as_utc(user_model.created_at),
            updated_at=as_utc(user_model.updated_at),
        )

    def _to_model(self, user: User) -> UserModel:
        """Convert domain entity to database model.

        Args:
            user: Domain User entity.

        Returns:
            SQLAlchemy UserModel instance.
        """
        return UserModel(
            id=user.id,
            email=user.email,
            password_hash=user.password_hash,
            first_name=user.first_name,
            last_name=user.last_name,
            email_verified=user.email_verified,
            enabled=user.enabled,
            roles=user.role_values(),
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
