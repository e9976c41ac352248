"""User database model for authentication.

This module defines the User model for storing user account information.

Security:
    - password_hash: NEVER stores plaintext passwords (bcrypt hashed)
    - email_verified + enabled: Both must be True to login, flipped together
"""

from sqlalchemy import JSON, Boolean, String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseMutableModel


class User(BaseMutableModel):
    """User model for authentication and account management.

    Users must verify their email with a one-time password before login.
    Verification also enables the account, so email_verified and enabled
    are always written together.

    Fields:
        id: UUID primary key (from BaseMutableModel)
        created_at: Timestamp when user registered (from BaseMutableModel)
        updated_at: Timestamp when user last updated (from BaseMutableModel)
        email: Unique email address (case-sensitive, indexed)
        password_hash: Bcrypt hashed password (NEVER plaintext)
        first_name: Given name
        last_name: Family name
        email_verified: Email ownership proven via OTP
        enabled: Account allowed to authenticate
        roles: JSON list of role tags (e.g. ["ROLE_USER"])

    Relationships:
        - refresh_tokens: One-to-one (cascade delete)
    """

    __tablename__ = "users"

    # Email address (unique, indexed for login queries)
    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
        comment="User email address (unique, case-sensitive)",
    )

    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Bcrypt hashed password",
    )

    first_name: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        comment="Given name",
    )

    last_name: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        comment="Family name",
    )

    email_verified: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        comment="Email verification status (must be True to login)",
    )

    enabled: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        comment="Account enabled status (set together with email_verified)",
    )

    roles: Mapped[list[str]] = mapped_column(
        JSON,
        nullable=False,
        default=list,
        comment="Role tags granted to the user",
    )

    def __repr__(self) -> str:
        """String representation for debugging.

        Returns:
            str: Human-readable representation of user.
        """
        return (
            f"<User("
            f"id={self.id}, "
            f"email={self.email!r}, "
            f"email_verified={self.email_verified}, "
            f"enabled={self.enabled}"
            f")>"
        )
