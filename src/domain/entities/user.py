"""User domain entity for authentication.

Pure business logic, no framework dependencies.

Activation:
    - New accounts start UNVERIFIED_DISABLED (email_verified=False, enabled=False)
    - activate() moves them to VERIFIED_ENABLED in one step
    - enabled=True with email_verified=False is rejected at construction
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

from src.domain.enums import ActivationState, UserRole


@dataclass
class User:
    """User domain entity with activation business rules.

    Business Rules:
        - Email verification required before login
        - Verification and enablement flip together (activate())
        - An account is never enabled while unverified

    Attributes:
        id: Unique user identifier
        email: User email address (case-sensitive key)
        password_hash: Bcrypt hashed password (never plaintext)
        first_name: Given name
        last_name: Family name
        email_verified: Email ownership proven via OTP
        enabled: Account may log in
        roles: Flat set of role tags
        created_at: Timestamp when user was created
        updated_at: Timestamp when user was last updated

    Example:
        >>> user = User(
        ...     id=uuid7(),
        ...     email="user@example.com",
        ...     password_hash="$2b$12$...",
        ...     first_name="Ada",
        ...     last_name="Lovelace",
        ...     roles={UserRole.USER},
        ... )
        >>> user.activation_state
        <ActivationState.UNVERIFIED_DISABLED: 'unverified_disabled'>
        >>> user.activate()
        >>> user.can_login()
        True
    """

    id: UUID
    email: str
    password_hash: str  # Never store plaintext passwords
    first_name: str
    last_name: str
    email_verified: bool = False
    enabled: bool = False
    roles: set[UserRole] = field(default_factory=set)
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        """Reject the enabled-but-unverified combination.

        Raises:
            ValueError: If enabled is True while email_verified is False.
        """
        if self.enabled and not self.email_verified:
            raise ValueError("User cannot be enabled before email is verified")

    @property
    def activation_state(self) -> ActivationState:
        """Current activation state derived from the flag pair."""
        if self.email_verified and self.enabled:
            return ActivationState.VERIFIED_ENABLED
        return ActivationState.UNVERIFIED_DISABLED

    def activate(self) -> None:
        """Transition UNVERIFIED_DISABLED -> VERIFIED_ENABLED.

        Sets both flags together so no intermediate state is ever persisted.
        Calling on an already active user is a no-op apart from updated_at.

        Side Effects:
            - email_verified = True
            - enabled = True
            - updated_at refreshed
        """
        self.email_verified = True
        self.enabled = True
        self.updated_at = datetime.now(UTC)

    def can_login(self) -> bool:
        """Check whether the account is allowed to authenticate.

        Returns:
            bool: True only in VERIFIED_ENABLED state.
        """
        return self.activation_state is ActivationState.VERIFIED_ENABLED

    def role_values(self) -> list[str]:
        """Role tags as sorted strings (for JWT claims and responses)."""
        return sorted(role.value for role in self.roles)
