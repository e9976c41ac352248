"""Base domain event class.

Domain events are immutable records of things that happened, named in
past tense (UserSignupSucceeded, OTPVerificationFailed).

Usage:
    >>> @dataclass(frozen=True, kw_only=True)
    ... class UserSignupSucceeded(DomainEvent):
    ...     user_id: UUID
    ...     email: str
    >>>
    >>> event = UserSignupSucceeded(user_id=uuid7(), email="test@example.com")
    >>> event.event_id  # auto-generated
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

from uuid_extensions import uuid7


@dataclass(frozen=True, kw_only=True)
class DomainEvent:
    """Base class for all domain events.

    Attributes:
        event_id: Unique identifier (UUIDv7, time-ordered).
        occurred_at: Timestamp when the event occurred (UTC).
    """

    event_id: UUID = field(default_factory=uuid7)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))
