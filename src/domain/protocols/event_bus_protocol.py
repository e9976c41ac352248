"""Event bus protocol (port) for domain events.

Publishers (command handlers) emit ATTEMPTED / SUCCEEDED / FAILED events;
subscribers (the logging handler) react to them. The domain defines the
port and infrastructure provides the in-memory adapter.

Usage:
    >>> event_bus = get_event_bus()
    >>> event_bus.subscribe(UserSignupSucceeded, handler.handle_signup_succeeded)
    >>> await event_bus.publish(UserSignupSucceeded(user_id=user.id, email=email))
"""

from collections.abc import Awaitable, Callable
from typing import Protocol

from src.domain.events.base_event import DomainEvent

# Type alias for event handler functions
EventHandler = Callable[[DomainEvent], Awaitable[None]]


class EventBusProtocol(Protocol):
    """Protocol for event bus implementations.

    Key Requirements:
        1. **Fail-open behavior**: One handler failure must NOT prevent other
           handlers from executing, and never propagates to the publisher.
        2. **Async support**: All handlers are async.
        3. **Exact type routing**: Handlers receive only events of the type
           they subscribed to (no inheritance matching).
    """

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> None:
        """Register event handler for specific event type.

        Args:
            event_type: Class of event to handle.
            handler: Async callable accepting the event.
        """
        ...

    async def publish(self, event: DomainEvent) -> None:
        """Publish event to all registered handlers.

        Args:
            event: Domain event to publish.
        """
        ...
