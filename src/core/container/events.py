# mypy: disable-error-code="arg-type"
"""Event bus dependency factory.

Application-scoped singleton for domain event publishing. Subscriptions are
wired from EVENT_REGISTRY at first use.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.domain.protocols.event_bus_protocol import EventBusProtocol


@lru_cache()
def get_event_bus() -> "EventBusProtocol":
    """Get event bus singleton (app-scoped).

    Every registered event is subscribed to LoggingEventHandler.handle, so
    adding an event to the registry is enough to have it logged.

    Returns:
        Event bus implementing EventBusProtocol.

    Usage:
        event_bus = get_event_bus()
        await event_bus.publish(UserSignupSucceeded(user_id=user.id, email=email))
    """
    from src.core.container.infrastructure import get_logger
    from src.domain.events.registry import get_all_events
    from src.infrastructure.events import InMemoryEventBus
    from src.infrastructure.events.handlers import LoggingEventHandler

    logger = get_logger()
    event_bus = InMemoryEventBus(logger=logger)
    logging_handler = LoggingEventHandler(logger=logger)

    for event_type in get_all_events():
        event_bus.subscribe(event_type, logging_handler.handle)

    return event_bus
