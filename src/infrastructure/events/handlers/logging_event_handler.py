"""Logging event handler for domain events.

Writes one structured log line per authentication event.

Log Levels:
    - INFO: ATTEMPTED, SUCCEEDED and operational events
    - WARNING: FAILED events

Structured Fields:
    - event_id: UUID for event correlation
    - occurred_at: ISO 8601 timestamp (UTC)
    - every payload field of the event (user_id, email, reason)

The log event name is the snake_case event class name, so
UserLoginFailed is logged as "user_login_failed".
"""

import re
from dataclasses import fields
from uuid import UUID

from src.domain.events.base_event import DomainEvent
from src.domain.events.registry import WorkflowPhase, get_event_phase
from src.domain.protocols.logger_protocol import LoggerProtocol

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")
_BASE_FIELDS = {"event_id", "occurred_at"}


def event_log_name(event_type: type[DomainEvent]) -> str:
    """Convert an event class name to its snake_case log name.

    Example:
        >>> event_log_name(OTPVerificationFailed)
        'otp_verification_failed'
    """
    return _CAMEL_BOUNDARY.sub("_", event_type.__name__).lower()


class LoggingEventHandler:
    """Event handler for structured logging of domain events.

    Attributes:
        _logger: Logger protocol implementation (from container).

    Example:
        >>> handler = LoggingEventHandler(logger=get_logger())
        >>> event_bus.subscribe(UserSignupSucceeded, handler.handle)
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger

    async def handle(self, event: DomainEvent) -> None:
        """Log an event at the level matching its workflow phase.

        Args:
            event: Any registered domain event.
        """
        context: dict[str, str | None] = {
            "event_id": str(event.event_id),
            "occurred_at": event.occurred_at.isoformat(),
        }
        for field in fields(event):
            if field.name in _BASE_FIELDS:
                continue
            value = getattr(event, field.name)
            context[field.name] = str(value) if isinstance(value, UUID) else value

        name = event_log_name(type(event))
        if get_event_phase(type(event)) is WorkflowPhase.FAILED:
            self._logger.warning(name, **context)
        else:
            self._logger.info(name, **context)
