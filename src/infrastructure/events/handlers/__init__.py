"""Event handlers for infrastructure integration.

Handlers:
    - LoggingEventHandler: Structured logging with phase-based severity

Handlers follow fail-open design (the bus logs and swallows their errors).
"""

from src.infrastructure.events.handlers.logging_event_handler import LoggingEventHandler

__all__ = [
    "LoggingEventHandler",
]
