"""Event handlers subscribed to the event bus at container startup."""

from mintlite.infrastructure.events.handlers.logging_event_handler import (
    LoggingEventHandler,
)

__all__ = ["LoggingEventHandler"]
