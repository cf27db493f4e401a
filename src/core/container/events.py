"""Event bus dependency factory.

Application-scoped singleton for domain event publishing. Subscriptions are
configured once, when the bus is first requested.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.domain.protocols import EventBusProtocol


@lru_cache()
def get_event_bus() -> "EventBusProtocol":
    """Get event bus singleton (app-scoped).

    Returns an InMemoryEventBus with LoggingEventHandler subscribed to every
    auth, registration and catalog event.

    Usage:
        event_bus = get_event_bus()
        await event_bus.publish(RegistrationCreated(...))
    """
    from src.core.container.infrastructure import get_logger
    from src.infrastructure.events import InMemoryEventBus
    from src.infrastructure.events.handlers import LoggingEventHandler

    event_bus = InMemoryEventBus(logger=get_logger())
    LoggingEventHandler(logger=get_logger()).register(event_bus)
    return event_bus
