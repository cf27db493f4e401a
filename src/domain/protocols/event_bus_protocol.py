"""Event bus protocol (port) for domain events.

Architecture:
    - Protocol (structural typing, NOT ABC inheritance)
    - Domain layer defines the interface (port)
    - Infrastructure implements it (InMemoryEventBus)

Key Requirements:
    1. Fail-open: one handler failure must NOT prevent other handlers from
       running, and never propagates to the publisher.
    2. Async handlers.
    3. Exact type routing: a handler only receives events of the type it
       subscribed to.

Usage:
    >>> event_bus = get_event_bus()
    >>> event_bus.subscribe(RegistrationCreated, log_registration_created)
    >>> await event_bus.publish(RegistrationCreated(...))
"""

from collections.abc import Awaitable, Callable
from typing import Protocol

from src.domain.events.base_event import DomainEvent

# Type alias for async event handler functions
EventHandler = Callable[[DomainEvent], Awaitable[None]]


class EventBusProtocol(Protocol):
    """Protocol for event bus implementations."""

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> None:
        """Register an async handler for one event type."""
        ...

    async def publish(self, event: DomainEvent) -> None:
        """Publish event to all handlers registered for ``type(event)``.

        Never raises; handler failures are logged by the implementation.
        """
        ...
