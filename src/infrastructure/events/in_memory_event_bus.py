"""In-memory event bus implementation.

Dictionary-based handler registry suitable for a single-process deployment.

Architecture:
    - Implements EventBusProtocol (hexagonal adapter pattern)
    - event_type -> list of handlers
    - Fail-open: one handler failure doesn't break others
    - Concurrent handler execution (asyncio.gather)

Usage:
    >>> bus = InMemoryEventBus(logger=get_logger())
    >>> bus.subscribe(RegistrationCreated, handler.handle_registration_created)
    >>> await bus.publish(RegistrationCreated(...))
"""

import asyncio
from collections import defaultdict

from src.domain.events.base_event import DomainEvent
from src.domain.protocols.event_bus_protocol import EventHandler
from src.domain.protocols.logger_protocol import LoggerProtocol


class InMemoryEventBus:
    """In-memory event bus with fail-open behavior.

    NOT thread-safe (single event loop design).

    Attributes:
        _handlers: Event class -> list of async handler functions.
        _logger: Logger for handler failures.
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._handlers: dict[type[DomainEvent], list[EventHandler]] = defaultdict(list)
        self._logger = logger

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> None:
        """Register event handler for an exact event type."""
        self._handlers[event_type].append(handler)

    async def publish(self, event: DomainEvent) -> None:
        """Publish event to all registered handlers.

        Handler exceptions are logged but NOT propagated to the publisher.
        No handlers registered is a no-op.
        """
        event_type = type(event)
        handlers = self._handlers.get(event_type, [])

        if not handlers:
            return

        self._logger.debug(
            "event_publishing",
            event_type=event_type.__name__,
            domain_event_id=str(event.id),
            handler_count=len(handlers),
        )

        results = await asyncio.gather(
            *(handler(event) for handler in handlers),
            return_exceptions=True,
        )

        for idx, result in enumerate(results):
            if isinstance(result, Exception):
                self._logger.warning(
                    "event_handler_failed",
                    event_type=event_type.__name__,
                    domain_event_id=str(event.id),
                    handler_name=getattr(handlers[idx], "__name__", repr(handlers[idx])),
                    error_type=type(result).__name__,
                    error_message=str(result),
                )
