"""Event bus protocol (port) for domain events.

The domain defines the interface; infrastructure provides the adapter
(InMemoryEventBus). The container builds the bus and subscribes handlers
once at startup.

Usage:
    >>> event_bus = get_event_bus()
    >>>
    >>> async def on_login(event: UserLoggedIn, cancellation: asyncio.Event) -> None:
    ...     if cancellation.is_set():
    ...         return
    ...     ...
    >>>
    >>> event_bus.subscribe(UserLoggedIn, on_login)
    >>> await event_bus.publish(UserLoggedIn(user_id=user_id))
"""

import asyncio
from collections.abc import Awaitable, Callable
from typing import Protocol

from usergate.domain.events.base_event import DomainEvent

CancellationToken = asyncio.Event
"""Cooperative cancellation signal passed to every handler.

A set event means the publisher no longer needs the work done. Handlers
check it where they can stop cleanly; ignoring it is allowed.
"""

EventHandler = Callable[[DomainEvent, CancellationToken], Awaitable[None]]
"""Async event handler: (event, cancellation) -> None, side effects only."""


class EventBusProtocol(Protocol):
    """Protocol for event bus implementations.

    Requirements:
        1. **Exact-type routing**: handlers subscribed for a type receive only
           events of exactly that type (no inheritance matching).
        2. **Fail-open**: one handler failure must NOT prevent other handlers
           from executing. Failures are logged, never raised to the publisher.
        3. **No ordering guarantees** between handlers of the same event.
        4. **No handlers = no-op**, not an error.
    """

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> None:
        """Register handler for a specific event type.

        Args:
            event_type: Event class to handle (e.g. UserLoggedIn).
            handler: Async callable accepting (event, cancellation).
        """
        ...

    def handlers_for(self, event_type: type[DomainEvent]) -> list[EventHandler]:
        """Return the handlers registered for event_type (empty if none)."""
        ...

    async def publish(
        self,
        event: DomainEvent,
        cancellation: CancellationToken | None = None,
    ) -> None:
        """Publish event to all handlers registered for type(event).

        Args:
            event: Domain event to publish.
            cancellation: Signal forwarded to every handler. A fresh, unset
                signal is used when None.
        """
        ...
