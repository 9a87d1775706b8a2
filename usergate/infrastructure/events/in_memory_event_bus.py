"""In-memory event bus implementation.

Implements EventBusProtocol with a dictionary-based registry
(event type -> list of handlers) filled at startup and read at publish time.

Architecture:
    - Exact-type lookup, no reflection or inheritance matching
    - Fail-open behavior (one handler failure doesn't break others)
    - Concurrent handler execution (asyncio.gather)
    - Cancellation signal forwarded to every handler

Usage:
    >>> bus = InMemoryEventBus(logger=get_logger())
    >>> bus.subscribe(UserLoggedIn, handler.handle)
    >>> await bus.publish(UserLoggedIn(user_id=user_id))
"""

import asyncio
from collections import defaultdict

from usergate.domain.events.base_event import DomainEvent
from usergate.domain.protocols.event_bus_protocol import (
    CancellationToken,
    EventHandler,
)
from usergate.domain.protocols.logger_protocol import LoggerProtocol


class InMemoryEventBus:
    """In-memory event bus with fail-open behavior.

    Thread Safety:
        NOT thread-safe. Subscriptions happen once at startup; publishing
        happens on a single event loop.

    Attributes:
        _handlers: Event class -> list of async handlers, in subscription order.
        _logger: Logger for publishing (debug) and handler failures (warning).
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        """Initialize event bus with logger.

        Args:
            logger: Logger for handler failures and event publishing.
        """
        self._handlers: dict[type[DomainEvent], list[EventHandler]] = defaultdict(list)
        self._logger = logger

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> None:
        """Register event handler for specific event type.

        No duplicate detection: subscribing the same handler twice makes it
        run twice per event.

        Args:
            event_type: Class of event to handle. Only exact type matches.
            handler: Async callable accepting (event, cancellation).
        """
        self._handlers[event_type].append(handler)

    def handlers_for(self, event_type: type[DomainEvent]) -> list[EventHandler]:
        """Return a copy of the handlers registered for event_type."""
        return list(self._handlers.get(event_type, []))

    async def publish(
        self,
        event: DomainEvent,
        cancellation: CancellationToken | None = None,
    ) -> None:
        """Publish event to all registered handlers.

        Flow:
            1. Look up handlers for type(event)
            2. If none, return immediately (no-op)
            3. Run all handlers with asyncio.gather(return_exceptions=True)
            4. Log each handler exception (cancellation included) at warning level
            5. Return (never raise)

        Args:
            event: Domain event to publish.
            cancellation: Signal forwarded to every handler unchanged. A fresh,
                unset signal is created when None.
        """
        event_type = type(event)
        handlers = self._handlers.get(event_type, [])

        if not handlers:
            return

        if cancellation is None:
            cancellation = asyncio.Event()

        self._logger.debug(
            "event_publishing",
            event_type=event_type.__name__,
            event_id=str(event.event_id),
            handler_count=len(handlers),
            cancelled=cancellation.is_set(),
        )

        # return_exceptions=True keeps one failing handler from cancelling the rest
        results = await asyncio.gather(
            *(handler(event, cancellation) for handler in handlers),
            return_exceptions=True,
        )

        for idx, result in enumerate(results):
            if not isinstance(result, BaseException):
                continue
            handler_name = getattr(handlers[idx], "__qualname__", repr(handlers[idx]))
            # CancelledError is a BaseException; gather returns it as a result
            message = (
                "event_handler_cancelled"
                if isinstance(result, asyncio.CancelledError)
                else "event_handler_failed"
            )
            self._logger.warning(
                message,
                event_type=event_type.__name__,
                event_id=str(event.event_id),
                handler_name=handler_name,
                error_type=type(result).__name__,
                error_message=str(result),
                exc_info=result,
            )
