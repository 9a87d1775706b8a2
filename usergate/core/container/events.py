"""Event bus dependency factory.

Application-scoped singleton for domain event publishing. All subscriptions
are made here, once, when the bus is first requested; publish-time lookup is
a plain dictionary read.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from usergate.domain.protocols.event_bus_protocol import EventBusProtocol


@lru_cache()
def get_event_bus() -> "EventBusProtocol":
    """Get event bus singleton (app-scoped).

    Adapter is chosen by settings.event_bus_type:
        - 'in-memory': InMemoryEventBus (single process)

    Subscriptions:
        - UserLoggedIn -> UserLoginEventHandler.handle

    Returns:
        Event bus implementing EventBusProtocol.

    Raises:
        ValueError: If settings.event_bus_type is not supported.
    """
    from usergate.application.event_handlers.user_login_event_handler import (
        UserLoginEventHandler,
    )
    from usergate.core.config import get_settings
    from usergate.core.container.infrastructure import get_logger
    from usergate.domain.events.user_events import UserLoggedIn
    from usergate.infrastructure.events.in_memory_event_bus import InMemoryEventBus

    event_bus_type = get_settings().event_bus_type

    if event_bus_type == "in-memory":
        event_bus = InMemoryEventBus(logger=get_logger())
    else:
        raise ValueError(
            f"Unsupported EVENT_BUS_TYPE: {event_bus_type}. Supported: 'in-memory'"
        )

    user_login_handler = UserLoginEventHandler()
    event_bus.subscribe(UserLoggedIn, user_login_handler.handle)  # type: ignore[arg-type]

    return event_bus
