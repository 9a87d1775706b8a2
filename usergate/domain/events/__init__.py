"""Domain events module.

Usage:
    >>> from usergate.domain.events import DomainEvent, UserLoggedIn
    >>>
    >>> event = UserLoggedIn(user_id=user_id)
    >>> await event_bus.publish(event)
"""

from usergate.domain.events.base_event import DomainEvent
from usergate.domain.events.user_events import UserLoggedIn

__all__ = [
    "DomainEvent",
    "UserLoggedIn",
]
