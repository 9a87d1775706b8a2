"""Container module - Centralized dependency injection.

Application-scoped singletons built with lru_cache factories:

    from usergate.core.container import get_event_bus, get_logger

- infrastructure: settings-driven logger
- events: event bus and startup subscriptions
- commands: validators and the command dispatcher
"""

from usergate.core.container.commands import get_command_dispatcher, get_validator
from usergate.core.container.events import get_event_bus
from usergate.core.container.infrastructure import get_logger

__all__ = [
    "get_command_dispatcher",
    "get_event_bus",
    "get_logger",
    "get_validator",
]
