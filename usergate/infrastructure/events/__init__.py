"""Event bus adapters implementing EventBusProtocol."""

from usergate.infrastructure.events.in_memory_event_bus import InMemoryEventBus

__all__ = ["InMemoryEventBus"]
