"""Domain protocols (ports) package.

Infrastructure adapters implement these protocols without inheritance.

Usage:
    from usergate.domain.protocols import EventBusProtocol, LoggerProtocol
"""

from usergate.domain.protocols.event_bus_protocol import (
    CancellationToken,
    EventBusProtocol,
    EventHandler,
)
from usergate.domain.protocols.logger_protocol import LoggerProtocol

__all__ = [
    "CancellationToken",
    "EventBusProtocol",
    "EventHandler",
    "LoggerProtocol",
]
