"""usergate - command validation and domain-event dispatch for user access.

Layers:
- core/: Result type, errors, rule predicates, settings, container
- domain/: Domain events and ports (protocols)
- application/: Commands, validators, dispatcher, event handlers
- infrastructure/: Adapters (in-memory event bus, structlog console logger)
"""

__version__ = "0.1.0"
