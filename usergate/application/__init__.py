"""Application layer - use case glue.

Structure:
- commands/: Command dataclasses, their validators and the dispatcher
- validation/: Rule composition used by command validators
- event_handlers/: Domain event subscribers
"""
