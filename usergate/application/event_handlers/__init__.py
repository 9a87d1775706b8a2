"""Domain event subscribers (application layer)."""

from usergate.application.event_handlers.user_login_event_handler import (
    UserLoginEventHandler,
)

__all__ = ["UserLoginEventHandler"]
