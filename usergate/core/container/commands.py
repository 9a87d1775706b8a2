"""Command validation and dispatch factories.

Use-case handlers live outside this package, so the dispatcher starts
empty; callers register their handlers against it at startup:

    dispatcher = get_command_dispatcher()
    dispatcher.register(LoginUser, get_validator(LoginUser), login_handler.handle)
"""

from functools import lru_cache
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from usergate.application.commands.dispatcher import CommandDispatcher
    from usergate.application.validation import CommandValidator


@lru_cache()
def get_validator(command_type: type) -> "CommandValidator[Any]":
    """Return the validator singleton for command_type.

    Raises:
        KeyError: If command_type has no registered validator.
    """
    from usergate.application.commands.validators.registry import get_validator_class

    return get_validator_class(command_type)()


@lru_cache()
def get_command_dispatcher() -> "CommandDispatcher":
    """Return the application-scoped command dispatcher."""
    from usergate.application.commands.dispatcher import CommandDispatcher
    from usergate.core.container.infrastructure import get_logger

    return CommandDispatcher(logger=get_logger())
