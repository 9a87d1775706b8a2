"""Command Validator Registry - one validator per command type.

Adding a command:
1. Define the command dataclass in auth_commands.py
2. Write its CommandValidator subclass in this package
3. Add the pair to COMMAND_VALIDATORS below

tests/unit/test_application_validator_registry.py fails if a command has no
validator here.
"""

from typing import Any

from usergate.application.commands.auth_commands import LoginUser, RegisterUser
from usergate.application.commands.validators.login_user_validator import (
    LoginUserValidator,
)
from usergate.application.commands.validators.register_user_validator import (
    RegisterUserValidator,
)
from usergate.application.validation import CommandValidator

COMMAND_VALIDATORS: dict[type, type[CommandValidator[Any]]] = {
    LoginUser: LoginUserValidator,
    RegisterUser: RegisterUserValidator,
}


def get_validator_class(command_type: type) -> type[CommandValidator[Any]]:
    """Return the validator class registered for command_type.

    Raises:
        KeyError: If command_type has no registered validator.
    """
    try:
        return COMMAND_VALIDATORS[command_type]
    except KeyError:
        raise KeyError(f"No validator registered for {command_type.__name__}") from None
