"""One validator per command type."""

from usergate.application.commands.validators.login_user_validator import (
    LoginUserValidator,
)
from usergate.application.commands.validators.register_user_validator import (
    PASSWORD_MIN_LENGTH,
    RegisterUserValidator,
)
from usergate.application.commands.validators.registry import (
    COMMAND_VALIDATORS,
    get_validator_class,
)

__all__ = [
    "COMMAND_VALIDATORS",
    "LoginUserValidator",
    "PASSWORD_MIN_LENGTH",
    "RegisterUserValidator",
    "get_validator_class",
]
