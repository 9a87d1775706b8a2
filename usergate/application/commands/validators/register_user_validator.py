"""Validator for the RegisterUser command.

Rules:
- first_name: required
- last_name: required
- email: required, valid email address
- password: required, at least PASSWORD_MIN_LENGTH characters
"""

from usergate.application.commands.auth_commands import RegisterUser
from usergate.application.validation import CommandValidator

PASSWORD_MIN_LENGTH = 8


class RegisterUserValidator(CommandValidator[RegisterUser]):
    """Field rules for RegisterUser."""

    def __init__(self) -> None:
        super().__init__()
        self.rule_for("first_name").not_empty()
        self.rule_for("last_name").not_empty()
        self.rule_for("email").not_empty().email_address()
        self.rule_for("password").not_empty().minimum_length(PASSWORD_MIN_LENGTH)
