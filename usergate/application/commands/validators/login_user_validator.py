"""Validator for the LoginUser command.

Rules:
- email: required, valid email address
- password: required
"""

from usergate.application.commands.auth_commands import LoginUser
from usergate.application.validation import CommandValidator


class LoginUserValidator(CommandValidator[LoginUser]):
    """Field rules for LoginUser."""

    def __init__(self) -> None:
        super().__init__()
        self.rule_for("email").not_empty().email_address()
        self.rule_for("password").not_empty()
