"""Declarative command validation.

Usage:
    from usergate.application.validation import CommandValidator

    class LoginUserValidator(CommandValidator[LoginUser]):
        def __init__(self) -> None:
            super().__init__()
            self.rule_for("email").not_empty().email_address()
            self.rule_for("password").not_empty()
"""

from usergate.application.validation.validation_result import ValidationResult
from usergate.application.validation.validator import (
    CascadeMode,
    CommandValidator,
    FieldCheck,
    RuleBuilder,
)

__all__ = [
    "CascadeMode",
    "CommandValidator",
    "FieldCheck",
    "RuleBuilder",
    "ValidationResult",
]
