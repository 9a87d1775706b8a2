"""Rule composition for command validators.

A validator is an ordered list of field rules. Each rule pairs a field
accessor with a chain of checks; each check is a predicate that returns a
Result carrying a field-scoped ValidationError on failure.

Per-field cascade:
    CONTINUE (default) evaluates every check of a field and keeps every
    failure. STOP ends the field's chain at its first failure. Rules for
    different fields never short-circuit each other.

The built-in format and length checks pass on empty input, so under
CONTINUE an empty field still reports only REQUIRED.
"""

from collections.abc import Callable
from enum import Enum
from operator import attrgetter
from typing import Any, Generic, TypeVar

from usergate.application.validation.validation_result import ValidationResult
from usergate.core.enums import ErrorCode
from usergate.core.errors import ValidationError
from usergate.core.result import Failure, Result, Success
from usergate.core.validation import (
    validate_email,
    validate_min_length,
    validate_not_empty,
)

TCommand = TypeVar("TCommand")

FieldCheck = Callable[[Any, str], Result[Any, ValidationError]]
"""Check signature: (value, field_name) -> Success | Failure(ValidationError)."""


class CascadeMode(Enum):
    """How a field's chain reacts to a failed check."""

    CONTINUE = "continue"
    STOP = "stop"


class RuleBuilder:
    """Fluent chain of checks for one field.

    Returned by CommandValidator.rule_for(); every chaining method returns
    the builder itself.
    """

    def __init__(self, field_name: str, accessor: Callable[[Any], Any]) -> None:
        self.field_name = field_name
        self._accessor = accessor
        self._checks: list[FieldCheck] = []
        self._cascade = CascadeMode.CONTINUE

    def cascade(self, mode: CascadeMode) -> "RuleBuilder":
        self._cascade = mode
        return self

    def not_empty(self) -> "RuleBuilder":
        """Fail with REQUIRED on None, empty or whitespace-only values."""
        self._checks.append(validate_not_empty)
        return self

    def email_address(self) -> "RuleBuilder":
        """Fail with INVALID_FORMAT on a non-empty, malformed email address."""
        self._checks.append(validate_email)
        return self

    def minimum_length(self, min_length: int) -> "RuleBuilder":
        """Fail with TOO_SHORT on a non-empty value shorter than min_length."""
        if min_length < 1:
            raise ValueError("min_length must be positive")

        def check(value: Any, field_name: str) -> Result[Any, ValidationError]:
            return validate_min_length(value, min_length, field_name)

        self._checks.append(check)
        return self

    def must(
        self,
        predicate: Callable[[Any], bool],
        *,
        code: ErrorCode = ErrorCode.VALIDATION_FAILED,
        message: str | None = None,
    ) -> "RuleBuilder":
        """Add a custom check that fails with `code` when predicate is False.

        Args:
            predicate: Receives the field value, returns True when valid.
            code: Error code to report.
            message: Error message (defaults to "<field> is invalid").
        """

        def check(value: Any, field_name: str) -> Result[Any, ValidationError]:
            if predicate(value):
                return Success(value=value)
            return Failure(
                error=ValidationError(
                    code=code,
                    message=message or f"{field_name} is invalid",
                    field=field_name,
                )
            )

        self._checks.append(check)
        return self

    def evaluate(self, instance: Any) -> list[ValidationError]:
        """Run the chain against instance and return its failures in order."""
        value = self._accessor(instance)
        errors: list[ValidationError] = []
        for check in self._checks:
            match check(value, self.field_name):
                case Failure(error=error):
                    errors.append(error)
                    if self._cascade is CascadeMode.STOP:
                        break
                case Success():
                    pass
        return errors


class CommandValidator(Generic[TCommand]):
    """Base class for one-validator-per-command validation.

    Subclasses declare their rules in __init__ after calling super().__init__().
    Validators are stateless after construction and safe to share.

    Example:
        >>> validator = LoginUserValidator()
        >>> result = validator.validate(LoginUser(email="", password="x"))
        >>> result.to_dict()
        {'email': ['required']}
    """

    def __init__(self) -> None:
        self._rules: list[RuleBuilder] = []

    def rule_for(
        self,
        field_name: str,
        accessor: Callable[[TCommand], Any] | None = None,
    ) -> RuleBuilder:
        """Start a rule chain for one field.

        Args:
            field_name: Name reported on ValidationError.field.
            accessor: Reads the value from the command. Defaults to
                attribute access by field_name.

        Returns:
            RuleBuilder to chain checks on.
        """
        rule = RuleBuilder(field_name, accessor or attrgetter(field_name))
        self._rules.append(rule)
        return rule

    @property
    def rules(self) -> list[RuleBuilder]:
        return list(self._rules)

    def validate(self, command: TCommand) -> ValidationResult:
        """Evaluate every rule against command and collect all failures.

        Never raises for invalid input.
        """
        errors: list[ValidationError] = []
        for rule in self._rules:
            errors.extend(rule.evaluate(command))
        return ValidationResult(errors=tuple(errors))

    def validate_or_fail(
        self, command: TCommand
    ) -> Result[TCommand, ValidationResult]:
        """Railway form of validate().

        Returns:
            Success(command) if valid, Failure(ValidationResult) otherwise.
        """
        result = self.validate(command)
        if result.is_valid:
            return Success(value=command)
        return Failure(error=result)
