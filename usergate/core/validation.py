"""Field rule predicates.

Each predicate checks one rule on one value and returns a Result, so rules
compose without exceptions. Format and length predicates treat an empty
value as passing: emptiness is reported by validate_not_empty alone.

Usage:
    from usergate.core.validation import validate_email, validate_not_empty
    from usergate.core.result import Success, Failure

    match validate_email(cmd.email, "email"):
        case Success():
            pass
        case Failure(error=error):
            print(error.code)  # ErrorCode.INVALID_FORMAT
"""

import re
from typing import Any

from usergate.core.enums import ErrorCode
from usergate.core.errors import ValidationError
from usergate.core.result import Failure, Result, Success

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")


def is_empty(value: Any) -> bool:
    """Return True for None, empty strings and whitespace-only strings."""
    return value is None or (isinstance(value, str) and not value.strip())


def validate_not_empty(value: Any, field_name: str) -> Result[Any, ValidationError]:
    """Validate that a value is not empty.

    Args:
        value: Value to validate.
        field_name: Name of the field being validated.

    Returns:
        Success with value if not empty, Failure with REQUIRED otherwise.
    """
    if is_empty(value):
        return Failure(
            error=ValidationError(
                code=ErrorCode.REQUIRED,
                message=f"{field_name} is required",
                field=field_name,
            )
        )
    return Success(value=value)


def validate_email(value: str | None, field_name: str) -> Result[Any, ValidationError]:
    """Validate email address syntax.

    Args:
        value: Email address to validate.
        field_name: Name of the field being validated.

    Returns:
        Success with value if valid or empty, Failure with INVALID_FORMAT otherwise.
    """
    if is_empty(value):
        return Success(value=value)

    if not EMAIL_PATTERN.fullmatch(value):  # type: ignore[arg-type]
        return Failure(
            error=ValidationError(
                code=ErrorCode.INVALID_FORMAT,
                message=f"{field_name} is not a valid email address",
                field=field_name,
            )
        )
    return Success(value=value)


def validate_min_length(
    value: str | None, min_length: int, field_name: str
) -> Result[Any, ValidationError]:
    """Validate minimum string length.

    Args:
        value: String to validate.
        min_length: Minimum required length.
        field_name: Name of the field being validated.

    Returns:
        Success with value if long enough or empty, Failure with TOO_SHORT otherwise.
    """
    if is_empty(value):
        return Success(value=value)

    if len(value) < min_length:  # type: ignore[arg-type]
        return Failure(
            error=ValidationError(
                code=ErrorCode.TOO_SHORT,
                message=f"{field_name} must be at least {min_length} characters",
                field=field_name,
                details={"min_length": str(min_length)},
            )
        )
    return Success(value=value)
