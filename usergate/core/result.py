"""Result types for railway-oriented programming.

Validation and dispatch never raise for expected failures. They return a
Result instead, so callers branch with pattern matching.

Usage:
    result = validate_not_empty(cmd.email, "email")
    match result:
        case Success(value=email):
            ...
        case Failure(error=error):
            print(error.code, error.field)
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred (a DomainError, ValidationResult, ...).
    """

    error: E


Result: TypeAlias = Success[T] | Failure[E]
