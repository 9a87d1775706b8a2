"""Error classes shared across layers.

ValidationError is the unit a validator reports: one failed rule on one
field of one command.

Usage:
    from usergate.core.errors import ValidationError
    from usergate.core.enums import ErrorCode

    ValidationError(
        code=ErrorCode.INVALID_FORMAT,
        message="email is not a valid email address",
        field="email",
    )
"""

from dataclasses import dataclass

from usergate.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure scoped to one field.

    Attributes:
        code: ErrorCode enum (REQUIRED, INVALID_FORMAT, TOO_SHORT).
        message: Human-readable message.
        field: Field name that failed validation.
        details: Additional context (e.g. {"min_length": "8"}).
    """

    field: str | None = None
