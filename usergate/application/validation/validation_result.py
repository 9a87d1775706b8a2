"""Outcome of validating one command."""

from dataclasses import dataclass, field

from usergate.core.errors import ValidationError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationResult:
    """Ordered collection of field-level validation failures.

    Errors keep rule-declaration order: fields in the order their rules were
    declared, and within a field the order of its checks.

    Attributes:
        errors: Every failed rule, in evaluation order.
    """

    errors: tuple[ValidationError, ...] = field(default_factory=tuple)

    @property
    def is_valid(self) -> bool:
        """True when no rule failed."""
        return not self.errors

    @property
    def fields(self) -> list[str]:
        """Names of failing fields, first-failure order, without duplicates."""
        seen: dict[str, None] = {}
        for error in self.errors:
            if error.field is not None:
                seen.setdefault(error.field, None)
        return list(seen)

    def errors_for(self, field_name: str) -> list[ValidationError]:
        """Return the errors reported for one field."""
        return [error for error in self.errors if error.field == field_name]

    def to_dict(self) -> dict[str, list[str]]:
        """Map each failing field to its error code values.

        Example:
            >>> result.to_dict()
            {'email': ['invalid_format'], 'password': ['required']}
        """
        grouped: dict[str, list[str]] = {}
        for error in self.errors:
            grouped.setdefault(error.field or "", []).append(error.code.value)
        return grouped
