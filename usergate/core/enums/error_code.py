"""Machine-readable error codes.

Field-level codes name the rule that failed, not the field. The field itself
travels on ValidationError.field, so the same code is reused across fields.
"""

from enum import Enum


class ErrorCode(Enum):
    """Machine-readable error codes."""

    # Field rule failures
    REQUIRED = "required"
    INVALID_FORMAT = "invalid_format"
    TOO_SHORT = "too_short"

    # Aggregate / pipeline
    VALIDATION_FAILED = "validation_failed"
    COMMAND_NOT_REGISTERED = "command_not_registered"
