"""Core errors package.

Usage:
    from usergate.core.errors import DomainError, ValidationError
"""

from usergate.core.errors.common_errors import ValidationError
from usergate.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "ValidationError",
]
