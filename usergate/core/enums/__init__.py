"""Core enums package.

Usage:
    from usergate.core.enums import ErrorCode, Environment
"""

from usergate.core.enums.environment import Environment
from usergate.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
