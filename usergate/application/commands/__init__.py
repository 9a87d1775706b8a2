"""Commands (CQRS write operations) and their validation.

Usage:
    from usergate.application.commands import LoginUser, RegisterUser
"""

from usergate.application.commands.auth_commands import LoginUser, RegisterUser

__all__ = ["LoginUser", "RegisterUser"]
