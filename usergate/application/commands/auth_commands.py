"""Authentication commands (CQRS write operations).

Commands represent user intent to change system state.
All commands are immutable (frozen=True) and use keyword-only arguments.

Pattern:
- Commands are data containers (no logic)
- Each command has exactly one validator (see validators/)
- Handlers run only after the validator passes (see dispatcher.py)
- Passwords are excluded from repr so commands are safe to log
"""

from dataclasses import dataclass, field


@dataclass(frozen=True, kw_only=True)
class LoginUser:
    """Log a user in with email and password.

    Attributes:
        email: User's email address (raw input).
        password: User's password (plain text).

    Example:
        >>> command = LoginUser(email="user@example.com", password="secret")
        >>> result = await dispatcher.dispatch(command)
    """

    email: str
    password: str = field(repr=False)


@dataclass(frozen=True, kw_only=True)
class RegisterUser:
    """Register a new user account.

    Attributes:
        first_name: User's first name.
        last_name: User's last name.
        email: User's email address (raw input).
        password: User's password (plain text, at least 8 characters).

    Example:
        >>> command = RegisterUser(
        ...     first_name="Jane",
        ...     last_name="Doe",
        ...     email="jane@doe.com",
        ...     password="longenough1",
        ... )
    """

    first_name: str
    last_name: str
    email: str
    password: str = field(repr=False)
