"""Command dispatch pipeline.

Routes a command to its validator and, only if validation passes, to its
use-case handler. Invalid commands are rejected with the full
ValidationResult so callers can report every field-level error at once.

Flow:
1. Look up the registration for type(command)
2. Run the validator (collects all field failures)
3. Invalid -> Failure(ValidationResult), handler NOT invoked
4. Valid -> await handler(command) and return its Result unchanged

Usage:
    >>> dispatcher = CommandDispatcher(logger=get_logger())
    >>> dispatcher.register(LoginUser, LoginUserValidator(), login_handler.handle)
    >>> result = await dispatcher.dispatch(LoginUser(email="a@b.com", password="x"))
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

from usergate.application.validation import CommandValidator, ValidationResult
from usergate.core.enums import ErrorCode
from usergate.core.errors import DomainError
from usergate.core.result import Failure, Result
from usergate.domain.protocols.logger_protocol import LoggerProtocol

CommandHandler = Callable[[Any], Awaitable[Result[Any, Any]]]
"""Use-case handler: async (command) -> Result."""


@dataclass(frozen=True, slots=True)
class CommandRegistration:
    """Validator and handler pair for one command type."""

    validator: CommandValidator[Any]
    handler: CommandHandler


class CommandDispatcher:
    """Validate-then-handle pipeline keyed by exact command type.

    Registrations are written at startup; a second registration for the same
    command type replaces the first.
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._registrations: dict[type, CommandRegistration] = {}
        self._logger = logger

    def register(
        self,
        command_type: type,
        validator: CommandValidator[Any],
        handler: CommandHandler,
    ) -> None:
        """Register the validator and use-case handler for command_type."""
        self._registrations[command_type] = CommandRegistration(
            validator=validator, handler=handler
        )

    def is_registered(self, command_type: type) -> bool:
        return command_type in self._registrations

    async def dispatch(
        self, command: Any
    ) -> Result[Any, ValidationResult | DomainError | Any]:
        """Validate command and run its handler when valid.

        Args:
            command: Command instance (e.g. LoginUser).

        Returns:
            Failure(DomainError) if no registration exists for type(command).
            Failure(ValidationResult) if any field rule fails.
            Otherwise the handler's own Result.
        """
        command_name = type(command).__name__
        registration = self._registrations.get(type(command))

        if registration is None:
            self._logger.warning("command_not_registered", command=command_name)
            return Failure(
                error=DomainError(
                    code=ErrorCode.COMMAND_NOT_REGISTERED,
                    message=f"No handler registered for {command_name}",
                )
            )

        validation = registration.validator.validate(command)
        if not validation.is_valid:
            # Field names and codes only: values may contain passwords
            self._logger.info(
                "command_rejected",
                command=command_name,
                errors=validation.to_dict(),
            )
            return Failure(error=validation)

        self._logger.debug("command_dispatched", command=command_name)
        return await registration.handler(command)
