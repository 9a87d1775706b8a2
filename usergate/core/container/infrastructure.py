"""Infrastructure dependency factories."""

from functools import lru_cache
from typing import TYPE_CHECKING

from usergate.core.config import get_settings

if TYPE_CHECKING:
    from usergate.domain.protocols.logger_protocol import LoggerProtocol


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development/production: ConsoleAdapter (human-readable)
    - testing/ci: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from usergate.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    level = "DEBUG" if settings.debug else settings.log_level
    use_json = settings.is_testing or settings.is_ci
    return ConsoleAdapter(use_json=use_json, level=level)
