"""Shared pytest fixtures.

- Container and settings caches are cleared around every test so each test
  sees the environment it patches.
- valid_* fixtures build passing commands; tests override single fields
  with dataclasses.replace().
"""

from unittest.mock import MagicMock

import pytest

from usergate.application.commands import LoginUser, RegisterUser
from usergate.core.config import get_settings
from usergate.core.container import (
    get_command_dispatcher,
    get_event_bus,
    get_logger,
    get_validator,
)


@pytest.fixture(autouse=True)
def clear_container_caches():
    """Reset lru_cache singletons before and after each test."""
    caches = (
        get_settings,
        get_logger,
        get_event_bus,
        get_validator,
        get_command_dispatcher,
    )
    for factory in caches:
        factory.cache_clear()
    yield
    for factory in caches:
        factory.cache_clear()


@pytest.fixture
def mock_logger() -> MagicMock:
    """Logger double satisfying LoggerProtocol."""
    return MagicMock()


@pytest.fixture
def valid_login() -> LoginUser:
    """LoginUser that passes validation; tweak with dataclasses.replace."""
    return LoginUser(email="a@b.com", password="secret")


@pytest.fixture
def valid_registration() -> RegisterUser:
    """RegisterUser that passes validation; tweak with dataclasses.replace."""
    return RegisterUser(
        first_name="Jane",
        last_name="Doe",
        email="jane@doe.com",
        password="longenough1",
    )
