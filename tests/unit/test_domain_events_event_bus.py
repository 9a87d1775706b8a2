"""Unit tests for InMemoryEventBus.

Tests cover:
- Subscribe/publish basic flow
- Multiple handlers for same event
- Handler failure doesn't break others (fail-open)
- No handlers registered (no-op)
- Exact-type routing
- Cancellation signal forwarding
"""

import asyncio
from dataclasses import dataclass
from unittest.mock import MagicMock
from uuid import UUID, uuid4

import pytest

from usergate.domain.events import DomainEvent, UserLoggedIn
from usergate.infrastructure.events.in_memory_event_bus import InMemoryEventBus


@dataclass(frozen=True, kw_only=True, slots=True)
class UserLoggedOut(DomainEvent):
    """Second event type used only for routing tests."""

    user_id: UUID


@pytest.mark.unit
class TestInMemoryEventBusBasicFlow:
    """Test basic subscribe/publish flow."""

    @pytest.mark.asyncio
    async def test_subscribe_and_publish_single_handler(self):
        """Test subscribing single handler and publishing event."""
        # Arrange
        event_bus = InMemoryEventBus(logger=MagicMock())
        received = []

        async def handler(event, cancellation) -> None:
            received.append(event)

        event = UserLoggedIn(user_id=uuid4())

        # Act
        event_bus.subscribe(UserLoggedIn, handler)
        await event_bus.publish(event)

        # Assert
        assert received == [event]

    @pytest.mark.asyncio
    async def test_subscribe_multiple_handlers_same_event(self):
        """Test multiple handlers for same event type all execute."""
        event_bus = InMemoryEventBus(logger=MagicMock())
        calls = []

        async def handler_1(event, cancellation) -> None:
            calls.append("handler_1")

        async def handler_2(event, cancellation) -> None:
            calls.append("handler_2")

        event_bus.subscribe(UserLoggedIn, handler_1)
        event_bus.subscribe(UserLoggedIn, handler_2)
        await event_bus.publish(UserLoggedIn(user_id=uuid4()))

        # Order not guaranteed
        assert sorted(calls) == ["handler_1", "handler_2"]

    @pytest.mark.asyncio
    async def test_publish_with_no_handlers_registered(self):
        """Test publishing event with no handlers is no-op (not an error)."""
        mock_logger = MagicMock()
        event_bus = InMemoryEventBus(logger=mock_logger)

        await event_bus.publish(UserLoggedIn(user_id=uuid4()))

        mock_logger.debug.assert_not_called()

    def test_handlers_for_returns_copy(self):
        event_bus = InMemoryEventBus(logger=MagicMock())

        async def handler(event, cancellation) -> None:
            pass

        event_bus.subscribe(UserLoggedIn, handler)
        handlers = event_bus.handlers_for(UserLoggedIn)
        handlers.clear()

        assert event_bus.handlers_for(UserLoggedIn) == [handler]
        assert event_bus.handlers_for(UserLoggedOut) == []


@pytest.mark.unit
class TestInMemoryEventBusRouting:
    """Test handlers only receive their own event type."""

    @pytest.mark.asyncio
    async def test_different_event_types_routed_correctly(self):
        event_bus = InMemoryEventBus(logger=MagicMock())
        received = []

        async def login_handler(event, cancellation) -> None:
            received.append(("login", event))

        async def logout_handler(event, cancellation) -> None:
            received.append(("logout", event))

        login = UserLoggedIn(user_id=uuid4())
        logout = UserLoggedOut(user_id=uuid4())

        event_bus.subscribe(UserLoggedIn, login_handler)
        event_bus.subscribe(UserLoggedOut, logout_handler)
        await event_bus.publish(login)
        await event_bus.publish(logout)

        assert received == [("login", login), ("logout", logout)]

    @pytest.mark.asyncio
    async def test_base_type_subscription_does_not_match_subclass(self):
        event_bus = InMemoryEventBus(logger=MagicMock())
        received = []

        async def handler(event, cancellation) -> None:
            received.append(event)

        event_bus.subscribe(DomainEvent, handler)
        await event_bus.publish(UserLoggedIn(user_id=uuid4()))

        assert received == []


@pytest.mark.unit
class TestInMemoryEventBusFailOpen:
    """Test fail-open behavior."""

    @pytest.mark.asyncio
    async def test_handler_failure_does_not_break_other_handlers(self):
        mock_logger = MagicMock()
        event_bus = InMemoryEventBus(logger=mock_logger)
        successful = []

        async def failing_handler(event, cancellation) -> None:
            raise ValueError("Handler intentionally failed")

        async def successful_handler(event, cancellation) -> None:
            successful.append(event)

        event = UserLoggedIn(user_id=uuid4())
        event_bus.subscribe(UserLoggedIn, failing_handler)
        event_bus.subscribe(UserLoggedIn, successful_handler)

        # Should not raise
        await event_bus.publish(event)

        assert successful == [event]
        mock_logger.warning.assert_called_once()
        call_args = mock_logger.warning.call_args
        assert call_args[0][0] == "event_handler_failed"
        assert call_args[1]["event_type"] == "UserLoggedIn"
        assert call_args[1]["event_id"] == str(event.event_id)
        assert call_args[1]["error_type"] == "ValueError"
        assert call_args[1]["error_message"] == "Handler intentionally failed"
        assert "failing_handler" in call_args[1]["handler_name"]

    @pytest.mark.asyncio
    async def test_multiple_handler_failures_all_logged(self):
        mock_logger = MagicMock()
        event_bus = InMemoryEventBus(logger=mock_logger)

        async def failing_handler_1(event, cancellation) -> None:
            raise ValueError("Handler 1 failed")

        async def failing_handler_2(event, cancellation) -> None:
            raise RuntimeError("Handler 2 failed")

        event_bus.subscribe(UserLoggedIn, failing_handler_1)
        event_bus.subscribe(UserLoggedIn, failing_handler_2)
        await event_bus.publish(UserLoggedIn(user_id=uuid4()))

        messages = [c[1]["error_message"] for c in mock_logger.warning.call_args_list]
        assert sorted(messages) == ["Handler 1 failed", "Handler 2 failed"]


@pytest.mark.unit
class TestInMemoryEventBusCancellation:
    """Test cancellation signal forwarding."""

    @pytest.mark.asyncio
    async def test_supplied_signal_reaches_every_handler(self):
        event_bus = InMemoryEventBus(logger=MagicMock())
        seen = []

        async def handler_1(event, cancellation) -> None:
            seen.append(cancellation)

        async def handler_2(event, cancellation) -> None:
            seen.append(cancellation)

        cancellation = asyncio.Event()
        cancellation.set()
        event_bus.subscribe(UserLoggedIn, handler_1)
        event_bus.subscribe(UserLoggedIn, handler_2)

        await event_bus.publish(UserLoggedIn(user_id=uuid4()), cancellation)

        assert seen == [cancellation, cancellation]

    @pytest.mark.asyncio
    async def test_default_signal_is_unset(self):
        event_bus = InMemoryEventBus(logger=MagicMock())
        seen = []

        async def handler(event, cancellation) -> None:
            seen.append(cancellation.is_set())

        event_bus.subscribe(UserLoggedIn, handler)
        await event_bus.publish(UserLoggedIn(user_id=uuid4()))

        assert seen == [False]


@pytest.mark.unit
class TestInMemoryEventBusFailureLogging:
    """Test handler failures are logged with full details."""

    @pytest.mark.asyncio
    async def test_failure_log_includes_exc_info(self):
        mock_logger = MagicMock()
        event_bus = InMemoryEventBus(logger=mock_logger)
        error = ValueError("boom")

        async def failing_handler(event, cancellation) -> None:
            raise error

        event_bus.subscribe(UserLoggedIn, failing_handler)
        await event_bus.publish(UserLoggedIn(user_id=uuid4()))

        assert mock_logger.warning.call_args[1]["exc_info"] is error

    @pytest.mark.asyncio
    async def test_cancelled_handler_is_logged_and_others_still_run(self):
        mock_logger = MagicMock()
        event_bus = InMemoryEventBus(logger=mock_logger)
        completed = []

        async def cancelled_handler(event, cancellation) -> None:
            raise asyncio.CancelledError()

        async def successful_handler(event, cancellation) -> None:
            completed.append(event)

        event = UserLoggedIn(user_id=uuid4())
        event_bus.subscribe(UserLoggedIn, cancelled_handler)
        event_bus.subscribe(UserLoggedIn, successful_handler)

        # Should not raise
        await event_bus.publish(event)

        assert completed == [event]
        mock_logger.warning.assert_called_once()
        call_args = mock_logger.warning.call_args
        assert call_args[0][0] == "event_handler_cancelled"
        assert call_args[1]["error_type"] == "CancelledError"
        assert call_args[1]["event_id"] == str(event.event_id)
        assert "cancelled_handler" in call_args[1]["handler_name"]
