"""Handler for UserLoggedIn events.

Placeholder subscriber: the login use case publishes UserLoggedIn and this
handler is wired to it at startup, but it performs no side effect. Completing
without doing anything is its intended behavior, with or without the
cancellation signal set.

Architecture:
    - Application layer
    - App-scoped singleton, subscribed in the container
    - Stateless (safe to run concurrently)
"""

from usergate.domain.events.user_events import UserLoggedIn
from usergate.domain.protocols.event_bus_protocol import CancellationToken


class UserLoginEventHandler:
    """Subscriber for UserLoggedIn.

    Example:
        >>> handler = UserLoginEventHandler()
        >>> event_bus.subscribe(UserLoggedIn, handler.handle)
    """

    async def handle(
        self,
        event: UserLoggedIn,
        cancellation: CancellationToken,
    ) -> None:
        """Handle a UserLoggedIn event (no-op).

        Args:
            event: UserLoggedIn with the authenticated user's ID.
            cancellation: Cooperative cancellation signal (not consulted).
        """
        return None
