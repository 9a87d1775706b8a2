"""User access domain events."""

from dataclasses import dataclass
from uuid import UUID

from usergate.domain.events.base_event import DomainEvent


@dataclass(frozen=True, kw_only=True, slots=True)
class UserLoggedIn(DomainEvent):
    """User successfully authenticated.

    Published by the login use case after credentials are verified.
    Carries only the user identifier; handlers look up anything else they
    need themselves.

    Attributes:
        user_id: Authenticated user's ID.
    """

    user_id: UUID
