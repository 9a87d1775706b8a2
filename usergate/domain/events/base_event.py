"""Base domain event class.

Domain events represent "things that happened" in the business domain and
are named in past tense (UserLoggedIn, not LogUserIn).

Architecture:
    - Frozen dataclass (immutable after creation)
    - Auto-generated event_id (UUID v7, time-ordered) for event tracking
    - occurred_at timestamp (UTC) for event ordering
    - All events inherit from this base class

Usage:
    >>> @dataclass(frozen=True, kw_only=True, slots=True)
    >>> class UserLoggedIn(DomainEvent):
    ...     user_id: UUID
    >>>
    >>> event = UserLoggedIn(user_id=uuid7())
    >>> event.event_id      # Auto-generated UUID
    >>> event.occurred_at   # Auto-generated UTC timestamp
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

from uuid_extensions import uuid7


@dataclass(frozen=True, kw_only=True, slots=True)
class DomainEvent:
    """Base class for all domain events.

    All domain events MUST:
        1. Inherit from this base class
        2. Use past tense naming
        3. Be frozen dataclasses (immutable after creation)
        4. Use kw_only=True
        5. Carry everything their handlers need (no request context lookups)

    Attributes:
        event_id: Unique identifier for this event instance. Used for
            tracking, deduplication and log correlation.
        occurred_at: Timestamp when the event occurred (UTC).
    """

    event_id: UUID = field(default_factory=uuid7)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))
