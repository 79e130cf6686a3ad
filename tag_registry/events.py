"""
Registry notifications.

Events are appended to the registry document as part of the operation that
produced them and are handed to subscribers only after that operation has
been committed. They are never retracted.
"""

import logging
from datetime import datetime
from enum import Enum
from typing import Any, Callable, List, Optional

from .models import EventRecord, RegistryState

logger = logging.getLogger(__name__)


class EventType(Enum):
    """Notification types emitted by the registry."""

    TAG_ADDED = "TagAdded"
    TAG_REMOVED = "TagRemoved"
    ROLE_GRANTED = "RoleGranted"
    ROLE_REVOKED = "RoleRevoked"
    ROLE_ADMIN_CHANGED = "RoleAdminChanged"
    DEFAULT_ITEM_SET = "DefaultItemSet"

    @classmethod
    def is_valid(cls, event_type: str) -> bool:
        """Check if an event type string is valid."""
        try:
            cls(event_type)
            return True
        except ValueError:
            return False

    @classmethod
    def get_allowed_types(cls) -> set[str]:
        """Get all allowed event type strings."""
        return {e.value for e in cls}


Subscriber = Callable[[EventRecord], None]


class EventLog:
    """Append-only event log backed by the registry state."""

    def __init__(self, state: RegistryState):
        self._state = state
        self._pending: List[EventRecord] = []
        self._subscribers: List[Subscriber] = []

    def bind(self, state: RegistryState) -> None:
        self._state = state
        self._pending = []

    def subscribe(self, callback: Subscriber) -> None:
        """Register a callback invoked for every committed event."""
        self._subscribers.append(callback)

    def emit(self, event_type: EventType, **payload: Any) -> EventRecord:
        events = self._state.events
        record = EventRecord(
            seq=events[-1].seq + 1 if events else 1,
            ts=datetime.now().astimezone().isoformat(timespec="seconds"),
            type=event_type.value,
            payload=payload,
        )
        events.append(record)
        self._pending.append(record)
        return record

    def publish(self) -> None:
        """Deliver events emitted since the last commit to subscribers."""
        pending, self._pending = self._pending, []
        for record in pending:
            logger.debug(f"Event {record.seq} {record.type}: {record.payload}")
            for callback in self._subscribers:
                try:
                    callback(record)
                except Exception:
                    logger.exception(f"Event subscriber failed for event {record.seq}")

    def discard(self) -> None:
        self._pending = []

    def list(self, event_type: Optional[str] = None, limit: Optional[int] = None) -> List[EventRecord]:
        """Get events, optionally filtered by type and limited to the most recent."""
        events = self._state.events
        if event_type:
            events = [e for e in events if e.type == event_type]
        if limit is not None:
            events = events[-limit:] if limit > 0 else []
        return list(events)
