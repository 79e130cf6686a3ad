"""
Representative-Item Resolver

Maps each account to the single item used to answer account-level tag
queries. Stored entries are convenience pointers only; callers must confirm
current ownership before trusting them.
"""

import logging
from typing import Optional

from .events import EventLog, EventType
from .models import RegistryState, Tag

logger = logging.getLogger(__name__)


class RepresentativeItemResolver:
    """Account -> representative item id."""

    def __init__(self, state: RegistryState, events: EventLog):
        self._state = state
        self._events = events

    def bind(self, state: RegistryState) -> None:
        self._state = state

    def resolve(self, account: str) -> Optional[int]:
        """Return the stored representative item, or None if never set."""
        return self._state.default_items.get(account)

    def set_default(self, account: str, item: int, reason: str = "manual") -> None:
        """Overwrite the account's representative item."""
        previous = self._state.default_items.get(account)
        self._state.default_items[account] = item
        self._events.emit(
            EventType.DEFAULT_ITEM_SET,
            account=account,
            item=item,
            previous=previous,
            reason=reason,
        )
        logger.info(f"Representative item of {account} set to {item} ({reason})")


class DefaultItemHook:
    """Post-add hook: the first item tagged for an owner becomes its default.

    Never overwrites an existing representative item.
    """

    def __init__(self, resolver: RepresentativeItemResolver):
        self.resolver = resolver

    def __call__(self, owner: str, item: int, tag: Tag) -> None:
        if self.resolver.resolve(owner) is not None:
            return
        self.resolver.set_default(owner, item, reason="first_tagged")
