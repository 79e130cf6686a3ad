"""
Tag Store

Per-tag membership sets over item ids with a live count of tagged items.
The count always equals the size of the membership set; both are updated in
the same step.
"""

import logging
from typing import List

from .errors import AlreadyTagged, NotTagged
from .events import EventLog, EventType
from .models import RegistryState, Tag, TagData

logger = logging.getLogger(__name__)


class TagStore:
    """Item -> tag membership with per-tag counts."""

    def __init__(self, state: RegistryState, events: EventLog):
        self._state = state
        self._events = events

    def bind(self, state: RegistryState) -> None:
        self._state = state

    def _data(self, tag: Tag) -> TagData:
        # Entries are created on first use and never deleted
        data = self._state.tags.get(tag.hex)
        if data is None:
            data = TagData()
            self._state.tags[tag.hex] = data
        return data

    def has_tag_on_item(self, tag: Tag, item: int) -> bool:
        data = self._state.tags.get(tag.hex)
        return data is not None and item in data.items

    def count(self, tag: Tag) -> int:
        data = self._state.tags.get(tag.hex)
        return data.tagged_count if data else 0

    def items(self, tag: Tag) -> List[int]:
        data = self._state.tags.get(tag.hex)
        return sorted(data.items) if data else []

    def add(self, tag: Tag, item: int) -> None:
        if self.has_tag_on_item(tag, item):
            raise AlreadyTagged(f"item {item} already carries tag {tag.hex}", item=item, tag=tag.hex)

        data = self._data(tag)
        data.items.add(item)
        data.tagged_count += 1
        self._events.emit(EventType.TAG_ADDED, tag=tag.hex, item=item)
        logger.info(f"Tag {tag.hex} added to item {item} (total {data.tagged_count})")

    def remove(self, tag: Tag, item: int) -> None:
        if not self.has_tag_on_item(tag, item):
            raise NotTagged(f"item {item} does not carry tag {tag.hex}", item=item, tag=tag.hex)

        data = self._data(tag)
        data.items.discard(item)
        data.tagged_count -= 1
        self._events.emit(EventType.TAG_REMOVED, tag=tag.hex, item=item)
        logger.info(f"Tag {tag.hex} removed from item {item} (total {data.tagged_count})")
