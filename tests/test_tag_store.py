"""
Tests for the tag store.
"""
import pytest

from tag_registry.errors import AlreadyTagged, NotTagged
from tag_registry.events import EventLog, EventType
from tag_registry.models import RegistryState, Tag
from tag_registry.tag_store import TagStore

VERIFIED = Tag.from_name("VERIFIED")
BANNED = Tag.from_name("BANNED")


class TestTagStore:
    """Test membership and counts."""

    @pytest.fixture
    def state(self):
        return RegistryState()

    @pytest.fixture
    def events(self, state):
        return EventLog(state)

    @pytest.fixture
    def store(self, state, events):
        return TagStore(state, events)

    def test_unused_tag_is_empty(self, store, state):
        """A tag that was never used has count 0 and creates no entry on read."""
        assert store.count(VERIFIED) == 0
        assert not store.has_tag_on_item(VERIFIED, 1)
        assert store.items(VERIFIED) == []
        assert state.tags == {}

    def test_add_sets_membership_and_count(self, store, events):
        store.add(VERIFIED, 1)
        store.add(VERIFIED, 2)

        assert store.has_tag_on_item(VERIFIED, 1)
        assert store.has_tag_on_item(VERIFIED, 2)
        assert not store.has_tag_on_item(BANNED, 1)
        assert store.count(VERIFIED) == 2
        assert store.items(VERIFIED) == [1, 2]

        added = events.list(event_type=EventType.TAG_ADDED.value)
        assert [e.payload["item"] for e in added] == [1, 2]
        assert added[0].payload["tag"] == VERIFIED.hex

    def test_add_twice_fails(self, store, events):
        store.add(VERIFIED, 1)

        with pytest.raises(AlreadyTagged):
            store.add(VERIFIED, 1)

        assert store.count(VERIFIED) == 1
        assert len(events.list()) == 1

    def test_remove(self, store, events):
        store.add(VERIFIED, 1)
        store.add(VERIFIED, 2)
        store.remove(VERIFIED, 1)

        assert not store.has_tag_on_item(VERIFIED, 1)
        assert store.count(VERIFIED) == 1
        assert events.list()[-1].type == EventType.TAG_REMOVED.value

    def test_remove_untagged_fails(self, store, events):
        with pytest.raises(NotTagged):
            store.remove(VERIFIED, 1)

        assert store.count(VERIFIED) == 0
        assert events.list() == []

    def test_entry_kept_after_last_removal(self, store, state):
        """Tag entries are never deleted; an emptied tag reads as unused."""
        store.add(VERIFIED, 1)
        store.remove(VERIFIED, 1)

        assert VERIFIED.hex in state.tags
        assert store.count(VERIFIED) == 0
        assert store.items(VERIFIED) == []

    def test_tags_are_independent(self, store):
        store.add(VERIFIED, 1)
        store.add(BANNED, 1)
        store.remove(BANNED, 1)

        assert store.has_tag_on_item(VERIFIED, 1)
        assert store.count(VERIFIED) == 1
        assert store.count(BANNED) == 0
