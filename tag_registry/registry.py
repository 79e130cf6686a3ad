"""
Tag Registry

The tag mutation protocol and the account-level query built on top of the
Tag Store, the Representative-Item Resolver, the Role Authority and the
Ownership Oracle.

Mutations are serialized by a single lock. Each one checks its
preconditions, mutates the in-memory state, then commits it through the
store. If anything fails after the first change, the last committed state is
reloaded, so a failed operation leaves no trace. Events are delivered to
subscribers only after the commit.
"""

import logging
from contextlib import contextmanager
from threading import Lock
from typing import Callable, Dict, Iterable, List, Optional, Union

from .errors import TokenNotBurned, Unauthorized
from .events import EventLog
from .models import RegistryState, Tag, normalize_account, parse_item_id
from .models.state import EventRecord
from .ownership import Owned, OwnershipOracle
from .resolver import DefaultItemHook, RepresentativeItemResolver
from .roles import RoleAuthority
from .storage import RegistryStore
from .tag_store import TagStore

logger = logging.getLogger(__name__)

TagLike = Union[Tag, str]

# Called after a successful add with (owner, item, tag)
PostAddHook = Callable[[str, int, Tag], None]


class TagRegistry:
    """Attribute registry for externally owned items."""

    def __init__(
        self,
        oracle: OwnershipOracle,
        store: Optional[RegistryStore] = None,
        root_admins: Iterable[str] = (),
        auto_default_item: bool = True,
    ):
        """
        Initialize the registry.

        Args:
            oracle: Ownership ledger used for all ownership checks
            store: Persistence for the registry document (in memory if omitted)
            root_admins: Accounts granted the default admin role when the
                registry document is first created
            auto_default_item: Install the first-tagged-item default hook
        """
        self.oracle = oracle
        self.store = store or RegistryStore()
        self._lock = Lock()

        is_new = not self.store.exists
        self._state = self.store.load()
        self.events = EventLog(self._state)
        self.tag_store = TagStore(self._state, self.events)
        self.resolver = RepresentativeItemResolver(self._state, self.events)
        self.roles = RoleAuthority(self._state, self.events)

        self.post_add_hooks: List[PostAddHook] = []
        if auto_default_item:
            self.post_add_hooks.append(DefaultItemHook(self.resolver))

        if is_new:
            admins = [normalize_account(a) for a in root_admins]
            with self._mutation():
                for admin in admins:
                    self.roles.bootstrap_admin(admin)
            logger.info(f"Created registry state with {len(admins)} root admin(s)")

    # ------------------------------------------------------------------
    # Transaction handling
    # ------------------------------------------------------------------

    def _bind(self, state: RegistryState) -> None:
        self._state = state
        self.events.bind(state)
        self.tag_store.bind(state)
        self.resolver.bind(state)
        self.roles.bind(state)

    @contextmanager
    def _mutation(self):
        with self._lock:
            try:
                yield
                self.store.save(self._state)
            except Exception:
                self.events.discard()
                self._bind(self.store.load())
                raise
            self.events.publish()

    def _require_role(self, caller: str, role: Tag) -> None:
        if not self.roles.can(caller, role):
            raise Unauthorized(account=caller, role=role.hex)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def has_tag(self, account: str, tag: TagLike) -> bool:
        """Check whether an account holds a tag through its representative item.

        The representative item is re-validated against the ownership
        ledger; a stale, burned or missing item yields False.
        """
        account = normalize_account(account)
        tag = Tag.parse(tag)

        with self._lock:
            item = self.resolver.resolve(account)
        if item is None:
            return False

        lookup = self.oracle.lookup_owner(item)
        if not isinstance(lookup, Owned) or lookup.account != account:
            return False

        with self._lock:
            return self.tag_store.has_tag_on_item(tag, item)

    def item_has_tag(self, item: int, tag: TagLike) -> bool:
        item = parse_item_id(item)
        tag = Tag.parse(tag)
        with self._lock:
            return self.tag_store.has_tag_on_item(tag, item)

    def total_tag_havers(self, tag: TagLike) -> int:
        tag = Tag.parse(tag)
        with self._lock:
            return self.tag_store.count(tag)

    def tagged_items(self, tag: TagLike) -> List[int]:
        tag = Tag.parse(tag)
        with self._lock:
            return self.tag_store.items(tag)

    def default_item(self, account: str) -> Optional[int]:
        """Raw representative item entry; not validated against ownership."""
        account = normalize_account(account)
        with self._lock:
            return self.resolver.resolve(account)

    def has_role(self, role: TagLike, account: str) -> bool:
        role = Tag.parse(role)
        account = normalize_account(account)
        with self._lock:
            return self.roles.has_role(role, account)

    def get_role_admin(self, role: TagLike) -> Tag:
        role = Tag.parse(role)
        with self._lock:
            return self.roles.get_role_admin(role)

    def list_events(self, event_type: Optional[str] = None, limit: Optional[int] = None) -> List[EventRecord]:
        with self._lock:
            return self.events.list(event_type=event_type, limit=limit)

    # ------------------------------------------------------------------
    # Tag mutations
    # ------------------------------------------------------------------

    def add_tag(self, caller: str, item: int, tag: TagLike) -> None:
        """Tag an item. The caller must hold the role named by the tag."""
        caller = normalize_account(caller)
        item = parse_item_id(item)
        tag = Tag.parse(tag)

        with self._mutation():
            self._require_role(caller, tag)
            self.tag_store.add(tag, item)
            owner = self.oracle.owner_of(item)
            for hook in self.post_add_hooks:
                hook(owner, item, tag)

    def remove_tag(self, caller: str, item: int, tag: TagLike) -> None:
        """Untag an item. The caller must hold the role named by the tag."""
        caller = normalize_account(caller)
        item = parse_item_id(item)
        tag = Tag.parse(tag)

        with self._mutation():
            self._require_role(caller, tag)
            self.tag_store.remove(tag, item)

    def remove_tag_from_burned_token(self, item: int, tag: TagLike) -> None:
        """Untag an item that no longer exists. Open to anyone."""
        item = parse_item_id(item)
        tag = Tag.parse(tag)

        with self._mutation():
            lookup = self.oracle.lookup_owner(item)
            if isinstance(lookup, Owned):
                raise TokenNotBurned(f"item {item} is still owned by {lookup.account}", item=item)
            self.tag_store.remove(tag, item)
            logger.info(f"Cleaned up tag {tag.hex} from burned item {item}")

    # ------------------------------------------------------------------
    # Representative items
    # ------------------------------------------------------------------

    def set_default(self, caller: str, account: str, item: int) -> None:
        """Self-service override of an account's representative item."""
        caller = normalize_account(caller)
        account = normalize_account(account)
        item = parse_item_id(item)

        with self._mutation():
            if caller != account:
                raise Unauthorized(account=caller, message="accounts can only set their own default item")
            self.resolver.set_default(account, item)

    # ------------------------------------------------------------------
    # Role administration
    # ------------------------------------------------------------------

    def set_role_admin(self, caller: str, role: TagLike, admin_role: TagLike) -> bool:
        """Reassign a role's admin role. Gated on the role's current admin."""
        caller = normalize_account(caller)
        role = Tag.parse(role)
        admin_role = Tag.parse(admin_role)

        with self._mutation():
            self._require_role(caller, self.roles.get_role_admin(role))
            return self.roles.set_role_admin(role, admin_role)

    def grant_role(self, caller: str, role: TagLike, account: str) -> bool:
        caller = normalize_account(caller)
        role = Tag.parse(role)
        account = normalize_account(account)
        with self._mutation():
            return self.roles.grant_role(caller, role, account)

    def revoke_role(self, caller: str, role: TagLike, account: str) -> bool:
        caller = normalize_account(caller)
        role = Tag.parse(role)
        account = normalize_account(account)
        with self._mutation():
            return self.roles.revoke_role(caller, role, account)

    def renounce_role(self, caller: str, role: TagLike, account: str) -> bool:
        caller = normalize_account(caller)
        role = Tag.parse(role)
        account = normalize_account(account)
        with self._mutation():
            return self.roles.renounce_role(caller, role, account)

    # ------------------------------------------------------------------
    # Maintenance
    # ------------------------------------------------------------------

    def check_invariants(self) -> List[str]:
        """Return a description of every tag whose count disagrees with its members."""
        issues = []
        with self._lock:
            for tag_hex, data in self._state.tags.items():
                if data.tagged_count != len(data.items):
                    issues.append(
                        f"tag {tag_hex}: tagged_count={data.tagged_count} but {len(data.items)} item(s)"
                    )
        return issues

    def summary(self) -> Dict[str, int]:
        with self._lock:
            return {
                "tags": len(self._state.tags),
                "tagged_items": sum(d.tagged_count for d in self._state.tags.values()),
                "default_items": len(self._state.default_items),
                "roles": len(self._state.roles),
                "events": len(self._state.events),
            }
