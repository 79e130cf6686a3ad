"""
Role Authority

Hierarchical role-based access control keyed by opaque 32-byte identifiers.
Every role has an admin role (the default admin role unless reassigned);
holders of the admin role may grant and revoke the role.
"""

import logging

from .errors import Unauthorized
from .events import EventLog, EventType
from .models import DEFAULT_ADMIN_ROLE, RegistryState, RoleData, Tag

logger = logging.getLogger(__name__)


class RoleAuthority:
    """Role membership and role administration."""

    def __init__(self, state: RegistryState, events: EventLog):
        self._state = state
        self._events = events

    def bind(self, state: RegistryState) -> None:
        self._state = state

    def _data(self, role: Tag) -> RoleData:
        data = self._state.roles.get(role.hex)
        if data is None:
            data = RoleData()
            self._state.roles[role.hex] = data
        return data

    def has_role(self, role: Tag, account: str) -> bool:
        data = self._state.roles.get(role.hex)
        return data is not None and account in data.members

    def can(self, account: str, capability: Tag) -> bool:
        """Capability check used by the registry; capabilities are roles."""
        return self.has_role(capability, account)

    def check_role(self, role: Tag, account: str) -> None:
        if not self.has_role(role, account):
            raise Unauthorized(account=account, role=role.hex)

    def get_role_admin(self, role: Tag) -> Tag:
        data = self._state.roles.get(role.hex)
        if data is None or data.admin_role is None:
            return DEFAULT_ADMIN_ROLE
        return Tag.from_hex(data.admin_role)

    def set_role_admin(self, role: Tag, admin_role: Tag) -> bool:
        """Reassign the admin role. Unchecked; callers gate it.

        Returns False without emitting an event when the admin role is unchanged.
        """
        previous = self.get_role_admin(role)
        if previous == admin_role:
            return False
        self._data(role).admin_role = admin_role.hex
        self._events.emit(
            EventType.ROLE_ADMIN_CHANGED,
            role=role.hex,
            previous_admin_role=previous.hex,
            new_admin_role=admin_role.hex,
        )
        logger.info(f"Admin role of {role.hex} changed from {previous.hex} to {admin_role.hex}")
        return True

    def grant_role(self, caller: str, role: Tag, account: str) -> bool:
        """Grant a role. Returns False when the account already holds it."""
        self.check_role(self.get_role_admin(role), caller)
        return self._grant(role, account, sender=caller)

    def revoke_role(self, caller: str, role: Tag, account: str) -> bool:
        """Revoke a role. Returns False when the account does not hold it."""
        self.check_role(self.get_role_admin(role), caller)
        return self._revoke(role, account, sender=caller)

    def renounce_role(self, caller: str, role: Tag, account: str) -> bool:
        """Give up a role held by the caller itself."""
        if caller != account:
            raise Unauthorized(account=caller, role=role.hex, message="accounts can only renounce roles for themselves")
        return self._revoke(role, account, sender=caller)

    def bootstrap_admin(self, account: str) -> bool:
        """Grant the default admin role without an authorization check."""
        return self._grant(DEFAULT_ADMIN_ROLE, account, sender=None)

    def _grant(self, role: Tag, account: str, sender) -> bool:
        if self.has_role(role, account):
            return False
        self._data(role).members.add(account)
        self._events.emit(EventType.ROLE_GRANTED, role=role.hex, account=account, sender=sender)
        logger.info(f"Role {role.hex} granted to {account} by {sender}")
        return True

    def _revoke(self, role: Tag, account: str, sender) -> bool:
        if not self.has_role(role, account):
            return False
        self._data(role).members.discard(account)
        self._events.emit(EventType.ROLE_REVOKED, role=role.hex, account=account, sender=sender)
        logger.info(f"Role {role.hex} revoked from {account} by {sender}")
        return True
