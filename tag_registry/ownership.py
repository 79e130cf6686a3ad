"""
Ownership Oracle

The registry never owns items; it asks an external ledger who owns them.
Lookups return a sum type, ``Owned(account)`` or ``NotFound``, so that
"the item was burned or never minted" cannot be confused with "the lookup
failed". Lookup failures are exceptions and propagate.
"""

import logging
from dataclasses import dataclass
from threading import Lock
from typing import Dict, Optional, Union

import requests

from .errors import InvalidInput, ItemNotFound, OracleUnavailable
from .models import ZERO_ACCOUNT, normalize_account

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Owned:
    """The item exists and is owned by ``account``."""
    account: str


@dataclass(frozen=True)
class NotFound:
    """The item does not exist (burned or never minted)."""
    item: int


OwnerLookup = Union[Owned, NotFound]


class OwnershipOracle:
    """Read-only view of the ownership ledger."""

    def lookup_owner(self, item: int) -> OwnerLookup:
        raise NotImplementedError

    def owner_of(self, item: int) -> str:
        """Return the owner of an item, raising ItemNotFound if it does not exist."""
        result = self.lookup_owner(item)
        if isinstance(result, NotFound):
            raise ItemNotFound(item)
        return result.account


class InMemoryOwnershipLedger(OwnershipOracle):
    """Local ownership ledger for development and tests."""

    def __init__(self, owners: Optional[Dict[int, str]] = None):
        self._owners: Dict[int, str] = {}
        self._lock = Lock()
        for item, owner in (owners or {}).items():
            self.mint(item, owner)

    def lookup_owner(self, item: int) -> OwnerLookup:
        with self._lock:
            owner = self._owners.get(item)
        if owner is None:
            return NotFound(item)
        return Owned(owner)

    def mint(self, item: int, owner: str) -> None:
        owner = normalize_account(owner)
        if owner == ZERO_ACCOUNT:
            raise InvalidInput("cannot mint to the zero address")
        with self._lock:
            if item in self._owners:
                raise InvalidInput(f"item {item} already exists")
            self._owners[item] = owner
        logger.debug(f"Minted item {item} to {owner}")

    def transfer(self, item: int, to: str) -> None:
        to = normalize_account(to)
        with self._lock:
            if item not in self._owners:
                raise ItemNotFound(item)
            self._owners[item] = to
        logger.debug(f"Transferred item {item} to {to}")

    def burn(self, item: int) -> None:
        with self._lock:
            if self._owners.pop(item, None) is None:
                raise ItemNotFound(item)
        logger.debug(f"Burned item {item}")


class HttpOwnershipOracle(OwnershipOracle):
    """Ownership lookups against an HTTP ledger gateway.

    ``GET {base_url}/items/{item}/owner`` answers ``{"owner": "0x..."}`` for
    live items and 404 for items that do not exist.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def lookup_owner(self, item: int) -> OwnerLookup:
        url = f"{self.base_url}/items/{item}/owner"
        logger.debug(f"Looking up owner of item {item} at {url}")
        try:
            resp = self.session.get(url, timeout=self.timeout)
        except requests.exceptions.RequestException as exc:
            raise OracleUnavailable(f"ownership lookup for item {item} failed: {exc}", item=item) from exc

        if resp.status_code == 404:
            return NotFound(item)

        try:
            resp.raise_for_status()
            owner = resp.json().get("owner")
            return Owned(normalize_account(owner))
        except requests.exceptions.RequestException as exc:
            raise OracleUnavailable(f"ownership lookup for item {item} failed: {exc}", item=item) from exc
        except (ValueError, AttributeError) as exc:
            raise OracleUnavailable(f"malformed ownership response for item {item}", item=item) from exc
