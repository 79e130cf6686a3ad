"""
Identifier types: tags, accounts and item ids.

Tags are 32-byte opaque values that also serve as role identifiers. Accounts
are address-like strings. Item ids are non-negative integers from the
ownership ledger.
"""

import hashlib
import re
from dataclasses import dataclass
from typing import Any, Union

from ..errors import InvalidInput

TAG_SIZE = 32

_HEX_TAG_RE = re.compile(r"^0x[0-9a-fA-F]{64}$")
_ACCOUNT_RE = re.compile(r"^0x[0-9a-fA-F]{40}$")

ZERO_ACCOUNT = "0x" + "0" * 40


@dataclass(frozen=True)
class Tag:
    """Opaque fixed-width tag identifier, compared by equality only."""
    value: bytes

    def __post_init__(self):
        if not isinstance(self.value, bytes) or len(self.value) != TAG_SIZE:
            raise InvalidInput(f"tag must be exactly {TAG_SIZE} bytes")

    @classmethod
    def from_name(cls, name: str) -> "Tag":
        """Derive a tag from a human-readable label."""
        if not name or not name.strip():
            raise InvalidInput("tag label cannot be empty")
        return cls(hashlib.sha3_256(name.strip().encode("utf-8")).digest())

    @classmethod
    def from_hex(cls, text: str) -> "Tag":
        if not _HEX_TAG_RE.match(text or ""):
            raise InvalidInput(f"invalid tag hex: {text!r}")
        return cls(bytes.fromhex(text[2:]))

    @classmethod
    def parse(cls, text: Union[str, "Tag"]) -> "Tag":
        """Accept a tag, its 0x-hex form, or a label to hash."""
        if isinstance(text, Tag):
            return text
        if not isinstance(text, str):
            raise InvalidInput(f"invalid tag: {text!r}")
        if text.startswith("0x") and len(text) == 2 + 2 * TAG_SIZE:
            return cls.from_hex(text)
        return cls.from_name(text)

    @property
    def hex(self) -> str:
        return "0x" + self.value.hex()

    def is_zero(self) -> bool:
        return self.value == bytes(TAG_SIZE)

    def __str__(self) -> str:
        return self.hex


DEFAULT_ADMIN_ROLE = Tag(bytes(TAG_SIZE))


def normalize_account(account: Any) -> str:
    """Validate an address-like account and return its lower-case form."""
    if not isinstance(account, str) or not _ACCOUNT_RE.match(account.strip()):
        raise InvalidInput(f"invalid account: {account!r}")
    return account.strip().lower()


def parse_item_id(item: Any) -> int:
    """Validate an item id coming from user input."""
    if isinstance(item, bool):
        raise InvalidInput(f"invalid item id: {item!r}")
    if isinstance(item, str):
        item = item.strip()
        if not (item.isascii() and item.isdigit()):
            raise InvalidInput(f"invalid item id: {item!r}")
        item = int(item)
    if not isinstance(item, int) or item < 0:
        raise InvalidInput(f"invalid item id: {item!r}")
    return item
