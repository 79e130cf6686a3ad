"""
Data models for the tag registry.
"""

from .identifiers import (
    DEFAULT_ADMIN_ROLE,
    TAG_SIZE,
    ZERO_ACCOUNT,
    Tag,
    normalize_account,
    parse_item_id,
)
from .state import EventRecord, RegistryState, RoleData, TagData

__all__ = [
    "DEFAULT_ADMIN_ROLE",
    "TAG_SIZE",
    "ZERO_ACCOUNT",
    "Tag",
    "normalize_account",
    "parse_item_id",
    "EventRecord",
    "RegistryState",
    "RoleData",
    "TagData",
]
