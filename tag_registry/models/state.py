"""
Persisted registry state.

This module contains the Pydantic models that make up the durable registry
document: tag membership, representative items, roles and the event log.
"""

from typing import Any, Dict, List, Optional, Set

from pydantic import BaseModel, Field


class TagData(BaseModel):
    """Membership of a single tag."""
    tagged_count: int = Field(default=0, ge=0, description="Number of items carrying the tag")
    items: Set[int] = Field(default_factory=set, description="Ids of the items carrying the tag")


class RoleData(BaseModel):
    """Members and administering role of a single role."""
    admin_role: Optional[str] = Field(default=None, description="Hex id of the admin role; None means the default admin role")
    members: Set[str] = Field(default_factory=set, description="Accounts holding the role")


class EventRecord(BaseModel):
    """A single append-only notification."""
    seq: int = Field(description="Monotonic sequence number, starting at 1")
    ts: str = Field(description="Emission time (ISO format)")
    type: str = Field(description="Event type name")
    payload: Dict[str, Any] = Field(default_factory=dict, description="Event specific fields")


class RegistryState(BaseModel):
    """Complete registry document matching the saved JSON format."""
    version: int = Field(default=1, description="Document format version")
    tags: Dict[str, TagData] = Field(default_factory=dict, description="Tag hex -> membership")
    default_items: Dict[str, int] = Field(default_factory=dict, description="Account -> representative item id")
    roles: Dict[str, RoleData] = Field(default_factory=dict, description="Role hex -> role data")
    events: List[EventRecord] = Field(default_factory=list, description="Append-only notifications")
