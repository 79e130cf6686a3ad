"""
Request models for account endpoints.
"""
from pydantic import BaseModel, Field


class DefaultItemRequest(BaseModel):
    """Payload for overriding an account's representative item."""
    item: int = Field(ge=0, description="Item id to use as the representative item")
