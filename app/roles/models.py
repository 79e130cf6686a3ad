"""
Request models for role endpoints.
"""
from pydantic import BaseModel, Field


class RoleMemberRequest(BaseModel):
    """Payload naming the account a role is granted to or removed from."""
    account: str = Field(description="Target account")


class RoleAdminRequest(BaseModel):
    """Payload for reassigning a role's admin role."""
    admin_role: str = Field(description="New admin role, as 0x-hex or label")
