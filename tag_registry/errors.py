"""
Error taxonomy for the tag registry.

Every error is a synchronous precondition failure on the current state. The
operation that raised it has made no change; callers should re-check state
before retrying.
"""

from typing import Any, Dict, Optional


class TagRegistryError(Exception):
    """Base class for all registry errors."""

    code = "registry_error"
    http_status = 400

    def __init__(self, message: str = "", **details: Any):
        super().__init__(message or self.code)
        self.message = message or self.code
        self.details = details

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON responses."""
        payload: Dict[str, Any] = {"error": self.code, "message": self.message}
        if self.details:
            payload["details"] = self.details
        return payload


class AlreadyTagged(TagRegistryError):
    code = "already_tagged"
    http_status = 409


class NotTagged(TagRegistryError):
    code = "not_tagged"
    http_status = 409


class TokenNotBurned(TagRegistryError):
    code = "token_not_burned"
    http_status = 409


class Unauthorized(TagRegistryError):
    """Caller lacks the role required for the operation."""

    code = "unauthorized"
    http_status = 403

    def __init__(self, account: Optional[str] = None, role: Optional[str] = None, message: str = ""):
        super().__init__(
            message or f"account {account} is missing role {role}",
            account=account,
            role=role,
        )


class ItemNotFound(TagRegistryError):
    """The ownership ledger reports that the item does not exist."""

    code = "item_not_found"
    http_status = 404

    def __init__(self, item: int, message: str = ""):
        super().__init__(message or f"item {item} does not exist", item=item)
        self.item = item


class InvalidInput(TagRegistryError, ValueError):
    code = "invalid_input"
    http_status = 400


class OracleUnavailable(TagRegistryError):
    """The ownership ledger could not be queried."""

    code = "oracle_unavailable"
    http_status = 502
