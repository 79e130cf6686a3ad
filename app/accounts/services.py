"""
Caller identification for registry endpoints.
"""
from typing import Optional

from flask import request

from tag_registry.errors import InvalidInput
from tag_registry.models import normalize_account

CALLER_HEADER = "X-Account"
CALLER_COOKIE = "account"


class CallerService:
    """Resolves the calling account of the current request."""

    def get_current_account(self) -> Optional[str]:
        """Get the caller from the X-Account header or the account cookie."""
        account = request.headers.get(CALLER_HEADER) or request.cookies.get(CALLER_COOKIE)
        if not account or not account.strip():
            return None
        return account.strip()

    def require_caller_json(self) -> tuple[Optional[str], Optional[dict]]:
        """Require a caller for JSON endpoints, return error if missing or malformed."""
        account = self.get_current_account()
        if not account:
            return None, {"error": "no-account", "message": f"Missing {CALLER_HEADER} header"}
        try:
            return normalize_account(account), None
        except InvalidInput as exc:
            return None, exc.to_dict()
