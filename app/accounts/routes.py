"""
Account routes: representative (default) item lookup and override.
"""
from flask import Blueprint, request, jsonify

from tag_registry import TagRegistry
from tag_registry.models import normalize_account
from ..api_errors import register_error_handlers
from .models import DefaultItemRequest
from .services import CallerService


def create_account_routes(registry: TagRegistry, caller_service: CallerService) -> Blueprint:
    """Create account routes."""
    bp = Blueprint('accounts', __name__)
    register_error_handlers(bp)

    @bp.route("/accounts/<account>/default-item", methods=["GET"])
    def get_default_item(account):
        """Get the stored representative item of an account."""
        account = normalize_account(account)
        return jsonify({"account": account, "item": registry.default_item(account)})

    @bp.route("/accounts/<account>/default-item", methods=["POST"])
    def set_default_item(account):
        """Override the caller's own representative item."""
        caller, error = caller_service.require_caller_json()
        if error:
            return jsonify(error), 401

        payload = DefaultItemRequest.model_validate(request.get_json(silent=True) or {})
        registry.set_default(caller, account, payload.item)
        return jsonify({"status": "ok", "account": normalize_account(account), "item": payload.item})

    return bp
