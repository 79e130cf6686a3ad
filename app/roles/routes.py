"""
Role administration routes.
"""
from flask import Blueprint, request, jsonify

from tag_registry import Tag, TagRegistry
from ..accounts.services import CallerService
from ..api_errors import register_error_handlers
from .models import RoleAdminRequest, RoleMemberRequest


def create_role_routes(registry: TagRegistry, caller_service: CallerService) -> Blueprint:
    """Create role administration routes."""
    bp = Blueprint('roles', __name__)
    register_error_handlers(bp)

    @bp.route("/roles/<role>/admin", methods=["GET"])
    def get_role_admin(role):
        return jsonify({"role": Tag.parse(role).hex, "admin_role": registry.get_role_admin(role).hex})

    @bp.route("/roles/<role>/admin", methods=["POST"])
    def set_role_admin(role):
        """Delegate administration of a role. Requires the role's current admin role."""
        caller, error = caller_service.require_caller_json()
        if error:
            return jsonify(error), 401

        payload = RoleAdminRequest.model_validate(request.get_json(silent=True) or {})
        changed = registry.set_role_admin(caller, role, payload.admin_role)
        return jsonify({"status": "ok", "changed": changed, "role": Tag.parse(role).hex, "admin_role": registry.get_role_admin(role).hex})

    @bp.route("/roles/<role>/members/<account>", methods=["GET"])
    def has_role(role, account):
        return jsonify({"has_role": registry.has_role(role, account)})

    @bp.route("/roles/<role>/<action>", methods=["POST"])
    def change_membership(role, action):
        """Grant, revoke or renounce a role."""
        handlers = {
            "grant": registry.grant_role,
            "revoke": registry.revoke_role,
            "renounce": registry.renounce_role,
        }
        handler = handlers.get(action)
        if handler is None:
            return jsonify({"error": "not_found", "message": f"Unknown role action: {action}"}), 404

        caller, error = caller_service.require_caller_json()
        if error:
            return jsonify(error), 401

        payload = RoleMemberRequest.model_validate(request.get_json(silent=True) or {})
        changed = handler(caller, role, payload.account)
        return jsonify({"status": "ok", "changed": changed})

    return bp
