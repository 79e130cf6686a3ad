"""
Tagging routes: tag queries, role-gated tag mutations and burned item cleanup.
"""
from flask import Blueprint, jsonify

from tag_registry import Tag, TagRegistry
from ..accounts.services import CallerService
from ..api_errors import register_error_handlers


def create_tagging_routes(registry: TagRegistry, caller_service: CallerService) -> Blueprint:
    """Create tagging routes.

    Tags in URLs may be given in 0x-hex form or as a label, which is hashed.
    """
    bp = Blueprint('tagging', __name__)
    register_error_handlers(bp)

    @bp.route("/tags/<tag>", methods=["GET"])
    def describe_tag(tag):
        """Get the canonical id, count and items of a tag."""
        parsed = Tag.parse(tag)
        return jsonify({
            "tag": parsed.hex,
            "total": registry.total_tag_havers(parsed),
            "items": registry.tagged_items(parsed)
        })

    @bp.route("/tags/<tag>/count", methods=["GET"])
    def total_tag_havers(tag):
        """Get the number of items carrying a tag."""
        return jsonify({"tag": Tag.parse(tag).hex, "total": registry.total_tag_havers(tag)})

    @bp.route("/tags/<tag>/accounts/<account>", methods=["GET"])
    def account_has_tag(tag, account):
        """Check whether an account holds a tag through its representative item."""
        return jsonify({"has_tag": registry.has_tag(account, tag)})

    @bp.route("/tags/<tag>/items/<item>", methods=["GET"])
    def item_has_tag(tag, item):
        """Check whether an item carries a tag."""
        return jsonify({"has_tag": registry.item_has_tag(item, tag)})

    @bp.route("/tags/<tag>/items/<item>", methods=["POST"])
    def add_tag(tag, item):
        """Tag an item. Requires the role named by the tag."""
        caller, error = caller_service.require_caller_json()
        if error:
            return jsonify(error), 401

        registry.add_tag(caller, item, tag)
        return jsonify({"status": "ok", "total": registry.total_tag_havers(tag)})

    @bp.route("/tags/<tag>/items/<item>", methods=["DELETE"])
    def remove_tag(tag, item):
        """Untag an item. Requires the role named by the tag."""
        caller, error = caller_service.require_caller_json()
        if error:
            return jsonify(error), 401

        registry.remove_tag(caller, item, tag)
        return jsonify({"status": "ok", "total": registry.total_tag_havers(tag)})

    @bp.route("/tags/<tag>/items/<item>/burned", methods=["POST"])
    def remove_tag_from_burned_token(tag, item):
        """Untag an item that no longer exists. Open to anyone."""
        registry.remove_tag_from_burned_token(item, tag)
        return jsonify({"status": "ok", "total": registry.total_tag_havers(tag)})

    return bp
