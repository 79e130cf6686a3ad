"""
Development ledger routes.

Only registered when no external ownership oracle is configured. They drive
the in-memory ledger so the registry can be exercised end to end locally.
"""
from flask import Blueprint, request, jsonify

from tag_registry import InMemoryOwnershipLedger, NotFound, parse_item_id
from ..api_errors import register_error_handlers


def create_dev_ledger_routes(ledger: InMemoryOwnershipLedger) -> Blueprint:
    """Create development ledger routes."""
    bp = Blueprint('dev_ledger', __name__, url_prefix="/dev/ledger")
    register_error_handlers(bp)

    @bp.route("/items/<item>/owner", methods=["GET"])
    def owner_of(item):
        result = ledger.lookup_owner(parse_item_id(item))
        if isinstance(result, NotFound):
            return jsonify({"error": "item_not_found"}), 404
        return jsonify({"owner": result.account})

    @bp.route("/items/<item>/mint", methods=["POST"])
    def mint(item):
        data = request.get_json(silent=True) or {}
        ledger.mint(parse_item_id(item), data.get("owner"))
        return jsonify({"status": "ok"})

    @bp.route("/items/<item>/transfer", methods=["POST"])
    def transfer(item):
        data = request.get_json(silent=True) or {}
        ledger.transfer(parse_item_id(item), data.get("to"))
        return jsonify({"status": "ok"})

    @bp.route("/items/<item>/burn", methods=["POST"])
    def burn(item):
        ledger.burn(parse_item_id(item))
        return jsonify({"status": "ok"})

    return bp
