"""
Event Log Routes

Flask routes for reading registry notifications.
"""

from flask import Blueprint, request, jsonify

from tag_registry import EventType, TagRegistry
from ..api_errors import register_error_handlers


def create_events_blueprint(registry: TagRegistry) -> Blueprint:
    """Create a Flask blueprint for event log routes.
    
    Args:
        registry: Tag registry whose events are served
        
    Returns:
        Flask blueprint with event log routes
    """
    bp = Blueprint('events', __name__)
    register_error_handlers(bp)
    
    @bp.route("/events", methods=["GET"])
    def get_events():
        """Get registry events, optionally filtered by type and limited to the most recent."""
        event_type = request.args.get("type") or None
        if event_type and not EventType.is_valid(event_type):
            return jsonify({
                "error": "invalid_input",
                "message": f"Unknown event type: {event_type}",
                "allowed": sorted(EventType.get_allowed_types())
            }), 400
        
        limit = request.args.get("limit", type=int)
        events = registry.list_events(event_type=event_type, limit=limit)
        return jsonify({
            "events": [e.model_dump(mode="json") for e in events],
            "count": len(events)
        })
    
    return bp
