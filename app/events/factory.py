"""
Factory for creating the event log module.
"""
from tag_registry import TagRegistry
from .routes import create_events_blueprint


def create_events_module(registry: TagRegistry) -> dict:
    """Create event log module with service and routes.
    
    Args:
        registry: Tag registry whose events are served
    
    Returns:
        Dictionary containing the service and blueprint
    """
    blueprint = create_events_blueprint(registry)
    
    return {
        "service": registry.events,
        "blueprint": blueprint
    }
