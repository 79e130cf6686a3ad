"""
Factory for creating the tagging module.
"""
from tag_registry import TagRegistry
from ..accounts.services import CallerService
from .routes import create_tagging_routes


def create_tagging_module(registry: TagRegistry, caller_service: CallerService) -> dict:
    """Create tagging module with routes.

    Args:
        registry: Tag registry serving the requests
        caller_service: Resolves the calling account

    Returns:
        Dictionary containing the service and blueprint
    """
    blueprint = create_tagging_routes(registry, caller_service)

    return {
        "service": registry,
        "blueprint": blueprint
    }
