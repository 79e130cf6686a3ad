"""
Factory for creating the accounts module.
"""
from tag_registry import TagRegistry
from .routes import create_account_routes
from .services import CallerService


def create_accounts_module(registry: TagRegistry) -> dict:
    """Create accounts module with caller service and routes.

    Args:
        registry: Tag registry serving the requests

    Returns:
        Dictionary containing the service and blueprint
    """
    caller_service = CallerService()
    blueprint = create_account_routes(registry, caller_service)

    return {
        "service": caller_service,
        "blueprint": blueprint
    }
