"""
Factory for creating the roles module.
"""
from tag_registry import TagRegistry
from ..accounts.services import CallerService
from .routes import create_role_routes


def create_roles_module(registry: TagRegistry, caller_service: CallerService) -> dict:
    """Create roles module with routes.

    Args:
        registry: Tag registry owning the role authority
        caller_service: Resolves the calling account

    Returns:
        Dictionary containing the service and blueprint
    """
    blueprint = create_role_routes(registry, caller_service)

    return {
        "service": registry.roles,
        "blueprint": blueprint
    }
