"""
Factory for creating the development ledger module.
"""
from tag_registry import InMemoryOwnershipLedger
from .routes import create_dev_ledger_routes


def create_dev_ledger_module(ledger: InMemoryOwnershipLedger) -> dict:
    """Create development ledger module with routes.

    Returns:
        Dictionary containing the ledger and blueprint
    """
    return {
        "service": ledger,
        "blueprint": create_dev_ledger_routes(ledger)
    }
