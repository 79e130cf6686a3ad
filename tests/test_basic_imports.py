"""
Basic import tests to verify the core functionality.
"""


def test_tag_registry_imports():
    """Test that tag_registry modules can be imported."""
    from tag_registry import (
        TagRegistry,
        TagStore,
        RepresentativeItemResolver,
        RoleAuthority,
        RegistryStore,
        InMemoryOwnershipLedger,
        HttpOwnershipOracle,
        setup_logging,
        stop_logging,
    )

    assert callable(setup_logging)
    assert callable(stop_logging)

    registry = TagRegistry(InMemoryOwnershipLedger())
    assert isinstance(registry.tag_store, TagStore)
    assert isinstance(registry.resolver, RepresentativeItemResolver)
    assert isinstance(registry.roles, RoleAuthority)
    assert isinstance(registry.store, RegistryStore)


def test_app_imports():
    """Test that the Flask application factory can be imported."""
    from app.main import create_app, build_registry, build_oracle

    assert callable(create_app)
    assert callable(build_registry)
    assert callable(build_oracle)


def test_logging_setup_and_stop():
    """Logging can be configured repeatedly and stopped."""
    import logging
    from tag_registry.logging_config import setup_logging, stop_logging

    try:
        setup_logging(debug=False)
        setup_logging(debug=True)
        assert logging.getLogger().level == logging.DEBUG
    finally:
        stop_logging()
        logging.getLogger().handlers.clear()
        logging.getLogger().setLevel(logging.WARNING)
