import logging
from pathlib import Path
from typing import Optional

from config_manager import ConfigManager

from flask import Flask, jsonify
from werkzeug.middleware.proxy_fix import ProxyFix

from tag_registry import (
    HttpOwnershipOracle,
    InMemoryOwnershipLedger,
    OwnershipOracle,
    RegistryStore,
    TagRegistry,
)

from app.accounts.factory import create_accounts_module
from app.tagging.factory import create_tagging_module
from app.roles.factory import create_roles_module
from app.events.factory import create_events_module
from app.dev_ledger.factory import create_dev_ledger_module

logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).parent.parent


# -----------------------------------------------------------------------------
# Registry construction
# -----------------------------------------------------------------------------

def build_oracle(config_manager: ConfigManager) -> OwnershipOracle:
    """Build the ownership oracle; an empty URL selects the in-memory ledger."""
    oracle_config = config_manager.get_oracle_config()
    if oracle_config.url:
        logger.info(f"Using ownership oracle at {oracle_config.url}")
        return HttpOwnershipOracle(oracle_config.url, timeout=oracle_config.timeout)

    logger.warning("No ownership oracle configured, using in-memory ledger")
    return InMemoryOwnershipLedger()


def build_registry(config_manager: ConfigManager, oracle: Optional[OwnershipOracle] = None) -> TagRegistry:
    """Build the tag registry from configuration."""
    paths_config = config_manager.get_paths_config()
    registry_config = config_manager.get_registry_config()

    data_dir = Path(paths_config.data_dir)
    if not data_dir.is_absolute():
        data_dir = BASE_DIR / data_dir
    data_dir.mkdir(parents=True, exist_ok=True)

    return TagRegistry(
        oracle=oracle or build_oracle(config_manager),
        store=RegistryStore(data_dir / paths_config.state_file),
        root_admins=registry_config.root_admin_accounts,
        auto_default_item=registry_config.auto_default_item,
    )


# -----------------------------------------------------------------------------
# Application
# -----------------------------------------------------------------------------

def create_app(
    config_manager: Optional[ConfigManager] = None,
    registry: Optional[TagRegistry] = None,
) -> Flask:
    """Create the Flask application and register all blueprints."""
    config_manager = config_manager or ConfigManager()
    registry = registry or build_registry(config_manager)

    app = Flask(__name__)
    app.wsgi_app = ProxyFix(
        app.wsgi_app,
        x_proto=1,   # trust 1 hop for X-Forwarded-Proto
        x_host=1,    # trust 1 hop for X-Forwarded-Host
        x_prefix=1)  # trust 1 hop for X-Forwarded-Prefix
    app.config["TAG_REGISTRY"] = registry

    accounts_module = create_accounts_module(registry)
    caller_service = accounts_module["service"]
    tagging_module = create_tagging_module(registry, caller_service)
    roles_module = create_roles_module(registry, caller_service)
    events_module = create_events_module(registry)

    app.register_blueprint(accounts_module["blueprint"])
    app.register_blueprint(tagging_module["blueprint"])
    app.register_blueprint(roles_module["blueprint"])
    app.register_blueprint(events_module["blueprint"])

    if isinstance(registry.oracle, InMemoryOwnershipLedger):
        dev_ledger_module = create_dev_ledger_module(registry.oracle)
        app.register_blueprint(dev_ledger_module["blueprint"])

    @app.route("/health", methods=["GET"])
    def health():
        return jsonify({"status": "ok", **registry.summary()})

    return app
