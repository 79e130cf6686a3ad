#!/usr/bin/env python3
"""
Runner script for the Tag Registry Flask application.
"""

import logging

from config_manager import ConfigManager
from tag_registry.logging_config import setup_logging, stop_logging
from app.main import create_app

logger = logging.getLogger(__name__)


def main():
    config_manager = ConfigManager()
    app_config = config_manager.get_app_config()

    setup_logging(debug=app_config.debug)
    try:
        app = create_app(config_manager)
        logger.info(f"Starting tag registry on {app_config.host}:{app_config.port}")
        app.run(
            host=app_config.host,
            port=app_config.port,
            debug=app_config.debug,
            use_reloader=False
        )
    finally:
        stop_logging()


if __name__ == "__main__":
    main()
