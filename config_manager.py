"""
Configuration management for the Tag Registry service.
Handles loading, validating, and providing access to application settings.
"""

import os
import json
from pathlib import Path
from typing import Dict, Any, Optional
from dataclasses import dataclass


@dataclass
class AppConfig:
    """Application configuration settings."""
    host: str
    port: int
    debug: bool


@dataclass
class RegistryConfig:
    """Tag registry behaviour settings."""
    root_admin_accounts: list[str]
    auto_default_item: bool


@dataclass
class OracleConfig:
    """Ownership oracle settings. An empty URL selects the in-memory ledger."""
    url: str
    timeout: float


@dataclass
class PathsConfig:
    """Path configuration settings."""
    data_dir: str
    state_file: str
    backup_dir: str


class ConfigManager:
    """Manages application configuration loading and access."""

    def __init__(self, config_file: str = "registry_config.json"):
        self.config_file = Path(config_file)
        self._config: Optional[Dict[str, Any]] = None
        self._load_config()

    def _load_config(self) -> None:
        """Load configuration from file and environment variables."""
        # Start with default config
        self._config = self._get_default_config()

        # Load base config from file
        if self.config_file.exists():
            try:
                with open(self.config_file, 'r', encoding='utf-8') as f:
                    file_config = json.load(f)
                    # Merge file config with defaults
                    self._merge_config(file_config)
            except (json.JSONDecodeError, FileNotFoundError):
                # Keep default config if file is invalid or not found
                pass

        # Override with environment variables
        self._override_with_env()

    def _get_default_config(self) -> Dict[str, Any]:
        """Get default configuration."""
        return {
            "app": {
                "host": "0.0.0.0",
                "port": 22582,
                "debug": False
            },
            "registry": {
                "root_admin_accounts": [],
                "auto_default_item": True
            },
            "oracle": {
                "url": "",
                "timeout": 10.0
            },
            "paths": {
                "data_dir": "data",
                "state_file": "registry_state.json",
                "backup_dir": "backups"
            }
        }

    def _merge_config(self, file_config: Dict[str, Any]) -> None:
        """Merge file configuration with current config."""
        for section, values in file_config.items():
            if section in self._config:
                if isinstance(values, dict):
                    self._config[section].update(values)
                else:
                    self._config[section] = values
            else:
                self._config[section] = values

    def _override_with_env(self) -> None:
        """Override configuration with environment variables."""
        # App settings
        if os.getenv("APP_HOST"):
            self._config["app"]["host"] = os.getenv("APP_HOST")

        if os.getenv("APP_PORT"):
            self._config["app"]["port"] = int(os.getenv("APP_PORT"))

        if os.getenv("APP_DEBUG"):
            self._config["app"]["debug"] = os.getenv("APP_DEBUG").lower() == "true"

        # Registry settings
        if os.getenv("ROOT_ADMIN_ACCOUNTS"):
            self._config["registry"]["root_admin_accounts"] = [
                account.strip() for account in os.getenv("ROOT_ADMIN_ACCOUNTS").split(",") if account.strip()
            ]

        if os.getenv("AUTO_DEFAULT_ITEM"):
            self._config["registry"]["auto_default_item"] = os.getenv("AUTO_DEFAULT_ITEM").lower() == "true"

        # Oracle settings
        if os.getenv("OWNERSHIP_ORACLE_URL"):
            self._config["oracle"]["url"] = os.getenv("OWNERSHIP_ORACLE_URL")

        if os.getenv("OWNERSHIP_ORACLE_TIMEOUT"):
            self._config["oracle"]["timeout"] = float(os.getenv("OWNERSHIP_ORACLE_TIMEOUT"))

        # Path settings
        if os.getenv("REGISTRY_DATA_DIR"):
            self._config["paths"]["data_dir"] = os.getenv("REGISTRY_DATA_DIR")

    def get_app_config(self) -> AppConfig:
        """Get application configuration."""
        app_config = self._config["app"]
        return AppConfig(
            host=app_config["host"],
            port=app_config["port"],
            debug=app_config["debug"]
        )

    def get_registry_config(self) -> RegistryConfig:
        """Get tag registry configuration."""
        registry_config = self._config["registry"]
        return RegistryConfig(
            root_admin_accounts=list(registry_config["root_admin_accounts"]),
            auto_default_item=registry_config["auto_default_item"]
        )

    def get_oracle_config(self) -> OracleConfig:
        """Get ownership oracle configuration."""
        oracle_config = self._config["oracle"]
        return OracleConfig(
            url=oracle_config["url"],
            timeout=float(oracle_config["timeout"])
        )

    def get_paths_config(self) -> PathsConfig:
        """Get paths configuration."""
        paths_config = self._config["paths"]
        return PathsConfig(
            data_dir=paths_config["data_dir"],
            state_file=paths_config["state_file"],
            backup_dir=paths_config["backup_dir"]
        )

    def get_config(self) -> Dict[str, Any]:
        """Get raw configuration dictionary."""
        return self._config.copy()

    def reload(self) -> None:
        """Reload configuration from file."""
        self._load_config()

    def save_config(self) -> None:
        """Save current configuration to file."""
        with open(self.config_file, 'w', encoding='utf-8') as f:
            json.dump(self._config, f, indent=2, ensure_ascii=False)

