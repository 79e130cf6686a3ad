"""
Test cases for the configuration management system.
Tests config loading, validation, and access functionality.
"""

import os
import json
from unittest.mock import patch
import pytest

from config_manager import (
    ConfigManager,
    AppConfig,
    RegistryConfig,
    OracleConfig,
    PathsConfig,
)


class TestConfigManager:
    """Test the ConfigManager class functionality."""

    def test_defaults_when_file_missing(self, tmp_path):
        """Test loading configuration when file doesn't exist."""
        with patch.dict(os.environ, {}, clear=True):
            manager = ConfigManager(str(tmp_path / "missing.json"))

        assert manager.get_app_config() == AppConfig(host="0.0.0.0", port=22582, debug=False)
        assert manager.get_registry_config() == RegistryConfig(root_admin_accounts=[], auto_default_item=True)
        assert manager.get_oracle_config() == OracleConfig(url="", timeout=10.0)
        assert manager.get_paths_config() == PathsConfig(
            data_dir="data", state_file="registry_state.json", backup_dir="backups"
        )

    def test_load_config_from_file(self, tmp_path):
        """Test that file values are merged over defaults."""
        config_file = tmp_path / "registry_config.json"
        config_file.write_text(json.dumps({
            "app": {"port": 8080, "debug": True},
            "registry": {"root_admin_accounts": ["0x" + "ad" * 20], "auto_default_item": False},
            "oracle": {"url": "https://ledger.example", "timeout": 2}
        }))

        with patch.dict(os.environ, {}, clear=True):
            manager = ConfigManager(str(config_file))

        app_config = manager.get_app_config()
        assert app_config.host == "0.0.0.0"
        assert app_config.port == 8080
        assert app_config.debug is True

        registry_config = manager.get_registry_config()
        assert registry_config.root_admin_accounts == ["0x" + "ad" * 20]
        assert registry_config.auto_default_item is False

        oracle_config = manager.get_oracle_config()
        assert oracle_config.url == "https://ledger.example"
        assert oracle_config.timeout == 2.0

    def test_invalid_json_keeps_defaults(self, tmp_path):
        config_file = tmp_path / "registry_config.json"
        config_file.write_text("{not json")

        with patch.dict(os.environ, {}, clear=True):
            manager = ConfigManager(str(config_file))

        assert manager.get_app_config().port == 22582

    def test_override_with_env_variables(self, tmp_path):
        """Test that environment variables override config file values."""
        config_file = tmp_path / "registry_config.json"
        config_file.write_text(json.dumps({"app": {"host": "file-host", "port": 1000}}))

        env = {
            "APP_HOST": "env-host",
            "APP_PORT": "8888",
            "APP_DEBUG": "true",
            "ROOT_ADMIN_ACCOUNTS": "0xaa, 0xbb ,",
            "AUTO_DEFAULT_ITEM": "false",
            "OWNERSHIP_ORACLE_URL": "http://ledger:9000",
            "OWNERSHIP_ORACLE_TIMEOUT": "1.5",
            "REGISTRY_DATA_DIR": "/var/lib/registry",
        }
        with patch.dict(os.environ, env, clear=True):
            manager = ConfigManager(str(config_file))

        app_config = manager.get_app_config()
        assert app_config.host == "env-host"
        assert app_config.port == 8888
        assert app_config.debug is True
        assert manager.get_registry_config().root_admin_accounts == ["0xaa", "0xbb"]
        assert manager.get_registry_config().auto_default_item is False
        assert manager.get_oracle_config() == OracleConfig(url="http://ledger:9000", timeout=1.5)
        assert manager.get_paths_config().data_dir == "/var/lib/registry"

    def test_save_and_reload(self, tmp_path):
        config_file = tmp_path / "registry_config.json"

        with patch.dict(os.environ, {}, clear=True):
            manager = ConfigManager(str(config_file))
            manager._config["app"]["port"] = 9999
            manager.save_config()

            assert json.loads(config_file.read_text())["app"]["port"] == 9999

            manager._config["app"]["port"] = 1
            manager.reload()
            assert manager.get_app_config().port == 9999

    def test_get_config_returns_copy(self, tmp_path):
        with patch.dict(os.environ, {}, clear=True):
            manager = ConfigManager(str(tmp_path / "missing.json"))

        config = manager.get_config()
        config["extra"] = True
        assert "extra" not in manager.get_config()

    def test_module_holds_no_global_instance(self):
        """Callers build their own manager; importing the module reads nothing."""
        import config_manager as config_module

        assert not hasattr(config_module, "config_manager")
        assert not hasattr(config_module, "get_app_config")
