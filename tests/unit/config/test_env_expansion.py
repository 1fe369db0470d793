"""Tests for ``$VAR`` expansion in catalogue configuration."""

import os
from unittest.mock import patch

import yaml

from pattern_catalog.config.manager import ConfigurationManager
from pattern_catalog.config.schemas import LogFileConfig
from pattern_catalog.config.utils.env_expansion import expand_config_env_vars, expand_env_vars


class TestExpandEnvVars:
    """Expansion over raw catalogue configuration mappings."""

    def test_default_log_path_expands_home(self):
        with patch.dict(os.environ, {"HOME": "/home/catalog"}):
            result = expand_env_vars(LogFileConfig().path)
        assert result == "/home/catalog/.pattern_catalog/logs/pattern_catalog.log"

    def test_unbraced_reference_in_log_path(self):
        with patch.dict(os.environ, {"CATALOG_LOGS": "/var/log/catalog"}):
            config = {"logging": {"file": {"path": "$CATALOG_LOGS/run.log"}}}
            result = expand_config_env_vars(config)
        assert result["logging"]["file"]["path"] == "/var/log/catalog/run.log"

    def test_unknown_variable_is_left_as_written(self):
        config = {"logging": {"file": {"path": "${CATALOG_UNSET_ROOT}/catalog.log"}}}
        with patch.dict(os.environ):
            os.environ.pop("CATALOG_UNSET_ROOT", None)
            result = expand_config_env_vars(config)
        assert result["logging"]["file"]["path"] == "${CATALOG_UNSET_ROOT}/catalog.log"

    def test_demo_and_narration_values_pass_through(self):
        config = {
            "demos": {"random_seed": None, "forest_size": 500, "gallery_size": 3},
            "narration": {"simulate_latency": True, "latency_scale": 0.5},
        }
        assert expand_config_env_vars(config) == config

    def test_list_values_are_expanded(self):
        with patch.dict(os.environ, {"CATALOG_DEMO": "observer"}):
            result = expand_env_vars({"run": ["$CATALOG_DEMO", "proxy"]})
        assert result == {"run": ["observer", "proxy"]}

    def test_expand_does_not_mutate_input(self):
        with patch.dict(os.environ, {"CATALOG_LOGS": "/var/log/catalog"}):
            config = {"logging": {"file": {"path": "$CATALOG_LOGS/run.log"}}}
            expand_config_env_vars(config)
        assert config == {"logging": {"file": {"path": "$CATALOG_LOGS/run.log"}}}


class TestExpansionThroughConfigurationManager:
    """References in a YAML file resolve before validation."""

    def write_config(self, tmp_path, data):
        path = tmp_path / "catalog.yaml"
        path.write_text(yaml.safe_dump(data), encoding="utf-8")
        return str(path)

    def test_log_file_path_in_yaml(self, tmp_path):
        config_file = self.write_config(tmp_path, {
            "logging": {"destination": "file", "file": {"path": "${CATALOG_HOME}/logs/catalog.log"}},
        })
        with patch.dict(os.environ, {"CATALOG_HOME": "/opt/catalog"}):
            config = ConfigurationManager(config_file).get_app_config()
        assert config.logging.destination == "file"
        assert config.logging.file.path == "/opt/catalog/logs/catalog.log"

    def test_expanded_value_is_validated(self, tmp_path):
        config_file = self.write_config(tmp_path, {"logging": {"level": "$CATALOG_LEVEL"}})
        with patch.dict(os.environ, {"CATALOG_LEVEL": "debug"}):
            config = ConfigurationManager(config_file).get_app_config()
        assert config.logging.level == "DEBUG"

    def test_demo_settings_untouched_by_expansion(self, tmp_path):
        config_file = self.write_config(tmp_path, {"demos": {"forest_size": 250, "random_seed": 7}})
        config = ConfigurationManager(config_file).get_app_config()
        assert config.demos.forest_size == 250
        assert config.demos.random_seed == 7
