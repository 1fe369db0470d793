"""End-to-end CLI tests running the real catalogue."""
import json
import os
import shutil
import tempfile

import pytest
import yaml

from pattern_catalog.cli.main import main


class TestCLIIntegration:
    """Test complete CLI scenarios through ``main``."""

    @pytest.fixture(autouse=True)
    def quiet_logging(self, monkeypatch):
        monkeypatch.setenv("PATTERN_CATALOG_LOG_DESTINATION", "none")

    def setup_method(self):
        """Set up test fixtures."""
        self.temp_dir = tempfile.mkdtemp()
        self.config_path = os.path.join(self.temp_dir, "catalog.json")

    def teardown_method(self):
        """Clean up test fixtures."""
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def create_config_file(self, config_data):
        """Create a temporary configuration file."""
        with open(self.config_path, "w") as f:
            json.dump(config_data, f, indent=2)
        return self.config_path

    def test_list_json(self, capsys):
        main(["list", "--format", "json"])
        data = json.loads(capsys.readouterr().out)
        assert len(data["demos"]) == 22
        assert data["demos"][0]["name"] == "chain-of-responsibility"

    def test_list_category_yaml(self, capsys):
        main(["list", "--category", "creational", "--format", "yaml"])
        data = yaml.safe_load(capsys.readouterr().out)
        assert [demo["name"] for demo in data["demos"]] == [
            "abstract-factory", "builder", "factory-method", "prototype", "singleton",
        ]

    def test_list_table(self, capsys):
        main(["list"])
        out = capsys.readouterr().out
        assert "template-method" in out
        assert "Flyweight" in out

    def test_show(self, capsys):
        main(["show", "Template_Method"])
        out = capsys.readouterr().out
        assert "Demo: template-method" in out
        assert "Category: behavioral" in out

    def test_run_narrates_to_stdout(self, capsys):
        main(["run", "strategy"])
        captured = capsys.readouterr()
        assert "Please select a payment method!" in captured.out
        assert "Card: **** **** **** 3456" in captured.out
        assert captured.err == ""

    def test_run_several_with_summary(self, capsys):
        main(["run", "decorator", "singleton", "--summary"])
        out = capsys.readouterr().out
        assert "Dark Roast Coffee, Mocha, Mocha, Whip $2.09" in out
        assert "Run Summary" in out
        assert "completed" in out

    def test_run_category(self, capsys):
        main(["--no-color", "run", "--all", "--category", "creational", "--summary"])
        out = capsys.readouterr().out
        assert "Prototype Demo Complete" in out
        assert "Singleton Demo Complete" in out
        assert "Proxy Demo Complete" not in out

    def test_config_file_settings_reach_demos(self, capsys):
        config_path = self.create_config_file({
            "logging": {"destination": "none"},
            "demos": {"forest_size": 12, "random_seed": 3, "gallery_size": 4},
        })
        main(["--config", config_path, "run", "flyweight", "proxy"])
        out = capsys.readouterr().out
        assert "Planting 12 trees..." in out
        assert "Without proxy: ~20 MB loaded up front" in out

    def test_unknown_demo_exits_with_error(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["run", "observer", "singletonn"])
        assert exc_info.value.code == 1
        captured = capsys.readouterr()
        assert "Error: Demo 'singletonn' not found" in captured.err
        assert "Observer Demo Complete" not in captured.out

    def test_invalid_config_exits_with_error(self, capsys):
        config_path = self.create_config_file({"environment": "staging"})
        with pytest.raises(SystemExit) as exc_info:
            main(["--config", config_path, "list"])
        assert exc_info.value.code == 1
        assert "Invalid configuration" in capsys.readouterr().err

    def test_no_action(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 1
        assert "No action specified" in capsys.readouterr().out

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert "pattern-catalog" in capsys.readouterr().out

    def test_keyboard_interrupt(self, capsys, monkeypatch):
        def interrupt(*args, **kwargs):
            raise KeyboardInterrupt

        monkeypatch.setattr("pattern_catalog.cli.main.execute_command", interrupt)
        with pytest.raises(SystemExit) as exc_info:
            main(["list"])
        assert exc_info.value.code == 130
        assert "Operation cancelled by user." in capsys.readouterr().err
