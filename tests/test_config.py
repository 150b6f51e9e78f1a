"""
Tests for configuration loading.
"""

import pytest
import structlog
from pydantic import ValidationError

from shunt_calc.config import Settings, configure_logging, load_settings, load_yaml_config
from shunt_calc.models import EvaluationMode


class TestSettings:
    """Test settings sources and priority."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("SHUNT_MODE", raising=False)
        monkeypatch.delenv("SHUNT_SINGLE_OPERAND_SHORTCUT", raising=False)
        settings = Settings(_env_file=None)
        assert settings.mode == EvaluationMode.LEGACY
        assert settings.single_operand_shortcut is True

    def test_environment(self, monkeypatch):
        monkeypatch.setenv("SHUNT_MODE", "standard")
        monkeypatch.setenv("SHUNT_SINGLE_OPERAND_SHORTCUT", "false")
        settings = Settings(_env_file=None)
        assert settings.mode == EvaluationMode.STANDARD
        assert settings.single_operand_shortcut is False

    def test_missing_yaml_file(self, tmp_path):
        assert load_yaml_config(tmp_path / "missing.yaml") == {}

    def test_empty_yaml_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_yaml_config(path) == {}

    def test_yaml_file(self, tmp_path):
        path = tmp_path / "shunt.yaml"
        path.write_text("mode: standard\nsingle_operand_shortcut: false\n")
        settings = load_settings(path)
        assert settings.mode == EvaluationMode.STANDARD
        assert settings.single_operand_shortcut is False

    def test_overrides_beat_yaml(self, tmp_path):
        path = tmp_path / "shunt.yaml"
        path.write_text("mode: standard\n")
        settings = load_settings(path, mode=EvaluationMode.LEGACY, single_operand_shortcut=None)
        assert settings.mode == EvaluationMode.LEGACY

    def test_log_level_is_normalized(self):
        assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_level="loud")

    def test_list_yaml_rejected(self, tmp_path):
        path = tmp_path / "shunt.yaml"
        path.write_text("- standard\n")
        with pytest.raises(ValueError, match="must contain a mapping"):
            load_settings(path)

    def test_scalar_yaml_rejected(self, tmp_path):
        path = tmp_path / "shunt.yaml"
        path.write_text("standard\n")
        with pytest.raises(ValueError, match="must contain a mapping"):
            load_yaml_config(path)


class TestConfigureLogging:
    """Test structlog wiring."""

    def test_unknown_level_rejected(self):
        with pytest.raises(ValueError, match="Unknown log level"):
            configure_logging("loud")

    def test_warnings_reach_current_stderr(self, capsys):
        configure_logging("warning")
        structlog.get_logger().warning("Sample event", position=3)
        assert "Sample event" in capsys.readouterr().err

    def test_debug_filtered_at_warning(self, capsys):
        configure_logging("WARNING")
        structlog.get_logger().debug("Hidden event")
        assert "Hidden event" not in capsys.readouterr().err
