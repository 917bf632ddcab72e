"""Tests for SimLab settings and logging setup."""

import logging

import pytest
from pydantic import ValidationError

from simlab import settings as settings_module
from simlab.labnotes import store as store_module
from simlab.settings import SimLabSettings, get_settings, reload_settings
from simlab.scenario.scorer import GovernanceWeights
from simlab.utils import setup_logging


class TestSimLabSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("SIMLAB_DEFAULT_REPORT_SCENARIO", raising=False)
        s = SimLabSettings()
        assert s.lab_notes_key == "simulation-lab-notes"
        assert s.default_report_scenario == "moderate"
        assert s.dataset_path.name == "simulation.json"

    def test_lab_notes_key_shared_with_store(self, monkeypatch):
        monkeypatch.delenv("SIMLAB_LAB_NOTES_KEY", raising=False)
        assert SimLabSettings().lab_notes_key == store_module.LAB_NOTES_KEY

    def test_governance_weights(self):
        s = SimLabSettings()
        assert s.governance == GovernanceWeights(trust_threshold=0.65, gap_margin=0.1, gap_penalty=2.5)

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("SIMLAB_GOVERNANCE_GAP_PENALTY", "4.0")
        monkeypatch.setenv("SIMLAB_LAB_NOTES_KEY", "other-notes")
        s = SimLabSettings()
        assert s.governance.gap_penalty == 4.0
        assert s.lab_notes_key == "other-notes"

    def test_threshold_must_be_positive(self):
        with pytest.raises(ValidationError):
            SimLabSettings(governance_trust_threshold=0)

    def test_from_yaml(self, tmp_path):
        path = tmp_path / "simlab.yaml"
        path.write_text(
            "default_report_scenario: bau\ngovernance_trust_threshold: 0.5\n",
            encoding="utf-8",
        )
        s = SimLabSettings.from_yaml(path)
        assert s.default_report_scenario == "bau"
        assert s.governance.trust_threshold == 0.5

    def test_from_missing_yaml_uses_defaults(self, tmp_path):
        s = SimLabSettings.from_yaml(tmp_path / "absent.yaml")
        assert s.lab_notes_key == "simulation-lab-notes"

    def test_empty_yaml(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert SimLabSettings.from_yaml(path).governance_gap_margin == 0.1


class TestSettingsSingleton:
    def test_get_settings_cached(self, monkeypatch):
        monkeypatch.setattr(settings_module, "_settings", None)
        assert get_settings() is get_settings()

    def test_reload(self, tmp_path, monkeypatch):
        monkeypatch.setattr(settings_module, "_settings", None)
        path = tmp_path / "simlab.yaml"
        path.write_text("log_level: WARNING\n", encoding="utf-8")
        first = get_settings()
        reloaded = reload_settings(path)
        assert reloaded is not first
        assert reloaded.log_level == "WARNING"
        assert get_settings() is reloaded


class TestSetupLogging:
    def test_file_handler_creates_directory(self, tmp_path):
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        root.handlers = []
        log_file = tmp_path / "logs" / "simlab.log"
        try:
            setup_logging("DEBUG", str(log_file))
            logging.getLogger("simlab.test").debug("hello")
            for handler in root.handlers:
                handler.flush()
                handler.close()
        finally:
            root.handlers = saved_handlers
            root.setLevel(saved_level)
        assert "simlab.test - DEBUG - hello" in log_file.read_text(encoding="utf-8")
