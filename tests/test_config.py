"""Tests for settings and logging configuration."""

import os

from pathfolio.config import Settings
from pathfolio.logging_config import build_logging_config


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("PF_SIMULATION_DAYS", raising=False)
        monkeypatch.delenv("PF_FEE_RATE", raising=False)
        monkeypatch.delenv("PF_SIMULATION_NUM_PATHS", raising=False)
        monkeypatch.delenv("PF_SIMULATION_SEED", raising=False)
        settings = Settings(_env_file=None)
        assert settings.simulation_days == 126
        assert settings.simulation_num_paths == 50
        assert settings.simulation_seed is None
        assert settings.fee_rate == 0.1425

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("PF_FEE_RATE", "0.2")
        monkeypatch.setenv("PF_SIMULATION_SEED", "11")
        settings = Settings(_env_file=None)
        assert settings.fee_rate == 0.2
        assert settings.simulation_seed == 11


class TestLoggingConfig:
    def test_file_handler_under_log_dir(self):
        config = build_logging_config("var/log")
        assert config["handlers"]["file"]["filename"] == os.path.join("var/log", "pathfolio.log")
        assert config["root"]["handlers"] == ["console", "file"]
