"""
Tests for configuration loading and persistence.
"""

import json
import logging
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from shellbridge.config import Config, TO_BASH, TO_POWERSHELL


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in Config.ENV_OVERRIDES:
        monkeypatch.delenv(name, raising=False)


def test_defaults(tmp_path):
    config = Config(config_dir=str(tmp_path))
    assert config.direction() == TO_POWERSHELL
    assert config.get("reverse_respect_quotes") is False
    assert config.log_level() == logging.WARNING
    assert config.history_size() == 1000
    assert config.history_file == tmp_path / "history.txt"
    # nothing is written until a value is set
    assert not config.config_file.exists()


def test_set_persists(tmp_path):
    config = Config(config_dir=str(tmp_path))
    config.set("direction", TO_BASH)

    reloaded = Config(config_dir=str(tmp_path))
    assert reloaded.direction() == TO_BASH
    assert json.loads(config.config_file.read_text())["direction"] == TO_BASH


def test_file_merged_with_defaults(tmp_path):
    (tmp_path / "config.json").write_text(json.dumps({"color": False}))
    config = Config(config_dir=str(tmp_path))
    assert config.get("color") is False
    assert config.direction() == TO_POWERSHELL


def test_corrupted_file_uses_defaults(tmp_path, caplog):
    (tmp_path / "config.json").write_text("{not json")
    with caplog.at_level(logging.WARNING):
        config = Config(config_dir=str(tmp_path))
    assert config.settings == Config.DEFAULT_CONFIG
    assert "corrupted" in caplog.text


def test_env_overrides_not_saved(tmp_path, monkeypatch):
    monkeypatch.setenv("SHELLBRIDGE_DIRECTION", TO_BASH)
    monkeypatch.setenv("SHELLBRIDGE_COLOR", "no")
    config = Config(config_dir=str(tmp_path))
    assert config.direction() == TO_BASH
    assert config.get("color") is False

    config.set("log_level", "DEBUG")
    saved = json.loads(config.config_file.read_text())
    assert "direction" not in saved
    assert saved["log_level"] == "DEBUG"
    assert config.log_level() == logging.DEBUG


def test_unknown_direction_rejected(tmp_path):
    config = Config(config_dir=str(tmp_path))
    config.settings["direction"] = "to-fish"
    with pytest.raises(ValueError):
        config.direction()


def test_bad_log_level_falls_back(tmp_path):
    config = Config(config_dir=str(tmp_path))
    config.settings["log_level"] = "chatty"
    assert config.log_level() == logging.WARNING


def test_history_size_validated(tmp_path):
    config = Config(config_dir=str(tmp_path))
    config.settings["history_size"] = "50"
    assert config.history_size() == 50
    config.settings["history_size"] = 0
    with pytest.raises(ValueError):
        config.history_size()
    config.settings["history_size"] = "lots"
    with pytest.raises(ValueError):
        config.history_size()
