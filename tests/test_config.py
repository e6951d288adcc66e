"""Tests for settings loading and validation."""

import pytest

from cloudrepo_slack.config import DEFAULT_PORT, Settings, read_value
from cloudrepo_slack.errors import ConfigurationError

KEYS = ("MODE", "SLACK_URL", "PORT", "PROJECT_ID", "SUBSCRIPTION", "LOG_LEVEL", "CONFIG_DIR")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for key in KEYS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("CONFIG_DIR", str(tmp_path / "missing"))


def test_defaults():
    settings = Settings.load()

    assert settings.mode == "pull"
    assert settings.slack_url == ""
    assert settings.port == DEFAULT_PORT == 8080
    assert settings.log_level == "INFO"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("MODE", "PUSH")
    monkeypatch.setenv("SLACK_URL", "https://hooks.slack.test/x")
    monkeypatch.setenv("PORT", "9090")

    settings = Settings.load()

    assert settings.mode == "push"
    assert settings.slack_url == "https://hooks.slack.test/x"
    assert settings.port == 9090


def test_config_dir_files(tmp_path):
    (tmp_path / "mode").write_text("pull\n")
    (tmp_path / "project_id").write_text("  p1  ")
    (tmp_path / "subscription").write_text("sub-1\n")

    settings = Settings.load(config_dir=str(tmp_path)).validate()

    assert settings.project_id == "p1"
    assert settings.subscription == "sub-1"


def test_env_wins_over_config_dir(monkeypatch, tmp_path):
    (tmp_path / "slack_url").write_text("https://from-file")
    monkeypatch.setenv("SLACK_URL", "https://from-env")

    assert read_value("slack_url", config_dir=str(tmp_path)) == "https://from-env"


def test_invalid_port(monkeypatch):
    monkeypatch.setenv("PORT", "eighty")

    with pytest.raises(ConfigurationError):
        Settings.load()


@pytest.mark.parametrize(
    "settings",
    [
        Settings(mode="carrier-pigeon"),
        Settings(mode="pull"),
        Settings(mode="pull", project_id="p1"),
        Settings(mode="push", port=0),
        Settings(mode="push", log_level="CHATTY"),
    ],
)
def test_validate_rejects(settings):
    with pytest.raises(ConfigurationError):
        settings.validate()


def test_validate_accepts_push_without_queue_settings():
    settings = Settings(mode="push")
    assert settings.validate() is settings
