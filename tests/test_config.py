from __future__ import annotations

import pytest
from pydantic import ValidationError

from core.config import AppSettings, get_user_config_dir


def test_defaults():
    settings = AppSettings(_env_file=None)
    assert settings.keyword == "mle"
    assert settings.script_name == "mle.py"
    assert settings.http_timeout_seconds == 20.0
    assert settings.user_agent.startswith("mle-cli/")


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("MLE_KEYWORD", "mod")
    monkeypatch.setenv("MLE_HTTP_TIMEOUT_SECONDS", "5")
    settings = AppSettings(_env_file=None)
    assert settings.keyword == "mod"
    assert settings.http_timeout_seconds == 5.0


def test_env_file(tmp_path):
    env = tmp_path / ".env"
    env.write_text("MLE_LOG_LEVEL=debug\n", encoding="utf-8")
    assert AppSettings(_env_file=env).log_level == "debug"


def test_rejects_invalid_values():
    with pytest.raises(ValidationError):
        AppSettings(_env_file=None, http_timeout_seconds=0)
    with pytest.raises(ValidationError):
        AppSettings(_env_file=None, keyword="two words")


def test_user_config_dir_honours_xdg(monkeypatch, tmp_path):
    monkeypatch.setattr("sys.platform", "linux")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    assert get_user_config_dir() == tmp_path / "mle-cli"


def test_load_settings_resolves_user_env_file_at_call_time(monkeypatch, tmp_path):
    from core.config import load_settings

    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("sys.platform", "linux")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "cfg"))
    assert load_settings().prompt == "SQL> "

    (tmp_path / "cfg" / "mle-cli").mkdir(parents=True)
    (tmp_path / "cfg" / "mle-cli" / ".env").write_text("MLE_PROMPT=\"mle> \"\n", encoding="utf-8")
    assert load_settings().prompt == "mle> "
    assert AppSettings().prompt == "SQL> "
