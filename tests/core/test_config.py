from __future__ import annotations

from pathlib import Path

import pytest

from disaster_console.config import ConsoleConfig


def test_load_from_env_reads_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("DISASTER_API_URL", "api.example.org:4000/")
    monkeypatch.setenv("DISASTER_API_TIMEOUT", "2.5")
    monkeypatch.setenv("DISASTER_API_CONNECT_TIMEOUT", "not-a-number")
    monkeypatch.setenv("CONSOLE_SESSION_FILE", str(tmp_path / "s.json"))
    monkeypatch.setenv("CONSOLE_USE_FALLBACK_DATA", "off")
    monkeypatch.setenv("CONSOLE_LOG_JSON", "yes")
    monkeypatch.setenv("CONSOLE_LOG_LEVEL", "debug")

    config = ConsoleConfig.load_from_env()

    assert config.api_base_url == "http://api.example.org:4000"
    assert config.request_timeout_seconds == 2.5
    assert config.connect_timeout_seconds == 3.0
    assert config.session_file == tmp_path / "s.json"
    assert config.use_fallback_data is False
    assert config.log_json is True
    assert config.log_level == "DEBUG"


def test_load_from_env_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "DISASTER_API_URL",
        "DISASTER_API_TIMEOUT",
        "DISASTER_API_CONNECT_TIMEOUT",
        "CONSOLE_SESSION_FILE",
        "CONSOLE_USE_FALLBACK_DATA",
        "CONSOLE_LOG_JSON",
        "CONSOLE_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)

    config = ConsoleConfig.load_from_env()

    assert config.api_base_url == "http://localhost:4000"
    assert config.request_timeout_seconds == 10.0
    assert config.session_file == Path("~/.disaster_console/session.json").expanduser()
    assert config.use_fallback_data is True
    assert config.log_level == "WARNING"


def test_negative_timeout_falls_back_to_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DISASTER_API_TIMEOUT", "-1")
    assert ConsoleConfig.load_from_env().request_timeout_seconds == 10.0
