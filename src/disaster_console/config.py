# Copyright 2025 msq
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from urllib.parse import urlsplit, urlunsplit

import structlog

_logger = structlog.get_logger(__name__)
DEFAULT_API_BASE_URL = "http://localhost:4000"
DEFAULT_SESSION_FILE = "~/.disaster_console/session.json"

try:
    # 说明：按 CONSOLE_ENV 选择环境文件；默认回退到 console.env
    from dotenv import load_dotenv

    base_dir: str = os.path.dirname(os.path.dirname(os.path.dirname(__file__)))
    config_dir: str = os.path.join(base_dir, "config")

    env_name: str = (os.getenv("CONSOLE_ENV") or "").strip().lower()
    if env_name and env_name != "dev":
        env_file: str = os.path.join(config_dir, f"console.{env_name}.env")
    else:
        env_file = os.path.join(config_dir, "console.env")

    # 已存在的环境变量优先，不覆盖
    load_dotenv(env_file, override=False)
    _logger.debug("dotenv_env_selected", console_env=env_name or "(default:dev)", file=env_file)

    # 开发者本地覆盖层（可选，不存在时忽略）
    load_dotenv(os.path.join(config_dir, "console.local.env"), override=False)
except Exception as exc:
    _logger.warning("dotenv_load_skipped", error=str(exc))


def normalize_base_url(url: str | None) -> str:
    if url is None or not url.strip():
        return DEFAULT_API_BASE_URL
    trimmed: str = url.strip().rstrip("/")
    if "://" not in trimmed:
        trimmed = f"http://{trimmed}"
    parsed = urlsplit(trimmed)
    return urlunsplit((parsed.scheme, parsed.netloc, parsed.path.rstrip("/"), "", ""))


def _parse_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        _logger.warning("config_float_parse_failed", key=name, raw=raw, default=default)
        return default
    if value <= 0:
        _logger.warning("config_float_not_positive", key=name, raw=raw, default=default)
        return default
    return value


def _parse_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


@dataclass(frozen=True)
class ConsoleConfig:
    api_base_url: str
    request_timeout_seconds: float
    connect_timeout_seconds: float
    session_file: Path
    use_fallback_data: bool
    log_json: bool
    log_level: str

    @staticmethod
    def load_from_env() -> "ConsoleConfig":
        raw_url = os.getenv("DISASTER_API_URL")
        if raw_url is None:
            _logger.info("using_default_api_url", url=DEFAULT_API_BASE_URL)
        session_file = Path(os.getenv("CONSOLE_SESSION_FILE", DEFAULT_SESSION_FILE)).expanduser()
        return ConsoleConfig(
            api_base_url=normalize_base_url(raw_url),
            request_timeout_seconds=_parse_float("DISASTER_API_TIMEOUT", 10.0),
            connect_timeout_seconds=_parse_float("DISASTER_API_CONNECT_TIMEOUT", 3.0),
            session_file=session_file,
            use_fallback_data=_parse_bool("CONSOLE_USE_FALLBACK_DATA", True),
            log_json=_parse_bool("CONSOLE_LOG_JSON", False),
            log_level=(os.getenv("CONSOLE_LOG_LEVEL") or "WARNING").strip().upper(),
        )
