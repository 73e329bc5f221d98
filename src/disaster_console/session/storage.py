# Copyright 2025 msq
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

import structlog

from disaster_console.models import AdminProfile

logger = structlog.get_logger(__name__)

TOKEN_KEY = "adminToken"
ADMIN_KEY = "admin"


class TokenStorage:
    """会话令牌的持久化存储（JSON 文件），对应浏览器 localStorage。"""

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _read(self) -> Dict[str, Any]:
        try:
            raw = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        try:
            data = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("session_storage_corrupted", path=str(self._path))
            return {}
        return data if isinstance(data, dict) else {}

    def load_token(self) -> Optional[str]:
        token = self._read().get(TOKEN_KEY)
        return str(token) if token else None

    def load_admin(self) -> Optional[AdminProfile]:
        raw = self._read().get(ADMIN_KEY)
        if not isinstance(raw, dict):
            return None
        try:
            return AdminProfile.model_validate(raw)
        except ValueError:
            logger.warning("session_storage_admin_invalid", path=str(self._path))
            return None

    def save(self, token: str, admin: Optional[AdminProfile] = None) -> None:
        payload: Dict[str, Any] = {TOKEN_KEY: token}
        if admin is not None:
            payload[ADMIN_KEY] = admin.model_dump()
        self._path.parent.mkdir(parents=True, exist_ok=True)
        # 先写临时文件再替换，避免写一半的会话文件
        tmp_path = self._path.with_suffix(self._path.suffix + ".tmp")
        tmp_path.write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")
        os.chmod(tmp_path, 0o600)
        os.replace(tmp_path, self._path)

    def clear(self) -> None:
        try:
            self._path.unlink()
        except FileNotFoundError:
            return
