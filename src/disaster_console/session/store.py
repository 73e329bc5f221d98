# Copyright 2025 msq
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import structlog

from disaster_console.errors import (
    AuthenticationError,
    ConsoleApiError,
    NetworkError,
    ServerError,
)
from disaster_console.external.api_client import ConsoleApiClient
from disaster_console.models import AdminProfile
from disaster_console.session.storage import TokenStorage

logger = structlog.get_logger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Invalid email or password"


@dataclass(frozen=True, slots=True)
class LoginResult:
    success: bool
    message: Optional[str] = None


class SessionStore:
    """管理员会话：内存中的令牌与资料，同步到 TokenStorage。

    不做令牌刷新或过期检查，失效令牌只会在后续请求返回 401 时暴露。
    """

    def __init__(self, client: ConsoleApiClient, storage: TokenStorage) -> None:
        self._client = client
        self._storage = storage
        self._token: Optional[str] = None
        self._admin: Optional[AdminProfile] = None
        client.set_token_provider(lambda: self._token)

    @property
    def token(self) -> Optional[str]:
        return self._token

    @property
    def admin(self) -> Optional[AdminProfile]:
        return self._admin

    @property
    def is_authenticated(self) -> bool:
        return self._token is not None

    def restore(self) -> bool:
        """启动时读取已保存的令牌，不向后端校验。"""
        token = self._storage.load_token()
        if token is None:
            return False
        self._token = token
        self._admin = self._storage.load_admin()
        logger.info("session_restored", admin=self._admin.email if self._admin else None)
        return True

    async def login(self, email: str, password: str) -> LoginResult:
        """登录；失败时返回带说明的结果而不是抛异常，且不会保存任何令牌。"""
        logger.info("session_login_attempt", email=email, url=self._client.base_url)
        try:
            data = await self._client.login(email, password)
        except AuthenticationError:
            logger.warning("session_login_failed", email=email, reason="invalid_credentials")
            return LoginResult(False, INVALID_CREDENTIALS_MESSAGE)
        except ServerError as exc:
            logger.warning("session_login_failed", email=email, status_code=exc.status_code)
            return LoginResult(False, f"Server error ({exc.status_code}): {exc.reason or exc}")
        except NetworkError:
            logger.warning("session_login_failed", email=email, reason="network")
            return LoginResult(
                False,
                "Unable to connect to server. "
                f"Please check if the backend is running on {self._client.base_url}",
            )
        except ConsoleApiError as exc:
            logger.warning("session_login_failed", email=email, error=str(exc))
            return LoginResult(False, f"Network error: {exc}")

        token = data.get("token")
        if not data.get("success") or not token:
            message = str(data.get("message") or "Login failed")
            logger.warning("session_login_rejected", email=email, message=message)
            return LoginResult(False, message)

        admin = self._admin_from_response(data.get("admin"), email)
        try:
            self._storage.save(str(token), admin)
        except OSError as exc:
            logger.error("session_persist_failed", path=str(self._storage.path), error=str(exc))
            return LoginResult(False, f"Unable to save session: {exc}")

        self._token = str(token)
        self._admin = admin
        logger.info("session_login_succeeded", admin_id=admin.id, email=admin.email)
        return LoginResult(True)

    def logout(self) -> None:
        """清空内存与持久化令牌，不调用后端。"""
        self._token = None
        self._admin = None
        self._storage.clear()
        logger.info("session_logged_out")

    @staticmethod
    def _admin_from_response(raw: object, email: str) -> AdminProfile:
        if isinstance(raw, dict):
            try:
                return AdminProfile.model_validate(raw)
            except ValueError:
                logger.warning("session_admin_profile_invalid", raw=raw)
        return AdminProfile(id="admin-id", name="Admin User", email=email)
