from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

import httpx
import pytest

ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, os.fspath(ROOT / "src"))

from disaster_console.external.api_client import ConsoleApiClient  # noqa: E402
from disaster_console.logging import configure_logging  # noqa: E402
from disaster_console.notify import RecordingNotifier  # noqa: E402
from disaster_console.session import SessionStore, TokenStorage  # noqa: E402

BACKEND_URL = "http://backend.test"


# ============================================================================
# 模拟后端
# ============================================================================


class FakeBackend:
    """按 (method, path) 注册响应，每次请求都构造新的 httpx.Response。"""

    def __init__(self) -> None:
        self._routes: Dict[Tuple[str, str], Callable[[httpx.Request], httpx.Response]] = {}
        self.requests: List[httpx.Request] = []

    def add(
        self,
        method: str,
        path: str,
        *,
        status: int = 200,
        json: Any = None,
        text: Optional[str] = None,
        error: Optional[str] = None,
    ) -> None:
        def respond(request: httpx.Request) -> httpx.Response:
            if error is not None:
                raise httpx.ConnectError(error, request=request)
            if text is not None:
                return httpx.Response(status, text=text)
            return httpx.Response(status, json=json)

        self._routes[(method, path)] = respond

    def add_handler(self, method: str, path: str, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self._routes[(method, path)] = handler

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self._routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={"message": f"no route for {request.method} {request.url.path}"})
        return route(request)

    def calls(self, method: str, path: str) -> List[httpx.Request]:
        return [r for r in self.requests if r.method == method and r.url.path == path]

    def http_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handle), base_url=BACKEND_URL)


@pytest.fixture(autouse=True)
def reset_logging() -> None:
    """CLI 用例会把日志重定向到 capsys 的流，每个用例开始前恢复默认配置。"""
    configure_logging(json_logs=False, log_level="WARNING")


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """会话文件写到临时目录，避免污染用户目录。"""
    session_file = tmp_path / "session" / "session.json"
    monkeypatch.setenv("CONSOLE_SESSION_FILE", os.fspath(session_file))
    monkeypatch.setenv("DISASTER_API_URL", BACKEND_URL)
    return session_file


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def api_client(backend: FakeBackend) -> ConsoleApiClient:
    return ConsoleApiClient(BACKEND_URL, http_client=backend.http_client())


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def token_storage(isolated_env: Path) -> TokenStorage:
    return TokenStorage(isolated_env)


@pytest.fixture
def session(api_client: ConsoleApiClient, token_storage: TokenStorage) -> SessionStore:
    return SessionStore(api_client, token_storage)


@pytest.fixture
def logged_in_session(session: SessionStore, token_storage: TokenStorage) -> SessionStore:
    token_storage.save("stored-token")
    assert session.restore()
    return session


@pytest.fixture
def make_disaster() -> Callable[..., Dict[str, Any]]:
    """构造后端格式（camelCase、_id）的灾害记录。"""

    def build(
        disaster_id: str,
        disaster_type: str = "Flood",
        *,
        lat: float = 28.6139,
        lng: float = 77.209,
        radius: float = 5.0,
        active: bool = True,
        description: str = "",
        created_at: Optional[str] = "2025-01-01T00:00:00Z",
    ) -> Dict[str, Any]:
        record: Dict[str, Any] = {
            "_id": disaster_id,
            "type": disaster_type,
            "description": description or f"{disaster_type} reported",
            "location": {"type": "Point", "coordinates": [lng, lat]},
            "radius": radius,
            "resources": {"food": 10, "medikits": 5, "water": 20, "blankets": 8},
            "active": active,
        }
        if created_at is not None:
            record["createdAt"] = created_at
        return record

    return build
