# Copyright 2025 msq
from __future__ import annotations

import time
from typing import Any, Callable, Dict, List, Mapping, Optional

import httpx
import structlog
from pydantic import ValidationError as PydanticValidationError

from disaster_console.errors import (
    AuthenticationError,
    NetworkError,
    ResponseFormatError,
    ServerError,
)
from disaster_console.logging import api_latency_metric, api_request_metric
from disaster_console.models import (
    CollectionDeleteResult,
    DashboardData,
    Disaster,
    DisasterDraft,
    DisasterResources,
    ExportBundle,
    ResetResult,
    SystemStats,
)

logger = structlog.get_logger(__name__)

TokenProvider = Callable[[], Optional[str]]

LOGIN_PATH = "/api/admin/login"
DASHBOARD_STATS_PATH = "/api/dashboard/stats"
DISASTERS_PATH = "/api/disasters"
ADMIN_DISASTERS_PATH = "/api/admin/disasters"
ADMIN_DISASTER_RESOURCES_PATH = "/api/admin/disasters/resources"
SYSTEM_STATS_PATH = "/api/danger-zone/stats"
SYSTEM_EXPORT_PATH = "/api/danger-zone/export"
SYSTEM_COLLECTION_PATH = "/api/danger-zone/collection"
SYSTEM_RESET_PATH = "/api/danger-zone/reset"


class ConsoleApiClient:
    """灾害管理后端 REST 客户端（异步）。

    每次请求从 token_provider 读取当前令牌并附加 ``Authorization: Bearer``；
    请求只发一次，不做重试。
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 10.0,
        connect_timeout: float = 3.0,
        token_provider: TokenProvider | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._token_provider = token_provider
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(
            base_url=self._base_url,
            timeout=httpx.Timeout(timeout, connect=connect_timeout),
            trust_env=False,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    def set_token_provider(self, provider: TokenProvider | None) -> None:
        self._token_provider = provider

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    # ========== 会话 ==========

    async def login(self, email: str, password: str) -> Dict[str, Any]:
        data = await self._request(
            "POST",
            LOGIN_PATH,
            json_body={"email": email, "password": password},
            authenticated=False,
        )
        if not isinstance(data, dict):
            raise ResponseFormatError(f"invalid response from {LOGIN_PATH}")
        return data

    # ========== 仪表盘 / 灾害 ==========

    async def get_dashboard_stats(self) -> DashboardData:
        data = await self._request("GET", DASHBOARD_STATS_PATH)
        return self._parse_model(DashboardData, data, DASHBOARD_STATS_PATH)

    async def list_disasters(self) -> List[Disaster]:
        data = await self._request("GET", DISASTERS_PATH)
        if not isinstance(data, list):
            raise ResponseFormatError(f"invalid response from {DISASTERS_PATH}: expected a list")
        return [self._parse_model(Disaster, item, DISASTERS_PATH) for item in data]

    async def create_disaster(self, draft: DisasterDraft) -> Disaster:
        data = await self._request("POST", ADMIN_DISASTERS_PATH, json_body=draft.to_payload())
        return self._parse_model(Disaster, data, ADMIN_DISASTERS_PATH)

    async def delete_disaster(self, disaster_id: str) -> Dict[str, Any]:
        path = f"{DISASTERS_PATH}/{disaster_id}"
        data = await self._request("DELETE", path, endpoint=f"{DISASTERS_PATH}/{{id}}")
        return data if isinstance(data, dict) else {}

    async def update_disaster_resources(self, disaster_id: str, resources: DisasterResources) -> Disaster:
        payload = {"disasterId": disaster_id, "resources": resources.model_dump()}
        data = await self._request("PUT", ADMIN_DISASTER_RESOURCES_PATH, json_body=payload)
        return self._parse_model(Disaster, data, ADMIN_DISASTER_RESOURCES_PATH)

    # ========== 系统危险操作 ==========

    async def get_system_stats(self) -> SystemStats:
        data = self._unwrap_envelope(await self._request("GET", SYSTEM_STATS_PATH), SYSTEM_STATS_PATH)
        return self._parse_model(SystemStats, data.get("stats"), SYSTEM_STATS_PATH)

    async def export_system_data(self) -> ExportBundle:
        data = self._unwrap_envelope(await self._request("GET", SYSTEM_EXPORT_PATH), SYSTEM_EXPORT_PATH)
        return self._parse_model(ExportBundle, data.get("exportData"), SYSTEM_EXPORT_PATH)

    async def delete_collection(self, collection_type: str) -> CollectionDeleteResult:
        path = f"{SYSTEM_COLLECTION_PATH}/{collection_type}"
        raw = await self._request("DELETE", path, endpoint=f"{SYSTEM_COLLECTION_PATH}/{{type}}")
        data = self._unwrap_envelope(raw, path)
        return self._parse_model(CollectionDeleteResult, data, path)

    async def reset_system(self) -> ResetResult:
        data = self._unwrap_envelope(await self._request("DELETE", SYSTEM_RESET_PATH), SYSTEM_RESET_PATH)
        return self._parse_model(ResetResult, data, SYSTEM_RESET_PATH)

    # ========== 内部 ==========

    def _headers(self, authenticated: bool) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if authenticated and self._token_provider is not None:
            token = self._token_provider()
            if token:
                headers["Authorization"] = f"Bearer {token}"
        return headers

    async def _request(
        self,
        method: str,
        path: str,
        *,
        json_body: Mapping[str, Any] | None = None,
        endpoint: str | None = None,
        authenticated: bool = True,
    ) -> Any:
        label = endpoint or path
        full_url = f"{self._base_url}{path}"
        logger.info("console_api_request", method=method, url=full_url)
        started = time.perf_counter()
        try:
            response = await self._client.request(
                method,
                path,
                json=dict(json_body) if json_body is not None else None,
                headers=self._headers(authenticated),
            )
        except httpx.HTTPError as exc:
            api_request_metric.labels(method=method, endpoint=label, outcome="network_error").inc()
            logger.error("console_api_network_failed", method=method, url=full_url, error=str(exc))
            raise NetworkError() from exc
        finally:
            api_latency_metric.labels(method=method, endpoint=label).observe(time.perf_counter() - started)

        logger.info("console_api_response", method=method, url=full_url, status_code=response.status_code)
        if not response.is_success:
            api_request_metric.labels(method=method, endpoint=label, outcome="http_error").inc()
            self._raise_for_status(response, full_url)

        try:
            data = response.json()
        except ValueError as exc:
            api_request_metric.labels(method=method, endpoint=label, outcome="invalid_json").inc()
            logger.error("console_api_invalid_json", url=full_url, body=response.text[:500])
            raise ResponseFormatError(f"invalid response from {path}: not JSON") from exc
        api_request_metric.labels(method=method, endpoint=label, outcome="success").inc()
        return data

    @staticmethod
    def _raise_for_status(response: httpx.Response, full_url: str) -> None:
        status = response.status_code
        reason = response.reason_phrase or ""
        logger.error("console_api_error_status", url=full_url, status_code=status, body=response.text[:500])

        backend_message: str | None = None
        is_json = True
        try:
            payload = response.json()
        except ValueError:
            is_json = False
        else:
            if isinstance(payload, dict) and payload.get("message"):
                backend_message = str(payload["message"])

        if status == 401:
            raise AuthenticationError(backend_message or "Session expired or unauthorized")

        fallback = f"Server error ({status})"
        if backend_message:
            message = backend_message
        elif not is_json and reason:
            message = reason
        else:
            message = fallback
        raise ServerError(message, status_code=status, reason=reason)

    @staticmethod
    def _unwrap_envelope(data: Any, path: str) -> Dict[str, Any]:
        """系统接口统一返回 ``{success, message, ...}``。"""
        if not isinstance(data, dict):
            raise ResponseFormatError(f"invalid response from {path}: expected an object")
        if data.get("success") is False:
            raise ServerError(str(data.get("message") or f"{path} reported failure"), status_code=200)
        return data

    @staticmethod
    def _parse_model(model: Any, data: Any, path: str) -> Any:
        if not isinstance(data, dict):
            raise ResponseFormatError(f"invalid response from {path}: expected an object")
        try:
            return model.model_validate(data)
        except PydanticValidationError as exc:
            logger.error("console_api_invalid_payload", path=path, error=str(exc))
            raise ResponseFormatError(f"invalid response from {path}: {exc.error_count()} field error(s)") from exc
