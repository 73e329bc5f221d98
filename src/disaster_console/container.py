# Copyright 2025 msq
from __future__ import annotations

from typing import Any, Optional

import httpx
import structlog

from disaster_console.config import ConsoleConfig
from disaster_console.external.api_client import ConsoleApiClient
from disaster_console.notify import LogNotifier, Notifier
from disaster_console.services import (
    CatalogService,
    DashboardService,
    DisasterService,
    MapService,
    SystemService,
)
from disaster_console.session import SessionStore, TokenStorage

logger = structlog.get_logger(__name__)


class ServiceContainer:
    """简单的服务容器，集中完成客户端、会话与各服务的装配。"""

    def __init__(self, config: ConsoleConfig) -> None:
        self._config = config
        self._services: dict[str, Any] = {}

    @classmethod
    def build(
        cls,
        config: ConsoleConfig,
        *,
        notifier: Optional[Notifier] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> "ServiceContainer":
        container = cls(config)
        client = ConsoleApiClient(
            config.api_base_url,
            timeout=config.request_timeout_seconds,
            connect_timeout=config.connect_timeout_seconds,
            http_client=http_client,
        )
        session = SessionStore(client, TokenStorage(config.session_file))
        session.restore()
        notifier = notifier or LogNotifier()

        container.register("api_client", client)
        container.register("session", session)
        container.register("notifier", notifier)
        container.register(
            "dashboard",
            DashboardService(client, notifier, use_fallback=config.use_fallback_data),
        )
        container.register("disasters", DisasterService(client, notifier))
        container.register("map", MapService(client, notifier))
        container.register("system", SystemService(client, session, notifier))
        container.register("catalog", CatalogService())
        return container

    def register(self, name: str, service: Any) -> None:
        self._services[name] = service
        logger.debug("service_registered", name=name)

    def get(self, name: str) -> Any:
        if name not in self._services:
            raise KeyError(f"Service not found: {name}")
        return self._services[name]

    @property
    def config(self) -> ConsoleConfig:
        return self._config

    @property
    def api_client(self) -> ConsoleApiClient:
        return self.get("api_client")

    @property
    def session(self) -> SessionStore:
        return self.get("session")

    @property
    def notifier(self) -> Notifier:
        return self.get("notifier")

    @property
    def dashboard(self) -> DashboardService:
        return self.get("dashboard")

    @property
    def disasters(self) -> DisasterService:
        return self.get("disasters")

    @property
    def map(self) -> MapService:
        return self.get("map")

    @property
    def system(self) -> SystemService:
        return self.get("system")

    @property
    def catalog(self) -> CatalogService:
        return self.get("catalog")

    async def aclose(self) -> None:
        await self.api_client.aclose()
