# Copyright 2025 msq
from __future__ import annotations

from typing import Optional

import structlog

from disaster_console import sample_data
from disaster_console.errors import ConsoleApiError
from disaster_console.external.api_client import ConsoleApiClient
from disaster_console.models import DashboardData
from disaster_console.notify import Notification, Notifier

logger = structlog.get_logger(__name__)


class DashboardService:
    """仪表盘概览；接口失败时提示并回退到静态示例数据。"""

    def __init__(self, client: ConsoleApiClient, notifier: Notifier, *, use_fallback: bool = True) -> None:
        self._client = client
        self._notifier = notifier
        self._use_fallback = use_fallback
        self.data: Optional[DashboardData] = None

    async def fetch(self) -> Optional[DashboardData]:
        try:
            data = await self._client.get_dashboard_stats()
        except ConsoleApiError as exc:
            logger.warning("dashboard_fetch_failed", error=str(exc), fallback=self._use_fallback)
            self._notifier.notify(
                Notification("Error Loading Dashboard", str(exc) or "Failed to load dashboard data", "destructive")
            )
            data = sample_data.fallback_dashboard() if self._use_fallback else None
        self.data = data
        return data
