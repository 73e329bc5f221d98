# Copyright 2025 msq
from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional

import structlog

from disaster_console.errors import ConsoleApiError
from disaster_console.external.api_client import ConsoleApiClient
from disaster_console.geo import format_coordinates
from disaster_console.models import Disaster
from disaster_console.notify import Notification, Notifier

logger = structlog.get_logger(__name__)

RECENT_ACTIVITY_LIMIT = 3


def time_ago(moment: Optional[datetime], *, now: Optional[datetime] = None) -> str:
    if moment is None:
        return "Unknown"
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    current = now or datetime.now(timezone.utc)
    minutes = int((current - moment).total_seconds() // 60)
    if minutes < 1:
        return "Just now"
    if minutes < 60:
        return f"{minutes} min ago"
    hours = minutes // 60
    if hours < 24:
        return f"{hours} hours ago"
    return f"{hours // 24} days ago"


@dataclass(frozen=True, slots=True)
class MapMarker:
    id: str
    type: str
    latitude: float
    longitude: float
    radius_km: float
    severity: str
    active: bool


@dataclass(frozen=True, slots=True)
class RecentActivity:
    id: str
    type: str
    title: str
    location: str
    time: str
    severity: str


@dataclass(frozen=True, slots=True)
class MapStats:
    total_disasters: int = 0
    active_disasters: int = 0
    total_volunteers: int = 0
    active_sos: int = 0


@dataclass(frozen=True, slots=True)
class MapData:
    markers: List[MapMarker] = field(default_factory=list)
    recent_activity: List[RecentActivity] = field(default_factory=list)
    stats: MapStats = field(default_factory=MapStats)


def _marker(disaster: Disaster) -> MapMarker:
    return MapMarker(
        id=disaster.id,
        type=disaster.type,
        latitude=disaster.location.latitude,
        longitude=disaster.location.longitude,
        radius_km=disaster.radius,
        severity=disaster.map_severity,
        active=disaster.active,
    )


def _activity(disaster: Disaster, now: Optional[datetime]) -> RecentActivity:
    return RecentActivity(
        id=disaster.id,
        type="danger-zone" if disaster.active else "resolved",
        title=f"{disaster.type} Alert Active" if disaster.active else f"{disaster.type} Resolved",
        location=format_coordinates(disaster.location.latitude, disaster.location.longitude),
        time=time_ago(disaster.created_at, now=now),
        severity=disaster.map_severity,
    )


class MapService:
    """地图视图：灾害列表与仪表盘统计并发拉取，两者都完成后再组装。"""

    def __init__(self, client: ConsoleApiClient, notifier: Notifier) -> None:
        self._client = client
        self._notifier = notifier
        self.data: MapData = MapData()

    async def fetch(self, *, now: Optional[datetime] = None) -> MapData:
        tasks = [
            asyncio.ensure_future(self._client.list_disasters()),
            asyncio.ensure_future(self._client.get_dashboard_stats()),
        ]
        try:
            disasters, dashboard = await asyncio.gather(*tasks)
        except ConsoleApiError as exc:
            # 一路失败时取消另一路并等待其结束，之后才能安全关闭客户端
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            logger.warning("map_fetch_failed", error=str(exc))
            self._notifier.notify(
                Notification("Error Loading Map Data", str(exc) or "Failed to load map data", "destructive")
            )
            self.data = MapData()
            return self.data

        statistics = dashboard.statistics or {}
        stats = MapStats(
            total_disasters=len(disasters),
            active_disasters=sum(1 for d in disasters if d.active),
            total_volunteers=int(statistics.get("totalVolunteers") or 0),
            active_sos=dashboard.metrics.active_sos,
        )
        self.data = MapData(
            markers=[_marker(d) for d in disasters],
            recent_activity=[_activity(d, now) for d in disasters[:RECENT_ACTIVITY_LIMIT]],
            stats=stats,
        )
        logger.info("map_data_loaded", markers=len(self.data.markers), active=stats.active_disasters)
        return self.data
