# Copyright 2025 msq
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Generic, List, TypeVar

from disaster_console import sample_data
from disaster_console.filters import (
    ALL,
    ALLOCATION_FILTER,
    DANGER_ZONE_FILTER,
    RESOURCE_FILTER,
    ROUTE_FEEDBACK_FILTER,
    SAFE_ROUTE_FILTER,
    SOS_FILTER,
    VICTIM_FILTER,
    VOLUNTEER_FILTER,
    DangerZoneStats,
    RecoveryStats,
    ResourceStats,
    SafeRouteStats,
    SOSStats,
    VolunteerStats,
    apply_filters,
    danger_zone_stats,
    recovery_stats,
    resource_stats,
    safe_route_stats,
    sos_stats,
    volunteer_stats,
)
from disaster_console.models import (
    Allocation,
    CompensationClaim,
    DamageReport,
    DangerZone,
    Resource,
    RouteFeedback,
    SafeRoute,
    SOSRequest,
    VictimRegistration,
    Volunteer,
)

R = TypeVar("R")
S = TypeVar("S")


@dataclass(frozen=True, slots=True)
class CatalogView(Generic[R, S]):
    """筛选后的记录 + 基于完整集合的统计。"""

    records: List[R]
    stats: S


@dataclass(frozen=True, slots=True)
class ResourceCatalogView:
    resources: List[Resource]
    allocations: List[Allocation]
    stats: ResourceStats


@dataclass(frozen=True, slots=True)
class SafeRouteCatalogView:
    routes: List[SafeRoute]
    feedback: List[RouteFeedback]
    stats: SafeRouteStats


@dataclass(frozen=True, slots=True)
class RecoveryCatalogView:
    victims: List[VictimRegistration]
    damage_reports: List[DamageReport]
    claims: List[CompensationClaim]
    stats: RecoveryStats


class CatalogService:
    """尚无后端接口的管理视图，数据来自静态示例集合。"""

    def __init__(self) -> None:
        self.volunteers: List[Volunteer] = sample_data.volunteers()
        self.sos_requests: List[SOSRequest] = sample_data.sos_requests()
        self.resources: List[Resource] = sample_data.resources()
        self.allocations: List[Allocation] = sample_data.allocations()
        self.danger_zones: List[DangerZone] = sample_data.danger_zones()
        self.safe_routes: List[SafeRoute] = sample_data.safe_routes()
        self.route_feedback: List[RouteFeedback] = sample_data.route_feedback()
        self.victims: List[VictimRegistration] = sample_data.victims()
        self.damage_reports: List[DamageReport] = sample_data.damage_reports()
        self.claims: List[CompensationClaim] = sample_data.claims()

    def volunteer_view(self, *, search: str = "", status: str = ALL) -> CatalogView[Volunteer, VolunteerStats]:
        return CatalogView(
            records=apply_filters(self.volunteers, VOLUNTEER_FILTER, search=search, tab=status),
            stats=volunteer_stats(self.volunteers),
        )

    def sos_view(self, *, search: str = "", status: str = ALL) -> CatalogView[SOSRequest, SOSStats]:
        return CatalogView(
            records=apply_filters(self.sos_requests, SOS_FILTER, search=search, tab=status),
            stats=sos_stats(self.sos_requests),
        )

    def resource_view(
        self,
        *,
        search: str = "",
        category: str = ALL,
        allocation_status: str = ALL,
    ) -> ResourceCatalogView:
        return ResourceCatalogView(
            resources=apply_filters(self.resources, RESOURCE_FILTER, search=search, category=category),
            allocations=apply_filters(self.allocations, ALLOCATION_FILTER, search=search, tab=allocation_status),
            stats=resource_stats(self.resources, self.allocations),
        )

    def danger_zone_view(
        self,
        *,
        search: str = "",
        zone_type: str = ALL,
        status: str = ALL,
    ) -> CatalogView[DangerZone, DangerZoneStats]:
        return CatalogView(
            records=apply_filters(
                self.danger_zones,
                DANGER_ZONE_FILTER,
                search=search,
                category=zone_type,
                tab=status,
            ),
            stats=danger_zone_stats(self.danger_zones),
        )

    def safe_route_view(self, *, search: str = "", status: str = ALL) -> SafeRouteCatalogView:
        # 反馈列表只按搜索词过滤，状态筛选只作用于路线
        return SafeRouteCatalogView(
            routes=apply_filters(self.safe_routes, SAFE_ROUTE_FILTER, search=search, tab=status),
            feedback=apply_filters(self.route_feedback, ROUTE_FEEDBACK_FILTER, search=search),
            stats=safe_route_stats(self.safe_routes, self.route_feedback),
        )

    def recovery_view(self, *, search: str = "", status: str = ALL) -> RecoveryCatalogView:
        return RecoveryCatalogView(
            victims=apply_filters(self.victims, VICTIM_FILTER, search=search, tab=status),
            damage_reports=list(self.damage_reports),
            claims=list(self.claims),
            stats=recovery_stats(self.victims, self.claims),
        )


def stats_as_dict(stats: Any) -> dict[str, Any]:
    """把统计 dataclass 转为普通字典，附带只读属性（如 SOSStats.open）。"""
    data = asdict(stats)
    if isinstance(stats, SOSStats):
        data["open"] = stats.open
    return data
