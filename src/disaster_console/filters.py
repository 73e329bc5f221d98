# Copyright 2025 msq
"""
管理页面通用的筛选/统计逻辑

每个管理视图都遵循同一模式：
    filtered(C) = { r ∈ C | 匹配搜索 ∧ 匹配分类 ∧ 匹配标签页 }

- 搜索：对固定字段做大小写不敏感的子串匹配，空串不过滤
- 分类 / 标签页：与记录字段做等值比较，哨兵值 "all" 跳过该条件
- 统计：始终基于未筛选的完整集合计算，与当前筛选条件无关
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generic, Iterable, List, Mapping, Optional, Sequence, Tuple, TypeVar

from disaster_console.models import (
    Allocation,
    CompensationClaim,
    DangerZone,
    Disaster,
    Resource,
    RouteFeedback,
    SafeRoute,
    SOSRequest,
    VictimRegistration,
    Volunteer,
)

ALL = "all"

T = TypeVar("T")


def _field_value(record: Any, name: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


@dataclass(frozen=True)
class FilterSpec(Generic[T]):
    """单个视图的筛选规则。"""

    search_fields: Tuple[str, ...]
    category_field: Optional[str] = None
    category_case_insensitive: bool = False
    tab_field: Optional[str] = None
    tab_predicates: Mapping[str, Callable[[T], bool]] = field(default_factory=dict)
    # 原样子串匹配（不转小写）的字段，例如电话号码
    raw_search_fields: Tuple[str, ...] = ()

    def matches_search(self, record: T, query: str) -> bool:
        if query == "":
            return True
        needle = query.lower()
        for name in self.search_fields:
            value = _field_value(record, name)
            if value is not None and needle in str(value).lower():
                return True
        for name in self.raw_search_fields:
            value = _field_value(record, name)
            if value is not None and query in str(value):
                return True
        return False

    def matches_category(self, record: T, category: str) -> bool:
        if category == ALL or self.category_field is None:
            return True
        value = _field_value(record, self.category_field)
        if value is None:
            return False
        if self.category_case_insensitive:
            return str(value).lower() == category.lower()
        return value == category

    def matches_tab(self, record: T, tab: str) -> bool:
        if tab == ALL:
            return True
        predicate = self.tab_predicates.get(tab)
        if predicate is not None:
            return predicate(record)
        if self.tab_field is None:
            raise ValueError(f"unknown tab: {tab}")
        return _field_value(record, self.tab_field) == tab


def apply_filters(
    records: Iterable[T],
    spec: FilterSpec[T],
    *,
    search: str = "",
    category: str = ALL,
    tab: str = ALL,
) -> List[T]:
    """返回满足全部条件的记录，保持原有顺序。"""
    return [
        record
        for record in records
        if spec.matches_search(record, search)
        and spec.matches_category(record, category)
        and spec.matches_tab(record, tab)
    ]


def count_where(records: Iterable[T], predicate: Callable[[T], bool]) -> int:
    return sum(1 for record in records if predicate(record))


def count_by(records: Iterable[T], field_name: str) -> Dict[str, int]:
    counts: Dict[str, int] = {}
    for record in records:
        key = str(_field_value(record, field_name))
        counts[key] = counts.get(key, 0) + 1
    return counts


# ========== 各视图筛选规则 ==========

DISASTER_FILTER: FilterSpec[Disaster] = FilterSpec(
    search_fields=("type", "description"),
    category_field="type",
    category_case_insensitive=True,
    tab_predicates={
        "active": lambda disaster: disaster.active,
        "inactive": lambda disaster: not disaster.active,
    },
)

VOLUNTEER_FILTER: FilterSpec[Volunteer] = FilterSpec(
    search_fields=("name", "specialization", "location"),
    tab_field="status",
)

SOS_FILTER: FilterSpec[SOSRequest] = FilterSpec(
    search_fields=("name", "location", "id"),
    tab_field="status",
)

RESOURCE_FILTER: FilterSpec[Resource] = FilterSpec(
    search_fields=("name", "location"),
    category_field="category",
)

ALLOCATION_FILTER: FilterSpec[Allocation] = FilterSpec(
    search_fields=("resource_name", "destination", "requested_by"),
    tab_field="status",
)

DANGER_ZONE_FILTER: FilterSpec[DangerZone] = FilterSpec(
    search_fields=("name", "location"),
    category_field="type",
    tab_field="status",
)

SAFE_ROUTE_FILTER: FilterSpec[SafeRoute] = FilterSpec(
    search_fields=("name", "start_point", "end_point"),
    tab_field="status",
)

ROUTE_FEEDBACK_FILTER: FilterSpec[RouteFeedback] = FilterSpec(
    search_fields=("route_name", "user_name", "location"),
    tab_field="status",
)

VICTIM_FILTER: FilterSpec[VictimRegistration] = FilterSpec(
    search_fields=("name", "address"),
    raw_search_fields=("phone",),
    tab_field="status",
)


# ========== 统计（基于未筛选集合） ==========


@dataclass(frozen=True)
class DisasterStats:
    total: int
    active: int
    inactive: int
    total_radius: float


def disaster_stats(disasters: Sequence[Disaster]) -> DisasterStats:
    active = count_where(disasters, lambda d: d.active)
    return DisasterStats(
        total=len(disasters),
        active=active,
        inactive=len(disasters) - active,
        total_radius=sum(d.radius for d in disasters),
    )


@dataclass(frozen=True)
class VolunteerStats:
    total: int
    available: int
    busy: int
    training: int


def volunteer_stats(volunteers: Sequence[Volunteer]) -> VolunteerStats:
    by_status = count_by(volunteers, "status")
    return VolunteerStats(
        total=len(volunteers),
        available=by_status.get("available", 0),
        busy=by_status.get("busy", 0),
        training=by_status.get("training", 0),
    )


@dataclass(frozen=True)
class SOSStats:
    total: int
    pending: int
    assigned: int
    en_route: int
    resolved: int

    @property
    def open(self) -> int:
        return self.total - self.resolved


def sos_stats(requests: Sequence[SOSRequest]) -> SOSStats:
    by_status = count_by(requests, "status")
    return SOSStats(
        total=len(requests),
        pending=by_status.get("pending", 0),
        assigned=by_status.get("assigned", 0),
        en_route=by_status.get("en-route", 0),
        resolved=by_status.get("resolved", 0),
    )


@dataclass(frozen=True)
class ResourceStats:
    total_resources: int
    critical_stock: int
    active_allocations: int
    total_value: float


def resource_stats(resources: Sequence[Resource], allocations: Sequence[Allocation]) -> ResourceStats:
    return ResourceStats(
        total_resources=len(resources),
        critical_stock=count_where(resources, lambda r: r.available_stock <= r.critical_level),
        active_allocations=count_where(allocations, lambda a: a.status in {"approved", "in-transit"}),
        total_value=sum(r.cost for r in resources),
    )


@dataclass(frozen=True)
class DangerZoneStats:
    total: int
    active: int
    monitoring: int
    critical: int


def danger_zone_stats(zones: Sequence[DangerZone]) -> DangerZoneStats:
    by_status = count_by(zones, "status")
    return DangerZoneStats(
        total=len(zones),
        active=by_status.get("active", 0),
        monitoring=by_status.get("monitoring", 0),
        critical=count_where(zones, lambda z: z.severity == "critical"),
    )


@dataclass(frozen=True)
class SafeRouteStats:
    total_routes: int
    verified_routes: int
    total_feedback: int
    pending_feedback: int


def safe_route_stats(routes: Sequence[SafeRoute], feedback: Sequence[RouteFeedback]) -> SafeRouteStats:
    return SafeRouteStats(
        total_routes=len(routes),
        verified_routes=count_where(routes, lambda r: r.status == "verified"),
        total_feedback=len(feedback),
        pending_feedback=count_where(feedback, lambda f: f.status == "pending"),
    )


@dataclass(frozen=True)
class RecoveryStats:
    total_victims: int
    verified_victims: int
    total_claims: int
    disbursed_amount: float
    pending_reviews: int


def recovery_stats(
    victims: Sequence[VictimRegistration],
    claims: Sequence[CompensationClaim],
) -> RecoveryStats:
    return RecoveryStats(
        total_victims=len(victims),
        verified_victims=count_where(victims, lambda v: v.status == "verified"),
        total_claims=len(claims),
        disbursed_amount=sum(c.claim_amount for c in claims if c.status == "disbursed"),
        pending_reviews=count_where(claims, lambda c: c.status == "under-review"),
    )
