# Copyright 2025 msq
from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Literal, Optional, Tuple

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from disaster_console.geo import (
    MapSeverity,
    SeverityLevel,
    map_severity_from_radius,
    severity_from_radius,
    validate_coordinates,
)

VolunteerStatus = Literal["available", "busy", "training", "offline"]
SOSStatus = Literal["pending", "assigned", "en-route", "resolved"]
StockLevel = Literal["critical", "low", "medium", "good"]
CollectionType = Literal["disasters", "users", "volunteers", "locations"]

COLLECTION_TYPES: Tuple[str, ...] = ("disasters", "users", "volunteers", "locations")


class ConsoleModel(BaseModel):
    """后端字段为 camelCase，Python 侧统一使用 snake_case。"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class GeoPoint(ConsoleModel):
    """GeoJSON Point，coordinates 顺序为 [lon, lat]。"""

    type: Literal["Point"] = "Point"
    coordinates: Tuple[float, float]

    @property
    def longitude(self) -> float:
        return self.coordinates[0]

    @property
    def latitude(self) -> float:
        return self.coordinates[1]

    @classmethod
    def from_lat_lng(cls, lat: float, lng: float) -> "GeoPoint":
        lat, lng = validate_coordinates(lat, lng)
        return cls(coordinates=(lng, lat))


class DisasterResources(ConsoleModel):
    food: int = 0
    medikits: int = 0
    water: int = 0
    blankets: int = 0

    def total(self) -> int:
        return self.food + self.medikits + self.water + self.blankets


class Disaster(ConsoleModel):
    id: str = Field(validation_alias=AliasChoices("_id", "id"))
    type: str
    description: str = ""
    location: GeoPoint
    radius: float = Field(..., description="影响半径（公里）")
    resources: DisasterResources = Field(default_factory=DisasterResources)
    active: bool = True
    created_at: Optional[datetime] = None

    @property
    def severity(self) -> SeverityLevel:
        return severity_from_radius(self.radius)

    @property
    def map_severity(self) -> MapSeverity:
        return map_severity_from_radius(self.radius, active=self.active)


class DisasterDraft(ConsoleModel):
    """创建灾害的表单数据，location 未选定时为 None。"""

    type: str = ""
    description: str = ""
    location: Optional[GeoPoint] = None
    radius: float = 5.0
    resources: DisasterResources = Field(default_factory=DisasterResources)

    def to_payload(self) -> Dict[str, Any]:
        if self.location is None:
            raise ValueError("location is required")
        return {
            "type": self.type,
            "description": self.description,
            "location": {"type": "Point", "coordinates": list(self.location.coordinates)},
            "radius": self.radius,
            "resources": self.resources.model_dump(),
        }


class Volunteer(ConsoleModel):
    id: str
    name: str
    phone: str = ""
    email: str = ""
    specialization: str = ""
    location: str = ""
    status: VolunteerStatus = "available"
    rating: float = 0.0
    completed_missions: int = 0
    current_assignment: Optional[str] = None
    joined_date: Optional[str] = None


class SOSRequest(ConsoleModel):
    id: str
    name: str
    phone: str = ""
    location: str = ""
    coordinates: str = ""
    type: str = ""
    severity: str = "medium"
    message: str = ""
    timestamp: str = ""
    status: SOSStatus = "pending"
    volunteer: str = "Unassigned"
    battery: Optional[str] = None


class Resource(ConsoleModel):
    id: str
    name: str
    category: str
    total_stock: int
    available_stock: int
    allocated_stock: int = 0
    unit: str = ""
    location: str = ""
    expiry_date: Optional[str] = None
    critical_level: int = 0
    supplier: str = ""
    last_restocked: Optional[str] = None
    cost: float = 0.0

    @property
    def stock_percentage(self) -> float:
        if self.total_stock <= 0:
            return 0.0
        return self.available_stock / self.total_stock * 100

    def stock_level(self) -> StockLevel:
        if self.available_stock <= self.critical_level:
            return "critical"
        percentage = self.stock_percentage
        if percentage <= 30:
            return "low"
        if percentage <= 60:
            return "medium"
        return "good"


class Allocation(ConsoleModel):
    id: str
    resource_id: str
    resource_name: str = ""
    quantity: int = 0
    unit: str = ""
    destination: str = ""
    coordinates: str = ""
    requested_by: str = ""
    priority: str = "medium"
    status: str = "pending"
    request_date: Optional[str] = None
    delivery_date: Optional[str] = None
    assigned_vehicle: Optional[str] = None
    estimated_arrival: Optional[str] = None


class DangerZone(ConsoleModel):
    id: str
    name: str
    type: str
    severity: str = "medium"
    radius: str = ""
    coordinates: str = ""
    location: str = ""
    affected_population: int = 0
    status: str = "active"
    created_date: Optional[str] = None
    last_updated: Optional[str] = None
    description: str = ""
    evacuation_routes: List[str] = Field(default_factory=list)
    emergency_contacts: List[str] = Field(default_factory=list)


class RouteFeedbackSummary(ConsoleModel):
    positive: int = 0
    negative: int = 0
    total: int = 0


class SafeRoute(ConsoleModel):
    id: str
    name: str
    start_point: str = ""
    end_point: str = ""
    distance: str = ""
    estimated_time: str = ""
    status: str = "verified"
    safety_rating: float = 0.0
    last_verified: Optional[str] = None
    hazards: List[str] = Field(default_factory=list)
    alternative_routes: int = 0
    usage_count: int = 0
    feedback: RouteFeedbackSummary = Field(default_factory=RouteFeedbackSummary)


class RouteFeedback(ConsoleModel):
    id: str
    route_id: str
    route_name: str = ""
    user_name: str = ""
    user_type: str = ""
    feedback_type: str = ""
    location: str = ""
    coordinates: str = ""
    message: str = ""
    timestamp: str = ""
    status: str = "pending"
    severity: str = "medium"
    images: List[str] = Field(default_factory=list)
    admin_response: Optional[str] = None


class VictimRegistration(ConsoleModel):
    id: str
    name: str
    phone: str = ""
    email: str = ""
    address: str = ""
    family_members: int = 1
    registration_date: Optional[str] = None
    disaster_type: str = ""
    status: str = "pending-verification"
    injuries: str = ""
    evacuation_center: str = ""
    documents_submitted: List[str] = Field(default_factory=list)
    needs_assistance: List[str] = Field(default_factory=list)
    claim_status: Optional[str] = None
    claim_amount: float = 0.0


class DamageReport(ConsoleModel):
    id: str
    victim_id: str
    victim_name: str = ""
    property_type: str = ""
    damage_type: str = ""
    severity: str = "moderate"
    assessment_date: Optional[str] = None
    assessor: str = ""
    estimated_cost: float = 0.0
    insurance_claim: float = 0.0
    status: str = "pending-approval"
    repair_timeframe: str = ""
    priority: str = "medium"


class CompensationClaim(ConsoleModel):
    id: str
    victim_id: str
    victim_name: str = ""
    claim_amount: float = 0.0
    claim_type: str = ""
    submission_date: Optional[str] = None
    status: str = "under-review"
    reviewed_by: str = ""
    transaction_id: Optional[str] = None
    documents: List[str] = Field(default_factory=list)


class AdminProfile(ConsoleModel):
    id: str
    name: str
    email: str


class DashboardMetrics(ConsoleModel):
    active_sos: int = Field(0, validation_alias=AliasChoices("activeSOS", "active_sos"))
    available_volunteers: int = 0
    danger_zones: int = 0
    resource_supplies: int = 0


class DashboardAlert(ConsoleModel):
    id: str
    type: str
    location: str
    time: str = ""
    severity: str = "low"
    affected: str = ""


class DashboardSOS(ConsoleModel):
    id: str
    location: str
    type: str
    time: str = ""
    volunteer: str = ""


class DashboardData(ConsoleModel):
    metrics: DashboardMetrics = Field(default_factory=DashboardMetrics)
    recent_alerts: List[DashboardAlert] = Field(default_factory=list)
    active_sos: List[DashboardSOS] = Field(
        default_factory=list, validation_alias=AliasChoices("activeSOS", "active_sos")
    )
    statistics: Optional[Dict[str, Any]] = None
    is_fallback: bool = False


class SystemStats(ConsoleModel):
    disasters: int = 0
    users: int = 0
    volunteers: int = 0
    locations: int = 0
    admins: int = 0
    last_updated: Optional[str] = None


class ExportCounts(ConsoleModel):
    disasters: int = 0
    users: int = 0
    volunteers: int = 0
    locations: int = 0


class ExportBundle(ConsoleModel):
    export_date: str
    data: Dict[str, List[Dict[str, Any]]] = Field(default_factory=dict)
    counts: ExportCounts = Field(default_factory=ExportCounts)

    def total_records(self) -> int:
        counts = self.counts
        return counts.disasters + counts.users + counts.volunteers + counts.locations


class ResetResult(ConsoleModel):
    message: str = ""
    deleted_counts: Dict[str, int] = Field(default_factory=dict)

    def total_deleted(self) -> int:
        return sum(self.deleted_counts.values())


class CollectionDeleteResult(ConsoleModel):
    message: str = ""
    deleted_count: int = 0
    collection_type: Optional[str] = None
