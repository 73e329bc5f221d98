# Copyright 2025 msq
"""
管理视图的静态示例数据

后端尚未提供志愿者、SOS、物资、危险区域、安全路线、灾后恢复等接口，
对应视图直接使用这里的数据；仪表盘接口失败时回退到 FALLBACK_DASHBOARD。
"""

from __future__ import annotations

from typing import Any, Dict, List

from disaster_console.models import (
    Allocation,
    CompensationClaim,
    DamageReport,
    DangerZone,
    DashboardData,
    Resource,
    RouteFeedback,
    SafeRoute,
    SOSRequest,
    VictimRegistration,
    Volunteer,
)

_VOLUNTEERS: List[Dict[str, Any]] = [
    {
        "id": "VOL-001",
        "name": "Dr. Rajesh Kumar",
        "phone": "+91 98765 43210",
        "email": "rajesh.kumar@email.com",
        "specialization": "Medical",
        "location": "Dwarka, Delhi",
        "status": "available",
        "rating": 4.8,
        "completedMissions": 45,
        "currentAssignment": None,
        "joinedDate": "2023-03-15",
    },
    {
        "id": "VOL-002",
        "name": "Priya Sharma",
        "phone": "+91 87654 32109",
        "email": "priya.sharma@email.com",
        "specialization": "Rescue Operations",
        "location": "Rohini, Delhi",
        "status": "busy",
        "rating": 4.9,
        "completedMissions": 67,
        "currentAssignment": "SOS-2024-001",
        "joinedDate": "2022-11-20",
    },
    {
        "id": "VOL-003",
        "name": "Amit Patel",
        "phone": "+91 76543 21098",
        "email": "amit.patel@email.com",
        "specialization": "Communication",
        "location": "Lajpat Nagar, Delhi",
        "status": "available",
        "rating": 4.6,
        "completedMissions": 32,
        "currentAssignment": None,
        "joinedDate": "2023-07-08",
    },
    {
        "id": "VOL-004",
        "name": "Sunita Devi",
        "phone": "+91 65432 10987",
        "email": "sunita.devi@email.com",
        "specialization": "First Aid",
        "location": "Karol Bagh, Delhi",
        "status": "training",
        "rating": 4.7,
        "completedMissions": 23,
        "currentAssignment": "Training Program",
        "joinedDate": "2024-01-12",
    },
    {
        "id": "VOL-005",
        "name": "Mohammad Ali",
        "phone": "+91 54321 09876",
        "email": "mohammad.ali@email.com",
        "specialization": "Logistics",
        "location": "Chandni Chowk, Delhi",
        "status": "available",
        "rating": 4.5,
        "completedMissions": 38,
        "currentAssignment": None,
        "joinedDate": "2023-05-22",
    },
]

_SOS_REQUESTS: List[Dict[str, Any]] = [
    {
        "id": "SOS-2024-001",
        "name": "Ravi Kumar",
        "phone": "+91 98765 43210",
        "location": "Dwarka Sector 12, New Delhi",
        "coordinates": "28.5921, 77.0460",
        "type": "trapped",
        "severity": "critical",
        "message": "Trapped in building collapse, 3rd floor. Can't move my leg. Water rising.",
        "timestamp": "2 minutes ago",
        "status": "assigned",
        "volunteer": "Team Alpha - 5 min ETA",
        "battery": "12%",
    },
    {
        "id": "SOS-2024-002",
        "name": "Priya Sharma",
        "phone": "+91 99887 76543",
        "location": "Rohini Sector 18, Delhi",
        "coordinates": "28.7041, 77.1025",
        "type": "medical",
        "severity": "high",
        "message": "Elderly person having chest pain. Need immediate medical help.",
        "timestamp": "7 minutes ago",
        "status": "en-route",
        "volunteer": "Dr. Mehta - 2 min ETA",
        "battery": "45%",
    },
    {
        "id": "SOS-2024-003",
        "name": "Amit Patel",
        "phone": "+91 87654 32109",
        "location": "Lajpat Nagar, Delhi",
        "coordinates": "28.5676, 77.2436",
        "type": "missing",
        "severity": "medium",
        "message": "Lost contact with my daughter during evacuation. Last seen near metro station.",
        "timestamp": "12 minutes ago",
        "status": "pending",
        "volunteer": "Unassigned",
        "battery": "78%",
    },
    {
        "id": "SOS-2024-004",
        "name": "Sunita Devi",
        "phone": "+91 76543 21098",
        "location": "Karol Bagh, Delhi",
        "coordinates": "28.6519, 77.1909",
        "type": "safe",
        "severity": "low",
        "message": "Reached evacuation center safely. Family of 4 needs shelter.",
        "timestamp": "25 minutes ago",
        "status": "resolved",
        "volunteer": "Completed",
        "battery": "65%",
    },
]

_RESOURCES: List[Dict[str, Any]] = [
    {
        "id": "RES-001",
        "name": "Emergency Food Supplies",
        "category": "food",
        "totalStock": 5000,
        "availableStock": 3200,
        "allocatedStock": 1800,
        "unit": "meal packs",
        "location": "Central Warehouse Delhi",
        "expiryDate": "2024-06-15",
        "criticalLevel": 1000,
        "supplier": "Food Corp India",
        "lastRestocked": "2024-01-18",
        "cost": 450000,
    },
    {
        "id": "RES-002",
        "name": "Drinking Water Bottles",
        "category": "water",
        "totalStock": 10000,
        "availableStock": 2500,
        "allocatedStock": 7500,
        "unit": "bottles (1L)",
        "location": "Multiple Warehouses",
        "expiryDate": "2024-12-31",
        "criticalLevel": 2000,
        "supplier": "Aquafina Supplies",
        "lastRestocked": "2024-01-20",
        "cost": 150000,
    },
    {
        "id": "RES-003",
        "name": "Medical First Aid Kits",
        "category": "medical",
        "totalStock": 800,
        "availableStock": 650,
        "allocatedStock": 150,
        "unit": "kits",
        "location": "Medical Depot Rohini",
        "expiryDate": "2025-03-30",
        "criticalLevel": 100,
        "supplier": "MedSupply Ltd",
        "lastRestocked": "2024-01-15",
        "cost": 320000,
    },
    {
        "id": "RES-004",
        "name": "Emergency Blankets",
        "category": "shelter",
        "totalStock": 2000,
        "availableStock": 1200,
        "allocatedStock": 800,
        "unit": "pieces",
        "location": "Relief Center Dwarka",
        "expiryDate": None,
        "criticalLevel": 300,
        "supplier": "Textile Industries",
        "lastRestocked": "2024-01-12",
        "cost": 200000,
    },
    {
        "id": "RES-005",
        "name": "Portable Generators",
        "category": "equipment",
        "totalStock": 50,
        "availableStock": 15,
        "allocatedStock": 35,
        "unit": "units",
        "location": "Equipment Depot CP",
        "expiryDate": None,
        "criticalLevel": 10,
        "supplier": "Power Solutions Inc",
        "lastRestocked": "2024-01-08",
        "cost": 2500000,
    },
]

_ALLOCATIONS: List[Dict[str, Any]] = [
    {
        "id": "ALLOC-001",
        "resourceId": "RES-001",
        "resourceName": "Emergency Food Supplies",
        "quantity": 500,
        "unit": "meal packs",
        "destination": "Flood Relief Camp - Yamuna Bank",
        "coordinates": "28.6519, 77.2315",
        "requestedBy": "Camp Coordinator - Ravi Kumar",
        "priority": "high",
        "status": "approved",
        "requestDate": "2024-01-20",
        "deliveryDate": "2024-01-21",
        "assignedVehicle": "TR-001",
        "estimatedArrival": "14:30",
    },
    {
        "id": "ALLOC-002",
        "resourceId": "RES-002",
        "resourceName": "Drinking Water Bottles",
        "quantity": 1000,
        "unit": "bottles",
        "destination": "Evacuation Center - Rohini Sector 15",
        "coordinates": "28.7041, 77.1025",
        "requestedBy": "Medical Officer - Dr. Priya Sharma",
        "priority": "critical",
        "status": "in-transit",
        "requestDate": "2024-01-20",
        "deliveryDate": "2024-01-20",
        "assignedVehicle": "TR-003",
        "estimatedArrival": "16:45",
    },
    {
        "id": "ALLOC-003",
        "resourceId": "RES-003",
        "resourceName": "Medical First Aid Kits",
        "quantity": 25,
        "unit": "kits",
        "destination": "Emergency Response Team Base",
        "coordinates": "28.5676, 77.2436",
        "requestedBy": "Team Lead - Amit Singh",
        "priority": "medium",
        "status": "pending",
        "requestDate": "2024-01-20",
        "deliveryDate": "2024-01-21",
        "assignedVehicle": None,
        "estimatedArrival": None,
    },
]

_DANGER_ZONES: List[Dict[str, Any]] = [
    {
        "id": "DZ-001",
        "name": "Yamuna Flood Zone",
        "type": "flood",
        "severity": "critical",
        "radius": "1000m",
        "coordinates": "28.6519, 77.2315",
        "location": "Yamuna Bank, Delhi",
        "affectedPopulation": 15000,
        "status": "active",
        "createdDate": "2024-01-15",
        "lastUpdated": "2024-01-20",
        "description": "High flood risk area due to Yamuna river overflow during monsoon season",
        "evacuationRoutes": ["Route A-1", "Route A-2"],
        "emergencyContacts": ["Fire Station 12", "Police Station Civil Lines"],
    },
    {
        "id": "DZ-002",
        "name": "Industrial Fire Risk Zone",
        "type": "fire",
        "severity": "high",
        "radius": "500m",
        "coordinates": "28.7041, 77.1025",
        "location": "Industrial Area, Rohini",
        "affectedPopulation": 8500,
        "status": "monitoring",
        "createdDate": "2024-01-10",
        "lastUpdated": "2024-01-18",
        "description": "Chemical plant vicinity with potential fire and explosion hazards",
        "evacuationRoutes": ["Route B-1"],
        "emergencyContacts": ["Fire Station 15", "Hazmat Team Delta"],
    },
    {
        "id": "DZ-003",
        "name": "Earthquake Fault Zone",
        "type": "earthquake",
        "severity": "medium",
        "radius": "2000m",
        "coordinates": "28.5676, 77.2436",
        "location": "Ridge Area, Central Delhi",
        "affectedPopulation": 25000,
        "status": "active",
        "createdDate": "2024-01-05",
        "lastUpdated": "2024-01-19",
        "description": "Seismically active area with building collapse risk during earthquakes",
        "evacuationRoutes": ["Route C-1", "Route C-2", "Route C-3"],
        "emergencyContacts": ["NDRF Team 3", "Medical Emergency Unit"],
    },
    {
        "id": "DZ-004",
        "name": "Landslide Risk Area",
        "type": "landslide",
        "severity": "high",
        "radius": "750m",
        "coordinates": "28.6129, 77.2773",
        "location": "Hill Slopes, East Delhi",
        "affectedPopulation": 3200,
        "status": "inactive",
        "createdDate": "2023-12-20",
        "lastUpdated": "2024-01-15",
        "description": "Steep terrain with loose soil, high landslide probability during heavy rains",
        "evacuationRoutes": ["Route D-1"],
        "emergencyContacts": ["Earth Sciences Unit", "Rescue Team Bravo"],
    },
]

_SAFE_ROUTES: List[Dict[str, Any]] = [
    {
        "id": "SR-001",
        "name": "Central Delhi to IGI Airport",
        "startPoint": "Connaught Place",
        "endPoint": "IGI Airport Terminal 3",
        "distance": "18.2 km",
        "estimatedTime": "35 minutes",
        "status": "verified",
        "safetyRating": 4.8,
        "lastVerified": "2024-01-20",
        "hazards": ["Construction Zone at Km 12"],
        "alternativeRoutes": 3,
        "usageCount": 1250,
        "feedback": {"positive": 145, "negative": 12, "total": 157},
    },
    {
        "id": "SR-002",
        "name": "Dwarka to Gurgaon",
        "startPoint": "Dwarka Sector 21",
        "endPoint": "Cyber City, Gurgaon",
        "distance": "22.4 km",
        "estimatedTime": "42 minutes",
        "status": "needs-update",
        "safetyRating": 4.2,
        "lastVerified": "2024-01-15",
        "hazards": ["Flood risk at Najafgarh", "Heavy traffic zone"],
        "alternativeRoutes": 2,
        "usageCount": 890,
        "feedback": {"positive": 89, "negative": 23, "total": 112},
    },
    {
        "id": "SR-003",
        "name": "Red Fort to Lotus Temple",
        "startPoint": "Red Fort Main Gate",
        "endPoint": "Lotus Temple",
        "distance": "15.8 km",
        "estimatedTime": "28 minutes",
        "status": "verified",
        "safetyRating": 4.6,
        "lastVerified": "2024-01-19",
        "hazards": [],
        "alternativeRoutes": 4,
        "usageCount": 2100,
        "feedback": {"positive": 198, "negative": 15, "total": 213},
    },
]

_ROUTE_FEEDBACK: List[Dict[str, Any]] = [
    {
        "id": "FB-001",
        "routeId": "SR-001",
        "routeName": "Central Delhi to IGI Airport",
        "userName": "Ravi Kumar",
        "userType": "commuter",
        "feedbackType": "unsafe-spot",
        "location": "Near Mahipalpur Flyover",
        "coordinates": "28.5403, 77.1294",
        "message": "Waterlogging during rain makes this stretch very dangerous. Vehicles get stuck.",
        "timestamp": "2024-01-20 14:30",
        "status": "pending",
        "severity": "high",
        "images": ["waterlog1.jpg", "waterlog2.jpg"],
        "adminResponse": None,
    },
    {
        "id": "FB-002",
        "routeId": "SR-002",
        "routeName": "Dwarka to Gurgaon",
        "userName": "Priya Sharma",
        "userType": "volunteer",
        "feedbackType": "suggestion",
        "location": "Palam Road Junction",
        "coordinates": "28.5562, 77.0840",
        "message": "Alternative route via NH-8 service road is much safer during peak hours.",
        "timestamp": "2024-01-19 16:45",
        "status": "approved",
        "severity": "medium",
        "images": [],
        "adminResponse": "Thank you for the suggestion. Route updated with alternative path.",
    },
    {
        "id": "FB-003",
        "routeId": "SR-003",
        "routeName": "Red Fort to Lotus Temple",
        "userName": "Amit Singh",
        "userType": "emergency-responder",
        "feedbackType": "hazard-report",
        "location": "Mathura Road Underpass",
        "coordinates": "28.5735, 77.2718",
        "message": "Construction debris blocking emergency vehicle access. Immediate clearance needed.",
        "timestamp": "2024-01-20 09:15",
        "status": "in-progress",
        "severity": "critical",
        "images": ["debris1.jpg"],
        "adminResponse": "Forwarded to PWD. Expected clearance by evening.",
    },
]

_VICTIMS: List[Dict[str, Any]] = [
    {
        "id": "VR-001",
        "name": "Ravi Kumar Sharma",
        "phone": "+91 98765 43210",
        "email": "ravi.sharma@email.com",
        "address": "House No. 245, Yamuna Vihar, Delhi",
        "familyMembers": 4,
        "registrationDate": "2024-01-20",
        "disasterType": "flood",
        "status": "verified",
        "injuries": "Minor cuts, no hospitalization required",
        "evacuationCenter": "Relief Camp A-1",
        "documentsSubmitted": ["ID Proof", "Address Proof", "Family Photo"],
        "needsAssistance": ["Temporary Shelter", "Food", "Clothing"],
        "claimStatus": "approved",
        "claimAmount": 50000,
    },
    {
        "id": "VR-002",
        "name": "Priya Devi",
        "phone": "+91 87654 32109",
        "email": "priya.devi@email.com",
        "address": "Flat 302, River View Apartments, Delhi",
        "familyMembers": 3,
        "registrationDate": "2024-01-19",
        "disasterType": "flood",
        "status": "pending-verification",
        "injuries": "None",
        "evacuationCenter": "Community Center B-2",
        "documentsSubmitted": ["ID Proof", "Address Proof"],
        "needsAssistance": ["Medical Care", "Food", "Clean Water"],
        "claimStatus": "under-review",
        "claimAmount": 35000,
    },
    {
        "id": "VR-003",
        "name": "Mohammad Ali Khan",
        "phone": "+91 76543 21098",
        "email": "ali.khan@email.com",
        "address": "Shop No. 15, Market Complex, Old Delhi",
        "familyMembers": 6,
        "registrationDate": "2024-01-21",
        "disasterType": "fire",
        "status": "verified",
        "injuries": "Smoke inhalation, under treatment",
        "evacuationCenter": "Medical Relief Center",
        "documentsSubmitted": ["Business License", "Property Papers", "Insurance Documents"],
        "needsAssistance": ["Medical Treatment", "Business Recovery", "Temporary Shelter"],
        "claimStatus": "processing",
        "claimAmount": 250000,
    },
]

_DAMAGE_REPORTS: List[Dict[str, Any]] = [
    {
        "id": "DR-001",
        "victimId": "VR-001",
        "victimName": "Ravi Kumar Sharma",
        "propertyType": "residential",
        "damageType": "structural",
        "severity": "moderate",
        "assessmentDate": "2024-01-20",
        "assessor": "Engineering Team A",
        "estimatedCost": 450000,
        "insuranceClaim": 350000,
        "status": "assessed",
        "repairTimeframe": "2-3 months",
        "priority": "medium",
    },
    {
        "id": "DR-002",
        "victimId": "VR-002",
        "victimName": "Priya Devi",
        "propertyType": "residential",
        "damageType": "flooding",
        "severity": "severe",
        "assessmentDate": "2024-01-21",
        "assessor": "Survey Team B",
        "estimatedCost": 780000,
        "insuranceClaim": 600000,
        "status": "pending-approval",
        "repairTimeframe": "4-6 months",
        "priority": "high",
    },
    {
        "id": "DR-003",
        "victimId": "VR-003",
        "victimName": "Mohammad Ali Khan",
        "propertyType": "commercial",
        "damageType": "fire",
        "severity": "total-loss",
        "assessmentDate": "2024-01-21",
        "assessor": "Fire Investigation Unit",
        "estimatedCost": 1200000,
        "insuranceClaim": 900000,
        "status": "approved",
        "repairTimeframe": "6-8 months",
        "priority": "critical",
    },
]

_CLAIMS: List[Dict[str, Any]] = [
    {
        "id": "CL-001",
        "victimId": "VR-001",
        "victimName": "Ravi Kumar Sharma",
        "claimAmount": 50000,
        "claimType": "Emergency Relief",
        "submissionDate": "2024-01-20",
        "status": "disbursed",
        "reviewedBy": "Relief Officer - Amit Singh",
        "transactionId": "TXN789012345",
        "documents": ["Damage Assessment", "ID Verification", "Bank Details"],
    },
    {
        "id": "CL-002",
        "victimId": "VR-002",
        "victimName": "Priya Devi",
        "claimAmount": 35000,
        "claimType": "Temporary Assistance",
        "submissionDate": "2024-01-19",
        "status": "under-review",
        "reviewedBy": "Relief Officer - Dr. Priya Sharma",
        "transactionId": None,
        "documents": ["Damage Photos", "Medical Certificate", "Income Proof"],
    },
    {
        "id": "CL-003",
        "victimId": "VR-003",
        "victimName": "Mohammad Ali Khan",
        "claimAmount": 250000,
        "claimType": "Business Recovery",
        "submissionDate": "2024-01-21",
        "status": "documentation-pending",
        "reviewedBy": "Business Recovery Team",
        "transactionId": None,
        "documents": ["Fire Investigation Report", "Business License", "Tax Returns"],
    },
]

_FALLBACK_DASHBOARD: Dict[str, Any] = {
    "metrics": {
        "activeSOS": 127,
        "availableVolunteers": 2340,
        "dangerZones": 18,
        "resourceSupplies": 85,
    },
    "recentAlerts": [
        {
            "id": "1",
            "type": "Flood Warning",
            "location": "Sector 15, Delhi",
            "time": "2 minutes ago",
            "severity": "high",
            "affected": "~5000 residents",
        }
    ],
    "activeSOS": [
        {
            "id": "SOS-001",
            "location": "Dwarka Sector 12",
            "type": "Trapped",
            "time": "3 min ago",
            "volunteer": "Assigned",
        }
    ],
}


def volunteers() -> List[Volunteer]:
    return [Volunteer.model_validate(item) for item in _VOLUNTEERS]


def sos_requests() -> List[SOSRequest]:
    return [SOSRequest.model_validate(item) for item in _SOS_REQUESTS]


def resources() -> List[Resource]:
    return [Resource.model_validate(item) for item in _RESOURCES]


def allocations() -> List[Allocation]:
    return [Allocation.model_validate(item) for item in _ALLOCATIONS]


def danger_zones() -> List[DangerZone]:
    return [DangerZone.model_validate(item) for item in _DANGER_ZONES]


def safe_routes() -> List[SafeRoute]:
    return [SafeRoute.model_validate(item) for item in _SAFE_ROUTES]


def route_feedback() -> List[RouteFeedback]:
    return [RouteFeedback.model_validate(item) for item in _ROUTE_FEEDBACK]


def victims() -> List[VictimRegistration]:
    return [VictimRegistration.model_validate(item) for item in _VICTIMS]


def damage_reports() -> List[DamageReport]:
    return [DamageReport.model_validate(item) for item in _DAMAGE_REPORTS]


def claims() -> List[CompensationClaim]:
    return [CompensationClaim.model_validate(item) for item in _CLAIMS]


def fallback_dashboard() -> DashboardData:
    dashboard = DashboardData.model_validate(_FALLBACK_DASHBOARD)
    return dashboard.model_copy(update={"is_fallback": True})
