from __future__ import annotations

from disaster_console.services import CatalogService
from disaster_console.services.catalog import stats_as_dict


def test_volunteer_view_filters_records_but_not_stats() -> None:
    catalog = CatalogService()

    view = catalog.volunteer_view(search="Delhi", status="available")

    assert [v.id for v in view.records] == ["VOL-001", "VOL-003", "VOL-005"]
    assert view.stats.total == 5


def test_resource_view_filters_both_lists() -> None:
    catalog = CatalogService()

    view = catalog.resource_view(category="water", allocation_status="in-transit")

    assert [r.id for r in view.resources] == ["RES-002"]
    assert [a.status for a in view.allocations] == ["in-transit"]
    assert view.stats.total_resources == 5


def test_danger_zone_view_by_type() -> None:
    view = CatalogService().danger_zone_view(zone_type="fire")

    assert [z.id for z in view.records] == ["DZ-002"]
    assert view.stats.monitoring == 1


def test_safe_route_view_status_only_applies_to_routes() -> None:
    view = CatalogService().safe_route_view(status="needs-update")

    assert [r.id for r in view.routes] == ["SR-002"]
    assert len(view.feedback) == 3
    assert view.stats.verified_routes == 2


def test_recovery_view() -> None:
    view = CatalogService().recovery_view(status="verified")

    assert [v.id for v in view.victims] == ["VR-001", "VR-003"]
    assert len(view.damage_reports) == 3
    assert len(view.claims) == 3
    assert view.stats.disbursed_amount == 50000


def test_stats_as_dict_includes_open_sos() -> None:
    view = CatalogService().sos_view(status="pending")

    assert [s.id for s in view.records] == ["SOS-2024-003"]
    assert stats_as_dict(view.stats) == {
        "total": 4,
        "pending": 1,
        "assigned": 1,
        "en_route": 1,
        "resolved": 1,
        "open": 3,
    }


def test_stats_do_not_depend_on_filters() -> None:
    catalog = CatalogService()
    baseline = catalog.danger_zone_view().stats
    combinations = [
        {"search": "delhi"},
        {"zone_type": "flood"},
        {"status": "monitoring"},
        {"search": "rohini", "zone_type": "fire", "status": "monitoring"},
        {"search": "no-such-zone", "zone_type": "earthquake", "status": "inactive"},
    ]

    for filters in combinations:
        view = catalog.danger_zone_view(**filters)
        assert view.stats == baseline, filters

    resource_baseline = catalog.resource_view().stats
    for category, allocation_status in [("food", "approved"), ("medical", "pending"), ("equipment", "delivered")]:
        view = catalog.resource_view(search="depot", category=category, allocation_status=allocation_status)
        assert view.stats == resource_baseline
