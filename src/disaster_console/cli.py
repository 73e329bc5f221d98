# Copyright 2025 msq
from __future__ import annotations

import argparse
import asyncio
import dataclasses
import getpass
import json
import sys
import uuid
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import httpx
import structlog
from pydantic import BaseModel

from disaster_console import __version__
from disaster_console.config import ConsoleConfig, normalize_base_url
from disaster_console.container import ServiceContainer
from disaster_console.filters import ALL
from disaster_console.logging import clear_trace_id, configure_logging, set_trace_id
from disaster_console.models import COLLECTION_TYPES, DisasterDraft, DisasterResources, GeoPoint
from disaster_console.notify import ConsoleNotifier, Notification, Notifier, always_confirm, prompt_confirm
from disaster_console.services.catalog import stats_as_dict

logger = structlog.get_logger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1

CATALOG_KINDS = ("volunteers", "sos", "resources", "zones", "routes", "recovery")

# 文本模式下各列表展示的列
_COLUMNS: Dict[str, Sequence[str]] = {
    "disasters": ("id", "type", "severity", "radius", "active", "description"),
    "volunteers": ("id", "name", "specialization", "location", "status"),
    "sos": ("id", "name", "type", "severity", "location", "status"),
    "resources": ("id", "name", "category", "available_stock", "total_stock", "location"),
    "allocations": ("id", "resource_name", "quantity", "destination", "status"),
    "zones": ("id", "name", "type", "severity", "location", "status"),
    "routes": ("id", "name", "start_point", "end_point", "status"),
    "feedback": ("id", "route_name", "feedback_type", "location", "status"),
    "victims": ("id", "name", "phone", "address", "status"),
    "damage_reports": ("id", "victim_name", "damage_type", "severity", "status"),
    "claims": ("id", "victim_name", "claim_amount", "claim_type", "status"),
}


class TrackingNotifier:
    """转发通知，同时记录本次命令是否出现过错误通知。"""

    def __init__(self, inner: Notifier) -> None:
        self._inner = inner
        self.failed = False

    def notify(self, notification: Notification) -> None:
        if notification.is_error:
            self.failed = True
        self._inner.notify(notification)


def _to_plain(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True)
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {field.name: _to_plain(getattr(value, field.name)) for field in dataclasses.fields(value)}
    if isinstance(value, (list, tuple)):
        return [_to_plain(item) for item in value]
    if isinstance(value, dict):
        return {key: _to_plain(item) for key, item in value.items()}
    return value


def _print_json(value: Any) -> None:
    print(json.dumps(_to_plain(value), ensure_ascii=False, indent=2, default=str))


def _cell(record: Any, name: str) -> str:
    value = getattr(record, name, "")
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value)


def _print_table(title: str, kind: str, records: Sequence[Any]) -> None:
    columns = _COLUMNS[kind]
    print(f"== {title} ({len(records)}) ==")
    if not records:
        print("(no records)")
        return
    rows: List[List[str]] = [list(columns)] + [[_cell(r, c) for c in columns] for r in records]
    widths = [min(max(len(row[i]) for row in rows), 48) for i in range(len(columns))]
    for row in rows:
        print("  ".join(value[:48].ljust(widths[i]) for i, value in enumerate(row)).rstrip())


def _print_stats(stats: Dict[str, Any]) -> None:
    for key, value in stats.items():
        print(f"{key}: {value}")


def _confirmer(args: argparse.Namespace):
    return always_confirm if getattr(args, "yes", False) else prompt_confirm


# ========== 命令实现 ==========


async def _cmd_login(args: argparse.Namespace, container: ServiceContainer) -> int:
    password = args.password if args.password is not None else getpass.getpass("Password: ")
    result = await container.session.login(args.email, password)
    if not result.success:
        print(result.message, file=sys.stderr)
        return EXIT_FAILED
    admin = container.session.admin
    print(f"Logged in as {admin.email if admin else args.email}")
    return EXIT_OK


async def _cmd_logout(args: argparse.Namespace, container: ServiceContainer) -> int:
    container.session.logout()
    print("Logged out")
    return EXIT_OK


async def _cmd_whoami(args: argparse.Namespace, container: ServiceContainer) -> int:
    session = container.session
    if not session.is_authenticated:
        print("Not logged in", file=sys.stderr)
        return EXIT_FAILED
    admin = session.admin
    if args.json:
        _print_json({"authenticated": True, "admin": admin})
    elif admin is not None:
        print(f"{admin.name} <{admin.email}> ({admin.id})")
    else:
        print("Logged in (no profile stored)")
    return EXIT_OK


async def _cmd_dashboard(args: argparse.Namespace, container: ServiceContainer) -> int:
    data = await container.dashboard.fetch()
    if data is None:
        return EXIT_FAILED
    if args.json:
        _print_json(data)
        return EXIT_OK
    if data.is_fallback:
        print("(showing sample data)")
    metrics = data.metrics
    _print_stats(
        {
            "active_sos": metrics.active_sos,
            "available_volunteers": metrics.available_volunteers,
            "danger_zones": metrics.danger_zones,
            "resource_supplies": f"{metrics.resource_supplies}%",
        }
    )
    print("== Recent alerts ==")
    for alert in data.recent_alerts:
        print(f"[{alert.severity}] {alert.type} @ {alert.location} ({alert.time}) {alert.affected}".rstrip())
    print("== Active SOS ==")
    for sos in data.active_sos:
        print(f"{sos.id} {sos.type} @ {sos.location} ({sos.time}) {sos.volunteer}".rstrip())
    return EXIT_OK


async def _cmd_map(args: argparse.Namespace, container: ServiceContainer) -> int:
    data = await container.map.fetch()
    if args.json:
        _print_json(data)
        return EXIT_OK
    _print_stats(dataclasses.asdict(data.stats))
    print(f"== Markers ({len(data.markers)}) ==")
    for marker in data.markers:
        print(
            f"{marker.id} {marker.type} [{marker.severity}] "
            f"{marker.latitude:.4f}, {marker.longitude:.4f} r={marker.radius_km:g}km"
        )
    print("== Recent activity ==")
    for item in data.recent_activity:
        print(f"{item.title} @ {item.location} ({item.time})")
    return EXIT_OK


async def _cmd_disasters_list(args: argparse.Namespace, container: ServiceContainer) -> int:
    service = container.disasters
    await service.fetch()
    view = service.view(search=args.search, type_filter=args.type, tab=args.tab)
    if args.json:
        _print_json(
            {
                "records": [record.model_dump(mode="json") | {"severity": record.severity} for record in view.records],
                "stats": view.stats,
            }
        )
        return EXIT_OK
    _print_table("Disasters", "disasters", view.records)
    _print_stats(dataclasses.asdict(view.stats))
    return EXIT_OK


async def _cmd_disasters_create(args: argparse.Namespace, container: ServiceContainer) -> int:
    location: Optional[GeoPoint] = None
    if args.lat is not None and args.lng is not None:
        location = GeoPoint(coordinates=(args.lng, args.lat))
    draft = DisasterDraft(
        type=args.type,
        description=args.description,
        location=location,
        radius=args.radius,
        resources=DisasterResources(
            food=args.food,
            medikits=args.medikits,
            water=args.water,
            blankets=args.blankets,
        ),
    )
    created = await container.disasters.create(draft)
    if created is None:
        return EXIT_FAILED
    if args.json:
        _print_json(created)
    else:
        print(f"Created {created.type} disaster {created.id}")
    return EXIT_OK


async def _cmd_disasters_delete(args: argparse.Namespace, container: ServiceContainer) -> int:
    deleted = await container.disasters.delete(args.id, args.type, confirm=_confirmer(args))
    return EXIT_OK if deleted else EXIT_FAILED


async def _cmd_disasters_resources(args: argparse.Namespace, container: ServiceContainer) -> int:
    resources = DisasterResources(
        food=args.food,
        medikits=args.medikits,
        water=args.water,
        blankets=args.blankets,
    )
    updated = await container.disasters.update_resources(args.id, resources)
    if updated is None:
        return EXIT_FAILED
    if args.json:
        _print_json(updated)
    return EXIT_OK


async def _cmd_catalog_list(args: argparse.Namespace, container: ServiceContainer) -> int:
    catalog = container.catalog
    kind = args.command
    sections: Dict[str, Sequence[Any]]
    if kind == "volunteers":
        view = catalog.volunteer_view(search=args.search, status=args.filter)
        sections, stats = {"volunteers": view.records}, view.stats
    elif kind == "sos":
        view = catalog.sos_view(search=args.search, status=args.filter)
        sections, stats = {"sos": view.records}, view.stats
    elif kind == "resources":
        resource_view = catalog.resource_view(
            search=args.search, category=args.filter, allocation_status=args.status
        )
        sections = {"resources": resource_view.resources, "allocations": resource_view.allocations}
        stats = resource_view.stats
    elif kind == "zones":
        view = catalog.danger_zone_view(search=args.search, zone_type=args.filter, status=args.status)
        sections, stats = {"zones": view.records}, view.stats
    elif kind == "routes":
        route_view = catalog.safe_route_view(search=args.search, status=args.filter)
        sections = {"routes": route_view.routes, "feedback": route_view.feedback}
        stats = route_view.stats
    else:
        recovery_view = catalog.recovery_view(search=args.search, status=args.filter)
        sections = {
            "victims": recovery_view.victims,
            "damage_reports": recovery_view.damage_reports,
            "claims": recovery_view.claims,
        }
        stats = recovery_view.stats

    if args.json:
        _print_json({**{name: list(records) for name, records in sections.items()}, "stats": stats_as_dict(stats)})
        return EXIT_OK
    for name, records in sections.items():
        _print_table(name.replace("_", " ").title(), name, records)
    _print_stats(stats_as_dict(stats))
    return EXIT_OK


async def _cmd_system_stats(args: argparse.Namespace, container: ServiceContainer) -> int:
    stats = await container.system.fetch_stats()
    if stats is None:
        return EXIT_FAILED
    if args.json:
        _print_json(stats)
    else:
        _print_stats(stats.model_dump(exclude_none=True))
    return EXIT_OK


async def _cmd_system_export(args: argparse.Namespace, container: ServiceContainer) -> int:
    target = await container.system.export(Path(args.output))
    if target is None:
        return EXIT_FAILED
    print(str(target))
    return EXIT_OK


async def _cmd_system_delete_collection(args: argparse.Namespace, container: ServiceContainer) -> int:
    system = container.system
    if args.collection_type in COLLECTION_TYPES and container.session.is_authenticated:
        # 确认提示需要当前记录数
        await system.fetch_stats()
    deleted = await system.delete_collection(args.collection_type, confirm=_confirmer(args))
    return EXIT_OK if deleted else EXIT_FAILED


async def _cmd_system_reset(args: argparse.Namespace, container: ServiceContainer) -> int:
    system = container.system
    if container.session.is_authenticated:
        await system.fetch_stats()
    reset = await system.reset(confirm=_confirmer(args))
    return EXIT_OK if reset else EXIT_FAILED


# ========== 参数解析 ==========


def _add_resource_args(parser: argparse.ArgumentParser) -> None:
    for name in ("food", "medikits", "water", "blankets"):
        parser.add_argument(f"--{name}", type=int, default=0, help=f"{name} quantity")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="disaster-console", description="Disaster management admin console")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--json", action="store_true", help="print machine-readable JSON")
    parser.add_argument("--api-url", help="override DISASTER_API_URL")
    parser.add_argument("--session-file", help="override CONSOLE_SESSION_FILE")
    parser.add_argument("--log-level", help="override CONSOLE_LOG_LEVEL")
    commands = parser.add_subparsers(dest="command", required=True)

    login = commands.add_parser("login", help="authenticate as an administrator")
    login.add_argument("--email", required=True)
    login.add_argument("--password", help="prompted when omitted")
    login.set_defaults(handler=_cmd_login)

    commands.add_parser("logout", help="forget the stored session").set_defaults(handler=_cmd_logout)
    commands.add_parser("whoami", help="show the stored admin profile").set_defaults(handler=_cmd_whoami)
    commands.add_parser("dashboard", help="dashboard overview").set_defaults(handler=_cmd_dashboard)
    commands.add_parser("map", help="map markers and recent activity").set_defaults(handler=_cmd_map)

    disasters = commands.add_parser("disasters", help="disaster alerts").add_subparsers(
        dest="action", required=True
    )
    listing = disasters.add_parser("list")
    listing.add_argument("--search", default="")
    listing.add_argument("--type", default=ALL)
    listing.add_argument("--tab", choices=("active", "inactive", ALL), default="active")
    listing.set_defaults(handler=_cmd_disasters_list)

    create = disasters.add_parser("create")
    create.add_argument("--type", required=True)
    create.add_argument("--description", required=True)
    create.add_argument("--lat", type=float)
    create.add_argument("--lng", type=float)
    create.add_argument("--radius", type=float, default=5.0, help="impact radius in km")
    _add_resource_args(create)
    create.set_defaults(handler=_cmd_disasters_create)

    delete = disasters.add_parser("delete")
    delete.add_argument("id")
    delete.add_argument("--type", required=True, help="disaster type shown in the confirmation")
    delete.add_argument("--yes", action="store_true", help="skip the confirmation prompt")
    delete.set_defaults(handler=_cmd_disasters_delete)

    resources = disasters.add_parser("resources", help="replace the resources assigned to a disaster")
    resources.add_argument("id")
    _add_resource_args(resources)
    resources.set_defaults(handler=_cmd_disasters_resources)

    for kind in CATALOG_KINDS:
        catalog = commands.add_parser(kind, help=f"{kind} management view").add_subparsers(
            dest="action", required=True
        )
        catalog_list = catalog.add_parser("list")
        catalog_list.add_argument("--search", default="")
        catalog_list.add_argument("--filter", default=ALL, help="status, category or type filter")
        if kind in ("resources", "zones"):
            catalog_list.add_argument("--status", default=ALL, help="secondary status filter")
        catalog_list.set_defaults(handler=_cmd_catalog_list)

    system = commands.add_parser("system", help="system danger zone operations").add_subparsers(
        dest="action", required=True
    )
    system.add_parser("stats").set_defaults(handler=_cmd_system_stats)
    export = system.add_parser("export")
    export.add_argument("--output", default=".", help="directory for the backup file")
    export.set_defaults(handler=_cmd_system_export)
    delete_collection = system.add_parser("delete-collection")
    delete_collection.add_argument("collection_type", metavar="TYPE")
    delete_collection.add_argument("--yes", action="store_true")
    delete_collection.set_defaults(handler=_cmd_system_delete_collection)
    reset = system.add_parser("reset")
    reset.add_argument("--yes", action="store_true")
    reset.set_defaults(handler=_cmd_system_reset)
    return parser


def _apply_overrides(config: ConsoleConfig, args: argparse.Namespace) -> ConsoleConfig:
    overrides: Dict[str, Any] = {}
    if args.api_url:
        overrides["api_base_url"] = normalize_base_url(args.api_url)
    if args.session_file:
        overrides["session_file"] = Path(args.session_file).expanduser()
    if args.log_level:
        overrides["log_level"] = args.log_level.upper()
    return dataclasses.replace(config, **overrides) if overrides else config


async def _run(
    args: argparse.Namespace,
    config: ConsoleConfig,
    http_client: Optional[httpx.AsyncClient],
) -> int:
    notifier = TrackingNotifier(ConsoleNotifier())
    container = ServiceContainer.build(config, notifier=notifier, http_client=http_client)
    try:
        code = await args.handler(args, container)
    finally:
        await container.aclose()
    if notifier.failed:
        return EXIT_FAILED
    return code


def main(argv: Optional[Sequence[str]] = None, *, http_client: Optional[httpx.AsyncClient] = None) -> int:
    args = build_parser().parse_args(argv)
    config = _apply_overrides(ConsoleConfig.load_from_env(), args)
    configure_logging(json_logs=config.log_json, log_level=config.log_level)
    set_trace_id(uuid.uuid4().hex)
    logger.debug("cli_command", command=args.command, action=getattr(args, "action", None))
    try:
        return asyncio.run(_run(args, config, http_client))
    except KeyboardInterrupt:
        print("Interrupted", file=sys.stderr)
        return EXIT_FAILED
    finally:
        clear_trace_id()


if __name__ == "__main__":
    sys.exit(main())
