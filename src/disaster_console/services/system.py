# Copyright 2025 msq
from __future__ import annotations

import json
from datetime import date
from pathlib import Path
from typing import Optional

import structlog

from disaster_console.errors import ConsoleApiError
from disaster_console.external.api_client import ConsoleApiClient
from disaster_console.models import COLLECTION_TYPES, SystemStats
from disaster_console.notify import Confirmer, Notification, Notifier
from disaster_console.session.store import SessionStore

logger = structlog.get_logger(__name__)

_COLLECTION_LABELS = {
    "disasters": "disaster records",
    "users": "user accounts and all associated data",
    "volunteers": "volunteer records",
    "locations": "location records",
}


def backup_filename(day: date) -> str:
    return f"system-backup-{day.isoformat()}.json"


class SystemService:
    """系统级危险操作：统计、导出、清空集合、整体重置。

    所有操作都要求已登录；破坏性操作需先确认，成功后重新拉取统计。
    """

    def __init__(self, client: ConsoleApiClient, session: SessionStore, notifier: Notifier) -> None:
        self._client = client
        self._session = session
        self._notifier = notifier
        self.stats: Optional[SystemStats] = None

    def _require_login(self) -> bool:
        if self._session.is_authenticated:
            return True
        self._notifier.notify(
            Notification(
                "Authentication Required",
                "Please login to access danger zone operations",
                "destructive",
            )
        )
        return False

    def _total_records(self) -> int:
        stats = self.stats
        if stats is None:
            return 0
        return stats.disasters + stats.users + stats.volunteers + stats.locations

    async def fetch_stats(self) -> Optional[SystemStats]:
        if not self._require_login():
            return None
        try:
            self.stats = await self._client.get_system_stats()
        except ConsoleApiError as exc:
            logger.warning("system_stats_fetch_failed", error=str(exc))
            self._notifier.notify(Notification("Error", "Failed to fetch system statistics", "destructive"))
            return None
        return self.stats

    async def export(self, directory: Path, *, today: Optional[date] = None) -> Optional[Path]:
        if not self._require_login():
            return None
        try:
            bundle = await self._client.export_system_data()
        except ConsoleApiError as exc:
            logger.warning("system_export_failed", error=str(exc))
            self._notifier.notify(Notification("Export Failed", "Failed to export system data", "destructive"))
            return None

        target = Path(directory) / backup_filename(today or date.today())
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(
                json.dumps(bundle.model_dump(by_alias=True), indent=2, ensure_ascii=False),
                encoding="utf-8",
            )
        except OSError as exc:
            logger.error("system_export_write_failed", path=str(target), error=str(exc))
            self._notifier.notify(Notification("Export Failed", "Failed to export system data", "destructive"))
            return None

        logger.info("system_exported", path=str(target), total_records=bundle.total_records())
        self._notifier.notify(
            Notification(
                "Export Successful",
                f"Data exported successfully. Total records: {bundle.total_records()}",
            )
        )
        return target

    async def delete_collection(self, collection_type: str, *, confirm: Confirmer) -> bool:
        if collection_type not in COLLECTION_TYPES:
            self._notifier.notify(
                Notification(
                    "Invalid Collection",
                    "Invalid collection type. Use: disasters, users, volunteers, or locations",
                    "destructive",
                )
            )
            return False
        if not self._require_login():
            return False

        count = getattr(self.stats, collection_type, 0) if self.stats is not None else 0
        prompt = (
            f"This will permanently delete {count} {_COLLECTION_LABELS[collection_type]}. "
            "This action cannot be undone."
        )
        if not confirm(prompt):
            logger.info("system_delete_collection_declined", collection_type=collection_type)
            return False

        try:
            result = await self._client.delete_collection(collection_type)
        except ConsoleApiError as exc:
            logger.warning("system_delete_collection_failed", collection_type=collection_type, error=str(exc))
            self._notifier.notify(
                Notification("Deletion Failed", f"Failed to delete {collection_type}", "destructive")
            )
            return False

        logger.warning("system_collection_deleted", collection_type=collection_type, deleted=result.deleted_count)
        self._notifier.notify(Notification("Deletion Successful", result.message))
        await self.fetch_stats()
        return True

    async def reset(self, *, confirm: Confirmer) -> bool:
        if not self._require_login():
            return False
        prompt = (
            "This will permanently delete ALL system data except admin accounts. "
            f"Total records to be deleted: {self._total_records()}. This action cannot be undone."
        )
        if not confirm(prompt):
            logger.info("system_reset_declined")
            return False

        try:
            result = await self._client.reset_system()
        except ConsoleApiError as exc:
            logger.warning("system_reset_failed", error=str(exc))
            self._notifier.notify(Notification("Reset Failed", "Failed to reset system", "destructive"))
            return False

        logger.warning("system_reset_completed", deleted_counts=result.deleted_counts)
        self._notifier.notify(
            Notification(
                "System Reset Complete",
                f"System has been reset. Deleted: {result.total_deleted()} total records",
            )
        )
        await self.fetch_stats()
        return True
