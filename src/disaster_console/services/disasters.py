# Copyright 2025 msq
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

import structlog

from disaster_console.errors import ConsoleApiError, ValidationError
from disaster_console.external.api_client import ConsoleApiClient
from disaster_console.filters import ALL, DISASTER_FILTER, DisasterStats, apply_filters, disaster_stats
from disaster_console.geo import validate_coordinates
from disaster_console.models import Disaster, DisasterDraft, DisasterResources
from disaster_console.notify import Confirmer, Notification, Notifier

logger = structlog.get_logger(__name__)

REQUIRED_FIELDS_MESSAGE = "Please fill in all required fields and select a location on the map."


@dataclass(frozen=True, slots=True)
class DisasterView:
    records: List[Disaster]
    stats: DisasterStats


def validate_draft(draft: DisasterDraft) -> None:
    """提交前校验：必填项与坐标范围，其余业务规则交给后端。"""
    if not draft.type.strip() or not draft.description.strip() or draft.location is None:
        raise ValidationError(REQUIRED_FIELDS_MESSAGE)
    validate_coordinates(draft.location.latitude, draft.location.longitude)


class DisasterService:
    """灾害列表、创建、删除与物资更新。

    每次变更成功后都重新拉取列表，本地状态始终以后端为准。
    """

    def __init__(self, client: ConsoleApiClient, notifier: Notifier) -> None:
        self._client = client
        self._notifier = notifier
        self.disasters: List[Disaster] = []

    async def fetch(self) -> List[Disaster]:
        try:
            disasters = await self._client.list_disasters()
        except ConsoleApiError as exc:
            logger.warning("disasters_fetch_failed", error=str(exc))
            self._notifier.notify(
                Notification("Error Loading Disasters", str(exc) or "Failed to load disasters", "destructive")
            )
            return list(self.disasters)
        self.disasters = disasters
        logger.info("disasters_fetched", count=len(disasters))
        return list(disasters)

    def view(self, *, search: str = "", type_filter: str = ALL, tab: str = "active") -> DisasterView:
        records = apply_filters(self.disasters, DISASTER_FILTER, search=search, category=type_filter, tab=tab)
        return DisasterView(records=records, stats=disaster_stats(self.disasters))

    async def create(self, draft: DisasterDraft) -> Optional[Disaster]:
        try:
            validate_draft(draft)
        except ValidationError as exc:
            self._notifier.notify(Notification("Validation Error", str(exc), "destructive"))
            return None

        try:
            created = await self._client.create_disaster(draft)
        except ConsoleApiError as exc:
            logger.warning("disaster_create_failed", type=draft.type, error=str(exc))
            self._notifier.notify(
                Notification(
                    "Error Creating Disaster",
                    str(exc) or "Failed to create disaster. Please try again.",
                    "destructive",
                )
            )
            return None

        logger.info("disaster_created", disaster_id=created.id, type=created.type, radius_km=created.radius)
        self._notifier.notify(
            Notification(
                "Disaster Created Successfully",
                f"{draft.type} disaster has been registered and alerts will be sent to affected areas.",
            )
        )
        return created

    async def delete(self, disaster_id: str, disaster_type: str, *, confirm: Confirmer) -> bool:
        prompt = f"Are you sure you want to delete this {disaster_type} disaster? This action cannot be undone."
        if not confirm(prompt):
            logger.info("disaster_delete_declined", disaster_id=disaster_id)
            return False

        try:
            await self._client.delete_disaster(disaster_id)
        except ConsoleApiError as exc:
            logger.warning("disaster_delete_failed", disaster_id=disaster_id, error=str(exc))
            self._notifier.notify(
                Notification("Error Deleting Disaster", str(exc) or "Failed to delete disaster", "destructive")
            )
            return False

        logger.info("disaster_deleted", disaster_id=disaster_id)
        self._notifier.notify(
            Notification("Disaster Deleted", f"{disaster_type} disaster has been successfully removed.")
        )
        await self.fetch()
        return True

    async def update_resources(self, disaster_id: str, resources: DisasterResources) -> Optional[Disaster]:
        try:
            updated = await self._client.update_disaster_resources(disaster_id, resources)
        except ConsoleApiError as exc:
            logger.warning("disaster_resources_update_failed", disaster_id=disaster_id, error=str(exc))
            self._notifier.notify(Notification("Error Updating Resources", str(exc), "destructive"))
            return None

        self._notifier.notify(
            Notification("Resources Updated", f"Resources for {updated.type} disaster now total {updated.resources.total()}.")
        )
        await self.fetch()
        return updated
