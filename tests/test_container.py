from __future__ import annotations

import pytest
from structlog.testing import capture_logs

from disaster_console.config import ConsoleConfig
from disaster_console.container import ServiceContainer
from disaster_console.notify import LogNotifier, RecordingNotifier


@pytest.mark.asyncio
async def test_default_notifier_writes_structured_logs(backend) -> None:
    backend.add("GET", "/api/dashboard/stats", status=500, json={"message": "db down"})
    container = ServiceContainer.build(ConsoleConfig.load_from_env(), http_client=backend.http_client())
    assert isinstance(container.notifier, LogNotifier)

    with capture_logs() as logs:
        data = await container.dashboard.fetch()
    await container.aclose()

    assert data is not None and data.is_fallback
    events = [entry for entry in logs if entry["event"] == "console_notification"]
    assert events == [
        {
            "event": "console_notification",
            "log_level": "warning",
            "title": "Error Loading Dashboard",
            "description": "db down",
            "variant": "destructive",
        }
    ]


def test_build_restores_saved_session(token_storage) -> None:
    token_storage.save("persisted")
    notifier = RecordingNotifier()

    container = ServiceContainer.build(ConsoleConfig.load_from_env(), notifier=notifier)

    assert container.session.token == "persisted"
    assert container.notifier is notifier
    with pytest.raises(KeyError):
        container.get("unknown")
