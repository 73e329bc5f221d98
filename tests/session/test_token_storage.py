from __future__ import annotations

import os
import stat
from pathlib import Path

from disaster_console.models import AdminProfile
from disaster_console.session import TokenStorage


def test_save_and_load_round_trip(tmp_path: Path) -> None:
    storage = TokenStorage(tmp_path / "nested" / "session.json")
    admin = AdminProfile(id="a-1", name="Ops", email="ops@example.org")

    storage.save("tok", admin)

    assert storage.load_token() == "tok"
    assert storage.load_admin() == admin
    assert stat.S_IMODE(os.stat(storage.path).st_mode) == 0o600
    assert not storage.path.with_suffix(".json.tmp").exists()


def test_missing_or_corrupted_file_reads_as_empty(tmp_path: Path) -> None:
    storage = TokenStorage(tmp_path / "session.json")
    assert storage.load_token() is None
    assert storage.load_admin() is None

    storage.path.write_text("{not json", encoding="utf-8")
    assert storage.load_token() is None

    storage.path.write_text('{"adminToken": "t", "admin": {"id": 1}}', encoding="utf-8")
    assert storage.load_token() == "t"
    assert storage.load_admin() is None


def test_clear_is_idempotent(tmp_path: Path) -> None:
    storage = TokenStorage(tmp_path / "session.json")
    storage.save("tok")

    storage.clear()
    storage.clear()

    assert storage.load_token() is None
