from __future__ import annotations

import json
from pathlib import Path

import pytest

from disaster_console.cli import _apply_overrides, build_parser, main
from disaster_console.config import ConsoleConfig
from disaster_console.session import TokenStorage

STATS = "/api/danger-zone/stats"


def test_parser_requires_command() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_login_success_persists_session(backend, capsys, isolated_env: Path) -> None:
    backend.add("POST", "/api/admin/login", json={"success": True, "token": "jwt"})

    code = main(["login", "--email", "ops@example.org", "--password", "pw"], http_client=backend.http_client())

    assert code == 0
    assert "Logged in as ops@example.org" in capsys.readouterr().out
    assert TokenStorage(isolated_env).load_token() == "jwt"


def test_login_failure_exit_code(backend, capsys, isolated_env: Path) -> None:
    backend.add("POST", "/api/admin/login", status=401, json={"message": "bad"})

    code = main(["login", "--email", "ops@example.org", "--password", "x"], http_client=backend.http_client())

    assert code == 1
    assert "Invalid email or password" in capsys.readouterr().err
    assert not isolated_env.exists()


def test_whoami_and_logout(capsys, isolated_env: Path) -> None:
    assert main(["whoami"]) == 1

    TokenStorage(isolated_env).save("jwt")
    assert main(["--json", "whoami"]) == 0
    assert json.loads(capsys.readouterr().out) == {"authenticated": True, "admin": None}

    assert main(["logout"]) == 0
    assert not isolated_env.exists()


def test_disasters_list_json(backend, capsys, make_disaster) -> None:
    backend.add(
        "GET",
        "/api/disasters",
        json=[make_disaster("a", "Flood", radius=11.0), make_disaster("b", "Fire", active=False)],
    )

    code = main(["--json", "disasters", "list", "--tab", "all"], http_client=backend.http_client())

    assert code == 0
    payload = json.loads(capsys.readouterr().out)
    assert [r["id"] for r in payload["records"]] == ["a", "b"]
    assert payload["records"][0]["severity"] == "critical"
    assert payload["stats"] == {"total": 2, "active": 1, "inactive": 1, "total_radius": 16.0}


def test_disasters_delete_declined_at_prompt(backend, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("builtins.input", lambda prompt: "n")

    code = main(["disasters", "delete", "d-1", "--type", "Flood"], http_client=backend.http_client())

    assert code == 1
    assert backend.requests == []


def test_disasters_delete_with_yes(backend, capsys, make_disaster) -> None:
    backend.add("DELETE", "/api/disasters/d-1", json={"message": "Disaster deleted"})
    backend.add("GET", "/api/disasters", json=[make_disaster("d-2")])

    code = main(["disasters", "delete", "d-1", "--type", "Flood", "--yes"], http_client=backend.http_client())

    assert code == 0
    assert "* Disaster Deleted: Flood disaster has been successfully removed." in capsys.readouterr().out


def test_disasters_create_validation_failure(backend, capsys) -> None:
    code = main(
        ["disasters", "create", "--type", "Flood", "--description", "river"],
        http_client=backend.http_client(),
    )

    assert code == 1
    assert "! Validation Error" in capsys.readouterr().err
    assert backend.requests == []


def test_dashboard_failure_shows_sample_data(backend, capsys) -> None:
    backend.add("GET", "/api/dashboard/stats", error="refused")

    code = main(["dashboard"], http_client=backend.http_client())

    captured = capsys.readouterr()
    assert code == 1
    assert "(showing sample data)" in captured.out
    assert "active_sos: 127" in captured.out
    assert "! Error Loading Dashboard" in captured.err


def test_volunteers_list_json(capsys) -> None:
    code = main(["--json", "volunteers", "list", "--search", "Delhi", "--filter", "available"])

    assert code == 0
    payload = json.loads(capsys.readouterr().out)
    assert [v["id"] for v in payload["volunteers"]] == ["VOL-001", "VOL-003", "VOL-005"]
    assert payload["stats"]["total"] == 5


def test_zones_list_text(capsys) -> None:
    assert main(["zones", "list", "--filter", "flood"]) == 0

    out = capsys.readouterr().out
    assert "== Zones (1) ==" in out
    assert "DZ-001" in out
    assert "critical: 1" in out


def test_system_reset_requires_login(backend, capsys) -> None:
    code = main(["system", "reset", "--yes"], http_client=backend.http_client())

    assert code == 1
    assert "Authentication Required" in capsys.readouterr().err
    assert backend.requests == []


def test_system_delete_collection(backend, capsys, isolated_env: Path) -> None:
    TokenStorage(isolated_env).save("jwt")
    backend.add(
        "GET",
        STATS,
        json={"success": True, "stats": {"disasters": 1, "users": 0, "volunteers": 0, "locations": 0}},
    )
    backend.add(
        "DELETE",
        "/api/danger-zone/collection/disasters",
        json={"success": True, "message": "Successfully deleted 1 disasters", "deletedCount": 1},
    )

    code = main(["system", "delete-collection", "disasters", "--yes"], http_client=backend.http_client())

    assert code == 0
    assert "Deletion Successful: Successfully deleted 1 disasters" in capsys.readouterr().out
    assert len(backend.calls("GET", STATS)) == 2
    assert backend.calls("DELETE", "/api/danger-zone/collection/disasters")[0].headers["authorization"] == (
        "Bearer jwt"
    )


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("localhost:4000/", "http://localhost:4000"),
        ("https://api.example.org/base/", "https://api.example.org/base"),
    ],
)
def test_api_url_override_is_normalized(raw: str, expected: str) -> None:
    args = build_parser().parse_args(["--api-url", raw, "whoami"])

    config = _apply_overrides(ConsoleConfig.load_from_env(), args)

    assert config.api_base_url == expected
