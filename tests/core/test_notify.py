from __future__ import annotations

import io

import pytest

from disaster_console.notify import (
    ConsoleNotifier,
    Notification,
    RecordingNotifier,
    always_confirm,
    never_confirm,
    prompt_confirm,
)


def test_console_notifier_routes_errors_to_error_stream() -> None:
    out, err = io.StringIO(), io.StringIO()
    notifier = ConsoleNotifier(stream=out, error_stream=err)

    notifier.notify(Notification("Disaster Deleted", "Flood disaster has been successfully removed."))
    notifier.notify(Notification("Error Loading Disasters", "boom", "destructive"))

    assert out.getvalue() == "* Disaster Deleted: Flood disaster has been successfully removed.\n"
    assert err.getvalue() == "! Error Loading Disasters: boom\n"


def test_recording_notifier_keeps_order() -> None:
    notifier = RecordingNotifier()
    assert notifier.last is None

    notifier.notify(Notification("a", "1"))
    notifier.notify(Notification("b", "2", "destructive"))

    assert notifier.titles == ["a", "b"]
    assert notifier.last is not None and notifier.last.is_error


def test_static_confirmers() -> None:
    assert always_confirm("sure?") is True
    assert never_confirm("sure?") is False


@pytest.mark.parametrize(("answer", "expected"), [("y", True), ("YES", True), ("", False), ("no", False)])
def test_prompt_confirm(monkeypatch: pytest.MonkeyPatch, answer: str, expected: bool) -> None:
    monkeypatch.setattr("builtins.input", lambda prompt: answer)
    assert prompt_confirm("Delete?") is expected


def test_prompt_confirm_treats_eof_as_decline(monkeypatch: pytest.MonkeyPatch) -> None:
    def raise_eof(prompt: str) -> str:
        raise EOFError

    monkeypatch.setattr("builtins.input", raise_eof)
    assert prompt_confirm("Delete?") is False
