# Copyright 2025 msq
"""用户可见的通知（对应界面 toast）与危险操作确认。"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Callable, List, Literal, Optional, Protocol, TextIO

import structlog

logger = structlog.get_logger(__name__)

Variant = Literal["default", "destructive"]

Confirmer = Callable[[str], bool]


@dataclass(frozen=True, slots=True)
class Notification:
    title: str
    description: str
    variant: Variant = "default"

    @property
    def is_error(self) -> bool:
        return self.variant == "destructive"


class Notifier(Protocol):
    def notify(self, notification: Notification) -> None: ...


class LogNotifier:
    """仅写结构化日志，适合无人值守场景。"""

    def notify(self, notification: Notification) -> None:
        log = logger.warning if notification.is_error else logger.info
        log(
            "console_notification",
            title=notification.title,
            description=notification.description,
            variant=notification.variant,
        )


class ConsoleNotifier:
    """CLI 使用：错误写 stderr，其余写 stdout。"""

    def __init__(self, *, stream: Optional[TextIO] = None, error_stream: Optional[TextIO] = None) -> None:
        self._stream = stream
        self._error_stream = error_stream

    def notify(self, notification: Notification) -> None:
        if notification.is_error:
            target = self._error_stream or sys.stderr
            prefix = "!"
        else:
            target = self._stream or sys.stdout
            prefix = "*"
        print(f"{prefix} {notification.title}: {notification.description}", file=target)


class RecordingNotifier:
    """保存全部通知，便于测试断言。"""

    def __init__(self) -> None:
        self.notifications: List[Notification] = []

    def notify(self, notification: Notification) -> None:
        self.notifications.append(notification)

    @property
    def titles(self) -> List[str]:
        return [item.title for item in self.notifications]

    @property
    def last(self) -> Optional[Notification]:
        return self.notifications[-1] if self.notifications else None


def always_confirm(prompt: str) -> bool:
    return True


def never_confirm(prompt: str) -> bool:
    return False


def prompt_confirm(prompt: str) -> bool:
    """交互式确认，仅 y/yes 视为同意。"""
    try:
        answer = input(f"{prompt} [y/N] ")
    except EOFError:
        return False
    return answer.strip().lower() in {"y", "yes"}
