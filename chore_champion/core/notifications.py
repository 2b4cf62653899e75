from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, List

CELEBRATION_SECONDS = 5.0
TOAST_SECONDS = 3.0


class NotificationKind(str, Enum):
    SUCCESS = "success"
    LEVEL_UP = "level_up"


@dataclass(frozen=True)
class Notification:
    kind: NotificationKind
    message: str
    duration_seconds: float = TOAST_SECONDS


Listener = Callable[[Notification], None]


class Notifier:
    """Delivers user-facing notifications to subscribed listeners, in order."""

    def __init__(self) -> None:
        self._listeners: List[Listener] = []

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def emit(
        self,
        kind: NotificationKind,
        message: str,
        duration_seconds: float = TOAST_SECONDS,
    ) -> Notification:
        notification = Notification(kind=kind, message=message, duration_seconds=duration_seconds)
        for listener in list(self._listeners):
            listener(notification)
        return notification

    def success(self, message: str) -> Notification:
        return self.emit(NotificationKind.SUCCESS, message)
