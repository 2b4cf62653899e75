"""QTimer-backed scheduler for the core countdown."""

from __future__ import annotations

from typing import Callable, Optional

from PySide6.QtCore import QObject, QTimer

from chore_champion.core.countdown import Scheduler


class QtTimerHandle:
    def __init__(self, timer: QTimer) -> None:
        self._timer: Optional[QTimer] = timer

    def cancel(self) -> None:
        if self._timer is None:
            return
        self._timer.stop()
        self._timer.deleteLater()
        self._timer = None


def qt_scheduler(parent: QObject) -> Scheduler:
    """Return a scheduler that runs each callback once via a single-shot QTimer."""

    def schedule(delay_ms: int, callback: Callable[[], None]) -> QtTimerHandle:
        timer = QTimer(parent)
        timer.setSingleShot(True)
        timer.timeout.connect(callback)
        timer.timeout.connect(timer.deleteLater)
        timer.start(delay_ms)
        return QtTimerHandle(timer)

    return schedule
