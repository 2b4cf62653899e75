from __future__ import annotations

from typing import Callable, Optional, Protocol

TICK_INTERVAL_MS = 1000


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


# (delay_ms, callback) -> handle for the pending callback
Scheduler = Callable[[int, Callable[[], None]], TimerHandle]


class Countdown:
    """Whole-second countdown built from one deferred callback per tick.

    Only one callback is ever pending; it is rescheduled after each tick and
    dropped on ``cancel()``, so a stopped countdown never fires again.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        on_tick: Optional[Callable[[int], None]] = None,
        on_expired: Optional[Callable[[], None]] = None,
        interval_ms: int = TICK_INTERVAL_MS,
    ) -> None:
        self._scheduler = scheduler
        self._on_tick = on_tick
        self._on_expired = on_expired
        self._interval_ms = interval_ms
        self._remaining = 0
        self._running = False
        self._handle: Optional[TimerHandle] = None

    @property
    def remaining(self) -> int:
        return self._remaining

    @property
    def running(self) -> bool:
        return self._running

    def start(self, seconds: int) -> None:
        self.cancel()
        self._remaining = max(0, int(seconds))
        self._running = True
        if self._remaining == 0:
            self._expire()
            return
        self._schedule_next()

    def cancel(self) -> None:
        self._running = False
        if self._handle is not None:
            handle, self._handle = self._handle, None
            handle.cancel()

    def _schedule_next(self) -> None:
        self._handle = self._scheduler(self._interval_ms, self._on_timeout)

    def _on_timeout(self) -> None:
        self._handle = None
        if not self._running:
            return
        self._remaining -= 1
        if self._on_tick is not None:
            self._on_tick(self._remaining)
        if not self._running:
            # on_tick may have cancelled us
            return
        if self._remaining <= 0:
            self._expire()
        else:
            self._schedule_next()

    def _expire(self) -> None:
        self._running = False
        if self._on_expired is not None:
            self._on_expired()
