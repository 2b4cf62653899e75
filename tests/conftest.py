"""Shared fixtures: a manual scheduler, a fake clock and a temp-file store."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Callable, List, Optional

import pytest

from chore_champion.core.difficulty import DifficultyRepository
from chore_champion.core.emoji import EmojiCatalog
from chore_champion.core.notifications import Notification, Notifier
from chore_champion.core.store import ChoreStore


class FakeHandle:
    def __init__(self, scheduler: "FakeScheduler", callback: Callable[[], None]) -> None:
        self._scheduler = scheduler
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True
        if self in self._scheduler.pending:
            self._scheduler.pending.remove(self)


class FakeScheduler:
    """Collects deferred callbacks; ``advance`` fires them one at a time."""

    def __init__(self) -> None:
        self.pending: List[FakeHandle] = []
        self.delays: List[int] = []

    def __call__(self, delay_ms: int, callback: Callable[[], None]) -> FakeHandle:
        handle = FakeHandle(self, callback)
        self.pending.append(handle)
        self.delays.append(delay_ms)
        return handle

    def advance(self, ticks: int = 1) -> None:
        for _ in range(ticks):
            if not self.pending:
                return
            handle = self.pending.pop(0)
            handle.callback()


class FakeClock:
    def __init__(self, start: Optional[datetime] = None) -> None:
        self.now = start or datetime(2026, 3, 1, 9, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now = self.now + timedelta(**kwargs)


@pytest.fixture()
def scheduler() -> FakeScheduler:
    return FakeScheduler()


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture(scope="session")
def difficulties() -> DifficultyRepository:
    return DifficultyRepository()


@pytest.fixture(scope="session")
def emoji() -> EmojiCatalog:
    return EmojiCatalog()


@pytest.fixture()
def notifications() -> List[Notification]:
    return []


@pytest.fixture()
def state_file(tmp_path: Path) -> Path:
    return tmp_path / "state.json"


@pytest.fixture()
def store(
    state_file: Path,
    difficulties: DifficultyRepository,
    emoji: EmojiCatalog,
    clock: FakeClock,
    notifications: List[Notification],
) -> ChoreStore:
    """ChoreStore backed by a temp file so tests don't touch ~/.chore_champion."""
    notifier = Notifier()
    notifier.subscribe(notifications.append)
    return ChoreStore(
        difficulties=difficulties,
        emoji=emoji,
        notifier=notifier,
        file_path=state_file,
        clock=clock,
    )
