from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Optional

from chore_champion.core.countdown import Countdown, Scheduler
from chore_champion.core.state import Chore, RewardOutcome
from chore_champion.core.store import ChoreStore

logger = logging.getLogger(__name__)


class SessionState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    ENDED = "ended"


class GameSession:
    """One timed point-scoring round for a single chore.

    ``start`` arms a countdown sized by the chore's difficulty; every
    ``score_point`` adds one raw point. The round ends when the countdown
    reaches zero or on ``end()``; either way the points are credited through
    ``ChoreStore.apply_reward`` exactly once and the session returns to idle.
    """

    def __init__(
        self,
        store: ChoreStore,
        scheduler: Scheduler,
        on_tick: Optional[Callable[[int], None]] = None,
        on_finished: Optional[Callable[[RewardOutcome], None]] = None,
    ) -> None:
        self._store = store
        self._on_tick = on_tick
        self._on_finished = on_finished
        self._countdown = Countdown(scheduler, on_tick=self._handle_tick, on_expired=self.end)
        self._state = SessionState.IDLE
        self._active_chore: Optional[Chore] = None
        self._points = 0

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_running(self) -> bool:
        return self._state is SessionState.RUNNING

    @property
    def active_chore(self) -> Optional[Chore]:
        return self._active_chore

    @property
    def remaining_seconds(self) -> int:
        return self._countdown.remaining

    @property
    def points(self) -> int:
        return self._points

    @property
    def multiplier(self) -> int:
        if self._active_chore is None:
            return 1
        return self._store.difficulties.get(self._active_chore.difficulty).multiplier

    @property
    def projected_points(self) -> int:
        """Points the session would award if it ended now."""
        return self._points * self.multiplier

    def start(self, chore: Chore) -> bool:
        if self.is_running:
            logger.warning("Ignoring start for chore %s: a session is already running", chore.id)
            return False
        seconds = self._store.difficulties.get(chore.difficulty).seconds
        self._active_chore = chore
        self._points = 0
        self._state = SessionState.RUNNING
        logger.info("Session started for chore %s (%ss)", chore.id, seconds)
        self._store.notifier.success("Game started! Good luck!")
        self._countdown.start(seconds)
        return True

    def score_point(self) -> None:
        if not self.is_running:
            return
        self._points += 1

    def end(self) -> Optional[RewardOutcome]:
        """Finish the running session and credit its points. No-op when idle."""
        if not self.is_running or self._active_chore is None:
            return None
        self._countdown.cancel()
        self._state = SessionState.ENDED
        chore = self._active_chore
        outcome = self._store.apply_reward(chore.id, self._points, chore.difficulty)
        self._reset()
        if self._on_finished is not None:
            self._on_finished(outcome)
        return outcome

    def abort(self) -> None:
        """Stop without a reward, e.g. when the window is torn down mid-game."""
        self._countdown.cancel()
        if self.is_running:
            logger.info("Session aborted for chore %s", self._active_chore.id)
        self._reset()

    def _reset(self) -> None:
        self._state = SessionState.IDLE
        self._active_chore = None

    def _handle_tick(self, remaining: int) -> None:
        if self._on_tick is not None:
            self._on_tick(remaining)
