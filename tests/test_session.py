"""Tests for chore_champion.core.session – the timed game state machine."""

from __future__ import annotations

import pytest

from chore_champion.core.session import GameSession, SessionState
from chore_champion.core.store import ChoreStore


@pytest.fixture()
def finished() -> list:
    return []


@pytest.fixture()
def session(store: ChoreStore, scheduler, finished) -> GameSession:
    return GameSession(store, scheduler, on_finished=finished.append)


# ---------------------------------------------------------------------------
# Idle
# ---------------------------------------------------------------------------

class TestIdle:
    def test_initial_state(self, session: GameSession):
        assert session.state is SessionState.IDLE
        assert session.active_chore is None
        assert session.points == 0

    def test_score_point_ignored(self, session: GameSession):
        session.score_point()
        assert session.points == 0

    def test_end_ignored(self, session: GameSession, store: ChoreStore, finished):
        assert session.end() is None
        assert finished == []
        assert store.xp == 0


# ---------------------------------------------------------------------------
# Start
# ---------------------------------------------------------------------------

class TestStart:
    @pytest.mark.parametrize("difficulty, seconds", [("easy", 45), ("medium", 30), ("hard", 15)])
    def test_start_seconds(self, session: GameSession, store: ChoreStore, difficulty, seconds):
        chore = store.add_chore("Vacuum", difficulty)
        assert session.start(chore)
        assert session.remaining_seconds == seconds
        assert session.state is SessionState.RUNNING
        assert session.active_chore == chore

    def test_points_reset(self, session: GameSession, store: ChoreStore):
        chore = store.add_chore("Vacuum", "easy")
        session.start(chore)
        session.score_point()
        session.end()
        session.start(chore)
        assert session.points == 0

    def test_announces_start(self, session: GameSession, store: ChoreStore, notifications):
        session.start(store.add_chore("Vacuum", "easy"))
        assert notifications[-1].message == "Game started! Good luck!"

    def test_refuses_second_start(self, session: GameSession, store: ChoreStore):
        first = store.add_chore("Vacuum", "easy")
        session.start(first)
        assert session.start(first) is False
        assert session.active_chore == first


# ---------------------------------------------------------------------------
# Running
# ---------------------------------------------------------------------------

class TestRunning:
    def test_score_point(self, session: GameSession, store: ChoreStore):
        session.start(store.add_chore("Vacuum", "medium"))
        for _ in range(3):
            session.score_point()
        assert session.points == 3
        assert session.multiplier == 2
        assert session.projected_points == 6

    def test_tick_decrements(self, session: GameSession, store: ChoreStore, scheduler):
        session.start(store.add_chore("Vacuum", "medium"))
        scheduler.advance(5)
        assert session.remaining_seconds == 25
        assert session.is_running

    def test_on_tick_callback(self, store: ChoreStore, scheduler):
        seen = []
        session = GameSession(store, scheduler, on_tick=seen.append)
        session.start(store.add_chore("Vacuum", "hard"))
        scheduler.advance(3)
        assert seen == [14, 13, 12]


# ---------------------------------------------------------------------------
# Ending
# ---------------------------------------------------------------------------

class TestEnding:
    def test_expires_after_all_ticks(self, session: GameSession, store: ChoreStore, scheduler, finished):
        session.start(store.add_chore("Vacuum", "medium"))
        scheduler.advance(29)
        assert session.is_running
        scheduler.advance(1)
        assert session.state is SessionState.IDLE
        assert len(finished) == 1

    def test_expiry_happens_once(self, session: GameSession, store: ChoreStore, scheduler, finished):
        session.start(store.add_chore("Vacuum", "medium"))
        scheduler.advance(100)
        session.end()
        assert len(finished) == 1

    def test_expiry_applies_reward(self, session: GameSession, store: ChoreStore, scheduler):
        chore = store.add_chore("Vacuum", "hard")
        session.start(chore)
        for _ in range(5):
            session.score_point()
        scheduler.advance(15)
        assert store.xp == 15
        assert store.get(chore.id).streak == 1

    def test_early_end(self, session: GameSession, store: ChoreStore, scheduler, finished):
        chore = store.add_chore("Vacuum", "easy")
        session.start(chore)
        session.score_point()
        scheduler.advance(10)
        outcome = session.end()
        assert outcome.final_points == 1
        assert finished == [outcome]
        assert session.state is SessionState.IDLE
        assert session.active_chore is None
        assert scheduler.pending == []

    def test_no_tick_after_end(self, session: GameSession, store: ChoreStore, scheduler, finished):
        session.start(store.add_chore("Vacuum", "easy"))
        session.end()
        scheduler.advance(100)
        assert len(finished) == 1

    def test_score_after_end_ignored(self, session: GameSession, store: ChoreStore):
        session.start(store.add_chore("Vacuum", "easy"))
        session.score_point()
        session.end()
        session.score_point()
        assert session.points == 1

    def test_chore_removed_mid_game(self, session: GameSession, store: ChoreStore):
        chore = store.add_chore("Vacuum", "medium")
        session.start(chore)
        session.score_point()
        store.remove_chore(chore.id)
        outcome = session.end()
        assert outcome.chore is None
        assert store.xp == 2


# ---------------------------------------------------------------------------
# Abort
# ---------------------------------------------------------------------------

class TestAbort:
    def test_abort_without_reward(self, session: GameSession, store: ChoreStore, scheduler, finished):
        session.start(store.add_chore("Vacuum", "easy"))
        session.score_point()
        session.abort()
        scheduler.advance(100)
        assert session.state is SessionState.IDLE
        assert finished == []
        assert store.xp == 0

    def test_abort_when_idle(self, session: GameSession):
        session.abort()
        assert session.state is SessionState.IDLE
