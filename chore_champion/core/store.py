from __future__ import annotations

import json
import logging
import os
from dataclasses import replace
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Optional

from chore_champion.core import state as reducers
from chore_champion.core.difficulty import DifficultyRepository
from chore_champion.core.emoji import EmojiCatalog
from chore_champion.core.notifications import (
    CELEBRATION_SECONDS,
    NotificationKind,
    Notifier,
)
from chore_champion.core.state import Chore, ChoreState, RewardOutcome

logger = logging.getLogger(__name__)

HOME_ENV = "CHORE_CHAMPION_HOME"


def default_state_path() -> Path:
    """~/.chore_champion/state.json, or $CHORE_CHAMPION_HOME/state.json."""
    base = os.environ.get(HOME_ENV)
    base_dir = Path(base).expanduser() if base else Path.home() / ".chore_champion"
    return base_dir / "state.json"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ChoreStore:
    """Holds the chore list and player progress. Persists to disk after every change.

    Each operation runs a pure reducer from ``core.state`` and commits the
    resulting snapshot, which writes the whole ``{chores, level, xp}`` object
    to the state file.
    """

    def __init__(
        self,
        difficulties: DifficultyRepository,
        emoji: EmojiCatalog,
        notifier: Optional[Notifier] = None,
        file_path: Optional[Path] = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._difficulties = difficulties
        self._emoji = emoji
        self._notifier = notifier or Notifier()
        self._clock = clock
        self._file_path = file_path or default_state_path()
        self._state = self._load()

    @property
    def state(self) -> ChoreState:
        return self._state

    @property
    def chores(self) -> tuple[Chore, ...]:
        return self._state.chores

    @property
    def level(self) -> int:
        return self._state.level

    @property
    def xp(self) -> int:
        return self._state.xp

    @property
    def notifier(self) -> Notifier:
        return self._notifier

    @property
    def difficulties(self) -> DifficultyRepository:
        return self._difficulties

    @property
    def file_path(self) -> Path:
        return self._file_path

    def get(self, chore_id: int) -> Optional[Chore]:
        return self._state.get(chore_id)

    def add_chore(self, name: str, difficulty: str) -> Optional[Chore]:
        """Append a new chore. Blank names are ignored and return None."""
        chosen = self._difficulties.get(difficulty)
        new_state, chore = reducers.add_chore(
            self._state,
            name,
            chosen,
            self._emoji.find(name),
            self._clock(),
        )
        if chore is None:
            return None
        self._commit(new_state)
        logger.info("Added chore %s (%s, %s)", chore.id, chore.name, chore.difficulty)
        self._notifier.success(f"New chore added! {chore.emoji}")
        return chore

    def remove_chore(self, chore_id: int) -> None:
        new_state = reducers.remove_chore(self._state, chore_id)
        if new_state is not self._state:
            self._commit(new_state)
            logger.info("Removed chore %s", chore_id)
        self._notifier.success("Chore removed!")

    def apply_reward(self, chore_id: int, raw_points: int, difficulty: str) -> RewardOutcome:
        """Credit a finished game session to the player and to the chore it was played for."""
        new_state, outcome = reducers.apply_reward(
            self._state,
            chore_id,
            raw_points,
            self._difficulties.get(difficulty),
            self._clock(),
        )
        self._commit(new_state)
        logger.info(
            "Rewarded chore %s: %s points (xp=%s, level=%s)",
            chore_id,
            outcome.final_points,
            outcome.xp,
            outcome.level,
        )
        if outcome.leveled_up:
            logger.info("Level up: %s", outcome.level)
            self._notifier.emit(NotificationKind.LEVEL_UP, "Level Up! 🎉", CELEBRATION_SECONDS)
        self._notifier.success(f"Game completed! You earned {outcome.final_points} points!")
        return outcome

    def reset(self) -> None:
        """Clear all chores and progress. Only called after the user confirms."""
        self._commit(ChoreState())
        logger.info("Progress reset")

    def save(self) -> None:
        """Persist current state to disk (e.g. on app exit)."""
        self._save()

    def _commit(self, new_state: ChoreState) -> None:
        self._state = new_state
        self._save()

    def _load(self) -> ChoreState:
        if not self._file_path.exists():
            return ChoreState()
        try:
            payload = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError, OSError) as e:
            logger.warning("Could not load state from %s: %s", self._file_path, e)
            return ChoreState()
        loaded = ChoreState.from_dict(payload)
        known = set(self._difficulties.keys())
        chores = tuple(chore for chore in loaded.chores if chore.difficulty in known)
        if len(chores) != len(loaded.chores):
            logger.warning("Dropped %d chores with unknown difficulty", len(loaded.chores) - len(chores))
            loaded = replace(loaded, chores=chores)
        if any(not chore.emoji for chore in chores):
            chores = tuple(
                chore if chore.emoji else replace(chore, emoji=self._emoji.find(chore.name))
                for chore in chores
            )
            loaded = replace(loaded, chores=chores)
        return loaded

    def _save(self) -> None:
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text(
                json.dumps(self._state.to_dict(), indent=2, ensure_ascii=False),
                encoding="utf-8",
            )
        except OSError as e:
            logger.warning("Could not save state to %s: %s", self._file_path, e)
