"""Chore list and player progress as immutable values plus pure reducers."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Tuple

from chore_champion.core.difficulty import Difficulty

logger = logging.getLogger(__name__)

XP_PER_LEVEL = 1000
SECONDS_PER_DAY = 60 * 60 * 24


@dataclass(frozen=True)
class Chore:
    id: int
    name: str
    difficulty: str
    emoji: str
    last_completed: Optional[datetime] = None
    streak: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "difficulty": self.difficulty,
            "last_completed": self.last_completed.isoformat() if self.last_completed else None,
            "streak": self.streak,
            "emoji": self.emoji,
        }

    @classmethod
    def from_dict(cls, value: Dict[str, Any]) -> "Chore":
        """Build a chore from its stored form. Raises on malformed entries."""
        last = value.get("last_completed")
        last_completed = None
        if last:
            last_completed = datetime.fromisoformat(str(last))
            if last_completed.tzinfo is None:
                last_completed = last_completed.replace(tzinfo=timezone.utc)
        streak = int(value.get("streak", 0))
        if streak < 0:
            raise ValueError(f"negative streak: {streak}")
        return cls(
            id=int(value["id"]),
            name=str(value["name"]),
            difficulty=str(value["difficulty"]),
            emoji=str(value.get("emoji", "")),
            last_completed=last_completed,
            streak=streak,
        )


@dataclass(frozen=True)
class ChoreState:
    chores: Tuple[Chore, ...] = ()
    level: int = 1
    xp: int = 0

    def get(self, chore_id: int) -> Optional[Chore]:
        for chore in self.chores:
            if chore.id == chore_id:
                return chore
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "chores": [chore.to_dict() for chore in self.chores],
            "level": self.level,
            "xp": self.xp,
        }

    @classmethod
    def from_dict(cls, payload: Any) -> "ChoreState":
        """Restore a state, dropping whatever cannot be read."""
        if not isinstance(payload, dict):
            logger.warning("Ignoring stored state of type %s", type(payload).__name__)
            return cls()

        chores = []
        seen = set()
        raw_chores = payload.get("chores", [])
        if not isinstance(raw_chores, list):
            logger.warning("Ignoring stored chores of type %s", type(raw_chores).__name__)
            raw_chores = []
        for entry in raw_chores:
            try:
                chore = Chore.from_dict(entry)
            except (AttributeError, KeyError, TypeError, ValueError) as e:
                logger.warning("Skipping malformed chore %r: %s", entry, e)
                continue
            if chore.id in seen:
                logger.warning("Skipping duplicate chore id %s", chore.id)
                continue
            seen.add(chore.id)
            chores.append(chore)

        try:
            xp = max(0, int(payload.get("xp", 0)))
        except (TypeError, ValueError):
            xp = 0
        level = level_for_xp(xp)
        stored = payload.get("level")
        if stored is not None and stored != level:
            logger.warning("Stored level %r does not match xp %s, using %s", stored, xp, level)
        return cls(chores=tuple(chores), level=level, xp=xp)


@dataclass(frozen=True)
class RewardOutcome:
    final_points: int
    xp: int
    level: int
    leveled_up: bool
    chore: Optional[Chore] = field(default=None)


def level_for_xp(xp: int) -> int:
    return xp // XP_PER_LEVEL + 1


def xp_into_level(xp: int) -> int:
    """XP earned since the last level boundary (0-999)."""
    return xp % XP_PER_LEVEL


def level_percent(xp: int) -> float:
    return xp_into_level(xp) / XP_PER_LEVEL * 100.0


def next_streak(chore: Chore, now: datetime) -> int:
    """Streak after completing *chore* at *now*.

    Within one whole day of the previous completion the streak grows by one;
    any longer gap (or a first completion) starts over at 1.
    """
    if chore.last_completed is None:
        return 1
    elapsed = (now - chore.last_completed).total_seconds()
    days = int(elapsed // SECONDS_PER_DAY)
    if days <= 1:
        return chore.streak + 1
    return 1


def new_chore_id(state: ChoreState, now: datetime) -> int:
    candidate = int(now.timestamp() * 1000)
    taken = {chore.id for chore in state.chores}
    if candidate in taken:
        candidate = max(taken) + 1
    return candidate


def add_chore(
    state: ChoreState,
    name: str,
    difficulty: Difficulty,
    emoji: str,
    now: datetime,
) -> Tuple[ChoreState, Optional[Chore]]:
    if not name.strip():
        return state, None
    chore = Chore(
        id=new_chore_id(state, now),
        name=name,
        difficulty=difficulty.key,
        emoji=emoji,
    )
    return replace(state, chores=state.chores + (chore,)), chore


def remove_chore(state: ChoreState, chore_id: int) -> ChoreState:
    remaining = tuple(chore for chore in state.chores if chore.id != chore_id)
    if len(remaining) == len(state.chores):
        return state
    return replace(state, chores=remaining)


def apply_reward(
    state: ChoreState,
    chore_id: int,
    raw_points: int,
    difficulty: Difficulty,
    now: datetime,
) -> Tuple[ChoreState, RewardOutcome]:
    if raw_points < 0:
        raise ValueError(f"raw_points must be non-negative, got {raw_points}")
    final_points = raw_points * difficulty.multiplier
    xp = state.xp + final_points
    level = level_for_xp(xp)
    leveled_up = level > state.level

    updated: Optional[Chore] = None
    chores = []
    for chore in state.chores:
        if chore.id == chore_id:
            updated = replace(chore, last_completed=now, streak=next_streak(chore, now))
            chore = updated
        chores.append(chore)

    new_state = ChoreState(chores=tuple(chores), level=level, xp=xp)
    outcome = RewardOutcome(
        final_points=final_points,
        xp=xp,
        level=level,
        leveled_up=leveled_up,
        chore=updated,
    )
    return new_state, outcome
