"""Data models used by the UI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from chore_champion.core.difficulty import Difficulty
from chore_champion.core.state import XP_PER_LEVEL, Chore, level_percent, xp_into_level


@dataclass
class ChoreCardState:
    """Display state for one row of the chore list."""

    chore: Chore
    difficulty: Difficulty

    @property
    def title(self) -> str:
        return f"{self.chore.emoji} {self.chore.name}"

    @property
    def subtitle(self) -> str:
        return f"{self.difficulty.key.upper()} • {self.difficulty.seconds}s"

    @property
    def streak_badge(self) -> Optional[str]:
        # A single completion is not a streak yet
        if self.chore.streak > 1:
            return f"🔥 {self.chore.streak} day streak!"
        return None


@dataclass
class ProgressView:
    level: int
    xp: int

    @property
    def heading(self) -> str:
        return f"Level {self.level}"

    @property
    def percent(self) -> float:
        return level_percent(self.xp)

    @property
    def caption(self) -> str:
        return f"XP: {xp_into_level(self.xp)} / {XP_PER_LEVEL}"


def points_preview(points: int, multiplier: int) -> str:
    return f"Points: {points} × {multiplier} = {points * multiplier}"
