from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

import yaml

DATA_DIR = Path(__file__).resolve().parent.parent / "data"


@dataclass(frozen=True)
class Difficulty:
    key: str
    seconds: int
    multiplier: int
    color: str

    @property
    def label(self) -> str:
        """Selector label, e.g. ``Medium (30s)``."""
        return f"{self.key.capitalize()} ({self.seconds}s)"


class DifficultyRepository:
    def __init__(self, path: Optional[Path] = None) -> None:
        self._path = path or DATA_DIR / "difficulties.yaml"
        self._difficulties = self._load_difficulties()

    def all(self) -> List[Difficulty]:
        return list(self._difficulties.values())

    def keys(self) -> List[str]:
        return list(self._difficulties)

    def get(self, key: str) -> Difficulty:
        try:
            return self._difficulties[key]
        except KeyError:
            raise ValueError(f"Unknown difficulty: {key!r}") from None

    def _load_difficulties(self) -> Dict[str, Difficulty]:
        if not self._path.exists():
            raise FileNotFoundError(f"Difficulty table not found: {self._path}")

        raw = yaml.safe_load(self._path.read_text(encoding="utf-8"))
        if not raw or not isinstance(raw, dict):
            raise ValueError(f"{self._path.name}: expected a mapping of difficulty keys")

        difficulties: Dict[str, Difficulty] = {}
        for key, value in raw.items():
            if not isinstance(value, dict):
                raise ValueError(f"{self._path.name}: '{key}' must be a mapping")
            seconds = value.get("seconds")
            multiplier = value.get("multiplier")
            color = value.get("color")
            if not isinstance(seconds, int) or seconds <= 0:
                raise ValueError(f"{self._path.name}: '{key}' needs a positive 'seconds'")
            if not isinstance(multiplier, int) or multiplier <= 0:
                raise ValueError(f"{self._path.name}: '{key}' needs a positive 'multiplier'")
            if not color or not isinstance(color, str):
                raise ValueError(f"{self._path.name}: '{key}' missing 'color'")
            difficulties[str(key)] = Difficulty(
                key=str(key),
                seconds=seconds,
                multiplier=multiplier,
                color=color.strip(),
            )
        return difficulties
