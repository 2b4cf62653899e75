from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Tuple

import yaml

from chore_champion.core.difficulty import DATA_DIR

DEFAULT_EMOJI = "✨"


class EmojiCatalog:
    """Ordered keyword -> glyph lookup for chore names.

    Keywords are tried in the order they are declared in ``emoji.yaml`` and
    the first one found as a substring of the lowercased name wins, so
    "Wash the dishes" resolves through ``wash`` rather than ``dishes``.
    """

    def __init__(self, path: Optional[Path] = None) -> None:
        self._path = path or DATA_DIR / "emoji.yaml"
        self._default, self._keywords = self._load()

    @property
    def default(self) -> str:
        return self._default

    def keywords(self) -> List[str]:
        return [keyword for keyword, _ in self._keywords]

    def find(self, chore_name: str) -> str:
        lowered = chore_name.lower()
        for keyword, glyph in self._keywords:
            if keyword in lowered:
                return glyph
        return self._default

    def _load(self) -> Tuple[str, List[Tuple[str, str]]]:
        if not self._path.exists():
            raise FileNotFoundError(f"Emoji catalogue not found: {self._path}")
        raw = yaml.safe_load(self._path.read_text(encoding="utf-8"))
        if not raw or not isinstance(raw, dict):
            raise ValueError(f"{self._path.name}: expected 'default' and 'keywords'")

        default = raw.get("default", DEFAULT_EMOJI)
        if not default or not isinstance(default, str):
            raise ValueError(f"{self._path.name}: invalid 'default'")

        mapping = raw.get("keywords")
        if not isinstance(mapping, dict) or not mapping:
            raise ValueError(f"{self._path.name}: 'keywords' must be a non-empty mapping")

        # safe_load keeps document order for mappings
        keywords = [
            (str(keyword).strip().lower(), str(glyph))
            for keyword, glyph in mapping.items()
            if str(keyword).strip()
        ]
        return default, keywords
