"""Tests for the YAML-backed difficulty table and emoji catalogue."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from chore_champion.core.difficulty import Difficulty, DifficultyRepository
from chore_champion.core.emoji import DEFAULT_EMOJI, EmojiCatalog


def _write_yaml(path: Path, data) -> Path:
    path.write_text(yaml.dump(data, allow_unicode=True, sort_keys=False), encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# Bundled difficulty table
# ---------------------------------------------------------------------------

class TestBundledDifficulties:
    def test_order(self, difficulties: DifficultyRepository):
        assert difficulties.keys() == ["easy", "medium", "hard"]

    @pytest.mark.parametrize(
        "key, seconds, multiplier",
        [("easy", 45, 1), ("medium", 30, 2), ("hard", 15, 3)],
    )
    def test_values(self, difficulties: DifficultyRepository, key, seconds, multiplier):
        d = difficulties.get(key)
        assert d.seconds == seconds
        assert d.multiplier == multiplier
        assert d.color.startswith("#")

    def test_label(self, difficulties: DifficultyRepository):
        assert difficulties.get("easy").label == "Easy (45s)"

    def test_unknown_key(self, difficulties: DifficultyRepository):
        with pytest.raises(ValueError):
            difficulties.get("nightmare")

    def test_frozen(self, difficulties: DifficultyRepository):
        with pytest.raises(AttributeError):
            difficulties.get("easy").seconds = 1  # type: ignore[misc]


class TestDifficultyFile:
    def test_custom_file(self, tmp_path: Path):
        path = _write_yaml(tmp_path / "d.yaml", {"quick": {"seconds": 5, "multiplier": 4, "color": "#000000"}})
        repo = DifficultyRepository(path)
        assert repo.all() == [Difficulty(key="quick", seconds=5, multiplier=4, color="#000000")]

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            DifficultyRepository(tmp_path / "missing.yaml")

    def test_empty_file(self, tmp_path: Path):
        path = tmp_path / "d.yaml"
        path.write_text("", encoding="utf-8")
        with pytest.raises(ValueError):
            DifficultyRepository(path)

    @pytest.mark.parametrize(
        "entry",
        [
            {"seconds": 0, "multiplier": 1, "color": "#fff000"},
            {"seconds": 10, "multiplier": -1, "color": "#fff000"},
            {"seconds": 10, "multiplier": 1},
            "fast",
        ],
    )
    def test_invalid_entries(self, tmp_path: Path, entry):
        path = _write_yaml(tmp_path / "d.yaml", {"bad": entry})
        with pytest.raises(ValueError):
            DifficultyRepository(path)


# ---------------------------------------------------------------------------
# Emoji lookup
# ---------------------------------------------------------------------------

class TestBundledEmoji:
    def test_first_keyword_wins(self, emoji: EmojiCatalog):
        # "wash" is declared before "dishes"
        assert emoji.find("Wash the dishes") == "🧽"

    def test_case_insensitive(self, emoji: EmojiCatalog):
        assert emoji.find("VACUUM LIVING ROOM") == "🧹"

    def test_substring_match(self, emoji: EmojiCatalog):
        assert emoji.find("Homework time") == "📚"

    def test_default(self, emoji: EmojiCatalog):
        assert emoji.find("Call grandma") == DEFAULT_EMOJI
        assert emoji.default == "✨"

    def test_empty_name(self, emoji: EmojiCatalog):
        assert emoji.find("") == DEFAULT_EMOJI

    def test_declared_order_kept(self, emoji: EmojiCatalog):
        keywords = emoji.keywords()
        assert keywords[:6] == ["clean", "vacuum", "dust", "sweep", "mop", "wash"]
        assert keywords.index("cook") < keywords.index("cooking")
        assert keywords.index("bed") < keywords.index("bedroom")
        assert keywords[-1] == "gym"

    def test_earlier_keyword_shadows_later(self, emoji: EmojiCatalog):
        # "cook" precedes "cooking", so both resolve through "cook"
        assert emoji.find("Cooking dinner") == emoji.find("cook")


class TestEmojiFile:
    def test_custom_file(self, tmp_path: Path):
        path = _write_yaml(tmp_path / "e.yaml", {"default": "?", "keywords": {"b": "B", "a": "A"}})
        catalog = EmojiCatalog(path)
        assert catalog.keywords() == ["b", "a"]
        assert catalog.find("ab") == "B"
        assert catalog.find("zzz") == "?"

    def test_keywords_lowercased(self, tmp_path: Path):
        path = _write_yaml(tmp_path / "e.yaml", {"keywords": {"Mop": "M"}})
        catalog = EmojiCatalog(path)
        assert catalog.find("mop the hall") == "M"
        assert catalog.default == DEFAULT_EMOJI

    def test_missing_keywords(self, tmp_path: Path):
        path = _write_yaml(tmp_path / "e.yaml", {"default": "?"})
        with pytest.raises(ValueError):
            EmojiCatalog(path)

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            EmojiCatalog(tmp_path / "missing.yaml")
