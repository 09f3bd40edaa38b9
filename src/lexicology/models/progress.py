"""Learning progress model with JSON persistence."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from lexicology.utils.logging_config import get_logger

logger = get_logger("models.progress")


@dataclass
class LearningProgress:
    """Learned words and the daily learning streak.

    Attributes:
        learned_ids: Stable IDs of words marked learned.
        words_learned: Running count of learned words.
        current_streak: Consecutive days with at least one learned word.
        last_streak_check: ISO date (``YYYY-MM-DD``) of the last streak
            update, empty if never.
    """

    learned_ids: set[str] = field(default_factory=set)
    words_learned: int = 0
    current_streak: int = 0
    last_streak_check: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "learned_ids": sorted(self.learned_ids),
            "words_learned": self.words_learned,
            "current_streak": self.current_streak,
            "last_streak_check": self.last_streak_check,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LearningProgress:
        return cls(
            learned_ids=set(data.get("learned_ids", [])),
            words_learned=data.get("words_learned", 0),
            current_streak=data.get("current_streak", 0),
            last_streak_check=data.get("last_streak_check", ""),
        )

    def save(self, path: Path) -> None:
        """Persist to a JSON file."""
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "w", encoding="utf-8") as fh:
                json.dump(self.to_dict(), fh, ensure_ascii=False, indent=2)
            logger.debug("Learning progress saved to %s", path)
        except OSError as exc:
            logger.warning("Failed to save learning progress: %s", exc)

    @classmethod
    def load(cls, path: Path) -> LearningProgress:
        """Load from a JSON file, returning empty progress if missing or corrupt."""
        if not path.exists():
            return cls()
        try:
            with open(path, "r", encoding="utf-8") as fh:
                data = json.load(fh)
            progress = cls.from_dict(data)
            logger.debug(
                "Learning progress loaded from %s (%d learned)", path, len(progress.learned_ids)
            )
            return progress
        except (OSError, ValueError, AttributeError, TypeError) as exc:
            logger.warning("Failed to load learning progress from %s: %s", path, exc)
            return cls()
