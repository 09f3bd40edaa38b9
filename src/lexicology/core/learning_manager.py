"""Learning manager: learned-word tracking and the daily streak."""

from __future__ import annotations

from collections.abc import Callable
from datetime import date, timedelta
from pathlib import Path

from lexicology.models.progress import LearningProgress
from lexicology.models.word import WordRecord
from lexicology.utils.constants import LEARNING_PROGRESS_PATH
from lexicology.utils.logging_config import get_logger

logger = get_logger("core.learning_manager")


class LearningManager:
    """Tracks which words the user has learned and their daily streak.

    Persists progress to ``~/.lexicology/learning_progress.json``.

    Args:
        path: Override the default progress file path.
        today: Clock returning the current local date.
    """

    def __init__(
        self,
        path: Path | None = None,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._path = path or LEARNING_PROGRESS_PATH
        self._today = today
        self._progress = LearningProgress.load(self._path)
        self.check_streak()

    @property
    def progress(self) -> LearningProgress:
        return self._progress

    @property
    def words_learned(self) -> int:
        return self._progress.words_learned

    @property
    def current_streak(self) -> int:
        return self._progress.current_streak

    def has_learned(self, stable_id: str) -> bool:
        return stable_id in self._progress.learned_ids

    def mark_learned(self, record: WordRecord) -> bool:
        """Mark *record* learned.

        Returns:
            ``False`` if it was already learned (nothing changes).
        """
        if self.has_learned(record.stable_id):
            return False
        self._progress.learned_ids.add(record.stable_id)
        self._progress.words_learned += 1
        record.is_learned = True
        self._update_streak()
        self.save()
        logger.debug("Marked '%s' learned (streak=%d)", record.headword, self.current_streak)
        return True

    def check_streak(self) -> None:
        """Reset the streak to zero if the last learned day is older than yesterday."""
        last = self._last_check()
        if last is None:
            return
        today = self._today()
        if last not in (today, today - timedelta(days=1)):
            if self._progress.current_streak:
                logger.info("Streak of %d days lapsed", self._progress.current_streak)
            self._progress.current_streak = 0

    def _update_streak(self) -> None:
        today = self._today()
        last = self._last_check()
        if last == today:
            return
        if last == today - timedelta(days=1):
            self._progress.current_streak += 1
        else:
            self._progress.current_streak = 1
        self._progress.last_streak_check = today.isoformat()

    def _last_check(self) -> date | None:
        value = self._progress.last_streak_check
        if not value:
            return None
        try:
            return date.fromisoformat(value)
        except ValueError:
            logger.warning("Ignoring malformed streak date %r", value)
            return None

    # --- Persistence ---

    def save(self) -> None:
        self._progress.save(self._path)
