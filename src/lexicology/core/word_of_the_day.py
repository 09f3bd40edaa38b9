"""Deterministic word-of-the-day selection."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date, datetime, time, timedelta

from lexicology.models.word import PLACEHOLDER_WORDS, WordRecord
from lexicology.utils.constants import WORD_OF_THE_DAY_EPOCH
from lexicology.utils.exceptions import EmptyWordListError
from lexicology.utils.logging_config import get_logger

logger = get_logger("core.word_of_the_day")


def _as_day(value: date | datetime) -> date:
    # datetime is a date subclass; truncate in its own (wall-clock) zone
    return value.date() if isinstance(value, datetime) else value


def day_offset(day: date | datetime, epoch: date = WORD_OF_THE_DAY_EPOCH) -> int:
    """Whole days from *epoch* to *day*, clamped at zero."""
    return max(0, (_as_day(day) - epoch).days)


def select_for_date(
    day: date | datetime,
    words: Sequence[WordRecord],
    epoch: date = WORD_OF_THE_DAY_EPOCH,
) -> WordRecord:
    """Pick the word for *day*.

    The index is the day offset from *epoch* modulo the list length, so the
    epoch itself maps to ``words[0]`` and the sequence wraps around.

    Raises:
        EmptyWordListError: If *words* is empty.
    """
    if not words:
        raise EmptyWordListError()
    return words[day_offset(day, epoch) % len(words)]


def select_or_placeholder(
    day: date | datetime,
    words: Sequence[WordRecord],
    epoch: date = WORD_OF_THE_DAY_EPOCH,
) -> WordRecord:
    """Like :func:`select_for_date` but falls back to a built-in word."""
    try:
        return select_for_date(day, words, epoch)
    except EmptyWordListError:
        logger.warning("No words available for %s; showing placeholder", _as_day(day))
        return PLACEHOLDER_WORDS[0]


def time_until_next(now: datetime) -> timedelta:
    """Time left until the next midnight in *now*'s own zone."""
    tomorrow = datetime.combine(now.date() + timedelta(days=1), time.min, tzinfo=now.tzinfo)
    return tomorrow - now


def format_countdown(delta: timedelta) -> str:
    """Format a countdown as ``HH:MM:SS``; negative values read ``--:--:--``."""
    total = int(delta.total_seconds())
    if total < 0:
        return "--:--:--"
    hours, rest = divmod(total, 3600)
    minutes, seconds = divmod(rest, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"
