"""Word list deduplication, grouping and loading with fallbacks."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from pathlib import Path

from lexicology.data.repository import WordRepository
from lexicology.models.word import PLACEHOLDER_WORDS, WordRecord
from lexicology.utils.exceptions import WordStoreError
from lexicology.utils.logging_config import get_logger

logger = get_logger("core.word_store")


def dedupe(records: Iterable[WordRecord]) -> list[WordRecord]:
    """Drop later records whose headword repeats an earlier one, ignoring case.

    The first occurrence keeps its full record and relative order is
    preserved.
    """
    seen: set[str] = set()
    unique: list[WordRecord] = []
    for record in records:
        key = record.key
        if key in seen:
            continue
        seen.add(key)
        unique.append(record)
    return unique


def group_by_initial(records: Sequence[WordRecord]) -> dict[str, list[WordRecord]]:
    """Group records under their uppercase first letter.

    Sections are ordered alphabetically and records within a section are
    sorted by headword. Records with an empty headword go under ``#``.
    """
    groups: dict[str, list[WordRecord]] = {}
    for record in records:
        letter = record.headword[:1].upper() or "#"
        groups.setdefault(letter, []).append(record)
    return {
        letter: sorted(groups[letter], key=lambda r: r.headword)
        for letter in sorted(groups)
    }


def load_word_list(
    repository: WordRepository,
    path: Path,
    use_placeholders: bool = True,
) -> list[WordRecord]:
    """Load, dedupe and return a word list.

    Args:
        repository: Storage backend to read from.
        path: Word list location.
        use_placeholders: Substitute the built-in words when the list is
            missing, unreadable or empty.

    Raises:
        WordStoreError: On load failure when *use_placeholders* is false.
    """
    try:
        records = dedupe(repository.load(path))
    except WordStoreError as exc:
        if not use_placeholders:
            raise
        logger.warning("Word list unavailable (%s); using placeholder words", exc)
        return list(PLACEHOLDER_WORDS)

    if not records and use_placeholders:
        logger.info("Word list at %s is empty; using placeholder words", path)
        return list(PLACEHOLDER_WORDS)
    logger.info("Loaded %d unique words from %s", len(records), path)
    return records
