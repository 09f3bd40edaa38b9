"""Turn a DictionaryEntry into render-ready text."""

from __future__ import annotations

from collections.abc import Iterator

from lexicology.models.entry import DictionaryEntry, SequenceItem
from lexicology.utils.constants import SENSE_BULLET
from lexicology.utils.markup import strip_bold_colon, strip_markup


def iter_sequence_items(entry: DictionaryEntry) -> Iterator[SequenceItem]:
    """Yield every sequence item across all definition sections, in order."""
    for section in entry.definition_groups:
        for subgroup in section.sense_sequence:
            yield from subgroup


def normalize(entry: DictionaryEntry) -> list[tuple[str, str]]:
    """Flatten an entry's senses into ``(label, text)`` pairs.

    Items without a sense, or whose first definition text is absent, are
    skipped. The label falls back to a bullet when the sense is unnumbered.

    Example:
        ``[("1", "the faculty of making fortunate discoveries by accident")]``
    """
    result: list[tuple[str, str]] = []
    for item in iter_sequence_items(entry):
        sense = item.sense
        if sense is None:
            continue
        text = sense.first_text
        if text is None:
            continue
        result.append((sense.sense_number or SENSE_BULLET, strip_markup(text)))
    return result


def extract_etymology(entry: DictionaryEntry) -> str | None:
    """Last token of the first etymology sequence, markup stripped."""
    if not entry.etymology or not entry.etymology[0]:
        return None
    return strip_markup(entry.etymology[0][-1])


def display_headword(entry: DictionaryEntry) -> str:
    return strip_markup(entry.headword)


def primary_pronunciation(entry: DictionaryEntry) -> str | None:
    """First pronunciation that is present."""
    return next((p for p in entry.pronunciations if p), None)


def preview(entry: DictionaryEntry) -> str | None:
    """One-line list preview: ``(noun) - first short definition``."""
    if entry.part_of_speech is None or not entry.short_definitions:
        return None
    return f"({entry.part_of_speech}) - {strip_bold_colon(entry.short_definitions[0])}"


def related_terms(entry: DictionaryEntry) -> list[str]:
    """First target of each cross-reference that has one."""
    return [cx.first_target for cx in entry.cross_references if cx.first_target]
