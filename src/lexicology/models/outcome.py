"""Lookup outcomes: Entries, Suggestions, NotFound."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Union

from lexicology.models.entry import DictionaryEntry
from lexicology.models.enums import OutcomeKind


@dataclass(slots=True)
class Entries:
    """Exact matches. Never empty and never a lone suggestion marker."""

    kind: ClassVar[OutcomeKind] = OutcomeKind.ENTRIES

    entries: list[DictionaryEntry] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.entries:
            raise ValueError("Entries outcome requires at least one entry")


@dataclass(slots=True)
class Suggestions:
    """Spelling suggestions returned when there is no exact match."""

    kind: ClassVar[OutcomeKind] = OutcomeKind.SUGGESTIONS

    suggestions: list[str] = field(default_factory=list)


@dataclass(slots=True)
class NotFound:
    """Nothing usable came back for *term*."""

    kind: ClassVar[OutcomeKind] = OutcomeKind.NOT_FOUND

    term: str = ""


LookupOutcome = Union[Entries, Suggestions, NotFound]
