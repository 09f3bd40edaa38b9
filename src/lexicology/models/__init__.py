"""Domain models for dictionary lookups and word lists."""

from lexicology.models.entry import (
    CrossReference,
    DefinitionSection,
    DefinitionText,
    DictionaryEntry,
    SenseRecord,
    SequenceItem,
)
from lexicology.models.enums import OutcomeKind
from lexicology.models.outcome import Entries, LookupOutcome, NotFound, Suggestions
from lexicology.models.progress import LearningProgress
from lexicology.models.word import PLACEHOLDER_WORDS, WordRecord

__all__ = [
    "CrossReference",
    "DefinitionSection",
    "DefinitionText",
    "DictionaryEntry",
    "SenseRecord",
    "SequenceItem",
    "OutcomeKind",
    "Entries",
    "LookupOutcome",
    "NotFound",
    "Suggestions",
    "LearningProgress",
    "PLACEHOLDER_WORDS",
    "WordRecord",
]
