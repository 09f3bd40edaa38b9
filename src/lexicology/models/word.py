"""Domain model for a vocabulary word record."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from lexicology.utils.constants import DEFAULT_SOURCE
from lexicology.utils.exceptions import DecodeError
from lexicology.utils.helpers import format_timestamp, parse_timestamp

_REQUIRED_FIELDS = ("word", "meaning", "sentence")


def _new_id() -> str:
    return str(uuid.uuid4()).upper()


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(slots=True)
class WordRecord:
    """A word from the bundled list, the word server or the user.

    Attributes:
        headword: The word itself (dedup key, case-insensitive).
        meaning: Plain-language meaning.
        example_sentence: Usage example.
        source: Where the word came from.
        created_at: Creation timestamp (UTC).
        stable_id: Persistent identifier (UUID string).
        is_learned: Whether the user has marked the word learned.
    """

    headword: str
    meaning: str
    example_sentence: str
    source: str | None = DEFAULT_SOURCE
    created_at: datetime = field(default_factory=_now)
    stable_id: str = field(default_factory=_new_id)
    is_learned: bool = False

    @property
    def key(self) -> str:
        """Case-insensitive dedup key."""
        return self.headword.lower()

    def to_dict(self) -> dict[str, Any]:
        return {
            "word": self.headword,
            "meaning": self.meaning,
            "sentence": self.example_sentence,
            "source": self.source,
            "isLearned": self.is_learned,
            "creationDate": format_timestamp(self.created_at),
            "customID": self.stable_id,
        }

    @classmethod
    def from_dict(cls, data: Any) -> WordRecord:
        """Decode a bundled-list or server record.

        ``word``, ``meaning`` and ``sentence`` are required. Missing or
        malformed optional fields fall back to their defaults. Server
        records use ``id`` / ``creation_date`` instead of ``customID`` /
        ``creationDate``; both spellings are accepted.

        Raises:
            DecodeError: If *data* is not an object or a required field is
                missing or not a string.
        """
        if not isinstance(data, dict):
            raise DecodeError("word", f"expected object, got {type(data).__name__}")
        for name in _REQUIRED_FIELDS:
            if not isinstance(data.get(name), str):
                raise DecodeError(name, "missing or not a string")

        source = data.get("source", DEFAULT_SOURCE)
        stable_id = data.get("customID", data.get("id"))
        created = parse_timestamp(data.get("creationDate", data.get("creation_date")))
        is_learned = data.get("isLearned")
        return cls(
            headword=data["word"],
            meaning=data["meaning"],
            example_sentence=data["sentence"],
            source=source if isinstance(source, str) else None,
            created_at=created or _now(),
            stable_id=stable_id if isinstance(stable_id, str) and stable_id else _new_id(),
            is_learned=is_learned if isinstance(is_learned, bool) else False,
        )


# Shown when no word list is available
PLACEHOLDER_WORDS: tuple[WordRecord, ...] = (
    WordRecord(
        headword="Serendipity",
        meaning="The occurrence of events by chance in a happy or beneficial way",
        example_sentence="Finding this beautiful café was a moment of pure serendipity.",
        source="Lexicology",
        stable_id="00000000-0000-4000-8000-000000000001",
    ),
    WordRecord(
        headword="Ephemeral",
        meaning="Lasting for a very short time",
        example_sentence="The beauty of cherry blossoms is ephemeral but unforgettable.",
        source="Lexicology",
        stable_id="00000000-0000-4000-8000-000000000002",
    ),
)
