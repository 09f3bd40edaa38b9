"""Merriam-Webster entry models: DictionaryEntry, SenseRecord and friends.

Decoding is tolerant: optional fields of the wrong type become absent and
malformed list elements are skipped, while a missing ``meta.id`` or
``hwi.hw`` rejects the whole entry with :class:`DecodeError`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from lexicology.utils.exceptions import DecodeError
from lexicology.utils.helpers import opt_list, opt_str

SENSE_TAG = "sense"


@dataclass(slots=True, frozen=True)
class DefinitionText:
    """One ``[tag, text]`` pair from a sense's ``dt`` field.

    Attributes:
        tag: Type tag (``text``, ``vis``, ``uns`` ...). Empty when missing.
        text: Payload text, ``None`` when the payload is not a string.
    """

    tag: str
    text: str | None = None

    @classmethod
    def from_raw(cls, raw: Any) -> DefinitionText:
        items = opt_list(raw)
        tag = opt_str(items[0]) if items else None
        text = opt_str(items[1]) if len(items) > 1 else None
        return cls(tag=tag or "", text=text)


@dataclass(slots=True)
class SenseRecord:
    """One numbered meaning within a definition section.

    Attributes:
        sense_number: Label such as ``1a`` (optional).
        definition_texts: ``dt`` pairs in wire order.
    """

    sense_number: str | None = None
    definition_texts: list[DefinitionText] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SenseRecord:
        return cls(
            sense_number=opt_str(data.get("sn")),
            definition_texts=[DefinitionText.from_raw(pair) for pair in opt_list(data.get("dt"))],
        )

    @property
    def first_text(self) -> str | None:
        """Text of the first definition-text pair, if any."""
        return self.definition_texts[0].text if self.definition_texts else None


@dataclass(slots=True)
class SequenceItem:
    """A positional ``[tag, payload]`` item from a sense sequence.

    The first slot is the discriminant. Only ``sense`` items carry a
    :class:`SenseRecord`; every other shape is kept as an ignored variant
    with ``sense=None``.
    """

    tag: str
    sense: SenseRecord | None = None

    @classmethod
    def from_raw(cls, raw: Any) -> SequenceItem:
        items = opt_list(raw)
        if not items:
            return cls(tag="")
        tag = opt_str(items[0]) or ""
        if tag == SENSE_TAG and len(items) > 1 and isinstance(items[1], dict):
            return cls(tag=tag, sense=SenseRecord.from_dict(items[1]))
        return cls(tag=tag)

    @property
    def is_ignored(self) -> bool:
        return self.sense is None


@dataclass(slots=True)
class DefinitionSection:
    """One ``def`` section: subgroups of sequence items (``sseq``)."""

    verb_divider: str | None = None
    sense_sequence: list[list[SequenceItem]] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DefinitionSection:
        subgroups = [
            [SequenceItem.from_raw(item) for item in subgroup]
            for subgroup in opt_list(data.get("sseq"))
            if isinstance(subgroup, list)
        ]
        return cls(verb_divider=opt_str(data.get("vd")), sense_sequence=subgroups)


@dataclass(slots=True)
class CrossReference:
    """A related-term pointer (``cxs``).

    Attributes:
        label: Cross-reference label such as ``"past tense of"``.
        targets: Target headwords; individual targets may be ``None``.
    """

    label: str | None = None
    targets: list[str | None] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CrossReference:
        targets = [
            opt_str(t.get("cxt")) if isinstance(t, dict) else None
            for t in opt_list(data.get("cxtis"))
        ]
        return cls(label=opt_str(data.get("cxl")), targets=targets)

    @property
    def first_target(self) -> str | None:
        return self.targets[0] if self.targets else None


@dataclass(slots=True)
class DictionaryEntry:
    """One headword result from the Collegiate API.

    Attributes:
        id: ``meta.id`` (e.g. ``run:1``). May be empty.
        headword: ``hwi.hw`` with syllable marks (e.g. ``ser*en*dip*i*ty``).
        part_of_speech: Functional label (``fl``).
        pronunciations: ``hwi.prs[].mw`` values, ``None`` where missing.
        definition_groups: ``def`` sections.
        short_definitions: ``shortdef`` strings.
        etymology: ``et`` token sequences (tag followed by text).
        cross_references: ``cxs`` pointers.
    """

    id: str
    headword: str
    part_of_speech: str | None = None
    pronunciations: list[str | None] = field(default_factory=list)
    definition_groups: list[DefinitionSection] = field(default_factory=list)
    short_definitions: list[str] = field(default_factory=list)
    etymology: list[list[str]] = field(default_factory=list)
    cross_references: list[CrossReference] = field(default_factory=list)

    @property
    def is_suggestion_marker(self) -> bool:
        """Empty id with no part of speech: a suggestion list in disguise."""
        return not self.id and self.part_of_speech is None

    @classmethod
    def from_dict(cls, data: Any) -> DictionaryEntry:
        """Decode one entry object.

        Raises:
            DecodeError: If ``data`` is not an object or ``meta.id`` /
                ``hwi.hw`` are missing or not strings.
        """
        if not isinstance(data, dict):
            raise DecodeError("entry", f"expected object, got {type(data).__name__}")
        meta = data.get("meta")
        if not isinstance(meta, dict) or not isinstance(meta.get("id"), str):
            raise DecodeError("meta.id", "missing or not a string")
        hwi = data.get("hwi")
        if not isinstance(hwi, dict) or not isinstance(hwi.get("hw"), str):
            raise DecodeError("hwi.hw", "missing or not a string")

        pronunciations = [
            opt_str(pr.get("mw")) if isinstance(pr, dict) else None
            for pr in opt_list(hwi.get("prs"))
        ]
        return cls(
            id=meta["id"],
            headword=hwi["hw"],
            part_of_speech=opt_str(data.get("fl")),
            pronunciations=pronunciations,
            definition_groups=[
                DefinitionSection.from_dict(section)
                for section in opt_list(data.get("def"))
                if isinstance(section, dict)
            ],
            short_definitions=[s for s in opt_list(data.get("shortdef")) if isinstance(s, str)],
            etymology=[
                [tok for tok in group if isinstance(tok, str)]
                for group in opt_list(data.get("et"))
                if isinstance(group, list)
            ],
            cross_references=[
                CrossReference.from_dict(cx)
                for cx in opt_list(data.get("cxs"))
                if isinstance(cx, dict)
            ],
        )
