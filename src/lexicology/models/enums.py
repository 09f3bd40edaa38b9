"""Enumerations for lookup classification."""

from __future__ import annotations

from enum import StrEnum


class OutcomeKind(StrEnum):
    """The three shapes a dictionary lookup can resolve to."""

    ENTRIES = "entries"
    SUGGESTIONS = "suggestions"
    NOT_FOUND = "not_found"

    def display_name(self) -> str:
        """Human-readable label (e.g. ``Not found``)."""
        return self.value.replace("_", " ").capitalize()
