"""Inline markup stripping for Merriam-Webster text fields."""

from __future__ import annotations

import re

from lexicology.utils.constants import BC_TOKEN

_CLOSING_TAG_RE = re.compile(r"\{/.*?\}", re.DOTALL)
_TAG_RE = re.compile(r"\{.*?\}", re.DOTALL)
_WS_RE = re.compile(r"\s+")


def strip_markup(text: str | None) -> str:
    """Remove formatting tokens from dictionary text.

    ``{bc}`` (the bold colon) and closing tags (``{/it}``, ``{/wi}``) are
    removed outright, so trailing letters and punctuation stay attached.
    Every other ``{...}`` tag (``{it}``, ``{sx|...||}``, ``{d_link|...|}``)
    becomes a word break. Whitespace runs collapse to one space and the
    result is trimmed, so stripping is idempotent.

    Examples:
        run{bc}ning{it}fast{/it} -> running fast
        the {it}cat{/it}s        -> the cats
        a {wi}word{/wi}, then    -> a word, then
    """
    if text is None:
        return ""
    cleaned = text.replace(BC_TOKEN, "")
    cleaned = _CLOSING_TAG_RE.sub("", cleaned)
    cleaned = _TAG_RE.sub(" ", cleaned)
    cleaned = _WS_RE.sub(" ", cleaned)
    return cleaned.strip()


def strip_bold_colon(text: str) -> str:
    """Remove only ``{bc}`` tokens (used for one-line previews)."""
    return text.replace(BC_TOKEN, "")
