"""Merriam-Webster Collegiate lookup client and response classification."""

from __future__ import annotations

from typing import Any

import requests  # type: ignore[import-untyped]

from lexicology.config.settings import ApiConfig
from lexicology.models.entry import DictionaryEntry
from lexicology.models.outcome import Entries, LookupOutcome, NotFound, Suggestions
from lexicology.utils.exceptions import (
    DecodeError,
    NetworkError,
    TransportError,
    ValidationError,
)
from lexicology.utils.helpers import encode_path_segment, normalize_term
from lexicology.utils.logging_config import get_logger

logger = get_logger("core.lookup_client")


def decode_entries(payload: Any) -> list[DictionaryEntry] | None:
    """Decode *payload* as a list of entries, or ``None`` if it is not one.

    Any element that fails required-field decoding rejects the attempt.
    """
    if not isinstance(payload, list):
        return None
    try:
        return [DictionaryEntry.from_dict(item) for item in payload]
    except DecodeError as exc:
        logger.debug("Payload is not an entry list: %s", exc)
        return None


def decode_suggestions(payload: Any) -> list[str] | None:
    """Decode *payload* as a list of plain strings, or ``None``."""
    if not isinstance(payload, list):
        return None
    if not all(isinstance(item, str) for item in payload):
        return None
    return list(payload)


def classify_payload(term: str, payload: Any) -> LookupOutcome:
    """Classify a decoded JSON body into exactly one lookup outcome.

    Entries are tried first; a lone suggestion marker is discarded and the
    payload falls through to the suggestion shape, then to ``NotFound``.
    """
    entries = decode_entries(payload)
    if entries:
        if len(entries) == 1 and entries[0].is_suggestion_marker:
            logger.debug("Discarding lone suggestion marker for '%s'", term)
        else:
            return Entries(entries)

    suggestions = decode_suggestions(payload)
    if suggestions:
        return Suggestions(suggestions)

    return NotFound(term)


class MerriamWebsterClient:
    """Looks up words in the Merriam-Webster Collegiate dictionary.

    Issues exactly one GET per lookup with no retries.

    Args:
        config: API endpoint, key and transport timeout.
        session: HTTP session; a new :class:`requests.Session` by default.
    """

    def __init__(self, config: ApiConfig, session: Any | None = None) -> None:
        self._config = config
        self._session = session or requests.Session()

    @property
    def config(self) -> ApiConfig:
        return self._config

    def build_url(self, term: str) -> str:
        """URL for an already-normalized *term* (without the key parameter)."""
        return f"{self._config.base_url.rstrip('/')}/{encode_path_segment(term)}"

    def lookup(self, term: str) -> LookupOutcome:
        """Look up *term* and classify the response.

        Args:
            term: Raw user input; lowercased and trimmed before use.

        Returns:
            :class:`Entries`, :class:`Suggestions` or :class:`NotFound`.

        Raises:
            ValidationError: If *term* is empty after trimming.
            NetworkError: On connectivity errors, timeouts or non-2xx status.
            TransportError: If the body is not JSON.
        """
        normalized = normalize_term(term)
        if not normalized:
            raise ValidationError(term)

        url = self.build_url(normalized)
        try:
            response = self._session.get(
                url,
                params={"key": self._config.api_key},
                timeout=self._config.timeout,
            )
            response.raise_for_status()
        except requests.RequestException as exc:
            logger.warning("Lookup of '%s' failed: %s", normalized, exc)
            raise NetworkError(url, str(exc)) from exc

        try:
            payload = response.json()
        except ValueError as exc:
            logger.error("Lookup of '%s' returned a non-JSON body: %s", normalized, exc)
            raise TransportError(url, str(exc)) from exc

        outcome = classify_payload(normalized, payload)
        logger.info("Lookup '%s' -> %s", normalized, outcome.kind.display_name())
        return outcome
