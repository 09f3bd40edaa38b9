"""HTTP client for the companion word server (``/words``)."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any

import requests  # type: ignore[import-untyped]

from lexicology.config.settings import ServerConfig
from lexicology.models.word import WordRecord
from lexicology.utils.constants import DEFAULT_USER_ID, USER_SOURCE
from lexicology.utils.exceptions import DecodeError, NetworkError, TransportError
from lexicology.utils.helpers import format_timestamp
from lexicology.utils.logging_config import get_logger

logger = get_logger("data.word_server")


class WordServerClient:
    """Fetches and uploads word records.

    Args:
        config: Server base URL and timeout.
        session: HTTP session; a new :class:`requests.Session` by default.
    """

    def __init__(self, config: ServerConfig, session: Any | None = None) -> None:
        self._config = config
        self._session = session or requests.Session()

    @property
    def words_url(self) -> str:
        return f"{self._config.base_url.rstrip('/')}/words"

    def fetch_words(self) -> list[WordRecord]:
        """Return all words on the server, in server order.

        Raises:
            NetworkError: On transport failure or non-2xx status.
            TransportError: If the body is not a JSON array of word records.
        """
        url = self.words_url
        try:
            response = self._session.get(url, timeout=self._config.timeout)
            response.raise_for_status()
        except requests.RequestException as exc:
            logger.warning("Fetching words failed: %s", exc)
            raise NetworkError(url, str(exc)) from exc

        try:
            data = response.json()
        except ValueError as exc:
            raise TransportError(url, str(exc)) from exc
        if not isinstance(data, list):
            raise TransportError(url, "expected a JSON array")
        try:
            records = [WordRecord.from_dict(item) for item in data]
        except DecodeError as exc:
            logger.error("Word server returned an invalid record: %s", exc)
            raise TransportError(url, str(exc)) from exc

        logger.info("Fetched %d words from %s", len(records), url)
        return records

    def upload_word(
        self,
        word: str,
        meaning: str,
        sentence: str,
        user_id: str = DEFAULT_USER_ID,
    ) -> bool:
        """Upload a user-created word.

        Returns:
            ``True`` on a 2xx response, ``False`` on any other status or a
            transport failure.
        """
        body = {
            "id": str(uuid.uuid4()).upper(),
            "user_id": user_id,
            "word": word,
            "meaning": meaning,
            "sentence": sentence,
            "source": USER_SOURCE,
            "creation_date": format_timestamp(datetime.now(timezone.utc)),
        }
        try:
            response = self._session.post(
                self.words_url, json=body, timeout=self._config.timeout
            )
        except requests.RequestException as exc:
            logger.warning("Uploading '%s' failed: %s", word, exc)
            return False
        ok = 200 <= response.status_code < 300
        if not ok:
            logger.warning("Uploading '%s' rejected with HTTP %d", word, response.status_code)
        return ok
