"""JSON file persistence adapter for word lists."""

from __future__ import annotations

import json
from pathlib import Path

from lexicology.data.repository import WordRepository
from lexicology.models.word import WordRecord
from lexicology.utils.exceptions import DecodeError, SerializationError, StorageError
from lexicology.utils.logging_config import get_logger

logger = get_logger("data.json")


class JSONAdapter(WordRepository):
    """Persist a word list as a pretty-printed JSON array."""

    def save(self, records: list[WordRecord], path: Path) -> None:
        """Write *records* to *path* as JSON.

        Raises:
            StorageError: On file write failures.
        """
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "w", encoding="utf-8") as fh:
                json.dump([r.to_dict() for r in records], fh, ensure_ascii=False, indent=2)
            logger.info("Word list saved to %s (%d words)", path, len(records))
        except OSError as exc:
            raise StorageError(f"Failed to write JSON to {path}: {exc}") from exc
        except (TypeError, ValueError) as exc:
            raise SerializationError(f"Serialization error: {exc}") from exc

    def load(self, path: Path) -> list[WordRecord]:
        """Read a word list from a JSON file.

        Returns:
            Records in file order (duplicates included).

        Raises:
            StorageError: If the file does not exist or cannot be read.
            SerializationError: If the JSON is malformed or a record lacks
                ``word``, ``meaning`` or ``sentence``.
        """
        if not path.exists():
            raise StorageError(f"File not found: {path}")
        try:
            with open(path, "r", encoding="utf-8") as fh:
                data = json.load(fh)
        except OSError as exc:
            raise StorageError(f"Failed to read {path}: {exc}") from exc
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise SerializationError(f"Invalid word list JSON in {path}: {exc}") from exc

        if not isinstance(data, list):
            raise SerializationError(f"Word list in {path} is not a JSON array")
        try:
            records = [WordRecord.from_dict(item) for item in data]
        except DecodeError as exc:
            raise SerializationError(f"Invalid word record in {path}: {exc}") from exc
        logger.info("Word list loaded from %s (%d words)", path, len(records))
        return records

    def exists(self, path: Path) -> bool:
        return path.is_file()
