"""Abstract repository interface for word list persistence."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from lexicology.models.word import WordRecord


class WordRepository(ABC):
    """Abstract base for word list storage backends."""

    @abstractmethod
    def save(self, records: list[WordRecord], path: Path) -> None:
        """Persist a word list to the given path.

        Raises:
            StorageError: On I/O failures.
        """

    @abstractmethod
    def load(self, path: Path) -> list[WordRecord]:
        """Load a word list from the given path, in stored order.

        Raises:
            StorageError: On I/O failures or missing file.
            SerializationError: On data format errors.
        """

    @abstractmethod
    def exists(self, path: Path) -> bool:
        """Check whether a persisted word list exists at *path*."""
