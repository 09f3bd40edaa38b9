"""Search session: runs lookups off the UI thread, latest search wins."""

from __future__ import annotations

from PyQt6.QtCore import QObject, QThread, pyqtSignal

from lexicology.core.lookup_client import MerriamWebsterClient
from lexicology.models.outcome import LookupOutcome, NotFound, Suggestions
from lexicology.utils.constants import (
    MSG_EMPTY_TERM,
    MSG_NETWORK_ERROR,
    MSG_NOT_FOUND,
    MSG_SUGGESTIONS,
)
from lexicology.utils.exceptions import (
    LexicologyError,
    NetworkError,
    TransportError,
    ValidationError,
)
from lexicology.utils.helpers import normalize_term
from lexicology.utils.logging_config import get_logger

logger = get_logger("core.lookup_session")


def user_message(exc: Exception, term: str = "") -> str:
    """Single user-facing message for a failed lookup."""
    if isinstance(exc, ValidationError):
        return MSG_EMPTY_TERM
    if isinstance(exc, TransportError):
        return MSG_NOT_FOUND.format(term=term)
    if isinstance(exc, NetworkError):
        return MSG_NETWORK_ERROR
    return f"Unexpected error: {exc}"


def outcome_message(outcome: LookupOutcome) -> str | None:
    """Status line for non-entry outcomes; ``None`` for entries."""
    if isinstance(outcome, Suggestions):
        return MSG_SUGGESTIONS
    if isinstance(outcome, NotFound):
        return MSG_NOT_FOUND.format(term=outcome.term)
    return None


class LookupWorker(QThread):
    """Background thread running one :meth:`MerriamWebsterClient.lookup`.

    Signals:
        result_ready: ``(generation, LookupOutcome)``
        error_occurred: ``(generation, exception)``
    """

    result_ready = pyqtSignal(int, object)
    error_occurred = pyqtSignal(int, object)

    def __init__(self, client: MerriamWebsterClient, term: str, generation: int) -> None:
        super().__init__()
        self._client = client
        self._term = term
        self._generation = generation

    @property
    def term(self) -> str:
        return self._term

    @property
    def generation(self) -> int:
        return self._generation

    def run(self) -> None:
        try:
            outcome = self._client.lookup(self._term)
            self.result_ready.emit(self._generation, outcome)
        except LexicologyError as exc:
            self.error_occurred.emit(self._generation, exc)
        except Exception as exc:
            logger.exception("Unexpected error looking up '%s'", self._term)
            self.error_occurred.emit(self._generation, exc)


class LookupSession(QObject):
    """Owns the search state for one view.

    Every :meth:`search` bumps a generation counter; results tagged with an
    older generation are dropped, so only the most recent search reaches
    the UI. Requests are never queued behind each other.

    Signals:
        search_started: ``(normalized_term,)``
        outcome_ready: ``(LookupOutcome,)``
        search_failed: ``(user_message,)``
    """

    search_started = pyqtSignal(str)
    outcome_ready = pyqtSignal(object)
    search_failed = pyqtSignal(str)

    def __init__(self, client: MerriamWebsterClient, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._client = client
        self._generation = 0
        self._current_term = ""
        self._workers: set[LookupWorker] = set()

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def current_term(self) -> str:
        return self._current_term

    def is_current(self, generation: int) -> bool:
        return generation == self._generation

    def search(self, term: str) -> int | None:
        """Start a lookup for *term*, superseding any in-flight one.

        Returns:
            The request's generation, or ``None`` if *term* was rejected
            before any request was made.
        """
        normalized = normalize_term(term)
        if not normalized:
            self.search_failed.emit(user_message(ValidationError(term)))
            return None

        self._generation += 1
        self._current_term = normalized
        worker = LookupWorker(self._client, normalized, self._generation)
        worker.result_ready.connect(self._on_result)
        worker.error_occurred.connect(self._on_error)
        worker.finished.connect(self._on_worker_finished)
        self._workers.add(worker)

        self.search_started.emit(normalized)
        logger.debug("Search #%d for '%s'", self._generation, normalized)
        self._start(worker)
        return self._generation

    def cancel(self) -> None:
        """Abandon the in-flight search; its late result will be ignored."""
        self._generation += 1
        self._current_term = ""

    def _start(self, worker: LookupWorker) -> None:
        worker.start()

    def _on_result(self, generation: int, outcome: LookupOutcome) -> None:
        if not self.is_current(generation):
            logger.debug("Dropping stale result #%d", generation)
            return
        self.outcome_ready.emit(outcome)

    def _on_error(self, generation: int, exc: Exception) -> None:
        if not self.is_current(generation):
            logger.debug("Dropping stale error #%d: %s", generation, exc)
            return
        if isinstance(exc, TransportError):
            logger.error("Unparsable response for '%s': %s", self._current_term, exc)
            self.outcome_ready.emit(NotFound(self._current_term))
            return
        self.search_failed.emit(user_message(exc, self._current_term))

    def _on_worker_finished(self) -> None:
        worker = self.sender()
        if isinstance(worker, LookupWorker):
            self._workers.discard(worker)
            worker.deleteLater()
