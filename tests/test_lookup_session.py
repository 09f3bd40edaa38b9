import pytest
from PyQt6.QtCore import QCoreApplication

from lexicology.core.lookup_session import LookupSession, LookupWorker, outcome_message, user_message
from lexicology.models.outcome import NotFound, Suggestions
from lexicology.utils.exceptions import NetworkError, TransportError, ValidationError


@pytest.fixture(scope="module", autouse=True)
def qt_app():
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


class FakeClient:
    def __init__(self, results):
        self.results = results
        self.terms = []

    def lookup(self, term):
        self.terms.append(term)
        result = self.results[term]
        if isinstance(result, Exception):
            raise result
        return result


class Recorder:
    def __init__(self, session):
        self.outcomes = []
        self.errors = []
        self.started = []
        session.outcome_ready.connect(self.outcomes.append)
        session.search_failed.connect(self.errors.append)
        session.search_started.connect(self.started.append)


def _session(results):
    session = LookupSession(FakeClient(results))
    pending = []
    session._start = pending.append
    return session, pending, Recorder(session)


def test_latest_search_wins():
    first = Suggestions(["serenity"])
    second = Suggestions(["serendipity"])
    session, pending, rec = _session({"seren": first, "serend": second})

    session.search("seren")
    session.search("Serend ")
    assert rec.started == ["seren", "serend"]

    # second finishes first, then the stale first result arrives
    pending[1].run()
    pending[0].run()

    assert rec.outcomes == [second]
    assert session.current_term == "serend"


def test_cancel_discards_late_result():
    session, pending, rec = _session({"run": NotFound("run")})

    generation = session.search("run")
    session.cancel()
    pending[0].run()

    assert not session.is_current(generation)
    assert rec.outcomes == []
    assert rec.errors == []


def test_empty_term_fails_without_request():
    session, pending, rec = _session({})

    assert session.search("   ") is None
    assert pending == []
    assert rec.errors == [user_message(ValidationError())]


def test_network_error_surfaces_single_message():
    session, pending, rec = _session({"run": NetworkError("http://x", "offline")})

    session.search("run")
    pending[0].run()

    assert rec.errors == ["A network error occurred."]
    assert rec.outcomes == []


def test_transport_error_reads_as_not_found():
    session, pending, rec = _session({"run": TransportError("http://x", "html")})

    session.search("run")
    pending[0].run()

    assert rec.errors == []
    assert isinstance(rec.outcomes[0], NotFound)
    assert rec.outcomes[0].term == "run"


def test_worker_reports_generation():
    worker = LookupWorker(FakeClient({"a": NotFound("a")}), "a", 7)
    seen = []
    worker.result_ready.connect(lambda gen, outcome: seen.append((gen, outcome)))

    worker.run()

    assert seen == [(7, NotFound("a"))]


def test_outcome_messages():
    assert outcome_message(Suggestions(["a"])) == "Word not found. Did you mean one of these?"
    assert "xyzzy" in outcome_message(NotFound("xyzzy"))
