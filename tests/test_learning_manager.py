import json
from datetime import date

from lexicology.core.learning_manager import LearningManager
from lexicology.models.word import WordRecord


class Clock:
    def __init__(self, day: date):
        self.day = day

    def __call__(self) -> date:
        return self.day


def _word(stable_id: str) -> WordRecord:
    return WordRecord(headword=stable_id, meaning="m", example_sentence="s", stable_id=stable_id)


def test_mark_learned_is_idempotent(tmp_path):
    manager = LearningManager(tmp_path / "progress.json", today=Clock(date(2025, 1, 1)))
    word = _word("a")

    assert manager.mark_learned(word) is True
    assert manager.mark_learned(word) is False
    assert manager.words_learned == 1
    assert manager.has_learned("a")
    assert word.is_learned


def test_streak_transitions(tmp_path):
    clock = Clock(date(2025, 1, 1))
    manager = LearningManager(tmp_path / "progress.json", today=clock)

    manager.mark_learned(_word("a"))
    assert manager.current_streak == 1

    manager.mark_learned(_word("b"))
    assert manager.current_streak == 1

    clock.day = date(2025, 1, 2)
    manager.mark_learned(_word("c"))
    assert manager.current_streak == 2

    clock.day = date(2025, 1, 5)
    manager.mark_learned(_word("d"))
    assert manager.current_streak == 1


def test_lapsed_streak_resets_on_load(tmp_path):
    path = tmp_path / "progress.json"
    LearningManager(path, today=Clock(date(2025, 1, 1))).mark_learned(_word("a"))

    assert LearningManager(path, today=Clock(date(2025, 1, 2))).current_streak == 1
    assert LearningManager(path, today=Clock(date(2025, 1, 3))).current_streak == 0


def test_progress_persists(tmp_path):
    path = tmp_path / "progress.json"
    LearningManager(path, today=Clock(date(2025, 1, 1))).mark_learned(_word("a"))

    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["learned_ids"] == ["a"]
    assert data["last_streak_check"] == "2025-01-01"
    assert LearningManager(path, today=Clock(date(2025, 1, 1))).has_learned("a")


def test_corrupt_progress_file_starts_empty(tmp_path):
    path = tmp_path / "progress.json"
    path.write_text("not json", encoding="utf-8")
    manager = LearningManager(path)
    assert manager.words_learned == 0
    assert manager.current_streak == 0


def test_non_utf8_progress_file_starts_empty(tmp_path):
    path = tmp_path / "progress.json"
    path.write_bytes(b'{"learned_ids": ["caf\xe9"], "words_learned": 1}')
    manager = LearningManager(path)
    assert manager.words_learned == 0
    assert not manager.has_learned("caf\xe9")
