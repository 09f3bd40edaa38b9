import json

import pytest

from lexicology import main as cli
from lexicology.config.settings import SettingsManager
from lexicology.models.outcome import Entries, NotFound, Suggestions
from lexicology.models.entry import DictionaryEntry
from lexicology.utils.exceptions import NetworkError, TransportError


@pytest.fixture(autouse=True)
def isolated(monkeypatch, tmp_path):
    monkeypatch.delenv("MW_API_KEY", raising=False)
    monkeypatch.setattr(cli, "setup_logging", lambda level: None)
    monkeypatch.setattr(cli, "load_dotenv", lambda: None)
    SettingsManager.reset_instance()
    config = tmp_path / "config.yaml"
    words = tmp_path / "words.json"
    words.write_text(
        json.dumps(
            [
                {"word": "Alpha", "meaning": "first", "sentence": "s"},
                {"word": "beta", "meaning": "second", "sentence": "s"},
                {"word": "ALPHA", "meaning": "dup", "sentence": "s"},
            ]
        ),
        encoding="utf-8",
    )
    config.write_text(
        f"storage:\n  word_list_path: {words}\n  progress_path: {tmp_path / 'progress.json'}\n",
        encoding="utf-8",
    )
    yield ["--config", str(config)]
    SettingsManager.reset_instance()


def _fake_lookup(monkeypatch, result):
    def lookup(self, term):
        if isinstance(result, Exception):
            raise result
        return result

    monkeypatch.setattr(cli.MerriamWebsterClient, "lookup", lookup)


def test_lookup_prints_entries(monkeypatch, capsys, isolated, serendipity_payload):
    entry = DictionaryEntry.from_dict(serendipity_payload[0])
    _fake_lookup(monkeypatch, Entries([entry]))

    assert cli.main(isolated + ["lookup", "serendipity"]) == cli.EXIT_OK
    out = capsys.readouterr().out
    assert "SER*EN*DIP*I*TY" in out
    assert "1 the faculty" in out
    assert "See also: luck" in out


def test_lookup_suggestions_and_not_found(monkeypatch, capsys, isolated):
    _fake_lookup(monkeypatch, Suggestions(["serendipity"]))
    assert cli.main(isolated + ["lookup", "seren"]) == cli.EXIT_OK
    assert "serendipity" in capsys.readouterr().out

    SettingsManager.reset_instance()
    _fake_lookup(monkeypatch, NotFound("xyzzy"))
    assert cli.main(isolated + ["lookup", "xyzzy"]) == cli.EXIT_NOT_FOUND


def test_lookup_network_error(monkeypatch, capsys, isolated):
    _fake_lookup(monkeypatch, NetworkError("http://x"))
    assert cli.main(isolated + ["lookup", "run"]) == cli.EXIT_ERROR
    assert "network error" in capsys.readouterr().err


def test_lookup_unparsable_body_reads_as_not_found(monkeypatch, capsys, isolated):
    _fake_lookup(monkeypatch, TransportError("http://x", "html"))
    assert cli.main(isolated + ["lookup", " Xyzzy "]) == cli.EXIT_NOT_FOUND
    captured = capsys.readouterr()
    assert "'xyzzy'" in captured.out
    assert captured.err == ""


def test_today_uses_deduped_list(capsys, isolated):
    # 2024-01-03 is offset 2; two unique words -> index 0
    assert cli.main(isolated + ["today", "--date", "2024-01-03"]) == cli.EXIT_OK
    assert "Alpha" in capsys.readouterr().out


def test_words_groups_by_letter(capsys, isolated):
    assert cli.main(isolated + ["words"]) == cli.EXIT_OK
    out = capsys.readouterr().out
    assert out.splitlines()[0] == "A"
    assert "dup" not in out


def test_learn(capsys, isolated):
    assert cli.main(isolated + ["learn", "beta"]) == cli.EXIT_OK
    assert "Words learned: 1" in capsys.readouterr().out
    SettingsManager.reset_instance()
    assert cli.main(isolated + ["learn", "gamma"]) == cli.EXIT_NOT_FOUND
