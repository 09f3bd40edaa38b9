"""Application entry point.

Initializes environment, configuration and logging, then runs one
command: ``lookup``, ``today``, ``words`` or ``learn``.
"""

from __future__ import annotations

import argparse
import sys
from datetime import date, datetime
from pathlib import Path

from dotenv import load_dotenv

from lexicology.config.settings import AppSettings, SettingsManager
from lexicology.core import entry_normalizer
from lexicology.core.learning_manager import LearningManager
from lexicology.core.lookup_client import MerriamWebsterClient
from lexicology.core.lookup_session import outcome_message, user_message
from lexicology.core.word_of_the_day import format_countdown, select_or_placeholder, time_until_next
from lexicology.core.word_store import dedupe, group_by_initial, load_word_list
from lexicology.data.json_adapter import JSONAdapter
from lexicology.data.word_server import WordServerClient
from lexicology.models.entry import DictionaryEntry
from lexicology.models.outcome import Entries, NotFound, Suggestions
from lexicology.models.word import WordRecord
from lexicology.utils.constants import APP_TITLE, APP_VERSION
from lexicology.utils.exceptions import LexicologyError, LookupFailure, TransportError
from lexicology.utils.logging_config import get_logger, setup_logging

logger = get_logger("main")

EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_ERROR = 2


def _format_entry(entry: DictionaryEntry) -> list[str]:
    lines = [entry_normalizer.display_headword(entry).upper()]
    if entry.part_of_speech:
        lines.append(f"  {entry.part_of_speech.capitalize()}")
    pron = entry_normalizer.primary_pronunciation(entry)
    if pron:
        lines.append(f"  \\{pron}\\")
    for label, text in entry_normalizer.normalize(entry):
        lines.append(f"  {label} {text}")
    etymology = entry_normalizer.extract_etymology(entry)
    if etymology:
        lines.append(f"  Etymology: {etymology}")
    for ref in entry_normalizer.related_terms(entry):
        lines.append(f"  See also: {ref}")
    return lines


def cmd_lookup(args: argparse.Namespace, settings: AppSettings) -> int:
    client = MerriamWebsterClient(settings.api)
    try:
        outcome = client.lookup(args.term)
    except TransportError as exc:
        logger.error("Unparsable response for '%s': %s", args.term, exc)
        outcome = NotFound(args.term.strip().lower())
    except LexicologyError as exc:
        print(user_message(exc, args.term.strip().lower()), file=sys.stderr)
        return EXIT_ERROR

    if isinstance(outcome, Entries):
        for entry in outcome.entries:
            print("\n".join(_format_entry(entry)))
        return EXIT_OK

    print(outcome_message(outcome))
    if isinstance(outcome, Suggestions):
        for suggestion in outcome.suggestions:
            print(f"  {suggestion}")
        return EXIT_OK
    return EXIT_NOT_FOUND


def _load_words(args: argparse.Namespace, settings: AppSettings) -> list[WordRecord]:
    if getattr(args, "server", False):
        try:
            return dedupe(WordServerClient(settings.server).fetch_words())
        except LookupFailure as exc:
            logger.warning("Word server unavailable, using local list: %s", exc)
    return load_word_list(JSONAdapter(), Path(settings.storage.word_list_path))


def cmd_today(args: argparse.Namespace, settings: AppSettings) -> int:
    day = args.date or date.today()
    words = _load_words(args, settings)
    word = select_or_placeholder(day, words, settings.word_of_the_day.epoch)
    print(f"Word of the day ({day.isoformat()}): {word.headword}")
    print(f"  {word.meaning}")
    print(f"  \"{word.example_sentence}\"")
    if not args.date:
        print(f"  Next word in {format_countdown(time_until_next(datetime.now()))}")
    return EXIT_OK


def cmd_words(args: argparse.Namespace, settings: AppSettings) -> int:
    words = _load_words(args, settings)
    for letter, records in group_by_initial(words).items():
        if args.letter and letter != args.letter.upper():
            continue
        print(letter)
        for record in records:
            print(f"  {record.headword} - {record.meaning}")
    return EXIT_OK


def cmd_learn(args: argparse.Namespace, settings: AppSettings) -> int:
    words = _load_words(args, settings)
    key = args.word.strip().lower()
    record = next((w for w in words if w.key == key), None)
    if record is None:
        print(f"'{args.word}' is not in the word list.", file=sys.stderr)
        return EXIT_NOT_FOUND
    manager = LearningManager(Path(settings.storage.progress_path))
    if not manager.mark_learned(record):
        print(f"'{record.headword}' was already learned.")
    print(f"Words learned: {manager.words_learned}, streak: {manager.current_streak} day(s)")
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="lexicology", description=APP_TITLE)
    parser.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")
    parser.add_argument(
        "--config", type=Path, default=None,
        help="User YAML config (default: ~/.lexicology/config.yaml)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_lookup = sub.add_parser("lookup", help="Look up a word in Merriam-Webster")
    p_lookup.add_argument("term")
    p_lookup.set_defaults(func=cmd_lookup)

    p_today = sub.add_parser("today", help="Show the word of the day")
    p_today.add_argument("--date", type=date.fromisoformat, help="YYYY-MM-DD (default: today)")
    p_today.add_argument("--server", action="store_true", help="Use the word server")
    p_today.set_defaults(func=cmd_today)

    p_words = sub.add_parser("words", help="List words by initial letter")
    p_words.add_argument("--letter", help="Only this section")
    p_words.add_argument("--server", action="store_true", help="Use the word server")
    p_words.set_defaults(func=cmd_words)

    p_learn = sub.add_parser("learn", help="Mark a word as learned")
    p_learn.add_argument("word")
    p_learn.add_argument("--server", action="store_true", help="Use the word server")
    p_learn.set_defaults(func=cmd_learn)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Application main function."""
    # Load .env from the working directory so MW_API_KEY is available
    load_dotenv()

    args = build_parser().parse_args(argv)

    # --- Configuration ---
    settings_mgr = SettingsManager(user_config_path=args.config)
    settings = settings_mgr.load()

    # --- Logging ---
    setup_logging(level=settings.logging.level)
    logger.debug("Running '%s'", args.command)

    try:
        return args.func(args, settings)
    except LexicologyError as exc:
        logger.error("%s failed: %s", args.command, exc)
        print(str(exc), file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
