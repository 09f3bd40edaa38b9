"""Text normalization and small parsing helpers."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any
from urllib.parse import quote


def normalize_term(term: str) -> str:
    """Lowercase a search term and trim surrounding whitespace."""
    return term.lower().strip()


def encode_path_segment(term: str) -> str:
    """Percent-encode *term* for use as a single URL path segment.

    Examples:
        ice cream -> ice%20cream
        a/b       -> a%2Fb
    """
    return quote(term, safe="")


def opt_str(value: Any) -> str | None:
    """Return *value* if it is a string, else ``None``."""
    return value if isinstance(value, str) else None


def opt_list(value: Any) -> list[Any]:
    """Return *value* if it is a list, else an empty list."""
    return value if isinstance(value, list) else []


def parse_timestamp(value: Any) -> datetime | None:
    """Parse an ISO-8601 timestamp (``Z`` suffix accepted).

    Naive timestamps are taken as UTC. Returns ``None`` on anything
    unparsable.
    """
    if not isinstance(value, str) or not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_timestamp(value: datetime) -> str:
    """Format a datetime as ISO-8601 with a ``Z`` suffix for UTC."""
    return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")
