"""Date helpers for journal date strings."""

from __future__ import annotations

from datetime import datetime, timezone
from functools import lru_cache

from dateutil import parser as dt_parser

_OLDEST = float("-inf")


def parse_date(value: str | None) -> datetime | None:
    """Parse a journal date string.

    ISO 8601 strings take the strict fast path; anything else goes through
    the fuzzy dateutil parser.

    Args:
        value: Date or datetime string in any format dateutil understands.

    Returns:
        Naive UTC datetime, or None when empty or unparseable.
    """
    if not value:
        return None
    try:
        parsed = dt_parser.isoparse(value)
    except (ValueError, OverflowError):
        try:
            parsed = dt_parser.parse(value)
        except (ValueError, OverflowError):
            return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


@lru_cache(maxsize=4096)
def date_sort_value(value: str | None) -> float:
    """Return a comparable number for a date string; unparseable dates sort oldest."""
    parsed = parse_date(value)
    if parsed is None:
        return _OLDEST
    return parsed.replace(tzinfo=timezone.utc).timestamp()
