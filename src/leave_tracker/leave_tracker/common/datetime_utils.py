from __future__ import annotations

from datetime import date, datetime

from ..core.exceptions import InvalidInputError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(str(value or "").strip(), "%Y-%m-%d").date()
    except ValueError:
        raise InvalidInputError(f"Invalid date (YYYY-MM-DD): {value!r}")


def inclusive_days(start: date, end: date) -> int:
    """Number of calendar days from start to end, both ends counted."""
    return (end - start).days + 1


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
