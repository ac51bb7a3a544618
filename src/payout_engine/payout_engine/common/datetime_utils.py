from __future__ import annotations

from datetime import date, datetime

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"Invalid date {value!r}, expected YYYY-MM-DD") from exc


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now().date()
