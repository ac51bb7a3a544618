from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import AbstractSet, Iterable, Optional

from ..core.constants import DEFAULT_EXCLUDED_WEEKDAY_NAMES
from ..core.enums import Weekday
from .model import PayPeriod

logger = logging.getLogger(__name__)

DEFAULT_EXCLUDED: frozenset[Weekday] = frozenset(
    Weekday.from_name(name) for name in DEFAULT_EXCLUDED_WEEKDAY_NAMES
)


def parse_weekdays(names: Optional[Iterable[str]]) -> frozenset[Weekday]:
    """Map stored weekday names to ``Weekday``; ``None`` means the default weekend."""
    if names is None:
        return DEFAULT_EXCLUDED

    days = set()
    for name in names:
        day = Weekday.from_name(name)
        if day is None:
            logger.warning("[periods] ignoring unknown weekday name %r", name)
            continue
        days.add(day)
    return frozenset(days)


def business_days(start: date, end: date, excluded: Optional[AbstractSet[Weekday]] = None) -> int:
    """Count days in ``[start, end]`` whose weekday is not excluded.

    ``excluded=None`` falls back to Saturday/Sunday; an empty set excludes
    nothing. ``start > end`` yields 0.
    """
    if start > end:
        return 0

    skip = DEFAULT_EXCLUDED if excluded is None else excluded
    total_days = (end - start).days + 1
    full_weeks, remainder = divmod(total_days, 7)

    count = full_weeks * (7 - len(skip))
    day = start + timedelta(days=full_weeks * 7)
    for _ in range(remainder):
        if Weekday(day.weekday()) not in skip:
            count += 1
        day += timedelta(days=1)
    return count


def days_elapsed(period: PayPeriod, today: date, excluded: Optional[AbstractSet[Weekday]] = None) -> int:
    """Business days of ``period`` that have already started by ``today``."""
    return business_days(period.start, min(period.end, today), excluded)
