from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date

from ..common.datetime_utils import parse_iso_date


@dataclass(frozen=True)
class PayPeriod:
    """Calendar window over which attendance and deliverables are paid."""

    start: date
    end: date

    @classmethod
    def month_of(cls, day: date) -> "PayPeriod":
        last = calendar.monthrange(day.year, day.month)[1]
        return cls(start=day.replace(day=1), end=day.replace(day=last))

    @classmethod
    def parse(cls, start: str, end: str) -> "PayPeriod":
        return cls(start=parse_iso_date(start), end=parse_iso_date(end))

    def label(self) -> str:
        return f"{self.start.isoformat()}..{self.end.isoformat()}"
