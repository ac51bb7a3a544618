from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def list_for_period(self, *, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        """All attendance facts dated within ``[start_date, end_date]``."""

        raise NotImplementedError
