from __future__ import annotations

from enum import Enum
from typing import Optional


class AttendanceStatus(str, Enum):
    """Attendance status as recorded by the dashboard."""

    PRESENT = "present"
    ABSENT = "absent"
    PARTIAL = "partial"


class PayStructure(str, Enum):
    """Rule family a job uses to compensate its workers."""

    FLAT = "flat"
    HOURLY = "hourly"
    COMMISSION = "commission"
    COMMISSION_ADJUSTED = "commission_adjusted"
    TEAM_COMMISSION = "team_commission"

    @classmethod
    def parse(cls, value: object) -> Optional["PayStructure"]:
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None


class PayoutStatus(str, Enum):
    """Approval lifecycle of a stored payout."""

    PENDING = "pending"
    APPROVED = "approved"
    PROCESSED = "processed"


class Weekday(int, Enum):
    """Weekday numbers as returned by ``date.weekday()``."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @classmethod
    def from_name(cls, name: str) -> Optional["Weekday"]:
        key = (name or "").strip().lower()
        if not key:
            return None
        for day in cls:
            full = day.name.lower()
            if key == full or (len(key) >= 3 and full.startswith(key)):
                return day
        return None
