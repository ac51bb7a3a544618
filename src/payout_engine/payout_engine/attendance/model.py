from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain fact: one worker's attendance on one job for one day."""

    worker_id: str
    job_id: str
    date: date
    status: AttendanceStatus
