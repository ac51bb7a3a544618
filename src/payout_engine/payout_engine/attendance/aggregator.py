from __future__ import annotations

from typing import Iterable

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord

WorkerJobKey = tuple[str, str]


def aggregate_attendance(records: Iterable[AttendanceRecord]) -> dict[WorkerJobKey, int]:
    """Days present per ``(worker_id, job_id)``.

    Every pair with any record is present in the result (0 when the worker
    was never marked present). Duplicate records for the same day are
    counted once each.
    """
    days: dict[WorkerJobKey, int] = {}
    for r in records:
        key = (r.worker_id, r.job_id)
        days.setdefault(key, 0)
        if r.status == AttendanceStatus.PRESENT:
            days[key] += 1
    return days
