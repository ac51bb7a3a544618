from __future__ import annotations

from datetime import date
from typing import Sequence

from ..core.enums import AttendanceStatus
from ..core.exceptions import StoreReadError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, map_rows
from .model import AttendanceRecord
from .repository import AttendanceRepository


def _row_to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        worker_id=str(r["worker_id"]),
        job_id=str(r["job_id"]),
        date=r["attendance_date"],
        status=AttendanceStatus(r["status"]),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_period(self, *, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory, error_cls=StoreReadError) as (_, cur):
            cur.execute(
                """
                SELECT worker_id, job_id, attendance_date, status
                FROM attendance
                WHERE attendance_date BETWEEN %s AND %s
                ORDER BY attendance_date ASC
                """,
                (start_date, end_date),
            )
            rows = fetchall(cur)

        return map_rows(rows, _row_to_record)
