from __future__ import annotations

from datetime import date
from typing import Sequence

from ..common.numbers import to_decimal
from ..core.exceptions import StoreReadError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, map_rows
from .model import DeliverableRecord, deliverable_from_row
from .repository import DeliverableRepository


def _row_to_record(r: dict) -> DeliverableRecord:
    # NULL worker_id marks a team deliverable
    return deliverable_from_row(
        worker_id=str(r["worker_id"]) if r.get("worker_id") else None,
        job_id=str(r["job_id"]),
        date=r["deliverable_date"],
        quantity=to_decimal(r.get("quantity")),
    )


class MySQLDeliverableRepository(DeliverableRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_period(self, *, start_date: date, end_date: date) -> Sequence[DeliverableRecord]:
        with db_cursor(self._conn_factory, error_cls=StoreReadError) as (_, cur):
            cur.execute(
                """
                SELECT worker_id, job_id, deliverable_date, quantity
                FROM deliverables
                WHERE deliverable_date BETWEEN %s AND %s
                ORDER BY deliverable_date ASC
                """,
                (start_date, end_date),
            )
            rows = fetchall(cur)

        return map_rows(rows, _row_to_record)
