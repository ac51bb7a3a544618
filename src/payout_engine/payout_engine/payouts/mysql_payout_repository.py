from __future__ import annotations

import uuid
from datetime import date
from typing import Optional, Sequence

from ..common.numbers import to_decimal, to_optional_decimal
from ..core.enums import PayoutStatus
from ..core.exceptions import StoreReadError, StoreWriteError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, map_rows
from .model import PayoutRecord
from .repository import PayoutRepository

_COLUMNS = (
    "id, worker_id, job_id, period_start, period_end, days_worked, total_days, deliverables, "
    "target_deliverables, base_pay, commission, total_payout, bonus, deductions, status, payment_type"
)


def _row_to_record(r: dict) -> PayoutRecord:
    return PayoutRecord(
        id=str(r["id"]),
        worker_id=str(r["worker_id"]),
        job_id=str(r["job_id"]),
        period_start=r["period_start"],
        period_end=r["period_end"],
        days_worked=int(r.get("days_worked") or 0),
        total_days=int(r.get("total_days") or 0),
        deliverables=to_decimal(r.get("deliverables")),
        target_deliverables=to_decimal(r.get("target_deliverables")),
        base_pay=to_decimal(r.get("base_pay")),
        commission=to_decimal(r.get("commission")),
        total_payout=to_decimal(r.get("total_payout")),
        bonus=to_optional_decimal(r.get("bonus")),
        deductions=to_optional_decimal(r.get("deductions")),
        status=PayoutStatus(r["status"]),
        payment_type=str(r.get("payment_type") or ""),
    )


class MySQLPayoutRepository(PayoutRepository):
    def __init__(self, conn_factory: DatabaseConnection, *, id_factory=None):
        self._conn_factory = conn_factory
        self._id_factory = id_factory or (lambda: str(uuid.uuid4()))

    def list_for_period(
        self,
        *,
        period_start: date,
        status: Optional[PayoutStatus] = None,
    ) -> Sequence[PayoutRecord]:
        clauses = ["period_start=%s"]
        params: list[object] = [period_start]
        if status is not None:
            clauses.append("status=%s")
            params.append(status.value)

        with db_cursor(self._conn_factory, error_cls=StoreReadError) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM payouts
                WHERE {" AND ".join(clauses)}
                ORDER BY created_at ASC, id ASC
                """,
                tuple(params),
            )
            rows = fetchall(cur)

        return map_rows(rows, _row_to_record)

    def insert_new(self, records: Sequence[PayoutRecord]) -> list[PayoutRecord]:
        if not records:
            return []

        inserted: list[PayoutRecord] = []
        with db_cursor(self._conn_factory, dictionary=False, error_cls=StoreWriteError) as (_, cur):
            for rec in records:
                stored = rec.with_id(rec.id or self._id_factory())
                # The unique key on (worker_id, job_id, period_start) turns a
                # concurrent duplicate into a no-op with rowcount 0.
                cur.execute(
                    f"""
                    INSERT INTO payouts({_COLUMNS})
                    VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                    ON DUPLICATE KEY UPDATE id=id
                    """,
                    (
                        stored.id,
                        stored.worker_id,
                        stored.job_id,
                        stored.period_start,
                        stored.period_end,
                        stored.days_worked,
                        stored.total_days,
                        stored.deliverables,
                        stored.target_deliverables,
                        stored.base_pay,
                        stored.commission,
                        stored.total_payout,
                        stored.bonus,
                        stored.deductions,
                        stored.status.value,
                        stored.payment_type,
                    ),
                )
                if cur.rowcount > 0:
                    inserted.append(stored)
        return inserted
