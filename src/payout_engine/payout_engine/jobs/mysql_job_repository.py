from __future__ import annotations

from typing import Sequence

from ..common.numbers import to_decimal, to_optional_decimal
from ..core.exceptions import StoreReadError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, map_rows, split_csv
from ..periods.business_days import parse_weekdays
from .model import JobPayConfig, RosterEntry
from .repository import JobRepository


def _row_to_config(r: dict) -> JobPayConfig:
    return JobPayConfig(
        job_id=str(r["id"]),
        pay_structure=str(r.get("pay_structure") or ""),
        flat_rate=to_optional_decimal(r.get("flat_rate")),
        hourly_rate=to_optional_decimal(r.get("hourly_rate")),
        commission_per_item=to_optional_decimal(r.get("commission_per_item")),
        target_deliverable=to_decimal(r.get("target_deliverable")),
        excluded_weekdays=parse_weekdays(split_csv(r.get("excluded_days"))),
    )


class MySQLJobRepository(JobRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_pay_configs(self) -> Sequence[JobPayConfig]:
        with db_cursor(self._conn_factory, error_cls=StoreReadError) as (_, cur):
            cur.execute(
                """
                SELECT id, pay_structure, flat_rate, hourly_rate, commission_per_item,
                       target_deliverable, excluded_days
                FROM jobs
                """
            )
            rows = fetchall(cur)

        return map_rows(rows, _row_to_config)

    def list_active_roster(self) -> Sequence[RosterEntry]:
        with db_cursor(self._conn_factory, error_cls=StoreReadError) as (_, cur):
            cur.execute(
                """
                SELECT job_id, worker_id
                FROM job_workers
                WHERE is_active = 1
                """
            )
            rows = fetchall(cur)

        return map_rows(rows, lambda r: RosterEntry(job_id=str(r["job_id"]), worker_id=str(r["worker_id"])))
