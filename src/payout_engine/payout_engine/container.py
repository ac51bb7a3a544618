from __future__ import annotations

from dataclasses import dataclass

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .database.connection import DBConfig, DatabaseConnection
from .deliverables.mysql_deliverable_repository import MySQLDeliverableRepository
from .jobs.mysql_job_repository import MySQLJobRepository
from .payouts.mysql_payout_repository import MySQLPayoutRepository
from .payouts.service import PayoutService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    jobs_repo: MySQLJobRepository
    attendance_repo: MySQLAttendanceRepository
    deliverables_repo: MySQLDeliverableRepository
    payouts_repo: MySQLPayoutRepository

    payout_service: PayoutService


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    jobs_repo = MySQLJobRepository(conn)
    attendance_repo = MySQLAttendanceRepository(conn)
    deliverables_repo = MySQLDeliverableRepository(conn)
    payouts_repo = MySQLPayoutRepository(conn)

    payout_service = PayoutService(jobs_repo, attendance_repo, deliverables_repo, payouts_repo)

    return Container(
        conn=conn,
        jobs_repo=jobs_repo,
        attendance_repo=attendance_repo,
        deliverables_repo=deliverables_repo,
        payouts_repo=payouts_repo,
        payout_service=payout_service,
    )
