"""Example: run the payout engine with in-memory data (no database, no Flask)."""

from datetime import date
from decimal import Decimal

from src.payout_engine.payout_engine.attendance.aggregator import aggregate_attendance
from src.payout_engine.payout_engine.attendance.model import AttendanceRecord
from src.payout_engine.payout_engine.core.enums import AttendanceStatus
from src.payout_engine.payout_engine.deliverables.aggregator import aggregate_deliverables
from src.payout_engine.payout_engine.deliverables.model import TeamDeliverable
from src.payout_engine.payout_engine.jobs.model import JobPayConfig
from src.payout_engine.payout_engine.payouts.calculator.payout_calculator import PayoutCalculator


def main():
    job = JobPayConfig(job_id="packing", pay_structure="team_commission", commission_per_item=Decimal("5"))
    attendance = aggregate_attendance(
        AttendanceRecord(worker_id=w, job_id="packing", date=date(2025, 3, d), status=AttendanceStatus.PRESENT)
        for w, days in (("ana", (3, 4, 5)), ("ben", (3, 4, 5, 6, 7, 10, 11)))
        for d in days
    )
    deliverables = aggregate_deliverables(
        [TeamDeliverable(job_id="packing", date=date(2025, 3, 14), quantity=Decimal("1000"))]
    )

    calc = PayoutCalculator()
    for worker in ("ana", "ben"):
        b = calc.compute(
            worker_id=worker,
            job=job,
            attendance=attendance,
            deliverables=deliverables,
            period_days=21,
            days_elapsed=10,
        )
        print(worker, b.days_worked, b.commission, b.total_payout)


if __name__ == "__main__":
    main()
