from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Callable, Optional, Sequence

from ..attendance.aggregator import aggregate_attendance
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import today_local
from ..core.enums import PayoutStatus
from ..core.exceptions import StoreReadError, StoreWriteError
from ..deliverables.aggregator import aggregate_deliverables
from ..deliverables.repository import DeliverableRepository
from ..jobs.model import JobPayConfig
from ..jobs.repository import JobRepository
from ..periods.business_days import business_days, days_elapsed
from ..periods.model import PayPeriod
from .calculator.payout_calculator import PayoutCalculator, candidate_pairs
from .model import PayoutBreakdown, PayoutRecord
from .reconciler import reconcile
from .repository import PayoutRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecalculationResult:
    period: PayPeriod
    to_display: list[PayoutRecord]
    inserted: list[PayoutRecord] = field(default_factory=list)
    unconfigured: list[PayoutBreakdown] = field(default_factory=list)
    write_error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.write_error is None


class PayoutService:
    def __init__(
        self,
        jobs: JobRepository,
        attendance: AttendanceRepository,
        deliverables: DeliverableRepository,
        payouts: PayoutRepository,
        *,
        calculator: Optional[PayoutCalculator] = None,
        clock: Callable[[], date] = today_local,
    ):
        self._jobs = jobs
        self._attendance = attendance
        self._deliverables = deliverables
        self._payouts = payouts
        self._calculator = calculator or PayoutCalculator()
        self._clock = clock

    def recalculate(self, period: PayPeriod, *, today: Optional[date] = None) -> RecalculationResult:
        """Compute payouts for ``period`` and store the ones not stored yet.

        Read failures raise ``StoreReadError`` before anything is written.
        A failed insert is reported on the result, which still carries every
        payout to display.
        """
        today = today or self._clock()
        logger.info("[payouts] recalculating %s (today=%s)", period.label(), today)

        jobs = {j.job_id: j for j in self._jobs.list_pay_configs()}
        roster = self._jobs.list_active_roster()
        attendance = aggregate_attendance(
            self._attendance.list_for_period(start_date=period.start, end_date=period.end)
        )
        deliverables = aggregate_deliverables(
            self._deliverables.list_for_period(start_date=period.start, end_date=period.end)
        )
        existing = list(self._payouts.list_for_period(period_start=period.start))

        day_counts: dict[str, tuple[int, int]] = {}
        computed: list[PayoutBreakdown] = []
        for worker_id, job_id in candidate_pairs(jobs, roster, attendance, deliverables):
            job = jobs[job_id]
            if job_id not in day_counts:
                day_counts[job_id] = self._day_counts(job, period, today)
            period_days, elapsed = day_counts[job_id]
            computed.append(
                self._calculator.compute(
                    worker_id=worker_id,
                    job=job,
                    attendance=attendance,
                    deliverables=deliverables,
                    period_days=period_days,
                    days_elapsed=elapsed,
                )
            )

        unconfigured = [b for b in computed if b.unconfigured]
        merged = reconcile(computed, existing, period)
        logger.info(
            "[payouts] %s: computed=%s existing=%s new=%s unconfigured=%s",
            period.label(), len(computed), len(existing), len(merged.to_insert), len(unconfigured),
        )

        if not merged.to_insert:
            return RecalculationResult(period=period, to_display=merged.to_display, unconfigured=unconfigured)

        try:
            inserted = self._payouts.insert_new(merged.to_insert)
        except StoreWriteError as exc:
            logger.exception("[payouts] storing %s new payouts failed: %s", len(merged.to_insert), exc)
            return RecalculationResult(
                period=period,
                to_display=merged.to_display,
                unconfigured=unconfigured,
                write_error=str(exc),
            )

        to_display = self._with_ids(merged.to_display, inserted)
        if len(inserted) < len(merged.to_insert):
            # Another run stored some of the same keys first; its rows win.
            logger.info(
                "[payouts] %s of %s payouts already stored concurrently",
                len(merged.to_insert) - len(inserted), len(merged.to_insert),
            )
            try:
                refreshed = list(self._payouts.list_for_period(period_start=period.start))
            except StoreReadError as exc:
                logger.warning("[payouts] could not reload payouts after insert: %s", exc)
            else:
                to_display = reconcile(computed, refreshed, period).to_display

        return RecalculationResult(
            period=period,
            to_display=to_display,
            inserted=inserted,
            unconfigured=unconfigured,
        )

    def list_payouts(self, period: PayPeriod, *, status: Optional[PayoutStatus] = None) -> Sequence[PayoutRecord]:
        return self._payouts.list_for_period(period_start=period.start, status=status)

    @staticmethod
    def _day_counts(job: JobPayConfig, period: PayPeriod, today: date) -> tuple[int, int]:
        return (
            business_days(period.start, period.end, job.excluded_weekdays),
            days_elapsed(period, today, job.excluded_weekdays),
        )

    @staticmethod
    def _with_ids(records: list[PayoutRecord], inserted: list[PayoutRecord]) -> list[PayoutRecord]:
        stored = {r.key: r for r in inserted}
        return [stored.get(r.key, r) if r.id is None else r for r in records]
