from __future__ import annotations

import logging
from typing import Iterable, Mapping, Optional

from ...attendance.aggregator import WorkerJobKey
from ...common.numbers import ZERO
from ...core.exceptions import UnconfiguredPayStructureError
from ...deliverables.aggregator import DeliverableTotals
from ...jobs.model import JobPayConfig, RosterEntry
from ..model import PayoutBreakdown, zero_breakdown
from .base import PayInputs
from .factory import PayStrategyFactory

logger = logging.getLogger(__name__)


class PayoutCalculator:
    """Turns one worker's aggregated facts on one job into a breakdown.

    Pure arithmetic: rates and quantities are used as given, no rounding is
    applied and missing divisors produce a zero commission instead of an
    error.
    """

    def __init__(self, *, strategy_factory: Optional[PayStrategyFactory] = None):
        self._factory = strategy_factory or PayStrategyFactory()

    def compute(
        self,
        *,
        worker_id: str,
        job: JobPayConfig,
        attendance: Mapping[WorkerJobKey, int],
        deliverables: DeliverableTotals,
        period_days: Optional[int],
        days_elapsed: Optional[int],
    ) -> PayoutBreakdown:
        days_worked = int(attendance.get((worker_id, job.job_id), 0))
        worker_total = deliverables.worker_total(worker_id, job.job_id)

        try:
            strategy = self._factory.for_job(job)
        except UnconfiguredPayStructureError as exc:
            logger.warning("[payouts] %s; worker %s gets no payout", exc, worker_id)
            return zero_breakdown(
                worker_id,
                job.job_id,
                job.pay_structure,
                days_worked=days_worked,
                total_days=period_days or 0,
                days_elapsed=days_elapsed or 0,
                deliverables=worker_total,
                target_deliverables=job.target_deliverable,
            )

        decision = strategy.decide(
            PayInputs(
                job=job,
                days_worked=days_worked,
                worker_deliverables=worker_total,
                pool=deliverables.pool_total(job.job_id),
                period_days=int(period_days or 0),
                days_elapsed=int(days_elapsed or 0),
            )
        )

        return PayoutBreakdown(
            worker_id=worker_id,
            job_id=job.job_id,
            pay_structure=job.structure.value,
            days_worked=days_worked,
            total_days=int(period_days or 0),
            days_elapsed=int(days_elapsed or 0),
            deliverables=worker_total if strategy.reports_individual_deliverables else ZERO,
            target_deliverables=job.target_deliverable,
            base_pay=decision.base_pay,
            commission=decision.commission,
        )


def candidate_pairs(
    jobs: Mapping[str, JobPayConfig],
    roster: Iterable[RosterEntry],
    attendance: Mapping[WorkerJobKey, int],
    deliverables: DeliverableTotals,
) -> list[WorkerJobKey]:
    """Worker/job pairs that get a payout this period.

    Pooled jobs pay their active roster, whether or not a worker attended.
    Other jobs pay every worker with an attendance or attributed deliverable
    fact. Facts for unknown jobs are dropped.
    """
    pairs: dict[WorkerJobKey, None] = {}

    for entry in roster:
        job = jobs.get(entry.job_id)
        if entry.is_active and job is not None and job.is_pooled:
            pairs[(entry.worker_id, entry.job_id)] = None

    for key in list(attendance) + list(deliverables.per_worker):
        job = jobs.get(key[1])
        if job is None:
            logger.debug("[payouts] skipping facts for unknown job %s", key[1])
            continue
        if not job.is_pooled:
            pairs[key] = None

    return list(pairs)
