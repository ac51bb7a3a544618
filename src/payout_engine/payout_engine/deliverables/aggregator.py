from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Iterable

from ..common.numbers import ZERO
from .model import DeliverableRecord, IndividualDeliverable


@dataclass
class DeliverableTotals:
    per_worker: dict[tuple[str, str], Decimal] = field(default_factory=dict)
    per_job_pool: dict[str, Decimal] = field(default_factory=dict)

    def worker_total(self, worker_id: str, job_id: str) -> Decimal:
        return self.per_worker.get((worker_id, job_id), ZERO)

    def pool_total(self, job_id: str) -> Decimal:
        return self.per_job_pool.get(job_id, ZERO)


def aggregate_deliverables(records: Iterable[DeliverableRecord]) -> DeliverableTotals:
    """Sum quantities per worker/job and per job pool.

    The pool counts every record of the job, attributed or not; only team
    commission jobs read it.
    """
    per_worker: dict[tuple[str, str], Decimal] = defaultdict(Decimal)
    per_job: dict[str, Decimal] = defaultdict(Decimal)

    for r in records:
        per_job[r.job_id] += r.quantity
        if isinstance(r, IndividualDeliverable):
            per_worker[(r.worker_id, r.job_id)] += r.quantity

    return DeliverableTotals(per_worker=dict(per_worker), per_job_pool=dict(per_job))
