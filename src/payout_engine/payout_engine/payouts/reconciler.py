from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from ..core.enums import PayoutStatus
from ..periods.model import PayPeriod
from .model import PayoutBreakdown, PayoutKey, PayoutRecord


@dataclass(frozen=True)
class ReconcileResult:
    to_insert: list[PayoutRecord]
    to_display: list[PayoutRecord]


def new_record(breakdown: PayoutBreakdown, period: PayPeriod) -> PayoutRecord:
    return PayoutRecord(
        worker_id=breakdown.worker_id,
        job_id=breakdown.job_id,
        period_start=period.start,
        period_end=period.end,
        days_worked=breakdown.days_worked,
        total_days=breakdown.total_days,
        deliverables=breakdown.deliverables,
        target_deliverables=breakdown.target_deliverables,
        base_pay=breakdown.base_pay,
        commission=breakdown.commission,
        total_payout=breakdown.total_payout,
        status=PayoutStatus.PENDING,
        payment_type=breakdown.pay_structure,
    )


def reconcile(
    computed: Iterable[PayoutBreakdown],
    existing: Sequence[PayoutRecord],
    period: PayPeriod,
) -> ReconcileResult:
    """Merge fresh breakdowns with stored payouts for ``period``.

    A stored row always wins over a fresh computation for the same
    ``(worker_id, job_id, period_start)``, whatever its status, so amounts
    are frozen once the first row exists. Unconfigured breakdowns never
    become rows.
    """
    seen: set[PayoutKey] = {r.key for r in existing}
    to_insert: list[PayoutRecord] = []

    for b in computed:
        if b.unconfigured:
            continue
        record = new_record(b, period)
        if record.key in seen:
            continue
        seen.add(record.key)
        to_insert.append(record)

    return ReconcileResult(to_insert=to_insert, to_display=list(existing) + to_insert)
