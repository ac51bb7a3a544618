from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable

from ..common.numbers import ZERO
from ..core.enums import PayoutStatus
from .model import PayoutRecord


@dataclass(frozen=True)
class PayoutSummary:
    count: int
    total_pending: Decimal
    total_approved: Decimal
    total_processed: Decimal
    total: Decimal
    average: Decimal


def summarize(records: Iterable[PayoutRecord]) -> PayoutSummary:
    """Headline figures of the payouts page."""
    totals = {status: ZERO for status in PayoutStatus}
    count = 0
    for r in records:
        totals[r.status] += r.total_payout
        count += 1

    total = sum(totals.values(), ZERO)
    return PayoutSummary(
        count=count,
        total_pending=totals[PayoutStatus.PENDING],
        total_approved=totals[PayoutStatus.APPROVED],
        total_processed=totals[PayoutStatus.PROCESSED],
        total=total,
        average=total / count if count else ZERO,
    )
