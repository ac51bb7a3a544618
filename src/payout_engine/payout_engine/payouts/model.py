from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from decimal import Decimal
from typing import Optional

from ..common.numbers import ZERO
from ..core.enums import PayoutStatus

PayoutKey = tuple[str, str, date]


@dataclass(frozen=True)
class PayoutBreakdown:
    """Calculator output for one worker on one job."""

    worker_id: str
    job_id: str
    pay_structure: str
    days_worked: int
    total_days: int
    days_elapsed: int
    deliverables: Decimal
    target_deliverables: Decimal
    base_pay: Decimal
    commission: Decimal
    unconfigured: bool = False

    @property
    def total_payout(self) -> Decimal:
        return self.base_pay + self.commission


@dataclass(frozen=True)
class PayoutRecord:
    """Stored payout row. ``id`` is None until the store assigns one."""

    worker_id: str
    job_id: str
    period_start: date
    period_end: date
    days_worked: int
    total_days: int
    deliverables: Decimal
    target_deliverables: Decimal
    base_pay: Decimal
    commission: Decimal
    total_payout: Decimal
    status: PayoutStatus
    payment_type: str
    # manual adjustments shown next to the amounts; the engine never sets them
    bonus: Optional[Decimal] = None
    deductions: Optional[Decimal] = None
    id: Optional[str] = None

    @property
    def key(self) -> PayoutKey:
        return (self.worker_id, self.job_id, self.period_start)

    def with_id(self, payout_id: str) -> "PayoutRecord":
        return replace(self, id=payout_id)


def zero_breakdown(worker_id: str, job_id: str, pay_structure: str, **counts) -> PayoutBreakdown:
    return PayoutBreakdown(
        worker_id=worker_id,
        job_id=job_id,
        pay_structure=pay_structure,
        days_worked=int(counts.get("days_worked", 0)),
        total_days=int(counts.get("total_days", 0)),
        days_elapsed=int(counts.get("days_elapsed", 0)),
        deliverables=counts.get("deliverables", ZERO),
        target_deliverables=counts.get("target_deliverables", ZERO),
        base_pay=ZERO,
        commission=ZERO,
        unconfigured=True,
    )
