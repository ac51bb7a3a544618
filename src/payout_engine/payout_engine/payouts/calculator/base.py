from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal

from ...common.numbers import ZERO
from ...jobs.model import JobPayConfig


@dataclass(frozen=True)
class PayInputs:
    job: JobPayConfig
    days_worked: int
    worker_deliverables: Decimal
    pool: Decimal
    period_days: int
    days_elapsed: int


@dataclass(frozen=True)
class PayDecision:
    base_pay: Decimal = ZERO
    commission: Decimal = ZERO


class PayStrategy(ABC):
    """Strategy Pattern: one pay rule family per subclass."""

    # Pooled jobs have no meaningful per-worker deliverable figure.
    reports_individual_deliverables = True

    @abstractmethod
    def decide(self, inputs: PayInputs) -> PayDecision:
        raise NotImplementedError


def rate(value) -> Decimal:
    """Missing rates count as zero."""
    return ZERO if value is None else value
