from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from ..common.numbers import ZERO
from ..core.enums import PayStructure, Weekday
from ..periods.business_days import DEFAULT_EXCLUDED


@dataclass(frozen=True)
class JobPayConfig:
    """Pay rules of a job, read-only to the engine.

    ``pay_structure`` keeps the stored value verbatim so an unsupported value
    reaches the calculator and is reported instead of being lost on load.
    """

    job_id: str
    pay_structure: str
    flat_rate: Optional[Decimal] = None
    hourly_rate: Optional[Decimal] = None
    commission_per_item: Optional[Decimal] = None
    target_deliverable: Decimal = ZERO
    excluded_weekdays: frozenset[Weekday] = DEFAULT_EXCLUDED

    @property
    def structure(self) -> Optional[PayStructure]:
        return PayStructure.parse(self.pay_structure)

    @property
    def is_pooled(self) -> bool:
        return self.structure == PayStructure.TEAM_COMMISSION


@dataclass(frozen=True)
class RosterEntry:
    job_id: str
    worker_id: str
    is_active: bool = True
