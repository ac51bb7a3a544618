from __future__ import annotations

from dataclasses import dataclass

from ...core.enums import PayStructure
from ...core.exceptions import UnconfiguredPayStructureError
from ...jobs.model import JobPayConfig
from .base import PayStrategy
from .strategies.commission_strategy import AdjustedCommissionStrategy, CommissionStrategy
from .strategies.flat_strategy import FlatRateStrategy
from .strategies.hourly_strategy import HourlyStrategy
from .strategies.team_commission_strategy import TeamCommissionStrategy


@dataclass
class PayStrategyFactory:
    """Factory Pattern: choose the pay rule for a job."""

    def for_job(self, job: JobPayConfig) -> PayStrategy:
        structure = job.structure
        if structure == PayStructure.FLAT:
            return FlatRateStrategy()
        if structure == PayStructure.HOURLY:
            return HourlyStrategy()
        if structure == PayStructure.COMMISSION:
            return CommissionStrategy()
        if structure == PayStructure.COMMISSION_ADJUSTED:
            return AdjustedCommissionStrategy()
        if structure == PayStructure.TEAM_COMMISSION:
            return TeamCommissionStrategy()
        raise UnconfiguredPayStructureError(job.job_id, job.pay_structure)
