from __future__ import annotations

from ....core.constants import HOURS_PER_DAY
from ..base import PayDecision, PayInputs, PayStrategy, rate


class HourlyStrategy(PayStrategy):
    """Hourly rate over a standard working day per day present."""

    def decide(self, inputs: PayInputs) -> PayDecision:
        return PayDecision(base_pay=rate(inputs.job.hourly_rate) * inputs.days_worked * HOURS_PER_DAY)
