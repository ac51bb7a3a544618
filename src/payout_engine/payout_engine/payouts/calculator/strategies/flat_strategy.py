from __future__ import annotations

from ..base import PayDecision, PayInputs, PayStrategy, rate


class FlatRateStrategy(PayStrategy):
    """Fixed amount per day present."""

    def decide(self, inputs: PayInputs) -> PayDecision:
        return PayDecision(base_pay=rate(inputs.job.flat_rate) * inputs.days_worked)
