from __future__ import annotations

from ..base import PayDecision, PayInputs, PayStrategy, rate


class CommissionStrategy(PayStrategy):
    """Per-item commission on the worker's own deliverables."""

    def decide(self, inputs: PayInputs) -> PayDecision:
        return PayDecision(commission=rate(inputs.job.commission_per_item) * inputs.worker_deliverables)


class AdjustedCommissionStrategy(PayStrategy):
    """Per-item commission scaled by attendance over the whole period."""

    def decide(self, inputs: PayInputs) -> PayDecision:
        if not inputs.period_days:
            return PayDecision()
        earned = rate(inputs.job.commission_per_item) * inputs.worker_deliverables
        return PayDecision(commission=earned * inputs.days_worked / inputs.period_days)
