from __future__ import annotations

from decimal import ROUND_FLOOR, localcontext

from ....common.numbers import floor_money
from ..base import PayDecision, PayInputs, PayStrategy, rate


class TeamCommissionStrategy(PayStrategy):
    """Share of the job-wide pool, proportional to days present so far.

    The denominator is the business days elapsed, not the whole period, so
    an in-progress period is not diluted by days that have not happened yet.
    Each share is floored to the stored money scale; the pennies left over
    stay unallocated.
    """

    reports_individual_deliverables = False

    def decide(self, inputs: PayInputs) -> PayDecision:
        if (inputs.days_elapsed or 0) <= 0 or inputs.pool <= 0:
            return PayDecision()
        pool_amount = inputs.pool * rate(inputs.job.commission_per_item)
        with localcontext() as ctx:
            ctx.rounding = ROUND_FLOOR
            share = pool_amount * inputs.days_worked / inputs.days_elapsed
        return PayDecision(commission=floor_money(share))
