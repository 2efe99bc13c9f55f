"""Venture capital method: exit value discounted by the target return multiple."""

from __future__ import annotations

from valuai.benchmarks import revenue_multiple
from valuai.catalog import VC_METHOD
from valuai.models import Stage, ValuationInput

from .base import VALUE_FLOOR, ValuationMethodology

REVENUE_GROWTH_MULTIPLE = 10
EARLY_REVENUE_TARGET_RETURN = 10
LATER_STAGE_TARGET_RETURN = 5


class VentureCapitalMethodology(ValuationMethodology):
    name = VC_METHOD

    def evaluate(self, data: ValuationInput) -> float:
        # Missing revenue is a zero growth base, which lands on the floor.
        projected_revenue = (
            data.projected_revenue or (data.revenue or 0.0) * REVENUE_GROWTH_MULTIPLE
        )
        terminal_value = projected_revenue * revenue_multiple(data.industry)

        if data.stage == Stage.EARLY_REVENUE:
            expected_return = EARLY_REVENUE_TARGET_RETURN
        else:
            expected_return = LATER_STAGE_TARGET_RETURN

        post_money = terminal_value / expected_return
        pre_money = post_money - data.funding_goal
        return max(pre_money, VALUE_FLOOR)
