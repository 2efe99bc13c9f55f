"""Scorecard method: regional base valuation scaled by successive multipliers."""

from __future__ import annotations

from valuai.benchmarks import parse_market_size, scorecard_multiplier
from valuai.catalog import SCORECARD
from valuai.models import ValuationInput

from .base import ValuationMethodology

SCORECARD_BASE = 2_000_000.0


class ScorecardMethodology(ValuationMethodology):
    name = SCORECARD

    def evaluate(self, data: ValuationInput) -> float:
        valuation = SCORECARD_BASE
        valuation *= scorecard_multiplier(data.industry)

        if data.team_size >= 5:
            valuation *= 1.2
        elif data.team_size >= 3:
            valuation *= 1.1

        market_value = parse_market_size(data.market_size)
        if market_value > 10_000_000_000:
            valuation *= 1.3
        elif market_value > 1_000_000_000:
            valuation *= 1.2

        revenue = data.revenue or 0.0
        if revenue > 100_000:
            valuation *= 1.4
        elif revenue > 10_000:
            valuation *= 1.2

        return valuation
