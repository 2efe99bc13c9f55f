"""Comparable analysis: revenue multiple, or market penetration before revenue."""

from __future__ import annotations

from valuai.benchmarks import market_penetration, parse_market_size, revenue_multiple
from valuai.catalog import COMPARABLE_ANALYSIS
from valuai.models import ValuationInput

from .base import ValuationMethodology


class ComparableAnalysisMethodology(ValuationMethodology):
    name = COMPARABLE_ANALYSIS

    def evaluate(self, data: ValuationInput) -> float:
        if data.revenue:
            return data.revenue * revenue_multiple(data.industry)
        return parse_market_size(data.market_size) * market_penetration(data.stage)
