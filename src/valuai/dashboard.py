"""Portfolio summary over an owner's stored valuations."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from valuai.aggregation import round_half_up
from valuai.models import ValuationResult

RECENT_LIMIT = 5


@dataclass(frozen=True)
class DashboardSummary:
    owner_id: str
    recent_valuations: tuple[ValuationResult, ...]
    total_valuations: int
    average_valuation: int
    portfolio_growth: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "owner_id": self.owner_id,
            "recent_valuations": [r.to_dict() for r in self.recent_valuations],
            "total_valuations": self.total_valuations,
            "average_valuation": self.average_valuation,
            "portfolio_growth": self.portfolio_growth,
        }


def summarize_portfolio(owner_id: str, results: Sequence[ValuationResult]) -> DashboardSummary:
    """Summarize ``results``, which must be ordered most recent first.

    Growth compares the newest primary estimate with the oldest one, as a
    percentage of the oldest.
    """
    total = len(results)
    average = 0.0
    if total:
        average = sum(r.estimated_valuation.primary for r in results) / total

    growth = 0.0
    if total > 1:
        newest = results[0].estimated_valuation.primary
        oldest = results[-1].estimated_valuation.primary
        if oldest:
            growth = round_half_up((newest - oldest) / oldest * 100, 2)

    return DashboardSummary(
        owner_id=owner_id,
        recent_valuations=tuple(results[:RECENT_LIMIT]),
        total_valuations=total,
        average_valuation=int(round_half_up(average)),
        portfolio_growth=growth,
    )
