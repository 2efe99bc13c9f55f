"""Risk factor summation: scorecard value shifted by twelve risk steps."""

from __future__ import annotations

from valuai.catalog import RISK_FACTOR_SUMMATION
from valuai.models import Industry, Stage, ValuationInput

from .base import VALUE_FLOOR, ValuationMethodology
from .scorecard import ScorecardMethodology

RISK_STEP_VALUE = 250_000.0


def risk_adjustments(data: ValuationInput) -> list[tuple[str, int]]:
    """Return the twelve (factor, step) pairs; positive steps add risk."""
    if data.stage == Stage.GROWTH:
        stage_step = -1
    elif data.stage == Stage.IDEA:
        stage_step = 2
    else:
        stage_step = 0
    is_technology = data.industry == Industry.TECHNOLOGY

    return [
        ("management", 0 if data.team_size >= 3 else 1),
        ("stage_of_business", stage_step),
        ("legislation_political", 0),
        ("manufacturing", -1 if is_technology else 0),
        ("sales_channels", -1 if data.revenue else 1),
        ("funding_capital", 1 if data.funding_goal > 5_000_000 else 0),
        ("competition", 1),
        ("technology", -1 if is_technology else 0),
        ("litigation", 0),
        ("international", 1 if data.geographic_market == "global" else 0),
        ("reputation", 0),
        ("lucidity_focus", -1 if len(data.description) > 200 else 0),
    ]


class RiskFactorSummationMethodology(ValuationMethodology):
    name = RISK_FACTOR_SUMMATION

    def __init__(self, scorecard: ScorecardMethodology | None = None) -> None:
        self._scorecard = scorecard or ScorecardMethodology()

    def evaluate(self, data: ValuationInput) -> float:
        base_valuation = self._scorecard.evaluate(data)
        total_steps = sum(step for _, step in risk_adjustments(data))
        penalty = total_steps * RISK_STEP_VALUE
        return max(base_valuation - penalty, VALUE_FLOOR)
