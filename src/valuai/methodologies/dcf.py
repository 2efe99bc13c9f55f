"""Five-year discounted cash flow with a Gordon-growth terminal value."""

from __future__ import annotations

from valuai.catalog import DCF_ANALYSIS
from valuai.models import ValuationInput

from .base import VALUE_FLOOR, ValuationMethodology
from .scorecard import ScorecardMethodology

GROWTH_RATE = 0.30
TERMINAL_GROWTH_RATE = 0.03
DISCOUNT_RATE = 0.12
PROJECTION_YEARS = 5
DEFAULT_EXPENSE_RATIO = 0.70
TERMINAL_MARGIN = 0.30


def present_value_of_cash_flows(revenue: float, expenses: float | None) -> tuple[float, float]:
    """Discount the explicit projection period.

    Returns ``(pv_total, final_year_revenue)``.  When ``expenses`` is not
    given each year's expenses are ``DEFAULT_EXPENSE_RATIO`` of that year's
    revenue; a fixed figure is held flat across the horizon.
    """
    pv_total = 0.0
    current_revenue = revenue
    for year in range(1, PROJECTION_YEARS + 1):
        current_revenue *= 1 + GROWTH_RATE
        year_expenses = expenses or current_revenue * DEFAULT_EXPENSE_RATIO
        cash_flow = current_revenue - year_expenses
        pv_total += cash_flow / (1 + DISCOUNT_RATE) ** year
    return pv_total, current_revenue


def present_terminal_value(final_revenue: float) -> float:
    terminal_cash_flow = final_revenue * (1 + TERMINAL_GROWTH_RATE) * TERMINAL_MARGIN
    terminal_value = terminal_cash_flow / (DISCOUNT_RATE - TERMINAL_GROWTH_RATE)
    return terminal_value / (1 + DISCOUNT_RATE) ** PROJECTION_YEARS


class DiscountedCashFlowMethodology(ValuationMethodology):
    name = DCF_ANALYSIS

    def __init__(self, scorecard: ScorecardMethodology | None = None) -> None:
        self._scorecard = scorecard or ScorecardMethodology()

    def evaluate(self, data: ValuationInput) -> float:
        if not data.revenue:
            return self._scorecard.evaluate(data)

        pv_cash_flows, final_revenue = present_value_of_cash_flows(data.revenue, data.expenses)
        total_value = pv_cash_flows + present_terminal_value(final_revenue)
        return max(total_value, VALUE_FLOOR)
