"""Tests for the portfolio dashboard summary."""

from __future__ import annotations

import unittest

from valuai.dashboard import summarize_portfolio
from valuai.models import EstimatedValuation, MethodEvaluation, ValuationResult


def _result(primary: int) -> ValuationResult:
    return ValuationResult(
        company_name=f"Co {primary}",
        estimated_valuation=EstimatedValuation(
            min=int(primary * 0.75), max=int(primary * 1.25), primary=primary
        ),
        methods=(MethodEvaluation("Berkus Method", float(primary), 0.7, 1.05),),
        primary_method="Berkus Method",
        confidence=0.7,
        owner_id="user-1",
    )


class SummarizePortfolioTests(unittest.TestCase):
    def test_empty(self) -> None:
        summary = summarize_portfolio("user-1", [])
        self.assertEqual(summary.total_valuations, 0)
        self.assertEqual(summary.average_valuation, 0)
        self.assertEqual(summary.portfolio_growth, 0.0)
        self.assertEqual(summary.recent_valuations, ())

    def test_single_result_has_no_growth(self) -> None:
        summary = summarize_portfolio("user-1", [_result(1_000_000)])
        self.assertEqual(summary.average_valuation, 1_000_000)
        self.assertEqual(summary.portfolio_growth, 0.0)

    def test_growth_newest_vs_oldest(self) -> None:
        results = [_result(3_000_000), _result(2_000_000), _result(2_400_000)]
        summary = summarize_portfolio("user-1", results)
        self.assertEqual(summary.total_valuations, 3)
        self.assertEqual(summary.average_valuation, 2_466_667)
        self.assertEqual(summary.portfolio_growth, 25.0)

    def test_decline(self) -> None:
        summary = summarize_portfolio("user-1", [_result(750_000), _result(1_000_000)])
        self.assertEqual(summary.portfolio_growth, -25.0)

    def test_recent_capped_at_five(self) -> None:
        results = [_result(1_000_000 + i) for i in range(8)]
        summary = summarize_portfolio("user-1", results)
        self.assertEqual(len(summary.recent_valuations), 5)
        self.assertEqual(summary.recent_valuations[0], results[0])

    def test_to_dict(self) -> None:
        d = summarize_portfolio("user-1", [_result(500_000)]).to_dict()
        self.assertEqual(
            set(d),
            {
                "owner_id",
                "recent_valuations",
                "total_valuations",
                "average_valuation",
                "portfolio_growth",
            },
        )
        self.assertEqual(d["recent_valuations"][0]["company_name"], "Co 500000")


if __name__ == "__main__":
    unittest.main()
