"""Berkus method: fixed dollar credit per de-risking milestone."""

from __future__ import annotations

from valuai.catalog import BERKUS
from valuai.models import Industry, Stage, ValuationInput

from .base import ValuationMethodology

MILESTONE_CREDIT = 500_000.0
STRATEGIC_RELATIONSHIP_CREDIT = 250_000.0
BERKUS_CAP = 2_500_000.0


class BerkusMethodology(ValuationMethodology):
    name = BERKUS

    def evaluate(self, data: ValuationInput) -> float:
        valuation = MILESTONE_CREDIT  # sound idea

        if data.stage != Stage.IDEA:
            valuation += MILESTONE_CREDIT  # prototype
        if data.team_size >= 3:
            valuation += MILESTONE_CREDIT  # management team
        if data.industry in (Industry.TECHNOLOGY, Industry.SAAS):
            valuation += STRATEGIC_RELATIONSHIP_CREDIT
        if data.revenue:
            valuation += MILESTONE_CREDIT  # product rollout / sales

        return min(valuation, BERKUS_CAP)
