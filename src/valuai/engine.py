"""Valuation engine orchestration."""

from __future__ import annotations

import logging
from typing import Any

from valuai.aggregation import aggregate
from valuai.catalog import METHOD_CATALOG, get_applicable_methods
from valuai.exceptions import NoApplicableMethodsError
from valuai.methodologies.base import ValuationMethodology
from valuai.methodologies.berkus import BerkusMethodology
from valuai.methodologies.comparables import ComparableAnalysisMethodology
from valuai.methodologies.dcf import DiscountedCashFlowMethodology
from valuai.methodologies.risk_factor import RiskFactorSummationMethodology
from valuai.methodologies.scorecard import ScorecardMethodology
from valuai.methodologies.vc_method import VentureCapitalMethodology
from valuai.models import (
    MethodDescriptor,
    MethodEvaluation,
    ValuationInput,
    ValuationResult,
    parse_stage,
)
from valuai.weighting import method_weight

logger = logging.getLogger("valuai.engine")


class ValuationEngine:
    """Stateless calculator: one input record in, one result record out.

    The engine never persists anything; callers hand the result to a
    ``ValuationRepository`` if they want it stored.
    """

    def __init__(self, catalog: tuple[MethodDescriptor, ...] = METHOD_CATALOG) -> None:
        self.catalog = catalog
        scorecard = ScorecardMethodology()
        self._methodologies: dict[str, ValuationMethodology] = {
            BerkusMethodology.name: BerkusMethodology(),
            ScorecardMethodology.name: scorecard,
            RiskFactorSummationMethodology.name: RiskFactorSummationMethodology(scorecard),
            VentureCapitalMethodology.name: VentureCapitalMethodology(),
            DiscountedCashFlowMethodology.name: DiscountedCashFlowMethodology(scorecard),
            ComparableAnalysisMethodology.name: ComparableAnalysisMethodology(),
        }
        missing = [m.name for m in catalog if m.name not in self._methodologies]
        if missing:
            raise ValueError(f"No evaluator registered for: {', '.join(missing)}.")

    def get_applicable_methods(self, stage: str) -> list[MethodDescriptor]:
        return get_applicable_methods(parse_stage(stage), self.catalog)

    def evaluate_methods(self, data: ValuationInput) -> list[MethodEvaluation]:
        methods = get_applicable_methods(data.stage, self.catalog)
        if not methods:
            raise NoApplicableMethodsError(f"No applicable methods for stage '{data.stage}'.")

        evaluations = []
        for method in methods:
            value = self._methodologies[method.name].evaluate(data)
            weight = method_weight(method, data)
            logger.debug("method=%s value=%.2f weight=%.4f", method.name, value, weight)
            evaluations.append(
                MethodEvaluation(
                    name=method.name,
                    value=value,
                    confidence=method.base_confidence,
                    weight=weight,
                )
            )
        return evaluations

    def calculate(self, data: ValuationInput, owner_id: str | None = None) -> ValuationResult:
        evaluations = self.evaluate_methods(data)
        outcome = aggregate(evaluations)
        return ValuationResult(
            company_name=data.company_name,
            estimated_valuation=outcome.estimated_valuation,
            methods=tuple(evaluations),
            primary_method=outcome.primary_method,
            confidence=outcome.confidence,
            owner_id=owner_id,
        )

    def calculate_from_dict(
        self, payload: dict[str, Any], owner_id: str | None = None
    ) -> ValuationResult:
        data = ValuationInput.from_dict(payload)
        return self.calculate(data, owner_id)
