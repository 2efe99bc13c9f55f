"""Static catalog of valuation methods and the stages they apply to."""

from __future__ import annotations

from valuai.models import MethodDescriptor, Stage

BERKUS = "Berkus Method"
SCORECARD = "Scorecard Method"
RISK_FACTOR_SUMMATION = "Risk Factor Summation"
VC_METHOD = "VC Method"
DCF_ANALYSIS = "DCF Analysis"
COMPARABLE_ANALYSIS = "Comparable Analysis"

METHOD_CATALOG: tuple[MethodDescriptor, ...] = (
    MethodDescriptor(
        name=BERKUS,
        base_confidence=0.7,
        applicable_stages=frozenset({Stage.IDEA, Stage.PRE_REVENUE}),
        description="Pre-revenue valuation based on five key success factors",
    ),
    MethodDescriptor(
        name=SCORECARD,
        base_confidence=0.8,
        applicable_stages=frozenset({Stage.PRE_REVENUE, Stage.EARLY_REVENUE}),
        description="Comparative analysis with similar funded companies",
    ),
    MethodDescriptor(
        name=RISK_FACTOR_SUMMATION,
        base_confidence=0.75,
        applicable_stages=frozenset({Stage.PRE_REVENUE, Stage.EARLY_REVENUE, Stage.GROWTH}),
        description="Adjusts pre-money valuation based on risk assessment",
    ),
    MethodDescriptor(
        name=VC_METHOD,
        base_confidence=0.85,
        applicable_stages=frozenset({Stage.EARLY_REVENUE, Stage.GROWTH}),
        description="Backward calculation from expected exit value",
    ),
    MethodDescriptor(
        name=DCF_ANALYSIS,
        base_confidence=0.9,
        applicable_stages=frozenset({Stage.EARLY_REVENUE, Stage.GROWTH}),
        description="Discounted cash flow for revenue-generating businesses",
    ),
    MethodDescriptor(
        name=COMPARABLE_ANALYSIS,
        base_confidence=0.8,
        applicable_stages=frozenset({Stage.PRE_REVENUE, Stage.EARLY_REVENUE, Stage.GROWTH}),
        description="Market-based valuation using industry multiples",
    ),
)


def get_applicable_methods(
    stage: str, catalog: tuple[MethodDescriptor, ...] = METHOD_CATALOG
) -> list[MethodDescriptor]:
    """Return the methods covering ``stage``, in catalog order."""
    return [method for method in catalog if method.applies_to(stage)]
