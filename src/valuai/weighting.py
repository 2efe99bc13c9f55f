"""Per-method weights reflecting data availability and methodological fit."""

from __future__ import annotations

from collections.abc import Callable

from valuai.catalog import BERKUS, DCF_ANALYSIS, SCORECARD, VC_METHOD
from valuai.models import MethodDescriptor, Stage, ValuationInput

DEFAULT_MULTIPLIER = 1.0


def _dcf_multiplier(data: ValuationInput) -> float:
    return 1.5 if (data.revenue or 0.0) > 100_000 else 0.5


def _vc_multiplier(data: ValuationInput) -> float:
    return 1.3 if data.projected_revenue else 0.8


def _berkus_multiplier(data: ValuationInput) -> float:
    return 1.5 if data.stage == Stage.IDEA else 0.7


def _scorecard_multiplier(data: ValuationInput) -> float:
    return 1.2 if data.team_size >= 3 else 1.0


_MULTIPLIERS: dict[str, Callable[[ValuationInput], float]] = {
    DCF_ANALYSIS: _dcf_multiplier,
    VC_METHOD: _vc_multiplier,
    BERKUS: _berkus_multiplier,
    SCORECARD: _scorecard_multiplier,
}


def fit_multiplier(method_name: str, data: ValuationInput) -> float:
    rule = _MULTIPLIERS.get(method_name)
    return rule(data) if rule else DEFAULT_MULTIPLIER


def method_weight(method: MethodDescriptor, data: ValuationInput) -> float:
    """Weight = method-specific multiplier x the method's base confidence."""
    return fit_multiplier(method.name, data) * method.base_confidence
