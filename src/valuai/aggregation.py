"""Combine per-method values into a single weighted estimate."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from valuai.exceptions import NoApplicableMethodsError
from valuai.models import EstimatedValuation, MethodEvaluation

RANGE_VARIANCE = 0.25


@dataclass(frozen=True)
class Aggregate:
    estimated_valuation: EstimatedValuation
    primary_method: str
    confidence: float


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round like ``Math.round``: halves always go up, never to even."""
    scale = 10**ndigits
    return math.floor(value * scale + 0.5) / scale


def select_primary(evaluations: Sequence[MethodEvaluation]) -> MethodEvaluation:
    """Max by confidence x weight; the first evaluation wins a tie."""
    best = evaluations[0]
    for candidate in evaluations[1:]:
        if candidate.confidence * candidate.weight > best.confidence * best.weight:
            best = candidate
    return best


def aggregate(evaluations: Sequence[MethodEvaluation]) -> Aggregate:
    if not evaluations:
        raise NoApplicableMethodsError("Cannot aggregate: no applicable methods were evaluated.")

    total_weight = sum(e.weight for e in evaluations)
    if total_weight <= 0:
        raise NoApplicableMethodsError("Cannot aggregate: method weights sum to zero.")

    weighted_value = sum(e.value * e.weight for e in evaluations) / total_weight
    min_value = weighted_value * (1 - RANGE_VARIANCE)
    max_value = weighted_value * (1 + RANGE_VARIANCE)
    confidence = sum(e.confidence * e.weight for e in evaluations) / total_weight

    return Aggregate(
        estimated_valuation=EstimatedValuation(
            min=int(round_half_up(min_value)),
            max=int(round_half_up(max_value)),
            primary=int(round_half_up(weighted_value)),
        ),
        primary_method=select_primary(evaluations).name,
        confidence=round_half_up(confidence, 2),
    )
