"""Methodology abstraction."""

from __future__ import annotations

from abc import ABC, abstractmethod

from valuai.models import ValuationInput

VALUE_FLOOR = 500_000.0


class ValuationMethodology(ABC):
    """Base class for all valuation methodologies.

    Subclasses MUST set ``name`` as a class attribute matching a catalog
    entry and implement ``evaluate``.  Evaluators are pure: the same input
    always yields the same dollar value.
    """

    name: str

    @abstractmethod
    def evaluate(self, data: ValuationInput) -> float:
        """Return the raw USD valuation for ``data``."""
