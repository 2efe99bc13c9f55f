"""Static industry benchmarks and market-size parsing.

These tables are fixed heuristics, not live market data.  Any industry
missing from a table falls back to the ``other`` entry (or 1.0 for the
scorecard multiplier).
"""

from __future__ import annotations

import re

from valuai.models import Industry, Stage

DEFAULT_MARKET_SIZE = 1_000_000_000.0

SCORECARD_INDUSTRY_MULTIPLIERS: dict[str, float] = {
    Industry.TECHNOLOGY: 1.3,
    Industry.SAAS: 1.4,
    Industry.HEALTHCARE: 1.2,
    Industry.FINTECH: 1.35,
    Industry.BIOTECH: 1.5,
    Industry.ECOMMERCE: 1.1,
}

INDUSTRY_REVENUE_MULTIPLES: dict[str, float] = {
    Industry.TECHNOLOGY: 8,
    Industry.SAAS: 10,
    Industry.HEALTHCARE: 6,
    Industry.FINTECH: 9,
    Industry.BIOTECH: 15,
    Industry.ECOMMERCE: 4,
    Industry.OTHER: 5,
}

MARKET_PENETRATION_BY_STAGE: dict[str, float] = {
    Stage.GROWTH: 0.001,
    Stage.EARLY_REVENUE: 0.0005,
}
DEFAULT_MARKET_PENETRATION = 0.0001

_UNIT_SCALES: dict[str, float] = {"b": 1e9, "m": 1e6, "k": 1e3}
_NON_NUMERIC = re.compile(r"[^\d.]")
_UNIT_AFTER_NUMBER = re.compile(r"\d\s*([a-z])")


def scorecard_multiplier(industry: str) -> float:
    return SCORECARD_INDUSTRY_MULTIPLIERS.get(industry, 1.0)


def revenue_multiple(industry: str) -> float:
    return INDUSTRY_REVENUE_MULTIPLES.get(industry, INDUSTRY_REVENUE_MULTIPLES[Industry.OTHER])


def market_penetration(stage: str) -> float:
    return MARKET_PENETRATION_BY_STAGE.get(stage, DEFAULT_MARKET_PENETRATION)


def parse_market_size(market_size: str) -> float:
    """Convert a magnitude string such as ``"$1.5B"`` or ``"500M"`` to USD.

    The unit is the first letter following a digit (``b``, ``m`` or ``k``,
    case-insensitive); any other letter leaves the number unscaled.  Strings
    without a usable number fall back to ``DEFAULT_MARKET_SIZE``, and so do
    malformed numbers like ``"1.2.3M"`` rather than being read as their
    leading ``1.2``.
    """
    cleaned = _NON_NUMERIC.sub("", market_size)
    try:
        value = float(cleaned)
    except ValueError:
        return DEFAULT_MARKET_SIZE

    match = _UNIT_AFTER_NUMBER.search(market_size.lower())
    if match:
        return value * _UNIT_SCALES.get(match.group(1), 1.0)
    return value
