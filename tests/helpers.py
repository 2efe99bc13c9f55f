"""Input builders shared across test modules."""

from __future__ import annotations

from typing import Any

from valuai.models import ValuationInput


def make_input(**overrides: Any) -> ValuationInput:
    fields: dict[str, Any] = dict(
        company_name="TestCo",
        industry="other",
        stage="pre-revenue",
        description="A short pitch.",
        team_size=1,
        market_size="$500M",
        funding_goal=1_000_000.0,
    )
    fields.update(overrides)
    return ValuationInput(**fields)


def make_payload(**overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "company_name": "TestCo",
        "industry": "technology",
        "stage": "pre-revenue",
        "description": "Developer tooling for data pipelines.",
        "team_size": 4,
        "market_size": "$20B",
        "funding_goal": 1_000_000,
    }
    payload.update(overrides)
    return {k: v for k, v in payload.items() if v is not None}


GROWTH_PAYLOAD: dict[str, Any] = {
    "company_name": "Ledgerly",
    "industry": "saas",
    "stage": "growth",
    "description": "Accounts-payable automation for mid-market finance teams.",
    "revenue": 2_000_000,
    "expenses": 1_200_000,
    "team_size": 10,
    "market_size": "$5B",
    "funding_goal": 3_000_000,
}

IDEA_PAYLOAD: dict[str, Any] = {
    "company_name": "Sprout Labs",
    "industry": "other",
    "stage": "idea",
    "description": "Marketplace connecting urban gardeners with local restaurants.",
    "team_size": 2,
    "market_size": "$1B",
    "funding_goal": 50_000,
}
