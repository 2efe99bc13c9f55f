"""Typed models for valuation inputs and outputs."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

from valuai import __version__
from valuai.exceptions import ValidationError
from valuai.validation import (
    optional_amount,
    optional_text,
    parse_amount,
    parse_team_size,
    require_field,
    require_text,
)


class Stage:
    IDEA = "idea"
    PRE_REVENUE = "pre-revenue"
    EARLY_REVENUE = "early-revenue"
    GROWTH = "growth"

    ALL: tuple[str, ...] = (IDEA, PRE_REVENUE, EARLY_REVENUE, GROWTH)


class Industry:
    TECHNOLOGY = "technology"
    HEALTHCARE = "healthcare"
    FINTECH = "fintech"
    ECOMMERCE = "ecommerce"
    SAAS = "saas"
    BIOTECH = "biotech"
    OTHER = "other"

    ALL: tuple[str, ...] = (TECHNOLOGY, HEALTHCARE, FINTECH, ECOMMERCE, SAAS, BIOTECH, OTHER)


MIN_FUNDING_GOAL = 1000.0


def parse_stage(value: Any) -> str:
    if value not in Stage.ALL:
        allowed = ", ".join(Stage.ALL)
        raise ValidationError(f"Invalid stage {value!r}. Expected one of: {allowed}.")
    stage: str = value
    return stage


@dataclass(frozen=True)
class ValuationInput:
    company_name: str
    industry: str
    stage: str
    description: str
    team_size: int
    market_size: str
    funding_goal: float
    revenue: float | None = None
    expenses: float | None = None
    projected_revenue: float | None = None
    burn_rate: float | None = None
    runway: float | None = None
    business_model: str | None = None
    previous_funding: str | None = None
    geographic_market: str | None = None
    competition: str | None = None
    use_of_funds: str | None = None

    @staticmethod
    def from_dict(payload: dict[str, Any]) -> ValuationInput:
        if not isinstance(payload, dict):
            raise ValidationError("Request payload must be a JSON object.")
        company_name = require_text(payload, "company_name")
        industry = require_text(payload, "industry").lower()
        stage = parse_stage(require_field(payload, "stage", str))
        description = require_text(payload, "description")
        team_size = parse_team_size(payload)
        market_size = require_text(payload, "market_size")
        funding_goal = parse_amount(
            require_field(payload, "funding_goal", (int, float, str)), "funding_goal"
        )
        if funding_goal < MIN_FUNDING_GOAL:
            raise ValidationError("Field 'funding_goal' must be at least 1,000 USD.")
        return ValuationInput(
            company_name=company_name,
            industry=industry,
            stage=stage,
            description=description,
            team_size=team_size,
            market_size=market_size,
            funding_goal=funding_goal,
            revenue=optional_amount(payload, "revenue"),
            expenses=optional_amount(payload, "expenses"),
            projected_revenue=optional_amount(payload, "projected_revenue"),
            burn_rate=optional_amount(payload, "burn_rate"),
            runway=optional_amount(payload, "runway"),
            business_model=optional_text(payload, "business_model"),
            previous_funding=optional_text(payload, "previous_funding"),
            geographic_market=optional_text(payload, "geographic_market"),
            competition=optional_text(payload, "competition"),
            use_of_funds=optional_text(payload, "use_of_funds"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "company_name": self.company_name,
            "industry": self.industry,
            "stage": self.stage,
            "description": self.description,
            "team_size": self.team_size,
            "market_size": self.market_size,
            "funding_goal": self.funding_goal,
            "revenue": self.revenue,
            "expenses": self.expenses,
            "projected_revenue": self.projected_revenue,
            "burn_rate": self.burn_rate,
            "runway": self.runway,
            "business_model": self.business_model,
            "previous_funding": self.previous_funding,
            "geographic_market": self.geographic_market,
            "competition": self.competition,
            "use_of_funds": self.use_of_funds,
        }


@dataclass(frozen=True)
class MethodDescriptor:
    name: str
    base_confidence: float
    applicable_stages: frozenset[str]
    description: str

    def applies_to(self, stage: str) -> bool:
        return stage in self.applicable_stages

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "confidence": self.base_confidence,
            # Stage order follows the business lifecycle, not set iteration.
            "applicable_stages": [s for s in Stage.ALL if s in self.applicable_stages],
            "description": self.description,
        }


@dataclass(frozen=True)
class MethodEvaluation:
    name: str
    value: float
    confidence: float
    weight: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "value": self.value,
            "confidence": self.confidence,
            "weight": self.weight,
        }

    @staticmethod
    def from_dict(payload: dict[str, Any]) -> MethodEvaluation:
        return MethodEvaluation(
            name=payload["name"],
            value=float(payload["value"]),
            confidence=float(payload["confidence"]),
            weight=float(payload["weight"]),
        )


@dataclass(frozen=True)
class EstimatedValuation:
    min: int
    max: int
    primary: int

    def to_dict(self) -> dict[str, Any]:
        return {"min": self.min, "max": self.max, "primary": self.primary}


@dataclass(frozen=True)
class ValuationResult:
    company_name: str
    estimated_valuation: EstimatedValuation
    methods: tuple[MethodEvaluation, ...]
    primary_method: str
    confidence: float
    owner_id: str | None = None
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: str = field(
        default_factory=lambda: datetime.now(timezone.utc).replace(microsecond=0).isoformat()
    )
    engine_version: str = field(default_factory=lambda: __version__)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "owner_id": self.owner_id,
            "company_name": self.company_name,
            "estimated_valuation": self.estimated_valuation.to_dict(),
            "methods": [m.to_dict() for m in self.methods],
            "primary_method": self.primary_method,
            "confidence": self.confidence,
            "created_at": self.created_at,
            "engine_version": self.engine_version,
        }

    @staticmethod
    def from_dict(payload: dict[str, Any]) -> ValuationResult:
        ev = payload["estimated_valuation"]
        return ValuationResult(
            id=payload["id"],
            owner_id=payload.get("owner_id"),
            company_name=payload["company_name"],
            estimated_valuation=EstimatedValuation(
                min=int(ev["min"]), max=int(ev["max"]), primary=int(ev["primary"])
            ),
            methods=tuple(MethodEvaluation.from_dict(m) for m in payload["methods"]),
            primary_method=payload["primary_method"],
            confidence=float(payload["confidence"]),
            created_at=payload["created_at"],
            engine_version=payload.get("engine_version", __version__),
        )
