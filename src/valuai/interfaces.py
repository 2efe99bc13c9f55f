"""Collaborator interfaces around the engine.

Using Protocol (PEP 544) so the SQLite store, an in-memory fake or any
other backend satisfy the same structural contract without inheritance.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from valuai.models import MethodDescriptor, ValuationInput, ValuationResult


@runtime_checkable
class ValuationRepository(Protocol):
    """Durable storage for finished valuations, scoped by owner."""

    def save(self, result: ValuationResult, data: ValuationInput) -> str: ...

    def list_by_owner(self, owner_id: str, limit: int | None = 50) -> list[ValuationResult]: ...

    def get_by_id(self, valuation_id: str, owner_id: str) -> ValuationResult | None: ...


@runtime_checkable
class MethodQuery(Protocol):
    """Read-only preview of the methods a stage would use."""

    def get_applicable_methods(self, stage: str) -> list[MethodDescriptor]: ...
