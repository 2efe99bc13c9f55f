"""SQLite persistence for valuation results.

Stores the full JSON of each result together with the input it was
computed from, so past valuations are retrievable per owner.
"""

from __future__ import annotations

import json
import sqlite3
from pathlib import Path
from typing import Any

from valuai.models import ValuationInput, ValuationResult

DEFAULT_DB_PATH = Path("valuai.db")


class ValuationStore:
    """Thin wrapper around a SQLite database implementing ``ValuationRepository``."""

    def __init__(self, db_path: Path = DEFAULT_DB_PATH) -> None:
        self._db_path = db_path
        self._conn = sqlite3.connect(str(db_path), check_same_thread=False)
        self._conn.row_factory = sqlite3.Row
        self._ensure_schema()

    # ── public API ──

    def save(self, result: ValuationResult, data: ValuationInput) -> str:
        """Persist a valuation result and return its id."""
        ev = result.estimated_valuation
        self._conn.execute(
            """
            INSERT INTO valuations (id, owner_id, company_name, industry, stage,
                                    valuation_min, valuation_max, valuation_primary,
                                    primary_method, confidence, created_at,
                                    input_payload, result_payload)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (
                result.id,
                result.owner_id,
                result.company_name,
                data.industry,
                data.stage,
                ev.min,
                ev.max,
                ev.primary,
                result.primary_method,
                result.confidence,
                result.created_at,
                json.dumps(data.to_dict()),
                json.dumps(result.to_dict()),
            ),
        )
        self._conn.commit()
        return result.id

    def list_by_owner(self, owner_id: str, limit: int | None = 50) -> list[ValuationResult]:
        """Return an owner's results, most recent first; ``limit=None`` returns all."""
        cursor = self._conn.execute(
            """
            SELECT result_payload FROM valuations
            WHERE owner_id = ?
            ORDER BY created_at DESC, rowid DESC LIMIT ?
            """,
            (owner_id, -1 if limit is None else limit),
        )
        return [ValuationResult.from_dict(json.loads(row["result_payload"])) for row in cursor]

    def get_by_id(self, valuation_id: str, owner_id: str) -> ValuationResult | None:
        row = self._fetch(valuation_id, owner_id, "result_payload")
        if row is None:
            return None
        return ValuationResult.from_dict(json.loads(row["result_payload"]))

    def get_input(self, valuation_id: str, owner_id: str) -> dict[str, Any] | None:
        """Return the input record a stored result was computed from."""
        row = self._fetch(valuation_id, owner_id, "input_payload")
        if row is None:
            return None
        payload: dict[str, Any] = json.loads(row["input_payload"])
        return payload

    def delete(self, valuation_id: str, owner_id: str) -> bool:
        cursor = self._conn.execute(
            "DELETE FROM valuations WHERE id = ? AND owner_id = ?",
            (valuation_id, owner_id),
        )
        self._conn.commit()
        return cursor.rowcount > 0

    def close(self) -> None:
        self._conn.close()

    # ── private ──

    def _fetch(self, valuation_id: str, owner_id: str, column: str) -> sqlite3.Row | None:
        cursor = self._conn.execute(
            f"SELECT {column} FROM valuations WHERE id = ? AND owner_id = ?",  # noqa: S608
            (valuation_id, owner_id),
        )
        row: sqlite3.Row | None = cursor.fetchone()
        return row

    def _ensure_schema(self) -> None:
        self._conn.execute(
            """
            CREATE TABLE IF NOT EXISTS valuations (
                id                TEXT PRIMARY KEY,
                owner_id          TEXT,
                company_name      TEXT NOT NULL,
                industry          TEXT NOT NULL,
                stage             TEXT NOT NULL,
                valuation_min     INTEGER NOT NULL,
                valuation_max     INTEGER NOT NULL,
                valuation_primary INTEGER NOT NULL,
                primary_method    TEXT NOT NULL,
                confidence        REAL NOT NULL,
                created_at        TEXT NOT NULL,
                input_payload     TEXT NOT NULL,
                result_payload    TEXT NOT NULL
            )
            """
        )
        self._conn.execute(
            "CREATE INDEX IF NOT EXISTS idx_valuations_owner ON valuations (owner_id, created_at)"
        )
        self._conn.commit()
