"""Tests for the SQLite valuation store."""

from __future__ import annotations

import dataclasses
import tempfile
import unittest
from pathlib import Path

from valuai.engine import ValuationEngine
from valuai.models import ValuationInput, ValuationResult
from valuai.store import ValuationStore

from tests.helpers import GROWTH_PAYLOAD


class TestValuationStore(unittest.TestCase):
    def setUp(self) -> None:
        self._tmpdir = tempfile.TemporaryDirectory()
        self.db_path = Path(self._tmpdir.name) / "test.db"
        self.store = ValuationStore(self.db_path)
        self.data = ValuationInput.from_dict(GROWTH_PAYLOAD)
        self.engine = ValuationEngine()

    def tearDown(self) -> None:
        self.store.close()
        self._tmpdir.cleanup()

    def _result(self, owner_id: str = "user-1", **changes: object) -> ValuationResult:
        result = self.engine.calculate(self.data, owner_id)
        return dataclasses.replace(result, **changes)  # type: ignore[arg-type]

    def test_save_and_get(self) -> None:
        result = self._result()
        vid = self.store.save(result, self.data)
        self.assertEqual(vid, result.id)
        fetched = self.store.get_by_id(vid, "user-1")
        self.assertEqual(fetched, result)

    def test_get_other_owner_returns_none(self) -> None:
        vid = self.store.save(self._result(), self.data)
        self.assertIsNone(self.store.get_by_id(vid, "user-2"))

    def test_get_nonexistent_returns_none(self) -> None:
        self.assertIsNone(self.store.get_by_id("does-not-exist", "user-1"))

    def test_get_input(self) -> None:
        vid = self.store.save(self._result(), self.data)
        stored = self.store.get_input(vid, "user-1")
        assert stored is not None
        self.assertEqual(stored["company_name"], "Ledgerly")
        self.assertEqual(stored["revenue"], 2_000_000.0)

    def test_list_empty(self) -> None:
        self.assertEqual(self.store.list_by_owner("user-1"), [])

    def test_list_scoped_to_owner(self) -> None:
        self.store.save(self._result("user-1"), self.data)
        self.store.save(self._result("user-2"), self.data)
        runs = self.store.list_by_owner("user-1")
        self.assertEqual(len(runs), 1)
        self.assertEqual(runs[0].owner_id, "user-1")

    def test_most_recent_first(self) -> None:
        stamps = ["2026-01-01T00:00:00+00:00", "2026-03-01T00:00:00+00:00"]
        first = self._result(company_name="Older", created_at=stamps[1])
        second = self._result(company_name="Newer", created_at=stamps[1])
        oldest = self._result(company_name="Oldest", created_at=stamps[0])
        for result in (first, oldest, second):
            self.store.save(result, self.data)
        names = [r.company_name for r in self.store.list_by_owner("user-1")]
        # Same timestamp falls back to insertion order.
        self.assertEqual(names, ["Newer", "Older", "Oldest"])

    def test_limit(self) -> None:
        for _ in range(10):
            self.store.save(self._result(), self.data)
        self.assertEqual(len(self.store.list_by_owner("user-1", limit=3)), 3)

    def test_no_limit_returns_full_history(self) -> None:
        for _ in range(55):
            self.store.save(self._result(), self.data)
        self.assertEqual(len(self.store.list_by_owner("user-1")), 50)
        self.assertEqual(len(self.store.list_by_owner("user-1", limit=None)), 55)

    def test_delete(self) -> None:
        vid = self.store.save(self._result(), self.data)
        self.assertFalse(self.store.delete(vid, "user-2"))
        self.assertTrue(self.store.delete(vid, "user-1"))
        self.assertIsNone(self.store.get_by_id(vid, "user-1"))
        self.assertFalse(self.store.delete(vid, "user-1"))


if __name__ == "__main__":
    unittest.main()
