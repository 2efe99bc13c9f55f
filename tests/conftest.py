"""Shared pytest fixtures for all tests."""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path

import pytest

import valuai.server as server_module
from valuai.store import ValuationStore

# Importing the server opens valuai.db in the working directory; drop it.
server_module.store.close()
Path("valuai.db").unlink(missing_ok=True)


@pytest.fixture(autouse=True)
def isolated_store(tmp_path: Path) -> Generator[ValuationStore]:
    """Point the server at a fresh per-test database."""
    store = ValuationStore(tmp_path / "test.db")
    server_module.store = store
    yield store
    store.close()
