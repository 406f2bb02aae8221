"""Pytest configuration for test isolation.

The CLI configures the package logger once per process. When several CLI tests
run in the same interpreter, the first one would pin its captured stream onto
the handler for every later test. An autouse fixture resets the logging state
and clears the environment variables the package reads.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from campaign_finance.logging_setup import reset_logging

DATA_DIR = Path(__file__).resolve().parent / "data"


@pytest.fixture(autouse=True)
def _isolate_logging(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("CAMPAIGN_FINANCE_LOG_LEVEL", raising=False)
    monkeypatch.delenv("CAMPAIGN_FINANCE_ENCODING", raising=False)
    reset_logging()
    yield
    reset_logging()


@pytest.fixture
def income_csv_path() -> Path:
    return DATA_DIR / "receitas_sample.csv"


@pytest.fixture
def expense_csv_path() -> Path:
    return DATA_DIR / "despesas_sample.csv"


@pytest.fixture
def income_csv(income_csv_path: Path) -> str:
    return income_csv_path.read_text(encoding="utf-8")


@pytest.fixture
def expense_csv(expense_csv_path: Path) -> str:
    return expense_csv_path.read_text(encoding="utf-8")
