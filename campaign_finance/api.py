"""Public API for the ``campaign_finance`` package.

:func:`build_dashboard_summary` is the single entry point: two raw exports in,
one immutable :class:`~campaign_finance.models.DashboardSummary` out. It does
no file or network I/O and keeps no state between calls, so concurrent calls
over different datasets need no coordination.
"""

from __future__ import annotations

from collections.abc import Iterable

from . import aggregation
from .ingest import to_expense_records, to_income_records
from .logging_setup import get_logger
from .models import DashboardSummary, ExpenseRecord, IncomeRecord

logger = get_logger("campaign_finance.api")


def parse_incomes(csv_text: str | bytes) -> tuple[IncomeRecord, ...]:
    """Parse an income export into its retained records."""

    return tuple(to_income_records(csv_text))


def parse_expenses(csv_text: str | bytes) -> tuple[ExpenseRecord, ...]:
    """Parse an expense export into its retained records."""

    return tuple(to_expense_records(csv_text))


def summarize(
    incomes: Iterable[IncomeRecord],
    expenses: Iterable[ExpenseRecord],
) -> DashboardSummary:
    """Aggregate already-parsed records into a :class:`DashboardSummary`."""

    raw_incomes = tuple(incomes)
    raw_expenses = tuple(expenses)

    summary = DashboardSummary(
        total_income=aggregation.total(raw_incomes),
        total_expense=aggregation.total(raw_expenses),
        top_donors=aggregation.top_donors(raw_incomes),
        top_suppliers=aggregation.top_suppliers(raw_expenses),
        category_breakdown=aggregation.category_breakdown(raw_expenses),
        monthly_flow=aggregation.monthly_flow(raw_incomes, raw_expenses),
        raw_expenses=raw_expenses,
        raw_incomes=raw_incomes,
    )
    logger.info(
        "summary built: incomes=%d expenses=%d total_income=%s total_expense=%s",
        len(raw_incomes),
        len(raw_expenses),
        summary.total_income,
        summary.total_expense,
    )
    return summary


def build_dashboard_summary(income_csv: str | bytes, expense_csv: str | bytes) -> DashboardSummary:
    """Parse both exports and return their summary.

    Parameters
    ----------
    income_csv:
        Full text of the income export (``Data da receita`` header).
    expense_csv:
        Full text of the expense export (``Data da despesa`` header).

    Raises
    ------
    ParseFailure
        When either blob is not text or cannot be tokenized; ``source`` tells
        which one. Every other irregularity degrades to defaults.
    """

    return summarize(parse_incomes(income_csv), parse_expenses(expense_csv))


__all__ = ["build_dashboard_summary", "parse_expenses", "parse_incomes", "summarize"]
