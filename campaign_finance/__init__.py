"""Public interface for the ``campaign_finance`` package.

This module exposes the package's API functions and public models/types as the
stable import surface. There is no runtime logic here, only symbol re-exports.
"""

from .aggregation import expense_category
from .api import build_dashboard_summary, parse_expenses, parse_incomes, summarize
from .errors import ParseFailure
from .export import build_assistant_context, summary_to_json, summary_to_payload
from .models import (
    DashboardSummary,
    ExpenseRecord,
    IncomeRecord,
    MonthlyFlow,
    NamedAmount,
)
from .normalizers import format_brl, month_key, parse_amount, parse_date

__all__ = [
    # API
    "build_dashboard_summary",
    "parse_expenses",
    "parse_incomes",
    "summarize",
    # Normalizers
    "parse_amount",
    "parse_date",
    "month_key",
    "format_brl",
    "expense_category",
    # Export
    "summary_to_json",
    "summary_to_payload",
    "build_assistant_context",
    # Models / errors
    "DashboardSummary",
    "ExpenseRecord",
    "IncomeRecord",
    "MonthlyFlow",
    "NamedAmount",
    "ParseFailure",
]
