"""Data models for ``campaign_finance``.

Records are frozen dataclasses with explicit field order, mirroring the two
ledger exports (income and expense). Monetary values are ``Decimal`` so sums
are exact across runs; sequences held by :class:`DashboardSummary` are tuples
so a returned summary cannot be mutated by callers.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from decimal import Decimal

# ---------------------------------------------------------------------------
# Ledger records
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class ExpenseRecord:
    """A single retained row of the expense export.

    ``date`` is ISO ``YYYY-MM-DD`` when the source cell was ``DD/MM/YYYY``;
    otherwise it carries the raw cell text. Consumers keyed on dates must treat
    non-ISO values as unparseable.
    """

    date: str
    provider_name: str
    document_number: str
    value: Decimal
    description: str
    nature: str


@dataclass(frozen=True, slots=True)
class IncomeRecord:
    """A single retained row of the income export (``value`` is always > 0)."""

    date: str
    donor_name: str
    type: str
    source: str
    nature: str
    value: Decimal


# ---------------------------------------------------------------------------
# Aggregate views
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class NamedAmount:
    """Shared shape for rankings and category rollups."""

    name: str
    value: Decimal


@dataclass(frozen=True, slots=True)
class MonthlyFlow:
    """Income and expense sums for one ``YYYY-MM`` bucket."""

    month_key: str
    income_total: Decimal
    expense_total: Decimal

    @property
    def net(self) -> Decimal:
        """Return income_total minus expense_total."""
        return self.income_total - self.expense_total


@dataclass(frozen=True, slots=True)
class DashboardSummary:
    """Everything the dashboard and the assistant read from one dataset.

    Attributes
    ----------
    total_income:
        Sum of all retained income values.
    total_expense:
        Sum of all retained expense values.
    top_donors:
        At most five donors, non-increasing by aggregated value.
    top_suppliers:
        At most five providers, non-increasing by aggregated value.
    category_breakdown:
        Every expense category observed, descending by value.
    monthly_flow:
        One entry per month key, ascending.
    raw_expenses / raw_incomes:
        The retained records in input order.
    """

    total_income: Decimal
    total_expense: Decimal
    top_donors: tuple[NamedAmount, ...]
    top_suppliers: tuple[NamedAmount, ...]
    category_breakdown: tuple[NamedAmount, ...]
    monthly_flow: tuple[MonthlyFlow, ...]
    raw_expenses: tuple[ExpenseRecord, ...]
    raw_incomes: tuple[IncomeRecord, ...]

    @property
    def balance(self) -> Decimal:
        """Return total_income minus total_expense."""
        return self.total_income - self.total_expense


type Expenses = Sequence[ExpenseRecord]
type Incomes = Sequence[IncomeRecord]


__all__ = [
    "ExpenseRecord",
    "IncomeRecord",
    "NamedAmount",
    "MonthlyFlow",
    "DashboardSummary",
    "Expenses",
    "Incomes",
]
