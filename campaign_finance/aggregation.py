"""Aggregations over retained income and expense records.

Every function is a pure fold over its inputs. Grouping uses plain ``dict``
accumulators, which keep first-seen order; rankings then use a stable sort so
ties stay in that order from run to run.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from decimal import Decimal
from typing import Any

from .models import (
    ExpenseRecord,
    Expenses,
    IncomeRecord,
    Incomes,
    MonthlyFlow,
    NamedAmount,
)
from .normalizers import month_key

TOP_N = 5

_ZERO = Decimal("0")


def total(records: Iterable[ExpenseRecord | IncomeRecord]) -> Decimal:
    """Sum record values with a ``Decimal`` accumulator."""

    acc = _ZERO
    for r in records:
        acc += r.value
    return acc


def _group_sum(
    records: Iterable[Any], key: Callable[[Any], str]
) -> dict[str, Decimal]:
    totals: dict[str, Decimal] = {}
    for r in records:
        k = key(r)
        totals[k] = totals.get(k, _ZERO) + r.value
    return totals


def _descending(totals: dict[str, Decimal]) -> list[NamedAmount]:
    items = [NamedAmount(name=name, value=value) for name, value in totals.items()]
    # sorted(reverse=True) keeps equal values in insertion order.
    return sorted(items, key=lambda item: item.value, reverse=True)


def top_donors(incomes: Incomes, limit: int = TOP_N) -> tuple[NamedAmount, ...]:
    """Donors ranked by summed value, at most ``limit`` entries."""

    return tuple(_descending(_group_sum(incomes, lambda r: r.donor_name))[:limit])


def top_suppliers(expenses: Expenses, limit: int = TOP_N) -> tuple[NamedAmount, ...]:
    """Providers ranked by summed value, at most ``limit`` entries."""

    return tuple(_descending(_group_sum(expenses, lambda r: r.provider_name))[:limit])


def expense_category(description: str) -> str:
    """Return the category of an expense: its description up to the first ``-``.

    ``"TRANSPORTE - combustível"`` -> ``"TRANSPORTE"``. A description without
    ``-`` is its own category.
    """

    return description.split("-", 1)[0].strip()


def category_breakdown(expenses: Expenses) -> tuple[NamedAmount, ...]:
    """Every observed category with its summed value, descending, untruncated."""

    return tuple(_descending(_group_sum(expenses, lambda r: expense_category(r.description))))


def monthly_flow(incomes: Incomes, expenses: Expenses) -> tuple[MonthlyFlow, ...]:
    """Income and expense sums per ``YYYY-MM`` key, ascending by key.

    Records whose date yields no month key are left out of this series only;
    they still count toward the totals.
    """

    income_by_month: dict[str, Decimal] = {}
    expense_by_month: dict[str, Decimal] = {}
    for inc in incomes:
        key = month_key(inc.date)
        if key is None:
            continue
        income_by_month[key] = income_by_month.get(key, _ZERO) + inc.value
    for exp in expenses:
        key = month_key(exp.date)
        if key is None:
            continue
        expense_by_month[key] = expense_by_month.get(key, _ZERO) + exp.value

    keys = sorted(income_by_month.keys() | expense_by_month.keys())
    return tuple(
        MonthlyFlow(
            month_key=k,
            income_total=income_by_month.get(k, _ZERO),
            expense_total=expense_by_month.get(k, _ZERO),
        )
        for k in keys
    )


__all__ = [
    "TOP_N",
    "category_breakdown",
    "expense_category",
    "monthly_flow",
    "top_donors",
    "top_suppliers",
    "total",
]
