"""Parsing of the income and expense exports into typed records."""

from .adapters.expenses_csv import to_expense_records
from .adapters.income_csv import to_income_records
from .schemas import EXPENSE_SCHEMA, INCOME_SCHEMA, ExportSchema

__all__ = [
    "EXPENSE_SCHEMA",
    "INCOME_SCHEMA",
    "ExportSchema",
    "to_expense_records",
    "to_income_records",
]
