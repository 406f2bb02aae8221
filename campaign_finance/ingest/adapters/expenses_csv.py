"""Adapter mapping the expense export ("Despesas") to :class:`ExpenseRecord`.

Header signature: ``Data da despesa``. Columns used (by name):
``Data da despesa``, ``Nome / Razão`` (or ``Nome/Razão``), ``Nº do documento``,
``Valor do documento`` (or ``Valor do gasto``), ``Descrição da despesa``,
``Natureza do gasto``.

A row is kept when it has a date and either a positive value or a
description; zero-value administrative entries still carry meaning.
"""

from __future__ import annotations

from collections.abc import Iterator

from ...logging_setup import get_logger
from ...models import ExpenseRecord
from ...normalizers import parse_amount, parse_date
from ..reader import Row, read_rows
from ..schemas import (
    EXPENSE_DATE,
    EXPENSE_DESCRIPTION,
    EXPENSE_DOCUMENT_NUMBER,
    EXPENSE_NATURE,
    EXPENSE_SCHEMA,
    EXPENSE_VALUE_COLUMNS,
    NAME_COLUMNS,
    UNKNOWN_PROVIDER,
)

logger = get_logger("campaign_finance.ingest.adapters.expenses_csv")


def _to_record(row: Row) -> ExpenseRecord:
    return ExpenseRecord(
        date=parse_date(row.get(EXPENSE_DATE)),
        provider_name=row.get(*NAME_COLUMNS) or UNKNOWN_PROVIDER,
        document_number=row.get(EXPENSE_DOCUMENT_NUMBER),
        value=parse_amount(row.get(*EXPENSE_VALUE_COLUMNS)),
        description=row.get(EXPENSE_DESCRIPTION),
        nature=row.get(EXPENSE_NATURE),
    )


def is_retained(record: ExpenseRecord) -> bool:
    return bool(record.date) and (record.value > 0 or bool(record.description))


def to_expense_records(csv_text: str | bytes) -> Iterator[ExpenseRecord]:
    """Yield retained expense records from a raw export, in input order.

    Raises :class:`~campaign_finance.errors.ParseFailure` (``source="expense"``)
    when the blob is not delimited text.
    """

    kept = dropped = 0
    for row in read_rows(csv_text, EXPENSE_SCHEMA):
        record = _to_record(row)
        if not is_retained(record):
            dropped += 1
            continue
        kept += 1
        yield record
    logger.debug("expense export: kept %d records, dropped %d", kept, dropped)


__all__ = ["is_retained", "to_expense_records"]
