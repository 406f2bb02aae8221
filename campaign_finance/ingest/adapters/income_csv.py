"""Adapter mapping the income export ("Receitas") to :class:`IncomeRecord`.

Header signature: ``Data da receita``. Columns used (by name):
``Data da receita``, ``Nome / Razão`` (or ``Nome/Razão``),
``Espécie do recurso``, ``Fonte do recurso``, ``Natureza do recurso``,
``Valor da doação``.

Only rows with a date and a strictly positive value are kept; zero and
negative donations are noise in these exports.
"""

from __future__ import annotations

from collections.abc import Iterator

from ...logging_setup import get_logger
from ...models import IncomeRecord
from ...normalizers import parse_amount, parse_date
from ..reader import Row, read_rows
from ..schemas import (
    INCOME_DATE,
    INCOME_NATURE,
    INCOME_SCHEMA,
    INCOME_SOURCE,
    INCOME_TYPE,
    INCOME_VALUE_COLUMNS,
    NAME_COLUMNS,
    UNKNOWN_DONOR,
)

logger = get_logger("campaign_finance.ingest.adapters.income_csv")


def _to_record(row: Row) -> IncomeRecord:
    return IncomeRecord(
        date=parse_date(row.get(INCOME_DATE)),
        donor_name=row.get(*NAME_COLUMNS) or UNKNOWN_DONOR,
        type=row.get(INCOME_TYPE),
        source=row.get(INCOME_SOURCE),
        nature=row.get(INCOME_NATURE),
        value=parse_amount(row.get(*INCOME_VALUE_COLUMNS)),
    )


def is_retained(record: IncomeRecord) -> bool:
    return bool(record.date) and record.value > 0


def to_income_records(csv_text: str | bytes) -> Iterator[IncomeRecord]:
    """Yield retained income records from a raw export, in input order.

    Raises :class:`~campaign_finance.errors.ParseFailure` (``source="income"``)
    when the blob is not delimited text.
    """

    kept = dropped = 0
    for row in read_rows(csv_text, INCOME_SCHEMA):
        record = _to_record(row)
        if not is_retained(record):
            dropped += 1
            continue
        kept += 1
        yield record
    logger.debug("income export: kept %d records, dropped %d", kept, dropped)


__all__ = ["is_retained", "to_income_records"]
