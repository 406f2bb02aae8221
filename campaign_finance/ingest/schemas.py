"""Column layouts of the two ledger exports.

Column order has changed between exporter versions, so only header names are
recorded here; rows are always resolved by name.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..errors import ExportKind

# Shared
NAME_COLUMNS: tuple[str, ...] = ("Nome / Razão", "Nome/Razão")

# Expense export
EXPENSE_DATE = "Data da despesa"
EXPENSE_DOCUMENT_NUMBER = "Nº do documento"
EXPENSE_VALUE_COLUMNS: tuple[str, ...] = ("Valor do documento", "Valor do gasto")
EXPENSE_DESCRIPTION = "Descrição da despesa"
EXPENSE_NATURE = "Natureza do gasto"
UNKNOWN_PROVIDER = "Fornecedor desconhecido"

# Income export
INCOME_DATE = "Data da receita"
INCOME_TYPE = "Espécie do recurso"
INCOME_SOURCE = "Fonte do recurso"
INCOME_NATURE = "Natureza do recurso"
INCOME_VALUE_COLUMNS: tuple[str, ...] = ("Valor da doação",)
UNKNOWN_DONOR = "Doador desconhecido"


@dataclass(frozen=True, slots=True)
class ExportSchema:
    """How to find and validate the tabular part of one export.

    ``header_signature`` is the leading text of the real header row; anything
    above it is exporter preamble. ``date_column`` and ``value_columns`` are the
    columns a row must reach to be considered at all.
    """

    kind: ExportKind
    header_signature: str
    date_column: str
    value_columns: tuple[str, ...]


EXPENSE_SCHEMA = ExportSchema(
    kind="expense",
    header_signature=EXPENSE_DATE,
    date_column=EXPENSE_DATE,
    value_columns=EXPENSE_VALUE_COLUMNS,
)

INCOME_SCHEMA = ExportSchema(
    kind="income",
    header_signature=INCOME_DATE,
    date_column=INCOME_DATE,
    value_columns=INCOME_VALUE_COLUMNS,
)


__all__ = [
    "ExportSchema",
    "EXPENSE_SCHEMA",
    "INCOME_SCHEMA",
    "NAME_COLUMNS",
    "EXPENSE_DATE",
    "EXPENSE_DOCUMENT_NUMBER",
    "EXPENSE_VALUE_COLUMNS",
    "EXPENSE_DESCRIPTION",
    "EXPENSE_NATURE",
    "UNKNOWN_PROVIDER",
    "INCOME_DATE",
    "INCOME_TYPE",
    "INCOME_SOURCE",
    "INCOME_NATURE",
    "INCOME_VALUE_COLUMNS",
    "UNKNOWN_DONOR",
]
