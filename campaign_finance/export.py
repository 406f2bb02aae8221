"""Serialized views of a :class:`DashboardSummary` for external consumers.

Two consumers read a summary outside Python: the dashboard front end (JSON
with the camelCase field names it was written against) and the conversational
assistant (a Portuguese context block with the raw records). Both are built
here; nothing in this module calls a model or touches storage.
"""

from __future__ import annotations

import json
from decimal import Decimal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from .models import DashboardSummary, ExpenseRecord, IncomeRecord, MonthlyFlow, NamedAmount
from .normalizers import format_brl

# ---------------------------------------------------------------------------
# JSON payload
# ---------------------------------------------------------------------------


class _Payload(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True, extra="forbid"
    )


class ExpensePayload(_Payload):
    date: str
    provider_name: str
    document_number: str
    value: float
    description: str
    nature: str


class IncomePayload(_Payload):
    date: str
    donor_name: str
    type: str
    source: str
    nature: str
    value: float


class NamedAmountPayload(_Payload):
    name: str
    value: float


class MonthlyFlowPayload(_Payload):
    """One month of the cash-flow chart (``name`` is the ``YYYY-MM`` key)."""

    name: str
    income: float
    expense: float


class DashboardSummaryPayload(_Payload):
    """Top-level JSON document consumed by the dashboard."""

    total_income: float
    total_expense: float
    balance: float
    top_donors: list[NamedAmountPayload]
    top_suppliers: list[NamedAmountPayload]
    expenses_by_category: list[NamedAmountPayload]
    monthly_flow: list[MonthlyFlowPayload]
    raw_expenses: list[ExpensePayload]
    raw_incomes: list[IncomePayload]


def _named(items: tuple[NamedAmount, ...]) -> list[NamedAmountPayload]:
    return [NamedAmountPayload(name=i.name, value=float(i.value)) for i in items]


def _month(m: MonthlyFlow) -> MonthlyFlowPayload:
    return MonthlyFlowPayload(
        name=m.month_key, income=float(m.income_total), expense=float(m.expense_total)
    )


def _expense(e: ExpenseRecord) -> ExpensePayload:
    return ExpensePayload(
        date=e.date,
        provider_name=e.provider_name,
        document_number=e.document_number,
        value=float(e.value),
        description=e.description,
        nature=e.nature,
    )


def _income(i: IncomeRecord) -> IncomePayload:
    return IncomePayload(
        date=i.date,
        donor_name=i.donor_name,
        type=i.type,
        source=i.source,
        nature=i.nature,
        value=float(i.value),
    )


def summary_to_payload(summary: DashboardSummary) -> DashboardSummaryPayload:
    return DashboardSummaryPayload(
        total_income=float(summary.total_income),
        total_expense=float(summary.total_expense),
        balance=float(summary.balance),
        top_donors=_named(summary.top_donors),
        top_suppliers=_named(summary.top_suppliers),
        expenses_by_category=_named(summary.category_breakdown),
        monthly_flow=[_month(m) for m in summary.monthly_flow],
        raw_expenses=[_expense(e) for e in summary.raw_expenses],
        raw_incomes=[_income(i) for i in summary.raw_incomes],
    )


def summary_to_json(summary: DashboardSummary, *, indent: int | None = 2) -> str:
    """Serialize ``summary`` with the dashboard's camelCase field names."""

    return summary_to_payload(summary).model_dump_json(by_alias=True, indent=indent)


# ---------------------------------------------------------------------------
# Assistant context
# ---------------------------------------------------------------------------


def _num(value: Decimal) -> float | int:
    # Whole amounts render without a trailing ".0", like the dashboard does.
    return int(value) if value == value.to_integral_value() else float(value)


def _income_rows(incomes: tuple[IncomeRecord, ...]) -> list[dict[str, object]]:
    return [
        {
            "Data": i.date,
            "Doador": i.donor_name,
            "Valor": _num(i.value),
            "Natureza": i.nature,
            "Fonte": i.source,
        }
        for i in incomes
    ]


def _expense_rows(expenses: tuple[ExpenseRecord, ...]) -> list[dict[str, object]]:
    return [
        {
            "Data": e.date,
            "Fornecedor": e.provider_name,
            "Valor": _num(e.value),
            "Descricao": e.description,
            "Natureza": e.nature,
        }
        for e in expenses
    ]


def build_assistant_context(
    summary: DashboardSummary,
    *,
    dataset_name: str,
    reference_month: str | None = None,
) -> str:
    """Render the instruction block given to the dashboard assistant.

    ``reference_month`` (free text, e.g. ``"Julho de 2025"``) anchors relative
    questions such as "último trimestre"; it is supplied by the caller so the
    output never depends on the clock.
    """

    lines: list[str] = [
        f'Você é o assistente virtual "PoliFin AI", integrado à dashboard financeira de "{dataset_name}".',
        "",
    ]
    if reference_month:
        lines += [
            "### CONTEXTO TEMPORAL",
            f"- Para perguntas como \"último trimestre\" ou \"atualmente\", considere a data de referência como **{reference_month}**.",
            "",
        ]
    months = [m.month_key for m in summary.monthly_flow]
    period = f"{months[0]} a {months[-1]}" if months else "sem datas válidas"
    lines += [
        "### ELEMENTOS VISUAIS DA DASHBOARD",
        f"1. **Cartões de Resumo**: Receita Total ({format_brl(summary.total_income)}), "
        f"Despesa Total ({format_brl(summary.total_expense)}) e Saldo ({format_brl(summary.balance)}).",
        f"2. **Fluxo de Caixa Mensal**: receitas vs despesas por mês ({period}).",
        "3. **Categorias de Despesa**: distribuição das despesas por tipo "
        f"({len(summary.category_breakdown)} categorias).",
        "4. **Rankings**: Top 5 Maiores Doadores e Top 5 Maiores Fornecedores.",
        "",
        "### DADOS COMPLETOS (FONTE DA VERDADE)",
        "Utilize os dados brutos abaixo para calcular respostas precisas. Não invente valores.",
        "",
        "**RECEITAS (Incomes):**",
        json.dumps(_income_rows(summary.raw_incomes), ensure_ascii=False, indent=2),
        "",
        "**DESPESAS (Expenses):**",
        json.dumps(_expense_rows(summary.raw_expenses), ensure_ascii=False, indent=2),
        "",
        "### INSTRUÇÕES DE RESPOSTA",
        "1. **Seja Analítico**: ao explicar gráficos, mencione tendências.",
        "2. **Use Formatação**: use negrito para valores monetários (ex: **R$ 50.000,00**).",
        "3. **Consultas Específicas**: filtre os dados brutos para responder perguntas pontuais.",
        "4. **Polidez**: seja profissional e objetivo.",
        "",
        "Responda sempre em Português do Brasil.",
    ]
    return "\n".join(lines)


__all__ = [
    "DashboardSummaryPayload",
    "ExpensePayload",
    "IncomePayload",
    "MonthlyFlowPayload",
    "NamedAmountPayload",
    "build_assistant_context",
    "summary_to_json",
    "summary_to_payload",
]
