import json

from campaign_finance import build_assistant_context, build_dashboard_summary, summary_to_json


def test_summary_to_json_uses_dashboard_field_names(income_csv, expense_csv):
    summary = build_dashboard_summary(income_csv, expense_csv)

    doc = json.loads(summary_to_json(summary))

    assert set(doc) == {
        "totalIncome",
        "totalExpense",
        "balance",
        "topDonors",
        "topSuppliers",
        "expensesByCategory",
        "monthlyFlow",
        "rawExpenses",
        "rawIncomes",
    }
    assert doc["totalIncome"] == 425858.07
    assert doc["balance"] == 421508.07
    assert doc["topDonors"][0] == {"name": "DIRETÓRIO NACIONAL", "value": 414708.07}
    assert doc["monthlyFlow"][0] == {"name": "2025-01", "income": 419708.07, "expense": 1115.44}
    assert doc["rawExpenses"][0] == {
        "date": "2025-12-17",
        "providerName": "ACME LTDA",
        "documentNumber": "1001",
        "value": 1234.56,
        "description": "PUBLICIDADE - banner",
        "nature": "Prestação de serviço",
    }
    assert set(doc["rawIncomes"][0]) == {"date", "donorName", "type", "source", "nature", "value"}


def test_summary_to_json_is_deterministic(income_csv, expense_csv):
    a = summary_to_json(build_dashboard_summary(income_csv, expense_csv))
    b = summary_to_json(build_dashboard_summary(income_csv, expense_csv))
    assert a == b


def test_assistant_context_contains_totals_and_raw_records(income_csv, expense_csv):
    summary = build_dashboard_summary(income_csv, expense_csv)

    text = build_assistant_context(
        summary, dataset_name="Partido Exemplo (PE)", reference_month="Julho de 2025"
    )

    assert '"Partido Exemplo (PE)"' in text
    assert "Julho de 2025" in text
    assert "Receita Total (R$ 425.858,07)" in text
    assert "Despesa Total (R$ 4.350,00)" in text
    assert "Saldo (R$ 421.508,07)" in text
    assert "2025-01 a 2025-12" in text
    assert '"Doador": "DIRETÓRIO NACIONAL"' in text
    assert '"Fornecedor": "ACME LTDA"' in text
    assert '"Valor": 414708.07' in text
    assert '"Valor": 2000' in text


def test_assistant_context_without_reference_month_or_data():
    summary = build_dashboard_summary("", "")

    text = build_assistant_context(summary, dataset_name="Vazio")

    assert "CONTEXTO TEMPORAL" not in text
    assert "sem datas válidas" in text
    assert "Receita Total (R$ 0,00)" in text
