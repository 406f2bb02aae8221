# ruff: noqa: E501
import textwrap
from decimal import Decimal

import pytest

from campaign_finance import ExpenseRecord, IncomeRecord, ParseFailure
from campaign_finance.ingest import to_expense_records, to_income_records
from campaign_finance.ingest.reader import slice_from_header


def _dedent(s: str) -> str:
    return textwrap.dedent(s).lstrip("\n")


def test_expense_scenario_single_row():
    csv_text = _dedent(
        """
        Data da despesa;CPF/CNPJ;Nome / Razão;Tipo do documento;Nº do documento;Valor do documento;Descrição da despesa;Natureza do gasto
        17/12/2025;x;ACME LTDA;NF;123;"1.234,56";PUBLICIDADE - banner;Prestação de serviço
        """
    )

    rows = list(to_expense_records(csv_text))

    assert rows == [
        ExpenseRecord(
            date="2025-12-17",
            provider_name="ACME LTDA",
            document_number="123",
            value=Decimal("1234.56"),
            description="PUBLICIDADE - banner",
            nature="Prestação de serviço",
        )
    ]


def test_expense_preamble_is_skipped(expense_csv):
    rows = list(to_expense_records(expense_csv))

    assert [r.provider_name for r in rows] == [
        "ACME LTDA",
        "POSTO BOA VIAGEM",
        "ACME LTDA",
        "RECEITA FEDERAL",
        'GRAFICA "CENTRAL" LTDA',
    ]
    # Quoted semicolons and embedded newlines stay inside their cell.
    assert rows[1].description == "TRANSPORTE - combustível; frota"
    assert rows[4].description == "SERVIÇOS GRÁFICOS - panfletos\nsegunda tiragem"
    assert rows[4].nature == "Material gráfico"


def test_expense_zero_value_with_description_is_kept(expense_csv):
    rows = list(to_expense_records(expense_csv))

    zero = [r for r in rows if r.value == 0]
    assert [r.provider_name for r in zero] == ["RECEITA FEDERAL"]
    assert "VAZIO LTDA" not in {r.provider_name for r in rows}
    assert "SEM DATA LTDA" not in {r.provider_name for r in rows}


def test_expense_columns_resolved_by_name_not_position():
    csv_text = _dedent(
        """
        Natureza do gasto;Descrição da despesa;Valor do gasto;Nome/Razão;Data da despesa
        Serviço;EVENTOS - som;"2.500,00";SOM & CIA;03/04/2025
        """
    )

    (row,) = list(to_expense_records(csv_text))

    assert row.date == "2025-04-03"
    assert row.provider_name == "SOM & CIA"
    assert row.value == Decimal("2500.00")
    assert row.description == "EVENTOS - som"
    assert row.nature == "Serviço"
    assert row.document_number == ""


def test_expense_missing_name_column_uses_sentinel():
    csv_text = _dedent(
        """
        Data da despesa;Valor do documento;Descrição da despesa
        01/05/2025;"10,00";DIVERSOS
        """
    )

    (row,) = list(to_expense_records(csv_text))

    assert row.provider_name == "Fornecedor desconhecido"
    assert row.nature == ""


def test_short_row_does_not_fall_back_to_alternate_name_spelling():
    csv_text = _dedent(
        """
        Data da despesa;Nome/Razão;Valor do documento;Nome / Razão
        01/05/2025;OUTRA GRAFIA;"10,00"
        """
    )

    (row,) = list(to_expense_records(csv_text))

    assert row.provider_name == "Fornecedor desconhecido"
    assert row.value == Decimal("10.00")


def test_income_row_with_zero_value_is_dropped():
    csv_text = _dedent(
        """
        Data da receita;Nome / Razão;Espécie do recurso;Fonte do recurso;Natureza do recurso;Valor da doação
        01/02/2025;FULANO;Transferência eletrônica;Outros Recursos;Financeiro;"0,00"
        02/02/2025;BELTRANO;Transferência eletrônica;Outros Recursos;Financeiro;"10,00"
        """
    )

    rows = list(to_income_records(csv_text))

    assert rows == [
        IncomeRecord(
            date="2025-02-02",
            donor_name="BELTRANO",
            type="Transferência eletrônica",
            source="Outros Recursos",
            nature="Financeiro",
            value=Decimal("10.00"),
        )
    ]


def test_income_sample_retention(income_csv):
    rows = list(to_income_records(income_csv))

    names = [r.donor_name for r in rows]
    assert names == [
        "JOÃO DA SILVA",
        "DIRETÓRIO NACIONAL",
        "MARIA SOUZA",
        "JOÃO DA SILVA",
        "ANA PEREIRA",
        "CARLOS LIMA",
        "BRUNA COSTA",
        "DOADOR DATA RUIM",
    ]
    assert all(r.value > 0 for r in rows)
    assert rows[1].value == Decimal("414708.07")
    # Unparseable dates are kept verbatim.
    assert rows[-1].date == "2025/03"


def test_header_signature_missing_falls_back_to_first_line():
    csv_text = "Nome / Razão;Valor do documento;Descrição da despesa\nACME;\"5,00\";X\n"

    # No date column: rows are read but none has a date, so none is retained.
    assert list(to_expense_records(csv_text)) == []
    assert slice_from_header(csv_text, "Data da despesa") == csv_text


def test_header_signature_missing_first_line_is_header():
    csv_text = _dedent(
        """
        Nome / Razão;Data da despesa;Valor do documento;Descrição da despesa
        ACME;01/01/2025;"5,00";PUBLICIDADE
        """
    )

    (row,) = list(to_expense_records(csv_text))

    assert row.provider_name == "ACME"
    assert row.value == Decimal("5.00")


def test_quoted_header_cells_and_bom_are_tolerated():
    csv_text = '\ufeffRelatório\n"Data da receita";"Nome / Razão";"Valor da doação"\n"01/01/2025";"ANA";"1,00"\n'

    (row,) = list(to_income_records(csv_text))

    assert row.donor_name == "ANA"
    assert row.value == Decimal("1.00")


def test_bytes_are_decoded_as_utf8():
    csv_text = "Data da receita;Nome / Razão;Valor da doação\n01/01/2025;JOÃO;\"1,00\"\n"

    (row,) = list(to_income_records(csv_text.encode("utf-8")))

    assert row.donor_name == "JOÃO"


def test_short_rows_and_blank_lines_are_skipped():
    csv_text = _dedent(
        """
        Data da receita;Nome / Razão;Espécie do recurso;Valor da doação

        01/01/2025;ANA
        ;;;
        02/01/2025;BIA;Pix;"3,00"
        """
    )

    rows = list(to_income_records(csv_text))

    assert [r.donor_name for r in rows] == ["BIA"]


def test_empty_input_yields_no_records():
    assert list(to_income_records("")) == []
    assert list(to_expense_records("")) == []


def test_non_text_input_raises_parse_failure():
    with pytest.raises(ParseFailure) as excinfo:
        list(to_income_records(12345))  # type: ignore[arg-type]
    assert excinfo.value.source == "income"


def test_invalid_utf8_raises_parse_failure():
    with pytest.raises(ParseFailure) as excinfo:
        list(to_expense_records(b"Data da despesa;Valor\n\xff\xfe;1\n"))
    assert excinfo.value.source == "expense"


def test_untokenizable_field_raises_parse_failure():
    # A single cell past the csv module's field size limit.
    csv_text = "Data da despesa;Valor do documento\n" + '"' + "x" * 200_000 + '";1\n'

    with pytest.raises(ParseFailure) as excinfo:
        list(to_expense_records(csv_text))
    assert excinfo.value.source == "expense"
