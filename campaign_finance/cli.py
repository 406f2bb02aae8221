"""CLI for the ``campaign_finance`` package.

Exposes command handlers (``cmd_summary``, ``cmd_context``) and a Typer-based
console interface. Environment variables (``CAMPAIGN_FINANCE_LOG_LEVEL``,
``CAMPAIGN_FINANCE_ENCODING``) are loaded from a local ``.env`` using
``python-dotenv`` before delegating to command logic. Parsing and aggregation
live in :mod:`campaign_finance.api`; this module only reads files and prints.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv
from typer.models import OptionInfo

from .api import build_dashboard_summary
from .errors import ParseFailure
from .export import build_assistant_context, summary_to_json
from .ingest.utils import read_export
from .logging_setup import configure_logging
from .models import DashboardSummary
from .normalizers import format_brl


def _load_exports(
    income_path: str, expense_path: str, encoding: str | None
) -> DashboardSummary | None:
    """Read both exports and build the summary; report failures on stderr."""

    texts: dict[str, str] = {}
    for kind, path in (("income", income_path), ("expense", expense_path)):
        try:
            texts[kind] = read_export(path, encoding)
        except FileNotFoundError:
            print(f"Error: File not found: {path}", file=sys.stderr)
            return None
        except PermissionError:
            print(f"Error: Permission denied: {path}", file=sys.stderr)
            return None
        except (UnicodeDecodeError, LookupError) as e:
            print(f"Error: Could not decode {kind} export '{path}': {e}", file=sys.stderr)
            return None

    try:
        return build_dashboard_summary(texts["income"], texts["expense"])
    except ParseFailure as e:
        print(f"Error: Failed to parse {e.source} CSV: {e.reason}", file=sys.stderr)
        return None


def _format_report(summary: DashboardSummary) -> str:
    out: list[str] = [
        f"Receita total:  {format_brl(summary.total_income)}",
        f"Despesa total:  {format_brl(summary.total_expense)}",
        f"Saldo:          {format_brl(summary.balance)}",
        "",
        "Maiores doadores:",
    ]
    out += [f"  {d.name}\t{format_brl(d.value)}" for d in summary.top_donors] or ["  (nenhum)"]
    out += ["", "Maiores fornecedores:"]
    out += [f"  {s.name}\t{format_brl(s.value)}" for s in summary.top_suppliers] or [
        "  (nenhum)"
    ]
    out += ["", "Despesas por categoria:"]
    out += [
        f"  {c.name or '(sem descrição)'}\t{format_brl(c.value)}"
        for c in summary.category_breakdown
    ] or ["  (nenhuma)"]
    out += ["", "Fluxo mensal (mês\treceitas\tdespesas):"]
    out += [
        f"  {m.month_key}\t{format_brl(m.income_total)}\t{format_brl(m.expense_total)}"
        for m in summary.monthly_flow
    ] or ["  (nenhum)"]
    return "\n".join(out)


def cmd_summary(
    income_path: str,
    expense_path: str,
    *,
    encoding: str | None = None,
    as_json: bool = False,
) -> int:
    """Print the dashboard summary of two exports.

    Writes either a plain-text report or the JSON payload to stdout. Errors go
    to stderr and yield a non-zero exit status; ``0`` on success.
    """

    summary = _load_exports(income_path, expense_path, encoding)
    if summary is None:
        return 1
    print(summary_to_json(summary) if as_json else _format_report(summary))
    return 0


def cmd_context(
    income_path: str,
    expense_path: str,
    *,
    dataset_name: str,
    reference_month: str | None = None,
    encoding: str | None = None,
) -> int:
    """Print the assistant context block for two exports."""

    summary = _load_exports(income_path, expense_path, encoding)
    if summary is None:
        return 1
    print(
        build_assistant_context(
            summary, dataset_name=dataset_name, reference_month=reference_month
        )
    )
    return 0


# ---- Typer application -------------------------------------------------------

app = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    help=(
        "Summarize campaign-finance income and expense exports (semicolon-"
        "delimited, Brazilian locale). Loads settings from a local .env."
    ),
)

# Module-level option objects to satisfy ruff B008 (no calls in parameter
# defaults).
INCOME_OPTION: OptionInfo = typer.Option(
    ...,
    "--income",
    help="Path to the income export (header 'Data da receita').",
    dir_okay=False,
    file_okay=True,
    exists=False,  # the handler reports missing files itself
)
EXPENSE_OPTION: OptionInfo = typer.Option(
    ...,
    "--expense",
    help="Path to the expense export (header 'Data da despesa').",
    dir_okay=False,
    file_okay=True,
    exists=False,
)


@app.command("summary")
def summary_cmd(
    income: Annotated[Path, INCOME_OPTION],
    expense: Annotated[Path, EXPENSE_OPTION],
    *,
    encoding: str | None = typer.Option(
        None,
        "--encoding",
        help="Text encoding of both files (falls back to CAMPAIGN_FINANCE_ENCODING).",
    ),
    as_json: bool = typer.Option(False, "--json", help="Emit the JSON payload."),
) -> None:
    code = cmd_summary(str(income), str(expense), encoding=encoding, as_json=as_json)
    if code:
        raise typer.Exit(code)


@app.command("context")
def context_cmd(
    income: Annotated[Path, INCOME_OPTION],
    expense: Annotated[Path, EXPENSE_OPTION],
    *,
    dataset_name: str = typer.Option(
        "Conjunto de dados", "--dataset-name", help="Name shown to the assistant."
    ),
    reference_month: str | None = typer.Option(
        None, "--reference-month", help="Reference period, e.g. 'Julho de 2025'."
    ),
    encoding: str | None = typer.Option(
        None,
        "--encoding",
        help="Text encoding of both files (falls back to CAMPAIGN_FINANCE_ENCODING).",
    ),
) -> None:
    code = cmd_context(
        str(income),
        str(expense),
        dataset_name=dataset_name,
        reference_month=reference_month,
        encoding=encoding,
    )
    if code:
        raise typer.Exit(code)


@app.callback(invoke_without_command=True)
def _root(ctx: typer.Context) -> None:
    """Root command.

    Loads ``.env`` from the current working directory (without overriding any
    already-set environment variables) and configures package logging.
    """

    load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)
    configure_logging()

    if ctx.invoked_subcommand is None:
        typer.echo("No subcommand provided. Use --help to see available commands.")
        raise typer.Exit(1)


if __name__ == "__main__":  # pragma: no cover
    app()
