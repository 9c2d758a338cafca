"""Command line front-end for the budget grid."""

from __future__ import annotations

from pathlib import Path

import click

from .config import BaseConfig
from .context import AppContext, create_app_context
from .logging_config import setup_logging
from .services import columns as columns_service
from .services.export_csv import export_plan_csv
from .services.formatting import format_money
from .services.reports import build_grid_frame, build_summary_frame
from .services.session import BudgetSession

VIEW_CHOICES = [mode.value for mode in columns_service.ViewMode]

view_option = click.option(
    "--view",
    "view_mode",
    type=click.Choice(VIEW_CHOICES, case_sensitive=False),
    default=columns_service.ViewMode.MONTHLY.value,
    show_default=True,
    help="Column grouping.",
)


def _app(ctx: click.Context) -> AppContext:
    if ctx.obj is None:
        config = BaseConfig()
        setup_logging(config)
        ctx.obj = create_app_context(config)
    return ctx.obj


def _open(ctx: click.Context, view_mode: str) -> tuple[AppContext, BudgetSession]:
    app = _app(ctx)
    session = app.open_session()
    session.set_view_mode(view_mode)
    return app, session


def _money(app: AppContext, value: float) -> str:
    return format_money(value, symbol=app.config.CURRENCY_SYMBOL)


@click.group()
def main() -> None:
    """Plan income and allocations over a multi-year grid."""


@main.command("show")
@view_option
@click.pass_context
def show(ctx: click.Context, view_mode: str) -> None:
    """Print the grid for the chosen view."""

    app, session = _open(ctx, view_mode)
    frame = build_grid_frame(session)
    for label in frame.columns.drop("bucket"):
        frame[label] = frame[label].map(lambda value: _money(app, value))
    click.echo(frame.to_string())


@main.command("summary")
@view_option
@click.pass_context
def summary(ctx: click.Context, view_mode: str) -> None:
    """Print bucket totals, net cash flow and allocation shares per column."""

    app, session = _open(ctx, view_mode)
    frame = build_summary_frame(session)
    for label in frame.columns:
        if label.endswith("%"):
            frame[label] = frame[label].map(lambda value: f"{value}%")
        else:
            frame[label] = frame[label].map(lambda value: _money(app, value))
    click.echo(frame.to_string())


@main.command("set")
@click.argument("category")
@click.argument("column")
@click.argument("amount")
@view_option
@click.option("--no-propagate", is_flag=True, default=False, help="Only write the edited column.")
@click.option("--yes", "assume_yes", is_flag=True, default=False, help="Skip the overwrite prompt.")
@click.pass_context
def set_amount(
    ctx: click.Context,
    category: str,
    column: str,
    amount: str,
    view_mode: str,
    no_propagate: bool,
    assume_yes: bool,
) -> None:
    """Set CATEGORY (id or name) in COLUMN (label or 1-based position) to AMOUNT."""

    app, session = _open(ctx, view_mode)
    target = session.resolve_category(category)
    if target is None:
        raise click.BadParameter(f"unknown category {category!r}", param_hint="CATEGORY")
    col = columns_service.find_column(session.columns(), column)
    if col is None:
        raise click.BadParameter(f"unknown column {column!r}", param_hint="COLUMN")

    if no_propagate:
        session.set_propagation(target.id, False)

    def _confirm(plan) -> bool:
        if assume_yes:
            return True
        return click.confirm(plan.confirmation_message(symbol=app.config.CURRENCY_SYMBOL))

    if not session.edit(target.id, col, amount, confirm=_confirm):
        click.echo("No changes made.")
        return

    saved = app.save_session(session)
    click.echo(
        f"{target.name} {col.label}: {_money(app, session.cell_value(target.id, col))} "
        f"({saved} rows saved)"
    )


@main.command("reset")
@click.option("--yes", "assume_yes", is_flag=True, default=False, help="Skip the prompt.")
@click.pass_context
def reset(ctx: click.Context, assume_yes: bool) -> None:
    """Clear every planned amount."""

    if not assume_yes and not click.confirm(
        "Are you sure you want to clear all data and start over?"
    ):
        click.echo("No changes made.")
        return
    app = _app(ctx)
    app.plan_repo.clear()
    click.echo("Plan cleared.")


@main.command("export")
@click.argument("path", type=click.Path(dir_okay=False, path_type=Path))
@click.pass_context
def export(ctx: click.Context, path: Path) -> None:
    """Write the saved 12-month plan to a CSV file."""

    app = _app(ctx)
    session = app.open_session()
    rows = session.to_rows()
    export_plan_csv(rows=rows, output_path=path)
    click.echo(f"Export written: {path} ({len(rows)} rows)")


if __name__ == "__main__":  # pragma: no cover
    main()
