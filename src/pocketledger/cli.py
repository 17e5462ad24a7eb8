"""Command line interface for PocketLedger."""

from __future__ import annotations

import random
from datetime import date
from pathlib import Path
from typing import Optional

import click

from .config import BaseConfig
from .errors import ConstraintViolation, StorageUnavailable, ValidationError
from .logging_config import setup_logging
from .services.demo_seed import seed_demo_expenses
from .services.expense_form import ExpenseForm
from .services.export_csv import export_expenses_csv
from .services.ledger_store import LedgerStore
from .services.money import format_currency
from .services.summary import build_dashboard


def _store(ctx: click.Context) -> LedgerStore:
    return ctx.find_object(LedgerStore)


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory holding the database and logs (defaults to POCKETLEDGER_DATA_DIR).",
)
@click.option("-v", "--verbose", is_flag=True, help="Echo info logs to the console.")
@click.pass_context
def cli(ctx: click.Context, data_dir: Optional[Path], verbose: bool) -> None:
    """Track expenses and review where the money goes."""

    try:
        config = BaseConfig(data_dir)
        setup_logging(config, quiet_console=not verbose)
    except OSError as exc:
        raise click.ClickException(f"Data directory is not usable: {exc}") from exc
    store = LedgerStore(config)
    try:
        store.initialize()
    except StorageUnavailable as exc:
        raise click.ClickException(f"{exc} Check the data directory and try again.") from exc
    ctx.obj = store
    ctx.call_on_close(store.close)


@cli.command("init")
@click.pass_context
def init_command(ctx: click.Context) -> None:
    """Create the database and default categories."""

    store = _store(ctx)
    click.echo(f"Ledger ready at {store.config.DATABASE_URL}")
    click.echo(f"{len(store.list_categories())} categories available.")


@cli.command("categories")
@click.pass_context
def categories_command(ctx: click.Context) -> None:
    """List categories by name."""

    for category in _store(ctx).list_categories():
        click.echo(f"{category.id:>4}  {category.icon} {category.name}  {category.color}")


@cli.command("add-category")
@click.argument("name")
@click.option("--color", default="#ddd", show_default=True)
@click.option("--icon", default="📦", show_default=True)
@click.pass_context
def add_category_command(ctx: click.Context, name: str, color: str, icon: str) -> None:
    """Add a spending category."""

    name = name.strip()
    if not name:
        raise click.BadParameter("Category name cannot be empty.", param_hint="NAME")
    category_id = _store(ctx).add_category(name, color, icon)
    click.echo(f"Added category {category_id}: {name}")


@cli.command("add-expense")
@click.option("--amount", required=True, help="Amount spent, e.g. 12.50")
@click.option("--description", required=True)
@click.option("--category-id", required=True)
@click.option("--date", "date_", default=None, help="YYYY-MM-DD, defaults to today.")
@click.pass_context
def add_expense_command(
    ctx: click.Context, amount: str, description: str, category_id: str, date_: Optional[str]
) -> None:
    """Record an expense."""

    store = _store(ctx)
    form = ExpenseForm.from_mapping(
        {
            "amount": amount,
            "description": description,
            "category_id": category_id,
            "date": date_ or date.today().isoformat(),
        }
    )
    try:
        values = form.cleaned()
        expense_id = store.add_expense(**values)
    except ValidationError as exc:
        raise click.ClickException(str(exc)) from exc
    except (ConstraintViolation, StorageUnavailable) as exc:
        raise click.ClickException("Could not save the expense. Try again.") from exc
    click.echo(
        f"Added expense {expense_id}: {values['description']} "
        f"{format_currency(values['amount'], store.config.CURRENCY)}"
    )


@cli.command("list")
@click.option("--limit", type=click.IntRange(min=0), default=None)
@click.option("--month", "this_month", is_flag=True, help="Only this month's expenses.")
@click.option("--category-id", type=int, default=None)
@click.option("--from", "start", type=click.DateTime(formats=["%Y-%m-%d"]), default=None)
@click.option("--to", "end", type=click.DateTime(formats=["%Y-%m-%d"]), default=None)
@click.pass_context
def list_command(ctx: click.Context, limit, this_month, category_id, start, end) -> None:
    """List expenses, newest first."""

    chosen = [this_month, category_id is not None, start is not None or end is not None]
    if sum(chosen) > 1:
        raise click.UsageError("Use only one of --month, --category-id or --from/--to.")

    store = _store(ctx)
    if this_month:
        expenses = store.current_month_expenses()
    elif category_id is not None:
        expenses = store.list_expenses_by_category(category_id)
    elif start is not None or end is not None:
        expenses = store.list_expenses_by_date_range(
            start.date() if start else date.min, end.date() if end else date.max
        )
    else:
        expenses = store.list_expenses(limit=limit)
    if limit is not None:
        expenses = expenses[:limit]

    if not expenses:
        click.echo("No expenses recorded.")
        return
    names = {c.id: f"{c.icon} {c.name}" for c in store.list_categories()}
    for expense in expenses:
        click.echo(
            f"{expense.date.isoformat()}  "
            f"{format_currency(-expense.amount, store.config.CURRENCY):>14}  "
            f"{expense.description}  [{names.get(expense.category_id, expense.category_id)}]"
        )


@cli.command("summary")
@click.option("--top", type=click.IntRange(min=1), default=None, help="Categories to show.")
@click.pass_context
def summary_command(ctx: click.Context, top: Optional[int]) -> None:
    """Show totals and the spending breakdown by category."""

    store = _store(ctx)
    currency = store.config.CURRENCY
    dashboard = build_dashboard(store, top_n=top)
    click.echo(f"Total spent:  {format_currency(dashboard.total, currency)}")
    click.echo(
        f"This month:   {format_currency(dashboard.month_total, currency)} "
        f"({dashboard.month_count} expenses)"
    )
    if not dashboard.breakdown:
        click.echo("No spending by category yet.")
        return
    click.echo("By category:")
    for share in dashboard.breakdown:
        click.echo(
            f"  {share.category.icon} {share.category.name:<16} "
            f"{format_currency(share.total, currency):>14}  {share.percentage:5.1f}%"
        )


@cli.command("export")
@click.argument("output", type=click.Path(dir_okay=False, path_type=Path))
@click.pass_context
def export_command(ctx: click.Context, output: Path) -> None:
    """Write every expense to a CSV file."""

    store = _store(ctx)
    names = {c.id: c.name for c in store.list_categories() if c.id is not None}
    path = export_expenses_csv(
        expenses=store.list_expenses(), output_path=output, category_names=names
    )
    click.echo(f"Export written: {path}")


@cli.command("seed-demo")
@click.option("--months", type=click.IntRange(min=1), default=3, show_default=True)
@click.option("--per-month", type=click.IntRange(min=1), default=8, show_default=True)
@click.option("--seed", type=int, default=None, help="Random seed for repeatable data.")
@click.pass_context
def seed_demo_command(ctx: click.Context, months: int, per_month: int, seed: Optional[int]) -> None:
    """Fill the ledger with demo expenses."""

    store = _store(ctx)
    rng = random.Random(seed) if seed is not None else None
    summary = seed_demo_expenses(store, months=months, per_month=per_month, rng=rng)
    click.echo(
        f"Seeded {summary.expenses} expenses totalling "
        f"{format_currency(summary.total, store.config.CURRENCY)}"
    )


def main() -> None:
    """Console script entry point."""
    cli()


if __name__ == "__main__":
    main()
