"""Summary commands."""

from datetime import date

import click

from expensetrack.cli.resolution import resolve_category_or_exit, resolve_user_or_exit
from expensetrack.client.cache import ExpenseCache, LocalSource
from expensetrack.domain import aggregation
from expensetrack.domain.entities import MonthlyTotal
from expensetrack.utils.date_parser import parse_month

user_option = click.option("--user", "user", required=True, help="Email or username")


def print_monthly_totals(totals: list[MonthlyTotal]) -> None:
    if not totals:
        click.echo("No expenses found.")
        return
    for total in totals:
        click.echo(f"{total.month}  {total.amount:>12,.2f}")


@click.group()
def summary_group():
    """Show spending summaries."""
    pass


@summary_group.command("monthly")
@click.option("--category", help="Restrict to one category (name or ID)")
@user_option
@click.pass_context
def monthly(ctx, category: str | None, user: str):
    """Show totals per month, oldest first."""
    db = ctx.obj["db"]
    owner = resolve_user_or_exit(ctx, db, user)
    cache = ExpenseCache(LocalSource(db, owner.id))

    if category:
        target = resolve_category_or_exit(ctx, db, owner.id, category)
        click.echo(f"\nMonthly totals for {target.name}:")
        print_monthly_totals(cache.monthly_totals_by_category(target.id))
    else:
        click.echo("\nMonthly totals:")
        print_monthly_totals(cache.monthly_totals())


@summary_group.command("categories")
@user_option
@click.pass_context
def categories(ctx, user: str):
    """Show totals per category."""
    db = ctx.obj["db"]
    owner = resolve_user_or_exit(ctx, db, user)
    cache = ExpenseCache(LocalSource(db, owner.id))

    totals = aggregation.category_totals(cache.expenses())
    if not totals:
        click.echo("No expenses found.")
        return

    click.echo("\nCategory totals:")
    for total in sorted(totals, key=lambda t: t.amount, reverse=True):
        category = cache.get_category(total.category_id)
        name = category.name if category else "Unknown"
        click.echo(f"{name:20s}  {total.amount:>12,.2f}")


@summary_group.command("dashboard")
@click.option("--month", help="Month to report on (YYYY-MM, 'this month', 'last month')")
@user_option
@click.pass_context
def dashboard(ctx, month: str | None, user: str):
    """Show total, this month vs last month, and the largest category."""
    db = ctx.obj["db"]
    owner = resolve_user_or_exit(ctx, db, user)
    cache = ExpenseCache(LocalSource(db, owner.id))

    try:
        current = parse_month(month) if month else date.today().strftime("%Y-%m")
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)
    previous = aggregation.previous_month(current)

    expenses = cache.expenses()
    current_total = cache.total_by_month(current)
    previous_total = cache.total_by_month(previous)
    change = aggregation.month_over_month_change(current_total, previous_total)
    largest = cache.largest_category()

    click.echo(f"Total expenses:  {aggregation.total_all(expenses):,.2f}")
    click.echo(f"{current}:         {current_total:,.2f}")
    click.echo(f"{previous}:         {previous_total:,.2f}")
    click.echo(f"Change:          {change:+.1f}%")
    if largest is None:
        click.echo("Largest category: none")
    else:
        category = cache.get_category(largest.category_id)
        name = category.name if category else "Unknown"
        click.echo(f"Largest category: {name} ({largest.amount:,.2f})")


def register_commands(cli):
    """Register summary commands with main CLI."""
    cli.add_command(summary_group, name="summary")
