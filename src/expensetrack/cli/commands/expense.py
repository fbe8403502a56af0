"""Expense commands."""

import click

from expensetrack.cli.error_handling import handle_domain_error
from expensetrack.cli.resolution import resolve_category_or_exit, resolve_user_or_exit
from expensetrack.domain.category import CategoryService
from expensetrack.domain.entities import Expense
from expensetrack.domain.errors import DomainError
from expensetrack.domain.expense import ExpenseService
from expensetrack.utils.amount_parser import parse_amount
from expensetrack.utils.date_parser import parse_date

user_option = click.option("--user", "user", required=True, help="Email or username")


def print_expenses(expenses: list[Expense], category_names: dict[int, str]) -> None:
    """Print expenses as a table."""
    click.echo(f"{'ID':>4}  {'Date':10}  {'Amount':>10}  {'Category':15}  Description")
    click.echo("-" * 70)
    for exp in expenses:
        click.echo(
            f"{exp.id:>4}  {exp.date.isoformat():10}  {exp.amount:>10,.2f}  "
            f"{category_names.get(exp.category_id, '?'):15}  {exp.description}"
        )


def _category_names(db, owner_id: int) -> dict[int, str]:
    return {cat.id: cat.name for cat in CategoryService(db).list_categories(owner_id)}


@click.group()
def expense_group():
    """Manage expenses."""
    pass


@expense_group.command("add")
@click.option("--amount", required=True, help="Amount (e.g., 12.50)")
@click.option("--category", required=True, help="Category name or ID")
@click.option(
    "--date",
    "date_str",
    default="today",
    show_default=True,
    help="Expense date (YYYY-MM-DD or 'today', 'yesterday')",
)
@click.option("--description", default="", help="Description")
@user_option
@click.pass_context
def add_expense(ctx, amount: str, category: str, date_str: str, description: str, user: str):
    """Add an expense.

    Examples:
        expensetrack expense add --user alice --amount 25.50 --category Food --description Groceries
        expensetrack expense add --user alice --amount 40 --category Transportation --date 2023-11-10
    """
    db = ctx.obj["db"]
    owner = resolve_user_or_exit(ctx, db, user)
    target = resolve_category_or_exit(ctx, db, owner.id, category)

    try:
        expense_date = parse_date(date_str)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)

    try:
        expense_amount = parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    try:
        expense = ExpenseService(db).create_expense(
            owner.id,
            amount=expense_amount,
            date=expense_date,
            category_id=target.id,
            description=description,
        )
        click.echo(f"Created expense {expense.id}")
        click.echo(f"  Date: {expense.date}")
        click.echo(f"  Amount: {expense.amount:,.2f}")
        click.echo(f"  Category: {target.name}")
        if description:
            click.echo(f"  Description: {description}")
    except DomainError as e:
        handle_domain_error(ctx, e)


@expense_group.command("list")
@click.option("--category", help="Only show expenses in this category (name or ID)")
@user_option
@click.pass_context
def list_expenses(ctx, category: str | None, user: str):
    """List expenses, newest first."""
    db = ctx.obj["db"]
    owner = resolve_user_or_exit(ctx, db, user)

    category_id = None
    if category:
        category_id = resolve_category_or_exit(ctx, db, owner.id, category).id

    expenses = ExpenseService(db).list_expenses(owner.id, category_id=category_id)
    if not expenses:
        click.echo("No expenses found.")
        return

    print_expenses(expenses, _category_names(db, owner.id))


@expense_group.command("search")
@click.argument("query")
@user_option
@click.pass_context
def search_expenses(ctx, query: str, user: str):
    """Search expenses by description, category, amount or date."""
    db = ctx.obj["db"]
    owner = resolve_user_or_exit(ctx, db, user)

    expenses = ExpenseService(db).search_expenses(owner.id, query)
    if not expenses:
        click.echo(f"No expenses match '{query}'.")
        return

    print_expenses(expenses, _category_names(db, owner.id))


@expense_group.command("edit")
@click.argument("expense_id", type=int)
@click.option("--amount", help="New amount")
@click.option("--category", help="New category name or ID")
@click.option("--date", "date_str", help="New date")
@click.option("--description", help="New description")
@user_option
@click.pass_context
def edit_expense(
    ctx,
    expense_id: int,
    amount: str | None,
    category: str | None,
    date_str: str | None,
    description: str | None,
    user: str,
):
    """Change fields of an expense; fields not given keep their value."""
    db = ctx.obj["db"]
    owner = resolve_user_or_exit(ctx, db, user)

    fields = {}
    try:
        if amount is not None:
            fields["amount"] = parse_amount(amount)
        if date_str is not None:
            fields["date"] = parse_date(date_str)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)
    if category is not None:
        fields["category_id"] = resolve_category_or_exit(ctx, db, owner.id, category).id
    if description is not None:
        fields["description"] = description

    if not fields:
        click.echo("Error: Nothing to update.", err=True)
        ctx.exit(1)

    try:
        expense = ExpenseService(db).update_expense(owner.id, expense_id, **fields)
        click.echo(f"Updated expense {expense.id}")
    except DomainError as e:
        handle_domain_error(ctx, e)


@expense_group.command("delete")
@click.argument("expense_id", type=int)
@user_option
@click.pass_context
def delete_expense(ctx, expense_id: int, user: str):
    """Delete an expense."""
    db = ctx.obj["db"]
    owner = resolve_user_or_exit(ctx, db, user)

    try:
        ExpenseService(db).delete_expense(owner.id, expense_id)
        click.echo(f"Deleted expense {expense_id}")
    except DomainError as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register expense commands with main CLI."""
    cli.add_command(expense_group, name="expense")
