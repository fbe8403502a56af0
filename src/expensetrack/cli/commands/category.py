"""Category management commands."""

import click

from expensetrack.cli.error_handling import handle_domain_error
from expensetrack.cli.resolution import resolve_category_or_exit, resolve_user_or_exit
from expensetrack.domain.category import CategoryService
from expensetrack.domain.errors import DomainError

user_option = click.option("--user", "user", required=True, help="Email or username")


@click.group()
def category_group():
    """Manage categories."""
    pass


@category_group.command("list")
@user_option
@click.pass_context
def list_categories(ctx, user: str):
    """List a user's categories."""
    db = ctx.obj["db"]
    owner = resolve_user_or_exit(ctx, db, user)

    categories = CategoryService(db).list_categories(owner.id)
    if not categories:
        click.echo("No categories found.")
        return

    click.echo("\nCategories:")
    click.echo("-" * 40)
    for cat in categories:
        click.echo(f"ID: {cat.id:3d} | {cat.name:20s} | {cat.color}")


@category_group.command("create")
@click.argument("name")
@click.option("--color", default="", help="Display color (e.g., '#FF5733')")
@user_option
@click.pass_context
def create_category(ctx, name: str, color: str, user: str):
    """Create a new category."""
    db = ctx.obj["db"]
    owner = resolve_user_or_exit(ctx, db, user)

    try:
        category = CategoryService(db).create_category(owner.id, name=name, color=color)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Created category '{category.name}' (ID: {category.id})")


@category_group.command("update")
@click.argument("category")
@click.option("--name", help="New name")
@click.option("--color", help="New color")
@user_option
@click.pass_context
def update_category(ctx, category: str, name: str | None, color: str | None, user: str):
    """Rename or recolor a category.

    CATEGORY can be a category name or ID.
    """
    db = ctx.obj["db"]
    owner = resolve_user_or_exit(ctx, db, user)
    target = resolve_category_or_exit(ctx, db, owner.id, category)

    if name is None and color is None:
        click.echo("Error: Nothing to update. Use --name and/or --color.", err=True)
        ctx.exit(1)

    try:
        updated = CategoryService(db).update_category(owner.id, target.id, name=name, color=color)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Updated category {updated.id}: '{updated.name}' {updated.color}")


@category_group.command("delete")
@click.argument("category")
@user_option
@click.pass_context
def delete_category(ctx, category: str, user: str):
    """Delete a category that no expense uses.

    CATEGORY can be a category name or ID.
    """
    db = ctx.obj["db"]
    owner = resolve_user_or_exit(ctx, db, user)
    target = resolve_category_or_exit(ctx, db, owner.id, category)

    try:
        CategoryService(db).delete_category(owner.id, target.id)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Deleted category '{target.name}'")


def register_commands(cli):
    """Register category commands with main CLI."""
    cli.add_command(category_group, name="category")
