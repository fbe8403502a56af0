"""User management commands."""

import click

from expensetrack.cli.error_handling import handle_domain_error
from expensetrack.config import Config
from expensetrack.domain.auth import AuthService
from expensetrack.domain.errors import DomainError


@click.group()
def user_group():
    """Manage users."""
    pass


@user_group.command("register")
@click.argument("username")
@click.argument("email")
@click.password_option(help="Password for the new user")
@click.pass_context
def register_user(ctx, username: str, email: str, password: str):
    """Register a user and create their default categories.

    Examples:
        expensetrack user register alice alice@example.com
    """
    db = ctx.obj["db"]
    service = AuthService(db, secret_key=Config.SECRET_KEY, token_max_age=Config.TOKEN_MAX_AGE)

    try:
        _, user = service.register(username=username, email=email, password=password)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Registered user '{user.username}' (ID: {user.id})")


def register_commands(cli):
    """Register user commands with main CLI."""
    cli.add_command(user_group, name="user")
