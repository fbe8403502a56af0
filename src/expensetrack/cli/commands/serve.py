"""Run the REST API."""

import click

from expensetrack.api import create_app


@click.command("serve")
@click.option("--host", default="127.0.0.1", show_default=True, help="Interface to bind")
@click.option("--port", default=3001, show_default=True, type=int, help="Port to listen on")
@click.option("--debug", is_flag=True, help="Enable the Flask debugger and reloader")
@click.pass_context
def serve(ctx, host: str, port: int, debug: bool):
    """Serve the REST API with the Flask development server."""
    app = create_app(db=ctx.obj["db"])
    click.echo(f"Server running on http://{host}:{port}")
    app.run(host=host, port=port, debug=debug)


def register_commands(cli):
    """Register serve command with main CLI."""
    cli.add_command(serve)
