"""CLI: inspect the stored configuration."""

import typer

from ..context import CliState
from ..rendering import render_config

app = typer.Typer(add_completion=False, help="Show the stored configuration")


@app.command("show")
def show(ctx: typer.Context):
    """Print root directory, branch allow-list and repositories."""
    state: CliState = ctx.obj
    render_config(state.store.config)


@app.command("path")
def path(ctx: typer.Context):
    """Print where the configuration file lives."""
    state: CliState = ctx.obj
    typer.echo(str(state.store.path))
