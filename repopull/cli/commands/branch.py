"""CLI: maintain the branch allow-list."""

import typer

from ...core.errors import InvalidEntryError
from ..context import CliState

app = typer.Typer(add_completion=False, help="Manage the branch allow-list")


@app.command("list")
def list_branches(ctx: typer.Context):
    """Show allowed branches, highest priority first."""
    state: CliState = ctx.obj
    branches = state.store.config.branches
    if not branches:
        typer.echo("No branches configured.")
    for i, name in enumerate(branches, start=1):
        typer.echo(f"  {i}. {name}")


@app.command("add")
def add(ctx: typer.Context, name: str = typer.Argument(..., help="Branch name (lowest priority)")):
    state: CliState = ctx.obj
    try:
        saved = state.store.add_branch(name)
    except InvalidEntryError as e:
        typer.secho(f"Not added: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    if not saved:
        typer.secho("Warning: could not save the configuration.", fg=typer.colors.YELLOW, err=True)
        raise typer.Exit(code=1)
    typer.echo(f"Added branch {name.strip()}")


@app.command("remove")
def remove(ctx: typer.Context, name: str = typer.Argument(...)):
    state: CliState = ctx.obj
    try:
        saved = state.store.remove_branch(name)
    except InvalidEntryError as e:
        typer.secho(f"Not removed: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    if not saved:
        typer.secho("Warning: could not save the configuration.", fg=typer.colors.YELLOW, err=True)
        raise typer.Exit(code=1)
    typer.echo(f"Removed branch {name}")
