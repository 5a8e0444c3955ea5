"""CLI: set the folder that holds the working copies."""

from __future__ import annotations

from pathlib import Path

import typer

from ...core.errors import RootDirectoryError
from ..context import CliState

app = typer.Typer(add_completion=False, help="Manage the root directory")


@app.command("show")
def show(ctx: typer.Context):
    state: CliState = ctx.obj
    typer.echo(state.store.config.root_directory or "(not set)")


@app.command("set")
def set_root(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="Folder containing the repositories"),
    create: bool = typer.Option(False, "--create", help="Create the folder without asking if it is missing"),
):
    """Store PATH as the root directory."""
    state: CliState = ctx.obj
    target = Path(path).expanduser()
    if not target.exists() and not create:
        create = typer.confirm(f"{target} does not exist. Create it?", default=False)
    try:
        saved = state.store.set_root_directory(path, create=create)
    except RootDirectoryError as e:
        typer.secho(f"Root directory not changed: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    if not saved:
        typer.secho("Warning: could not save the configuration.", fg=typer.colors.YELLOW, err=True)
        raise typer.Exit(code=1)
    typer.echo(f"Root directory set to {state.store.config.root_directory}")
