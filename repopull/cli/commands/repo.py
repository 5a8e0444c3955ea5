"""CLI: maintain the ordered repository list."""

from __future__ import annotations

import typer

from ...core.errors import InvalidEntryError
from ..context import CliState
from ..rendering import render_repositories

app = typer.Typer(add_completion=False, help="Manage the repository list")


def _report(saved: bool, message: str) -> None:
    if not saved:
        typer.secho("Warning: could not save the configuration.", fg=typer.colors.YELLOW, err=True)
        raise typer.Exit(code=1)
    typer.echo(message)


@app.command("list")
def list_repos(ctx: typer.Context):
    state: CliState = ctx.obj
    render_repositories(state.store.config.repositories)


@app.command("add")
def add(ctx: typer.Context, name: str = typer.Argument(..., help="Folder name under the root directory")):
    state: CliState = ctx.obj
    try:
        saved = state.store.add_repository(name)
    except InvalidEntryError as e:
        typer.secho(f"Not added: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    _report(saved, f"Added {name.strip()}")


@app.command("remove")
def remove(ctx: typer.Context, position: int = typer.Argument(..., help="Position shown by 'repo list'")):
    state: CliState = ctx.obj
    before = list(state.store.config.repositories)
    try:
        saved = state.store.remove_repository(position - 1)
    except InvalidEntryError as e:
        typer.secho(f"Not removed: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    _report(saved, f"Removed {before[position - 1]}")
