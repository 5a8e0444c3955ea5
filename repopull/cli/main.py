"""CLI entrypoint that wires subcommands into a Typer app."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from pydantic import ValidationError

from ..config.settings import get_settings
from ..core.config_store import ConfigStore
from ..core.constants import EXIT_BAD_SETTINGS
from .commands.branch import app as branch_app
from .commands.config import app as config_app
from .commands.menu import menu
from .commands.repo import app as repo_app
from .commands.root import app as root_app
from .commands.update import update
from .context import CliState

app = typer.Typer(add_completion=False, help="Switch each configured repository to its primary branch and pull it.")


@app.callback()
def main(
    ctx: typer.Context,
    config: Path | None = typer.Option(None, "--config", help="Configuration file (default: ~/.repopull/config.json)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log progress"),
    debug: bool = typer.Option(False, "--debug", help="Log every git step"),
):
    try:
        s = get_settings()
    except ValidationError as e:
        problems = "; ".join(f"{'.'.join(map(str, err['loc']))}: {err['msg']}" for err in e.errors())
        typer.secho(f"Invalid REPOPULL_* setting: {problems}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=EXIT_BAD_SETTINGS)
    level = logging.DEBUG if debug else logging.INFO if verbose else s.log_level
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s", force=True)

    store = ConfigStore(config or s.config_path)
    store.load()
    ctx.obj = CliState(settings=s, store=store)


app.command("update")(update)
app.command("menu")(menu)
app.add_typer(config_app, name="config")
app.add_typer(root_app, name="root")
app.add_typer(repo_app, name="repo")
app.add_typer(branch_app, name="branch")
