"""CLI: interactive menu."""

import typer

from ..context import CliState
from ..menu import Menu


def menu(ctx: typer.Context):
    """Browse and edit the configuration, and run updates, from a numbered menu."""
    state: CliState = ctx.obj
    Menu(state).run()
