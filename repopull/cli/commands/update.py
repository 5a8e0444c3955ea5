"""CLI: update every configured repository (non-interactive)."""

from __future__ import annotations

import logging
from typing import List

import typer

from ...core.constants import EXIT_NO_ROOT, EXIT_UNEXPECTED
from ...core.errors import RootDirectoryError
from ..context import CliState
from ..rendering import render_outcome, render_summary

logger = logging.getLogger(__name__)


def update(
    ctx: typer.Context,
    root: str | None = typer.Option(None, "--root", help="Root folder for this run (default: configured root)"),
    branch: List[str] = typer.Option(None, "--branch", "-b", help="Allowed branch for this run (repeatable, in priority order)"),
):
    """Check out the primary branch of each configured repository and pull it.

    Exits non-zero only when there is no usable root directory or something
    outside the per-repository handling breaks; failed repositories are
    reported but do not change the exit status.
    """
    state: CliState = ctx.obj
    config = state.store.config
    root_dir = root or config.root_directory
    if not root_dir:
        typer.secho("No root directory given (--root) or configured (repopull root set).", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=EXIT_NO_ROOT)

    branches = branch or config.branches
    try:
        summary = state.runner(on_outcome=render_outcome).run(root_dir, config.repositories, branches)
    except RootDirectoryError as e:
        typer.secho(f"Cannot update: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=EXIT_NO_ROOT)
    except Exception as e:
        logger.exception("Update aborted")
        typer.secho(f"Update aborted by an unexpected error: {e!r}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=EXIT_UNEXPECTED)
    render_summary(summary)
