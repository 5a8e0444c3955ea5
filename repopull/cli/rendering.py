"""Turn outcomes and summaries into terminal lines."""

from __future__ import annotations

import typer

from ..core.models import Configuration, RepositoryOutcome, RunSummary
from ..core.types import OutcomeKind

_TAGS = {
    OutcomeKind.success: ("ok", typer.colors.GREEN),
    OutcomeKind.skipped_missing_directory: ("skip", typer.colors.YELLOW),
    OutcomeKind.skipped_not_a_vcs_repo: ("skip", typer.colors.YELLOW),
    OutcomeKind.branch_not_found: ("fail", typer.colors.RED),
    OutcomeKind.checkout_failed: ("fail", typer.colors.RED),
    OutcomeKind.pull_failed: ("fail", typer.colors.RED),
    OutcomeKind.unexpected_error: ("fail", typer.colors.RED),
}


def outcome_line(position: int, total: int, outcome: RepositoryOutcome) -> str:
    tag, _ = _TAGS[outcome.kind]
    line = f"({position}/{total}) [{tag}] {outcome.name}"
    if outcome.branch:
        line += f" @ {outcome.branch}"
    if not outcome.ok:
        line += f": {outcome.kind.value}"
        if outcome.message:
            line += f" - {outcome.message.splitlines()[-1]}"
    return line


def render_outcome(position: int, total: int, outcome: RepositoryOutcome) -> None:
    _, color = _TAGS[outcome.kind]
    typer.secho(outcome_line(position, total, outcome), fg=color, err=not outcome.ok)


def render_summary(summary: RunSummary) -> None:
    for note in summary.notes:
        typer.secho(note, fg=typer.colors.YELLOW)
    if summary.failures:
        typer.echo("Failed repositories:")
        for outcome in summary.failures:
            typer.echo(f"  - {outcome.name}: {outcome.kind.value}")
    typer.echo(
        f"Done. {summary.succeeded}/{summary.total} succeeded, "
        f"{summary.failed} failed in {summary.elapsed_seconds:.1f}s."
    )


def render_config(config: Configuration) -> None:
    typer.echo(f"Root directory: {config.root_directory or '(not set)'}")
    typer.echo("Branches (priority order): " + (", ".join(config.branches) or "(none)"))
    render_repositories(config.repositories)


def render_repositories(repositories: list[str]) -> None:
    if not repositories:
        typer.echo("No repositories configured.")
        return
    typer.echo(f"Repositories ({len(repositories)}):")
    for i, name in enumerate(repositories, start=1):
        typer.echo(f"  {i}. {name}")
