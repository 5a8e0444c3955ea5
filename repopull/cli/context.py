"""Objects shared by every command through the Typer context."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ..config.settings import Settings
from ..core.config_store import ConfigStore
from ..core.git_client import GitClient
from ..core.models import RepositoryOutcome
from ..services.batch import BatchRunner
from ..services.update import UpdateEngine


@dataclass
class CliState:
    settings: Settings
    store: ConfigStore

    def runner(self, on_outcome: Callable[[int, int, RepositoryOutcome], None] | None = None) -> BatchRunner:
        git = GitClient(self.settings.git_executable, ff_only=self.settings.ff_only)
        return BatchRunner(UpdateEngine(git), on_outcome=on_outcome)
