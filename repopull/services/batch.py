"""Service: update every configured repository under the root, one at a time."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Sequence
from datetime import datetime, timezone

from ..core.errors import RootDirectoryError
from ..core.models import RepositoryOutcome, RunSummary
from .update import UpdateEngine

logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now(timezone.utc)


class BatchRunner:
    def __init__(
        self,
        engine: UpdateEngine | None = None,
        on_outcome: Callable[[int, int, RepositoryOutcome], None] | None = None,
    ) -> None:
        self.engine = engine or UpdateEngine()
        # called as (position, total, outcome) after each repository
        self.on_outcome = on_outcome

    def run(self, root_directory: str, repositories: Sequence[str], branches: Sequence[str]) -> RunSummary:
        """Process ``repositories`` in order; raise RootDirectoryError before starting if the root is unusable."""
        if not root_directory:
            raise RootDirectoryError("no root directory configured")
        if not os.path.isdir(root_directory):
            raise RootDirectoryError(f"root directory not found: {root_directory}")

        started = _now()
        summary = RunSummary(root_directory=root_directory, started_at=started, finished_at=started)
        if not repositories:
            logger.warning("No repositories configured; nothing to update")
            summary.notes.append("No repositories configured.")
            summary.finished_at = _now()
            return summary

        total = len(repositories)
        logger.info("Updating %d repositories under %s (branches: %s)", total, root_directory, ", ".join(branches))
        for position, name in enumerate(repositories, start=1):
            outcome = self.engine.process_one(root_directory, name, branches)
            summary.total += 1
            if outcome.ok:
                summary.succeeded += 1
            else:
                summary.failures.append(outcome)
            if self.on_outcome is not None:
                self.on_outcome(position, total, outcome)

        summary.finished_at = _now()
        logger.info("Done. ok=%d, failed=%d of %d", summary.succeeded, summary.failed, summary.total)
        return summary
