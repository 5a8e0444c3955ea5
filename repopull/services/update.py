"""Service: bring one working copy onto its primary branch and pull it."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Sequence

from ..core.constants import GIT_DIR_NAME
from ..core.git_client import GitClient
from ..core.models import RepositoryOutcome
from ..core.types import OutcomeKind
from ..core.utils import working_directory

logger = logging.getLogger(__name__)


def resolve_branch(allow_list: Sequence[str], local_branches: Iterable[str]) -> str | None:
    """First allow-listed branch that exists locally, in allow-list order."""
    local = set(local_branches)
    for branch in allow_list:
        if branch in local:
            return branch
    return None


class UpdateEngine:
    def __init__(self, git: GitClient | None = None) -> None:
        self.git = git or GitClient()

    def process_one(self, root_directory: str, repo_name: str, branches: Sequence[str]) -> RepositoryOutcome:
        try:
            return self._process(root_directory, repo_name, branches)
        except Exception as e:
            logger.warning("[fail] %s: unexpected error: %r", repo_name, e)
            return RepositoryOutcome(str(repo_name), OutcomeKind.unexpected_error, message=repr(e))

    def _process(self, root_directory: str, repo_name: str, branches: Sequence[str]) -> RepositoryOutcome:
        repo_path = os.path.join(root_directory, repo_name)
        if not os.path.isdir(repo_path):
            logger.warning("[skip] %s: %s is not a directory", repo_name, repo_path)
            return RepositoryOutcome(repo_name, OutcomeKind.skipped_missing_directory,
                                     message=f"directory not found: {repo_path}")
        if not os.path.exists(os.path.join(repo_path, GIT_DIR_NAME)):
            logger.warning("[skip] %s: not a git working copy", repo_name)
            return RepositoryOutcome(repo_name, OutcomeKind.skipped_not_a_vcs_repo,
                                     message=f"no {GIT_DIR_NAME} in {repo_path}")

        with working_directory(repo_path):
            return self._update(repo_path, repo_name, branches)

    def _update(self, repo_path: str, repo_name: str, branches: Sequence[str]) -> RepositoryOutcome:
        current = self.git.current_branch(repo_path)
        local = self.git.list_local_branches(repo_path)
        logger.debug("%s: on %s, local branches %s", repo_name, current, sorted(local))

        branch = resolve_branch(branches, local)
        if branch is None:
            logger.warning("[fail] %s: none of %s exist locally", repo_name, list(branches))
            return RepositoryOutcome(repo_name, OutcomeKind.branch_not_found,
                                     message=f"none of {', '.join(branches) or '(no branches)'} exist locally")

        if current != branch:
            logger.info("%s: checking out %s (was %s)", repo_name, branch, current)
            ok, out = self.git.checkout(repo_path, branch)
            if not ok:
                logger.warning("[fail] %s: checkout %s failed: %s", repo_name, branch, out)
                return RepositoryOutcome(repo_name, OutcomeKind.checkout_failed, branch, out)

        logger.info("%s: pulling %s", repo_name, branch)
        ok, out = self.git.pull(repo_path, branch)
        if not ok:
            logger.warning("[fail] %s: pull %s failed: %s", repo_name, branch, out)
            return RepositoryOutcome(repo_name, OutcomeKind.pull_failed, branch, out)
        return RepositoryOutcome(repo_name, OutcomeKind.success, branch, out)
