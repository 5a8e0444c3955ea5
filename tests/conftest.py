"""Pytest configuration and fixtures."""

import json
import logging
import os
import shutil
import subprocess
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from repopull.core.git_client import GitResult
from repopull.services.update import UpdateEngine


@dataclass
class FakeRepo:
    current: str | None = None
    branches: set[str] = field(default_factory=set)
    checkout_ok: bool = True
    pull_ok: bool = True
    pull_output: str = "Already up to date."
    error: Exception | None = None


class FakeGitClient:
    """In-memory stand-in for GitClient keyed by working-copy folder name."""

    def __init__(self) -> None:
        self.repos: dict[str, FakeRepo] = {}
        # (operation, repo name, branch or None, cwd at call time)
        self.calls: list[tuple[str, str, str | None, str]] = []

    def add(self, name: str, **kwargs) -> FakeRepo:
        repo = FakeRepo(**kwargs)
        self.repos[name] = repo
        return repo

    def _repo(self, op: str, repo_dir: str, branch: str | None = None) -> FakeRepo:
        name = os.path.basename(repo_dir)
        self.calls.append((op, name, branch, os.getcwd()))
        repo = self.repos[name]
        if repo.error is not None:
            raise repo.error
        return repo

    def ops(self, name: str) -> list[str]:
        return [op for op, repo, _branch, _cwd in self.calls if repo == name]

    def current_branch(self, repo_dir: str) -> str | None:
        return self._repo("current_branch", repo_dir).current

    def list_local_branches(self, repo_dir: str) -> set[str]:
        return set(self._repo("list_local_branches", repo_dir).branches)

    def checkout(self, repo_dir: str, branch: str) -> GitResult:
        repo = self._repo("checkout", repo_dir, branch)
        if not repo.checkout_ok:
            return GitResult(False, f"error: pathspec '{branch}' did not match")
        repo.current = branch
        return GitResult(True, f"Switched to branch '{branch}'")

    def pull(self, repo_dir: str, branch: str) -> GitResult:
        repo = self._repo("pull", repo_dir, branch)
        if not repo.pull_ok:
            return GitResult(False, "fatal: Not possible to fast-forward, aborting.")
        return GitResult(True, repo.pull_output)


@pytest.fixture
def fake_git() -> FakeGitClient:
    return FakeGitClient()


@pytest.fixture
def engine(fake_git: FakeGitClient) -> UpdateEngine:
    return UpdateEngine(fake_git)


@pytest.fixture
def root_dir(tmp_path: Path) -> Path:
    root = tmp_path / "root"
    root.mkdir()
    return root


@pytest.fixture
def make_repo(root_dir: Path):
    """Create ``root/<name>``; with a ``.git`` folder unless ``vcs`` is False."""

    def _make(name: str, vcs: bool = True) -> Path:
        path = root_dir / name
        path.mkdir()
        if vcs:
            (path / ".git").mkdir()
        return path

    return _make


@pytest.fixture
def write_config(tmp_path: Path):
    def _write(data) -> Path:
        path = tmp_path / "config.json"
        path.write_text(json.dumps(data) if not isinstance(data, str) else data, encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def _drop_cli_log_handlers():
    """The CLI callback installs a stderr handler on the root logger; remove it after each test."""
    root = logging.getLogger()
    before = set(root.handlers)
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in before and type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    root.setLevel(level)


def _git(*args: str, cwd: Path) -> str:
    proc = subprocess.run(
        ["git", "-c", "user.name=Test", "-c", "user.email=test@example.com", *args],
        cwd=cwd,
        check=True,
        capture_output=True,
        text=True,
    )
    return proc.stdout.strip()


@pytest.fixture
def seed_repo(tmp_path: Path, run_git) -> Path:
    """A local repository on ``main`` with one commit, usable as an upstream."""
    seed = tmp_path / "seed"
    seed.mkdir()
    _git("init", "-q", cwd=seed)
    _git("symbolic-ref", "HEAD", "refs/heads/main", cwd=seed)
    (seed / "README.md").write_text("seed\n", encoding="utf-8")
    _git("add", "README.md", cwd=seed)
    _git("commit", "-q", "-m", "initial", cwd=seed)
    return seed


@pytest.fixture
def run_git():
    if shutil.which("git") is None:
        pytest.skip("git is not installed")
    return _git
