"""Small helpers for running the four git queries/commands an update needs."""

from __future__ import annotations

import subprocess
from typing import NamedTuple


class GitResult(NamedTuple):
    ok: bool
    output: str


class GitClient:
    """Runs git in a working copy. Only exit status zero/nonzero is interpreted."""

    def __init__(self, executable: str = "git", ff_only: bool = True) -> None:
        self.executable = executable
        self.ff_only = ff_only

    # ---------- process helpers ----------
    def _run_out(self, args: list[str], cwd: str) -> GitResult:
        try:
            out = subprocess.check_output([self.executable, *args], cwd=cwd, stderr=subprocess.STDOUT)
            return GitResult(True, out.decode("utf-8", "replace").strip())
        except subprocess.CalledProcessError as e:
            return GitResult(False, (e.output or b"").decode("utf-8", "replace").strip())

    # ---------- queries ----------
    def current_branch(self, repo_dir: str) -> str | None:
        """Checked-out branch name, or None when detached or unknown."""
        ok, out = self._run_out(["rev-parse", "--abbrev-ref", "HEAD"], cwd=repo_dir)
        if not ok or not out or out == "HEAD":
            return None
        return out

    def list_local_branches(self, repo_dir: str) -> set[str]:
        ok, out = self._run_out(["for-each-ref", "--format=%(refname:short)", "refs/heads/"], cwd=repo_dir)
        if not ok:
            return set()
        return {line.strip() for line in out.splitlines() if line.strip()}

    # ---------- commands ----------
    def checkout(self, repo_dir: str, branch: str) -> GitResult:
        return self._run_out(["checkout", branch], cwd=repo_dir)

    def pull(self, repo_dir: str, branch: str) -> GitResult:
        """Fast-forward the checked-out ``branch`` from its upstream."""
        cmd = ["pull"]
        if self.ff_only:
            cmd.append("--ff-only")
        return self._run_out(cmd, cwd=repo_dir)
