"""Production implementation of git operations using subprocess."""

import logging
import subprocess
from pathlib import Path

from pull_draftsman.gateway.git.abc import Git
from pull_draftsman.gateway.git.types import CommitInfo, FetchFailed, FetchResult
from pull_draftsman.subprocess_utils import run_subprocess_with_context

logger = logging.getLogger(__name__)

SHORT_SHA_LENGTH = 7

# Unit separator between hash and subject in `git log` output
_LOG_FIELD_SEPARATOR = "\x1f"


class RealGit(Git):
    """Real implementation of Git operations using subprocess."""

    # ============================================================================
    # Repository Queries
    # ============================================================================

    def is_repository(self, cwd: Path) -> bool:
        """Check whether cwd is inside a git working tree."""
        try:
            result = subprocess.run(
                ["git", "rev-parse", "--is-inside-work-tree"],
                cwd=cwd,
                capture_output=True,
                text=True,
                check=False,
            )
        except FileNotFoundError:
            logger.debug("git executable not found")
            return False
        return result.returncode == 0 and result.stdout.strip() == "true"

    def get_repository_root(self, cwd: Path) -> Path | None:
        """Get the repository root directory."""
        result = subprocess.run(
            ["git", "rev-parse", "--show-toplevel"],
            cwd=cwd,
            capture_output=True,
            text=True,
            check=False,
        )
        if result.returncode != 0:
            return None
        return Path(result.stdout.strip())

    def get_current_branch(self, cwd: Path) -> str | None:
        """Get the currently checked-out branch."""
        result = subprocess.run(
            ["git", "rev-parse", "--abbrev-ref", "HEAD"],
            cwd=cwd,
            capture_output=True,
            text=True,
            check=False,
        )
        if result.returncode != 0:
            return None

        branch = result.stdout.strip()
        if branch == "HEAD":
            return None

        return branch

    def get_head_commit(self, cwd: Path) -> str | None:
        """Get the full SHA of HEAD."""
        result = subprocess.run(
            ["git", "rev-parse", "--verify", "--quiet", "HEAD"],
            cwd=cwd,
            capture_output=True,
            text=True,
            check=False,
        )
        if result.returncode != 0:
            return None
        sha = result.stdout.strip()
        return sha or None

    # ============================================================================
    # Remote Operations
    # ============================================================================

    def list_remotes(self, cwd: Path) -> list[str]:
        """List configured remote names in configuration order."""
        result = run_subprocess_with_context(
            cmd=["git", "remote"],
            operation_context="list git remotes",
            cwd=cwd,
        )
        return [line.strip() for line in result.stdout.strip().split("\n") if line.strip()]

    def list_remote_branches(self, cwd: Path) -> list[str]:
        """List remote-tracking branches as `<remote>/<branch>` names."""
        result = run_subprocess_with_context(
            cmd=["git", "branch", "-r", "--format=%(refname:short)"],
            operation_context="list remote branches",
            cwd=cwd,
        )
        return [line.strip() for line in result.stdout.strip().split("\n") if line.strip()]

    def fetch_remote(self, cwd: Path, remote: str) -> FetchResult | FetchFailed:
        """Fetch all branches from a remote."""
        try:
            run_subprocess_with_context(
                cmd=["git", "fetch", remote],
                operation_context=f"fetch remote '{remote}'",
                cwd=cwd,
            )
        except RuntimeError as e:
            return FetchFailed(message=str(e))
        return FetchResult()

    # ============================================================================
    # Ancestry Queries
    # ============================================================================

    def get_merge_base(self, cwd: Path, ref1: str, ref2: str) -> str | None:
        """Get the merge base commit SHA between two refs."""
        result = subprocess.run(
            ["git", "merge-base", ref1, ref2],
            cwd=cwd,
            capture_output=True,
            text=True,
            check=False,
        )
        if result.returncode != 0:
            return None
        return result.stdout.strip() or None

    def count_commits_between(self, cwd: Path, base: str, head: str) -> int | None:
        """Count commits reachable from head but not from base."""
        result = subprocess.run(
            ["git", "rev-list", "--count", f"{base}..{head}"],
            cwd=cwd,
            capture_output=True,
            text=True,
            check=False,
        )
        if result.returncode != 0:
            return None
        output = result.stdout.strip()
        if not output.isdigit():
            return None
        return int(output)

    def get_commits_between(self, cwd: Path, base: str, head: str) -> list[CommitInfo]:
        """List commits reachable from head but not from base, newest first."""
        result = run_subprocess_with_context(
            cmd=["git", "log", f"--format=%H{_LOG_FIELD_SEPARATOR}%s", f"{base}..{head}"],
            operation_context=f"read commits between '{base}' and '{head}'",
            cwd=cwd,
        )
        commits: list[CommitInfo] = []
        for line in result.stdout.split("\n"):
            if not line.strip():
                continue
            sha, _, subject = line.partition(_LOG_FIELD_SEPARATOR)
            commits.append(CommitInfo(hash=sha[:SHORT_SHA_LENGTH], message=subject))
        return commits
