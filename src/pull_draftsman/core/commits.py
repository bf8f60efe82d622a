"""Collect the commits a pull request would introduce."""

from pathlib import Path

from pull_draftsman.gateway.git.abc import Git
from pull_draftsman.gateway.git.types import CommitInfo


def list_new_commits(
    git: Git, cwd: Path, *, remote_name: str, base_branch: str
) -> list[CommitInfo]:
    """List commits reachable from HEAD but not from `<remote>/<base>`, newest first.

    Returns an empty list when HEAD is the base or an ancestor of it.
    """
    return git.get_commits_between(cwd, f"{remote_name}/{base_branch}", "HEAD")
