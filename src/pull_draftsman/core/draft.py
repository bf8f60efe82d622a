"""Markdown rendering and file naming for pull request drafts."""

import re
from collections.abc import Sequence

from pull_draftsman.gateway.git.types import CommitInfo

NO_COMMITS_LINE = "- (no new commits between base and current branch)"

_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


def render_pr_draft(
    branch_name: str,
    base_branch_name: str,
    commits: Sequence[CommitInfo],
    *,
    remote_name: str,
) -> str:
    """Render the pull request draft markdown.

    Commit messages and branch names are inserted verbatim, without escaping.
    """
    if commits:
        commit_lines = "\n".join(f"- {commit.hash} {commit.message}" for commit in commits)
    else:
        commit_lines = NO_COMMITS_LINE

    return "\n".join(
        [
            f"Branch: {branch_name}",
            "",
            f"Base: {remote_name}/{base_branch_name}",
            "",
            "New commits:",
            "",
            commit_lines,
            "",
            "Assignees:",
            "",
            "- Placeholder for assignees (not dynamic)",
            "",
            "Reviewers:",
            "",
            "- Placeholder for reviewers (not dynamic)",
            "",
        ]
    )


def sanitize_branch_name(branch_name: str) -> str:
    """Collapse each run of characters outside [A-Za-z0-9._-] into a single hyphen."""
    return _UNSAFE_FILENAME_CHARS.sub("-", branch_name)


def build_draft_filename(token: int, branch_name: str) -> str:
    """Build `<token>-pr-draft-<sanitized branch>.md`."""
    return f"{token}-pr-draft-{sanitize_branch_name(branch_name)}.md"
