"""Create a pull request draft for the current branch.

This module provides execute_create_draft which orchestrates the full workflow:

1. Check whether the GitHub CLI is available (advisory only)
2. Verify the repository and pick the remote
3. Fetch the remote and resolve the base branch
4. Collect the new commits, render the draft and write it to disk

Each step depends on the previous one; any failure raises a PullDraftsmanError
and nothing is written.
"""

import logging
from collections.abc import Generator, Sequence
from dataclasses import dataclass
from pathlib import Path

from pull_draftsman.core.base_branch import resolve_base_branch
from pull_draftsman.core.commits import list_new_commits
from pull_draftsman.core.config import DraftsmanConfig, load_config
from pull_draftsman.core.context import DraftsmanContext
from pull_draftsman.core.draft import build_draft_filename, render_pr_draft
from pull_draftsman.core.errors import (
    DetachedHeadError,
    FetchError,
    NoRemoteError,
    RepositoryNotFoundError,
    ResolutionError,
    WriteError,
)
from pull_draftsman.core.events import CompletionEvent, ProgressEvent
from pull_draftsman.core.github_cli import check_github_cli
from pull_draftsman.gateway.git.types import FetchFailed

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DraftResult:
    """Success result of draft creation."""

    path: Path
    branch_name: str
    base_branch_name: str
    remote_name: str
    commit_count: int
    github_cli_installed: bool


def select_remote(remotes: Sequence[str], *, preferred: str) -> str:
    """Pick the preferred remote if configured, else the first one.

    Raises:
        NoRemoteError: If no remotes are configured
    """
    if not remotes:
        raise NoRemoteError(
            f'No git remotes configured. Add a remote (for example "{preferred}") and try again.'
        )
    if preferred in remotes:
        return preferred
    return remotes[0]


def execute_create_draft(
    ctx: DraftsmanContext,
    *,
    explicit_base: str | None,
    output_dir: Path | None,
    config: DraftsmanConfig | None = None,
) -> Generator[ProgressEvent | CompletionEvent[DraftResult]]:
    """Execute the draft creation workflow.

    Args:
        ctx: Dependency context
        explicit_base: Base branch requested by the user; skips inference
        output_dir: Target directory, relative paths resolved against ctx.cwd.
            None uses the configured directory, then ctx.cwd.
        config: Configuration to use; None loads it from the repository root

    Yields:
        ProgressEvent for status updates
        CompletionEvent with DraftResult on success

    Raises:
        PullDraftsmanError: Subclass describing the failing step
    """
    git = ctx.git

    yield ProgressEvent("Checking GitHub CLI (gh)...")
    gh_check = check_github_cli(ctx.github_cli)
    if gh_check.passed:
        yield ProgressEvent(gh_check.message, style="success")
    else:
        yield ProgressEvent(gh_check.message, style="warning")
        if gh_check.details is not None:
            yield ProgressEvent(gh_check.details, style="warning")

    yield ProgressEvent("Checking git repository...")
    repo_root = git.get_repository_root(ctx.cwd) if git.is_repository(ctx.cwd) else None
    if repo_root is None:
        raise RepositoryNotFoundError(
            "Current directory is not a git repository. "
            "Run pull-draftsman from inside a git repo."
        )
    yield ProgressEvent("Git repository detected.", style="success")

    if config is None:
        config = load_config(repo_root)

    yield ProgressEvent("Detecting git remote...")
    remote_name = select_remote(git.list_remotes(repo_root), preferred=config.preferred_remote)
    yield ProgressEvent(f'Using remote "{remote_name}".', style="success")

    yield ProgressEvent(f'Fetching latest changes from "{remote_name}"...')
    fetch_result = git.fetch_remote(repo_root, remote_name)
    if isinstance(fetch_result, FetchFailed):
        raise FetchError(fetch_result.message)
    yield ProgressEvent(f'Fetched latest changes from "{remote_name}".', style="success")

    yield ProgressEvent("Determining base branch...")
    head_commit = git.get_head_commit(repo_root)
    if head_commit is None:
        raise ResolutionError("HEAD does not point to a commit. Create a commit and try again.")
    base_branch_name = resolve_base_branch(
        git,
        repo_root,
        head_commit=head_commit,
        current_branch=git.get_current_branch(repo_root),
        remote_name=remote_name,
        remote_branches=git.list_remote_branches(repo_root),
        candidates=config.base_branch_candidates,
        explicit_base=explicit_base,
    )
    yield ProgressEvent(f'Using base branch "{base_branch_name}".', style="success")

    yield ProgressEvent("Reading current branch...")
    branch_name = git.get_current_branch(repo_root)
    if branch_name is None:
        raise DetachedHeadError(
            "Unable to determine current branch name. "
            "HEAD is detached; check out a branch and try again."
        )
    yield ProgressEvent(f'Current branch: "{branch_name}".', style="success")

    yield ProgressEvent("Collecting new commits...")
    commits = list_new_commits(
        git, repo_root, remote_name=remote_name, base_branch=base_branch_name
    )
    yield ProgressEvent(f"Found {len(commits)} new commit(s).", style="success")

    yield ProgressEvent("Writing pull request draft markdown file...")
    content = render_pr_draft(branch_name, base_branch_name, commits, remote_name=remote_name)
    target_dir = _resolve_output_dir(ctx.cwd, output_dir, config)
    token = int(ctx.time.now().timestamp() * 1000)
    draft_path = write_draft(target_dir, token=token, branch_name=branch_name, content=content)
    yield ProgressEvent(f"Pull request draft created at: {draft_path}", style="success")

    yield CompletionEvent(
        DraftResult(
            path=draft_path,
            branch_name=branch_name,
            base_branch_name=base_branch_name,
            remote_name=remote_name,
            commit_count=len(commits),
            github_cli_installed=gh_check.passed,
        )
    )


def _resolve_output_dir(cwd: Path, output_dir: Path | None, config: DraftsmanConfig) -> Path:
    if output_dir is not None:
        return cwd / output_dir
    if config.output_dir is not None:
        return config.output_dir
    return cwd


def write_draft(target_dir: Path, *, token: int, branch_name: str, content: str) -> Path:
    """Write the draft under a unique name and return its path.

    The token is bumped until the file name is free. Content goes to a hidden
    temporary file first and is renamed into place.

    Raises:
        WriteError: If the directory cannot be created or the file cannot be written
    """
    try:
        target_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise WriteError(f"Failed to create output directory {target_dir}: {e}") from e

    draft_path = target_dir / build_draft_filename(token, branch_name)
    while draft_path.exists():
        token += 1
        draft_path = target_dir / build_draft_filename(token, branch_name)

    temp_path = target_dir / f".{draft_path.name}.tmp"
    try:
        temp_path.write_text(content, encoding="utf-8")
        temp_path.replace(draft_path)
    except OSError as e:
        temp_path.unlink(missing_ok=True)
        raise WriteError(f"Failed to write pull request draft {draft_path}: {e}") from e

    logger.debug("Wrote %d bytes to %s", len(content.encode("utf-8")), draft_path)
    return draft_path
