"""Infer the remote branch the current branch was forked from.

The heuristic prefers conventional branch names (stage, develop, main, ...)
and, among them, the one whose merge base with HEAD is closest to HEAD:

    main ──┐
           ├─ stage ──┐
                       └─ feature/add-new-user (HEAD)

For HEAD on `feature/add-new-user`, stage is 2 commits behind HEAD while main
is 5, so `stage` is returned.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from pull_draftsman.core.errors import ResolutionError
from pull_draftsman.gateway.git.abc import Git

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BranchDistance:
    """How far HEAD has moved past its merge base with a candidate branch.

    Attributes:
        short_name: Branch name without the remote prefix (e.g. "stage")
        remote_ref: Remote-tracking ref (e.g. "origin/stage")
        ahead: Commits reachable from HEAD but not from the merge base
    """

    short_name: str
    remote_ref: str
    ahead: int


def is_symbolic_remote_ref(name: str) -> bool:
    """Return True for entries that are not real remote branches.

    Covers `origin/HEAD -> origin/main` style output, `origin/HEAD`, and the
    bare remote name git prints for the remote HEAD with `%(refname:short)`.
    """
    return "->" in name or "/" not in name or name.endswith("/HEAD")


def resolve_base_branch(
    git: Git,
    cwd: Path,
    *,
    head_commit: str,
    current_branch: str | None,
    remote_name: str,
    remote_branches: Sequence[str],
    candidates: Sequence[str],
    explicit_base: str | None,
) -> str:
    """Determine the base branch of HEAD on the given remote.

    Args:
        git: Git gateway used for ancestry queries
        cwd: Repository working directory
        head_commit: SHA of HEAD
        current_branch: Current branch name; its own remote-tracking branch is
            never considered a candidate. None when HEAD is detached.
        remote_name: Remote whose branches are considered (e.g. "origin")
        remote_branches: Remote-tracking branches as `<remote>/<branch>`
        candidates: Conventional base branch names, highest priority first
        explicit_base: Base branch requested by the user, if any

    Returns:
        Short name of the base branch (without the remote prefix)

    Raises:
        ResolutionError: If the explicit base does not exist on the remote, or no
            base branch can be determined
    """
    branches = [name for name in remote_branches if not is_symbolic_remote_ref(name)]
    prefix = f"{remote_name}/"

    if explicit_base is not None:
        if f"{prefix}{explicit_base}" not in branches:
            raise ResolutionError(
                f'Base branch "{explicit_base}" was not found on remote "{remote_name}". '
                f"Available remote branches: {', '.join(branches)}",
                available=tuple(branches),
            )
        return explicit_base

    # Ignore the remote-tracking branch of the current branch itself
    remote_candidates = [
        name
        for name in branches
        if name.startswith(prefix) and name[len(prefix) :] != current_branch
    ]
    if not remote_candidates:
        raise ResolutionError(
            f'No remote branches found on "{remote_name}". '
            'Make sure you have fetched the remote (e.g. "git fetch --all --prune").',
            available=tuple(branches),
        )

    priority_names = list(dict.fromkeys(candidates))

    # Ordered by priority so that ties go to the higher-priority name
    prioritized = [
        f"{prefix}{name}" for name in priority_names if f"{prefix}{name}" in remote_candidates
    ]
    scoring_pool = prioritized if prioritized else remote_candidates

    best = _find_closest_branch(git, cwd, head_commit=head_commit, refs=scoring_pool, prefix=prefix)
    if best is not None:
        logger.debug("Closest base branch: %s (%d ahead)", best.remote_ref, best.ahead)
        return best.short_name

    # No candidate could be scored; fall back to list order
    for name in priority_names:
        if f"{prefix}{name}" in branches:
            logger.debug("Falling back to first available conventional branch: %s", name)
            return name

    tried_clause = f"Tried: {', '.join(priority_names)}. " if priority_names else ""
    raise ResolutionError(
        f'Unable to determine base branch automatically on remote "{remote_name}". '
        f"{tried_clause}"
        'You can pass the base explicitly with the "--base <branch>" option.',
        tried=tuple(priority_names),
        available=tuple(branches),
    )


def _find_closest_branch(
    git: Git,
    cwd: Path,
    *,
    head_commit: str,
    refs: Sequence[str],
    prefix: str,
) -> BranchDistance | None:
    """Score each ref by commits between its merge base and HEAD; return the smallest.

    Refs whose merge base or count cannot be determined are skipped.
    """
    best: BranchDistance | None = None
    for remote_ref in refs:
        merge_base = git.get_merge_base(cwd, head_commit, remote_ref)
        if not merge_base:
            logger.debug("Skipping %s: no merge base with HEAD", remote_ref)
            continue

        ahead = git.count_commits_between(cwd, merge_base, head_commit)
        if ahead is None or ahead < 0:
            logger.debug("Skipping %s: could not count commits from merge base", remote_ref)
            continue

        logger.debug("%s: HEAD is %d commit(s) ahead of merge base", remote_ref, ahead)
        if best is None or ahead < best.ahead:
            best = BranchDistance(
                short_name=remote_ref[len(prefix) :],
                remote_ref=remote_ref,
                ahead=ahead,
            )
    return best
