"""Fake git operations for testing.

FakeGit is an in-memory implementation that accepts pre-configured state
in its constructor. Construct instances directly with keyword arguments.
"""

from pathlib import Path

from pull_draftsman.gateway.git.abc import Git
from pull_draftsman.gateway.git.types import CommitInfo, FetchFailed, FetchResult


class FakeGit(Git):
    """In-memory fake implementation of git operations.

    Constructor Injection:
    ---------------------
    - repository_roots: Mapping of cwd -> repository root. A cwd (or any of its
      parents) present in this mapping is considered inside a repository.
    - current_branches: Mapping of repo_root -> branch name (None = detached HEAD)
    - head_commits: Mapping of repo_root -> HEAD SHA
    - remotes: Mapping of repo_root -> configured remote names
    - remote_branches: Mapping of repo_root -> remote-tracking branch names
    - merge_bases: Mapping of (ref1, ref2) -> merge base SHA (either order matches)
    - commit_counts: Mapping of (base, head) -> count for rev-list --count
    - commits_between: Mapping of (base, head) -> commits, newest first
    - fetch_failures: Mapping of remote name -> error message returned by fetch

    Mutation Tracking:
    -----------------
    - fetched_remotes: Remote names passed to fetch_remote(), in call order

    Examples:
    ---------
        git = FakeGit(
            repository_roots={repo: repo},
            current_branches={repo: "feature"},
            remotes={repo: ["origin"]},
            remote_branches={repo: ["origin/main", "origin/feature"]},
        )
        git.fetch_remote(repo, "origin")
        assert git.fetched_remotes == ["origin"]
    """

    def __init__(
        self,
        *,
        repository_roots: dict[Path, Path] | None = None,
        current_branches: dict[Path, str | None] | None = None,
        head_commits: dict[Path, str] | None = None,
        remotes: dict[Path, list[str]] | None = None,
        remote_branches: dict[Path, list[str]] | None = None,
        merge_bases: dict[tuple[str, str], str] | None = None,
        commit_counts: dict[tuple[str, str], int] | None = None,
        commits_between: dict[tuple[str, str], list[CommitInfo]] | None = None,
        fetch_failures: dict[str, str] | None = None,
    ) -> None:
        self._repository_roots = repository_roots if repository_roots is not None else {}
        self._current_branches = current_branches if current_branches is not None else {}
        self._head_commits = head_commits if head_commits is not None else {}
        self._remotes = remotes if remotes is not None else {}
        self._remote_branches = remote_branches if remote_branches is not None else {}
        self._merge_bases = merge_bases if merge_bases is not None else {}
        self._commit_counts = commit_counts if commit_counts is not None else {}
        self._commits_between = commits_between if commits_between is not None else {}
        self._fetch_failures = fetch_failures if fetch_failures is not None else {}

        # Mutation tracking
        self._fetched_remotes: list[str] = []

    # ============================================================================
    # Repository Queries
    # ============================================================================

    def is_repository(self, cwd: Path) -> bool:
        return self.get_repository_root(cwd) is not None

    def get_repository_root(self, cwd: Path) -> Path | None:
        """Walk up from cwd to the first configured repository root."""
        if cwd in self._repository_roots:
            return self._repository_roots[cwd]
        for parent in cwd.parents:
            if parent in self._repository_roots:
                return self._repository_roots[parent]
        return None

    def get_current_branch(self, cwd: Path) -> str | None:
        return self._current_branches.get(cwd)

    def get_head_commit(self, cwd: Path) -> str | None:
        return self._head_commits.get(cwd)

    # ============================================================================
    # Remote Operations
    # ============================================================================

    def list_remotes(self, cwd: Path) -> list[str]:
        return list(self._remotes.get(cwd, []))

    def list_remote_branches(self, cwd: Path) -> list[str]:
        return list(self._remote_branches.get(cwd, []))

    def fetch_remote(self, cwd: Path, remote: str) -> FetchResult | FetchFailed:
        """Record the fetch, or return the configured failure."""
        self._fetched_remotes.append(remote)
        if remote in self._fetch_failures:
            return FetchFailed(message=self._fetch_failures[remote])
        return FetchResult()

    # ============================================================================
    # Ancestry Queries
    # ============================================================================

    def get_merge_base(self, cwd: Path, ref1: str, ref2: str) -> str | None:
        """Get the merge base commit SHA between two refs.

        Checks both (ref1, ref2) and (ref2, ref1) key orderings.
        """
        if (ref1, ref2) in self._merge_bases:
            return self._merge_bases[(ref1, ref2)]
        if (ref2, ref1) in self._merge_bases:
            return self._merge_bases[(ref2, ref1)]
        return None

    def count_commits_between(self, cwd: Path, base: str, head: str) -> int | None:
        return self._commit_counts.get((base, head))

    def get_commits_between(self, cwd: Path, base: str, head: str) -> list[CommitInfo]:
        return list(self._commits_between.get((base, head), []))

    # ============================================================================
    # Mutation Tracking Properties
    # ============================================================================

    @property
    def fetched_remotes(self) -> list[str]:
        """Read-only access to fetched remotes for test assertions."""
        return list(self._fetched_remotes)
