"""Abstract interface for the git operations used by pull-draftsman.

Architecture:
- Git: Abstract base class defining the interface
- RealGit: Production implementation using subprocess
- FakeGit: In-memory implementation for tests
"""

from abc import ABC, abstractmethod
from pathlib import Path

from pull_draftsman.gateway.git.types import CommitInfo, FetchFailed, FetchResult


class Git(ABC):
    """Abstract interface for git operations.

    All implementations (real and fake) must implement this interface.
    This interface contains ONLY runtime operations - no test setup methods.
    """

    # ============================================================================
    # Repository Queries
    # ============================================================================

    @abstractmethod
    def is_repository(self, cwd: Path) -> bool:
        """Check whether cwd is inside a git working tree.

        Uses `git rev-parse --is-inside-work-tree`.
        """
        ...

    @abstractmethod
    def get_repository_root(self, cwd: Path) -> Path | None:
        """Get the repository root directory, or None outside a repository."""
        ...

    @abstractmethod
    def get_current_branch(self, cwd: Path) -> str | None:
        """Get the currently checked-out branch.

        Returns:
            Branch name, or None when HEAD is detached
        """
        ...

    @abstractmethod
    def get_head_commit(self, cwd: Path) -> str | None:
        """Get the full SHA of HEAD, or None if HEAD does not point to a commit."""
        ...

    # ============================================================================
    # Remote Operations
    # ============================================================================

    @abstractmethod
    def list_remotes(self, cwd: Path) -> list[str]:
        """List configured remote names in configuration order.

        Raises:
            RuntimeError: If the git command fails
        """
        ...

    @abstractmethod
    def list_remote_branches(self, cwd: Path) -> list[str]:
        """List remote-tracking branches as `<remote>/<branch>` names.

        The result may contain symbolic entries such as `origin/HEAD` or a
        bare remote name; callers are expected to filter them.

        Raises:
            RuntimeError: If the git command fails
        """
        ...

    @abstractmethod
    def fetch_remote(self, cwd: Path, remote: str) -> FetchResult | FetchFailed:
        """Fetch all branches from a remote.

        Returns:
            FetchResult on success, FetchFailed with the git error otherwise
        """
        ...

    # ============================================================================
    # Ancestry Queries
    # ============================================================================

    @abstractmethod
    def get_merge_base(self, cwd: Path, ref1: str, ref2: str) -> str | None:
        """Get the merge base commit SHA between two refs.

        Returns:
            Commit SHA of the merge base, or None if refs have no common ancestor
        """
        ...

    @abstractmethod
    def count_commits_between(self, cwd: Path, base: str, head: str) -> int | None:
        """Count commits reachable from head but not from base.

        Uses `git rev-list --count {base}..{head}`. When base is the merge base
        of head, this excludes the merge base itself and includes head, and it
        follows all parents (not only first parents).

        Returns:
            Number of commits, or None if the count could not be determined
        """
        ...

    @abstractmethod
    def get_commits_between(self, cwd: Path, base: str, head: str) -> list[CommitInfo]:
        """List commits reachable from head but not from base, newest first.

        Raises:
            RuntimeError: If the git command fails
        """
        ...
