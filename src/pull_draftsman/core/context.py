"""Dependency container threaded through the CLI via Click's context system."""

from dataclasses import dataclass
from pathlib import Path

from pull_draftsman.gateway.git.abc import Git
from pull_draftsman.gateway.git.fake import FakeGit
from pull_draftsman.gateway.git.real import RealGit
from pull_draftsman.gateway.github_cli.abc import GitHubCli
from pull_draftsman.gateway.github_cli.fake import FakeGitHubCli
from pull_draftsman.gateway.github_cli.real import RealGitHubCli
from pull_draftsman.gateway.time.abc import Time
from pull_draftsman.gateway.time.fake import FakeTime
from pull_draftsman.gateway.time.real import RealTime


@dataclass(frozen=True)
class DraftsmanContext:
    """Immutable context holding all dependencies for a run.

    Created at the CLI entry point. Frozen to prevent accidental modification
    at runtime.
    """

    git: Git
    github_cli: GitHubCli
    time: Time
    cwd: Path  # Current working directory at CLI invocation

    @classmethod
    def for_test(
        cls,
        *,
        git: Git | None = None,
        github_cli: GitHubCli | None = None,
        time: Time | None = None,
        cwd: Path | None = None,
    ) -> "DraftsmanContext":
        """Create a context backed by fakes.

        cwd defaults to Path("/test/default/cwd") to prevent accidental use
        of the real working directory in tests.
        """
        return cls(
            git=git if git is not None else FakeGit(),
            github_cli=github_cli if github_cli is not None else FakeGitHubCli(),
            time=time if time is not None else FakeTime(),
            cwd=cwd if cwd is not None else Path("/test/default/cwd"),
        )


def create_context() -> DraftsmanContext:
    """Create production context with real implementations."""
    return DraftsmanContext(
        git=RealGit(),
        github_cli=RealGitHubCli(),
        time=RealTime(),
        cwd=Path.cwd(),
    )
