"""Fake GitHub CLI presence check for testing."""

from pull_draftsman.gateway.github_cli.abc import GitHubCli


class FakeGitHubCli(GitHubCli):
    """In-memory fake with a fixed answer."""

    def __init__(self, *, installed: bool = True) -> None:
        self._installed = installed
        self._check_count = 0

    def is_installed(self) -> bool:
        self._check_count += 1
        return self._installed

    @property
    def check_count(self) -> int:
        """Number of times is_installed() was called."""
        return self._check_count
