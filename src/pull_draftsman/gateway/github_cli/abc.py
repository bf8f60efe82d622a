"""Abstract interface for detecting the GitHub CLI."""

from abc import ABC, abstractmethod


class GitHubCli(ABC):
    """Abstract interface for GitHub CLI (gh) presence checks."""

    @abstractmethod
    def is_installed(self) -> bool:
        """Check whether a working `gh` executable is available.

        Never raises: any failure to run gh is reported as not installed.
        """
        ...
