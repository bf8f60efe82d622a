"""Value types returned by the git gateway."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CommitInfo:
    """A commit reachable from HEAD but not from the base branch.

    Attributes:
        hash: Short commit SHA (first 7 hex characters)
        message: First line of the commit message
    """

    hash: str
    message: str


@dataclass(frozen=True)
class FetchResult:
    """Success result from fetching a remote."""


@dataclass(frozen=True)
class FetchFailed:
    """Error result from fetching a remote."""

    message: str
