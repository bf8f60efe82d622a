"""Error taxonomy for pull-draftsman.

Every error is terminal for the run: the CLI prints the message and exits
with status 1. Nothing here is retried.
"""


class PullDraftsmanError(Exception):
    """Base class for errors surfaced to the user."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class RepositoryNotFoundError(PullDraftsmanError):
    """The working directory is not inside a git working tree."""


class NoRemoteError(PullDraftsmanError):
    """The repository has no remotes configured."""


class ResolutionError(PullDraftsmanError):
    """The base branch could not be determined, or the explicit base is invalid.

    Attributes:
        tried: Conventional branch names that were attempted, in priority order
        available: Remote-tracking branches that were available
    """

    def __init__(
        self,
        message: str,
        *,
        tried: tuple[str, ...] = (),
        available: tuple[str, ...] = (),
    ) -> None:
        super().__init__(message)
        self.tried = tried
        self.available = available


class DetachedHeadError(PullDraftsmanError):
    """HEAD is not on a named branch."""


class FetchError(PullDraftsmanError):
    """Fetching the remote failed."""


class WriteError(PullDraftsmanError):
    """Creating the output directory or writing the draft failed."""


class ConfigError(PullDraftsmanError):
    """The project configuration file is invalid."""
