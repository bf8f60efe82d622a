"""Production GitHub CLI presence check using subprocess."""

import logging
import shutil
import subprocess

from pull_draftsman.gateway.github_cli.abc import GitHubCli

logger = logging.getLogger(__name__)

_VERSION_TIMEOUT_SECONDS = 5


class RealGitHubCli(GitHubCli):
    """Detects gh on PATH and verifies it answers `gh --version`."""

    def is_installed(self) -> bool:
        gh_path = shutil.which("gh")
        if gh_path is None:
            logger.debug("gh not found in PATH")
            return False

        try:
            result = subprocess.run(
                ["gh", "--version"],
                capture_output=True,
                text=True,
                check=False,
                timeout=_VERSION_TIMEOUT_SECONDS,
            )
        except subprocess.TimeoutExpired:
            logger.debug("gh --version timed out")
            return False
        except OSError as e:
            logger.debug("gh --version failed to start: %s", e)
            return False

        return "gh version" in result.stdout.lower()
