"""GitHub CLI availability check.

gh is not needed to write a draft; it is what turns the draft into a pull
request afterwards, so its absence is only reported as a warning.
"""

from dataclasses import dataclass

from pull_draftsman.gateway.github_cli.abc import GitHubCli

GH_INSTALL_INSTRUCTIONS = "\n".join(
    [
        "GitHub CLI (gh) was not found in your PATH.",
        "",
        "pull-draftsman uses gh together with Copilot to turn your markdown draft "
        "into a pull request.",
        "",
        "Install GitHub CLI with one of the following commands:",
        "  • macOS (Homebrew):   brew install gh",
        "  • Ubuntu/Debian:      sudo apt install gh",
        "  • Fedora:             sudo dnf install gh",
        "  • Arch Linux:         sudo pacman -S github-cli",
        "  • Windows (winget):   winget install --id GitHub.cli -e",
        "",
        "After installation, authenticate with your GitHub account:",
        "  gh auth login",
        "",
        "Once gh is installed and authenticated, you can use Copilot + gh to read "
        "the generated .md file",
        "and create a pull request based on it.",
    ]
)


@dataclass(frozen=True)
class CheckResult:
    """Result of the gh availability check.

    Attributes:
        passed: Whether gh is installed
        message: Human-readable summary
        details: Install instructions when gh is missing
    """

    passed: bool
    message: str
    details: str | None = None


def check_github_cli(github_cli: GitHubCli) -> CheckResult:
    """Check if GitHub CLI (gh) is installed and available in PATH."""
    if github_cli.is_installed():
        return CheckResult(passed=True, message="GitHub CLI (gh) is installed.")
    return CheckResult(
        passed=False,
        message="GitHub CLI (gh) is not installed.",
        details=GH_INSTALL_INSTRUCTIONS,
    )
