"""pull-draftsman entry point.

This package provides a Click-based CLI that infers the base branch of the
current git branch and writes a markdown pull request draft. See
`pull-draftsman --help` for details.
"""

from pull_draftsman.cli.cli import cli


def main() -> None:
    """CLI entry point used by the `pull-draftsman` console script."""
    cli()
