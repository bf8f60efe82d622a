import logging
from pathlib import Path

import click

from pull_draftsman.cli.output import render_events, user_output
from pull_draftsman.core.context import DraftsmanContext, create_context
from pull_draftsman.core.create_draft import execute_create_draft
from pull_draftsman.core.errors import PullDraftsmanError

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.command("pull-draftsman", context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="pull-draftsman")
@click.option(
    "-b",
    "--base",
    "base",
    default=None,
    metavar="BRANCH",
    help="Base branch to compare against (e.g. main, stage)",
)
@click.option(
    "-o",
    "--output",
    "output",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory where the pull request draft .md file will be created "
    "(default: current directory)",
)
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, base: str | None, output: Path | None, debug: bool) -> None:
    """Generate a pull request draft .md file from your current git branch.

    The base branch is inferred from the remote branches unless --base is given.

    Examples:

    \b
      # Infer the base branch and write the draft here
      pull-draftsman

    \b
      # Compare against origin/develop and write into ./drafts
      pull-draftsman --base develop --output drafts
    """
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context()
    draftsman_ctx: DraftsmanContext = ctx.obj

    try:
        result = render_events(
            execute_create_draft(draftsman_ctx, explicit_base=base, output_dir=output)
        )
    except (PullDraftsmanError, RuntimeError) as e:
        user_output(click.style("Error: ", fg="red") + str(e))
        raise SystemExit(1) from None

    if result.github_cli_installed:
        user_output(
            click.style(
                "Next step: use Copilot together with gh to read this .md file "
                "and open a pull request.",
                fg="blue",
            )
        )
    else:
        user_output(
            click.style(
                "Note: GitHub CLI (gh) is not installed. Install and authenticate it "
                "before using Copilot + gh to turn this draft into a PR.",
                fg="yellow",
            )
        )
    click.echo(str(result.path))
