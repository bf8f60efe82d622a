"""Console output helpers.

All user-facing output goes to stderr so stdout stays free for the draft path.
"""

import sys
from collections.abc import Generator
from typing import TypeVar

import click

from pull_draftsman.core.events import CompletionEvent, ProgressEvent

T = TypeVar("T")

# Style mapping for progress events
STYLE_MAP: dict[str, dict[str, str | bool]] = {
    "info": {"fg": "blue"},
    "success": {"fg": "green"},
    "warning": {"fg": "yellow"},
    "error": {"fg": "red", "bold": True},
}


def user_output(message: str) -> None:
    """Write a message to stderr."""
    click.echo(message, err=True)


def render_events(
    events: Generator[ProgressEvent | CompletionEvent[T]],
) -> T:
    """Consume event stream, render progress to stderr, return result.

    Raises:
        RuntimeError: If operation ends without a CompletionEvent
    """
    for event in events:
        match event:
            case ProgressEvent(message=msg, style=style):
                click.echo(click.style(msg, **STYLE_MAP[style]), err=True)
                sys.stderr.flush()
            case CompletionEvent(result=result):
                return result
    raise RuntimeError("Operation ended without completion")
