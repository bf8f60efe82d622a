"""Shared test helpers for operation tests."""

from collections.abc import Generator
from typing import TypeVar

from pull_draftsman.core.events import CompletionEvent, ProgressEvent

T = TypeVar("T")


def collect_events(
    generator: Generator[ProgressEvent | CompletionEvent[T]],
) -> tuple[list[ProgressEvent], T]:
    """Collect progress events and final result from operation generator.

    Raises:
        RuntimeError: If no CompletionEvent is yielded
    """
    progress_events = []
    for event in generator:
        if isinstance(event, ProgressEvent):
            progress_events.append(event)
        elif isinstance(event, CompletionEvent):
            return progress_events, event.result
    raise RuntimeError("No completion event")


def has_event_containing(events: list[ProgressEvent], substring: str) -> bool:
    """Check if any event message contains the given substring."""
    return any(substring in event.message for event in events)
