"""Event types yielded by long-running operations.

Operations are generators that yield ProgressEvent for status updates and end
with a single CompletionEvent carrying the result.
"""

from dataclasses import dataclass
from typing import Generic, Literal, TypeVar

T = TypeVar("T")

ProgressStyle = Literal["info", "success", "warning", "error"]


@dataclass(frozen=True)
class ProgressEvent:
    """Status update from an operation."""

    message: str
    style: ProgressStyle = "info"


@dataclass(frozen=True)
class CompletionEvent(Generic[T]):
    """Final event of an operation."""

    result: T
