"""Abstract interface for reading the clock."""

from abc import ABC, abstractmethod
from datetime import datetime


class Time(ABC):
    """Abstract time provider so tests can pin the current time."""

    @abstractmethod
    def now(self) -> datetime:
        """Return the current time as a timezone-aware datetime."""
        ...
