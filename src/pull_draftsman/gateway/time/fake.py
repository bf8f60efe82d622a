"""Fake time provider for testing."""

from datetime import UTC, datetime

from pull_draftsman.gateway.time.abc import Time

DEFAULT_FAKE_TIME = datetime(2024, 1, 15, 14, 30, 0, tzinfo=UTC)


class FakeTime(Time):
    """Returns a fixed time configured at construction."""

    def __init__(self, *, current_time: datetime | None = None) -> None:
        self._current_time = current_time if current_time is not None else DEFAULT_FAKE_TIME

    def now(self) -> datetime:
        return self._current_time
