"""Production time provider."""

from datetime import UTC, datetime

from pull_draftsman.gateway.time.abc import Time


class RealTime(Time):
    def now(self) -> datetime:
        return datetime.now(UTC)
