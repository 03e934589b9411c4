"""NullStatsReceiver - No-op implementation for disabled stats.

This module provides a null object pattern implementation that discards every
emission, so instrumented code can run unchanged without a real receiver.
"""

from typing import Callable, TYPE_CHECKING

from .verbosity import Verbosity

if TYPE_CHECKING:
    from .models import StatsSnapshotModel


class NullCounter:
    """No-op counter; always reads 0."""

    def incr(self, delta: int = 1) -> None:
        pass

    def read(self) -> int:
        return 0


class NullStat:
    """No-op stat; always reads empty."""

    def add(self, value: float) -> None:
        pass

    def read(self) -> list:
        return []


class NullGauge:
    """No-op gauge handle."""

    def remove(self) -> None:
        pass


# Handles carry no state, so every call hands out the same instances
_NULL_COUNTER = NullCounter()
_NULL_STAT = NullStat()
_NULL_GAUGE = NullGauge()


class NullStatsReceiver:
    """No-op receiver for when stats collection is disabled.

    The snapshot() method returns a valid empty StatsSnapshotModel to maintain
    API contracts.
    """

    def counter(self, *name: str, verbosity: Verbosity = Verbosity.DEFAULT) -> NullCounter:
        """No-op: counter handle discarding increments."""
        return _NULL_COUNTER

    def stat(self, *name: str, verbosity: Verbosity = Verbosity.DEFAULT) -> NullStat:
        """No-op: stat handle discarding samples."""
        return _NULL_STAT

    def add_gauge(
        self, *name: str, fn: Callable[[], float], verbosity: Verbosity = Verbosity.DEFAULT
    ) -> NullGauge:
        """No-op: the producer is never called or retained."""
        return _NULL_GAUGE

    def provide_gauge(
        self, *name: str, fn: Callable[[], float], verbosity: Verbosity = Verbosity.DEFAULT
    ) -> None:
        pass

    def scope(self, *namespace: str) -> "NullStatsReceiver":
        """Scoping a null receiver is still a null receiver."""
        return self

    def snapshot(self) -> "StatsSnapshotModel":
        """Return valid empty StatsSnapshotModel."""
        # Import here to avoid circular imports
        from .models import StatsSnapshotModel

        return StatsSnapshotModel(
            timestamp=0.0,
            counters=[],
            stats=[],
            gauges=[],
        )

    def is_null(self) -> bool:
        """Always returns True for null receiver."""
        return True

    def __repr__(self) -> str:
        return "NullStatsReceiver"
