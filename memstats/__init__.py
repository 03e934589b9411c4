"""In-memory stats receiver for asserting on emitted metrics in tests."""

from memstats.services.stats import (
    InMemoryStatsReceiver,
    NullStatsReceiver,
    StatName,
    StatsReceiver,
    Verbosity,
)

__all__ = [
    "InMemoryStatsReceiver",
    "NullStatsReceiver",
    "StatName",
    "StatsReceiver",
    "Verbosity",
]
