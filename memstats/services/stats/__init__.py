"""Stats receivers: the emission interface and its in-memory implementation.

Instrumented code emits counters, stats and gauges through a StatsReceiver.
InMemoryStatsReceiver captures every emission so tests can assert on exact
values; NullStatsReceiver discards them when collection is disabled.
"""

from .verbosity import Verbosity
from .name import StatName
from .receiver import Counter, Gauge, ReadableCounter, ReadableStat, Stat, StatsReceiver
from .histogram import BucketAndCount, HistogramDetail, WithHistogramDetails
from .in_memory import InMemoryCounter, InMemoryGauge, InMemoryStat, InMemoryStatsReceiver
from .null_receiver import NullStatsReceiver
from .scoped import ScopedStatsReceiver
from .instance import get_stats_receiver, set_stats_receiver
from .timer import async_time_stat, time_stat

__all__ = [
    "Verbosity",
    "StatName",
    "Counter",
    "Gauge",
    "ReadableCounter",
    "ReadableStat",
    "Stat",
    "StatsReceiver",
    "BucketAndCount",
    "HistogramDetail",
    "WithHistogramDetails",
    "InMemoryCounter",
    "InMemoryGauge",
    "InMemoryStat",
    "InMemoryStatsReceiver",
    "NullStatsReceiver",
    "ScopedStatsReceiver",
    "get_stats_receiver",
    "set_stats_receiver",
    "async_time_stat",
    "time_stat",
]
