"""InMemoryStatsReceiver - captures every emission for read-back in tests.

Counters, stats, gauges and verbosity tags each live in their own dict guarded
by their own lock. Increments and sample appends are serialized per store so
concurrent writers never lose updates. ``dump``, ``clear``, ``snapshot`` and
the read-back accessors take each store lock only long enough to copy or
clear that store: they see a best-effort view, and metrics registered while
they run may or may not be reflected.

Names are compared segment by segment, never by their printed form::

    receiver = InMemoryStatsReceiver()
    receiver.counter("a", "b", "foo").incr()
    receiver.counter("a/b", "bar").incr()

    receiver.dump()  # prints "a/b/foo 1" and "a/b/bar 1"

    assert receiver.counters[("a", "b", "foo")] == 1
    assert ("a", "b", "bar") not in receiver.counters
"""

import operator
import sys
import threading
import time
from typing import Callable, Dict, List, Optional, TextIO

from memstats.core.logging_config import get_logger
from .histogram import HistogramDetail
from .models import CounterModel, GaugeModel, StatModel, StatsSnapshotModel
from .name import StatName
from .scoped import ScopedStatsReceiver
from .verbosity import Verbosity

logger = get_logger(__name__)

# Value read from a gauge that has no registered producer
GAUGE_SENTINEL = -0.0

# Samples shown before a stat's display form is truncated
DISPLAY_SAMPLES = 3


class InMemoryCounter:
    """ReadableCounter bound to one name of an InMemoryStatsReceiver."""

    __slots__ = ("_receiver", "name")

    def __init__(self, receiver: "InMemoryStatsReceiver", name: StatName):
        self._receiver = receiver
        self.name = name

    def incr(self, delta: int = 1) -> None:
        self._receiver._incr(self.name, delta)

    def read(self) -> int:
        return self._receiver._counter_value(self.name)

    def __str__(self) -> str:
        return f"Counter({self.name.display}={self.read()})"

    __repr__ = __str__


class InMemoryStat:
    """ReadableStat bound to one name of an InMemoryStatsReceiver."""

    __slots__ = ("_receiver", "name")

    def __init__(self, receiver: "InMemoryStatsReceiver", name: StatName):
        self._receiver = receiver
        self.name = name

    def add(self, value: float) -> None:
        self._receiver._add(self.name, value)

    def read(self) -> List[float]:
        return self._receiver._stat_samples(self.name)

    def __str__(self) -> str:
        samples = self.read()
        if len(samples) <= DISPLAY_SAMPLES:
            rendered = "[" + ",".join(str(v) for v in samples) + "]"
        else:
            omitted = len(samples) - DISPLAY_SAMPLES
            shown = ",".join(str(v) for v in samples[:DISPLAY_SAMPLES])
            rendered = f"[{shown}... (omitted {omitted} value(s))]"
        return f"Stat({self.name.display}={rendered})"

    __repr__ = __str__


class InMemoryGauge:
    """Gauge handle bound to one name of an InMemoryStatsReceiver.

    The handle never holds the producer itself: it is looked up in the
    receiver on every read, so removing it drops the only reference.
    """

    __slots__ = ("_receiver", "name")

    def __init__(self, receiver: "InMemoryStatsReceiver", name: StatName):
        self._receiver = receiver
        self.name = name

    def remove(self) -> None:
        """Deregister whatever producer currently occupies this name."""
        self._receiver._remove_gauge(self.name)

    def read(self) -> float:
        """Invoke the current producer, or return -0.0 if there is none."""
        return self._receiver._gauge_value(self.name)

    def __str__(self) -> str:
        return f"Gauge({self.name.display}={self.read()})"

    __repr__ = __str__


class InMemoryStatsReceiver:
    """StatsReceiver that keeps everything in memory, mostly used for testing."""

    def __init__(self):
        self._counters: Dict[StatName, int] = {}
        self._counters_lock = threading.Lock()

        self._stats: Dict[StatName, List[float]] = {}
        self._stats_lock = threading.Lock()

        self._gauges: Dict[StatName, Callable[[], float]] = {}
        self._gauges_lock = threading.Lock()

        self._verbosity: Dict[StatName, Verbosity] = {}
        self._verbosity_lock = threading.Lock()

    def counter(self, *name: str, verbosity: Verbosity = Verbosity.DEFAULT) -> InMemoryCounter:
        """Create a ReadableCounter for ``name``, tagging it with ``verbosity``."""
        key = StatName(name)
        self._tag(key, verbosity)
        return InMemoryCounter(self, key)

    def stat(self, *name: str, verbosity: Verbosity = Verbosity.DEFAULT) -> InMemoryStat:
        """Create a ReadableStat for ``name``, tagging it with ``verbosity``."""
        key = StatName(name)
        self._tag(key, verbosity)
        return InMemoryStat(self, key)

    def add_gauge(
        self, *name: str, fn: Callable[[], float], verbosity: Verbosity = Verbosity.DEFAULT
    ) -> InMemoryGauge:
        """Install ``fn`` as the producer for ``name``.

        A gauge already registered under the same name is replaced.
        """
        key = StatName(name)
        with self._gauges_lock:
            replaced = key in self._gauges
            self._gauges[key] = fn
        if replaced:
            logger.debug(f"Gauge {key.display} replaced by a new producer")
        self._tag(key, verbosity)
        return InMemoryGauge(self, key)

    def provide_gauge(
        self, *name: str, fn: Callable[[], float], verbosity: Verbosity = Verbosity.DEFAULT
    ) -> None:
        self.add_gauge(*name, fn=fn, verbosity=verbosity)

    def scope(self, *namespace: str):
        if not any(namespace):
            return self
        return ScopedStatsReceiver(self, *namespace)

    def is_null(self) -> bool:
        return False

    @property
    def counters(self) -> Dict[StatName, int]:
        """Copy of every counter that has been incremented."""
        with self._counters_lock:
            return dict(self._counters)

    @property
    def stats(self) -> Dict[StatName, List[float]]:
        """Copy of every stat's samples."""
        with self._stats_lock:
            return {key: list(samples) for key, samples in self._stats.items()}

    @property
    def gauges(self) -> Dict[StatName, Callable[[], float]]:
        """Copy of the registered gauge producers (not their values)."""
        with self._gauges_lock:
            return dict(self._gauges)

    @property
    def verbosity(self) -> Dict[StatName, Verbosity]:
        """Verbosity tag of every name ever created, including cleared ones."""
        with self._verbosity_lock:
            return dict(self._verbosity)

    def histogram_details(self) -> Dict[str, HistogramDetail]:
        """Bucketed distribution of every stat, keyed by display name.

        Names that print the same collapse to a single entry.
        """
        return {key.display: HistogramDetail(samples) for key, samples in self.stats.items()}

    def dump(self, out: Optional[TextIO] = None) -> None:
        """Write one ``<name> <value>`` line per counter, gauge and non-empty stat.

        Gauges are evaluated while dumping and stats print the mean of their
        samples. Line order is unspecified.
        """
        out = out if out is not None else sys.stdout
        for key, value in self.counters.items():
            out.write("%s %d\n" % (key.display, value))
        for key, fn in self.gauges.items():
            out.write("%s %f\n" % (key.display, fn()))
        for key, samples in self.stats.items():
            if samples:
                out.write("%s %f\n" % (key.display, sum(samples) / len(samples)))

    def clear(self) -> None:
        """Clear all registered counters, stats and gauges.

        This is not atomic: metrics added while it runs may remain. Verbosity
        tags are kept.
        """
        with self._counters_lock:
            self._counters.clear()
        with self._stats_lock:
            self._stats.clear()
        with self._gauges_lock:
            self._gauges.clear()
        logger.debug("In-memory stats cleared")

    def snapshot(self) -> StatsSnapshotModel:
        """Serialize current state into a Pydantic StatsSnapshotModel.

        Evaluates every gauge; a failing producer propagates its exception.
        """
        tags = self.verbosity

        counters = [
            CounterModel(name=list(key), display=key.display, value=value, verbosity=tags.get(key))
            for key, value in self.counters.items()
        ]
        stats = [
            StatModel(
                name=list(key),
                display=key.display,
                samples=samples,
                count=len(samples),
                mean=(sum(samples) / len(samples)) if samples else None,
                verbosity=tags.get(key),
            )
            for key, samples in self.stats.items()
        ]
        gauges = [
            GaugeModel(name=list(key), display=key.display, value=fn(), verbosity=tags.get(key))
            for key, fn in self.gauges.items()
        ]

        return StatsSnapshotModel(
            timestamp=time.time(),
            counters=counters,
            stats=stats,
            gauges=gauges,
        )

    def _tag(self, key: StatName, verbosity: Verbosity) -> None:
        with self._verbosity_lock:
            self._verbosity[key] = verbosity

    def _incr(self, key: StatName, delta: int) -> None:
        # Counters stay integral; floats raise TypeError instead of truncating
        delta = operator.index(delta)
        with self._counters_lock:
            self._counters[key] = self._counters.get(key, 0) + delta

    def _counter_value(self, key: StatName) -> int:
        with self._counters_lock:
            return self._counters.get(key, 0)

    def _add(self, key: StatName, value: float) -> None:
        with self._stats_lock:
            self._stats.setdefault(key, []).append(float(value))

    def _stat_samples(self, key: StatName) -> List[float]:
        with self._stats_lock:
            return list(self._stats.get(key, ()))

    def _gauge_value(self, key: StatName) -> float:
        with self._gauges_lock:
            fn = self._gauges.get(key)
        # Producers may block; never call them with the lock held
        if fn is None:
            return GAUGE_SENTINEL
        return fn()

    def _remove_gauge(self, key: StatName) -> None:
        with self._gauges_lock:
            removed = self._gauges.pop(key, None)
        if removed is not None:
            logger.debug(f"Gauge {key.display} removed")

    def __repr__(self) -> str:
        return "InMemoryStatsReceiver"
