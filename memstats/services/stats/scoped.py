"""ScopedStatsReceiver - prefixes every name before delegating.

``receiver.scope("http", "client").counter("requests")`` emits to the key
``("http", "client", "requests")`` of the underlying receiver.
"""

from typing import Callable, TYPE_CHECKING

from .name import StatName
from .verbosity import Verbosity

if TYPE_CHECKING:
    from .models import StatsSnapshotModel
    from .receiver import Counter, Gauge, Stat, StatsReceiver


class ScopedStatsReceiver:
    """StatsReceiver view that adds a fixed namespace in front of every name."""

    def __init__(self, underlying: "StatsReceiver", *namespace: str):
        self.underlying = underlying
        self.namespace = StatName(namespace)

    def counter(self, *name: str, verbosity: Verbosity = Verbosity.DEFAULT) -> "Counter":
        return self.underlying.counter(*self.namespace, *name, verbosity=verbosity)

    def stat(self, *name: str, verbosity: Verbosity = Verbosity.DEFAULT) -> "Stat":
        return self.underlying.stat(*self.namespace, *name, verbosity=verbosity)

    def add_gauge(
        self, *name: str, fn: Callable[[], float], verbosity: Verbosity = Verbosity.DEFAULT
    ) -> "Gauge":
        return self.underlying.add_gauge(*self.namespace, *name, fn=fn, verbosity=verbosity)

    def provide_gauge(
        self, *name: str, fn: Callable[[], float], verbosity: Verbosity = Verbosity.DEFAULT
    ) -> None:
        self.underlying.provide_gauge(*self.namespace, *name, fn=fn, verbosity=verbosity)

    def scope(self, *namespace: str) -> "StatsReceiver":
        if not any(namespace):
            return self
        # Flatten instead of stacking wrappers
        return ScopedStatsReceiver(self.underlying, *self.namespace.child(*namespace))

    def snapshot(self) -> "StatsSnapshotModel":
        """Snapshot of the whole underlying receiver, not only this scope."""
        return self.underlying.snapshot()

    def is_null(self) -> bool:
        return self.underlying.is_null()

    def __repr__(self) -> str:
        return f"ScopedStatsReceiver({self.underlying!r}, {self.namespace.display!r})"
