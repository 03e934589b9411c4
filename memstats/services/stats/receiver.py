"""StatsReceiver Protocol and the handle interfaces it hands out.

Instrumented code depends only on these interfaces. It asks a receiver for a
counter, stat or gauge by name and then mutates the returned handle; which
receiver is behind it (in-memory, null, scoped) is decided by the caller.
"""

from typing import Callable, Protocol, List, TYPE_CHECKING

from .verbosity import Verbosity

if TYPE_CHECKING:
    from .models import StatsSnapshotModel


class Counter(Protocol):
    """Integer accumulator updated by signed deltas."""

    def incr(self, delta: int = 1) -> None:
        ...


class ReadableCounter(Counter, Protocol):
    """A Counter that also exposes its current value."""

    def read(self) -> int:
        ...


class Stat(Protocol):
    """Records a distribution of float samples."""

    def add(self, value: float) -> None:
        ...


class ReadableStat(Stat, Protocol):
    """A Stat that also exposes every sample recorded so far."""

    def read(self) -> List[float]:
        ...


class Gauge(Protocol):
    """Handle to a lazily evaluated value; removing it deregisters the producer."""

    def remove(self) -> None:
        ...


class StatsReceiver(Protocol):
    """Protocol defining the interface instrumented code emits metrics through.

    Names are passed as separate segments: ``receiver.counter("http", "requests")``.
    """

    def counter(self, *name: str, verbosity: Verbosity = Verbosity.DEFAULT) -> Counter:
        """Get a counter handle for ``name``.

        Args:
            name: One or more name segments
            verbosity: Tag recorded against the name
        """
        ...

    def stat(self, *name: str, verbosity: Verbosity = Verbosity.DEFAULT) -> Stat:
        """Get a stat handle for ``name``."""
        ...

    def add_gauge(
        self, *name: str, fn: Callable[[], float], verbosity: Verbosity = Verbosity.DEFAULT
    ) -> Gauge:
        """Register ``fn`` as the producer of the gauge ``name``.

        Args:
            name: One or more name segments
            fn: Zero-argument callable invoked every time the gauge is read
            verbosity: Tag recorded against the name
        """
        ...

    def provide_gauge(
        self, *name: str, fn: Callable[[], float], verbosity: Verbosity = Verbosity.DEFAULT
    ) -> None:
        """Register a gauge that lives as long as the receiver."""
        ...

    def scope(self, *namespace: str) -> "StatsReceiver":
        """Return a receiver that prefixes every name with ``namespace``."""
        ...

    def snapshot(self) -> "StatsSnapshotModel":
        """Get current stats as a Pydantic model."""
        ...

    def is_null(self) -> bool:
        """True when emissions are discarded."""
        ...
