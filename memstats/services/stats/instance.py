"""Module-level singleton accessor for the stats receiver.

Instrumented code calls get_stats_receiver() at emission time, so tests can
swap in an InMemoryStatsReceiver with set_stats_receiver() and read back what
was emitted.
"""

from .receiver import StatsReceiver
from .null_receiver import NullStatsReceiver

# Module-level singleton instance - starts as null receiver
_receiver: StatsReceiver = NullStatsReceiver()


def get_stats_receiver() -> StatsReceiver:
    """Get the currently active stats receiver.

    Returns:
        The active stats receiver instance (in-memory or null)
    """
    return _receiver


def set_stats_receiver(receiver: StatsReceiver) -> None:
    """Replace the active stats receiver.

    This is called at application startup to inject either an
    InMemoryStatsReceiver or NullStatsReceiver based on configuration.

    Args:
        receiver: The stats receiver instance to use
    """
    global _receiver
    _receiver = receiver
