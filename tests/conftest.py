import pytest

from memstats.services.stats import (
    InMemoryStatsReceiver,
    NullStatsReceiver,
    set_stats_receiver,
)


@pytest.fixture
def receiver():
    """Fresh in-memory receiver, not installed globally."""
    return InMemoryStatsReceiver()


@pytest.fixture
def installed_receiver():
    """In-memory receiver installed as the process-wide receiver for one test."""
    receiver = InMemoryStatsReceiver()
    set_stats_receiver(receiver)

    yield receiver

    # Reset to null receiver
    set_stats_receiver(NullStatsReceiver())
