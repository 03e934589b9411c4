"""Context managers that record elapsed time into a stat.

Usage example:
```python
latency = receiver.stat("db", "query_ms")
with time_stat(latency):
    run_query()

async with async_time_stat(latency):
    await run_query_async()
```
"""

import time
from contextlib import asynccontextmanager, contextmanager
from typing import AsyncGenerator, Generator

from .receiver import Stat

# Divisors from nanoseconds to each supported unit
_UNITS = {
    "us": 1_000.0,
    "ms": 1_000_000.0,
    "s": 1_000_000_000.0,
}


def _divisor(unit: str) -> float:
    try:
        return _UNITS[unit]
    except KeyError:
        raise ValueError(f"Unsupported time unit {unit!r}, expected one of {sorted(_UNITS)}") from None


@contextmanager
def time_stat(stat: Stat, unit: str = "ms") -> Generator[None, None, None]:
    """Add the wall-clock duration of the block to ``stat``.

    The sample is recorded even when the block raises.

    Args:
        stat: Stat receiving one sample per block
        unit: 'ms', 'us' or 's'
    """
    divisor = _divisor(unit)
    t0 = time.monotonic_ns()
    try:
        yield
    finally:
        stat.add((time.monotonic_ns() - t0) / divisor)


@asynccontextmanager
async def async_time_stat(stat: Stat, unit: str = "ms") -> AsyncGenerator[None, None]:
    """Async counterpart of time_stat, for awaited blocks."""
    divisor = _divisor(unit)
    t0 = time.monotonic_ns()
    try:
        yield
    finally:
        stat.add((time.monotonic_ns() - t0) / divisor)
