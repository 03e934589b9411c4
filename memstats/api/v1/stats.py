"""Stats diagnostics REST API endpoints.

Read-back of the active in-memory receiver over HTTP: full snapshot, bucketed
histograms, the plain-text dump and a reset.
"""

import io

from fastapi import APIRouter, HTTPException, Depends, Response
from fastapi.responses import PlainTextResponse
from typing import List, Optional

from memstats.core.config import settings
from memstats.services.stats.in_memory import InMemoryStatsReceiver
from memstats.services.stats.instance import get_stats_receiver
from memstats.services.stats.models import (
    BucketAndCountModel,
    HistogramModel,
    StatsHealthModel,
    StatsSnapshotModel,
)
from memstats.services.stats.receiver import StatsReceiver
from memstats.services.stats.scoped import ScopedStatsReceiver

router = APIRouter(prefix="/stats", tags=["stats"])

_DISABLED_DETAIL = "Stats collection is disabled. Set STATS_ENABLE_RECEIVER=true to enable."


def get_receiver() -> StatsReceiver:
    """FastAPI dependency for stats receiver injection."""
    return get_stats_receiver()


def _unwrap(receiver: StatsReceiver) -> Optional[InMemoryStatsReceiver]:
    """Find the in-memory receiver behind scoping wrappers, if any."""
    while isinstance(receiver, ScopedStatsReceiver):
        receiver = receiver.underlying
    if isinstance(receiver, InMemoryStatsReceiver):
        return receiver
    return None


def get_in_memory_receiver(receiver: StatsReceiver = Depends(get_receiver)) -> InMemoryStatsReceiver:
    """Resolve the in-memory receiver behind the active one, or answer 503."""
    in_memory = _unwrap(receiver)
    if in_memory is None:
        raise HTTPException(status_code=503, detail=_DISABLED_DETAIL)
    return in_memory


@router.get("/", response_model=StatsSnapshotModel)
def get_stats_snapshot(receiver: InMemoryStatsReceiver = Depends(get_in_memory_receiver)):
    """Get full stats snapshot.

    Gauge producers may block, so this runs in the threadpool.

    Raises:
        HTTPException: 503 if stats collection is disabled
    """
    return receiver.snapshot()


@router.get("/histograms", response_model=List[HistogramModel])
async def get_histograms(receiver: InMemoryStatsReceiver = Depends(get_in_memory_receiver)):
    """Get every stat bucketed into unit-width ranges.

    Raises:
        HTTPException: 503 if stats collection is disabled
    """
    return [
        HistogramModel(
            name=name,
            buckets=[BucketAndCountModel(**bucket._asdict()) for bucket in detail.counts],
        )
        for name, detail in sorted(receiver.histogram_details().items())
    ]


@router.get("/dump", response_class=PlainTextResponse)
def get_dump(receiver: InMemoryStatsReceiver = Depends(get_in_memory_receiver)):
    """Get the line-oriented ``<name> <value>`` dump as plain text.

    Evaluates every gauge, so like the snapshot it runs in the threadpool.
    """
    buffer = io.StringIO()
    receiver.dump(buffer)
    return buffer.getvalue()


@router.delete("/", status_code=204)
async def clear_stats(receiver: InMemoryStatsReceiver = Depends(get_in_memory_receiver)):
    """Clear counters, stats and gauges of the active receiver."""
    receiver.clear()
    return Response(status_code=204)


@router.get("/health", response_model=StatsHealthModel)
async def get_stats_health(receiver: StatsReceiver = Depends(get_receiver)):
    """Lightweight health check that always returns 200, even when disabled.

    Counts registered entries without calling any gauge producer, so a
    failing or slow producer cannot affect it.
    """
    counter_count = stat_count = gauge_count = 0
    in_memory = _unwrap(receiver)
    if in_memory is not None:
        counter_count = len(in_memory.counters)
        stat_count = len(in_memory.stats)
        gauge_count = len(in_memory.gauges)

    return StatsHealthModel(
        receiver_enabled=not receiver.is_null(),
        counter_count=counter_count,
        stat_count=stat_count,
        gauge_count=gauge_count,
        version=settings.VERSION,
    )
