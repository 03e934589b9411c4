from contextlib import asynccontextmanager

from memstats.core.logging_config import configure_logging, get_logger
from fastapi import FastAPI

from memstats.api.v1 import router as api_router
from memstats.core.config import settings
from memstats.middleware.stats_middleware import StatsMiddleware
from memstats.services.stats import (
    InMemoryStatsReceiver,
    NullStatsReceiver,
    get_stats_receiver,
    set_stats_receiver,
)

logger = get_logger("app")


@asynccontextmanager
async def lifespan(_: FastAPI):
    configure_logging()

    # Startup: keep a receiver installed by the caller (e.g. a test)
    if settings.STATS_ENABLE_RECEIVER and get_stats_receiver().is_null():
        set_stats_receiver(InMemoryStatsReceiver())
    elif not settings.STATS_ENABLE_RECEIVER:
        set_stats_receiver(NullStatsReceiver())
    logger.info(f"Stats receiver: {get_stats_receiver()!r}")

    yield


app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Diagnostics for an in-memory stats receiver",
    version=settings.VERSION,
    lifespan=lifespan,
)

app.add_middleware(StatsMiddleware)
app.include_router(api_router)


@app.get("/api/ping")
async def ping():
    """Trivial instrumented route."""
    return {"status": "ok"}
