"""
memstats diagnostics server

Serves the read-back endpoints of an in-memory stats receiver over HTTP,
for poking at a running process by hand.

Environment Variables:
    STATS_ENABLE_RECEIVER: Install an in-memory receiver at startup (default: true)
                           Set to 'false' to discard all emissions
    HOST: Server host address (default: 127.0.0.1)
    PORT: Server port (default: 8010)
    DEBUG: Enable debug mode with auto-reload (default: false)
    LOG_LEVEL: Root log level (default: INFO)
    LOG_FILE: Optional path of a rotating log file

CLI Usage:
    python main.py

    # Run with collection disabled
    STATS_ENABLE_RECEIVER=false python main.py
"""

import uvicorn

from memstats.core.config import settings
from memstats.core.logging_config import configure_logging

if __name__ == "__main__":
    configure_logging()

    port = settings.PORT
    host = settings.HOST

    print(f"Starting {settings.PROJECT_NAME} on {host}:{port}")
    print(f"Stats receiver: {'in-memory' if settings.STATS_ENABLE_RECEIVER else 'disabled'}")

    # Restrict the reload watch scope to the package itself
    reload_enabled = bool(settings.DEBUG)
    reload_dirs = None
    if reload_enabled:
        from pathlib import Path

        repo_root = Path(__file__).resolve().parent
        reload_dirs = [str(repo_root / "memstats")]

    uvicorn.run(
        "memstats.app:app",
        host=host,
        port=port,
        reload=reload_enabled,
        reload_dirs=reload_dirs,
    )
