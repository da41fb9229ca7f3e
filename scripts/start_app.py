#!/usr/bin/env python3
"""Serve the civic API with uvicorn.

Usage:
    python scripts/start_app.py            # HOST/PORT from settings
    python scripts/start_app.py --reload   # development autoreload

Logging and Logfire are configured before uvicorn imports the app, so
errors raised while building the app are reported too.
"""

import sys

import logfire
import uvicorn

from civic.config import Settings
from civic.util.logging import setup_logging
from civic.util.observability import configure_logfire

APP_FACTORY = "civic.interface.api.app:create_app"


def main(argv: list[str]) -> int:
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    reload = "--reload" in argv[1:]
    if reload and settings.environment == "production":
        logfire.warn("Ignoring --reload in production")
        reload = False

    logfire.info(
        "Starting civic API",
        host=settings.host,
        port=settings.port,
        reload=reload,
        git_sha=settings.git_sha,
    )
    try:
        uvicorn.run(
            APP_FACTORY,
            factory=True,
            host=settings.host,
            port=settings.port,
            reload=reload,
            log_level="debug" if settings.debug else "info",
        )
    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
