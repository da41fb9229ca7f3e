"""FastAPI application."""

from fastapi import FastAPI

from civic.interface.api.routes import (
    comments,
    counters,
    health,
    issues,
    join_requests,
    role_requests,
    votes,
)
from civic.interface.error import register_error_handlers
from civic.util.di.container import create_container, setup_di
from civic.util.observability import instrument_fastapi


def create_app() -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    """
    app_instance = FastAPI(
        title="Civic API",
        description="Backend core for civic issue reporting: weighted votes, comments, groups and role requests",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    container = create_container()
    setup_di(app_instance, container)

    register_error_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(votes.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(issues.router)
    app_instance.include_router(join_requests.router)
    app_instance.include_router(role_requests.router)
    app_instance.include_router(counters.router)

    return app_instance
