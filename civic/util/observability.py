"""Logfire setup for the API and migration processes.

Services emit their own spans and events directly:

    with logfire.span("vote_service.toggle_vote", subject_id=str(subject_id)):
        ...
    logfire.warn("Counter clamp", counter="upvote_count", delta=delta)

This module only configures the exporter and instruments the frameworks.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from civic.config import Settings
from civic.util.error import ConfigurationError

SERVICE_NAME = "civic-backend"
SERVICE_VERSION = "0.1.0"


def should_send(settings: Settings) -> bool:
    """Whether telemetry leaves the process.

    An explicit ``OBSERVABILITY__SEND_TO_LOGFIRE`` wins; otherwise having a
    token is enough.

    Raises:
        ConfigurationError: If sending is forced on without a token
    """
    observability = settings.observability
    send = (
        observability.send_to_logfire
        if observability.send_to_logfire is not None
        else bool(observability.logfire_token)
    )
    if send and not observability.logfire_token:
        raise ConfigurationError(
            "OBSERVABILITY__SEND_TO_LOGFIRE is set but no Logfire token was provided"
        )
    return send


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once per process, before the app is built."""
    send = should_send(settings)

    options: dict = {
        "service_name": SERVICE_NAME,
        "service_version": SERVICE_VERSION,
        "environment": settings.environment,
        "send_to_logfire": send,
        "console": logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    }
    if settings.observability.logfire_token:
        options["token"] = settings.observability.logfire_token

    logfire.configure(**options)
    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send,
        git_sha=settings.git_sha,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request except health probes."""
    logfire.instrument_fastapi(app, capture_headers=False, excluded_urls="/health")


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace statements, including row locks and counter updates in atomic blocks."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
