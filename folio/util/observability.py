"""Logfire setup.

Services, use cases and repositories open ``logfire.span`` blocks and emit
``logfire.info``/``warn`` events; this module decides where those go and
hooks Logfire into FastAPI and SQLAlchemy.

    with logfire.span("create_entry.execute", kind=kind.value):
        logfire.info("Entry created", entry_id=str(entry.id))
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from folio.config import Settings

SERVICE_NAME = "folio-api"

# Never ship the admin password or session token with telemetry
_SCRUB_PATTERNS = ["admin_password", "admin_token", "jwt_secret"]


def should_send_to_logfire(settings: Settings) -> bool:
    """Explicit OBSERVABILITY__SEND_TO_LOGFIRE wins, else send when a token is set."""
    if settings.observability.send_to_logfire is not None:
        return settings.observability.send_to_logfire
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the current environment.

    Without a token everything is printed to the console only.

    Args:
        settings: Application settings
    """
    send = should_send_to_logfire(settings)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version="0.1.0",
        environment=settings.environment,
        send_to_logfire=send,
        token=settings.observability.logfire_token,
        scrubbing=logfire.ScrubbingOptions(
            extra_patterns=[*_SCRUB_PATTERNS, settings.auth.cookie_name]
        ),
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Logfire configured",
        environment=settings.environment,
        send_to_logfire=send,
        list_tolerance_seconds=settings.publishing.list_tolerance_seconds,
        publish_timezone=settings.publishing.timezone,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace HTTP requests, leaving health probes out.

    Headers are not captured because the admin cookie carries the session.
    """

    def _request_attributes(request, attributes):
        if hasattr(request, "url"):
            return {**attributes, "path": request.url.path}
        return attributes

    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        excluded_urls="/health",
        request_attributes_mapper=_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace queries issued through the async engine."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
    logfire.debug("SQLAlchemy instrumented", dialect=engine.dialect.name)
