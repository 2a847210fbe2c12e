"""Logfire setup for the API process and its database engine.

Services emit spans named ``<service>.<operation>`` and events keyed by the
entity IDs they touch, e.g.::

    with logfire.span("vote_service.cast_vote", answer_id=str(answer_id)):
        logfire.info("Vote cast", action=action.value, total=count.total)
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from qna.config import Settings

SERVICE_NAME = "qna-api"

# Path parameters copied onto request spans so traces can be filtered by entity
TRACED_PATH_PARAMS = ("question_id", "answer_id")


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once at process start.

    Without OBSERVABILITY__LOGFIRE_TOKEN events stay on the console.
    OBSERVABILITY__SEND_TO_LOGFIRE overrides the token-based default.

    Args:
        settings: Application settings
    """
    observability = settings.observability

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=settings.api.version,
        environment=settings.environment,
        token=observability.logfire_token,
        send_to_logfire=observability.should_send,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=observability.should_send,
    )


def _request_attributes(request, attributes):
    """Add method, path and Q&A entity IDs to each request span."""
    result = {**attributes}
    result["method"] = getattr(request, "method", None)
    result["path"] = request.url.path

    path_params = getattr(request, "path_params", {}) or {}
    for name in TRACED_PATH_PARAMS:
        if name in path_params:
            result[name] = str(path_params[name])

    return result


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every API request except health checks.

    Headers are not captured: Authorization carries bearer tokens.

    Args:
        app: FastAPI application instance
    """
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_request_attributes,
        excluded_urls="/health",
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace statements issued through the engine, including row locks.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
    logfire.info("SQLAlchemy instrumented", pool_size=engine.pool.size())
