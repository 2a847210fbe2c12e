"""FastAPI application."""

from http import HTTPStatus
from typing import Optional

from dishka import AsyncContainer
import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from qna.config import Settings
from qna.domain.error import (
    BusinessRuleViolationError,
    ConflictError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from qna.interface.api.routes import answers, health, questions
from qna.util.di.container import create_container, setup_di
from qna.util.observability import instrument_fastapi


def _error(status_code: int, error: str, detail: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code, content={"error": error, "detail": detail}
    )


def _format_errors(errors) -> str:
    parts = []
    for err in errors:
        loc = ".".join(str(p) for p in err.get("loc", ()) if p not in ("body", "query"))
        parts.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return "; ".join(parts)


def register_error_handlers(app_instance: FastAPI) -> None:
    """Map domain and validation errors to JSON error responses."""

    @app_instance.exception_handler(NotFoundError)
    async def not_found(request: Request, exc: NotFoundError) -> JSONResponse:
        return _error(
            status.HTTP_404_NOT_FOUND, "NotFoundError", f"{exc.resource} not found"
        )

    @app_instance.exception_handler(NotAuthorizedError)
    async def not_authorized(request: Request, exc: NotAuthorizedError) -> JSONResponse:
        logfire.info("Forbidden", path=request.url.path, detail=str(exc))
        return _error(status.HTTP_403_FORBIDDEN, "NotAuthorizedError", str(exc))

    @app_instance.exception_handler(ValidationError)
    @app_instance.exception_handler(BusinessRuleViolationError)
    async def bad_request(request: Request, exc: Exception) -> JSONResponse:
        return _error(status.HTTP_400_BAD_REQUEST, type(exc).__name__, str(exc))

    @app_instance.exception_handler(RequestValidationError)
    async def request_invalid(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return _error(
            status.HTTP_400_BAD_REQUEST, "ValidationError", _format_errors(exc.errors())
        )

    @app_instance.exception_handler(PydanticValidationError)
    async def model_invalid(
        request: Request, exc: PydanticValidationError
    ) -> JSONResponse:
        return _error(
            status.HTTP_400_BAD_REQUEST, "ValidationError", _format_errors(exc.errors())
        )

    @app_instance.exception_handler(ConflictError)
    async def conflict(request: Request, exc: ConflictError) -> JSONResponse:
        logfire.error("Unresolved write conflict", path=request.url.path)
        return _error(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "ConflictError", str(exc)
        )

    @app_instance.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        phrase = HTTPStatus(exc.status_code).phrase.replace(" ", "")
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": phrase, "detail": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app_instance.exception_handler(Exception)
    async def unhandled(request: Request, exc: Exception) -> JSONResponse:
        logfire.exception(
            "Unhandled error", path=request.url.path, error_type=type(exc).__name__
        )
        return _error(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "InternalServerError",
            "An unexpected error occurred",
        )


def create_app(container: Optional[AsyncContainer] = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to mount; defaults to the production container
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Q&A API",
        description="Backend API for a question-and-answer community",
        version=settings.api.version,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    # Setup dependency injection
    # Settings are loaded from environment automatically
    if container is None:
        container = create_container()
    setup_di(app_instance, container)

    register_error_handlers(app_instance)

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(questions.router)
    app_instance.include_router(answers.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
