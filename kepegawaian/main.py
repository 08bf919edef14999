"""Kepegawaian API - FastAPI with SQLAlchemy."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
import time
import uuid

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from . import __version__, routers
from .config import Settings, get_settings
from .database import Database
from .envelope import error_response
from .exceptions import BindError, ResourceError
from .logging_config import (
    bind_request_context,
    clear_request_context,
    get_logger,
    setup_logging,
)
from .resources import RESOURCES

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    settings: Settings = app.state.settings
    database: Database = app.state.database
    setup_logging(
        service_name=settings.service_name,
        log_format=settings.log_format,
        log_level=settings.log_level,
    )

    if settings.check_database_on_startup:
        try:
            await database.ping()
        except Exception as e:
            # Nothing can be served without the database
            logger.critical("database_unavailable", error=str(e), error_type=type(e).__name__)
            raise

    if settings.auto_create_tables:
        await database.create_all()
        logger.info("tables_created")

    yield

    await database.dispose()


async def correlation_middleware(request: Request, call_next):
    correlation_id = request.headers.get("X-Correlation-ID", f"req_{uuid.uuid4().hex[:8]}")
    bind_request_context(
        correlation_id=correlation_id, method=request.method, path=request.url.path
    )

    start = time.time()

    try:
        response = await call_next(request)
        duration_ms = (time.time() - start) * 1000

        if response.status_code >= 500:  # noqa: PLR2004
            logger.error(
                "http_request_failed",
                status_code=response.status_code,
                duration_ms=round(duration_ms, 2),
            )
        else:
            logger.info(
                "http_request", status_code=response.status_code, duration_ms=round(duration_ms, 2)
            )

        response.headers["X-Correlation-ID"] = correlation_id
        return response
    except Exception as e:
        duration_ms = (time.time() - start) * 1000
        logger.error(
            "http_request_exception",
            error=str(e),
            error_type=type(e).__name__,
            duration_ms=round(duration_ms, 2),
            exc_info=True,
        )
        raise
    finally:
        clear_request_context()


async def resource_error_handler(request: Request, exc: ResourceError) -> JSONResponse:
    logger.info("resource_error", status_code=exc.status_code, message=exc.message)
    return JSONResponse(status_code=exc.status_code, content=error_response(exc.message))


async def bind_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render unparseable bodies, path and query parameters as bind failures."""
    logger.info("request_bind_failed", errors=exc.errors())
    error = BindError()
    return JSONResponse(status_code=error.status_code, content=error_response(error.message))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=500, content=error_response("Internal Server Error"))


def create_app(settings: Settings | None = None) -> FastAPI:
    """Application factory.

    The Database is built here and injected into handlers through
    ``app.state``; no module keeps a global engine.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Kepegawaian API",
        description="CRUD API for employee master data",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = Database(settings.database_url, echo=settings.database_echo)

    app.middleware("http")(correlation_middleware)
    app.add_exception_handler(ResourceError, resource_error_handler)
    app.add_exception_handler(RequestValidationError, bind_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    @app.get("/")
    async def root():
        """Root endpoint - API information."""
        return {
            "name": "Kepegawaian API",
            "version": __version__,
            "resources": [resource.name for resource in RESOURCES],
        }

    app.include_router(routers.health.router)
    for router in routers.resources.routers:
        app.include_router(router)

    return app


def run() -> None:
    """Serve the API with uvicorn using the configured host and port."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "kepegawaian.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
    )


if __name__ == "__main__":
    run()
