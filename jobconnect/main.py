"""Main FastAPI application."""

from contextlib import asynccontextmanager
from typing import Optional

import sentry_sdk
import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.logging import LoggingIntegration
from starlette.exceptions import HTTPException as StarletteHTTPException

from jobconnect.api import api_router
from jobconnect.config import Settings, settings as default_settings
from jobconnect.core.exceptions import JobConnectError, UnhandledError, ValidationError
from jobconnect.core.logging import setup_logging
from jobconnect.core.sessions import SessionStore, build_session_store
from jobconnect.core.validation import format_errors
from jobconnect.db.session import create_engine
from jobconnect.storage import DatabaseStorage, Storage

logger = structlog.get_logger(__name__)


def init_sentry(settings: Settings) -> None:
    """Initialize Sentry error tracking when a DSN is configured."""
    if not (settings.SENTRY_DSN and settings.SENTRY_DSN.startswith("https://")):
        logger.info("sentry_disabled")
        return

    sentry_sdk.init(
        dsn=settings.SENTRY_DSN,
        environment=settings.SENTRY_ENVIRONMENT,
        traces_sample_rate=settings.SENTRY_TRACES_SAMPLE_RATE,
        integrations=[
            FastApiIntegration(),
            LoggingIntegration(
                level=None,  # Capture all logs as breadcrumbs
                event_level="ERROR",  # Only send ERROR and above as events
            ),
        ],
        release=settings.APP_VERSION,
        attach_stacktrace=True,
        send_default_pii=False,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Map every error to a JSON body with a human-readable ``message``."""

    @app.exception_handler(JobConnectError)
    async def jobconnect_error_handler(request: Request, exc: JobConnectError):
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(request: Request, exc: RequestValidationError):
        error = ValidationError(format_errors(exc.errors()))
        return JSONResponse(status_code=error.status_code, content=error.to_dict())

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("unhandled_error", method=request.method, path=request.url.path)
        error = UnhandledError()
        return JSONResponse(status_code=error.status_code, content=error.to_dict())


def create_app(
    settings: Optional[Settings] = None,
    storage: Optional[Storage] = None,
    session_store: Optional[SessionStore] = None,
) -> FastAPI:
    """Build the application.

    ``storage`` and ``session_store`` may be injected (tests use in-memory
    implementations); anything not injected is built from ``settings`` on
    startup and closed on shutdown.
    """
    settings = settings or default_settings
    setup_logging(settings)
    init_sentry(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan events."""
        owns_storage = app.state.storage is None
        if owns_storage:
            app.state.storage = DatabaseStorage(create_engine(settings))
            if settings.AUTO_CREATE_TABLES:
                await app.state.storage.create_tables()

        if app.state.session_store is None:
            app.state.session_store = build_session_store(settings)
        await app.state.session_store.connect()

        logger.info(
            "app_started",
            environment=settings.ENVIRONMENT,
            storage=type(app.state.storage).__name__,
            session_store=type(app.state.session_store).__name__,
        )
        yield

        await app.state.session_store.disconnect()
        if owns_storage:
            await app.state.storage.close()
        logger.info("app_stopped")

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Two-sided job board: job seekers apply, employers hire",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )
    app.state.settings = settings
    app.state.storage = storage
    app.state.session_store = session_store

    # CORS middleware (credentials are needed for the session cookie)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Include API router
    app.include_router(api_router, prefix="/api")

    @app.get("/", tags=["Health"])
    async def root():
        """Root endpoint."""
        return {
            "message": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "status": "operational",
        }

    @app.get("/health", tags=["Health"])
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "environment": settings.ENVIRONMENT,
            "session_backend": settings.SESSION_BACKEND,
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "jobconnect.main:app",
        host=default_settings.HOST,
        port=default_settings.PORT,
        reload=default_settings.RELOAD,
    )
