"""FastAPI application factory and configuration.

This module provides the application factory function for creating
and configuring the FastAPI application with all middleware, routes,
and error handlers.
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from smarthome.core.config import Settings, get_settings
from smarthome.core.exceptions import ErrorKind, SmartHomeError
from smarthome.core.logging import (
    bind_correlation_id,
    clear_context,
    configure_logging,
    get_logger,
    new_correlation_id,
)
from smarthome.infrastructure.api.container import ServiceContainer, build_container

logger = get_logger(__name__)

ERROR_STATUS_CODES = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.ACTION_FAILED: 409,
    ErrorKind.IGNORED: 400,
}


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Args:
        app: FastAPI application instance.

    Yields:
        None: Control is yielded to the application during its lifetime.
    """
    settings = get_settings()
    configure_logging(settings)
    logger.info(
        "Starting SmartHome Rules",
        app_name=settings.app_name,
        version=settings.app_version,
        environment=settings.environment,
    )

    yield

    logger.info("Shutting down SmartHome Rules")


def create_app(
    settings: Settings | None = None, container: ServiceContainer | None = None
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Settings to use; loaded from the environment if omitted.
        container: Pre-built services, e.g. with devices registered. Built
            from ``settings`` if omitted.

    Returns:
        FastAPI: Configured FastAPI application instance.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Smart home automation rules: condition interpreter and action scripts",
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
        openapi_url="/openapi.json" if settings.is_development else None,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.container = container or build_container(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    register_health_check(app)
    register_routes(app, settings)
    register_exception_handlers(app)
    register_middleware(app)

    return app


def register_health_check(app: FastAPI) -> None:
    """Register health check endpoints.

    Args:
        app: FastAPI application instance.
    """

    @app.get("/health", tags=["health"])
    async def health_check():
        """Basic health check endpoint."""
        settings = app.state.settings
        return {
            "status": "healthy",
            "service": settings.app_name,
            "version": settings.app_version,
            "home_mode": app.state.container.device_service.get_home_mode().value,
        }


def register_routes(app: FastAPI, settings: Settings) -> None:
    """Register API routes.

    Args:
        app: FastAPI application instance.
        settings: Settings providing the API prefix.
    """
    from smarthome.infrastructure.api.routes import (
        devices_router,
        interpreter_router,
        rules_router,
        scenes_router,
    )

    app.include_router(rules_router, prefix=f"{settings.api_prefix}/rules", tags=["rules"])
    app.include_router(
        interpreter_router, prefix=f"{settings.api_prefix}/interpreter", tags=["interpreter"]
    )
    app.include_router(devices_router, prefix=f"{settings.api_prefix}/devices", tags=["devices"])
    app.include_router(scenes_router, prefix=f"{settings.api_prefix}/scenes", tags=["scenes"])


def _error_body(status_code: int, error: str, message: str) -> dict:
    return {
        "status": status_code,
        "error": error,
        "message": message,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


def register_exception_handlers(app: FastAPI) -> None:
    """Register global exception handlers.

    Args:
        app: FastAPI application instance.
    """

    @app.exception_handler(SmartHomeError)
    async def smarthome_error_handler(request: Request, exc: SmartHomeError):
        """Map error kinds to HTTP status codes."""
        status_code = ERROR_STATUS_CODES.get(exc.kind, 400)
        logger.warning(
            "Request failed",
            path=str(request.url.path),
            kind=exc.kind.value,
            error=exc.message,
        )
        return JSONResponse(
            status_code=status_code,
            content=_error_body(status_code, exc.kind.value.upper(), exc.message),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Report invalid request fields without echoing the raw input."""
        details = [
            {"loc": [str(part) for part in error["loc"]], "msg": error["msg"]}
            for error in exc.errors()
        ]
        body = _error_body(422, "VALIDATION", "Request validation failed")
        body["details"] = details
        return JSONResponse(status_code=422, content=body)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Handle uncaught exceptions."""
        logger.error(
            "Unhandled exception",
            path=str(request.url),
            method=request.method,
            error=str(exc),
            exc_type=type(exc).__name__,
        )
        message = str(exc) if app.state.settings.debug else "An unexpected error occurred"
        return JSONResponse(status_code=500, content=_error_body(500, "INTERNAL_ERROR", message))


def register_middleware(app: FastAPI) -> None:
    """Register custom middleware.

    Args:
        app: FastAPI application instance.
    """

    @app.middleware("http")
    async def logging_middleware(request: Request, call_next):
        """Log each request and propagate a correlation ID."""
        correlation_id = request.headers.get("X-Correlation-ID") or new_correlation_id()
        bind_correlation_id(correlation_id)

        logger.info("Request started", method=request.method, path=str(request.url.path))
        try:
            response = await call_next(request)
            logger.info(
                "Request completed",
                method=request.method,
                path=str(request.url.path),
                status_code=response.status_code,
            )
            response.headers["X-Correlation-ID"] = correlation_id
            return response
        finally:
            clear_context()


# Create the application instance
app = create_app()
