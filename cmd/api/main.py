"""
FastAPI Service - Main entry point for the Todolist API.
Implements clean separation of concerns with comprehensive logging and error handling:
- Routes are separated into modules
- PostgreSQL (asyncpg) for data persistence
- Domain errors mapped to HTTP status codes in one place
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi import status as http_status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from adapters.postgres import SCHEMA_SQL
from core.config import get_settings
from core.container import Container, bootstrap_container
from core.database import Database
from core.logger import get_logger, logger, setup_logger
from domain.errors import INTERNAL_SERVER_ERROR, DomainError, ErrorKind
from internal.api.routes import (
    comment_router,
    create_health_routes,
    label_router,
    task_router,
)
from internal.api.utils import domain_error_response, error_response


# Lifespan context manager
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan - startup and shutdown.
    Connects to PostgreSQL on startup; an unreachable database is fatal.
    """
    settings = get_settings()
    logger.info(
        f"========== Starting {settings.app_name} v{settings.app_version} API service =========="
    )
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Debug mode: {settings.debug}")
    logger.info(f"API: {settings.api_host}:{settings.api_port}")

    database = Database(
        settings.database_dsn,
        get_logger("database"),
        min_pool_size=settings.database_min_pool_size,
        max_pool_size=settings.database_max_pool_size,
        command_timeout=settings.database_command_timeout,
        max_retries=settings.database_connect_retries,
    )

    # Initialize PostgreSQL connection
    try:
        logger.info("Initializing PostgreSQL connection...")
        await database.connect()

        if settings.database_auto_migrate:
            await database.create_schema(SCHEMA_SQL)
    except Exception as e:
        logger.error(f"Failed to initialize PostgreSQL: {e}")
        logger.exception("PostgreSQL initialization error details:")
        await database.close()
        raise

    # Initialize DI Container
    bootstrap_container(database)
    app.state.database = database
    logger.info("DI Container initialized")

    logger.info(
        f"========== {settings.app_name} API service started successfully =========="
    )

    try:
        yield
    finally:
        # Shutdown sequence
        logger.info("========== Shutting down API service ==========")
        Container.clear()
        await database.close()
        logger.info("========== API service stopped successfully ==========")


def register_exception_handlers(app: FastAPI) -> None:
    """Add exception handlers for standard response format."""

    @app.exception_handler(DomainError)
    async def domain_exception_handler(request: Request, exc: DomainError):
        """Map error kinds to HTTP status codes."""
        # Internal errors are logged with their cause where they are raised
        if not exc.is_kind(ErrorKind.INTERNAL):
            logger.warning(f"{request.method} {request.url.path}: {exc!r}")
        return domain_error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ):
        """Handle validation errors with standard response format."""
        errors = exc.errors()
        error_msg = "; ".join([f"{e['loc'][-1]}: {e['msg']}" for e in errors])
        logger.warning(f"Validation error: {error_msg}")
        return JSONResponse(
            status_code=http_status.HTTP_400_BAD_REQUEST,
            content=error_response(message=f"Validation error: {error_msg}"),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Handle HTTP exceptions with standard response format."""
        logger.warning(f"HTTP error: {exc.status_code} {exc.detail}")
        return JSONResponse(
            status_code=exc.status_code,
            content=error_response(message=str(exc.detail)),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle all other exceptions without leaking details to the caller."""
        logger.error(f"Unhandled exception: {type(exc).__name__}: {exc}")
        logger.exception("Exception details:")
        return JSONResponse(
            status_code=http_status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_response(message=INTERNAL_SERVER_ERROR),
        )


def create_app() -> FastAPI:
    """
    Factory function to create and configure the FastAPI application.

    Returns:
        FastAPI: Configured application instance
    """
    setup_logger()
    logger.info("Creating FastAPI application...")
    settings = get_settings()

    # OpenAPI metadata
    description = """
## Todolist API

Task management backed by PostgreSQL.

### Key Features

* **Tasks** - Create, list, update, complete and delete tasks
* **Comments** - Attach text comments to a task
* **Labels** - Tag tasks with case-insensitive labels, unique per task
* **Soft deletion** - Deleted entities disappear from every read

### Dates

All dates use the layout `YYYY-MM-DDTHH:MM:SS.mmmZ` (UTC), e.g. `2024-01-01T00:00:00.000Z`.
    """

    tags_metadata = [
        {
            "name": "Tasks",
            "description": "Task operations. Pages hold 20 tasks.",
        },
        {
            "name": "Comments",
            "description": "Comments attached to a task.",
        },
        {
            "name": "Labels",
            "description": "Labels attached to a task. Stored in lowercase.",
        },
        {
            "name": "Health",
            "description": "Health check endpoints for monitoring API status and PostgreSQL.",
        },
    ]

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description=description,
        lifespan=lifespan,
        openapi_tags=tags_metadata,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure appropriately for production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include all API routes
    app.include_router(task_router)
    logger.info("✅ Task routes registered")

    app.include_router(comment_router)
    logger.info("✅ Comment routes registered")

    app.include_router(label_router)
    logger.info("✅ Label routes registered")

    # Health routes (no prefix - uses root "/" and "/health")
    app.include_router(create_health_routes(app))
    logger.info("✅ Health routes registered")

    register_exception_handlers(app)

    logger.info("FastAPI application created successfully")
    return app


# Create application instance
app = create_app()


# Run with: uvicorn cmd.api.main:app --host 0.0.0.0 --port 10000
if __name__ == "__main__":
    import uvicorn

    settings = get_settings()

    logger.info("========== Starting Uvicorn Server ==========")
    logger.info(f"Host: {settings.api_host}")
    logger.info(f"Port: {settings.api_port}")
    logger.info(f"TLS: {settings.tls_enabled}")

    tls_options = {}
    if settings.tls_enabled:
        tls_options = {
            "ssl_certfile": settings.ssl_certfile,
            "ssl_keyfile": settings.ssl_keyfile,
        }

    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_level="info" if settings.debug else "warning",
        **tls_options,
    )
