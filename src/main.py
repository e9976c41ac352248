"""
Main FastAPI application entry point.

Builds the FastAPI application: routers, trace middleware, CORS and the
global Problem Details exception handlers.

Run locally:
    uvicorn src.main:app --reload
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.core.config import settings
from src.core.container import get_database, get_logger
from src.presentation.routers import auth_router, system_router, users_router
from src.presentation.routers.api.errors import register_exception_handlers
from src.presentation.routers.api.middleware.trace_middleware import TraceMiddleware


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    Startup creates tables when ``auto_create_tables`` is set (development
    and tests; production runs Alembic). Shutdown disposes the engine.

    Args:
        app: FastAPI application instance.

    Yields:
        None during application lifetime.
    """
    logger = get_logger()
    database = get_database()

    if settings.auto_create_tables:
        await database.create_all()
        logger.info("database_tables_created")

    logger.info("application_started", version=settings.app_version)

    yield

    await database.close()
    logger.info("application_stopped")


# Initialize FastAPI application with settings and lifespan
app = FastAPI(
    title=settings.app_name,
    description="Email/password authentication with OTP verification",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.debug,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-Trace-Id"],
)

# Wire trace middleware (request correlation)
app.add_middleware(TraceMiddleware)

# Register global exception handlers (RFC 7807 error responses)
register_exception_handlers(app)

app.include_router(system_router)
app.include_router(auth_router)
app.include_router(users_router)
