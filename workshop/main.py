"""
Application entry point.

Creates the FastAPI application and wires together:
- Person repository, transaction manager and service (composition root)
- Routers (one per bounded context)
- Error handlers (centralized domain-to-HTTP mapping)
- Security middleware (headers, rate limiting, CORS)
- Logging configuration

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from workshop.application.people.service import DefaultPersonService, PersonService
from workshop.core.config import Settings, settings as default_settings
from workshop.domain.people.ports import PersonRepository
from workshop.infrastructure.db import SqlTransactionManager, build_engine
from workshop.infrastructure.people.in_memory_repository import InMemoryPersonRepository
from workshop.infrastructure.people.schema import create_schema
from workshop.infrastructure.people.sql_repository import SqlPersonRepository
from workshop.interfaces.health import router as health_router
from workshop.interfaces.people.router import router as people_router
from workshop.shared.errors.handlers import register_error_handlers
from workshop.shared.logging import configure_logging
from workshop.shared.request_logging import RequestLoggingMiddleware
from workshop.shared.security.headers import SecurityHeadersMiddleware
from workshop.shared.security.rate_limiting import (
    build_limiter,
    rate_limit_exceeded_handler,
)

logger = logging.getLogger(__name__)


def build_person_service(
    settings: Settings, app: FastAPI, repository: Optional[PersonRepository] = None
) -> PersonService:
    """Assemble the PersonService for the configured backend.

    An explicit repository wins over the configured backend. The SQL
    engine, when one is built, is kept on `app.state.engine` so the
    lifespan can dispose of it.
    """
    if repository is not None:
        logger.info("Using injected repository %s", type(repository).__name__)
        return DefaultPersonService(repository)

    if settings.repository_backend == "sql":
        engine = build_engine(settings.database_url)
        app.state.engine = engine
        if settings.database_create_schema:
            create_schema(engine)
        transactions = SqlTransactionManager(engine)
        logger.info("Using SQL person repository (%s)", engine.url.render_as_string())
        return DefaultPersonService(SqlPersonRepository(transactions), transactions)

    logger.info("Using in-memory person repository")
    return DefaultPersonService(InMemoryPersonRepository())


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: release the database pool on shutdown."""
    yield
    engine = getattr(app.state, "engine", None)
    if engine is not None:
        engine.dispose()


def create_app(
    settings: Optional[Settings] = None,
    repository: Optional[PersonRepository] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and security middleware.
    This is the composition root of the application.

    Args:
        settings: Settings to use instead of the environment-loaded ones.
        repository: Repository to use instead of the configured backend.

    Returns:
        A fully configured FastAPI application instance.
    """
    settings = settings or default_settings
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.person_service = build_person_service(settings, app, repository)

    # --- Rate Limiting ---
    app.state.limiter = build_limiter(settings)
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    # --- Security Middleware ---
    # RequestLoggingMiddleware renders uncaught errors, so it must sit
    # inside the layers that decorate every response.
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(SecurityHeadersMiddleware)
    if settings.cors_allowed_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_allowed_origins,
            allow_credentials=True,
            allow_methods=["GET", "POST", "PUT", "DELETE"],
            allow_headers=["*"],
        )

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router, prefix=settings.api_prefix)
    app.include_router(people_router, prefix=settings.api_prefix)

    return app


app = create_app()
