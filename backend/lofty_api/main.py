"""Lofty API: FastAPI application factory and entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map every failure to the ServiceResponse envelope
    - CORS configured from settings (not hardcoded)
    - Repositories and services built per app instance and kept on app.state

Design Decisions:
    - create_app() factory over a bare module-level app: tests build isolated
      apps with their own stores instead of resetting shared state
    - Lifespan over @app.on_event: FastAPI recommended pattern
    - OpenAPI docs generated by FastAPI at /docs and /openapi.json
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from lofty_api.api.error_handlers import register_error_handlers
from lofty_api.api.routes import health, lofty_views, users
from lofty_api.config import Settings, get_settings
from lofty_api.core.repository_protocols import UserRepository, ViewRepository
from lofty_api.infrastructure.memory_store import (
    create_user_repository, create_view_repository,
)
from lofty_api.infrastructure.observability import setup_logging
from lofty_api.services.resource_service import UserService, ViewService

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    view_repository: ViewRepository | None = None,
    user_repository: UserRepository | None = None,
) -> FastAPI:
    """Build the application with its own storage and services."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        logger.info(f"{settings.app_name} started")
        yield
        logger.info(f"{settings.app_name} shutting down")

    app = FastAPI(
        title=settings.app_name, version=settings.app_version,
        lifespan=lifespan,
    )

    if view_repository is None:
        view_repository = create_view_repository(seed=settings.seed_demo_data)
    if user_repository is None:
        user_repository = create_user_repository(seed=settings.seed_demo_data)
    app.state.settings = settings
    app.state.view_service = ViewService(view_repository)
    app.state.user_service = UserService(user_repository)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(lofty_views.router)
    app.include_router(users.router)

    register_error_handlers(app)
    return app


app = create_app()
