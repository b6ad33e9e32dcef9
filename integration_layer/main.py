"""
Universal Integration Layer API

FastAPI application joining e-commerce, gaming and fintech profiles into
one view per user:
1. Unified profile with value score, segment and persona
2. Cross-sell insights
3. Coordinated cross-platform actions (simulated)
4. Platform-wide analytics

Version: 1.0.0
"""

import os
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
import uvicorn

from integration_layer.api.routers import (
    analytics_router,
    health_router,
    users_router,
)
from integration_layer.core.config import Settings, settings as default_settings
from integration_layer.middleware.error_handling import register_exception_handlers
from integration_layer.middleware.logging_config import (
    configure_logging,
    correlation_id_middleware,
    get_logger,
)
from integration_layer.store import InMemoryProfileStore, ProfileStore

logger = get_logger(__name__)


# ==================== Application Lifespan ====================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: startup and shutdown."""
    logger.info(
        "application_starting",
        version=app.state.settings.version,
        environment=app.state.settings.environment,
        users_loaded=len(app.state.profile_store.list_user_ids())
    )
    yield
    logger.info("application_stopping")


# ==================== Application Factory ====================

def create_app(
    profile_store: Optional[ProfileStore] = None,
    settings: Optional[Settings] = None
) -> FastAPI:
    """
    Build the API application.

    Args:
        profile_store: Source of users and platform profiles
            (default: in-memory demo fixtures)
        settings: Configuration override (default: environment settings)
    """
    settings = settings or default_settings
    configure_logging(log_level=settings.log_level, json_logs=settings.json_logs)

    app = FastAPI(
        title=settings.app_name,
        description="Unified cross-platform user profiles, value scoring and cross-sell insights",
        version=settings.version,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.profile_store = profile_store or InMemoryProfileStore.with_fixture_data()

    # ==================== Exception Handlers ====================
    register_exception_handlers(app)

    # ==================== Middleware ====================
    app.middleware("http")(correlation_id_middleware)

    origins = settings.cors_origins_list
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials="*" not in origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", "X-Requested-With", "X-Correlation-ID"],
        expose_headers=["X-Correlation-ID"],
    )
    logger.info("cors_configured", origins=origins)

    # ==================== Routers ====================
    app.include_router(health_router, prefix=settings.api_prefix)
    app.include_router(users_router, prefix=settings.api_prefix)
    app.include_router(analytics_router, prefix=settings.api_prefix)

    # Dashboard build, mounted last so API routes take precedence
    if os.path.isdir(settings.static_dir):
        app.mount("/", StaticFiles(directory=settings.static_dir, html=True), name="dashboard")
        logger.info("static_files_mounted", directory=settings.static_dir)

    return app


app = create_app()


def run():
    """Console entry point."""
    uvicorn.run(
        "integration_layer.main:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8080")),
    )


if __name__ == "__main__":
    run()
