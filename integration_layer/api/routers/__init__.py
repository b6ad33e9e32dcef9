"""
API Routers

Exports all routers for the FastAPI application.
"""
from .health import router as health_router
from .users import router as users_router
from .analytics import router as analytics_router

__all__ = [
    "health_router",
    "users_router",
    "analytics_router",
]
