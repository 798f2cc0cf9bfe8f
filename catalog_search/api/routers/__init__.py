"""
API Routers
FastAPI route handlers for different endpoints.
"""

from .health import router as health_router
from .search import router as search_router
from .units import router as units_router

__all__ = [
    "health_router",
    "search_router",
    "units_router",
]
