"""
Health Check Endpoints
Endpoints for health checks and status monitoring.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter, Depends, status

from ...config import SearchSettings, get_settings
from ...search import QueryCompiler
from ...search.backends import SearchBackend
from ..dependencies import get_compiler, get_search_backend

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
async def health_check() -> Dict[str, str]:
    """
    Basic health check.

    Returns:
        Simple health status
    """
    return {"status": "healthy", "timestamp": datetime.now(timezone.utc).isoformat()}


@router.get("/status", status_code=status.HTTP_200_OK)
async def status_check(
    settings: SearchSettings = Depends(get_settings),
    backend: SearchBackend = Depends(get_search_backend),
    compiler: QueryCompiler = Depends(get_compiler),
) -> Dict[str, Any]:
    """
    Detailed status check.

    Reports the synonym catalog size and whether the search backend
    answers.
    """
    status_info = {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": settings.version,
        "components": {
            "synonym_catalog": {"status": "loaded", **compiler.catalog.stats()},
        },
    }

    reachable = await backend.ping()
    status_info["components"]["search_backend"] = {
        "status": "healthy" if reachable else "unhealthy",
        "name": backend.name,
    }
    if not reachable:
        status_info["status"] = "degraded"

    return status_info
