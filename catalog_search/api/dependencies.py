"""
Dependency Injection
FastAPI dependencies for settings, the search backend and services.
"""

import logging
from typing import Optional

from fastapi import Depends, Request

from ..config import SearchSettings, get_settings
from ..db.session import get_session_factory
from ..search import QueryCompiler, SearchService, get_query_compiler
from ..search.backends import InMemorySearchBackend, PostgresSearchBackend, SearchBackend, Visibility

logger = logging.getLogger(__name__)

_backend: Optional[SearchBackend] = None


def create_search_backend(settings: SearchSettings) -> SearchBackend:
    """
    Build the configured search backend.

    Args:
        settings: Search settings

    Returns:
        PostgreSQL backend, or an in-memory backend seeded from
        SEARCH_MEMORY_PRODUCTS
    """
    if settings.search_backend == "memory":
        if settings.memory_products_path:
            return InMemorySearchBackend.from_json(
                settings.memory_products_path,
                similarity_threshold=settings.trigram_threshold,
            )
        logger.warning("Memory search backend has no SEARCH_MEMORY_PRODUCTS; it will be empty")
        return InMemorySearchBackend([], similarity_threshold=settings.trigram_threshold)

    return PostgresSearchBackend(
        session_factory=get_session_factory(),
        text_configs=settings.text_configs,
        similarity_threshold=settings.trigram_threshold,
    )


def get_search_backend() -> SearchBackend:
    """Get search backend (singleton)."""
    global _backend
    if _backend is None:
        _backend = create_search_backend(get_settings())
        logger.info(f"Search backend created: {_backend.name}")
    return _backend


def reset_search_backend() -> None:
    """Forget the backend singleton (useful for testing)."""
    global _backend
    _backend = None


def get_compiler() -> QueryCompiler:
    return get_query_compiler()


def get_search_service(
    backend: SearchBackend = Depends(get_search_backend),
    compiler: QueryCompiler = Depends(get_compiler),
    settings: SearchSettings = Depends(get_settings),
) -> SearchService:
    """
    Get search service instance.

    Use as FastAPI dependency:
        @router.post("/search")
        async def search(service: SearchService = Depends(get_search_service)):
            ...
    """
    return SearchService(
        backend=backend,
        compiler=compiler,
        visibility=Visibility(include_hidden=settings.include_hidden),
    )


def get_request_id(request: Request) -> str:
    """Request id set by the logging middleware."""
    return getattr(request.state, "request_id", "-")
