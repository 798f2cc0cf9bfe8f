"""
Search Endpoints
POST /search - ranked product ids; GET /search/compile, /search/units and
/search/groups.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from ...config import SearchSettings, get_settings
from ...search import QueryCompiler, SearchBackendError, SearchService
from ..dependencies import get_compiler, get_request_id, get_search_service
from ..errors import InvalidRequestError, SearchError
from ..models.search import (
    BucketModel,
    CompileResponse,
    GroupModel,
    SearchRequest,
    SearchResponse,
)
from ..models.units import UnitFacetModel

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["search"])


@router.post("/search", response_model=SearchResponse, status_code=status.HTTP_200_OK)
async def search(
    request: SearchRequest,
    search_service: SearchService = Depends(get_search_service),
    settings: SearchSettings = Depends(get_settings),
    request_id: str = Depends(get_request_id),
) -> SearchResponse:
    """
    Search products by free text.

    Args:
        request: Query and pagination
        search_service: Search service instance
        settings: Search settings
        request_id: Request ID for tracing

    Returns:
        Ranked product ids with the unpaginated total
    """
    limit = request.limit or settings.default_limit
    if limit > settings.max_limit:
        raise InvalidRequestError(
            message=f"limit must be <= {settings.max_limit}",
            details={"limit": limit, "max_limit": settings.max_limit},
        )

    logger.info(f"Search request: query='{request.query}'", extra={"request_id": request_id})

    try:
        page = await search_service.search(request.query, limit=limit, offset=request.offset)
    except SearchBackendError as e:
        raise SearchError(
            message="Search engine unavailable",
            details={"query": request.query, "arm": e.arm, "error": e.message},
        )

    return SearchResponse(
        ids=page.ids,
        total=page.total,
        offset=request.offset,
        limit=limit,
        page=request.offset // limit + 1,
        query=request.query,
        expression=page.expression,
        search_time_ms=page.search_time_ms,
    )


@router.get("/search/compile", response_model=CompileResponse)
async def compile_search_query(
    query: str = Query(..., max_length=500, description="Search query text"),
    compiler: QueryCompiler = Depends(get_compiler),
) -> CompileResponse:
    """Show how a query compiles into a text-search expression."""
    compiled = compiler.compile_query(query)
    return CompileResponse(
        query=query,
        tokens=compiled.tokens,
        expression=compiled.expression,
        buckets=[BucketModel(**bucket.to_dict()) for bucket in compiled.buckets],
    )


@router.get("/search/units", response_model=List[UnitFacetModel])
async def search_units(
    value: Optional[str] = Query(None, max_length=500, description="Search query text"),
    group: Optional[str] = Query(None, description="Product group human id"),
    search_service: SearchService = Depends(get_search_service),
) -> List[UnitFacetModel]:
    """
    Unit facets for the products matching a query.

    Returns:
        Facets ordered by product count
    """
    if not value or not value.strip():
        raise InvalidRequestError(message="value is required", details={"param": "value"})

    try:
        facets = await search_service.search_units(value, group_human_id=group)
    except SearchBackendError as e:
        raise SearchError(
            message="Search engine unavailable",
            details={"query": value, "arm": e.arm, "error": e.message},
        )

    return [UnitFacetModel(**facet.to_dict()) for facet in facets]


@router.get("/search/groups", response_model=List[GroupModel])
async def search_groups(
    value: Optional[str] = Query(None, max_length=500, description="Search query text"),
    search_service: SearchService = Depends(get_search_service),
) -> List[GroupModel]:
    """
    Product groups containing products that match a query.

    Returns:
        Groups ordered by name similarity to the query
    """
    if not value or not value.strip():
        raise InvalidRequestError(message="value is required", details={"param": "value"})

    try:
        groups = await search_service.search_groups(value)
    except SearchBackendError as e:
        raise SearchError(
            message="Search engine unavailable",
            details={"query": value, "arm": e.arm, "error": e.message},
        )

    return [GroupModel(**group.to_dict()) for group in groups]
