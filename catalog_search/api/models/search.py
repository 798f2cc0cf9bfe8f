"""
Search Models
Pydantic models for search endpoints.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class SearchRequest(BaseModel):
    """
    Search request model.

    ``limit`` defaults to the configured page size when omitted.
    """

    query: str = Field(..., max_length=500, description="Search query text")
    offset: int = Field(default=0, ge=0, description="Number of results to skip")
    limit: Optional[int] = Field(default=None, ge=1, description="Maximum number of results")

    model_config = ConfigDict(
        json_schema_extra={"example": {"query": "leche s/lactosa", "offset": 0, "limit": 20}}
    )


class SearchResponse(BaseModel):
    """
    Search response model.

    Only ids are returned, in ranked order; hydrating records must keep
    that order.
    """

    ids: List[int] = Field(..., description="Product ids in ranked order")
    total: int = Field(..., description="Matches before pagination")
    offset: int = Field(..., description="Offset used")
    limit: int = Field(..., description="Limit used")
    page: int = Field(..., description="1-based page number")
    query: str = Field(..., description="Original query")
    expression: str = Field(..., description="Compiled text-search expression")
    search_time_ms: float = Field(..., description="Search time in milliseconds")


class BucketModel(BaseModel):
    tokens: List[str]
    kind: str
    expression: str


class CompileResponse(BaseModel):
    """Compiled form of a query."""

    query: str
    tokens: List[str]
    expression: str
    buckets: List[BucketModel]


class GroupModel(BaseModel):
    """Product group matching a query."""

    group_id: int
    name: str
    human_id: str = Field(..., description="Group URL slug")
    similarity: float = Field(..., description="Trigram similarity of the name to the query")
