"""
Pydantic Models
Request/response models for API endpoints.
"""

from .search import (
    BucketModel,
    CompileResponse,
    GroupModel,
    SearchRequest,
    SearchResponse,
)
from .units import (
    ParsedUnitModel,
    UnitExpansion,
    UnitExpansionResponse,
    UnitFacetModel,
    UnitTargetResponse,
)

__all__ = [
    "BucketModel",
    "CompileResponse",
    "GroupModel",
    "SearchRequest",
    "SearchResponse",
    "ParsedUnitModel",
    "UnitExpansion",
    "UnitExpansionResponse",
    "UnitFacetModel",
    "UnitTargetResponse",
]
