"""
Unit Models
Pydantic models for unit facet and filter endpoints.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class UnitFacetModel(BaseModel):
    label: str = Field(..., description="Best display label of the group")
    value: str = Field(..., description="'/'-joined equivalent labels")
    count: int = Field(..., description="Products in the group")


class ParsedUnitModel(BaseModel):
    measurement: str
    amount: float
    normalized_unit: str
    base: float
    display: str


class UnitExpansion(BaseModel):
    unit: str
    parsed: Optional[ParsedUnitModel] = None
    variants: List[str]


class UnitExpansionResponse(BaseModel):
    """
    Expansion of one or more selected units.

    ``values`` is the union of all variants, ready to use as a filter.
    """

    expansions: List[UnitExpansion]
    values: List[str]
    param: str = Field(..., description="Units serialized as a filter parameter")


class UnitTargetResponse(BaseModel):
    text: str
    parsed: Optional[ParsedUnitModel] = None
    amounts_by_unit: Dict[str, float] = Field(default_factory=dict)
    cleaned_search_text: str
