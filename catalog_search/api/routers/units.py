"""
Unit Endpoints
Filter expansion and unit detection in free text.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Query

from ...units import (
    expand_unit_filter,
    normalize_unit_filters_for_search,
    parse_unit,
    parse_unit_filter_param,
    serialize_unit_filters,
)
from ...units.search_target import extract_search_unit_target, normalize_search_unit_input
from ..errors import InvalidRequestError
from ..models.units import (
    ParsedUnitModel,
    UnitExpansion,
    UnitExpansionResponse,
    UnitTargetResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/units", tags=["units"])


@router.get("/expand", response_model=UnitExpansionResponse)
async def expand_units(
    unit: Optional[str] = Query(None, description="Single unit, e.g. '1 LB'"),
    units: Optional[str] = Query(None, description="Unit filter parameter ('16 OZ,1 LB')"),
) -> UnitExpansionResponse:
    """
    Expand selected units into every equivalent display string.

    Facet values joined with '/' are split into their members first.
    """
    selected = []
    if unit and unit.strip():
        selected.append(unit.strip())
    selected.extend(parse_unit_filter_param(units))
    selected = normalize_unit_filters_for_search(selected)

    if not selected:
        raise InvalidRequestError(
            message="unit or units is required", details={"params": ["unit", "units"]}
        )

    expansions = []
    values = []
    for raw in selected:
        parsed = parse_unit(raw)
        variants = expand_unit_filter(raw)
        expansions.append(
            UnitExpansion(
                unit=raw,
                parsed=ParsedUnitModel(**parsed.to_dict()) if parsed else None,
                variants=variants,
            )
        )
        values.extend(v for v in variants if v not in values)

    logger.debug(f"Expanded {selected} into {len(values)} unit values")
    return UnitExpansionResponse(
        expansions=expansions,
        values=values,
        param=serialize_unit_filters(selected),
    )


@router.get("/target", response_model=UnitTargetResponse)
async def unit_target(
    text: str = Query(..., max_length=500, description="Free-text search input"),
) -> UnitTargetResponse:
    """Detect a pack size typed into a search query."""
    target = extract_search_unit_target(text)
    if target is None:
        return UnitTargetResponse(text=text, cleaned_search_text=normalize_search_unit_input(text))

    return UnitTargetResponse(
        text=text,
        parsed=ParsedUnitModel(**target.parsed.to_dict()),
        amounts_by_unit=target.amounts_by_unit,
        cleaned_search_text=target.cleaned_search_text,
    )
