"""
Units
Pack-size parsing, facet clustering and filter expansion.
"""

from .clustering import EQUIVALENCE_TOLERANCE, UnitEquivalenceGroup, UnitFacet, cluster_units
from .expander import expand_unit_filter
from .filters import (
    normalize_unit_filters_for_search,
    parse_unit_filter_param,
    serialize_unit_filters,
)
from .parser import (
    Measurement,
    ParsedUnit,
    convert_to_base,
    format_amount,
    parse_unit,
    parse_unit_with_group_conversion,
)
from .search_target import SearchUnitTarget, extract_search_unit_target

__all__ = [
    "EQUIVALENCE_TOLERANCE",
    "UnitEquivalenceGroup",
    "UnitFacet",
    "cluster_units",
    "expand_unit_filter",
    "normalize_unit_filters_for_search",
    "parse_unit_filter_param",
    "serialize_unit_filters",
    "Measurement",
    "ParsedUnit",
    "convert_to_base",
    "format_amount",
    "parse_unit",
    "parse_unit_with_group_conversion",
    "SearchUnitTarget",
    "extract_search_unit_target",
]
