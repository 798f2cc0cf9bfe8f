"""
Unit filter query parameter helpers.

Selected units travel in one URL parameter, comma-separated and
percent-encoded ("16%20OZ,1%20LB"). Older links used "/" as the separator.
"""

from typing import Iterable, List, Optional
from urllib.parse import quote, unquote

UNIT_FILTER_DELIMITER = ","
LEGACY_UNIT_FILTER_DELIMITER = "/"


def parse_unit_filter_param(raw: Optional[str]) -> List[str]:
    """Split a unit filter parameter into decoded, non-empty unit strings."""
    if not raw:
        return []
    delimiter = (
        UNIT_FILTER_DELIMITER if UNIT_FILTER_DELIMITER in raw else LEGACY_UNIT_FILTER_DELIMITER
    )
    units = (unquote(part).strip() for part in raw.split(delimiter))
    return [unit for unit in units if unit]


def serialize_unit_filters(units: Iterable[str]) -> str:
    return UNIT_FILTER_DELIMITER.join(quote(unit, safe="!*'()") for unit in units)


def normalize_unit_filters_for_search(units: Iterable[str]) -> List[str]:
    """Split '/'-joined facet values into individual unit strings."""
    return [
        part.strip()
        for unit in units
        for part in unit.split(LEGACY_UNIT_FILTER_DELIMITER)
        if part.strip()
    ]
