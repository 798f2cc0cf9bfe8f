"""
Unit Clustering
Groups equivalent unit strings of a candidate set into facets.

Assignment is greedy in first-seen order: each unit joins the first group
of the same measurement whose seed base is within tolerance, otherwise it
seeds a new group. Two units can each be near a common value yet land in
different groups depending on order.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

from .parser import Measurement, ParsedUnit, parse_unit_with_group_conversion

logger = logging.getLogger(__name__)

EQUIVALENCE_TOLERANCE = 0.5
FACET_VALUE_SEPARATOR = "/"


@dataclass
class UnitEquivalenceGroup:
    """
    Units considered the same pack size.

    Attributes:
        measurement: Shared measurement of all members
        canonical_base: Base of the first admitted member
        order: Position of the seeding row in the input
        label_counts: Count per display label, in insertion order
        count: Total count over all members
    """

    measurement: Measurement
    canonical_base: float
    order: int
    label_counts: Dict[str, int] = field(default_factory=dict)
    count: int = 0

    def admits(self, parsed: ParsedUnit) -> bool:
        return (
            parsed.measurement == self.measurement
            and abs(self.canonical_base - parsed.base) < EQUIVALENCE_TOLERANCE
        )

    def add(self, parsed: ParsedUnit, count: int) -> None:
        self.label_counts[parsed.display] = self.label_counts.get(parsed.display, 0) + count
        self.count += count

    @property
    def labels(self) -> List[str]:
        return list(self.label_counts)

    def best_label(self) -> str:
        """Label with the highest count; earliest label wins ties."""
        best = None
        for label, count in self.label_counts.items():
            if best is None or count > self.label_counts[best]:
                best = label
        return best

    def to_facet(self) -> "UnitFacet":
        return UnitFacet(
            label=self.best_label(),
            value=FACET_VALUE_SEPARATOR.join(self.labels),
            count=self.count,
        )


@dataclass(frozen=True)
class UnitFacet:
    """One unit facet: best label, '/'-joined equivalent labels, product count."""

    label: str
    value: str
    count: int

    def to_dict(self) -> dict:
        return {"label": self.label, "value": self.value, "count": self.count}


def _coerce_count(value) -> Optional[int]:
    try:
        count = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(count):
        return None
    return int(count)


def group_units(
    units_with_counts: Iterable[Tuple[str, int]],
    group_human_id: Optional[str] = None,
) -> List[UnitEquivalenceGroup]:
    """
    Greedily assign parsed units to equivalence groups.

    Unparseable units and rows with a non-numeric count are skipped.
    """
    groups: List[UnitEquivalenceGroup] = []

    for index, (raw_unit, raw_count) in enumerate(units_with_counts):
        parsed = parse_unit_with_group_conversion(raw_unit or "", group_human_id)
        if parsed is None:
            continue
        count = _coerce_count(raw_count)
        if count is None:
            continue

        group = next((g for g in groups if g.admits(parsed)), None)
        if group is None:
            group = UnitEquivalenceGroup(
                measurement=parsed.measurement,
                canonical_base=parsed.base,
                order=index,
            )
            groups.append(group)
        group.add(parsed, count)

    return groups


def cluster_units(
    units_with_counts: Iterable[Tuple[str, int]],
    group_human_id: Optional[str] = None,
) -> List[UnitFacet]:
    """
    Cluster raw units into ranked facets.

    Args:
        units_with_counts: (raw unit string, product count) pairs
        group_human_id: Product group enabling group-specific conversions

    Returns:
        Facets with count > 1, by count descending then first appearance
    """
    groups = [g for g in group_units(units_with_counts, group_human_id) if g.count > 1]
    groups.sort(key=lambda g: (-g.count, g.order))

    facets = [g.to_facet() for g in groups]
    logger.debug(f"Clustered units into {len(facets)} facets")
    return facets
