"""
Unit Filter Expander
Broadens a selected unit into every reasonably equivalent display string.

A listing recorded as "454 GR" should still match a filter on "1 LB", and
"1 LT" should match the "32 OZ" packaging bucket.
"""

import math
from typing import List, Optional

from .parser import (
    CENTIMETERS_IN_FOOT,
    CENTIMETERS_IN_METER,
    CENTIMETERS_IN_YARD,
    FLUID_OUNCE_IN_ML,
    GRAMS_IN_KILOGRAM,
    MILLILITERS_IN_LITER,
    OUNCES_IN_POUND,
    Measurement,
    ParsedUnit,
    format_amount,
    parse_unit,
)


def round_half_up(value: float) -> float:
    """Round to the nearest integer, halves rounded up."""
    return float(math.floor(value + 0.5))


def round_to_step(value: float, step: float) -> float:
    """Round to the nearest multiple of step."""
    return round_half_up(value / step) * step


def fluid_ounces(parsed: ParsedUnit) -> Optional[float]:
    """
    Fluid-ounce equivalent, when one can be derived.

    Volumes convert through milliliters; weight OZ and LB read as the same
    number of ounces. Other weights have no ounce bridge.
    """
    if parsed.measurement == Measurement.VOLUME:
        return parsed.base / FLUID_OUNCE_IN_ML
    if parsed.measurement == Measurement.WEIGHT:
        if parsed.normalized_unit == "OZ":
            return parsed.amount
        if parsed.normalized_unit == "LB":
            return parsed.amount * OUNCES_IN_POUND
    return None


class _Variants:
    """Insertion-ordered set of display strings."""

    def __init__(self, first: str):
        self.values = [first]

    def add(self, amount: Optional[float], unit: str) -> None:
        if amount is None or not math.isfinite(amount) or amount <= 0:
            return
        label = f"{format_amount(amount)} {unit}"
        if label not in self.values:
            self.values.append(label)

    def add_stepped(self, amount: float, unit: str, step: float) -> None:
        self.add(amount, unit)
        self.add(round_to_step(amount, step), unit)
        self.add(round_half_up(amount), unit)


def expand_parsed_unit(parsed: ParsedUnit) -> List[str]:
    """Equivalent display strings for a parsed unit, its own display first."""
    variants = _Variants(parsed.display)
    ounces = fluid_ounces(parsed)

    if ounces:
        variants.add(ounces, "OZ")
        variants.add(round_half_up(ounces), "OZ")
        variants.add(round_to_step(ounces, 4), "OZ")
        variants.add(ounces - 0.5, "OZ")
        variants.add(ounces + 0.5, "OZ")

        if parsed.measurement == Measurement.WEIGHT:
            pounds = ounces / OUNCES_IN_POUND
            variants.add(pounds, "LB")
            variants.add(round_half_up(pounds), "LB")
            variants.add(round_to_step(pounds, 4), "LB")

    if ounces is not None:
        liters = ounces * FLUID_OUNCE_IN_ML / MILLILITERS_IN_LITER
    elif parsed.measurement == Measurement.VOLUME:
        liters = parsed.base / MILLILITERS_IN_LITER
    else:
        liters = None

    if liters:
        variants.add(round_to_step(liters, 0.25), "LT")
        variants.add(round_half_up(liters), "LT")

    if parsed.measurement == Measurement.WEIGHT:
        grams = parsed.base
        variants.add(grams, "GR")
        variants.add(round_half_up(grams), "GR")
        variants.add(round_to_step(grams, 50), "GR")
        variants.add_stepped(grams / GRAMS_IN_KILOGRAM, "KG", 0.25)

    if parsed.measurement == Measurement.LENGTH:
        centimeters = parsed.base
        variants.add_stepped(centimeters / CENTIMETERS_IN_METER, "M", 0.25)
        variants.add_stepped(centimeters / CENTIMETERS_IN_FOOT, "FT", 0.25)
        variants.add_stepped(centimeters / CENTIMETERS_IN_YARD, "YD", 0.25)

    return variants.values


def expand_unit_filter(raw: str) -> List[str]:
    """
    Expand a unit filter value.

    Args:
        raw: Selected unit, e.g. "1 LB"

    Returns:
        Distinct display strings starting with the canonical display. An
        unparseable value is returned as-is (trimmed); a blank one yields [].
    """
    parsed = parse_unit(raw or "")
    if parsed is None:
        fallback = (raw or "").strip()
        return [fallback] if fallback else []
    return expand_parsed_unit(parsed)
