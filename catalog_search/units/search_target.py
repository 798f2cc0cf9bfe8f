"""
Unit Search Target
Detects a pack size typed into free text ("arroz 5 libras", "leche 1l").

Returns the parsed unit, its equivalent amount in every unit code of the
same family, and the search text with the unit removed.
"""

import math
import re
from dataclasses import dataclass
from typing import Dict, Optional

from ..search.text import remove_accents
from .parser import (
    CENTIMETERS_IN_FOOT,
    CENTIMETERS_IN_METER,
    CENTIMETERS_IN_YARD,
    FLUID_OUNCE_IN_ML,
    GRAMS_IN_KILOGRAM,
    GRAMS_IN_OUNCE,
    MILLILITERS_IN_CENTILITER,
    MILLILITERS_IN_GALLON,
    MILLILITERS_IN_LITER,
    MILLIMETERS_IN_CENTIMETER,
    OUNCES_IN_POUND,
    Measurement,
    ParsedUnit,
    format_amount,
    parse_unit,
)

SEARCH_UNIT_ALIASES: Dict[str, str] = {
    # weight
    "lb": "LB", "lbs": "LB", "libra": "LB", "libras": "LB", "pound": "LB", "pounds": "LB",
    "oz": "OZ", "onza": "OZ", "onzas": "OZ",
    "g": "GR", "gr": "GR", "grs": "GR", "gramo": "GR", "gramos": "GR", "gram": "GR",
    "grams": "GR",
    "kg": "KG", "kgs": "KG", "kilo": "KG", "kilos": "KG", "kilogramo": "KG",
    "kilogramos": "KG", "kilogram": "KG", "kilograms": "KG",
    # volume
    "ml": "ML", "mls": "ML", "mililitro": "ML", "mililitros": "ML", "milliliter": "ML",
    "milliliters": "ML",
    "cc": "CC",
    "cl": "CL", "cls": "CL", "centilitro": "CL", "centilitros": "CL",
    "lt": "LT", "lts": "LT", "ltr": "LT", "ltrs": "LT", "litro": "LT", "litros": "LT",
    "liter": "LT", "liters": "LT", "l": "LT",
    "gl": "GL", "gal": "GL", "gals": "GL", "galon": "GL", "galones": "GL", "gallon": "GL",
    "gallons": "GL",
    # count
    "und": "UND", "uds": "UND", "ud": "UND", "unidad": "UND", "unidades": "UND",
    "unit": "UND", "units": "UND",
    # length
    "m": "M", "metro": "M", "metros": "M",
    "ft": "FT", "pie": "FT", "pies": "FT",
    "yd": "YD", "yarda": "YD", "yardas": "YD",
}

# Longest aliases first so "litros" wins over "l"
_ALIASES_PATTERN = "|".join(
    re.escape(alias) for alias in sorted(SEARCH_UNIT_ALIASES, key=len, reverse=True)
)
UNIT_WITH_AMOUNT_RE = re.compile(
    rf"(?:^|\s)(\d+(?:[.,]\d+)?)\s*({_ALIASES_PATTERN})(?=\b)", re.IGNORECASE
)
UNIT_ONLY_RE = re.compile(rf"(?:^|\s)({_ALIASES_PATTERN})(?=\b)", re.IGNORECASE)


@dataclass(frozen=True)
class SearchUnitTarget:
    parsed: ParsedUnit
    amounts_by_unit: Dict[str, float]
    cleaned_search_text: str

    def to_dict(self) -> dict:
        return {
            "parsed": self.parsed.to_dict(),
            "amounts_by_unit": dict(self.amounts_by_unit),
            "cleaned_search_text": self.cleaned_search_text,
        }


def normalize_search_unit_input(value: str) -> str:
    text = remove_accents(value).lower()
    text = re.sub(r"[^a-z0-9.,\s]", " ", text)
    return re.sub(r"\s+", " ", text).strip()


def _put(amounts: Dict[str, float], unit: str, amount: float) -> None:
    if not math.isfinite(amount) or amount <= 0:
        return
    # First amount recorded for a unit is kept
    amounts.setdefault(unit, amount)


def equivalent_amounts_by_unit(parsed: ParsedUnit) -> Dict[str, float]:
    """
    Amount of the parsed unit expressed in every unit code of its family.

    Weight and volume share one family bridged through ounces, so a weight
    also reports volume amounts and vice versa.
    """
    amounts: Dict[str, float] = {}

    if parsed.measurement == Measurement.COUNT:
        _put(amounts, "UND", parsed.base)
        return amounts

    if parsed.measurement == Measurement.LENGTH:
        _put(amounts, "CM", parsed.base)
        _put(amounts, "MM", parsed.base * MILLIMETERS_IN_CENTIMETER)
        _put(amounts, "M", parsed.base / CENTIMETERS_IN_METER)
        _put(amounts, "FT", parsed.base / CENTIMETERS_IN_FOOT)
        _put(amounts, "YD", parsed.base / CENTIMETERS_IN_YARD)
        return amounts

    if parsed.measurement == Measurement.WEIGHT:
        ounces = parsed.base / GRAMS_IN_OUNCE
    else:
        ounces = parsed.base / FLUID_OUNCE_IN_ML

    grams = ounces * GRAMS_IN_OUNCE
    _put(amounts, "GR", grams)
    _put(amounts, "KG", grams / GRAMS_IN_KILOGRAM)
    _put(amounts, "OZ", ounces)
    _put(amounts, "LB", ounces / OUNCES_IN_POUND)

    milliliters = ounces * FLUID_OUNCE_IN_ML
    _put(amounts, "ML", milliliters)
    _put(amounts, "CC", milliliters)
    _put(amounts, "CL", milliliters / MILLILITERS_IN_CENTILITER)
    _put(amounts, "LT", milliliters / MILLILITERS_IN_LITER)
    _put(amounts, "GL", milliliters / MILLILITERS_IN_GALLON)

    return amounts


def extract_search_unit_target(value: str) -> Optional[SearchUnitTarget]:
    """
    Find the first "amount + unit" (or bare unit) in free text.

    Args:
        value: Raw search text

    Returns:
        SearchUnitTarget, or None when no unit alias is present
    """
    normalized = normalize_search_unit_input(value or "")
    if not normalized:
        return None

    with_amount = UNIT_WITH_AMOUNT_RE.search(normalized)
    unit_only = None if with_amount else UNIT_ONLY_RE.search(normalized)

    if with_amount:
        raw_amount, raw_unit = with_amount.group(1), with_amount.group(2)
    elif unit_only:
        raw_amount, raw_unit = "1", unit_only.group(1)
    else:
        return None

    unit_code = SEARCH_UNIT_ALIASES.get(raw_unit.lower())
    if unit_code is None:
        return None

    amount = float(raw_amount.replace(",", ".", 1))
    if amount <= 0:
        return None

    parsed = parse_unit(f"{format_amount(amount)} {unit_code}")
    if parsed is None:
        return None

    cleaned = UNIT_WITH_AMOUNT_RE.sub(" ", normalized, count=1)
    cleaned = UNIT_ONLY_RE.sub(" ", cleaned, count=1)
    cleaned = re.sub(r"\s+", " ", cleaned).strip()

    return SearchUnitTarget(
        parsed=parsed,
        amounts_by_unit=equivalent_amounts_by_unit(parsed),
        cleaned_search_text=cleaned,
    )
