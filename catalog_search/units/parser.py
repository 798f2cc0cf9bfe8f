"""
Unit Parser
Parses raw pack-size strings ("16 OZ", "1.5 LB", "LT") into canonical magnitudes.

Canonical bases per measurement:
- weight: grams
- volume: milliliters
- length: centimeters
- count: units
"""

import math
import re
from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict, Optional


class Measurement(str, Enum):
    """Physical dimension of a unit code."""

    WEIGHT = "weight"
    VOLUME = "volume"
    COUNT = "count"
    LENGTH = "length"


MEASUREMENT_BY_UNIT: Dict[str, Measurement] = {
    "LB": Measurement.WEIGHT,
    "OZ": Measurement.WEIGHT,
    "GR": Measurement.WEIGHT,
    "KG": Measurement.WEIGHT,
    "ML": Measurement.VOLUME,
    "CC": Measurement.VOLUME,
    "LT": Measurement.VOLUME,
    "CL": Measurement.VOLUME,
    "GL": Measurement.VOLUME,
    "UND": Measurement.COUNT,
    "M": Measurement.LENGTH,
    "FT": Measurement.LENGTH,
    "YD": Measurement.LENGTH,
}

# Conversion constants
GRAMS_IN_OUNCE = 28.35
GRAMS_IN_POUND = 453.59237
GRAMS_IN_KILOGRAM = 1000
OUNCES_IN_POUND = 16
FLUID_OUNCE_IN_ML = 29.5735
MILLILITERS_IN_CENTILITER = 10
MILLILITERS_IN_LITER = 1000
MILLILITERS_IN_GALLON = 3785.411784
CENTIMETERS_IN_METER = 100
CENTIMETERS_IN_FOOT = 30.48
CENTIMETERS_IN_YARD = 91.44
MILLIMETERS_IN_CENTIMETER = 10

WEIGHT_TO_GRAMS: Dict[str, float] = {
    "GR": 1,
    "OZ": GRAMS_IN_OUNCE,
    "LB": GRAMS_IN_POUND,
    "KG": GRAMS_IN_KILOGRAM,
}

VOLUME_TO_MILLILITERS: Dict[str, float] = {
    "ML": 1,
    "CC": 1,
    "CL": MILLILITERS_IN_CENTILITER,
    "LT": MILLILITERS_IN_LITER,
    "GL": MILLILITERS_IN_GALLON,
    # Some listings record liquids by weight; read as milliliters
    **WEIGHT_TO_GRAMS,
}

LENGTH_TO_CENTIMETERS: Dict[str, float] = {
    "M": CENTIMETERS_IN_METER,
    "FT": CENTIMETERS_IN_FOOT,
    "YD": CENTIMETERS_IN_YARD,
}

# Group-specific conversion: deodorant sprays list grams of product
DEODORANT_SPRAY_HUMAN_ID = "desodorante-en-spray"
GR_TO_ML_RATIO_DEODORANT = 150 / 91


@dataclass(frozen=True)
class ParsedUnit:
    """
    A recognized unit string.

    Attributes:
        measurement: Physical dimension
        amount: Numeric amount as written (1 when omitted)
        normalized_unit: Uppercase unit code
        base: Amount in the measurement's canonical unit (always > 0)
        display: Canonical label, e.g. "16 OZ"
    """

    measurement: Measurement
    amount: float
    normalized_unit: str
    base: float
    display: str

    def to_dict(self) -> dict:
        return {
            "measurement": self.measurement.value,
            "amount": self.amount,
            "normalized_unit": self.normalized_unit,
            "base": self.base,
            "display": self.display,
        }


def convert_to_base(amount: float, unit: str, measurement: Measurement) -> float:
    """
    Convert an amount to the measurement's canonical base.

    Returns 0.0 when the unit code is not valid for the measurement.
    """
    if measurement == Measurement.COUNT:
        return amount
    if measurement == Measurement.WEIGHT:
        factor = WEIGHT_TO_GRAMS.get(unit)
    elif measurement == Measurement.VOLUME:
        factor = VOLUME_TO_MILLILITERS.get(unit)
    else:
        factor = LENGTH_TO_CENTIMETERS.get(unit)
    return amount * factor if factor is not None else 0.0


# Plain decimal amount ("16", "0.5", ".5"); no exponents or digit separators
AMOUNT_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)")


def format_amount(value: float) -> str:
    """
    Render an amount for display.

    Integers have no decimal point; other values keep at most 2 decimals
    with trailing zeros stripped.

    Examples:
        16.0 -> "16", 0.5 -> "0.5", 453.59237 -> "453.59"
    """
    if float(value).is_integer():
        return str(int(value))
    fixed = f"{value:.2f}"
    return fixed.rstrip("0").rstrip(".")


def _parse_amount(token: str) -> Optional[float]:
    if not AMOUNT_RE.fullmatch(token):
        return None
    return float(token)


def parse_unit(raw: str) -> Optional[ParsedUnit]:
    """
    Parse a raw unit string.

    A leading non-numeric token means an implicit amount of 1 ("LT" is
    "1 LT").

    Args:
        raw: Unit string such as "16 OZ"

    Returns:
        ParsedUnit, or None for empty, unknown or non-positive units
    """
    parts = (raw or "").split()
    if not parts:
        return None

    amount = _parse_amount(parts[0])
    unit = parts[1] if len(parts) > 1 else None
    if amount is None:
        amount = 1.0
        unit = parts[0]

    if not unit or not math.isfinite(amount):
        return None

    normalized_unit = unit.upper()
    measurement = MEASUREMENT_BY_UNIT.get(normalized_unit)
    if measurement is None:
        return None

    base = convert_to_base(amount, normalized_unit, measurement)
    if base <= 0:
        return None

    return ParsedUnit(
        measurement=measurement,
        amount=amount,
        normalized_unit=normalized_unit,
        base=base,
        display=f"{format_amount(amount)} {normalized_unit}",
    )


def parse_unit_with_group_conversion(
    raw: str, group_human_id: Optional[str] = None
) -> Optional[ParsedUnit]:
    """
    Parse a unit string applying product-group specific conversions.

    Deodorant sprays record grams; they are converted to milliliters so they
    cluster with sprays sold by volume. The display label is kept as written.
    """
    parsed = parse_unit(raw)
    if parsed is None:
        return None

    if group_human_id == DEODORANT_SPRAY_HUMAN_ID and parsed.normalized_unit == "GR":
        milliliters = parsed.amount * GR_TO_ML_RATIO_DEODORANT
        return replace(
            parsed,
            measurement=Measurement.VOLUME,
            amount=milliliters,
            normalized_unit="ML",
            base=milliliters,
        )

    return parsed
