"""
Tests for unit string parsing.
"""

import pytest

from catalog_search.units import (
    Measurement,
    convert_to_base,
    format_amount,
    parse_unit,
    parse_unit_with_group_conversion,
)


@pytest.mark.parametrize(
    "raw, measurement, base, display",
    [
        ("16 OZ", Measurement.WEIGHT, 453.6, "16 OZ"),
        ("1.5 lb", Measurement.WEIGHT, 680.388555, "1.5 LB"),
        ("500 GR", Measurement.WEIGHT, 500.0, "500 GR"),
        ("2 KG", Measurement.WEIGHT, 2000.0, "2 KG"),
        ("1 LT", Measurement.VOLUME, 1000.0, "1 LT"),
        ("33 CL", Measurement.VOLUME, 330.0, "33 CL"),
        ("1 GL", Measurement.VOLUME, 3785.411784, "1 GL"),
        ("250 cc", Measurement.VOLUME, 250.0, "250 CC"),
        ("12 UND", Measurement.COUNT, 12.0, "12 UND"),
        ("2 M", Measurement.LENGTH, 200.0, "2 M"),
        ("3 FT", Measurement.LENGTH, 91.44, "3 FT"),
        ("1 YD", Measurement.LENGTH, 91.44, "1 YD"),
    ],
)
def test_parse_unit(raw, measurement, base, display):
    parsed = parse_unit(raw)
    assert parsed.measurement == measurement
    assert parsed.base == pytest.approx(base)
    assert parsed.display == display


def test_missing_amount_defaults_to_one():
    parsed = parse_unit("LT")
    assert parsed.amount == 1
    assert parsed.display == "1 LT"


@pytest.mark.parametrize("raw", ["", "   ", "16", "16 CAJAS", "caja", "0 OZ", "-2 LB", "nan OZ"])
def test_unparseable_units(raw):
    assert parse_unit(raw) is None


@pytest.mark.parametrize("raw", ["1_000 GR", "1e3 GR", "0x10 OZ", "inf LT"])
def test_amount_must_be_plain_decimal(raw):
    """Test that amounts with separators or exponents are not numbers."""
    assert parse_unit(raw) is None


def test_amount_without_leading_digit():
    parsed = parse_unit(".5 LT")
    assert parsed.amount == 0.5
    assert parsed.display == "0.5 LT"


def test_round_trip_keeps_base():
    parsed = parse_unit("16 OZ")
    assert parse_unit(parsed.display).base == pytest.approx(parsed.base)


@pytest.mark.parametrize(
    "value, formatted",
    [(16.0, "16"), (16, "16"), (0.5, "0.5"), (453.59237, "453.59"), (1.10, "1.1"), (2.999, "3")],
)
def test_format_amount(value, formatted):
    assert format_amount(value) == formatted


def test_volume_accepts_weight_codes():
    """Test that the volume arm reads weight codes as milliliters."""
    assert convert_to_base(500, "GR", Measurement.VOLUME) == 500
    assert convert_to_base(1, "KG", Measurement.VOLUME) == 1000
    assert convert_to_base(1, "OZ", Measurement.VOLUME) == pytest.approx(28.35)
    assert convert_to_base(1, "FT", Measurement.VOLUME) == 0.0


def test_group_conversion_for_deodorant_spray():
    parsed = parse_unit_with_group_conversion("91 GR", "desodorante-en-spray")
    assert parsed.measurement == Measurement.VOLUME
    assert parsed.normalized_unit == "ML"
    assert parsed.base == pytest.approx(150.0)
    assert parsed.display == "91 GR"


def test_group_conversion_ignores_other_groups_and_units():
    assert parse_unit_with_group_conversion("91 GR", "leche").measurement == Measurement.WEIGHT
    assert parse_unit_with_group_conversion("150 ML", "desodorante-en-spray").base == 150
    assert parse_unit_with_group_conversion("caja", "desodorante-en-spray") is None
