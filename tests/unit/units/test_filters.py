"""
Tests for the unit filter query parameter helpers.
"""

from catalog_search.units import (
    normalize_unit_filters_for_search,
    parse_unit_filter_param,
    serialize_unit_filters,
)


def test_parse_comma_separated():
    assert parse_unit_filter_param("16%20OZ,1%20LB") == ["16 OZ", "1 LB"]


def test_parse_legacy_slash_separated():
    assert parse_unit_filter_param("16 OZ/1 LB") == ["16 OZ", "1 LB"]


def test_parse_empty():
    assert parse_unit_filter_param(None) == []
    assert parse_unit_filter_param("") == []
    assert parse_unit_filter_param(" , ") == []


def test_serialize_round_trips():
    units = ["16 OZ", "1 LB"]
    serialized = serialize_unit_filters(units)
    assert serialized == "16%20OZ,1%20LB"
    assert parse_unit_filter_param(serialized) == units


def test_normalize_splits_facet_values():
    assert normalize_unit_filters_for_search(["16 OZ/1 LB", " 1 LT ", "/"]) == [
        "16 OZ",
        "1 LB",
        "1 LT",
    ]
