"""
Tests for detecting a unit typed into free-text search.
"""

import pytest

from catalog_search.units import Measurement, extract_search_unit_target


def test_amount_and_alias():
    target = extract_search_unit_target("Arroz 5 libras")
    assert target.parsed.display == "5 LB"
    assert target.cleaned_search_text == "arroz"
    assert target.amounts_by_unit["LB"] == pytest.approx(5, rel=1e-3)
    assert target.amounts_by_unit["KG"] == pytest.approx(2.268, rel=1e-3)
    assert target.amounts_by_unit["OZ"] == pytest.approx(80, rel=1e-3)


def test_decimal_comma_and_attached_unit():
    target = extract_search_unit_target("leche 1,5 litros")
    assert target.parsed.display == "1.5 LT"
    assert target.amounts_by_unit["ML"] == pytest.approx(1500)
    assert target.cleaned_search_text == "leche"

    attached = extract_search_unit_target("leche 1l")
    assert attached.parsed.normalized_unit == "LT"
    assert attached.cleaned_search_text == "leche"


def test_bare_alias_means_one():
    target = extract_search_unit_target("servilletas unidades")
    assert target.parsed.measurement == Measurement.COUNT
    assert target.parsed.amount == 1
    assert target.amounts_by_unit == {"UND": 1}
    assert target.cleaned_search_text == "servilletas"


def test_length_amounts():
    target = extract_search_unit_target("cinta 2 metros")
    assert target.amounts_by_unit["CM"] == pytest.approx(200)
    assert target.amounts_by_unit["MM"] == pytest.approx(2000)
    assert target.amounts_by_unit["FT"] == pytest.approx(6.5617, rel=1e-4)


def test_alias_must_be_whole_word():
    assert extract_search_unit_target("galletas integrales") is None


@pytest.mark.parametrize("value", ["", "   ", "pan integral", "0 kg"])
def test_no_target(value):
    assert extract_search_unit_target(value) is None
