"""
Tests for synonym catalog loading and lookup.
"""

import pytest

from catalog_search.search import (
    CatalogIntegrityError,
    CompositeGroup,
    IdentifiedGroup,
    PlainGroup,
    build_catalog,
)
from catalog_search.search.synonyms import expand_terms, group_from_entry


def test_group_variants_from_entries():
    """Test that entries become the matching tagged variant."""
    plain = group_from_entry({"synonyms": ["pan"], "alternatives": ["pan"]})
    identified = group_from_entry({"synonyms": ["sin"], "alternatives": ["sin"], "id": "sin"})
    composite = group_from_entry(
        {"synonyms": ["stevia"], "alternatives": ["stevia"], "refs": ["sin", "azucar"]}
    )

    assert isinstance(plain, PlainGroup) and plain.group_id is None
    assert isinstance(identified, IdentifiedGroup) and identified.group_id == "sin"
    assert isinstance(composite, CompositeGroup) and composite.refs == ("sin", "azucar")
    assert composite.is_composite and not identified.is_composite


@pytest.mark.parametrize(
    "entry",
    [
        {"alternatives": ["pan"]},
        {"synonyms": ["pan"], "alternatives": []},
        {"synonyms": ["x"], "alternatives": ["x"], "id": "x", "refs": ["y"]},
        {"synonyms": ["x"], "alternatives": ["x"], "refs": []},
    ],
)
def test_malformed_entries_rejected(entry):
    with pytest.raises(CatalogIntegrityError):
        group_from_entry(entry)


def test_duplicate_id_rejected():
    with pytest.raises(CatalogIntegrityError, match="Duplicate"):
        build_catalog(
            [
                {"synonyms": ["con"], "alternatives": ["con"], "id": "con"},
                {"synonyms": ["with"], "alternatives": ["with"], "id": "con"},
            ]
        )


def test_unresolved_reference_rejected():
    """Test that a composite referencing an unknown id fails at load time."""
    with pytest.raises(CatalogIntegrityError, match="unknown ids"):
        build_catalog(
            [
                {"synonyms": ["con"], "alternatives": ["con"], "id": "con"},
                {"synonyms": ["salado"], "alternatives": ["salad:*"], "refs": ["con", "sal"]},
            ]
        )


def test_unknown_noop_id_rejected():
    with pytest.raises(CatalogIntegrityError, match="No-op"):
        build_catalog([{"synonyms": ["pan"], "alternatives": ["pan"], "id": "pan"}])


def test_catalog_integrity_error_is_value_error():
    assert issubclass(CatalogIntegrityError, ValueError)


def test_lookup_includes_plurals(small_catalog):
    """Test that plural forms resolve to the same group."""
    assert small_catalog.lookup("azucares") is small_catalog.lookup("azucar")
    assert small_catalog.lookup("breads") is small_catalog.lookup("pan")
    assert small_catalog.lookup("unknown") is None


def test_phrase_lookup(small_catalog):
    assert small_catalog.lookup("pan de molde").alternatives == ("pan & molde",)
    assert small_catalog.lookup("sin calorias").is_composite


def test_first_group_wins_for_shared_phrase():
    catalog = build_catalog(
        [
            {"synonyms": ["con"], "alternatives": ["con"], "id": "con"},
            {"synonyms": ["crema"], "alternatives": ["crema:*"]},
            {"synonyms": ["crema", "nata"], "alternatives": ["nata"]},
        ]
    )
    assert catalog.lookup("crema").alternatives == ("crema:*",)
    assert catalog.lookup("nata").alternatives == ("nata",)


def test_phrases_longer_than_three_tokens_not_indexed():
    catalog = build_catalog(
        [
            {"synonyms": ["con"], "alternatives": ["con"], "id": "con"},
            {"synonyms": ["galleta estilo danesa rellena"], "alternatives": ["galleta:*"]},
        ]
    )
    assert catalog.lookup("galleta estilo danesa rellena") is None


def test_composite_for_is_order_independent(small_catalog):
    composite = small_catalog.composite_for("azucar", "sin")
    assert composite is small_catalog.composite_for("sin", "azucar")
    assert composite.alternatives == ("stevia",)
    assert small_catalog.composite_for("sin", "con") is None


def test_resolve_refs_keeps_authored_order(small_catalog):
    stevia = small_catalog.lookup("stevia")
    assert [g.group_id for g in small_catalog.resolve_refs(stevia)] == ["sin", "azucar"]


def test_is_noop(small_catalog):
    assert small_catalog.is_noop(small_catalog.lookup("con"))
    assert not small_catalog.is_noop(small_catalog.lookup("sin"))


def test_expansion_is_idempotent(default_catalog):
    """Test that expanding already expanded synonyms adds no new forms."""
    for group in default_catalog.groups:
        assert set(expand_terms(group.synonyms)) == set(group.synonyms), group.terms


def test_expansion_does_not_pluralize_plurals():
    synonyms = expand_terms(["congelado", "congelada", "free"])
    assert "congeladas" in synonyms
    assert "frees" in synonyms
    assert not any(s.endswith("ss") for s in synonyms)
    assert set(expand_terms(synonyms)) == set(synonyms)


def test_expansion_covers_accent_folded_forms():
    """Test that the folded spelling of an accented term is expanded too."""
    synonyms = expand_terms(["sofá"])
    assert synonyms[0] == "sofa"
    assert set(expand_terms(synonyms)) == set(synonyms)


def test_default_catalog_loads(default_catalog):
    stats = default_catalog.stats()
    assert stats["groups"] == len(default_catalog) > 200
    assert stats["composites"] > 0
    assert default_catalog.get("leche").alternatives[0] == "leche:*"
