"""
Tests for merging and ordering the two search arms.
"""

import random

import pytest

from catalog_search.search.backends import FuzzyMatch, TextMatch
from catalog_search.search.ranking import is_prefix_match, merge_results, paginate


def test_order_exact_then_prefix_then_fuzzy():
    """Test exact > prefix-only > fuzzy-only regardless of input order."""
    text = [TextMatch(30, "Bebida de leche", 0.9)]
    fuzzy = [FuzzyMatch(10, "Leshe evaporada", 0.95), FuzzyMatch(20, "Lechera", 0.2)]

    for _ in range(5):
        random.shuffle(fuzzy)
        ranked = merge_results(text, fuzzy, "leche")
        assert [r.product_id for r in ranked] == [30, 20, 10]


def test_ties_fall_back_to_ascending_id():
    text = [TextMatch(9, "Queso", 0.5), TextMatch(3, "Queso", 0.5), TextMatch(5, "Queso", 0.5)]
    ranked = merge_results(text, [], "queso")
    assert [r.product_id for r in ranked] == [3, 5, 9]


def test_rank_then_similarity_order_within_exact_matches():
    text = [TextMatch(1, "Pan blanco", 0.2), TextMatch(2, "Pan integral", 0.4), TextMatch(3, "Pan dulce", 0.2)]
    fuzzy = [FuzzyMatch(3, "Pan dulce", 0.7), FuzzyMatch(1, "Pan blanco", 0.6)]
    ranked = merge_results(text, fuzzy, "pan")
    assert [r.product_id for r in ranked] == [2, 3, 1]


def test_full_outer_merge_defaults_missing_fields():
    """Test that each product appears once with defaults for the arm it missed."""
    text = [TextMatch(1, "Arroz", 0.3)]
    fuzzy = [FuzzyMatch(1, "Arroz", 0.8), FuzzyMatch(2, "Arroz integral", 0.5)]
    ranked = {r.product_id: r for r in merge_results(text, fuzzy, "xyz")}

    assert len(ranked) == 2
    assert ranked[1].is_exact_text_match and ranked[1].similarity == 0.8
    assert not ranked[2].is_exact_text_match
    assert ranked[2].text_rank == 0.0
    assert ranked[2].similarity == 0.5


def test_is_prefix_match_ignores_case_and_accents():
    assert is_prefix_match("Café Molido", "cafe")
    assert is_prefix_match("cafe molido", "  CAFÉ ")
    assert not is_prefix_match("Molido de cafe", "cafe")
    assert not is_prefix_match("Cafe", "")


def test_paginate():
    ranked = merge_results([TextMatch(i, "x", 0.1) for i in range(1, 6)], [], "x")
    assert [r.product_id for r in paginate(ranked, limit=2, offset=0)] == [1, 2]
    assert [r.product_id for r in paginate(ranked, limit=2, offset=4)] == [5]
    assert paginate(ranked, limit=2, offset=10) == []


@pytest.mark.parametrize("limit, offset", [(0, 0), (-1, 0), (5, -1)])
def test_paginate_rejects_invalid_bounds(limit, offset):
    with pytest.raises(ValueError):
        paginate([], limit=limit, offset=offset)
