"""
Tests for English and Spanish pluralization of synonym terms.
"""

import pytest

from catalog_search.search.pluralize import (
    is_plural_en,
    is_pluralization_exempt,
    pluralize_en,
    pluralize_es,
    plural_variants,
)


@pytest.mark.parametrize(
    "word, plural",
    [
        ("nuez", "nueces"),
        ("frac", "fraques"),
        ("zigzag", "zigzagues"),
        ("leche", "leches"),
        ("aji", "ajis"),
        ("sofá", "sofaes"),
        ("dominó", "dominoes"),
        ("camión", "camiones"),
        ("pingüín", "pingüines"),
        ("limon", "limones"),
        ("pan", "panes"),
    ],
)
def test_pluralize_es(word, plural):
    """Test Spanish plural rules by word ending."""
    assert pluralize_es(word) == plural


def test_pluralize_es_words_ending_in_s():
    """Test that words ending in s keep their form except listed irregulars."""
    assert pluralize_es("lunes") == "lunes"
    assert pluralize_es("pies") == "pieses"
    assert pluralize_es("siglas") == "sigla"


def test_pluralize_es_words_ending_in_x_are_invariable():
    assert pluralize_es("torax") == "torax"


def test_pluralize_en():
    assert pluralize_en("cookie") == "cookies"
    assert pluralize_en("tomato") == "tomatoes"
    assert pluralize_en("knife") == "knives"


def test_exempt_words():
    """Test that stop words, single characters and multi-lexeme terms are exempt."""
    assert is_pluralization_exempt("con")
    assert is_pluralization_exempt("de")
    assert is_pluralization_exempt("0")
    assert is_pluralization_exempt("leche & entera")
    assert not is_pluralization_exempt("leche")


def test_plural_variants_order_and_folding():
    """Test that variants start with the term and are accent-folded."""
    assert plural_variants("galleta") == ["galleta", "galletas"]
    assert plural_variants("con") == ["con"]
    assert plural_variants("camión")[0] == "camion"
    assert "camiones" in plural_variants("camión")


def test_is_plural_en():
    assert is_plural_en("cookies")
    assert is_plural_en("congeladas")
    assert is_plural_en("men")
    assert not is_plural_en("cookie")
    assert not is_plural_en("leche")


def test_plural_variants_of_plural_word():
    """Test that plural words are not pluralized again."""
    assert plural_variants("galletas") == ["galletas"]
    assert plural_variants("frees") == ["frees"]
    assert plural_variants("pies") == ["pies", "pieses"]
