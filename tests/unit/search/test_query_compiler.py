"""
Tests for compiling raw queries into text-search expressions.
"""

import pytest

from catalog_search.search import QueryCompiler, compile_query

LECHE = "(leche:* | milk:* | lacteo:* | lactea:*)"
SIN = "(sin | s | free:* | zero | non | cero | 0 | libre)"
LACT = "(lactosa:* | lacteo:* | dair:*)"


def test_compile_is_deterministic(compiler):
    raw = "Leche s/lactosa con galletas de mantequilla"
    assert compiler.compile(raw) == compiler.compile(raw)


def test_single_group(compiler):
    assert compiler.compile("leche") == LECHE
    assert compiler.compile("LECHE") == LECHE


def test_plural_and_accents_match_same_group(compiler):
    assert compiler.compile("quesos") == compiler.compile("queso") == "(ques:* | chees:*)"
    assert compiler.compile("LÁCTEO") == LACT


def test_single_alternative_not_parenthesized(small_catalog):
    assert QueryCompiler(small_catalog).compile("pan") == "(pan | bread:*)"
    assert QueryCompiler(small_catalog).compile("pan de molde") == "pan & molde"


def test_unknown_token_emitted_raw(compiler):
    assert compiler.compile("xyzzy") == "xyzzy"
    assert compiler.compile("leche xyzzy") == f"{LECHE} & xyzzy"


@pytest.mark.parametrize("raw", ["", "   ", "!!! ???", None])
def test_empty_input_compiles_to_empty_expression(compiler, raw):
    compiled = compiler.compile_query(raw)
    assert compiled.expression == ""
    assert compiled.is_empty


def test_noop_word_contributes_no_bucket(compiler):
    """Test that "con leche" compiles like "leche"."""
    with_noop = compiler.compile_query("con leche")
    alone = compiler.compile_query("leche")
    assert len(with_noop.buckets) == len(alone.buckets) == 1
    assert with_noop.expression == alone.expression
    assert compiler.compile("con") == ""


def test_longest_phrase_wins(compiler):
    """Test that a two-token phrase beats its first token."""
    compiled = compiler.compile_query("leche entera")
    assert len(compiled.buckets) == 1
    assert compiled.buckets[0].kind == "phrase"
    assert compiled.buckets[0].tokens == ["leche", "entera"]
    assert compiled.expression == (
        f"(({LECHE} & (bebibl:* | liquid:*)) | (leche & entera | leche & liquida))"
    )


def test_adjacent_groups_compose(compiler):
    """Test that "sin lactosa" becomes ((sin) & (lactosa)) | (composite)."""
    compiled = compiler.compile_query("sin lactosa")
    assert len(compiled.buckets) == 1
    assert compiled.buckets[0].kind == "composed"
    assert compiled.buckets[0].tokens == ["sin", "lactosa"]
    assert compiled.expression == f"(({SIN} & {LACT}) | (deslactosad:*))"


def test_composition_follows_token_order(small_catalog):
    compiler = QueryCompiler(small_catalog)
    assert compiler.compile("azucar free") == "(((azucar | sug:*) & (sin | free:*)) | (stevia))"
    assert compiler.compile("sin azucar") == "(((sin | free:*) & (azucar | sug:*)) | (stevia))"


def test_composite_term_expands_to_references(compiler):
    assert compiler.compile("deslactosada") == f"(({SIN} & {LACT}) | (deslactosad:*))"


def test_noop_group_still_composes(compiler):
    """Test that a linking word composes with its neighbour before being dropped."""
    assert compiler.compile("con sal") == (
        "(((with | con | al | c) & (sal | salt:*)) | (salted | salad:*))"
    )


def test_abbreviations_expand_before_matching(compiler):
    compiled = compiler.compile_query("Leche s/lactosa")
    assert [b.kind for b in compiled.buckets] == ["synonym", "composed"]
    assert compiled.expression == f"{LECHE} & (({SIN} & {LACT}) | (deslactosad:*))"


def test_buckets_are_and_joined(compiler):
    compiled = compiler.compile_query("queso leche")
    assert compiled.expression == f"(ques:* | chees:*) & {LECHE}"
    assert [b.to_dict()["tokens"] for b in compiled.buckets] == [["queso"], ["leche"]]


def test_module_level_compile_uses_default_catalog(compiler):
    assert compile_query("leche") == compiler.compile("leche")
