"""
Pluralization
English and Spanish plural forms used to expand synonym terms at load time.
"""

from functools import lru_cache
from typing import List

import inflect

from .stopwords import is_stop_word
from .text import remove_accents


# Separator used by multi-lexeme synonym terms ("en & mitad")
MULTI_WORD_SEPARATOR = "&"

# Words ending in "s" whose plural is irregular or that are really singular
SPANISH_S_EXCEPTIONS = {
    "pies": "pieses",
    "cafés": "cafeses",
    "acortamientos": "acortamiento",
    "abreviaturas": "abreviatura",
    "siglas": "sigla",
    "símbolos": "símbolo",
}

_PLAIN_VOWELS = ("a", "e", "é", "i", "o", "u")

_english = inflect.engine()


def pluralize_es(word: str) -> str:
    """
    Spanish plural of a single word.

    Examples:
        nuez -> nueces, limon -> limones, aji -> ajis, camión -> camiones
    """
    if not word:
        return word

    last = word[-1]

    if last == "x":
        # Invariable (tórax, fénix)
        return word
    if last == "s":
        return SPANISH_S_EXCEPTIONS.get(word, word)
    if last == "z":
        return word[:-1] + "ces"
    if last == "c":
        return word[:-1] + "ques"
    if last == "g":
        return word + "ues"
    if last in _PLAIN_VOWELS:
        return word + "s"
    if last == "á":
        return word[:-1] + "aes"
    if last == "ó":
        return word[:-1] + "oes"
    if word.endswith("ión"):
        return word[:-3] + "iones"
    if word.endswith("ín"):
        return word[:-2] + "ines"
    return word + "es"


@lru_cache(maxsize=4096)
def pluralize_en(word: str) -> str:
    """English plural of a word or short phrase."""
    if not word:
        return word
    return _english.plural_noun(word) or word


@lru_cache(maxsize=4096)
def is_plural_en(word: str) -> bool:
    """True for words already in plural form ("cookies", "men")."""
    if not word:
        return False
    return word.endswith("s") or bool(_english.singular_noun(word))


def is_pluralization_exempt(word: str) -> bool:
    """Stop words, single characters and multi-lexeme terms keep their form."""
    return len(word) <= 1 or MULTI_WORD_SEPARATOR in word or is_stop_word(word)


def plural_variants(word: str) -> List[str]:
    """
    Expand one synonym term into itself plus its English and Spanish plurals.

    Variants are accent-folded so they compare equal to normalized query tokens.
    Order is stable: the term, then the English plural, then the Spanish plural.
    Words that are already plural get no English plural; the Spanish rules
    handle them through their own "s" ending.
    """
    base = remove_accents(word).lower()
    if is_pluralization_exempt(base):
        return [base]

    plurals = [pluralize_es(word)]
    if not is_plural_en(base):
        plurals.insert(0, pluralize_en(word))

    variants = [base]
    for plural in plurals:
        folded = remove_accents(plural).lower()
        if folded and folded not in variants:
            variants.append(folded)
    return variants
