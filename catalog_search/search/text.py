"""
Text Normalization
Accent folding, abbreviation rewriting and tokenization of raw search input.
"""

import re
import unicodedata
from typing import List

# Retailer shorthand seen in product names and typed queries
ABBREVIATIONS = [
    (" /p", " para "),
    (" /s", " sin "),
    (" s/", " sin "),
    (" /c", " con "),
    (" c/", " con "),
]

_NON_ALPHANUMERIC = re.compile(r"[^a-z0-9\s]")
_WHITESPACE = re.compile(r"\s+")


def remove_accents(text: str) -> str:
    """Strip combining diacritics ("jalapeño" -> "jalapeno")."""
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def expand_abbreviations(text: str) -> str:
    """Rewrite slash shorthand such as "s/azucar" into plain words."""
    # Leading space lets a shorthand at the very start match too
    result = f" {text.lower()}"
    for shorthand, replacement in ABBREVIATIONS:
        result = result.replace(shorthand, replacement)
    return result


def normalize_query(raw: str) -> str:
    """
    Normalize raw search input for compilation.

    Lowercases, rewrites shorthand, strips accents and punctuation and
    collapses whitespace. The result only contains [a-z0-9] and single spaces.
    """
    if not raw:
        return ""

    text = expand_abbreviations(raw)
    text = remove_accents(text)
    text = _NON_ALPHANUMERIC.sub(" ", text)
    return _WHITESPACE.sub(" ", text).strip()


def tokenize(raw: str) -> List[str]:
    """Normalize and split raw input into tokens."""
    normalized = normalize_query(raw)
    return normalized.split(" ") if normalized else []


def fold(text: str) -> str:
    """Accent- and case-insensitive form used for prefix comparisons."""
    return _WHITESPACE.sub(" ", remove_accents(text.lower())).strip()
