"""
Stop Words
Spanish and English function words that never get pluralized in the synonym catalog.
"""

STOP_WORDS = frozenset(
    [
        # Spanish
        "a", "al", "ante", "bajo", "de", "del", "desde", "e", "el", "en", "entre",
        "hacia", "hasta", "la", "las", "lo", "los", "o", "por", "segun", "sobre",
        "tras", "u", "un", "una", "unas", "unos", "y",
        # English
        "an", "and", "at", "by", "for", "from", "in", "of", "on", "or", "the",
        "to",
    ]
)

# Function words that still carry meaning in a product name ("sin azucar", "con sal")
PERMITTED_STOP_WORDS = frozenset(["con", "sin", "para", "with", "without"])


def is_stop_word(word: str) -> bool:
    """Check whether a normalized word is a stop word of either kind."""
    return word in STOP_WORDS or word in PERMITTED_STOP_WORDS
