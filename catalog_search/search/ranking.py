"""
Ranking Merger
Full outer merge of the text-match and fuzzy-similarity candidate sets.

Ordering (strict, every key compared in turn):
1. exact text match (descending)
2. name starts with the raw query (descending)
3. text rank (descending)
4. fuzzy similarity (descending)
5. product id (ascending, tie-break)
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple

from .backends.base import FuzzyMatch, TextMatch
from .text import fold

logger = logging.getLogger(__name__)


@dataclass
class RankedResult:
    """
    One merged candidate.

    Attributes:
        product_id: Product identifier
        is_exact_text_match: Matched the compiled expression
        is_prefix_match: Product name starts with the raw query
        text_rank: Text relevance (0 when absent from the text arm)
        similarity: Fuzzy similarity (0 when absent from the fuzzy arm)
    """

    product_id: int
    is_exact_text_match: bool = False
    is_prefix_match: bool = False
    text_rank: float = 0.0
    similarity: float = 0.0

    def sort_key(self) -> Tuple[bool, bool, float, float, int]:
        return (
            not self.is_exact_text_match,
            not self.is_prefix_match,
            -self.text_rank,
            -self.similarity,
            self.product_id,
        )

    def to_dict(self) -> dict:
        return {
            "product_id": self.product_id,
            "is_exact_text_match": self.is_exact_text_match,
            "is_prefix_match": self.is_prefix_match,
            "text_rank": self.text_rank,
            "similarity": self.similarity,
        }


def is_prefix_match(name: str, raw_query: str) -> bool:
    """Whether a product name starts with the raw query, ignoring case and accents."""
    prefix = fold(raw_query)
    if not prefix:
        return False
    return fold(name).startswith(prefix)


def merge_results(
    text_matches: Iterable[TextMatch],
    fuzzy_matches: Iterable[FuzzyMatch],
    raw_query: str,
) -> List[RankedResult]:
    """
    Merge both arms into one ranked list.

    A product present in only one arm gets defaults for the missing arm's
    fields. Each product appears exactly once.

    Args:
        text_matches: Hits from the compiled-expression arm
        fuzzy_matches: Hits from the trigram-similarity arm
        raw_query: Raw user input (for the prefix signal)

    Returns:
        Results sorted by relevance
    """
    merged: Dict[int, RankedResult] = {}
    names: Dict[int, str] = {}

    for match in text_matches:
        result = merged.setdefault(match.product_id, RankedResult(product_id=match.product_id))
        result.is_exact_text_match = True
        result.text_rank = max(result.text_rank, match.rank)
        names.setdefault(match.product_id, match.name)

    for match in fuzzy_matches:
        result = merged.setdefault(match.product_id, RankedResult(product_id=match.product_id))
        result.similarity = max(result.similarity, match.similarity)
        names.setdefault(match.product_id, match.name)

    for product_id, result in merged.items():
        result.is_prefix_match = is_prefix_match(names.get(product_id) or "", raw_query)

    ranked = sorted(merged.values(), key=RankedResult.sort_key)
    logger.debug(f"Merged {len(ranked)} candidates for {raw_query!r}")
    return ranked


def paginate(results: List[RankedResult], limit: int, offset: int) -> List[RankedResult]:
    """
    Slice a ranked list.

    Raises:
        ValueError: If limit < 1 or offset < 0
    """
    if limit < 1:
        raise ValueError(f"limit must be >= 1, got {limit}")
    if offset < 0:
        raise ValueError(f"offset must be >= 0, got {offset}")
    return results[offset : offset + limit]
