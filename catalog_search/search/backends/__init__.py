"""
Search Backends
Storage adapters that evaluate compiled expressions and fuzzy similarity.
"""

from .base import (
    FuzzyMatch,
    GroupMatch,
    SearchBackend,
    TextMatch,
    UnitCount,
    Visibility,
)
from .memory import InMemorySearchBackend, IndexedGroup, IndexedProduct
from .postgres import PostgresSearchBackend

__all__ = [
    "FuzzyMatch",
    "GroupMatch",
    "SearchBackend",
    "TextMatch",
    "UnitCount",
    "Visibility",
    "InMemorySearchBackend",
    "IndexedGroup",
    "IndexedProduct",
    "PostgresSearchBackend",
]
