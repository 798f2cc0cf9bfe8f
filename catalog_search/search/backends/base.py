"""
Search Backend Interface
Result types and the contract every storage adapter implements.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class Visibility:
    """
    Which products are eligible for results.

    By default a product must not be deleted and must have at least one
    shop price that is not hidden.
    """

    include_deleted: bool = False
    include_hidden: bool = False


@dataclass(frozen=True)
class TextMatch:
    """Product matching the compiled expression."""

    product_id: int
    name: str
    rank: float


@dataclass(frozen=True)
class FuzzyMatch:
    """Product similar to the raw query."""

    product_id: int
    name: str
    similarity: float


@dataclass(frozen=True)
class UnitCount:
    """Number of candidate products carrying a unit string."""

    unit: str
    count: int


@dataclass(frozen=True)
class GroupMatch:
    """Group containing at least one candidate product."""

    group_id: int
    name: str
    human_id: str
    similarity: float

    def to_dict(self) -> dict:
        return {
            "group_id": self.group_id,
            "name": self.name,
            "human_id": self.human_id,
            "similarity": round(self.similarity, 4),
        }


class SearchBackend(ABC):
    """
    Storage adapter for both search arms.

    Implementations must be safe to call concurrently; the search service
    runs the text and fuzzy arms at the same time.
    """

    name: str = "abstract"

    @abstractmethod
    async def match_expression(self, expression: str, visibility: Visibility) -> List[TextMatch]:
        """Products matching a non-empty compiled expression."""

    @abstractmethod
    async def fuzzy_match(self, raw_query: str, visibility: Visibility) -> List[FuzzyMatch]:
        """Products whose name is similar to the raw query."""

    @abstractmethod
    async def unit_counts(
        self, expression: str, raw_query: str, visibility: Visibility
    ) -> List[UnitCount]:
        """
        Unit strings over the union of both arms' candidates.

        An empty expression means only the fuzzy arm contributes.
        """

    @abstractmethod
    async def group_matches(
        self, expression: str, raw_query: str, visibility: Visibility
    ) -> List[GroupMatch]:
        """
        Groups of the union of both arms' candidates, each group once.

        Ordered by similarity of the group name to the raw query (highest
        first), then group id.
        """

    async def ping(self) -> bool:
        """Whether the backend is reachable."""
        return True
