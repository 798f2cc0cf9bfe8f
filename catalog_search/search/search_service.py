"""
Search Service
Runs a raw query through compilation, both search arms, merging and paging.

    raw input -> QueryCompiler -> expression
    expression -> backend.match_expression   (concurrently with)
    raw input  -> backend.fuzzy_match
    both hit lists -> merge_results -> paginate -> ids

Unit facets and group search reuse the compiled expression over the
union of both arms.
"""

import asyncio
import logging
import time
from dataclasses import dataclass, field
from typing import List, Optional

from ..units.clustering import UnitFacet, cluster_units
from .backends.base import GroupMatch, SearchBackend, Visibility
from .errors import SearchBackendError
from .query_compiler import QueryCompiler, get_query_compiler
from .ranking import RankedResult, merge_results, paginate

logger = logging.getLogger(__name__)


@dataclass
class SearchPage:
    """
    One page of search results.

    Attributes:
        ids: Product ids in display order
        total: Number of matches before pagination
        expression: Compiled expression used by the text arm
        results: Ranked results of this page (same order as ids)
        search_time_ms: Time spent in the search service
    """

    ids: List[int]
    total: int
    expression: str
    results: List[RankedResult] = field(default_factory=list)
    search_time_ms: float = 0.0


class SearchService:
    """
    Search entry point.

    Holds no per-request state; both arms are awaited together and a
    failure of either one fails the whole search.
    """

    def __init__(
        self,
        backend: SearchBackend,
        compiler: Optional[QueryCompiler] = None,
        visibility: Optional[Visibility] = None,
    ):
        """
        Initialize search service.

        Args:
            backend: Storage adapter for both search arms
            compiler: Query compiler (uses the built-in catalog if not provided)
            visibility: Product eligibility rules
        """
        self.backend = backend
        self.compiler = compiler or get_query_compiler()
        self.visibility = visibility or Visibility()

    async def _text_arm(self, expression: str):
        if not expression:
            return []
        return await self.backend.match_expression(expression, self.visibility)

    async def _gather_arms(self, expression: str, raw_input: str):
        text_result, fuzzy_result = await asyncio.gather(
            self._text_arm(expression),
            self.backend.fuzzy_match(raw_input, self.visibility),
            return_exceptions=True,
        )

        for arm, result in (("text", text_result), ("fuzzy", fuzzy_result)):
            # Cancellation and other non-Exception signals propagate unchanged
            if isinstance(result, SearchBackendError) or (
                isinstance(result, BaseException) and not isinstance(result, Exception)
            ):
                raise result
            if isinstance(result, Exception):
                logger.error(f"Search {arm} arm failed: {result}")
                raise SearchBackendError(f"Search {arm} arm failed: {result}", arm=arm) from result

        return text_result, fuzzy_result

    async def search(self, raw_input: str, limit: int = 20, offset: int = 0) -> SearchPage:
        """
        Search products.

        Args:
            raw_input: Free-text query
            limit: Page size (>= 1)
            offset: Number of ranked results to skip (>= 0)

        Returns:
            SearchPage with ids in ranked order and the unpaginated total

        Raises:
            ValueError: If limit or offset is out of range
            SearchBackendError: If either search arm fails
        """
        if limit < 1:
            raise ValueError(f"limit must be >= 1, got {limit}")
        if offset < 0:
            raise ValueError(f"offset must be >= 0, got {offset}")

        start_time = time.time()
        expression = self.compiler.compile(raw_input)

        text_hits, fuzzy_hits = await self._gather_arms(expression, raw_input)
        ranked = merge_results(text_hits, fuzzy_hits, raw_input)
        page = paginate(ranked, limit=limit, offset=offset)

        search_time_ms = (time.time() - start_time) * 1000
        logger.info(
            f"Search {raw_input!r}: {len(text_hits)} text + {len(fuzzy_hits)} fuzzy hits, "
            f"{len(ranked)} total in {search_time_ms:.2f}ms"
        )

        return SearchPage(
            ids=[r.product_id for r in page],
            total=len(ranked),
            expression=expression,
            results=page,
            search_time_ms=search_time_ms,
        )

    async def search_units(
        self, raw_input: str, group_human_id: Optional[str] = None
    ) -> List[UnitFacet]:
        """
        Unit facets for the products a query matches.

        Args:
            raw_input: Free-text query
            group_human_id: Product group enabling group-specific conversions

        Returns:
            Clustered unit facets (empty for blank input)

        Raises:
            SearchBackendError: If the backend fails
        """
        if not (raw_input or "").strip():
            return []

        expression = self.compiler.compile(raw_input)
        try:
            rows = await self.backend.unit_counts(expression, raw_input.strip(), self.visibility)
        except SearchBackendError:
            raise
        except Exception as e:
            logger.error(f"Unit facet query failed: {e}")
            raise SearchBackendError(f"Unit facet query failed: {e}", arm="units") from e

        return cluster_units([(row.unit, row.count) for row in rows], group_human_id)

    async def search_groups(self, raw_input: str) -> List[GroupMatch]:
        """
        Groups containing products the query matches.

        Candidates are the union of both arms; each group appears once,
        most similar group name first.

        Args:
            raw_input: Free-text query

        Returns:
            Matching groups (empty for blank input)

        Raises:
            SearchBackendError: If the backend fails
        """
        if not (raw_input or "").strip():
            return []

        expression = self.compiler.compile(raw_input)
        try:
            groups = await self.backend.group_matches(expression, raw_input.strip(), self.visibility)
        except SearchBackendError:
            raise
        except Exception as e:
            logger.error(f"Group search failed: {e}")
            raise SearchBackendError(f"Group search failed: {e}", arm="groups") from e

        logger.debug(f"Group search {raw_input!r}: {len(groups)} groups")
        return groups
