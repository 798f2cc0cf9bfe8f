"""
PostgreSQL Search Backend
Text arm with to_tsquery over accent-folded vectors, fuzzy arm with pg_trgm.

Requires the pg_trgm and unaccent extensions. Calls run the synchronous
SQLAlchemy session in a worker thread, one session per call, so the two
arms can run concurrently.
"""

import asyncio
import logging
from typing import Callable, Dict, List, Optional, Sequence

from sqlalchemy import and_, false, func, literal, literal_column, or_, select, union
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ...db.models import Group, Product, ProductGroup, ProductShopPrice
from ..errors import SearchBackendError
from .base import FuzzyMatch, GroupMatch, SearchBackend, TextMatch, UnitCount, Visibility

logger = logging.getLogger(__name__)

# Text search configuration -> accent-folded vector column
SEARCH_VECTORS: Dict[str, object] = {
    "spanish": Product.name_unaccent_es,
    "english": Product.name_unaccent_en,
}


def visibility_clause(visibility: Visibility):
    """Filter for products eligible to appear in results."""
    listing = [ProductShopPrice.product_id == Product.id]
    if not visibility.include_hidden:
        listing.append(ProductShopPrice.hidden.isnot(True))

    clauses = [select(ProductShopPrice.id).where(*listing).exists()]
    if not visibility.include_deleted:
        clauses.append(func.coalesce(Product.deleted, false()).is_(false()))
    return and_(*clauses)


class PostgresSearchBackend(SearchBackend):
    """
    Search backend over the products table.

    Text rank is the best ``ts_rank`` across the configured text search
    configurations; similarity is ``similarity()`` on unaccented lowercase
    names. Membership in the fuzzy arm uses the permissive ``%`` operator
    with the configured trigram limit.
    """

    name = "postgres"

    def __init__(
        self,
        session_factory: Callable[[], Session],
        text_configs: Sequence[str] = ("spanish", "english"),
        similarity_threshold: float = 0.3,
    ):
        """
        Initialize PostgreSQL backend.

        Args:
            session_factory: Callable returning a new session
            text_configs: Text search configurations to match against
            similarity_threshold: pg_trgm similarity limit for the % operator

        Raises:
            ValueError: If a configuration has no search vector column
        """
        unknown = [c for c in text_configs if c not in SEARCH_VECTORS]
        if unknown or not text_configs:
            raise ValueError(
                f"Unsupported text search configurations: {unknown or list(text_configs)}. "
                f"Available: {sorted(SEARCH_VECTORS)}"
            )

        self.session_factory = session_factory
        self.text_configs = list(text_configs)
        self.similarity_threshold = similarity_threshold
        logger.info(
            f"PostgreSQL search backend initialized (configs={self.text_configs}, "
            f"trigram_limit={similarity_threshold})"
        )

    # ------------------------------------------------------------------
    # Statement builders
    # ------------------------------------------------------------------

    def _tsqueries(self, expression: str):
        return [
            (
                SEARCH_VECTORS[config],
                func.to_tsquery(literal_column(f"'{config}'"), func.unaccent(literal(expression))),
            )
            for config in self.text_configs
        ]

    def _text_condition(self, expression: str):
        return or_(*[vector.op("@@")(query) for vector, query in self._tsqueries(expression)])

    def _text_rank(self, expression: str):
        ranks = [func.ts_rank(vector, query) for vector, query in self._tsqueries(expression)]
        if len(ranks) == 1:
            return ranks[0]
        return func.greatest(*ranks)

    @staticmethod
    def _folded_name():
        return func.unaccent(func.lower(Product.name))

    @staticmethod
    def _folded_query(raw_query: str):
        return func.unaccent(func.lower(literal(raw_query)))

    def _fuzzy_condition(self, raw_query: str):
        return self._folded_name().op("%")(self._folded_query(raw_query))

    def text_statement(self, expression: str, visibility: Visibility):
        return select(
            Product.id,
            Product.name,
            self._text_rank(expression).label("rank"),
        ).where(self._text_condition(expression), visibility_clause(visibility))

    def fuzzy_statement(self, raw_query: str, visibility: Visibility):
        similarity = func.similarity(self._folded_name(), self._folded_query(raw_query))
        return select(
            Product.id,
            Product.name,
            similarity.label("similarity"),
        ).where(self._fuzzy_condition(raw_query), visibility_clause(visibility))

    def _candidates(
        self, expression: str, raw_query: str, visibility: Visibility, columns, *criteria
    ):
        """Rows of both arms' candidates (fuzzy arm only without an expression), deduplicated."""
        conditions = [self._fuzzy_condition(raw_query)]
        if expression:
            conditions.append(self._text_condition(expression))

        arms = [
            select(*columns).where(condition, visibility_clause(visibility), *criteria)
            for condition in conditions
        ]
        return union(*arms) if len(arms) > 1 else arms[0]

    def unit_statement(self, expression: str, raw_query: str, visibility: Visibility):
        candidates = self._candidates(
            expression, raw_query, visibility, [Product.id, Product.unit]
        ).subquery()
        count = func.count().label("product_count")
        return (
            select(candidates.c.unit, count)
            .where(candidates.c.unit.isnot(None), candidates.c.unit != "")
            .group_by(candidates.c.unit)
            .order_by(count.desc(), candidates.c.unit)
        )

    def group_statement(self, expression: str, raw_query: str, visibility: Visibility):
        matched = self._candidates(
            expression,
            raw_query,
            visibility,
            [ProductGroup.group_id],
            ProductGroup.product_id == Product.id,
        ).subquery()
        similarity = func.similarity(
            func.unaccent(func.lower(Group.name)), self._folded_query(raw_query)
        ).label("similarity")
        return (
            select(Group.id, Group.name, Group.human_name_id, similarity)
            .where(Group.id.in_(select(matched.c.group_id)))
            .order_by(similarity.desc(), Group.id)
        )

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------

    def _execute(self, statement, trigram_limit: Optional[float] = None) -> list:
        session = self.session_factory()
        try:
            if trigram_limit is not None:
                session.execute(select(func.set_limit(trigram_limit)))
            return session.execute(statement).all()
        finally:
            session.close()

    async def _run(self, arm: str, statement, trigram_limit: Optional[float] = None) -> list:
        try:
            return await asyncio.to_thread(self._execute, statement, trigram_limit)
        except SQLAlchemyError as e:
            logger.error(f"{arm} query failed: {e}")
            raise SearchBackendError(f"{arm} query failed: {e}", arm=arm) from e

    async def match_expression(self, expression: str, visibility: Visibility) -> List[TextMatch]:
        rows = await self._run("text", self.text_statement(expression, visibility))
        return [TextMatch(row.id, row.name, float(row.rank or 0.0)) for row in rows]

    async def fuzzy_match(self, raw_query: str, visibility: Visibility) -> List[FuzzyMatch]:
        rows = await self._run(
            "fuzzy",
            self.fuzzy_statement(raw_query, visibility),
            trigram_limit=self.similarity_threshold,
        )
        return [FuzzyMatch(row.id, row.name, float(row.similarity or 0.0)) for row in rows]

    async def unit_counts(
        self, expression: str, raw_query: str, visibility: Visibility
    ) -> List[UnitCount]:
        rows = await self._run(
            "units",
            self.unit_statement(expression, raw_query, visibility),
            trigram_limit=self.similarity_threshold,
        )
        return [UnitCount(row.unit, int(row.product_count)) for row in rows]

    async def group_matches(
        self, expression: str, raw_query: str, visibility: Visibility
    ) -> List[GroupMatch]:
        rows = await self._run(
            "groups",
            self.group_statement(expression, raw_query, visibility),
            trigram_limit=self.similarity_threshold,
        )
        return [
            GroupMatch(row.id, row.name, row.human_name_id, float(row.similarity or 0.0))
            for row in rows
        ]

    async def ping(self) -> bool:
        try:
            await asyncio.to_thread(self._execute, select(literal(1)))
            return True
        except SQLAlchemyError as e:
            logger.error(f"Database health check failed: {e}")
            return False
