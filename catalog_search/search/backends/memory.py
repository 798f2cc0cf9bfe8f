"""
In-Memory Search Backend
Evaluates compiled expressions against an in-process product list.

Used for tests and local development. Expression semantics follow the
text-search operators the compiler emits:

    term      exact word
    term:*    word prefix
    a & b     both
    a | b     either
    a <-> b   both (adjacency approximated as AND)
    !a        negation
"""

import json
import logging
import re
from collections import Counter
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Set, Tuple

from rapidfuzz import fuzz

from ..text import fold, tokenize
from .base import FuzzyMatch, GroupMatch, SearchBackend, TextMatch, UnitCount, Visibility

logger = logging.getLogger(__name__)

_TOKEN_RE = re.compile(r"<->|[()&|!]|[a-z0-9]+(?::\*)?|\S")


@dataclass(frozen=True)
class IndexedProduct:
    """
    Product as seen by the search arms.

    Attributes:
        product_id: Product identifier
        name: Display name
        unit: Raw unit string (e.g. "16 OZ")
        deleted: Soft-deleted flag
        price_hidden: Hidden flag of each shop price listing
        group_ids: Groups the product belongs to
    """

    product_id: int
    name: str
    unit: Optional[str] = None
    deleted: bool = False
    price_hidden: Tuple[bool, ...] = (False,)
    group_ids: Tuple[int, ...] = ()

    def is_visible(self, visibility: Visibility) -> bool:
        if self.deleted and not visibility.include_deleted:
            return False
        if visibility.include_hidden:
            return bool(self.price_hidden)
        return any(not hidden for hidden in self.price_hidden)


@dataclass(frozen=True)
class IndexedGroup:
    """Product group with its URL slug."""

    group_id: int
    name: str
    human_id: str


class ExpressionParser:
    """Recursive-descent parser for compiled expressions."""

    def __init__(self, expression: str):
        self.tokens = _TOKEN_RE.findall(expression.lower())
        self.pos = 0

    def parse(self):
        node = self._parse_or()
        if self.pos != len(self.tokens):
            raise ValueError(f"Unexpected token {self.tokens[self.pos]!r} in expression")
        return node

    def _peek(self) -> Optional[str]:
        return self.tokens[self.pos] if self.pos < len(self.tokens) else None

    def _next(self) -> str:
        token = self._peek()
        if token is None:
            raise ValueError("Unexpected end of expression")
        self.pos += 1
        return token

    def _parse_or(self):
        node = self._parse_and()
        while self._peek() == "|":
            self._next()
            node = ("or", node, self._parse_and())
        return node

    def _parse_and(self):
        node = self._parse_unary()
        while self._peek() in ("&", "<->"):
            self._next()
            node = ("and", node, self._parse_unary())
        return node

    def _parse_unary(self):
        token = self._next()
        if token == "!":
            return ("not", self._parse_unary())
        if token == "(":
            node = self._parse_or()
            if self._next() != ")":
                raise ValueError("Unbalanced parentheses in expression")
            return node
        if token.endswith(":*"):
            return ("term", token[:-2], True)
        if re.fullmatch(r"[a-z0-9]+", token):
            return ("term", token, False)
        raise ValueError(f"Unexpected token {token!r} in expression")


def parse_expression(expression: str):
    """Parse a compiled expression into a nested tuple tree."""
    return ExpressionParser(expression).parse()


def _term_matches(term: str, prefix: bool, words: Set[str]) -> bool:
    if prefix:
        return any(word.startswith(term) for word in words)
    return term in words


def evaluate(node, words: Set[str]) -> bool:
    """Evaluate a parsed expression against a set of words."""
    kind = node[0]
    if kind == "term":
        return _term_matches(node[1], node[2], words)
    if kind == "not":
        return not evaluate(node[1], words)
    if kind == "and":
        return evaluate(node[1], words) and evaluate(node[2], words)
    return evaluate(node[1], words) or evaluate(node[2], words)


def _terms(node) -> Iterable[Tuple[str, bool]]:
    if node[0] == "term":
        yield node[1], node[2]
    else:
        for child in node[1:]:
            yield from _terms(child)


def rank(node, words: Set[str]) -> float:
    """Fraction of the name's words covered by the expression's terms."""
    if not words:
        return 0.0
    covered = {
        word
        for term, prefix in set(_terms(node))
        for word in words
        if (word.startswith(term) if prefix else word == term)
    }
    return len(covered) / len(words)


class InMemorySearchBackend(SearchBackend):
    """
    Search backend over a fixed list of products.

    Fuzzy similarity is the rapidfuzz ratio of the accent-folded name and
    query, scaled to [0, 1].
    """

    name = "memory"

    def __init__(
        self,
        products: Iterable[IndexedProduct],
        similarity_threshold: float = 0.3,
        groups: Iterable[IndexedGroup] = (),
    ):
        """
        Initialize in-memory backend.

        Args:
            products: Products to search
            similarity_threshold: Minimum similarity for fuzzy membership
            groups: Groups referenced by the products' ``group_ids``
        """
        self.products: List[IndexedProduct] = list(products)
        self.similarity_threshold = similarity_threshold
        self.groups: Dict[int, IndexedGroup] = {g.group_id: g for g in groups}
        self._words = {p.product_id: set(tokenize(p.name)) for p in self.products}
        logger.info(
            f"In-memory search backend initialized with {len(self.products)} products "
            f"and {len(self.groups)} groups"
        )

    @classmethod
    def from_json(cls, path: str, similarity_threshold: float = 0.3) -> "InMemorySearchBackend":
        """
        Load products (and optionally groups) from a JSON file.

        The file holds either a list of products or an object with
        ``products`` and ``groups`` lists. Products have keys ``id``, ``name``
        and optionally ``unit``, ``deleted``, ``price_hidden`` (list of bools)
        and ``groups`` (list of group ids). Groups have ``id``, ``name`` and
        ``human_id``.

        Args:
            path: Path to the JSON file
            similarity_threshold: Minimum similarity for fuzzy membership
        """
        with open(path, encoding="utf-8") as f:
            data = json.load(f)

        if isinstance(data, list):
            data = {"products": data}

        products = [
            IndexedProduct(
                product_id=int(row["id"]),
                name=row["name"],
                unit=row.get("unit"),
                deleted=bool(row.get("deleted", False)),
                price_hidden=tuple(bool(h) for h in row.get("price_hidden", [False])),
                group_ids=tuple(int(g) for g in row.get("groups", [])),
            )
            for row in data.get("products", [])
        ]
        groups = [
            IndexedGroup(int(row["id"]), row["name"], row["human_id"])
            for row in data.get("groups", [])
        ]
        logger.info(f"Loaded {len(products)} products and {len(groups)} groups from {path}")
        return cls(products, similarity_threshold=similarity_threshold, groups=groups)

    def _visible(self, visibility: Visibility) -> List[IndexedProduct]:
        return [p for p in self.products if p.is_visible(visibility)]

    def _text_hits(self, expression: str, visibility: Visibility) -> List[TextMatch]:
        tree = parse_expression(expression)
        hits = []
        for product in self._visible(visibility):
            words = self._words[product.product_id]
            if evaluate(tree, words):
                hits.append(TextMatch(product.product_id, product.name, rank(tree, words)))
        return hits

    def _fuzzy_hits(self, raw_query: str, visibility: Visibility) -> List[FuzzyMatch]:
        query = fold(raw_query)
        if not query:
            return []
        cutoff = self.similarity_threshold * 100
        hits = []
        for product in self._visible(visibility):
            score = fuzz.ratio(query, fold(product.name), score_cutoff=cutoff)
            if score:
                hits.append(FuzzyMatch(product.product_id, product.name, score / 100.0))
        return hits

    def _candidates(
        self, expression: str, raw_query: str, visibility: Visibility
    ) -> List[IndexedProduct]:
        ids = {hit.product_id for hit in self._fuzzy_hits(raw_query, visibility)}
        if expression:
            ids.update(hit.product_id for hit in self._text_hits(expression, visibility))
        return [p for p in self.products if p.product_id in ids]

    async def match_expression(self, expression: str, visibility: Visibility) -> List[TextMatch]:
        return self._text_hits(expression, visibility)

    async def fuzzy_match(self, raw_query: str, visibility: Visibility) -> List[FuzzyMatch]:
        return self._fuzzy_hits(raw_query, visibility)

    async def unit_counts(
        self, expression: str, raw_query: str, visibility: Visibility
    ) -> List[UnitCount]:
        candidates = self._candidates(expression, raw_query, visibility)
        counts = Counter(p.unit for p in candidates if p.unit)
        return [UnitCount(unit, count) for unit, count in counts.most_common()]

    async def group_matches(
        self, expression: str, raw_query: str, visibility: Visibility
    ) -> List[GroupMatch]:
        group_ids = {
            group_id
            for product in self._candidates(expression, raw_query, visibility)
            for group_id in product.group_ids
            if group_id in self.groups
        }

        query = fold(raw_query)
        matches = [
            GroupMatch(
                group.group_id,
                group.name,
                group.human_id,
                fuzz.ratio(query, fold(group.name)) / 100.0,
            )
            for group in (self.groups[group_id] for group_id in group_ids)
        ]
        matches.sort(key=lambda m: (-m.similarity, m.group_id))
        return matches
