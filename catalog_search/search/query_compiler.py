"""
Query Compiler
Turns free-text search input into a boolean text-search expression.

The expression is an AND of buckets; each bucket is one or more OR'd
fragments produced from 1-3 input tokens:

    "leche s/lactosa" -> (leche:* | milk:* | ...) & (((sin | ...) & (lactosa:* | ...)) | (deslactosad:*))

Matching is longest-first (3-token phrase, 2-token phrase, single token) so
phrase synonyms always beat their individual words.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .synonyms import MAX_PHRASE_TOKENS, SynonymCatalog, SynonymGroup, get_default_catalog
from .text import tokenize

logger = logging.getLogger(__name__)

OR = " | "
AND = " & "


def any_of(alternatives: Sequence[str]) -> str:
    """Parenthesized disjunction of alternatives."""
    return "(" + OR.join(alternatives) + ")"


def all_of(fragments: Sequence[str]) -> str:
    """Parenthesized conjunction of fragments."""
    return "(" + AND.join(fragments) + ")"


@dataclass
class TokenBucket:
    """
    One AND-conjoined slot of the compiled query.

    Attributes:
        fragments: Alternative expression fragments (OR'd)
        tokens: Input tokens consumed by this bucket
        kind: How the bucket was produced: phrase, composed, synonym or literal
    """

    fragments: List[str]
    tokens: List[str]
    kind: str

    def render(self) -> str:
        if len(self.fragments) == 1:
            return self.fragments[0]
        return "(" + OR.join(self.fragments) + ")"

    def to_dict(self) -> dict:
        return {
            "tokens": list(self.tokens),
            "kind": self.kind,
            "expression": self.render(),
        }


@dataclass
class CompiledQuery:
    """Result of compiling one raw input."""

    raw: str
    tokens: List[str]
    buckets: List[TokenBucket] = field(default_factory=list)

    @property
    def expression(self) -> str:
        return AND.join(bucket.render() for bucket in self.buckets)

    @property
    def is_empty(self) -> bool:
        return not self.buckets


class QueryCompiler:
    """
    Compiles raw search input against a synonym catalog.

    Stateless apart from the read-only catalog; one instance can serve
    concurrent requests.
    """

    def __init__(self, catalog: Optional[SynonymCatalog] = None):
        """
        Initialize query compiler.

        Args:
            catalog: Synonym catalog (uses the built-in catalog if not provided)
        """
        self.catalog = catalog or get_default_catalog()

    def compile(self, raw_input: str) -> str:
        """Compile raw input to its expression string ("" when nothing matches)."""
        return self.compile_query(raw_input).expression

    def compile_query(self, raw_input: str) -> CompiledQuery:
        """
        Compile raw input into buckets.

        Args:
            raw_input: Free-text query as typed by the user

        Returns:
            CompiledQuery with tokens and buckets
        """
        tokens = tokenize(raw_input or "")
        compiled = CompiledQuery(raw=raw_input or "", tokens=tokens)

        i = 0
        while i < len(tokens):
            consumed = self._match_phrase(tokens, i, compiled.buckets)
            if not consumed:
                consumed = self._match_single(tokens, i, compiled.buckets)
            i += consumed

        logger.debug(f"Compiled query {raw_input!r} -> {compiled.expression!r}")
        return compiled

    def _match_phrase(self, tokens: List[str], i: int, buckets: List[TokenBucket]) -> int:
        """Try multi-token phrases, longest first. Returns tokens consumed (0 if none)."""
        for size in range(MAX_PHRASE_TOKENS, 1, -1):
            if i + size > len(tokens):
                continue
            window = tokens[i : i + size]
            group = self.catalog.lookup(" ".join(window))
            if group is not None:
                buckets.append(self._group_bucket(group, window, kind="phrase"))
                return size
        return 0

    def _match_single(self, tokens: List[str], i: int, buckets: List[TokenBucket]) -> int:
        """Match one token, composing with the next token when a composite covers both."""
        token = tokens[i]
        group = self.catalog.lookup(token)

        if group is None:
            buckets.append(TokenBucket(fragments=[token], tokens=[token], kind="literal"))
            return 1

        if group.group_id is not None and i + 1 < len(tokens):
            following = self.catalog.lookup(tokens[i + 1])
            if (
                following is not None
                and following.group_id is not None
                and following.group_id != group.group_id
            ):
                composite = self.catalog.composite_for(group.group_id, following.group_id)
                if composite is not None:
                    buckets.append(
                        TokenBucket(
                            fragments=[
                                all_of([any_of(group.alternatives), any_of(following.alternatives)]),
                                any_of(composite.alternatives),
                            ],
                            tokens=tokens[i : i + 2],
                            kind="composed",
                        )
                    )
                    return 2

        if self.catalog.is_noop(group):
            logger.debug(f"Dropping linking word {token!r}")
            return 1

        buckets.append(self._group_bucket(group, [token], kind="synonym"))
        return 1

    def _group_bucket(self, group: SynonymGroup, tokens: List[str], kind: str) -> TokenBucket:
        """Bucket for a matched group; composites offer the AND of their references first."""
        if group.is_composite:
            references = self.catalog.resolve_refs(group)
            fragments = [
                all_of([any_of(ref.alternatives) for ref in references]),
                any_of(group.alternatives),
            ]
        else:
            fragments = list(group.alternatives)
        return TokenBucket(fragments=fragments, tokens=list(tokens), kind=kind)


_default_compiler: Optional[QueryCompiler] = None


def get_query_compiler() -> QueryCompiler:
    """Get global query compiler over the built-in catalog (singleton)."""
    global _default_compiler
    if _default_compiler is None:
        _default_compiler = QueryCompiler()
    return _default_compiler


def compile_query(raw_input: str) -> str:
    """Compile raw input with the built-in catalog."""
    return get_query_compiler().compile(raw_input)
