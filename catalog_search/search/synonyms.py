"""
Synonym Catalog
Static groups of interchangeable product terms and the lexeme patterns they compile to.

A group is one of three variants:
- PlainGroup: terms that expand to a fixed list of alternatives
- IdentifiedGroup: same, plus a stable id other groups can reference
- CompositeGroup: a meaning defined as the AND of referenced identified groups
  (e.g. "deslactosada" = "sin" AND "lactosa"), still carrying its own literal
  alternatives as a fallback
"""

import logging
from dataclasses import dataclass, replace
from functools import lru_cache
from typing import Any, Dict, FrozenSet, Iterable, List, Mapping, Optional, Tuple

from .errors import CatalogIntegrityError
from .pluralize import MULTI_WORD_SEPARATOR, plural_variants

logger = logging.getLogger(__name__)

# Longest synonym phrase (in tokens) the compiler looks ahead for
MAX_PHRASE_TOKENS = 3

# Linking words that add nothing to a query on their own ("con leche" == "leche")
DEFAULT_NOOP_IDS = frozenset(["con"])

# Plural forms settle after a couple of rounds (term, plural, irregular singular)
MAX_EXPANSION_ROUNDS = 4


def expand_terms(terms: Iterable[str]) -> Tuple[str, ...]:
    """
    Expand terms with their plural forms, deduplicated in first-seen order.

    Derived forms are expanded in turn until no new form appears, so
    expanding an already expanded list returns the same set.
    """
    seen: Dict[str, None] = {}
    pending = list(terms)
    for _ in range(MAX_EXPANSION_ROUNDS):
        if not pending:
            break
        derived = []
        for term in pending:
            for variant in plural_variants(term):
                if variant not in seen:
                    seen[variant] = None
                    if variant != term:
                        derived.append(variant)
        pending = derived

    if pending:
        logger.debug(f"Plural expansion stopped with {len(pending)} unexpanded forms: {pending}")
    return tuple(seen)


@dataclass(frozen=True)
class SynonymGroup:
    """
    Base synonym group.

    Attributes:
        terms: Terms as authored in the catalog
        alternatives: Lexeme-pattern fragments, OR'd together when compiled
        synonyms: Terms after plural expansion (empty until expanded)
    """

    terms: Tuple[str, ...]
    alternatives: Tuple[str, ...]
    synonyms: Tuple[str, ...] = ()

    def expanded(self) -> "SynonymGroup":
        """Return a copy whose synonyms are the plural expansion of its terms.

        Expansion always starts from the authored terms, so expanding twice
        yields the same group.
        """
        return replace(self, synonyms=expand_terms(self.terms))

    @property
    def group_id(self) -> Optional[str]:
        return None

    @property
    def refs(self) -> Tuple[str, ...]:
        return ()

    @property
    def is_composite(self) -> bool:
        return False


@dataclass(frozen=True)
class PlainGroup(SynonymGroup):
    """Group with no id, not referenceable."""

    pass


@dataclass(frozen=True)
class IdentifiedGroup(SynonymGroup):
    """Group with a stable id that composite groups may reference."""

    stable_id: str = ""

    @property
    def group_id(self) -> Optional[str]:
        return self.stable_id


@dataclass(frozen=True)
class CompositeGroup(SynonymGroup):
    """Group whose meaning is the conjunction of the referenced groups."""

    ref_ids: Tuple[str, ...] = ()

    @property
    def refs(self) -> Tuple[str, ...]:
        return self.ref_ids

    @property
    def is_composite(self) -> bool:
        return True


def group_from_entry(entry: Mapping[str, Any]) -> SynonymGroup:
    """
    Build a group variant from a raw catalog entry.

    Entry keys: ``synonyms`` and ``alternatives`` (required), and at most one
    of ``id`` or ``refs``.

    Raises:
        CatalogIntegrityError: If the entry is malformed
    """
    try:
        terms = tuple(entry["synonyms"])
        alternatives = tuple(entry["alternatives"])
    except KeyError as e:
        raise CatalogIntegrityError(f"Synonym entry missing key {e}: {dict(entry)}")

    if not alternatives:
        raise CatalogIntegrityError(f"Synonym entry has no alternatives: {terms}")

    group_id = entry.get("id")
    refs = entry.get("refs")

    if group_id is not None and refs is not None:
        raise CatalogIntegrityError(
            f"Synonym entry {terms} has both an id ({group_id}) and refs ({refs})"
        )

    if group_id is not None:
        return IdentifiedGroup(terms=terms, alternatives=alternatives, stable_id=str(group_id))
    if refs is not None:
        if not refs:
            raise CatalogIntegrityError(f"Composite synonym entry {terms} has empty refs")
        return CompositeGroup(
            terms=terms, alternatives=alternatives, ref_ids=tuple(str(r) for r in refs)
        )
    return PlainGroup(terms=terms, alternatives=alternatives)


class SynonymCatalog:
    """
    Immutable, load-once catalog of synonym groups.

    Resolves ids and composite references at construction so that phrase
    lookup, id lookup and adjacency composition are dictionary probes.
    Safe for concurrent reads.
    """

    def __init__(
        self,
        groups: Iterable[SynonymGroup],
        noop_ids: FrozenSet[str] = DEFAULT_NOOP_IDS,
    ):
        """
        Initialize and validate the catalog.

        Args:
            groups: Group variants (expanded here)
            noop_ids: Ids of groups whose single-token matches are dropped

        Raises:
            CatalogIntegrityError: On duplicate ids, unresolved references or
                unknown no-op ids
        """
        self.groups: Tuple[SynonymGroup, ...] = tuple(g.expanded() for g in groups)
        self.noop_ids = frozenset(noop_ids)

        self._by_id: Dict[str, SynonymGroup] = {}
        self._by_phrase: Dict[str, SynonymGroup] = {}
        self._composite_by_refs: Dict[FrozenSet[str], CompositeGroup] = {}

        for group in self.groups:
            if group.group_id is not None:
                if group.group_id in self._by_id:
                    raise CatalogIntegrityError(f"Duplicate synonym group id: {group.group_id}")
                self._by_id[group.group_id] = group

            for synonym in group.synonyms:
                if not synonym or MULTI_WORD_SEPARATOR in synonym:
                    continue
                if len(synonym.split(" ")) > MAX_PHRASE_TOKENS:
                    continue
                # First group listing a phrase owns it
                self._by_phrase.setdefault(synonym, group)

        for group in self.groups:
            if not isinstance(group, CompositeGroup):
                continue
            missing = [ref for ref in group.refs if ref not in self._by_id]
            if missing:
                raise CatalogIntegrityError(
                    f"Composite synonym group {group.terms} references unknown ids: {missing}"
                )
            self._composite_by_refs.setdefault(frozenset(group.refs), group)

        unknown_noops = sorted(self.noop_ids - set(self._by_id))
        if unknown_noops:
            raise CatalogIntegrityError(f"No-op ids not present in catalog: {unknown_noops}")

        logger.info(
            f"Synonym catalog loaded: {len(self.groups)} groups, "
            f"{len(self._by_phrase)} phrases, {len(self._composite_by_refs)} composites"
        )

    def __len__(self) -> int:
        return len(self.groups)

    def lookup(self, phrase: str) -> Optional[SynonymGroup]:
        """Find the group owning a normalized phrase of 1-3 tokens."""
        return self._by_phrase.get(phrase)

    def get(self, group_id: str) -> SynonymGroup:
        """Get an identified group by id (KeyError if absent)."""
        return self._by_id[group_id]

    def resolve_refs(self, group: SynonymGroup) -> List[SynonymGroup]:
        """Referenced groups of a composite, in authored order."""
        return [self._by_id[ref] for ref in group.refs]

    def composite_for(self, *group_ids: str) -> Optional[CompositeGroup]:
        """Composite whose references equal the given ids as a set."""
        return self._composite_by_refs.get(frozenset(group_ids))

    def is_noop(self, group: SynonymGroup) -> bool:
        """Whether a group is a pure linking word."""
        return group.group_id is not None and group.group_id in self.noop_ids

    def stats(self) -> Dict[str, int]:
        return {
            "groups": len(self.groups),
            "phrases": len(self._by_phrase),
            "identified": len(self._by_id),
            "composites": len(self._composite_by_refs),
        }


def build_catalog(
    entries: Iterable[Mapping[str, Any]], noop_ids: FrozenSet[str] = DEFAULT_NOOP_IDS
) -> SynonymCatalog:
    """Build a catalog from raw entries."""
    return SynonymCatalog([group_from_entry(e) for e in entries], noop_ids=noop_ids)


@lru_cache()
def get_default_catalog() -> SynonymCatalog:
    """Get the built-in catalog (built once, cached)."""
    from .synonym_data import SYNONYM_ENTRIES

    return build_catalog(SYNONYM_ENTRIES)
