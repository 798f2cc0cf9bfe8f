"""
Search
Synonym-aware query compilation, ranking and the search service.
"""

from .errors import CatalogIntegrityError, SearchBackendError
from .query_compiler import CompiledQuery, QueryCompiler, compile_query, get_query_compiler
from .ranking import RankedResult, merge_results, paginate
from .search_service import SearchPage, SearchService
from .synonyms import (
    CompositeGroup,
    IdentifiedGroup,
    PlainGroup,
    SynonymCatalog,
    SynonymGroup,
    build_catalog,
    get_default_catalog,
)

__all__ = [
    "CatalogIntegrityError",
    "SearchBackendError",
    "CompiledQuery",
    "QueryCompiler",
    "compile_query",
    "get_query_compiler",
    "RankedResult",
    "merge_results",
    "paginate",
    "SearchPage",
    "SearchService",
    "CompositeGroup",
    "IdentifiedGroup",
    "PlainGroup",
    "SynonymCatalog",
    "SynonymGroup",
    "build_catalog",
    "get_default_catalog",
]
