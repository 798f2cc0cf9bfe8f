"""
Pytest configuration and shared fixtures
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from catalog_search.search import QueryCompiler, build_catalog, get_default_catalog
from catalog_search.search.backends import InMemorySearchBackend, IndexedGroup, IndexedProduct


@pytest.fixture(scope="session")
def default_catalog():
    """Built-in synonym catalog."""
    return get_default_catalog()


@pytest.fixture(scope="session")
def compiler(default_catalog):
    return QueryCompiler(default_catalog)


@pytest.fixture
def small_catalog():
    """Hand-written catalog with every group variant."""
    return build_catalog(
        [
            {"synonyms": ["with", "con"], "alternatives": ["with", "con"], "id": "con"},
            {"synonyms": ["sin", "free"], "alternatives": ["sin", "free:*"], "id": "sin"},
            {"synonyms": ["azucar", "sugar"], "alternatives": ["azucar", "sug:*"], "id": "azucar"},
            {"synonyms": ["stevia", "sin calorias"], "alternatives": ["stevia"], "refs": ["sin", "azucar"]},
            {"synonyms": ["pan", "bread"], "alternatives": ["pan", "bread:*"]},
            {"synonyms": ["pan de molde"], "alternatives": ["pan & molde"]},
            {"synonyms": ["cafe"], "alternatives": ["caf:*", "coffee"]},
        ]
    )


@pytest.fixture
def sample_products():
    """Products covering visibility and unit edge cases."""
    return [
        IndexedProduct(1, "Leche Entera Rica", unit="1 LT", group_ids=(10, 12)),
        IndexedProduct(2, "Leche Deslactosada Rica", unit="1 LT", group_ids=(10, 12)),
        IndexedProduct(3, "Queso Blanco", unit="16 OZ", group_ids=(11, 12)),
        IndexedProduct(4, "Queso Amarillo", unit="1 LB", group_ids=(11, 12)),
        IndexedProduct(5, "Leche de Coco", unit="400 ML", group_ids=(10,)),
        IndexedProduct(6, "Leche en Polvo", unit="1 LB", deleted=True, group_ids=(13,)),
        IndexedProduct(7, "Leche Condensada", unit="14 OZ", price_hidden=(True,), group_ids=(13,)),
        IndexedProduct(8, "Milk Chocolate Bar", unit="16 OZ", group_ids=(14,)),
        IndexedProduct(9, "Queso Crema", unit="8 OZ", price_hidden=(), group_ids=(11,)),
    ]


@pytest.fixture
def sample_groups():
    """Groups of the sample products; 13 holds only invisible products."""
    return [
        IndexedGroup(10, "Leches", "leches"),
        IndexedGroup(11, "Quesos", "quesos"),
        IndexedGroup(12, "Lácteos", "lacteos"),
        IndexedGroup(13, "Leches Condensadas", "leches-condensadas"),
        IndexedGroup(14, "Chocolates", "chocolates"),
    ]


@pytest.fixture
def memory_backend(sample_products, sample_groups):
    return InMemorySearchBackend(sample_products, groups=sample_groups)
