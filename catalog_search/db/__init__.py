"""
Database
ORM models and session factory for the product catalog tables.
"""

from .models import Base, Group, Product, ProductGroup, ProductShopPrice
from .session import get_engine, get_session_factory, reset_engine

__all__ = [
    "Base",
    "Group",
    "Product",
    "ProductGroup",
    "ProductShopPrice",
    "get_engine",
    "get_session_factory",
    "reset_engine",
]
