"""
Catalog Search
Query compilation, ranking and unit facets for the multi-retailer product catalog.
"""

__version__ = "0.1.0"
