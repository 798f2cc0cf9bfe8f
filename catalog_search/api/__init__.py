"""
Catalog Search API
FastAPI application exposing query compilation, search and unit facets.
"""
