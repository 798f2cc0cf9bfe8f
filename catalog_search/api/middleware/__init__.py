"""
Middleware
Custom middleware for the FastAPI application.
"""

from .logging import RequestLoggingMiddleware

__all__ = ["RequestLoggingMiddleware"]
