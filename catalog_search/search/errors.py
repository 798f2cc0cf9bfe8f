"""
Search Errors
Exceptions raised by the search core.
"""


class CatalogIntegrityError(ValueError):
    """Raised when the synonym catalog is inconsistent (bad ids or references)."""

    pass


class SearchBackendError(Exception):
    """Raised when the text-search engine fails on either the expression or fuzzy arm."""

    def __init__(self, message: str, arm: str = "unknown"):
        self.message = message
        self.arm = arm
        super().__init__(message)
