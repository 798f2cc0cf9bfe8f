"""
Configuration Package
"""

from .settings import SearchSettings, get_settings, reset_settings

__all__ = ["SearchSettings", "get_settings", "reset_settings"]
