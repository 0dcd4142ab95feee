"""
Utility functions for simple-loc-compat
"""

from .app_logger import configure_logging, get_logger
from .language import match_language, normalize_language

__all__ = ["configure_logging", "get_logger", "match_language", "normalize_language"]
