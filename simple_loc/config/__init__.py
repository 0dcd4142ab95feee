"""
Unified configuration access point.

    from simple_loc.config import get_settings

    section = get_settings().app_section
"""

from .settings import LocalizationSettings, get_settings, reload_settings

__all__ = [
    "LocalizationSettings",
    "get_settings",
    "reload_settings",
]
