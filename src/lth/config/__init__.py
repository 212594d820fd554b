"""
Configuration helpers for lth.
"""

from .settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
