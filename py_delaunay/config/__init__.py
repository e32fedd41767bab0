"""
Configuration for the triangulation engine and API.
"""

from .config import Settings, settings

__all__ = ['Settings', 'settings']
