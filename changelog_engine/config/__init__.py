"""
Configuration Package
Provides centralized configuration for the changelog engine.
"""

from .settings import Settings, settings

__all__ = [
    'Settings',
    'settings'
]
