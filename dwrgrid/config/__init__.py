"""Configuration module - service settings."""

from dwrgrid.config.settings import GridSettings

__all__ = [
    "GridSettings",
]
