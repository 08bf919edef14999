"""Routers package."""

from . import health, resources

__all__ = [
    "health",
    "resources",
]
