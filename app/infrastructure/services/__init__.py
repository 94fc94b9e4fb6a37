"""
Process-scoped services.

Provides provider functions for shared infrastructure singletons.
"""

from infrastructure.services.providers import get_settings

__all__ = [
    "get_settings",
]
