"""
Adapters package - External data connections.
Health data bridge for device readings.
"""

from adapters import health_adapter

__all__ = [
    "health_adapter",
]
