"""
Record models for the logistics network.

This package provides the location and route records consumed by the graph
builder.
"""

from .location import Location, Route

__all__ = [
    "Location",
    "Route",
]
