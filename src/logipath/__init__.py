"""
Logipath - Route Computation over Logistics Networks

This package computes routes between locations of a directed, weighted
logistics network (depots, distributors and clients joined by routes with a
distance and a cost). It includes:

- An immutable graph snapshot built from location/route records
- Ten interchangeable routing strategies sharing one result contract
- JSON network loading with schema validation
- A command line interface

For more information, please see the documentation.
"""

__version__ = "0.1.0"
__author__ = "Logipath Team"
__license__ = "See LICENSE file"

# Version compatibility check
import sys

if sys.version_info < (3, 11):
    raise RuntimeError("Logipath requires Python 3.11 or higher")

# Import commonly used components for easier access
from .core.graph import GraphModel
from .core.graph_paths import PathFinding, PathResult, PathType
from .core.models import Location, Route

__all__ = [
    "GraphModel",
    "Location",
    "PathFinding",
    "PathResult",
    "PathType",
    "Route",
]
