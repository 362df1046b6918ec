"""Core routing functionality."""

from .enums import LocationType
from .exceptions import (
    ConfigurationError,
    GraphOperationError,
    PathReconstructionError,
    ValidationError,
)
from .models import Location, Route
from .graph import Edge, GraphModel, Node
from .metric import DEFAULT_ALPHA, DEFAULT_METRIC, Metric, MetricPolicy
from .graph_paths import PathFinding, PathResult, PathType
from .serialization import load_graph, load_network_file, locations_from_dict, locations_to_dict

__all__ = [
    "ConfigurationError",
    "DEFAULT_ALPHA",
    "DEFAULT_METRIC",
    "Edge",
    "GraphModel",
    "GraphOperationError",
    "Location",
    "LocationType",
    "Metric",
    "MetricPolicy",
    "Node",
    "PathFinding",
    "PathReconstructionError",
    "PathResult",
    "PathType",
    "Route",
    "ValidationError",
    "load_graph",
    "load_network_file",
    "locations_from_dict",
    "locations_to_dict",
]
