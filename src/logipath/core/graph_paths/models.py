"""
Data models for graph path finding.

This module provides the core data structures shared by every routing strategy:
- PathResult: The value returned to callers, with validation against a graph
- Candidate: Internal index-based path used while a strategy is searching
- PerformanceMetrics: Timing and exploration counters logged per computation
- PathValidationError: Exception for path validation failures

A strategy builds ``Candidate`` objects from the edges it selected; totals are
always summed from those edges, so a ``PathResult`` reconciles with the network
by construction.

Example:
    >>> result = PathFinding.dijkstra(graph, "Depot", "Client X")
    >>> result.nodes
    ['Depot', 'Client A', 'Client X']
    >>> result.validate(graph)
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple, Union

from ..exceptions import PathReconstructionError
from ..graph import Edge, GraphModel

EPSILON = 1e-9  # Floating point comparison tolerance

INVALID_INPUT_MSG = "Invalid input: 'from' and 'to' are required."
EMPTY_GRAPH_MSG = "No locations are loaded in the network."
UNKNOWN_LOCATION_MSG = "Invalid input: location '{name}' was not found in the network."
NO_PATH_MSG = "No route exists between '{start}' and '{end}'."
SAME_LOCATION_MSG = "Origin and destination are the same location."
SUCCESS_MSG = "Route computed successfully using {algorithm}."


class PathValidationError(Exception):
    """
    Raised when a path fails validation checks.

    This exception indicates issues such as:
    - Node and route sequences of inconsistent length
    - Consecutive locations not joined by the reported route
    - Totals that do not match the sum of the route attributes
    """

    pass


@dataclass
class PathResult:
    """
    Outcome of one routing computation.

    Attributes:
        message: Human-readable status
        nodes: Location names in travel order
        routes: Route names in travel order, one fewer than ``nodes``
        total_distance: Sum of the distances of the reported routes
        total_cost: Sum of the costs of the reported routes

    An empty result (no route, invalid input) has empty sequences and zero
    totals. A trivial result (origin equals destination) holds a single node
    and no routes.
    """

    message: str
    nodes: List[str] = field(default_factory=list)
    routes: List[str] = field(default_factory=list)
    total_distance: float = 0.0
    total_cost: float = 0.0

    def __post_init__(self):
        """Validate initialization parameters."""
        if not isinstance(self.message, str):
            raise TypeError("message must be a string")
        if not isinstance(self.nodes, list) or not isinstance(self.routes, list):
            raise TypeError("nodes and routes must be lists")
        if not isinstance(self.total_distance, (int, float)):
            raise TypeError("total_distance must be a numeric value")
        if not isinstance(self.total_cost, (int, float)):
            raise TypeError("total_cost must be a numeric value")

        if self.nodes and len(self.nodes) != len(self.routes) + 1:
            raise PathValidationError(
                f"Path length mismatch: {len(self.nodes)} nodes for {len(self.routes)} routes"
            )
        if not self.nodes and self.routes:
            raise PathValidationError("Routes reported without any nodes")

    def __len__(self) -> int:
        """Return the number of routes travelled."""
        return len(self.routes)

    @property
    def found(self) -> bool:
        """Whether the result carries a path (trivial paths included)."""
        return bool(self.nodes)

    @property
    def is_empty(self) -> bool:
        """Whether no path is reported."""
        return not self.nodes

    @classmethod
    def empty(cls, message: str) -> "PathResult":
        """Result carrying only a status message."""
        return cls(message=message)

    @classmethod
    def trivial(cls, name: str) -> "PathResult":
        """Result for a computation whose origin is its destination."""
        return cls(message=SAME_LOCATION_MSG, nodes=[name])

    def to_dict(self) -> Dict[str, Union[str, List[str], float]]:
        """
        Convert the result to a JSON-friendly dictionary.

        Returns:
            Dictionary with message, nodes, routes and totals
        """
        return {
            "message": self.message,
            "nodes": list(self.nodes),
            "routes": list(self.routes),
            "total_distance": self.total_distance,
            "total_cost": self.total_cost,
        }

    def validate(
        self,
        graph: GraphModel,
        directed: bool = True,
        weight_epsilon: float = EPSILON,
    ) -> None:
        """
        Validate the result against a graph.

        Performs the following checks:
        - Every location in the path exists in the graph
        - Each pair of consecutive locations is joined by an edge with the
          reported route name (either direction when ``directed`` is False)
        - Totals equal the sums over the matched edges

        Args:
            graph: The snapshot the result was computed on
            directed: Whether hops must follow edge direction
            weight_epsilon: Tolerance for total comparisons

        Raises:
            PathValidationError: If any validation check fails
        """
        if not isinstance(graph, GraphModel):
            raise TypeError("graph must be a GraphModel instance")
        if weight_epsilon <= 0:
            raise ValueError("weight_epsilon must be positive")

        if not self.nodes:
            if self.total_distance or self.total_cost:
                raise PathValidationError("Empty path reports non-zero totals")
            return

        indices = []
        for name in self.nodes:
            index = graph.index_of(name)
            if index is None:
                raise PathValidationError(f"Location {name!r} not in graph")
            indices.append(index)

        distance = 0.0
        cost = 0.0
        for i, route_name in enumerate(self.routes):
            u, v = indices[i], indices[i + 1]
            edge = graph.find_edge(u, v, route_name)
            if edge is None and not directed:
                edge = graph.find_edge(v, u, route_name)
            if edge is None:
                raise PathValidationError(
                    f"Path discontinuity at hop {i}: no route {route_name!r} "
                    f"from {self.nodes[i]!r} to {self.nodes[i + 1]!r}"
                )
            distance += edge.distance
            cost += edge.cost

        if abs(distance - self.total_distance) > weight_epsilon:
            raise PathValidationError(
                f"Distance mismatch: calculated {distance} != stored {self.total_distance}"
            )
        if abs(cost - self.total_cost) > weight_epsilon:
            raise PathValidationError(
                f"Cost mismatch: calculated {cost} != stored {self.total_cost}"
            )


@dataclass(frozen=True)
class Candidate:
    """
    Index-based path produced during a search.

    Attributes:
        nodes: Node indices in travel order
        edges: Edges in travel order
        total_distance: Sum of edge distances
        total_cost: Sum of edge costs
    """

    nodes: Tuple[int, ...]
    edges: Tuple[Edge, ...]
    total_distance: float
    total_cost: float

    @classmethod
    def from_edges(cls, source: int, edges: Sequence[Edge]) -> "Candidate":
        """
        Build a candidate from a contiguous edge sequence.

        Raises:
            PathReconstructionError: If the edges do not chain from ``source``
        """
        nodes = [source]
        distance = 0.0
        cost = 0.0
        for edge in edges:
            if edge.source != nodes[-1]:
                raise PathReconstructionError(
                    f"Edge {edge.index} leaves node {edge.source}, expected {nodes[-1]}"
                )
            nodes.append(edge.target)
            distance += edge.distance
            cost += edge.cost
        return cls(tuple(nodes), tuple(edges), distance, cost)

    @property
    def source(self) -> int:
        """First node of the path."""
        return self.nodes[0]

    @property
    def target(self) -> int:
        """Last node of the path."""
        return self.nodes[-1]

    def extend(self, edge: Edge) -> "Candidate":
        """Append an edge leaving this candidate's target."""
        if edge.source != self.target:
            raise PathReconstructionError(
                f"Edge {edge.index} leaves node {edge.source}, expected {self.target}"
            )
        return Candidate(
            self.nodes + (edge.target,),
            self.edges + (edge,),
            self.total_distance + edge.distance,
            self.total_cost + edge.cost,
        )

    def extend_front(self, edge: Edge) -> "Candidate":
        """Prepend an edge leading into this candidate's source."""
        if edge.target != self.source:
            raise PathReconstructionError(
                f"Edge {edge.index} reaches node {edge.target}, expected {self.source}"
            )
        return Candidate(
            (edge.source,) + self.nodes,
            (edge,) + self.edges,
            edge.distance + self.total_distance,
            edge.cost + self.total_cost,
        )

    def to_result(self, graph: GraphModel, message: str) -> PathResult:
        """Translate to a name-based PathResult."""
        return PathResult(
            message=message,
            nodes=[graph.name_of(i) for i in self.nodes],
            routes=[edge.display_name for edge in self.edges],
            total_distance=self.total_distance,
            total_cost=self.total_cost,
        )


@dataclass
class PerformanceMetrics:
    """
    Container for path finding performance metrics.

    Attributes:
        operation: Name of the strategy
        start_time: Operation start timestamp
        end_time: Operation end timestamp (0.0 if not completed)
        path_length: Number of routes in the result, if any
        nodes_explored: Number of search states expanded
        max_memory_used: Peak resident memory during the search (bytes)

    Example:
        >>> metrics = PerformanceMetrics(operation="dijkstra", start_time=time())
        >>> # ... perform operation ...
        >>> metrics.end_time = time()
        >>> print(f"Operation took {metrics.duration:.2f}ms")
    """

    operation: str
    start_time: float
    end_time: float = 0.0
    path_length: Optional[int] = None
    nodes_explored: int = 0
    max_memory_used: Optional[int] = None

    def __post_init__(self):
        """Validate metrics after initialization."""
        if not isinstance(self.operation, str) or not self.operation.strip():
            raise ValueError("operation must be a non-empty string")
        if not isinstance(self.start_time, (int, float)):
            raise TypeError("start_time must be a numeric value")

    @property
    def duration(self) -> float:
        """Operation duration in milliseconds."""
        return (self.end_time - self.start_time) * 1000 if self.end_time else 0.0

    def to_dict(self) -> Dict[str, Union[str, float, int, None]]:
        """Convert metrics to dictionary format."""
        return {
            "operation": self.operation,
            "duration_ms": self.duration,
            "path_length": self.path_length,
            "nodes_explored": self.nodes_explored,
            "max_memory_used": self.max_memory_used,
        }
