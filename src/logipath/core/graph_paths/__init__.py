"""Graph path finding functionality."""

from typing import Dict, List, Optional, Type, Union

from ..exceptions import ConfigurationError
from ..graph import GraphModel
from .algorithms import (
    BacktrackingFinder,
    BranchAndBoundFinder,
    BreadthFirstFinder,
    DepthFirstFinder,
    DivideAndConquerFinder,
    DynamicProgrammingFinder,
    GreedyFinder,
    KruskalFinder,
    PrimFinder,
    ShortestPathFinder,
)
from .base import PathFinder
from .models import Candidate, PathResult, PathValidationError, PerformanceMetrics
from .types import PathType
from .validation import validate_path_request

FINDERS: Dict[PathType, Type[PathFinder]] = {
    PathType.DIJKSTRA: ShortestPathFinder,
    PathType.BFS: BreadthFirstFinder,
    PathType.DFS: DepthFirstFinder,
    PathType.BACKTRACKING: BacktrackingFinder,
    PathType.GREEDY: GreedyFinder,
    PathType.DIVIDE_AND_CONQUER: DivideAndConquerFinder,
    PathType.DYNAMIC_PROGRAMMING: DynamicProgrammingFinder,
    PathType.PRIM: PrimFinder,
    PathType.KRUSKAL: KruskalFinder,
    PathType.BRANCH_AND_BOUND: BranchAndBoundFinder,
}

__all__ = [
    "FINDERS",
    "Candidate",
    "PathFinder",
    "PathFinding",
    "PathResult",
    "PathType",
    "PathValidationError",
    "PerformanceMetrics",
    "validate_path_request",
]


class PathFinding:
    """Static interface for path finding operations."""

    @staticmethod
    def strategies() -> List[str]:
        """Names of all available strategies, in registry order."""
        return [path_type.value for path_type in FINDERS]

    @staticmethod
    def finder(
        graph: GraphModel,
        path_type: Union[PathType, str],
        max_memory_mb: Optional[float] = None,
    ) -> PathFinder:
        """
        Create the finder registered for ``path_type``.

        Raises:
            ConfigurationError: If ``path_type`` names no strategy
        """
        try:
            resolved = PathType.parse(path_type)
        except ValueError:
            raise ConfigurationError(
                f"Unknown strategy '{path_type}'; expected one of {PathFinding.strategies()}"
            ) from None
        return FINDERS[resolved](graph, max_memory_mb=max_memory_mb)

    @classmethod
    def compute(
        cls,
        graph: GraphModel,
        path_type: Union[PathType, str],
        start_node: Optional[str],
        end_node: Optional[str],
        metric: Optional[str] = None,
        alpha: Optional[float] = None,
        max_memory_mb: Optional[float] = None,
    ) -> PathResult:
        """Generic path finding interface."""
        finder = cls.finder(graph, path_type, max_memory_mb)
        return finder.find_path(start_node, end_node, metric=metric, alpha=alpha)

    @classmethod
    def dijkstra(cls, graph, start_node, end_node, metric=None, alpha=None) -> PathResult:
        """Shortest path by accumulated metric weight."""
        return cls.compute(graph, PathType.DIJKSTRA, start_node, end_node, metric, alpha)

    @classmethod
    def bfs(cls, graph, start_node, end_node, metric=None, alpha=None) -> PathResult:
        """Path with the fewest legs."""
        return cls.compute(graph, PathType.BFS, start_node, end_node, metric, alpha)

    @classmethod
    def dfs(cls, graph, start_node, end_node, metric=None, alpha=None) -> PathResult:
        """Cheapest simple path by exhaustive depth-first search."""
        return cls.compute(graph, PathType.DFS, start_node, end_node, metric, alpha)

    @classmethod
    def backtracking(cls, graph, start_node, end_node, metric=None, alpha=None) -> PathResult:
        """Exhaustive search seeded with Dijkstra's paths."""
        return cls.compute(graph, PathType.BACKTRACKING, start_node, end_node, metric, alpha)

    @classmethod
    def greedy(cls, graph, start_node, end_node, metric=None, alpha=None) -> PathResult:
        """Better of two myopic walks."""
        return cls.compute(graph, PathType.GREEDY, start_node, end_node, metric, alpha)

    @classmethod
    def divide_and_conquer(
        cls, graph, start_node, end_node, metric=None, alpha=None
    ) -> PathResult:
        """Best simple path by recursive split over first legs."""
        return cls.compute(
            graph, PathType.DIVIDE_AND_CONQUER, start_node, end_node, metric, alpha
        )

    @classmethod
    def dynamic_programming(
        cls, graph, start_node, end_node, metric=None, alpha=None
    ) -> PathResult:
        """Bellman-Ford relaxation over paired cost and distance labels."""
        return cls.compute(
            graph, PathType.DYNAMIC_PROGRAMMING, start_node, end_node, metric, alpha
        )

    @classmethod
    def prim(cls, graph, start_node, end_node, metric=None, alpha=None) -> PathResult:
        """Route through Prim frontier growth."""
        return cls.compute(graph, PathType.PRIM, start_node, end_node, metric, alpha)

    @classmethod
    def kruskal(cls, graph, start_node, end_node, metric=None, alpha=None) -> PathResult:
        """Route along the minimum spanning forest."""
        return cls.compute(graph, PathType.KRUSKAL, start_node, end_node, metric, alpha)

    @classmethod
    def branch_and_bound(
        cls, graph, start_node, end_node, metric=None, alpha=None
    ) -> PathResult:
        """Best-first search pruned by the incumbent route."""
        return cls.compute(
            graph, PathType.BRANCH_AND_BOUND, start_node, end_node, metric, alpha
        )
