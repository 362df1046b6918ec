"""
Exhaustive simple-path search with cost-bound pruning.

Both finders in this module enumerate every simple path from source to target
by recursive depth-first traversal, keeping an incumbent (best path so far) that
is passed down and returned back up the recursion. A branch is pruned as soon as
its accumulated cost exceeds the incumbent's total cost by more than EPSILON.

The objective is fixed: lower total cost, ties broken by lower total distance.
The metric argument of ``find_path`` does not change it.

Example:
    >>> finder = BacktrackingFinder(graph)
    >>> result = finder.find_path("Depot", "Client X")
"""

import logging
from typing import List, Optional

from ...graph import Edge
from ...metric import Metric, MetricPolicy
from ..base import PathFinder
from ..models import EPSILON, Candidate, PathResult, PerformanceMetrics
from ..types import PathType
from ..utils import is_better_candidate, pick_better
from .shortest_path import dijkstra

logger = logging.getLogger(__name__)


class DepthFirstFinder(PathFinder[PathResult]):
    """Exhaustive depth-first search whose incumbent starts empty."""

    path_type = PathType.DFS
    algorithm_name = "DFS"

    def _seed(self, source: int, target: int, policy: MetricPolicy) -> Optional[Candidate]:
        """Initial incumbent. None means an unbounded first descent."""
        return None

    def _search(
        self,
        source: int,
        target: int,
        policy: MetricPolicy,
        metrics: PerformanceMetrics,
    ) -> Optional[Candidate]:
        seed = self._seed(source, target, policy)
        visited = [False] * self.graph.node_count
        visited[source] = True
        return self._explore(source, source, target, visited, [], 0.0, seed, metrics)

    def _explore(
        self,
        source: int,
        node: int,
        target: int,
        visited: List[bool],
        edges: List[Edge],
        cost: float,
        best: Optional[Candidate],
        metrics: PerformanceMetrics,
    ) -> Optional[Candidate]:
        """Recursive step; returns the incumbent after exploring below ``node``."""
        self.memory_manager.check_memory()
        metrics.nodes_explored += 1

        if best is not None and cost > best.total_cost + EPSILON:
            return best

        if node == target:
            candidate = Candidate.from_edges(source, edges)
            return candidate if is_better_candidate(candidate, best) else best

        for edge in self.graph.out_edges(node):
            nxt = edge.target
            if visited[nxt]:
                continue
            next_cost = cost + edge.cost
            if best is not None and next_cost > best.total_cost + EPSILON:
                continue

            visited[nxt] = True
            edges.append(edge)
            best = self._explore(source, nxt, target, visited, edges, next_cost, best, metrics)
            edges.pop()
            visited[nxt] = False

        return best


class BacktrackingFinder(DepthFirstFinder):
    """
    Exhaustive search seeded with Dijkstra's answers.

    The incumbent starts as the better of a cost-optimal and a distance-optimal
    Dijkstra path, so pruning bites from the first descent and the result is
    never worse than either seed.
    """

    path_type = PathType.BACKTRACKING
    algorithm_name = "Backtracking"

    def _seed(self, source: int, target: int, policy: MetricPolicy) -> Optional[Candidate]:
        by_cost = dijkstra(
            self.graph, source, target, MetricPolicy(Metric.COST), self.memory_manager
        )
        by_distance = dijkstra(
            self.graph, source, target, MetricPolicy(Metric.DISTANCE), self.memory_manager
        )
        seed = pick_better(by_cost, by_distance)
        if seed is not None:
            logger.debug(
                f"Backtracking seeded with cost={seed.total_cost}, "
                f"distance={seed.total_distance}"
            )
        return seed
