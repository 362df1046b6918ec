"""
Greedy walks.

Two myopic walks run independently from the source: one always takes the
cheapest usable edge (distance breaks ties), the other the shortest (cost breaks
ties). An edge is usable when it leads to an unvisited node from which the
target can still be reached without passing through visited nodes. A walk that
runs out of usable edges fails; there is no backtracking within a walk.
"""

import logging
from typing import Callable, List, Optional, Tuple

from ...graph import Edge
from ...metric import MetricPolicy
from ..base import PathFinder
from ..models import Candidate, PathResult, PerformanceMetrics
from ..types import PathType
from ..utils import pick_better

logger = logging.getLogger(__name__)

EdgeKey = Callable[[Edge], Tuple[float, float]]


def _cost_first(edge: Edge) -> Tuple[float, float]:
    return (edge.cost, edge.distance)


def _distance_first(edge: Edge) -> Tuple[float, float]:
    return (edge.distance, edge.cost)


class GreedyFinder(PathFinder[PathResult]):
    """Better of a cost-first and a distance-first greedy walk."""

    path_type = PathType.GREEDY
    algorithm_name = "Greedy"

    def _search(
        self,
        source: int,
        target: int,
        policy: MetricPolicy,
        metrics: PerformanceMetrics,
    ) -> Optional[Candidate]:
        by_cost = self._walk(source, target, _cost_first, metrics)
        by_distance = self._walk(source, target, _distance_first, metrics)
        if by_cost is None:
            logger.debug("Cost-first greedy walk dead-ended")
        if by_distance is None:
            logger.debug("Distance-first greedy walk dead-ended")
        return pick_better(by_cost, by_distance)

    def _walk(
        self, source: int, target: int, key: EdgeKey, metrics: PerformanceMetrics
    ) -> Optional[Candidate]:
        """Follow the best usable edge by ``key`` until the target or a dead end."""
        visited = {source}
        edges: List[Edge] = []
        current = source

        while current != target:
            self.memory_manager.check_memory()
            metrics.nodes_explored += 1

            chosen: Optional[Edge] = None
            chosen_key = None
            for edge in self.graph.out_edges(current):
                nxt = edge.target
                if nxt in visited:
                    continue
                edge_key = key(edge)
                if chosen_key is not None and not edge_key < chosen_key:
                    continue
                if not self.graph.reachable(nxt, target, blocked=visited):
                    continue
                chosen, chosen_key = edge, edge_key

            if chosen is None:
                return None
            edges.append(chosen)
            visited.add(chosen.target)
            current = chosen.target

        return Candidate.from_edges(source, edges)
