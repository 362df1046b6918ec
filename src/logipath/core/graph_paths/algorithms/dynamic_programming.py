"""
Dual-objective Bellman-Ford relaxation.

Each node carries a (primary, secondary) label. Every edge is relaxed up to
``node_count - 1`` times; a label is replaced only when the candidate pair is
strictly smaller lexicographically. The loop exits early after a pass with no
updates. One run treats cost as primary, the other distance; the better of the
two paths wins.
"""

import logging
import math
from typing import Callable, List, Optional

from ...graph import Edge
from ...metric import MetricPolicy
from ..base import PathFinder
from ..models import Candidate, PathResult, PerformanceMetrics
from ..types import PathType
from ..utils import pick_better, reconstruct_path

logger = logging.getLogger(__name__)

EdgeValue = Callable[[Edge], float]


class DynamicProgrammingFinder(PathFinder[PathResult]):
    """Bellman-Ford over (cost, distance) and (distance, cost) labels."""

    path_type = PathType.DYNAMIC_PROGRAMMING
    algorithm_name = "Dynamic Programming"

    def _search(
        self,
        source: int,
        target: int,
        policy: MetricPolicy,
        metrics: PerformanceMetrics,
    ) -> Optional[Candidate]:
        cost_primary = self._relax(
            source, target, lambda e: e.cost, lambda e: e.distance, metrics
        )
        distance_primary = self._relax(
            source, target, lambda e: e.distance, lambda e: e.cost, metrics
        )
        return pick_better(cost_primary, distance_primary)

    def _relax(
        self,
        source: int,
        target: int,
        primary: EdgeValue,
        secondary: EdgeValue,
        metrics: PerformanceMetrics,
    ) -> Optional[Candidate]:
        n = self.graph.node_count
        first: List[float] = [math.inf] * n
        second: List[float] = [math.inf] * n
        pred: List[Optional[Edge]] = [None] * n
        first[source] = 0.0
        second[source] = 0.0

        for iteration in range(n - 1):
            self.memory_manager.check_memory()
            updated = False
            for edge in self.graph.get_edges():
                u, v = edge.source, edge.target
                if first[u] == math.inf:
                    continue
                metrics.nodes_explored += 1
                label = (first[u] + primary(edge), second[u] + secondary(edge))
                if label < (first[v], second[v]):
                    first[v], second[v] = label
                    pred[v] = edge
                    updated = True
            if not updated:
                logger.debug(f"Relaxation settled after {iteration + 1} pass(es)")
                break

        if first[target] == math.inf:
            return None
        return reconstruct_path(self.graph, source, target, pred)
