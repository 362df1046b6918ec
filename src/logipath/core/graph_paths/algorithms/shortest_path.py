"""
Dijkstra shortest path.
"""

import logging
import math
from typing import List, Optional

from ...graph import Edge, GraphModel
from ...metric import MetricPolicy
from ..base import PathFinder
from ..models import Candidate, PathResult, PerformanceMetrics
from ..types import PathType
from ..utils import MemoryManager, PriorityQueue, reconstruct_path

logger = logging.getLogger(__name__)


def dijkstra(
    graph: GraphModel,
    source: int,
    target: int,
    policy: MetricPolicy,
    memory_manager: Optional[MemoryManager] = None,
    metrics: Optional[PerformanceMetrics] = None,
) -> Optional[Candidate]:
    """
    Single-source shortest path under ``policy``.

    Uses lazy deletion: a node popped again after it was settled is skipped.
    The search stops as soon as the target is settled. Equal priorities pop in
    insertion order.

    Returns:
        Optional[Candidate]: Shortest path, or None if the target is unreachable
    """
    n = graph.node_count
    dist: List[float] = [math.inf] * n
    pred: List[Optional[Edge]] = [None] * n
    settled = [False] * n

    dist[source] = 0.0
    pq: PriorityQueue[int] = PriorityQueue()
    pq.push(source, 0.0)

    while not pq.empty():
        if memory_manager is not None:
            memory_manager.check_memory()

        current_dist, u = pq.pop()
        if settled[u]:
            continue
        settled[u] = True
        if metrics is not None:
            metrics.nodes_explored += 1

        if u == target:
            return reconstruct_path(graph, source, target, pred)

        for edge in graph.out_edges(u):
            v = edge.target
            if settled[v]:
                continue
            weight = policy.weight(edge)
            if weight is None:
                continue
            new_dist = current_dist + weight
            if new_dist < dist[v]:
                dist[v] = new_dist
                pred[v] = edge
                pq.push(v, new_dist)

    logger.debug(f"Target {graph.name_of(target)} not reachable from {graph.name_of(source)}")
    return None


class ShortestPathFinder(PathFinder[PathResult]):
    """Dijkstra's algorithm over the resolved metric."""

    path_type = PathType.DIJKSTRA
    algorithm_name = "Dijkstra"

    def _search(
        self,
        source: int,
        target: int,
        policy: MetricPolicy,
        metrics: PerformanceMetrics,
    ) -> Optional[Candidate]:
        return dijkstra(self.graph, source, target, policy, self.memory_manager, metrics)
