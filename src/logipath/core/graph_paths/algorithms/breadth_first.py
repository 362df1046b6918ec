"""
Breadth-first search for the fewest-hops path.
"""

from collections import deque
from typing import List, Optional

from ...graph import Edge
from ...metric import MetricPolicy
from ..base import PathFinder
from ..models import Candidate, PathResult, PerformanceMetrics
from ..types import PathType
from ..utils import reconstruct_path


class BreadthFirstFinder(PathFinder[PathResult]):
    """
    Minimum number of legs, ignoring distance and cost.

    Weights are still summed into the result totals. The metric is accepted for
    interface compatibility and has no effect on the search.
    """

    path_type = PathType.BFS
    algorithm_name = "BFS"

    def _search(
        self,
        source: int,
        target: int,
        policy: MetricPolicy,
        metrics: PerformanceMetrics,
    ) -> Optional[Candidate]:
        seen = [False] * self.graph.node_count
        pred: List[Optional[Edge]] = [None] * self.graph.node_count
        seen[source] = True
        queue = deque([source])

        while queue:
            self.memory_manager.check_memory()
            u = queue.popleft()
            metrics.nodes_explored += 1
            for edge in self.graph.out_edges(u):
                v = edge.target
                if seen[v]:
                    continue
                seen[v] = True
                pred[v] = edge
                if v == target:
                    return reconstruct_path(self.graph, source, target, pred)
                queue.append(v)

        return None
