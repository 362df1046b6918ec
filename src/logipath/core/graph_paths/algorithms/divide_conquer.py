"""
Divide and conquer route search.

The best path from ``u`` is the best of ``edge + solve(v)`` over every out-edge
``u -> v`` to an unvisited ``v``; the target solves to the empty path. Two
passes run with edges visited in cost-first and distance-first order, and the
better answer wins.

Memo entries are keyed by node index and are only read or written while the
visited set holds nothing but the current node. A subpath computed under any
other visited set may depend on which nodes were blocked, so reusing it could
produce a path that repeats a node.

The visited set always holds the source, so only the root call is clean and a
pass records a single memo entry it never reads back. The recursion is
therefore an exhaustive search over simple paths.
"""

from typing import Callable, Dict, Optional, Set, Tuple

from ...graph import Edge
from ...metric import MetricPolicy
from ..base import PathFinder
from ..models import Candidate, PathResult, PerformanceMetrics
from ..types import PathType
from ..utils import is_better_candidate, pick_better

EdgeOrder = Callable[[Edge], Tuple[float, float]]


class DivideAndConquerFinder(PathFinder[PathResult]):
    """Recursive best-subpath search with clean-state memoization."""

    path_type = PathType.DIVIDE_AND_CONQUER
    algorithm_name = "Divide and Conquer"

    def _search(
        self,
        source: int,
        target: int,
        policy: MetricPolicy,
        metrics: PerformanceMetrics,
    ) -> Optional[Candidate]:
        cost_first = self._solve_pass(
            source, target, lambda e: (e.cost, e.distance), metrics
        )
        distance_first = self._solve_pass(
            source, target, lambda e: (e.distance, e.cost), metrics
        )
        return pick_better(cost_first, distance_first)

    def _solve_pass(
        self, source: int, target: int, order: EdgeOrder, metrics: PerformanceMetrics
    ) -> Optional[Candidate]:
        memo: Dict[int, Optional[Candidate]] = {}
        return self._solve(source, target, {source}, memo, order, metrics)

    def _solve(
        self,
        node: int,
        target: int,
        visited: Set[int],
        memo: Dict[int, Optional[Candidate]],
        order: EdgeOrder,
        metrics: PerformanceMetrics,
    ) -> Optional[Candidate]:
        if node == target:
            return Candidate.from_edges(node, ())

        self.memory_manager.check_memory()
        metrics.nodes_explored += 1

        clean = len(visited) == 1
        if clean and node in memo:
            return memo[node]

        best: Optional[Candidate] = None
        for edge in sorted(self.graph.out_edges(node), key=order):
            nxt = edge.target
            if nxt in visited:
                continue
            visited.add(nxt)
            sub = self._solve(nxt, target, visited, memo, order, metrics)
            visited.discard(nxt)
            if sub is None:
                continue
            candidate = sub.extend_front(edge)
            if is_better_candidate(candidate, best):
                best = candidate

        if clean:
            memo[node] = best
        return best
