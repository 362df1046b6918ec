"""
Best-first branch and bound.

Partial paths are kept in a priority queue ordered by their lower bound, the
weight accumulated so far under the chosen metric. The incumbent is a local of
one search and never outlives it.

Pruning happens twice: a popped state whose bound exceeds the incumbent weight
is discarded, and a child is only enqueued when its bound does not exceed it.
Pruning is per state; a cheaper route to the target can still arrive through a
different node after a state is discarded.
"""

import logging
from typing import Optional

from ...metric import MetricPolicy
from ..base import PathFinder
from ..models import EPSILON, Candidate, PathResult, PerformanceMetrics
from ..types import PathType
from ..utils import PriorityQueue, is_better_candidate

logger = logging.getLogger(__name__)


class BranchAndBoundFinder(PathFinder[PathResult]):
    """Best-first search over partial paths with incumbent pruning."""

    path_type = PathType.BRANCH_AND_BOUND
    algorithm_name = "Branch and Bound"

    def _search(
        self,
        source: int,
        target: int,
        policy: MetricPolicy,
        metrics: PerformanceMetrics,
    ) -> Optional[Candidate]:
        incumbent: Optional[Candidate] = None
        incumbent_weight = 0.0

        queue: PriorityQueue[Candidate] = PriorityQueue()
        queue.push(Candidate.from_edges(source, ()), 0.0)

        while not queue.empty():
            self.memory_manager.check_memory()
            bound, state = queue.pop()
            if incumbent is not None and bound > incumbent_weight + EPSILON:
                continue
            metrics.nodes_explored += 1

            if state.target == target:
                if (
                    incumbent is None
                    or bound < incumbent_weight - EPSILON
                    or (
                        abs(bound - incumbent_weight) <= EPSILON
                        and is_better_candidate(state, incumbent)
                    )
                ):
                    incumbent, incumbent_weight = state, bound
                    logger.debug(f"New incumbent with weight {bound}")
                continue

            for edge in self.graph.out_edges(state.target):
                if edge.target in state.nodes:
                    continue
                weight = policy.weight(edge)
                if weight is None:
                    continue
                child_bound = bound + weight
                if incumbent is not None and child_bound > incumbent_weight + EPSILON:
                    continue
                queue.push(state.extend(edge), child_bound)

        return incumbent
