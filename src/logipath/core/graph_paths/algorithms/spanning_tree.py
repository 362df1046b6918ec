"""
Spanning-structure strategies: Prim frontier growth and Kruskal forest paths.

Both build a tree first and read the route off the tree, so neither is a
shortest-path method.

Prim grows a frontier from the source, always admitting the lightest edge that
leaves it. Only the crossing edge's own weight is compared; accumulated path
weight is not tracked, so the route can be longer than Dijkstra's under the
same metric.

Kruskal builds a minimum spanning forest over the undirected view of the
network, then walks the unique forest path between the endpoints. Forest edges
are traversable both ways, so a Kruskal route may travel a road against its
recorded direction. Validate such routes with ``directed=False``.
"""

import logging
from collections import deque
from typing import List, Optional, Set, Tuple

from ...graph import Edge
from ...metric import MetricPolicy
from ..base import PathFinder
from ..models import Candidate, PathResult, PerformanceMetrics
from ..types import PathType
from ..utils import PriorityQueue, reconstruct_path

logger = logging.getLogger(__name__)


class UnionFind:
    """Disjoint sets over node indices with path compression and union by rank."""

    def __init__(self, size: int):
        self.parent = list(range(size))
        self.rank = [0] * size

    def find(self, x: int) -> int:
        root = x
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[x] != root:
            self.parent[x], x = root, self.parent[x]
        return root

    def union(self, a: int, b: int) -> bool:
        """Merge the sets holding ``a`` and ``b``; False if already merged."""
        root_a, root_b = self.find(a), self.find(b)
        if root_a == root_b:
            return False
        if self.rank[root_a] < self.rank[root_b]:
            root_a, root_b = root_b, root_a
        self.parent[root_b] = root_a
        if self.rank[root_a] == self.rank[root_b]:
            self.rank[root_a] += 1
        return True

    def connected(self, a: int, b: int) -> bool:
        return self.find(a) == self.find(b)


class PrimFinder(PathFinder[PathResult]):
    """Directed frontier growth from the source until the target joins."""

    path_type = PathType.PRIM
    algorithm_name = "Prim"

    def _search(
        self,
        source: int,
        target: int,
        policy: MetricPolicy,
        metrics: PerformanceMetrics,
    ) -> Optional[Candidate]:
        in_tree = [False] * self.graph.node_count
        pred: List[Optional[Edge]] = [None] * self.graph.node_count
        frontier: PriorityQueue[Edge] = PriorityQueue()

        in_tree[source] = True
        self._push_out_edges(source, in_tree, frontier, policy)

        while not frontier.empty():
            self.memory_manager.check_memory()
            _, edge = frontier.pop()
            node = edge.target
            if in_tree[node]:
                continue

            in_tree[node] = True
            pred[node] = edge
            metrics.nodes_explored += 1
            if node == target:
                return reconstruct_path(self.graph, source, target, pred)
            self._push_out_edges(node, in_tree, frontier, policy)

        return None

    def _push_out_edges(
        self,
        node: int,
        in_tree: List[bool],
        frontier: PriorityQueue[Edge],
        policy: MetricPolicy,
    ) -> None:
        for edge in self.graph.out_edges(node):
            if in_tree[edge.target]:
                continue
            weight = policy.weight(edge)
            if weight is not None:
                frontier.push(edge, weight)


class KruskalFinder(PathFinder[PathResult]):
    """Minimum spanning forest, then the tree path between the endpoints."""

    path_type = PathType.KRUSKAL
    algorithm_name = "Kruskal"

    def _search(
        self,
        source: int,
        target: int,
        policy: MetricPolicy,
        metrics: PerformanceMetrics,
    ) -> Optional[Candidate]:
        forest, components = self.build_forest(policy)
        if not components.connected(source, target):
            return None
        return self._tree_path(forest, source, target, metrics)

    def build_forest(self, policy: MetricPolicy) -> Tuple[List[List[Edge]], UnionFind]:
        """
        Build the minimum spanning forest under ``policy``.

        Edges joining the same unordered pair of nodes are collapsed to the
        first one recorded. Equal weights keep arena order.

        Returns:
            Tuple of the bidirectional forest adjacency and its components
        """
        candidates: List[Tuple[float, Edge]] = []
        seen_pairs: Set[Tuple[int, int]] = set()
        for edge in self.graph.get_edges():
            pair = (min(edge.source, edge.target), max(edge.source, edge.target))
            if pair in seen_pairs:
                continue
            weight = policy.weight(edge)
            if weight is None:
                continue
            seen_pairs.add(pair)
            candidates.append((weight, edge))

        candidates.sort(key=lambda item: item[0])

        components = UnionFind(self.graph.node_count)
        forest: List[List[Edge]] = [[] for _ in range(self.graph.node_count)]
        kept = 0
        for _, edge in candidates:
            if not components.union(edge.source, edge.target):
                continue
            forest[edge.source].append(edge)
            forest[edge.target].append(edge.reversed())
            kept += 1

        logger.debug(f"Spanning forest keeps {kept} of {len(candidates)} candidate edges")
        return forest, components

    def _tree_path(
        self,
        forest: List[List[Edge]],
        source: int,
        target: int,
        metrics: PerformanceMetrics,
    ) -> Optional[Candidate]:
        seen = [False] * self.graph.node_count
        pred: List[Optional[Edge]] = [None] * self.graph.node_count
        seen[source] = True
        queue = deque([source])

        while queue:
            node = queue.popleft()
            metrics.nodes_explored += 1
            if node == target:
                return reconstruct_path(self.graph, source, target, pred)
            for edge in forest[node]:
                if seen[edge.target]:
                    continue
                seen[edge.target] = True
                pred[edge.target] = edge
                queue.append(edge.target)

        return None
