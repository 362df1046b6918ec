"""Type definitions for graph path finding."""

from enum import Enum


class PathType(Enum):
    """Enumeration of path finding strategies."""

    DIJKSTRA = "dijkstra"  # Cumulative weight, optimal
    BFS = "bfs"  # Fewest hops
    DFS = "dfs"  # Exhaustive, cost then distance
    BACKTRACKING = "backtracking"  # Exhaustive, seeded by Dijkstra
    GREEDY = "greedy"  # Myopic walks
    DIVIDE_AND_CONQUER = "divide_and_conquer"
    DYNAMIC_PROGRAMMING = "dynamic_programming"  # Dual-objective Bellman-Ford
    PRIM = "prim"  # Frontier growth
    KRUSKAL = "kruskal"  # Spanning forest, then tree path
    BRANCH_AND_BOUND = "branch_and_bound"

    @classmethod
    def parse(cls, value: str) -> "PathType":
        """Parse a strategy name, accepting dashes in place of underscores."""
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower().replace("-", "_")
        return cls(normalized)
