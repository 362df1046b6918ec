"""Path finding algorithm implementations."""

from .branch_and_bound import BranchAndBoundFinder
from .breadth_first import BreadthFirstFinder
from .divide_conquer import DivideAndConquerFinder
from .dynamic_programming import DynamicProgrammingFinder
from .exhaustive import BacktrackingFinder, DepthFirstFinder
from .greedy import GreedyFinder
from .shortest_path import ShortestPathFinder, dijkstra
from .spanning_tree import KruskalFinder, PrimFinder, UnionFind

__all__ = [
    "ShortestPathFinder",
    "BreadthFirstFinder",
    "DepthFirstFinder",
    "BacktrackingFinder",
    "GreedyFinder",
    "DivideAndConquerFinder",
    "DynamicProgrammingFinder",
    "PrimFinder",
    "KruskalFinder",
    "BranchAndBoundFinder",
    "UnionFind",
    "dijkstra",
]
