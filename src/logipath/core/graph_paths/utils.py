"""
Utility functions for path finding operations.
"""

import gc
import logging
import os
import time
from heapq import heappop, heappush
from typing import Generic, List, Optional, Sequence, Tuple, TypeVar

import psutil

from ..exceptions import PathReconstructionError
from ..graph import Edge, GraphModel
from .models import EPSILON, Candidate

logger = logging.getLogger(__name__)

# Constants
MEMORY_CHECK_INTERVAL = 0.1  # Seconds between memory checks

T = TypeVar("T")


def is_better_cost(new_cost: float, old_cost: float) -> bool:
    """Compare costs with floating point tolerance."""
    return (new_cost - old_cost) < -EPSILON


def is_better_candidate(new: Optional[Candidate], incumbent: Optional[Candidate]) -> bool:
    """
    Shared ranking rule for candidate paths.

    Lower total cost wins; costs equal within EPSILON fall back to lower total
    distance. A missing incumbent always loses to a real candidate.
    """
    if new is None:
        return False
    if incumbent is None:
        return True
    if is_better_cost(new.total_cost, incumbent.total_cost):
        return True
    if abs(new.total_cost - incumbent.total_cost) <= EPSILON:
        return is_better_cost(new.total_distance, incumbent.total_distance)
    return False


def pick_better(first: Optional[Candidate], second: Optional[Candidate]) -> Optional[Candidate]:
    """Return the better of two candidates, preferring ``first`` on ties."""
    if is_better_candidate(second, first):
        return second
    return first


def reconstruct_path(
    graph: GraphModel,
    source: int,
    target: int,
    pred_edges: Sequence[Optional[Edge]],
) -> Candidate:
    """
    Walk predecessor edges back from ``target`` to ``source``.

    Args:
        graph: Snapshot the predecessors were recorded on
        source: Start node index
        target: End node index
        pred_edges: Edge that last improved each node, indexed by node

    Returns:
        Candidate: Path from source to target

    Raises:
        PathReconstructionError: If the chain breaks or loops before reaching
            the source
    """
    path: List[Edge] = []
    current = target
    steps = 0
    while current != source:
        edge = pred_edges[current]
        if edge is None:
            raise PathReconstructionError(
                f"Predecessor chain broken at '{graph.name_of(current)}' "
                f"while walking back to '{graph.name_of(source)}'"
            )
        path.append(edge)
        current = edge.source
        steps += 1
        if steps > graph.node_count:
            raise PathReconstructionError(
                f"Predecessor chain from '{graph.name_of(target)}' contains a cycle"
            )
    path.reverse()
    return Candidate.from_edges(source, path)


class PriorityQueue(Generic[T]):
    """
    Min-heap with insertion-order tie-breaking.

    Entries with equal priority pop in the order they were pushed. Priorities
    may be any comparable value, including tuples. The queue is unbounded
    unless a ``maxsize`` is given.
    """

    def __init__(self, maxsize: Optional[int] = None):
        self._queue: List[Tuple[object, int, T]] = []
        self._counter = 0  # Unique counter to break ties
        self._maxsize = maxsize

    def push(self, item: T, priority) -> None:
        """Add an item, raising MemoryError if a bounded queue is full."""
        if self._maxsize is not None and len(self._queue) >= self._maxsize:
            raise MemoryError(f"Priority queue exceeded {self._maxsize} entries")
        heappush(self._queue, (priority, self._counter, item))
        self._counter += 1

    def pop(self) -> Optional[Tuple[object, T]]:
        """Remove and return the (priority, item) pair with the lowest priority."""
        if not self._queue:
            return None
        priority, _, item = heappop(self._queue)
        return priority, item

    def empty(self) -> bool:
        """Return True if the queue is empty."""
        return not self._queue

    def __len__(self) -> int:
        return len(self._queue)


class MemoryManager:
    """Memory management utilities for graph algorithms."""

    def __init__(self, max_memory_mb: Optional[float] = None):
        """Initialize memory manager."""
        self.max_memory = max_memory_mb * 1024 * 1024 if max_memory_mb else None
        self.start_memory = get_memory_usage()
        self._peak_memory = self.start_memory
        self._last_check = time.time()
        self._check_interval = MEMORY_CHECK_INTERVAL

    def check_memory(self) -> None:
        """Check if memory usage exceeds limit."""
        if not self.max_memory:
            return

        current_time = time.time()
        if current_time - self._last_check < self._check_interval:
            return
        self._last_check = current_time

        current = get_memory_usage()
        self._peak_memory = max(self._peak_memory, current)

        if current - self.start_memory > self.max_memory:
            logger.debug("Memory limit reached, collecting garbage before rechecking")
            gc.collect()
            current = get_memory_usage()

            if current - self.start_memory > self.max_memory:
                raise MemoryError(
                    f"Memory usage {current/1024/1024:.1f}MB exceeds "
                    f"limit of {self.max_memory/1024/1024:.1f}MB"
                )

    @property
    def peak_memory(self) -> int:
        """Peak memory usage in bytes."""
        return self._peak_memory

    def reset_peak_memory(self) -> None:
        """Reset peak memory tracking."""
        self._peak_memory = get_memory_usage()
        self.start_memory = self._peak_memory
        self._last_check = time.time()


def get_memory_usage() -> int:
    """Get current memory usage in bytes."""
    process = psutil.Process(os.getpid())
    return process.memory_info().rss

