import logging
from abc import ABC, abstractmethod
from contextlib import contextmanager
from time import time
from typing import Generic, Optional, TypeVar

from ..exceptions import ConfigurationError
from ..graph import GraphModel
from ..metric import MetricPolicy
from .models import (
    NO_PATH_MSG,
    SUCCESS_MSG,
    Candidate,
    PathResult,
    PerformanceMetrics,
)
from .types import PathType
from .utils import MemoryManager
from .validation import validate_path_request

logger = logging.getLogger(__name__)

T = TypeVar("T")


class PathFinder(ABC, Generic[T]):
    """
    Abstract base class for path finding strategies.

    ``find_path`` owns the shared contract: request validation, the self path,
    metric resolution, timing and message selection. Subclasses implement
    ``_search`` over node indices and return a ``Candidate`` or None.
    """

    path_type: PathType
    algorithm_name: str

    def __init__(self, graph: GraphModel, max_memory_mb: Optional[float] = None):
        """Initialize finder with graph and optional memory limit."""
        if max_memory_mb is not None and max_memory_mb <= 0:
            raise ConfigurationError("max_memory_mb must be positive")
        self.graph = graph
        self.memory_manager = MemoryManager(max_memory_mb)

    @contextmanager
    def _search_context(self):
        """Context manager for search state."""
        self.memory_manager.reset_peak_memory()
        yield

    def find_path(
        self,
        start_node: Optional[str],
        end_node: Optional[str],
        metric: Optional[str] = None,
        alpha: Optional[float] = None,
    ) -> PathResult:
        """
        Compute a route between two named locations.

        Args:
            start_node: Origin location name
            end_node: Destination location name
            metric: "distance" (default), "cost" or "weighted"/"combined"
            alpha: Blend factor for the weighted metric, default 0.5

        Returns:
            PathResult: Path with totals, or an empty result with a message
                explaining why no path is reported

        Raises:
            PathReconstructionError: If the strategy's internal state is corrupt
            MemoryError: If a ``max_memory_mb`` limit is exceeded
        """
        validation = validate_path_request(self.graph, start_node, end_node)
        if not validation.is_valid:
            logger.debug(f"{self.path_type.value}: rejected request: {validation.message}")
            return PathResult.empty(validation.message)

        source = validation.context["source"]
        target = validation.context["target"]
        if source == target:
            return PathResult.trivial(self.graph.name_of(source))

        policy = MetricPolicy.resolve(metric, alpha)
        logger.debug(
            f"{self.path_type.value}: {start_node} -> {end_node} "
            f"(metric={policy.metric.value}, alpha={policy.alpha})"
        )

        metrics = PerformanceMetrics(operation=self.path_type.value, start_time=time())
        with self._search_context():
            try:
                candidate = self._search(source, target, policy, metrics)
            finally:
                metrics.end_time = time()
                metrics.max_memory_used = self.memory_manager.peak_memory

        if candidate is None:
            logger.debug(f"{self.path_type.value}: no path; {metrics.to_dict()}")
            return PathResult.empty(NO_PATH_MSG.format(start=start_node, end=end_node))

        metrics.path_length = len(candidate.edges)
        logger.debug(f"{self.path_type.value}: found path; {metrics.to_dict()}")
        return candidate.to_result(
            self.graph, SUCCESS_MSG.format(algorithm=self.algorithm_name)
        )

    @abstractmethod
    def _search(
        self,
        source: int,
        target: int,
        policy: MetricPolicy,
        metrics: PerformanceMetrics,
    ) -> Optional[Candidate]:
        """Run the strategy between two distinct, valid node indices."""
        pass
