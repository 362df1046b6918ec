"""
Edge weighting policies.

A ``MetricPolicy`` turns an edge into the scalar a strategy minimizes. The
metric selector is parsed once, when a computation starts, into a closed
``Metric`` variant; per-edge evaluation never looks at strings again.

Example:
    >>> policy = MetricPolicy.resolve("weighted", alpha=0.25)
    >>> policy.weight(edge)  # 0.25 * distance + 0.75 * cost
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .graph import Edge

DEFAULT_METRIC = "distance"
DEFAULT_ALPHA = 0.5


class Metric(Enum):
    """Quantity used to weight edges."""

    DISTANCE = "distance"
    COST = "cost"
    WEIGHTED = "weighted"

    @classmethod
    def parse(cls, value: Optional[str]) -> "Metric":
        """
        Parse a metric selector.

        ``"combined"`` is accepted as an alias of ``"weighted"``. Missing or
        unrecognized selectors fall back to distance.
        """
        if isinstance(value, cls):
            return value
        if value is None:
            return cls.DISTANCE
        normalized = str(value).strip().lower()
        if normalized == "combined":
            return cls.WEIGHTED
        for member in cls:
            if member.value == normalized:
                return member
        return cls.DISTANCE


def normalize_alpha(alpha: Optional[float]) -> float:
    """Default a missing or NaN blend factor to 0.5 and clamp it to [0, 1]."""
    if alpha is None:
        return DEFAULT_ALPHA
    try:
        value = float(alpha)
    except (TypeError, ValueError):
        return DEFAULT_ALPHA
    if math.isnan(value):
        return DEFAULT_ALPHA
    return max(0.0, min(1.0, value))


@dataclass(frozen=True)
class MetricPolicy:
    """
    Resolved weighting rule.

    Attributes:
        metric (Metric): Quantity to minimize
        alpha (float): Blend factor, only read for ``Metric.WEIGHTED``
    """

    metric: Metric = Metric.DISTANCE
    alpha: float = DEFAULT_ALPHA

    @classmethod
    def resolve(cls, metric: Optional[str] = None, alpha: Optional[float] = None) -> "MetricPolicy":
        """Build a policy from raw caller input."""
        return cls(Metric.parse(metric), normalize_alpha(alpha))

    def weight(self, edge: Edge) -> Optional[float]:
        """
        Weight of an edge, or None when the edge is infeasible.

        A weight is infeasible when it is NaN or negative; strategies skip such
        edges instead of failing.
        """
        return self.combine(edge.distance, edge.cost)

    def combine(self, distance: float, cost: float) -> Optional[float]:
        """Apply the policy to a (distance, cost) pair."""
        if self.metric is Metric.COST:
            value = cost
        elif self.metric is Metric.WEIGHTED:
            value = self.alpha * distance + (1 - self.alpha) * cost
        else:
            value = distance
        if math.isnan(value) or value < 0:
            return None
        return value
