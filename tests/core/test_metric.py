"""
Tests for metric parsing and edge weighting.
"""

import pytest

from logipath.core.graph import Edge
from logipath.core.metric import DEFAULT_ALPHA, Metric, MetricPolicy, normalize_alpha


@pytest.fixture
def edge() -> Edge:
    return Edge(index=0, source=0, target=1, distance=10.0, cost=2.0, name="M1")


@pytest.mark.parametrize(
    "selector,expected",
    [
        ("distance", Metric.DISTANCE),
        ("cost", Metric.COST),
        ("weighted", Metric.WEIGHTED),
        ("combined", Metric.WEIGHTED),
        ("  COST ", Metric.COST),
        ("Combined", Metric.WEIGHTED),
        ("time", Metric.DISTANCE),
        ("", Metric.DISTANCE),
        (None, Metric.DISTANCE),
        (Metric.COST, Metric.COST),
    ],
)
def test_metric_parse(selector, expected):
    """Test metric selectors, aliases and fallback."""
    assert Metric.parse(selector) is expected


@pytest.mark.parametrize(
    "alpha,expected",
    [
        (None, DEFAULT_ALPHA),
        (float("nan"), DEFAULT_ALPHA),
        ("not a number", DEFAULT_ALPHA),
        (0.25, 0.25),
        (-3, 0.0),
        (7.5, 1.0),
        (1, 1.0),
    ],
)
def test_normalize_alpha(alpha, expected):
    """Test that alpha defaults and clamps to [0, 1]."""
    assert normalize_alpha(alpha) == expected


def test_policy_weights(edge):
    """Test the weight of an edge under each metric."""
    assert MetricPolicy.resolve("distance").weight(edge) == 10.0
    assert MetricPolicy.resolve("cost").weight(edge) == 2.0
    assert MetricPolicy.resolve("weighted").weight(edge) == pytest.approx(6.0)
    assert MetricPolicy.resolve("weighted", alpha=0.25).weight(edge) == pytest.approx(4.0)
    assert MetricPolicy.resolve("combined", alpha=1.0).weight(edge) == 10.0
    assert MetricPolicy.resolve("weighted", alpha=0.0).weight(edge) == 2.0


def test_policy_default():
    """Test the policy used when no metric is given."""
    policy = MetricPolicy.resolve()
    assert policy.metric is Metric.DISTANCE
    assert policy.alpha == DEFAULT_ALPHA


def test_infeasible_weights():
    """Test that NaN and negative combined values are reported as infeasible."""
    policy = MetricPolicy(Metric.WEIGHTED, 0.5)
    assert policy.combine(float("nan"), 1.0) is None
    assert policy.combine(-4.0, 1.0) is None
    assert policy.combine(0.0, 0.0) == 0.0


def test_policy_is_immutable():
    """Test that a resolved policy cannot be changed."""
    policy = MetricPolicy.resolve("cost")
    with pytest.raises(AttributeError):
        policy.metric = Metric.DISTANCE
