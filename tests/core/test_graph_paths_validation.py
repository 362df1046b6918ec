"""
Tests for request validation, path results and path reconstruction.
"""

import pytest

from logipath.core.exceptions import PathReconstructionError
from logipath.core.graph import Edge, GraphModel
from logipath.core.graph_paths import PathFinding, validate_path_request
from logipath.core.graph_paths.models import (
    EMPTY_GRAPH_MSG,
    INVALID_INPUT_MSG,
    SAME_LOCATION_MSG,
    UNKNOWN_LOCATION_MSG,
    Candidate,
    PathResult,
    PathValidationError,
    PerformanceMetrics,
)
from logipath.core.graph_paths.utils import (
    MemoryManager,
    PriorityQueue,
    get_memory_usage,
    is_better_candidate,
    pick_better,
    reconstruct_path,
)


@pytest.mark.parametrize(
    "start,end",
    [(None, "X"), ("Depot", None), ("", "X"), ("Depot", "   "), (None, None)],
)
def test_missing_endpoints(scenario_graph, start, end):
    """Test that blank or missing names are invalid input."""
    result = validate_path_request(scenario_graph, start, end)
    assert not result.is_valid
    assert result.errors == [INVALID_INPUT_MSG]
    assert PathFinding.dijkstra(scenario_graph, start, end).message == INVALID_INPUT_MSG


def test_non_text_endpoint(scenario_graph):
    """Test that non-string names are invalid input."""
    result = validate_path_request(scenario_graph, 42, "X")
    assert result.message == INVALID_INPUT_MSG


def test_empty_graph_request():
    """Test that an empty network is reported before name lookups."""
    result = PathFinding.bfs(GraphModel([]), "A", "B")
    assert result.is_empty
    assert result.message == EMPTY_GRAPH_MSG


def test_blank_name_checked_before_empty_graph():
    """Test check order: blank input wins over an empty network."""
    assert PathFinding.bfs(GraphModel([]), "", "B").message == INVALID_INPUT_MSG


@pytest.mark.parametrize("start,end,unknown", [("Nowhere", "X", "Nowhere"), ("Depot", "Y", "Y")])
def test_unknown_endpoints(scenario_graph, start, end, unknown):
    """Test that unknown names are reported with the offending name."""
    result = PathFinding.greedy(scenario_graph, start, end)
    assert result.is_empty
    assert result.total_distance == 0.0
    assert result.message == UNKNOWN_LOCATION_MSG.format(name=unknown)


def test_valid_request_context(scenario_graph):
    """Test that a valid request carries resolved indices."""
    result = validate_path_request(scenario_graph, "Depot", "X")
    assert result.is_valid
    assert result.context == {"source": 0, "target": 3}


def test_path_result_defaults():
    """Test empty and trivial results."""
    empty = PathResult.empty("nothing")
    assert empty.is_empty and not empty.found
    assert len(empty) == 0
    trivial = PathResult.trivial("X")
    assert trivial.nodes == ["X"] and trivial.routes == []
    assert trivial.message == SAME_LOCATION_MSG
    assert trivial.found


def test_path_result_invariants():
    """Test that node and route counts must agree."""
    with pytest.raises(PathValidationError):
        PathResult("bad", nodes=["A", "B"], routes=[])
    with pytest.raises(PathValidationError):
        PathResult("bad", nodes=[], routes=["r"])
    with pytest.raises(TypeError):
        PathResult("bad", nodes=("A",), routes=[])


def test_path_result_to_dict(scenario_graph):
    """Test the serialized form of a result."""
    result = PathFinding.dijkstra(scenario_graph, "Depot", "X")
    assert result.to_dict() == {
        "message": result.message,
        "nodes": ["Depot", "A", "X"],
        "routes": ["R1", "R3"],
        "total_distance": 12.0,
        "total_cost": 22.0,
    }


def test_validate_detects_problems(scenario_graph):
    """Test validation against the graph."""
    PathResult("ok", ["Depot", "A", "X"], ["R1", "R3"], 12.0, 22.0).validate(scenario_graph)

    with pytest.raises(PathValidationError, match="discontinuity"):
        PathResult("x", ["Depot", "X"], ["R1"], 5.0, 10.0).validate(scenario_graph)
    with pytest.raises(PathValidationError, match="discontinuity"):
        PathResult("x", ["Depot", "A"], ["R2"], 5.0, 10.0).validate(scenario_graph)
    with pytest.raises(PathValidationError, match="Distance mismatch"):
        PathResult("x", ["Depot", "A"], ["R1"], 6.0, 10.0).validate(scenario_graph)
    with pytest.raises(PathValidationError, match="Cost mismatch"):
        PathResult("x", ["Depot", "A"], ["R1"], 5.0, 11.0).validate(scenario_graph)
    with pytest.raises(PathValidationError, match="not in graph"):
        PathResult("x", ["Mars"], [], 0.0, 0.0).validate(scenario_graph)
    with pytest.raises(PathValidationError):
        PathResult("x", ["A", "Depot"], ["R1"], 5.0, 10.0).validate(scenario_graph)

    PathResult("x", ["A", "Depot"], ["R1"], 5.0, 10.0).validate(scenario_graph, directed=False)


def _edge(index, source, target, distance=1.0, cost=1.0):
    return Edge(index=index, source=source, target=target, distance=distance, cost=cost)


def test_candidate_from_edges():
    """Test candidate totals and continuity."""
    candidate = Candidate.from_edges(0, [_edge(0, 0, 1, 2, 3), _edge(1, 1, 2, 4, 5)])
    assert candidate.nodes == (0, 1, 2)
    assert (candidate.total_distance, candidate.total_cost) == (6.0, 8.0)
    assert (candidate.source, candidate.target) == (0, 2)

    with pytest.raises(PathReconstructionError):
        Candidate.from_edges(0, [_edge(0, 0, 1), _edge(1, 2, 3)])


def test_candidate_extension():
    """Test growing candidates at either end."""
    middle = Candidate.from_edges(1, [_edge(1, 1, 2)])
    assert middle.extend(_edge(2, 2, 3)).nodes == (1, 2, 3)
    assert middle.extend_front(_edge(0, 0, 1)).nodes == (0, 1, 2)
    with pytest.raises(PathReconstructionError):
        middle.extend(_edge(3, 0, 1))
    with pytest.raises(PathReconstructionError):
        middle.extend_front(_edge(3, 2, 3))


def test_candidate_ranking():
    """Test cost-then-distance ranking with tolerance."""
    cheap = Candidate((), (), 10.0, 1.0)
    dear = Candidate((), (), 1.0, 2.0)
    cheap_short = Candidate((), (), 5.0, 1.0 + 1e-12)

    assert is_better_candidate(cheap, dear)
    assert not is_better_candidate(dear, cheap)
    assert is_better_candidate(cheap_short, cheap)
    assert not is_better_candidate(cheap, cheap)
    assert is_better_candidate(dear, None)
    assert not is_better_candidate(None, dear)

    assert pick_better(dear, cheap) is cheap
    assert pick_better(cheap, Candidate((), (), 10.0, 1.0)) is cheap
    assert pick_better(None, dear) is dear
    assert pick_better(None, None) is None


def test_reconstruct_path(scenario_graph):
    """Test walking predecessor edges back to the source."""
    r1, r2, r3 = scenario_graph.edges
    pred = [None, r1, r2, r3]
    candidate = reconstruct_path(scenario_graph, 0, 3, pred)
    assert candidate.nodes == (0, 1, 3)
    assert candidate.total_cost == 22.0


def test_reconstruct_path_broken_chain(scenario_graph):
    """Test that a missing predecessor is an internal error."""
    r1, r2, r3 = scenario_graph.edges
    with pytest.raises(PathReconstructionError, match="broken"):
        reconstruct_path(scenario_graph, 0, 3, [None, None, None, r3])


def test_reconstruct_path_cycle(make_graph):
    """Test that a looping predecessor chain is an internal error."""
    graph = make_graph([("A", "B", "ab", 1, 1), ("B", "C", "bc", 1, 1), ("C", "B", "cb", 1, 1)])
    ab, bc, cb = graph.edges
    with pytest.raises(PathReconstructionError, match="cycle"):
        reconstruct_path(graph, 0, 2, [None, cb, bc])


def test_priority_queue_order():
    """Test priority order with insertion-order ties."""
    queue = PriorityQueue()
    queue.push("b", 2.0)
    queue.push("a1", 1.0)
    queue.push("a2", 1.0)
    assert len(queue) == 3
    assert [queue.pop()[1] for _ in range(3)] == ["a1", "a2", "b"]
    assert queue.empty()
    assert queue.pop() is None


def test_priority_queue_unbounded_by_default():
    """Test that a queue without a maxsize keeps accepting entries."""
    queue = PriorityQueue()
    for i in range(100_001):
        queue.push(i, float(i))
    assert len(queue) == 100_001
    assert queue.pop() == (0.0, 0)


def test_priority_queue_limit():
    """Test that an overfull bounded queue raises MemoryError."""
    queue = PriorityQueue(maxsize=2)
    queue.push(1, 1.0)
    queue.push(2, 1.0)
    with pytest.raises(MemoryError):
        queue.push(3, 1.0)


def test_performance_metrics():
    """Test metric bookkeeping."""
    metrics = PerformanceMetrics(operation="dijkstra", start_time=10.0)
    assert metrics.duration == 0.0
    metrics.end_time = 10.5
    metrics.nodes_explored = 4
    assert metrics.duration == pytest.approx(500.0)
    assert metrics.to_dict()["nodes_explored"] == 4
    with pytest.raises(ValueError):
        PerformanceMetrics(operation=" ", start_time=0.0)


def test_memory_manager():
    """Test memory tracking without and with a limit."""
    assert get_memory_usage() > 0

    unlimited = MemoryManager()
    assert unlimited.max_memory is None
    unlimited.check_memory()

    limited = MemoryManager(max_memory_mb=1024)
    assert limited.max_memory == 1024 * 1024 * 1024
    limited.check_memory()
    assert limited.peak_memory >= limited.start_memory
