"""
Tests for the command line interface.
"""

import json

import pytest

from logipath import cli
from logipath.core.exceptions import PathReconstructionError
from logipath.core.graph_paths import PathFinding


@pytest.fixture
def network_file(tmp_path, network_document):
    path = tmp_path / "network.json"
    path.write_text(json.dumps(network_document))
    return path


def test_parse_json_input(network_file):
    """Test inline JSON and @file input."""
    assert cli.parse_json_input('{"a": 1}') == {"a": 1}
    assert "locations" in cli.parse_json_input(f"@{network_file}")
    with pytest.raises(ValueError, match="File not found"):
        cli.parse_json_input("@/definitely/not/here.json")
    with pytest.raises(ValueError, match="Invalid JSON"):
        cli.parse_json_input("{oops")


def test_route_command(network_file, capsys):
    """Test computing a route from the command line."""
    code = cli.main(
        ["route", "dijkstra", "--network", f"@{network_file}", "--from", "Depot", "--to", "X"]
    )
    assert code == 0
    output = json.loads(capsys.readouterr().out)
    assert output["nodes"] == ["Depot", "A", "X"]
    assert output["routes"] == ["R1", "R3"]
    assert output["total_distance"] == 12.0
    assert output["total_cost"] == 22.0


def test_route_command_metric(network_file, capsys):
    """Test metric and alpha flags."""
    code = cli.main(
        [
            "route",
            "branch-and-bound",
            "--network",
            f"@{network_file}",
            "--from",
            "Depot",
            "--to",
            "B",
            "--metric",
            "weighted",
            "--alpha",
            "0.3",
        ]
    )
    assert code == 0
    assert json.loads(capsys.readouterr().out)["nodes"] == ["Depot", "B"]


def test_route_command_no_path(network_file, capsys):
    """Test that an infeasible request prints an empty result."""
    code = cli.main(["route", "bfs", "--network", f"@{network_file}", "--from", "X", "--to", "Depot"])
    assert code == 0
    output = json.loads(capsys.readouterr().out)
    assert output["nodes"] == []
    assert output["message"] == "No route exists between 'X' and 'Depot'."


def test_route_command_unknown_strategy(network_file, capsys):
    """Test that an unknown strategy fails cleanly."""
    code = cli.main(["route", "teleport", "--network", f"@{network_file}", "--from", "A", "--to", "X"])
    assert code == 1
    assert "Unknown strategy" in capsys.readouterr().err


def test_route_command_invalid_document(capsys):
    """Test that a malformed network document fails cleanly."""
    code = cli.main(["route", "dfs", "--network", '{"locations": 5}', "--from", "A", "--to", "B"])
    assert code == 1
    assert "Validation Error" in capsys.readouterr().err


def test_strategies_command(capsys):
    """Test listing strategies."""
    assert cli.main(["strategies"]) == 0
    assert capsys.readouterr().out.split() == PathFinding.strategies()


def test_validate_command(network_file, capsys):
    """Test validating good and bad documents."""
    assert cli.main(["validate", "--network", f"@{network_file}"]) == 0
    report = json.loads(capsys.readouterr().out)
    assert report["is_valid"]
    assert report["context"] == {"locations": 4, "routes": 3}

    assert cli.main(["validate", "--network", "{}"]) == 1
    report = json.loads(capsys.readouterr().out)
    assert not report["is_valid"]


def test_missing_command():
    """Test that a command is required."""
    with pytest.raises(SystemExit):
        cli.main([])


@pytest.mark.parametrize(
    "error",
    [MemoryError("Memory usage 90.0MB exceeds limit of 1.0MB"), PathReconstructionError("cycle")],
)
def test_route_command_search_failure(network_file, monkeypatch, capsys, error):
    """Test that failures during a search are reported without a traceback."""

    def failing(*args, **kwargs):
        raise error

    monkeypatch.setattr(PathFinding, "compute", failing)
    code = cli.main(
        ["route", "dfs", "--network", f"@{network_file}", "--from", "Depot", "--to", "X"]
    )
    assert code == 1
    assert capsys.readouterr().err.startswith("Error:")
