"""Command Line Interface for the logistics routing core.

This module provides a CLI for computing routes over a network document and for
checking documents before use. Results are printed to stdout as JSON.

The CLI supports the following commands:
    - route: Compute a route with one strategy
    - strategies: List available strategies
    - validate: Check a network document against the network schema

JSON input can be provided either as a direct string or as a file path prefixed with '@'.
When using file paths, both absolute paths and paths relative to the current directory
are supported.

Example Usage:
    python -m logipath route dijkstra --network @data/network.json --from Depot --to "Client X"
    python -m logipath route greedy --network @network.json --from A --to B --metric cost
    python -m logipath strategies
    python -m logipath validate --network @network.json
"""

import argparse
import json
import logging
import os
import sys
from typing import List, Optional

from .core.exceptions import ConfigurationError, GraphOperationError, ValidationError
from .core.graph import GraphModel
from .core.graph_paths import PathFinding
from .core.metric import DEFAULT_METRIC
from .core.serialization import locations_from_dict
from .utils.validation import validate_network

logger = logging.getLogger(__name__)


def parse_json_input(json_str: str) -> dict:
    """Parse JSON input from either a string or file.

    Args:
        json_str (str): Either a JSON string or a file path prefixed with '@'.

    Returns:
        dict: Parsed JSON data.

    Raises:
        ValueError: If the JSON is invalid or the specified file is not found.
    """
    if json_str.startswith("@"):
        file_path = json_str[1:]
        if not os.path.isabs(file_path):
            file_path = os.path.join(os.getcwd(), file_path)

        if not os.path.exists(file_path):
            raise ValueError(f"File not found: {file_path}")

        try:
            with open(file_path, "r") as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {file_path}: {e}")

    try:
        return json.loads(json_str)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON input: {e}")


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for all commands."""
    parser = argparse.ArgumentParser(
        prog="logipath", description="Route computation over logistics networks"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    route = subparsers.add_parser("route", help="Compute a route")
    route.add_argument("strategy", help="Strategy name, see 'strategies'")
    route.add_argument("--network", required=True, help="Network JSON or @file")
    route.add_argument("--from", dest="from_node", required=True, help="Origin location")
    route.add_argument("--to", dest="to_node", required=True, help="Destination location")
    route.add_argument(
        "--metric",
        default=DEFAULT_METRIC,
        help="distance, cost or weighted (default: distance)",
    )
    route.add_argument("--alpha", type=float, default=None, help="Blend factor for weighted")
    route.add_argument(
        "--max-memory-mb", type=float, default=None, help="Abort searches above this limit"
    )

    subparsers.add_parser("strategies", help="List available strategies")

    validate = subparsers.add_parser("validate", help="Validate a network document")
    validate.add_argument("--network", required=True, help="Network JSON or @file")

    return parser


def cmd_route(args: argparse.Namespace) -> int:
    """Compute and print a route."""
    locations = locations_from_dict(parse_json_input(args.network))
    graph = GraphModel.from_locations(locations)
    result = PathFinding.compute(
        graph,
        args.strategy,
        args.from_node,
        args.to_node,
        metric=args.metric,
        alpha=args.alpha,
        max_memory_mb=args.max_memory_mb,
    )
    print(json.dumps(result.to_dict(), indent=2))
    return 0


def cmd_strategies(args: argparse.Namespace) -> int:
    """Print available strategy names, one per line."""
    for name in PathFinding.strategies():
        print(name)
    return 0


def cmd_validate(args: argparse.Namespace) -> int:
    """Validate a network document and print the report."""
    result = validate_network(parse_json_input(args.network))
    report = {
        "is_valid": result.is_valid,
        "errors": result.errors,
        "warnings": result.warnings,
        "context": result.context,
    }
    print(json.dumps(report, indent=2))
    return 0 if result.is_valid else 1


COMMANDS = {
    "route": cmd_route,
    "strategies": cmd_strategies,
    "validate": cmd_validate,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Run the CLI and return its exit code."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        return COMMANDS[args.command](args)
    except (
        ValueError,
        ValidationError,
        ConfigurationError,
        GraphOperationError,
        MemoryError,
    ) as e:
        logger.debug(f"Command {args.command} failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
