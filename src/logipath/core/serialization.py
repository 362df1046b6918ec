"""
Conversion between network documents and location records.

A network document is the JSON form of a location/route snapshot described by
``logipath.utils.validation.schema.NETWORK_SCHEMA``. Documents are checked
against the schema before any record is built; a document that fails the check
raises ``ValidationError``. Documents that pass may still hold records the
graph builder will drop, such as a route with a negative cost.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Union

from ..utils.validation import validate_network
from .exceptions import ValidationError
from .graph import GraphModel
from .models import Location, Route

logger = logging.getLogger(__name__)


def locations_from_dict(data: Dict[str, Any]) -> List[Location]:
    """
    Build location records from a network document.

    Args:
        data: Parsed network document

    Returns:
        List[Location]: Records in document order

    Raises:
        ValidationError: If the document does not match the network schema
    """
    result = validate_network(data)
    if not result.is_valid:
        raise ValidationError("; ".join(result.errors))
    for warning in result.warnings:
        logger.warning(warning)

    locations = []
    for entry in data["locations"]:
        routes = [
            Route(
                name=route.get("name"),
                distance=route["distance"],
                cost=route["cost"],
                destination_name=route.get("destination"),
                destination_id=route.get("destination_id"),
                road_type=route.get("road_type"),
            )
            for route in entry.get("routes") or []
        ]
        locations.append(
            Location(
                name=entry["name"],
                location_type=entry.get("type"),
                address=entry.get("address") or "",
                routes=routes,
                id=entry.get("id"),
            )
        )
    return locations


def locations_to_dict(locations: Iterable[Location]) -> Dict[str, Any]:
    """Serialize location records to a network document."""
    entries = []
    for loc in locations:
        entry: Dict[str, Any] = {
            "name": loc.name,
            "type": loc.location_type.value,
            "address": loc.address,
            "routes": [_route_to_dict(route) for route in loc.routes],
        }
        if loc.id is not None:
            entry["id"] = loc.id
        entries.append(entry)
    return {"locations": entries}


def _route_to_dict(route: Route) -> Dict[str, Any]:
    entry: Dict[str, Any] = {
        "name": route.name,
        "distance": route.distance,
        "cost": route.cost,
    }
    if route.destination_name is not None:
        entry["destination"] = route.destination_name
    if route.destination_id is not None:
        entry["destination_id"] = route.destination_id
    if route.road_type is not None:
        entry["road_type"] = route.road_type
    return entry


def load_network_file(path: Union[str, Path]) -> List[Location]:
    """
    Read location records from a network document on disk.

    Raises:
        ValidationError: If the file is missing, is not JSON or does not match
            the network schema
    """
    path = Path(path)
    try:
        with open(path, "r") as f:
            data = json.load(f)
    except FileNotFoundError:
        raise ValidationError(f"File not found: {path}") from None
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid JSON in {path}: {e}") from e
    return locations_from_dict(data)


def load_graph(path: Union[str, Path]) -> GraphModel:
    """Read a network document and build its GraphModel."""
    return GraphModel.from_locations(load_network_file(path))
