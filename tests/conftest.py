"""Shared test fixtures."""

from typing import Callable, Dict, Iterable, List, Tuple

import pytest

from logipath.core.enums import LocationType
from logipath.core.graph import GraphModel
from logipath.core.models import Location

RouteSpec = Tuple[str, str, str, float, float]


def _build_locations(routes: Iterable[RouteSpec], isolated: Iterable[str] = ()) -> List[Location]:
    locations: Dict[str, Location] = {}

    def get(name: str) -> Location:
        if name not in locations:
            locations[name] = Location(name=name, id=len(locations) + 1)
        return locations[name]

    for source, target, name, distance, cost in routes:
        get(source).add_route(get(target), distance=distance, cost=cost, name=name)
    for name in isolated:
        get(name)
    return list(locations.values())


@pytest.fixture
def make_graph() -> Callable[..., GraphModel]:
    """
    Fixture providing a graph factory.

    Routes are given as (source, target, route name, distance, cost) tuples;
    locations are created in order of first appearance.
    """

    def factory(routes: Iterable[RouteSpec], isolated: Iterable[str] = ()) -> GraphModel:
        return GraphModel.from_locations(_build_locations(routes, isolated))

    return factory


@pytest.fixture
def scenario_locations() -> List[Location]:
    """
    Fixture providing a small delivery network:
    Depot -> Client A -> Client X
      |
      v
    Client B
    """
    depot = Location(name="Depot", location_type=LocationType.DEPOT, address="1 Dock Road", id=1)
    a = Location(name="A", location_type=LocationType.CLIENT, id=2)
    b = Location(name="B", location_type=LocationType.CLIENT, id=3)
    x = Location(name="X", location_type=LocationType.CLIENT, id=4)
    depot.add_route(a, distance=5, cost=10, name="R1", road_type="highway")
    depot.add_route(b, distance=8, cost=15, name="R2")
    a.add_route(x, distance=7, cost=12, name="R3")
    return [depot, a, b, x]


@pytest.fixture
def scenario_graph(scenario_locations) -> GraphModel:
    """Fixture providing the delivery network as a GraphModel."""
    return GraphModel.from_locations(scenario_locations)


@pytest.fixture
def diamond_graph(make_graph) -> GraphModel:
    """
    Fixture providing a graph where distance and cost disagree:
    S -> A -> T is short but expensive, S -> B -> T is long but cheap.
    """
    return make_graph(
        [
            ("S", "A", "SA", 1, 10),
            ("S", "B", "SB", 5, 1),
            ("A", "T", "AT", 1, 10),
            ("B", "T", "BT", 5, 1),
        ]
    )


@pytest.fixture
def disconnected_graph(make_graph) -> GraphModel:
    """Fixture providing P -> Q plus an isolated location R."""
    return make_graph([("P", "Q", "PQ", 1, 1)], isolated=["R"])


@pytest.fixture
def network_document() -> dict:
    """Fixture providing a network document in JSON form."""
    return {
        "locations": [
            {
                "id": 1,
                "name": "Depot",
                "type": "depot",
                "address": "1 Dock Road",
                "routes": [
                    {"name": "R1", "destination": "A", "distance": 5, "cost": 10},
                    {"name": "R2", "destination_id": 3, "distance": 8, "cost": 15},
                ],
            },
            {
                "id": 2,
                "name": "A",
                "type": "client",
                "routes": [
                    {
                        "name": "R3",
                        "destination": "X",
                        "distance": 7,
                        "cost": 12,
                        "road_type": "urban",
                    }
                ],
            },
            {"id": 3, "name": "B", "type": "client"},
            {"id": 4, "name": "X", "type": "client", "routes": []},
        ]
    }
