"""
Immutable graph snapshot built from location and route records.

This module provides the ``GraphModel`` every routing strategy runs on. A model
is built once from a batch of ``Location`` records and is read-only afterwards,
so a single snapshot can be handed to any number of concurrent computations.

Construction is best-effort. Records that cannot take part in routing are
dropped rather than rejected:

- locations with a null or blank name get no name-index entry, and neither do
  locations whose name was already taken by an earlier record;
- routes whose destination cannot be resolved by stable id or by name are
  dropped, as are routes touching an unnamed location;
- routes with a NaN, infinite or negative distance or cost are dropped.

Every kept route becomes an ``Edge`` in a flat arena. Edges carry the index of
their source node so algorithms never have to search for an edge's owner.
"""

import logging
import math
from collections import deque
from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import Container, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from .enums import LocationType
from .models import Location, Route

logger = logging.getLogger(__name__)

UNNAMED_ROUTE = "?"


@dataclass(frozen=True, slots=True)
class Node:
    """Read-only view of a location inside a snapshot."""

    index: int
    name: Optional[str]
    location_type: LocationType
    address: str


@dataclass(frozen=True, slots=True)
class Edge:
    """
    Directed weighted edge in the snapshot's edge arena.

    Attributes:
        index (int): Position of the edge in the arena
        source (int): Index of the node owning the edge
        target (int): Index of the destination node
        distance (float): Route length
        cost (float): Route cost
        name (Optional[str]): Display name of the originating route
        road_type (Optional[str]): Road category tag
        synthetic (bool): True for reverse edges synthesized by tree-based strategies
    """

    index: int
    source: int
    target: int
    distance: float
    cost: float
    name: Optional[str] = None
    road_type: Optional[str] = None
    synthetic: bool = False

    @property
    def display_name(self) -> str:
        """Route name as reported in results."""
        if self.name is None or not self.name.strip():
            return UNNAMED_ROUTE
        return self.name

    def reversed(self) -> "Edge":
        """Return a synthesized copy travelling target -> source."""
        return replace(self, source=self.target, target=self.source, synthetic=True)


def _as_weight(value) -> Optional[float]:
    """Convert a route attribute to a usable weight, or None if unusable."""
    try:
        weight = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(weight) or weight < 0:
        return None
    return weight


class GraphModel:
    """
    Immutable snapshot of the logistics network.

    The adjacency list has exactly one entry per node, in the order the
    locations were supplied. Names map bijectively to indices over the nodes
    that are addressable by name.
    """

    def __init__(self, locations: Iterable[Optional[Location]]):
        """
        Build a snapshot from location records.

        Args:
            locations: Location records with their outgoing routes. ``None``
                entries are ignored.
        """
        records: List[Location] = [loc for loc in locations if loc is not None]

        nodes: List[Node] = []
        name_index: Dict[str, int] = {}
        id_index: Dict[int, int] = {}
        for i, loc in enumerate(records):
            nodes.append(Node(i, loc.name, loc.location_type, loc.address or ""))
            if loc.id is not None:
                id_index.setdefault(loc.id, i)
            if not loc.has_name:
                logger.debug(f"Location at position {i} has no name; not addressable")
                continue
            if loc.name in name_index:
                logger.warning(
                    f"Duplicate location name '{loc.name}' at position {i}; "
                    f"keeping position {name_index[loc.name]}"
                )
                continue
            name_index[loc.name] = i

        addressable = set(name_index.values())
        arena: List[Edge] = []
        adjacency: List[List[Edge]] = [[] for _ in records]
        dropped = 0

        for i, loc in enumerate(records):
            for route in loc.routes or []:
                edge = self._make_edge(len(arena), i, route, id_index, name_index, addressable)
                if edge is None:
                    dropped += 1
                    continue
                arena.append(edge)
                adjacency[i].append(edge)

        if dropped:
            logger.debug(f"Dropped {dropped} unusable route(s) while building the graph")

        self._nodes: Tuple[Node, ...] = tuple(nodes)
        self._edges: Tuple[Edge, ...] = tuple(arena)
        self._adjacency: Tuple[Tuple[Edge, ...], ...] = tuple(tuple(out) for out in adjacency)
        self._name_index: Mapping[str, int] = MappingProxyType(name_index)

    @staticmethod
    def _make_edge(
        index: int,
        source: int,
        route: Optional[Route],
        id_index: Dict[int, int],
        name_index: Dict[str, int],
        addressable: set,
    ) -> Optional[Edge]:
        """Resolve one route into an edge, or None if it must be dropped."""
        if route is None or source not in addressable:
            return None

        target = None
        if route.destination_id is not None:
            target = id_index.get(route.destination_id)
        if target not in addressable and route.destination_name is not None:
            target = name_index.get(route.destination_name)
        if target is None or target not in addressable:
            return None

        distance = _as_weight(route.distance)
        cost = _as_weight(route.cost)
        if distance is None or cost is None:
            return None

        return Edge(
            index=index,
            source=source,
            target=target,
            distance=distance,
            cost=cost,
            name=route.name,
            road_type=route.road_type,
        )

    @classmethod
    def from_locations(cls, locations: Iterable[Optional[Location]]) -> "GraphModel":
        """Create a GraphModel from location records."""
        return cls(locations)

    def __len__(self) -> int:
        """Return the number of nodes."""
        return len(self._nodes)

    @property
    def node_count(self) -> int:
        """Number of nodes, addressable or not."""
        return len(self._nodes)

    @property
    def edge_count(self) -> int:
        """Number of edges kept in the arena."""
        return len(self._edges)

    @property
    def is_empty(self) -> bool:
        """Whether the snapshot holds no nodes."""
        return not self._nodes

    @property
    def nodes(self) -> Tuple[Node, ...]:
        """All nodes in index order."""
        return self._nodes

    @property
    def edges(self) -> Tuple[Edge, ...]:
        """The edge arena in insertion order."""
        return self._edges

    @property
    def names(self) -> Mapping[str, int]:
        """Read-only name -> index mapping."""
        return self._name_index

    def get_edges(self) -> Iterator[Edge]:
        """Iterate over all edges."""
        return iter(self._edges)

    def out_edges(self, index: int) -> Tuple[Edge, ...]:
        """Outgoing edges of a node."""
        return self._adjacency[index]

    def index_of(self, name: Optional[str]) -> Optional[int]:
        """Index of a node by name, or None if the name is not addressable."""
        if name is None:
            return None
        return self._name_index.get(name)

    def has_node(self, name: Optional[str]) -> bool:
        """Check whether a name resolves to a node."""
        return self.index_of(name) is not None

    def name_of(self, index: int) -> str:
        """Name of the node at ``index``."""
        name = self._nodes[index].name
        return name if name is not None else "?"

    def find_edge(self, source: int, target: int, name: Optional[str] = None) -> Optional[Edge]:
        """Find an edge between two nodes, optionally matching its display name."""
        for edge in self._adjacency[source]:
            if edge.target != target:
                continue
            if name is None or edge.display_name == name:
                return edge
        return None

    def has_edge_named(self, source: int, target: int, route_name: str) -> bool:
        """Check whether ``source`` has a route called ``route_name`` to ``target``."""
        return self.find_edge(source, target, route_name) is not None

    def reachable(
        self, source: int, target: int, blocked: Optional[Container[int]] = None
    ) -> bool:
        """
        Check whether ``target`` can be reached from ``source``.

        Nodes in ``blocked`` are never entered (``source`` itself is allowed).

        Args:
            source: Start node index
            target: Goal node index
            blocked: Node indices the walk may not pass through

        Returns:
            bool: True if a directed path exists
        """
        if source == target:
            return True
        seen = [False] * len(self._nodes)
        seen[source] = True
        queue = deque([source])
        while queue:
            current = queue.popleft()
            for edge in self._adjacency[current]:
                nxt = edge.target
                if nxt == target:
                    return True
                if seen[nxt] or (blocked is not None and nxt in blocked):
                    continue
                seen[nxt] = True
                queue.append(nxt)
        return False
