"""
Location and route records for the logistics network.

These are the records an external collaborator (a database, a JSON snapshot)
hands to the routing core. They are deliberately lenient: a route may point at
a location that does not exist, carry a NaN distance, or have no name at all.
Such problems are resolved when a ``GraphModel`` is built from the records,
not here, so that a partially malformed network can still be queried.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from ..enums import LocationType


@dataclass
class Route:
    """
    Directed route owned by its source location.

    Attributes:
        name (Optional[str]): Display name of the route
        distance (float): Length of the route (expected >= 0)
        cost (float): Cost of travelling the route (expected >= 0)
        destination_name (Optional[str]): Name of the destination location
        destination_id (Optional[int]): Stable identity of the destination location
        road_type (Optional[str]): Free-form road category tag
    """

    name: Optional[str]
    distance: float
    cost: float
    destination_name: Optional[str] = None
    destination_id: Optional[int] = None
    road_type: Optional[str] = None


@dataclass
class Location:
    """
    A site in the logistics network together with its outgoing routes.

    Attributes:
        name (Optional[str]): Unique name used for lookups; blank names are not addressable
        location_type (LocationType): Advisory category of the site
        address (str): Postal address
        routes (List[Route]): Outgoing routes
        id (Optional[int]): Stable identity assigned by the persistence layer
    """

    name: Optional[str]
    location_type: LocationType = LocationType.UNKNOWN
    address: str = ""
    routes: List[Route] = field(default_factory=list)
    id: Optional[int] = None

    def __post_init__(self):
        """Normalize the category."""
        if not isinstance(self.location_type, LocationType):
            self.location_type = LocationType.parse(self.location_type)
        if self.routes is None:
            self.routes = []

    @property
    def has_name(self) -> bool:
        """Whether the location can be looked up by name."""
        return self.name is not None and bool(self.name.strip())

    def add_route(
        self,
        destination: "Location",
        distance: float,
        cost: float,
        name: Optional[str] = None,
        road_type: Optional[str] = None,
    ) -> Route:
        """
        Append a route to another location and return it.

        Args:
            destination (Location): Target of the route
            distance (float): Route length
            cost (float): Route cost
            name (Optional[str]): Display name
            road_type (Optional[str]): Road category tag

        Returns:
            Route: The created route
        """
        route = Route(
            name=name,
            distance=distance,
            cost=cost,
            destination_name=destination.name,
            destination_id=destination.id,
            road_type=road_type,
        )
        self.routes.append(route)
        return route
