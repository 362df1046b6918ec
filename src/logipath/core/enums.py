"""
Enumerations for location categories in the logistics network.

Categories are advisory: no routing strategy reads them. They are kept so that
records loaded from a snapshot round-trip without losing information.
"""

from enum import Enum
from typing import Optional


class LocationType(Enum):
    """Kind of site a location represents."""

    DEPOT = "depot"  # Warehouse or central depot
    DISTRIBUTOR = "distributor"  # Intermediate distribution point
    CLIENT = "client"  # Delivery destination
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: Optional[str]) -> "LocationType":
        """Parse a category string leniently, falling back to UNKNOWN."""
        if value is None:
            return cls.UNKNOWN
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        return cls.UNKNOWN
