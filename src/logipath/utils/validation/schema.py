"""
Schema Validation Components for Logipath

This module provides JSON schema-based validation for network documents, the
JSON form of a location/route snapshot:

    {
        "locations": [
            {
                "id": 1,
                "name": "Depot",
                "type": "depot",
                "address": "1 Dock Road",
                "routes": [
                    {"name": "R1", "destination": "Client A",
                     "distance": 5, "cost": 10, "road_type": "highway"}
                ]
            }
        ]
    }

Schema validation only checks structure. Records the graph builder would drop
(blank names, negative weights, unresolvable destinations) are reported as
warnings, since the network can still be routed over.
"""

import math
from typing import Any, Dict, List, Optional

from jsonschema import ValidationError as JsonSchemaError
from jsonschema import validate as json_validate

from .base import ValidationResult

ROUTE_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "name": {"type": ["string", "null"]},
        "destination": {"type": ["string", "null"]},
        "destination_id": {"type": ["integer", "null"]},
        "distance": {"type": "number"},
        "cost": {"type": "number"},
        "road_type": {"type": ["string", "null"]},
    },
    "required": ["distance", "cost"],
    "anyOf": [
        {"required": ["destination"]},
        {"required": ["destination_id"]},
    ],
}

LOCATION_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "id": {"type": ["integer", "null"]},
        "name": {"type": ["string", "null"]},
        "type": {"type": ["string", "null"]},
        "address": {"type": ["string", "null"]},
        "routes": {"type": "array", "items": ROUTE_SCHEMA},
    },
    "required": ["name"],
}

NETWORK_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "properties": {
        "locations": {"type": "array", "items": LOCATION_SCHEMA},
    },
    "required": ["locations"],
}


class SchemaValidator:
    """
    JSON Schema-based validator for network documents.

    Attributes:
        schema (Dict[str, Any]): Schema applied to whole documents
    """

    def __init__(self, schema: Optional[Dict[str, Any]] = None):
        self.schema = schema if schema is not None else NETWORK_SCHEMA

    def validate_network(self, data: Any) -> ValidationResult:
        """
        Validate a network document.

        Args:
            data: Parsed JSON document

        Returns:
            ValidationResult containing validation details and any errors or warnings

        Example:
            >>> validator = SchemaValidator()
            >>> result = validator.validate_network({"locations": []})
            >>> print(result.is_valid)
            True
        """
        errors: List[str] = []
        warnings: List[str] = []

        try:
            json_validate(instance=data, schema=self.schema)
        except JsonSchemaError as e:
            errors.append(f"Schema validation failed: {e.message}")

        context: Dict[str, Any] = {}
        if not errors:
            locations = data.get("locations", [])
            context["locations"] = len(locations)
            context["routes"] = sum(len(loc.get("routes") or []) for loc in locations)
            warnings.extend(self._data_warnings(locations))

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings,
            context=context,
        )

    @staticmethod
    def _data_warnings(locations: List[Dict[str, Any]]) -> List[str]:
        """Collect warnings for records the graph builder will drop."""
        warnings: List[str] = []
        seen = set()
        for position, loc in enumerate(locations):
            name = loc.get("name")
            if name is None or not name.strip():
                warnings.append(f"Location at position {position} has no name")
            elif name in seen:
                warnings.append(f"Duplicate location name '{name}'")
            else:
                seen.add(name)

            for route in loc.get("routes") or []:
                for attr in ("distance", "cost"):
                    value = route[attr]
                    if not math.isfinite(value) or value < 0:
                        warnings.append(
                            f"Route {route.get('name')!r} from {name!r} has unusable {attr} {value}"
                        )
        return warnings


def validate_network(data: Any) -> ValidationResult:
    """Validate a network document against ``NETWORK_SCHEMA``."""
    return SchemaValidator().validate_network(data)
