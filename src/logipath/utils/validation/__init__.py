"""
Validation package for Logipath.

This package provides validation utilities and rules for routing requests and
network documents.
"""

from .base import (
    CustomRule,
    RequiredRule,
    TypeRule,
    ValidationResult,
    ValidationRule,
)
from .schema import NETWORK_SCHEMA, SchemaValidator, validate_network

__all__ = [
    "ValidationResult",
    "ValidationRule",
    "RequiredRule",
    "TypeRule",
    "CustomRule",
    "NETWORK_SCHEMA",
    "SchemaValidator",
    "validate_network",
]
