"""
Base Validation Components for Logipath

This module provides the foundational validation components used throughout the
validation system. It includes the ValidationResult class for reporting
validation outcomes and a small hierarchy of ValidationRule classes.

Validation in logipath never raises for bad caller input: checks report through
a ``ValidationResult`` and callers decide how to surface the failure.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple, Type, Union


@dataclass
class ValidationResult:
    """
    Container for validation results.

    Attributes:
        is_valid (bool): Whether the validation passed successfully
        errors (List[str]): List of validation error messages
        warnings (List[str]): List of validation warning messages
        context (Optional[Dict[str, Any]]): Additional context about the validation
    """

    is_valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    context: Optional[Dict[str, Any]] = None

    @classmethod
    def success(cls, context: Optional[Dict[str, Any]] = None) -> "ValidationResult":
        """Create a passing result."""
        return cls(is_valid=True, context=context)

    @classmethod
    def failure(
        cls, error: str, context: Optional[Dict[str, Any]] = None
    ) -> "ValidationResult":
        """Create a failing result carrying a single error."""
        return cls(is_valid=False, errors=[error], context=context)

    @property
    def message(self) -> Optional[str]:
        """First error message, if any."""
        return self.errors[0] if self.errors else None


class ValidationRule:
    """
    Base class for all validation rules.

    Attributes:
        error_message (str): Message to report when validation fails
    """

    def __init__(self, error_message: str):
        self.error_message = error_message

    def validate(self, value: Any) -> bool:
        """
        Validate a value against the rule.

        Raises:
            NotImplementedError: If the subclass doesn't implement this method
        """
        raise NotImplementedError("Validation rules must implement validate()")


class RequiredRule(ValidationRule):
    """
    Rule for validating required fields.

    A value passes when it is not None and, if it's a string, not empty after
    stripping whitespace.
    """

    def validate(self, value: Any) -> bool:
        if isinstance(value, str):
            return bool(value.strip())
        return value is not None


class TypeRule(ValidationRule):
    """Rule for type checking values."""

    def __init__(self, expected_type: Union[Type, Tuple[Type, ...]], error_message: str):
        super().__init__(error_message)
        self.expected_type = expected_type

    def validate(self, value: Any) -> bool:
        return isinstance(value, self.expected_type)


class CustomRule(ValidationRule):
    """Rule backed by an arbitrary predicate."""

    def __init__(self, validator_func: Callable[[Any], bool], error_message: str):
        super().__init__(error_message)
        self.validator_func = validator_func

    def validate(self, value: Any) -> bool:
        return self.validator_func(value)
