"""
Base Validation Components for the weighted graph package

This module provides the foundational validation components used by the graph
types. It includes the ValidationResult class for reporting validation
outcomes and a small hierarchy of ValidationRule classes, each implementing a
single check.

Rules only answer whether a value passes; deciding what to do on failure
(raise, collect, ignore) is left to the caller.
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


class ValidationRule:
    """
    Base class for all validation rules.

    Subclasses override validate() to implement specific validation logic.

    Attributes:
        error_message (str): Message to report when validation fails
    """

    def __init__(self, error_message: str):
        """
        Initialize a validation rule.

        Args:
            error_message: Message to report when validation fails
        """
        self.error_message = error_message

    def validate(self, value: Any) -> bool:
        """
        Validate a value against the rule.

        Args:
            value: Value to validate

        Returns:
            bool: True if validation passes, False otherwise

        Raises:
            NotImplementedError: If the subclass doesn't implement this method
        """
        raise NotImplementedError("Validation rules must implement validate()")


class RequiredRule(ValidationRule):
    """
    Rule for validating required values.

    Only None counts as missing. Empty strings and other falsy values are
    legitimate vertex labels.
    """

    def validate(self, value: Any) -> bool:
        return value is not None


class TypeRule(ValidationRule):
    """
    Rule for type checking values.

    Attributes:
        expected_type: Single type or tuple of types to check against
        excluded_type: Optional type or tuple of types rejected even when they
            are subclasses of expected_type (bool for int, for instance)
    """

    def __init__(
        self,
        expected_type: Union[Type, Tuple[Type, ...]],
        error_message: str,
        excluded_type: Optional[Union[Type, Tuple[Type, ...]]] = None,
    ):
        """
        Initialize a type validation rule.

        Args:
            expected_type: Type or tuple of types to check against
            error_message: Message to report when validation fails
            excluded_type: Type or tuple of types to reject regardless
        """
        super().__init__(error_message)
        self.expected_type = expected_type
        self.excluded_type = excluded_type

    def validate(self, value: Any) -> bool:
        if self.excluded_type is not None and isinstance(value, self.excluded_type):
            return False
        return isinstance(value, self.expected_type)


class RangeRule(ValidationRule):
    """
    Rule for validating numeric ranges.

    Either min_value or max_value can be None to create an open-ended range.

    Attributes:
        min_value (Optional[int]): Minimum allowed value
        max_value (Optional[int]): Maximum allowed value
    """

    def __init__(
        self,
        min_value: Optional[int] = None,
        max_value: Optional[int] = None,
        error_message: str = "",
    ):
        super().__init__(error_message)
        self.min_value = min_value
        self.max_value = max_value

    def validate(self, value: Any) -> bool:
        if not isinstance(value, (int, float)):
            return False
        if self.min_value is not None and value < self.min_value:
            return False
        if self.max_value is not None and value > self.max_value:
            return False
        return True


class CustomRule(ValidationRule):
    """
    Rule for custom validation functions.

    Attributes:
        validator_func: Custom validation function that returns a boolean
    """

    def __init__(self, validator_func: Callable[[Any], bool], error_message: str):
        super().__init__(error_message)
        self.validator_func = validator_func

    def validate(self, value: Any) -> bool:
        return self.validator_func(value)
