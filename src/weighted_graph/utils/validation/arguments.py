"""
Argument checks for graph operations.

Labels and weights are validated here before a graph touches its state, so a
rejected call never leaves a partial mutation behind.
"""

from typing import Any, List

from ...core.exceptions import InvalidArgumentError
from .base import CustomRule, RangeRule, RequiredRule, TypeRule, ValidationRule


def _is_hashable(value: Any) -> bool:
    try:
        hash(value)
    except TypeError:
        return False
    return True


def _equals_itself(value: Any) -> bool:
    # NaN and similar values would never be found again by == lookups
    return bool(value == value)


LABEL_RULES: List[ValidationRule] = [
    RequiredRule("must not be None"),
    CustomRule(_is_hashable, "must be hashable"),
    CustomRule(_equals_itself, "must equal itself"),
]

WEIGHT_RULES: List[ValidationRule] = [
    TypeRule(int, "must be an int", excluded_type=bool),
    RangeRule(min_value=0, error_message="must be non-negative"),
]

POSITIVE_WEIGHT_RULES: List[ValidationRule] = [
    TypeRule(int, "must be an int", excluded_type=bool),
    RangeRule(min_value=1, error_message="must be positive"),
]


def _apply(rules: List[ValidationRule], value: Any, name: str) -> None:
    for rule in rules:
        if not rule.validate(value):
            raise InvalidArgumentError(f"{name} {rule.error_message}, got {value!r}")


def is_valid_label(value: Any) -> bool:
    """Check, without raising, whether a value could be a vertex label."""
    return all(rule.validate(value) for rule in LABEL_RULES)


def validate_label(label: Any, name: str = "label") -> None:
    """
    Check that a value can be used as a vertex label.

    Args:
        label: Candidate label
        name: Argument name used in the error message

    Raises:
        InvalidArgumentError: If the label is None, unhashable or not equal to itself
    """
    _apply(LABEL_RULES, label, name)


def validate_weight(weight: Any, name: str = "weight") -> None:
    """
    Check that a value is an acceptable argument to set_edge_weight.

    Zero is accepted here since it requests edge removal.

    Raises:
        InvalidArgumentError: If the weight is not a non-negative int
    """
    _apply(WEIGHT_RULES, weight, name)


def validate_stored_weight(weight: Any, name: str = "weight") -> None:
    """Check that a value can be stored as an edge weight (a positive int)."""
    _apply(POSITIVE_WEIGHT_RULES, weight, name)
