"""
Validation package for the weighted graph package.

This package provides the argument checks applied before every mutation and
the integrity validator used to audit a graph's abstract state.
"""

from .base import (
    ValidationResult,
    ValidationRule,
    RequiredRule,
    TypeRule,
    RangeRule,
    CustomRule,
)
from .arguments import is_valid_label, validate_label, validate_stored_weight, validate_weight
from .integrity import GraphIntegrityValidator

__all__ = [
    "ValidationResult",
    "ValidationRule",
    "RequiredRule",
    "TypeRule",
    "RangeRule",
    "CustomRule",
    "is_valid_label",
    "validate_label",
    "validate_weight",
    "validate_stored_weight",
    "GraphIntegrityValidator",
]
