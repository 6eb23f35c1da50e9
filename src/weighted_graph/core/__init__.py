"""Core graph functionality."""

from .config import GraphConfig
from .exceptions import (
    ConfigurationError,
    GraphError,
    InvalidArgumentError,
    InvariantViolationError,
)
from .types import GraphProtocol

__all__ = [
    "ConfigurationError",
    "GraphConfig",
    "GraphError",
    "GraphProtocol",
    "InvalidArgumentError",
    "InvariantViolationError",
]
