"""
Custom exceptions for the weighted graph package.

This module defines the hierarchy of exceptions raised by the graph types.
Every exception derives from GraphError so callers can catch anything the
package raises with a single clause, while the concrete classes also derive
from the matching builtin (ValueError, AssertionError) for callers that
already handle those.
"""


class GraphError(Exception):
    """
    Base class for all errors raised by the weighted graph package.
    """


class InvalidArgumentError(GraphError, ValueError):
    """
    Raised when a graph operation receives an argument it cannot accept.

    The check happens before any mutation, so a graph is left exactly as it
    was when this exception propagates.

    Examples:
        * None passed where a vertex label is required
        * Unhashable vertex label, or one not equal to itself (NaN)
        * Negative or non-integer edge weight
    """

    def __str__(self) -> str:
        """Format invalid argument message."""
        return f"Invalid Argument: {super().__str__()}"


class InvariantViolationError(GraphError, AssertionError):
    """
    Raised when a graph representation fails its internal consistency check.

    This exception signals a defect in a representation, not a runtime
    condition callers are expected to handle. It is only raised when
    invariant checking is enabled in the graph's configuration.

    Examples:
        * Edge whose endpoint is not a vertex
        * Stored weight that is zero or negative
        * Two stored weights for the same ordered pair
        * Duplicate vertex labels
    """

    def __str__(self) -> str:
        """Format invariant violation message."""
        return f"Invariant Violation: {super().__str__()}"


class ConfigurationError(GraphError):
    """
    Raised when graph configuration is invalid.

    Examples:
        * Unrecognised boolean value in an environment variable
    """
