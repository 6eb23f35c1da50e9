"""
Edge model for the weighted graph package.

An Edge is an immutable record of one directed, weighted connection. Graphs
hand Edge instances to callers freely, since nothing about an Edge can be
changed after construction.
"""

from dataclasses import dataclass
from typing import Generic

from ...utils.validation.arguments import validate_label, validate_stored_weight
from ..types import L


@dataclass(frozen=True)
class Edge(Generic[L]):
    """
    Directed edge with a strictly positive integer weight.

    Attributes:
        source (L): Label of the vertex the edge leaves
        target (L): Label of the vertex the edge enters
        weight (int): Edge weight, always greater than zero
    """

    source: L
    target: L
    weight: int

    def __post_init__(self):
        """Validate edge after initialization."""
        validate_label(self.source, "source")
        validate_label(self.target, "target")
        validate_stored_weight(self.weight)

    def connects(self, source: L, target: L) -> bool:
        """Check whether this edge runs from source to target."""
        return self.source == source and self.target == target

    def touches(self, label: L) -> bool:
        """Check whether label is either endpoint of this edge."""
        return self.source == label or self.target == label

    def __str__(self) -> str:
        return f"{self.source}->{self.target} ({self.weight})"
