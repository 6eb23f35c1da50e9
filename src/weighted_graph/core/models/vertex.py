"""
Vertex model for the weighted graph package.

A Vertex is a mutable record owned by a single AdjacencyMapGraph. It keeps
the vertex label together with the outgoing edges leaving that vertex.
"""

from typing import Dict, Generic

from ...utils.validation.arguments import validate_label, validate_weight
from ..types import L


class Vertex(Generic[L]):
    """
    Graph vertex with its outgoing edges indexed by target label.

    Attributes:
        label (L): Vertex label, fixed at construction
        _targets (Dict[L, int]): Outgoing edge weights keyed by target label
    """

    __slots__ = ("_label", "_targets")

    def __init__(self, label: L):
        validate_label(label)
        self._label = label
        self._targets: Dict[L, int] = {}

    @property
    def label(self) -> L:
        return self._label

    @property
    def targets(self) -> Dict[L, int]:
        """Outgoing edge weights, as a copy callers may mutate freely."""
        return dict(self._targets)

    def weight_to(self, target: L) -> int:
        """Get the weight of the edge to target, or 0 if there is none."""
        return self._targets.get(target, 0)

    def out_degree(self) -> int:
        return len(self._targets)

    def set_edge(self, target: L, weight: int) -> int:
        """
        Set the weight of the outgoing edge to target.

        Args:
            target (L): Target vertex label
            weight (int): New weight; 0 removes the edge

        Returns:
            int: The previous weight, or 0 if there was no edge

        Raises:
            InvalidArgumentError: If target is invalid or weight is negative
        """
        validate_label(target, "target")
        validate_weight(weight)

        previous = self._targets.get(target, 0)
        if weight == 0:
            self._targets.pop(target, None)
        else:
            self._targets[target] = weight
        return previous

    def remove_edge(self, target: L) -> int:
        """
        Remove the outgoing edge to target if present.

        Returns:
            int: The removed weight, or 0 if there was no edge
        """
        return self._targets.pop(target, 0)

    def __str__(self) -> str:
        return f"{self._label}->{self._targets}"

    def __repr__(self) -> str:
        return f"Vertex({self._label!r}, targets={self._targets!r})"
