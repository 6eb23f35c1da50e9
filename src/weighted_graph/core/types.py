"""
Core type definitions and protocols.

This module provides the label type variable and the structural protocol
shared by every graph representation.
"""

from typing import Dict, Hashable, Protocol, Set, TypeVar

L = TypeVar("L", bound=Hashable)


class GraphProtocol(Protocol[L]):
    """Protocol defining the read side of the graph contract."""

    def vertices(self) -> Set[L]:
        """Get a snapshot of all vertex labels."""
        ...

    def sources(self, target: L) -> Dict[L, int]:
        """Get incoming neighbours of a vertex with edge weights."""
        ...

    def targets(self, source: L) -> Dict[L, int]:
        """Get outgoing neighbours of a vertex with edge weights."""
        ...

    def edge_count(self) -> int:
        """Get the number of stored edges."""
        ...
