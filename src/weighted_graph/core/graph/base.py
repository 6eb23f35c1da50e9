"""
Abstract weighted directed graph.

This module defines the Graph contract every representation satisfies. A graph
is a mutable set of vertex labels plus directed edges carrying strictly
positive integer weights, with at most one edge per ordered pair of vertices.

Representation invariants shared by every implementation:

- every edge's source and target are vertices
- every stored weight is a positive int (0 means "no edge" and is never stored)
- at most one weight is stored for any ordered pair
- no vertex label appears twice

Query methods always return fresh containers. Mutating a returned set or dict
never affects the graph, and later mutations of the graph never show up in a
value returned earlier.

Graphs define no internal locking. Callers sharing one instance across
threads must serialise every call themselves.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Generic, Iterable, List, Optional, Set, Dict, Tuple, Union

from ..config import GraphConfig
from ..exceptions import InvalidArgumentError, InvariantViolationError
from ..models.edge import Edge
from ..types import L

logger = logging.getLogger(__name__)

EdgeSpec = Union[Edge, Tuple[Any, Any, int]]


def _ordered(items: Iterable[Any], key=None) -> List[Any]:
    """Sort items for display, falling back to repr order for mixed labels."""
    items = list(items)
    try:
        return sorted(items, key=key)
    except TypeError:
        if key is None:
            return sorted(items, key=repr)
        return sorted(items, key=lambda item: repr(key(item)))


class Graph(ABC, Generic[L]):
    """
    Mutable weighted directed graph with labeled vertices.

    Subclasses provide the storage and the representation check; this base
    class supplies construction, configuration, comparison and the debug
    rendering in terms of the abstract operations.

    Attributes:
        _config (GraphConfig): Construction-time settings
    """

    def __init__(self, config: Optional[GraphConfig] = None):
        """
        Initialize an empty graph.

        Args:
            config (Optional[GraphConfig]): Graph settings. If None, the
                defaults from GraphConfig() are used.
        """
        self._config = config if config is not None else GraphConfig()

    @property
    def config(self) -> GraphConfig:
        return self._config

    @classmethod
    def empty(cls, config: Optional[GraphConfig] = None) -> "Graph":
        """
        Create an empty graph.

        Called on Graph itself this returns the default representation,
        an EdgeListGraph. Called on a concrete subclass it returns an
        instance of that subclass.

        Args:
            config (Optional[GraphConfig]): Graph settings

        Returns:
            Graph: New graph with no vertices and no edges
        """
        if cls is Graph:
            from .edges import EdgeListGraph

            return EdgeListGraph(config)
        return cls(config)

    @classmethod
    def from_edges(
        cls, edges: Iterable[EdgeSpec], config: Optional[GraphConfig] = None
    ) -> "Graph":
        """
        Create a graph from edge records or (source, target, weight) triples.

        Later entries for the same ordered pair overwrite earlier ones, and a
        weight of 0 removes a previously listed edge while still adding its
        endpoints as vertices.

        Args:
            edges (Iterable[EdgeSpec]): Edges to add in order
            config (Optional[GraphConfig]): Graph settings

        Returns:
            Graph: New graph containing the edges

        Raises:
            InvalidArgumentError: If any entry is not an edge or a triple, or
                has an invalid label or weight
        """
        graph = cls.empty(config)
        for edge in edges:
            if isinstance(edge, Edge):
                graph.set_edge_weight(edge.source, edge.target, edge.weight)
            else:
                try:
                    source, target, weight = edge
                except (TypeError, ValueError):
                    raise InvalidArgumentError(
                        f"edge must be (source, target, weight), got {edge!r}"
                    ) from None
                graph.set_edge_weight(source, target, weight)
        return graph

    # --- Mutation API --------------------------------------------------------

    @abstractmethod
    def add_vertex(self, label: L) -> bool:
        """
        Add a vertex to the graph.

        Args:
            label (L): Label of the new vertex

        Returns:
            bool: True if the graph did not already contain the label

        Raises:
            InvalidArgumentError: If label is None, unhashable or not equal to itself
        """
        raise NotImplementedError

    @abstractmethod
    def set_edge_weight(self, source: L, target: L, weight: int) -> int:
        """
        Add, change or remove the weighted edge source -> target.

        Missing endpoints are added as vertices first. A positive weight
        creates the edge or replaces its weight; a weight of 0 removes the
        edge if it exists.

        Args:
            source (L): Label of the source vertex
            target (L): Label of the target vertex
            weight (int): Non-negative edge weight

        Returns:
            int: The previous weight of the edge, or 0 if there was none

        Raises:
            InvalidArgumentError: If a label is invalid or weight is not a
                non-negative int
        """
        raise NotImplementedError

    @abstractmethod
    def remove_vertex(self, label: L) -> bool:
        """
        Remove a vertex together with every edge entering or leaving it.

        Returns:
            bool: True if the graph contained the vertex
        """
        raise NotImplementedError

    # --- Query API -----------------------------------------------------------

    @abstractmethod
    def vertices(self) -> Set[L]:
        """Get a snapshot of all vertex labels."""
        raise NotImplementedError

    @abstractmethod
    def sources(self, target: L) -> Dict[L, int]:
        """
        Get the source vertices with edges into a target vertex.

        Args:
            target (L): Label of the target vertex

        Returns:
            Dict[L, int]: Source label -> weight of the edge source -> target.
                Empty if target has no incoming edges or is not a vertex.
        """
        raise NotImplementedError

    @abstractmethod
    def targets(self, source: L) -> Dict[L, int]:
        """
        Get the target vertices with edges from a source vertex.

        Args:
            source (L): Label of the source vertex

        Returns:
            Dict[L, int]: Target label -> weight of the edge source -> target.
                Empty if source has no outgoing edges or is not a vertex.
        """
        raise NotImplementedError

    @abstractmethod
    def edges(self) -> List[Edge]:
        """Get a snapshot of all edges as immutable Edge records."""
        raise NotImplementedError

    @abstractmethod
    def edge_count(self) -> int:
        """Get the number of edges in the graph."""
        raise NotImplementedError

    @abstractmethod
    def has_vertex(self, label: L) -> bool:
        """
        Check if a vertex exists in the graph.

        None, unhashable and NaN-like values are never vertices, so they return False.
        """
        raise NotImplementedError

    @abstractmethod
    def weight(self, source: L, target: L) -> int:
        """Get the weight of the edge source -> target, or 0 if there is none."""
        raise NotImplementedError

    # --- Representation check ------------------------------------------------

    @abstractmethod
    def _rep_errors(self) -> List[str]:
        """Describe every way the internal storage breaks the invariants."""
        raise NotImplementedError

    def _check_rep(self) -> None:
        """
        Verify the representation invariants if checking is enabled.

        Raises:
            InvariantViolationError: If the storage is inconsistent
        """
        if not self._config.check_invariants:
            return
        errors = self._rep_errors()
        if errors:
            message = "; ".join(errors)
            logger.error(f"{type(self).__name__} failed its representation check: {message}")
            raise InvariantViolationError(message)

    # --- Rendering and comparison --------------------------------------------

    def debug_dump(self) -> str:
        """
        Render the graph for diagnostics.

        Lists every vertex label and every edge as "source->target (weight)".
        The text is not meant to be parsed.
        """
        vertices = _ordered(self.vertices())
        edges = _ordered(self.edges(), key=lambda edge: (edge.source, edge.target))
        lines = [
            f"{type(self).__name__}: {len(vertices)} vertices, {len(edges)} edges",
            "Vertices: " + ", ".join(str(vertex) for vertex in vertices),
            "Edges: " + ", ".join(str(edge) for edge in edges),
        ]
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.debug_dump()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(vertices={len(self)}, edges={self.edge_count()})"

    def __len__(self) -> int:
        return len(self.vertices())

    def __contains__(self, label: object) -> bool:
        return self.has_vertex(label)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return self.vertices() == other.vertices() and set(self.edges()) == set(other.edges())

    __hash__ = None  # type: ignore[assignment]
