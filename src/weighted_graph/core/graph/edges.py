"""
Edge-list graph representation.

The graph is stored as a set of vertex labels plus a flat list of immutable
Edge records. Every edge lookup is a linear scan of the list, which keeps the
representation simple enough that its invariants are easy to check.
"""

import logging
from typing import Dict, List, Optional, Set

from ...utils.validation.arguments import is_valid_label, validate_label, validate_weight
from ..config import GraphConfig
from ..models.edge import Edge
from ..types import L
from .base import Graph

logger = logging.getLogger(__name__)


class EdgeListGraph(Graph[L]):
    """
    Weighted directed graph backed by a vertex set and a list of edges.

    Attributes:
        _vertices (Set[L]): All vertex labels
        _edges (List[Edge]): One record per stored edge, in insertion order
    """

    def __init__(self, config: Optional[GraphConfig] = None):
        super().__init__(config)
        self._vertices: Set[L] = set()
        self._edges: List[Edge] = []
        self._check_rep()

    def _rep_errors(self) -> List[str]:
        errors = []
        if None in self._vertices:
            errors.append("None is stored as a vertex")
        seen = set()
        for edge in self._edges:
            if edge.source not in self._vertices:
                errors.append(f"Edge {edge} starts at a missing vertex")
            if edge.target not in self._vertices:
                errors.append(f"Edge {edge} ends at a missing vertex")
            if edge.weight <= 0:
                errors.append(f"Edge {edge} has a non-positive weight")
            pair = (edge.source, edge.target)
            if pair in seen:
                errors.append(f"More than one edge stored for {edge.source}->{edge.target}")
            seen.add(pair)
        return errors

    def _find_edge(self, source: L, target: L) -> Optional[Edge]:
        for edge in self._edges:
            if edge.connects(source, target):
                return edge
        return None

    def add_vertex(self, label: L) -> bool:
        validate_label(label)
        if label in self._vertices:
            return False

        self._vertices.add(label)
        logger.debug(f"Added vertex {label!r}")
        self._check_rep()
        return True

    def set_edge_weight(self, source: L, target: L, weight: int) -> int:
        validate_label(source, "source")
        validate_label(target, "target")
        validate_weight(weight)

        self._vertices.add(source)
        self._vertices.add(target)

        existing = self._find_edge(source, target)
        previous = existing.weight if existing is not None else 0
        if existing is not None:
            self._edges.remove(existing)
        if weight > 0:
            self._edges.append(Edge(source, target, weight))

        if previous or weight:
            logger.debug(f"Edge {source!r}->{target!r} weight {previous} -> {weight}")
        self._check_rep()
        return previous

    def remove_vertex(self, label: L) -> bool:
        if not self.has_vertex(label):
            return False

        remaining = [edge for edge in self._edges if not edge.touches(label)]
        removed = len(self._edges) - len(remaining)
        self._vertices.remove(label)
        self._edges = remaining

        logger.debug(f"Removed vertex {label!r} and {removed} incident edges")
        self._check_rep()
        return True

    def vertices(self) -> Set[L]:
        return set(self._vertices)

    def sources(self, target: L) -> Dict[L, int]:
        return {edge.source: edge.weight for edge in self._edges if edge.target == target}

    def targets(self, source: L) -> Dict[L, int]:
        return {edge.target: edge.weight for edge in self._edges if edge.source == source}

    def edges(self) -> List[Edge]:
        return list(self._edges)

    def edge_count(self) -> int:
        return len(self._edges)

    def has_vertex(self, label: L) -> bool:
        return is_valid_label(label) and label in self._vertices

    def weight(self, source: L, target: L) -> int:
        edge = self._find_edge(source, target)
        return edge.weight if edge is not None else 0
