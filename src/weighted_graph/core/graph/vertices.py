"""
Adjacency-map graph representation.

The graph is stored as a list of Vertex records, each owning the weights of
the edges leaving it. Outgoing lookups are direct; incoming lookups and the
cleanup after removing a vertex must visit every record, since edges are only
indexed by their source.
"""

import logging
from typing import Dict, List, Optional, Set

from ...utils.validation.arguments import is_valid_label, validate_label, validate_weight
from ..config import GraphConfig
from ..models.edge import Edge
from ..models.vertex import Vertex
from ..types import L
from .base import Graph

logger = logging.getLogger(__name__)


class AdjacencyMapGraph(Graph[L]):
    """
    Weighted directed graph backed by per-vertex outgoing edge maps.

    Attributes:
        _vertices (List[Vertex]): One record per vertex, in insertion order
    """

    def __init__(self, config: Optional[GraphConfig] = None):
        super().__init__(config)
        self._vertices: List[Vertex] = []
        self._check_rep()

    def _rep_errors(self) -> List[str]:
        errors = []
        labels = set()
        for vertex in self._vertices:
            if vertex.label is None:
                errors.append("None is stored as a vertex")
            if vertex.label in labels:
                errors.append(f"Duplicate vertex {vertex.label!r}")
            labels.add(vertex.label)

        for vertex in self._vertices:
            for target, weight in vertex.targets.items():
                if target not in labels:
                    errors.append(f"Edge {vertex.label}->{target} ends at a missing vertex")
                if weight <= 0:
                    errors.append(f"Edge {vertex.label}->{target} has a non-positive weight")
        return errors

    def _get_vertex(self, label: L) -> Optional[Vertex]:
        if not is_valid_label(label):
            return None
        for vertex in self._vertices:
            if vertex.label == label:
                return vertex
        return None

    def add_vertex(self, label: L) -> bool:
        validate_label(label)
        if self._get_vertex(label) is not None:
            return False

        self._vertices.append(Vertex(label))
        logger.debug(f"Added vertex {label!r}")
        self._check_rep()
        return True

    def set_edge_weight(self, source: L, target: L, weight: int) -> int:
        validate_label(source, "source")
        validate_label(target, "target")
        validate_weight(weight)

        source_vertex = self._get_vertex(source)
        if source_vertex is None:
            source_vertex = Vertex(source)
            self._vertices.append(source_vertex)
        if self._get_vertex(target) is None:
            self._vertices.append(Vertex(target))

        previous = source_vertex.set_edge(target, weight)

        if previous or weight:
            logger.debug(f"Edge {source!r}->{target!r} weight {previous} -> {weight}")
        self._check_rep()
        return previous

    def remove_vertex(self, label: L) -> bool:
        vertex = self._get_vertex(label)
        if vertex is None:
            return False

        self._vertices.remove(vertex)
        removed = vertex.out_degree()
        for other in self._vertices:
            if other.remove_edge(label):
                removed += 1

        logger.debug(f"Removed vertex {label!r} and {removed} incident edges")
        self._check_rep()
        return True

    def vertices(self) -> Set[L]:
        return {vertex.label for vertex in self._vertices}

    def sources(self, target: L) -> Dict[L, int]:
        if not is_valid_label(target):
            return {}
        result = {}
        for vertex in self._vertices:
            weight = vertex.weight_to(target)
            if weight:
                result[vertex.label] = weight
        return result

    def targets(self, source: L) -> Dict[L, int]:
        vertex = self._get_vertex(source)
        if vertex is None:
            return {}
        return vertex.targets

    def edges(self) -> List[Edge]:
        return [
            Edge(vertex.label, target, weight)
            for vertex in self._vertices
            for target, weight in vertex.targets.items()
        ]

    def edge_count(self) -> int:
        return sum(vertex.out_degree() for vertex in self._vertices)

    def has_vertex(self, label: L) -> bool:
        return self._get_vertex(label) is not None

    def weight(self, source: L, target: L) -> int:
        vertex = self._get_vertex(source)
        if vertex is None or not is_valid_label(target):
            return 0
        return vertex.weight_to(target)
