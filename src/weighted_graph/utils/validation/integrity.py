"""
Graph Integrity Validation for the weighted graph package

This module checks a graph's abstract state through its public read
interface only, independent of how the graph stores its data. It verifies:

- every edge endpoint reported by sources()/targets() is a vertex
- every reported weight is a positive int
- outgoing and incoming views agree edge for edge
- edge_count() matches the number of edges seen

Representations run their own internal checks after each mutation; this
validator is the representation-independent counterpart used by the test
harness and by callers that want to audit a graph.
"""

from typing import Any, List

from ...core.types import GraphProtocol
from .base import ValidationResult


class GraphIntegrityValidator:
    """
    Validator for the abstract invariants of a weighted directed graph.
    """

    @staticmethod
    def _is_positive_int(weight: Any) -> bool:
        return isinstance(weight, int) and not isinstance(weight, bool) and weight > 0

    @staticmethod
    def _validate_outgoing(graph: GraphProtocol) -> List[str]:
        """
        Validate every outgoing mapping against the vertex set and the
        incoming view of the same edges.
        """
        errors = []
        vertices = graph.vertices()
        for source in vertices:
            for target, weight in graph.targets(source).items():
                if target not in vertices:
                    errors.append(f"Edge {source!r}->{target!r} targets a missing vertex")
                if not GraphIntegrityValidator._is_positive_int(weight):
                    errors.append(f"Edge {source!r}->{target!r} has invalid weight {weight!r}")
                incoming = graph.sources(target).get(source)
                if incoming != weight:
                    errors.append(
                        f"Edge {source!r}->{target!r} has weight {weight!r} outgoing "
                        f"but {incoming!r} incoming"
                    )
        return errors

    @staticmethod
    def _validate_incoming(graph: GraphProtocol) -> List[str]:
        """Validate that no incoming entry lacks a matching outgoing entry."""
        errors = []
        vertices = graph.vertices()
        for target in vertices:
            for source in graph.sources(target):
                if source not in vertices:
                    errors.append(f"Edge {source!r}->{target!r} starts at a missing vertex")
                elif target not in graph.targets(source):
                    errors.append(f"Edge {source!r}->{target!r} is only visible incoming")
        return errors

    @staticmethod
    def validate_graph(graph: GraphProtocol) -> ValidationResult:
        """
        Validate graph integrity.

        Args:
            graph: Any object implementing the graph read interface

        Returns:
            ValidationResult containing validation details and any errors
        """
        errors: List[str] = []
        errors.extend(GraphIntegrityValidator._validate_outgoing(graph))
        errors.extend(GraphIntegrityValidator._validate_incoming(graph))

        seen = sum(len(graph.targets(vertex)) for vertex in graph.vertices())
        reported = graph.edge_count()
        if seen != reported:
            errors.append(f"edge_count() reports {reported} edges but {seen} are reachable")

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=[],
            context={"vertex_count": len(graph.vertices()), "edge_count": reported},
        )
