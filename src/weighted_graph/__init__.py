"""
weighted_graph - Mutable Weighted Directed Graphs

This package provides a weighted directed graph abstract data type with two
interchangeable representations that satisfy the same contract:

- EdgeListGraph, storing a vertex set and a flat list of edges
- AdjacencyMapGraph, storing per-vertex outgoing edge maps

Vertices are identified by any hashable label. Edges carry strictly positive
integer weights, and setting a weight of 0 removes an edge.
"""

__version__ = "0.1.0"

from .core.config import GraphConfig
from .core.exceptions import (
    ConfigurationError,
    GraphError,
    InvalidArgumentError,
    InvariantViolationError,
)
from .core.graph import AdjacencyMapGraph, EdgeListGraph, Graph
from .core.models import Edge

__all__ = [
    "AdjacencyMapGraph",
    "ConfigurationError",
    "Edge",
    "EdgeListGraph",
    "Graph",
    "GraphConfig",
    "GraphError",
    "InvalidArgumentError",
    "InvariantViolationError",
]
