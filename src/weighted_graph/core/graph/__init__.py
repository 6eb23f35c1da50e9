"""
Graph module for the weighted graph package.

This module provides the abstract Graph contract and its two interchangeable
representations:
- EdgeListGraph: a vertex set plus a flat list of edge records
- AdjacencyMapGraph: per-vertex records holding outgoing edge weights
"""

from .base import Graph
from .edges import EdgeListGraph
from .vertices import AdjacencyMapGraph

__all__ = [
    "Graph",
    "EdgeListGraph",
    "AdjacencyMapGraph",
]
