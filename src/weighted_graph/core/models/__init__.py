"""
Core models for the weighted graph package.

This package provides the records the graph representations are built from:
immutable edges and mutable per-vertex adjacency records.
"""

from .edge import Edge
from .vertex import Vertex

__all__ = [
    "Edge",
    "Vertex",
]
