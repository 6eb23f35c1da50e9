"""Shared test fixtures."""

import pytest

from weighted_graph.core.config import GraphConfig
from weighted_graph.core.graph import AdjacencyMapGraph, EdgeListGraph

REPRESENTATIONS = [EdgeListGraph, AdjacencyMapGraph]


@pytest.fixture
def checked_config() -> GraphConfig:
    """Fixture providing a configuration with invariant checking forced on."""
    return GraphConfig(check_invariants=True)


@pytest.fixture(params=REPRESENTATIONS, ids=lambda cls: cls.__name__)
def graph_class(request):
    """Fixture providing each graph representation class in turn."""
    return request.param


@pytest.fixture
def graph(graph_class, checked_config):
    """Fixture providing an empty graph of each representation."""
    return graph_class(checked_config)


@pytest.fixture
def triangle(graph):
    """Fixture providing a graph with edges A->B (3), B->C (4), C->A (5)."""
    graph.set_edge_weight("A", "B", 3)
    graph.set_edge_weight("B", "C", 4)
    graph.set_edge_weight("C", "A", 5)
    return graph
