"""
Tests that both graph representations behave identically.

The same operation sequence is applied to an EdgeListGraph and an
AdjacencyMapGraph, and every observable result is compared after each step.
"""

import random
from typing import Any, List, Tuple

import pytest

from weighted_graph.core.exceptions import InvalidArgumentError
from weighted_graph.core.graph import AdjacencyMapGraph, EdgeListGraph
from weighted_graph.utils.validation import GraphIntegrityValidator

LABELS = ["A", "B", "C", "D", "E", "F"]

Operation = Tuple[str, Tuple[Any, ...]]


def random_operations(seed: int, count: int) -> List[Operation]:
    """Build a reproducible operation sequence biased towards edge updates."""
    rng = random.Random(seed)
    operations: List[Operation] = []
    for _ in range(count):
        roll = rng.random()
        if roll < 0.15:
            operations.append(("add_vertex", (rng.choice(LABELS),)))
        elif roll < 0.30:
            operations.append(("remove_vertex", (rng.choice(LABELS),)))
        elif roll < 0.35:
            # Occasionally an invalid call, which must fail the same way on both
            operations.append(("set_edge_weight", (rng.choice(LABELS), None, 1)))
        else:
            weight = rng.choice([0, 0, 1, 2, 3, 5, 8])
            operations.append(
                ("set_edge_weight", (rng.choice(LABELS), rng.choice(LABELS), weight))
            )
    return operations


def apply(graph, operation: Operation) -> Any:
    name, args = operation
    try:
        return getattr(graph, name)(*args)
    except InvalidArgumentError as e:
        return type(e)


def assert_same_state(left, right) -> None:
    assert left.vertices() == right.vertices()
    assert left.edge_count() == right.edge_count()
    assert set(left.edges()) == set(right.edges())
    for label in LABELS:
        assert left.sources(label) == right.sources(label)
        assert left.targets(label) == right.targets(label)
        assert left.has_vertex(label) == right.has_vertex(label)
    assert left == right
    assert left.debug_dump().splitlines()[1:] == right.debug_dump().splitlines()[1:]


@pytest.mark.timeout(10)
@pytest.mark.parametrize("seed", range(20))
def test_random_sequences_match(seed, checked_config):
    """Test that random operation sequences give equal results at every step."""
    edge_graph = EdgeListGraph(checked_config)
    map_graph = AdjacencyMapGraph(checked_config)

    for operation in random_operations(seed, 150):
        assert apply(edge_graph, operation) == apply(map_graph, operation), operation
        assert_same_state(edge_graph, map_graph)

    for graph in (edge_graph, map_graph):
        result = GraphIntegrityValidator.validate_graph(graph)
        assert result.is_valid, result.errors


@pytest.mark.parametrize(
    "operations",
    [
        # Self-loop then cascade
        [("set_edge_weight", ("A", "A", 2)), ("remove_vertex", ("A",))],
        # Overwrite then delete
        [
            ("set_edge_weight", ("A", "B", 3)),
            ("set_edge_weight", ("A", "B", 5)),
            ("set_edge_weight", ("A", "B", 0)),
        ],
        # Removal of a vertex with both directions of traffic
        [
            ("set_edge_weight", ("A", "B", 1)),
            ("set_edge_weight", ("B", "A", 1)),
            ("set_edge_weight", ("C", "B", 1)),
            ("remove_vertex", ("B",)),
            ("add_vertex", ("B",)),
        ],
        # Rejected calls in between valid ones
        [
            ("add_vertex", ("A",)),
            ("set_edge_weight", ("A", "B", -1)),
            ("add_vertex", (None,)),
            ("set_edge_weight", ("A", "B", 2)),
        ],
    ],
    ids=["self-loop", "round-trip", "cascade", "rejections"],
)
def test_scenarios_match(operations, checked_config):
    """Test targeted scenarios step by step on both representations."""
    edge_graph = EdgeListGraph(checked_config)
    map_graph = AdjacencyMapGraph(checked_config)

    for operation in operations:
        assert apply(edge_graph, operation) == apply(map_graph, operation), operation
        assert_same_state(edge_graph, map_graph)


def test_graphs_compare_equal_across_representations():
    """Test that graph equality ignores the representation."""
    triples = [("A", "B", 1), ("B", "C", 2), ("C", "C", 3)]

    assert EdgeListGraph.from_edges(triples) == AdjacencyMapGraph.from_edges(triples)
    assert EdgeListGraph.from_edges(triples) != AdjacencyMapGraph.from_edges(triples[:2])
