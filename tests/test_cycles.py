"""Tests for cycle detection and strongly connected components."""
import pytest

from mathgraph import Graph, algorithms, MixedEdgeKindError
from mathgraph.analysis.detection import CycleDetector, EdgeKind, classify_edges


def component_sets(components):
    return sorted(sorted(component) for component in components)


class TestStronglyConnectedComponents:
    """Tests for Tarjan decomposition."""

    def test_chain_gives_singletons(self, directed_chain):
        """A DAG yields one singleton per vertex."""
        components = algorithms.find_strongly_connected_components(directed_chain)
        assert component_sets(components) == [[1], [2], [3]]

    def test_cycle_gives_one_component(self, directed_cycle):
        """A directed 3-cycle is a single component."""
        components = algorithms.find_strongly_connected_components(directed_cycle)
        assert component_sets(components) == [[1, 2, 3]]

    def test_two_cycles_joined_by_bridge(self, build):
        """Components joined one way stay separate."""
        graph = build([1, 2, 3, 4, 5],
                      [(1, 2), (2, 1), (2, 3), (3, 4), (4, 5), (5, 3)],
                      iFlag_directed=True)
        components = algorithms.find_strongly_connected_components(graph)
        assert component_sets(components) == [[1, 2], [3, 4, 5]]

    def test_sink_component_found_first(self, build):
        """Components are emitted in reverse topological order."""
        graph = build([1, 2, 3], [(1, 2), (2, 3)], iFlag_directed=True)
        components = algorithms.find_strongly_connected_components(graph)
        assert components == [[3], [2], [1]]

    def test_empty_graph(self, empty_graph):
        """No vertices, no components."""
        assert algorithms.find_strongly_connected_components(empty_graph) == []

    def test_deep_cycle_without_recursion(self):
        """A directed cycle longer than the recursion limit is one component."""
        graph = Graph()
        count = 5000
        for _ in range(count):
            graph.add_vertex()
        for vertex_id in range(count):
            graph.add_edge(vertex_id, (vertex_id + 1) % count, iFlag_directed=True)
        components = algorithms.find_strongly_connected_components(graph)
        assert len(components) == 1
        assert len(components[0]) == count


class TestHasCycles:
    """Tests for has_cycles."""

    def test_undirected_triangle(self, triangle):
        """An undirected triangle has a cycle."""
        assert algorithms.has_cycles(triangle)

    def test_undirected_tree(self, tree):
        """A tree has no cycle."""
        assert not algorithms.has_cycles(tree)

    def test_forest_with_isolated_vertex(self, build):
        """Isolated vertices and several trees are handled."""
        graph = build([1, 2, 3, 4, 5, 6], [(1, 2), (3, 4), (4, 5)])
        assert not algorithms.has_cycles(graph)

    def test_cycle_in_second_component(self, build):
        """A cycle away from the first vertex is still found."""
        graph = build([1, 2, 3, 4, 5], [(1, 2), (3, 4), (4, 5), (5, 3)])
        assert algorithms.has_cycles(graph)

    def test_undirected_parallel_edges(self, build):
        """Two parallel undirected edges form a cycle."""
        assert algorithms.has_cycles(build([1, 2], [(1, 2), (2, 1)]))

    def test_undirected_self_loop(self, build):
        """An undirected self-loop is a cycle."""
        assert algorithms.has_cycles(build([1], [(1, 1)]))

    def test_directed_cycle(self, directed_cycle):
        """A directed 3-cycle is found via components."""
        assert algorithms.has_cycles(directed_cycle)

    def test_directed_chain(self, directed_chain):
        """A directed chain has no cycle."""
        assert not algorithms.has_cycles(directed_chain)

    def test_directed_diamond(self, build):
        """Two directed routes to one vertex are not a cycle, even with the override."""
        graph = build([1, 2, 3, 4], [(1, 2), (1, 3), (2, 4), (3, 4)], iFlag_directed=True)
        assert not algorithms.has_cycles(graph)
        assert not algorithms.has_cycles(graph, iFlag_treat_as_undirected=True)

    def test_directed_self_loop(self, build):
        """A directed self-loop is a cycle."""
        assert algorithms.has_cycles(build([1, 2], [(1, 2), (2, 2)], iFlag_directed=True))

    def test_no_edges(self, build, empty_graph):
        """Graphs without edges have no cycle."""
        assert not algorithms.has_cycles(empty_graph)
        assert not algorithms.has_cycles(build([1, 2, 3], []))

    def test_mixed_edges_rejected(self, build):
        """Mixed edge kinds without override fail."""
        graph = build([1, 2, 3], [(1, 2)])
        graph.add_edge(2, 3, iFlag_directed=True)
        with pytest.raises(MixedEdgeKindError):
            algorithms.has_cycles(graph)

    def test_mixed_edges_with_override(self, build):
        """The undirected override accepts mixed graphs."""
        graph = build([1, 2, 3], [(1, 2), (2, 3)])
        graph.add_edge(3, 1, iFlag_directed=True)
        assert CycleDetector(graph).has_cycles(iFlag_treat_as_undirected=True)


class TestEdgeKind:
    """Tests for the up-front edge classification."""

    def test_classification(self, triangle, directed_chain, empty_graph):
        assert classify_edges(triangle.aEdge) == EdgeKind.UNDIRECTED
        assert classify_edges(directed_chain.aEdge) == EdgeKind.DIRECTED
        assert classify_edges(empty_graph.aEdge) == EdgeKind.NONE
        assert classify_edges(triangle.aEdge + directed_chain.aEdge) == EdgeKind.MIXED
