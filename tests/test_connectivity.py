"""Tests for connectivity analysis and subgraph extraction."""
import pytest

from mathgraph import Graph, algorithms, VertexNotFoundError
from mathgraph.analysis.connectivity import ConnectivityAnalyzer


def structure(graph):
    """Comparable summary of vertices and edges."""
    vertices = {v.lVertexID: (v.dWeight, sorted(v.aEdgeID)) for v in graph.aVertex}
    edges = {e.lEdgeID: (e.lVertexID_start, e.lVertexID_end, e.dWeight, e.iFlag_directed)
             for e in graph.aEdge}
    return vertices, edges


class TestConnectedVertices:
    """Tests for depth-first reachability."""

    def test_component_of_start(self, weighted_graph):
        """Only the start vertex's component is collected."""
        vertex_ids = algorithms.get_connected_vertex_ids(weighted_graph, 1)
        assert sorted(vertex_ids) == [1, 2, 3, 4, 5]

    def test_start_vertex_reported_last(self, tree):
        """Vertices come in post-order, the start vertex last."""
        vertex_ids = algorithms.get_connected_vertex_ids(tree, 1)
        assert vertex_ids[-1] == 1
        assert vertex_ids.index(4) < vertex_ids.index(3)
        assert vertex_ids.index(5) < vertex_ids.index(3)

    def test_direction_ignored(self, directed_chain):
        """Directed edges are followed backwards too."""
        assert sorted(algorithms.get_connected_vertex_ids(directed_chain, 3)) == [1, 2, 3]

    def test_missing_start(self, triangle):
        """Unknown start vertices fail with not-found."""
        with pytest.raises(VertexNotFoundError):
            algorithms.get_connected_vertex_ids(triangle, 99)

    def test_deep_chain_without_recursion(self):
        """A chain far longer than the recursion limit is traversed."""
        graph = Graph()
        graph.add_vertex()
        for vertex_id in range(1, 5000):
            graph.add_vertex()
            graph.add_edge(vertex_id - 1, vertex_id)
        assert len(algorithms.get_connected_vertex_ids(graph, 0)) == 5000
        assert algorithms.is_graph_connected(graph)


class TestIsGraphConnected:
    """Tests for is_graph_connected."""

    def test_empty_graph(self, empty_graph):
        """The empty graph is connected."""
        assert algorithms.is_graph_connected(empty_graph)

    def test_single_vertex(self, empty_graph):
        """A single isolated vertex is connected."""
        empty_graph.add_vertex()
        assert algorithms.is_graph_connected(empty_graph)

    def test_two_vertices_without_edge(self, build):
        """Two unlinked vertices are not connected."""
        assert not algorithms.is_graph_connected(build([1, 2], []))

    def test_connected_and_disconnected(self, triangle, weighted_graph):
        """Isolated vertex 6 disconnects the weighted graph."""
        assert algorithms.is_graph_connected(triangle)
        assert not algorithms.is_graph_connected(weighted_graph)


class TestSubgraph:
    """Tests for subgraph extraction."""

    def test_connected_subgraph(self, weighted_graph):
        """The connected subgraph holds the component and its edges."""
        subgraph = algorithms.get_connected_subgraph(weighted_graph, 6)
        assert subgraph.get_vertex_ids() == [6]
        assert subgraph.get_edge_count() == 0
        subgraph = algorithms.get_connected_subgraph(weighted_graph, 2)
        assert subgraph.get_vertex_ids() == [1, 2, 3, 4, 5]
        assert subgraph.get_edge_count() == 6

    def test_edges_closed_over_subset(self, weighted_graph):
        """Edges leaving the subset are dropped and edge lists pruned."""
        subgraph = algorithms.get_subgraph(weighted_graph, [1, 2, 3])
        assert subgraph.get_edge_ids() == [0, 1, 2]
        for edge in subgraph.aEdge:
            assert edge.lVertexID_start in (1, 2, 3)
            assert edge.lVertexID_end in (1, 2, 3)
        assert sorted(subgraph.get_vertex_by_id(2).aEdgeID) == [0, 2]

    def test_full_extraction_is_identical(self, weighted_graph):
        """Re-extracting every vertex reproduces the structure."""
        subgraph = algorithms.get_subgraph(weighted_graph, weighted_graph.get_vertex_ids())
        assert structure(subgraph) == structure(weighted_graph)
        again = algorithms.get_subgraph(subgraph, subgraph.get_vertex_ids())
        assert structure(again) == structure(subgraph)

    def test_no_aliasing(self, build):
        """Extracted entities are copies, payloads included."""
        graph = build([1, 2], [(1, 2)])
        graph.get_vertex_by_id(1).pObject = {'tag': 'a'}
        subgraph = algorithms.get_subgraph(graph, [1, 2, 2])
        vertex = subgraph.get_vertex_by_id(1)
        assert vertex is not graph.get_vertex_by_id(1)
        assert subgraph.get_edge_by_id(0) is not graph.get_edge_by_id(0)
        vertex.pObject['tag'] = 'b'
        subgraph.remove_vertex(2)
        assert graph.get_vertex_by_id(1).pObject == {'tag': 'a'}
        assert graph.get_vertex_by_id(1).aEdgeID == [0]
        assert graph.has_vertex(2)

    def test_unknown_vertex(self, triangle):
        """Unknown IDs in the requested set fail with not-found."""
        with pytest.raises(VertexNotFoundError):
            algorithms.get_subgraph(triangle, [1, 99])


class TestApplyMethod:
    """Tests for apply_method_to_all_connected_vertices."""

    def test_action_on_graph_vertices(self, weighted_graph):
        """The action sees the graph's own vertices of the component."""
        def double(vertex):
            vertex.dWeight *= 2

        algorithms.apply_method_to_all_connected_vertices(weighted_graph, 4, double)
        weights = {v.lVertexID: v.dWeight for v in weighted_graph.aVertex}
        assert weights == {1: 2.0, 2: 2.0, 3: 2.0, 4: 2.0, 5: 2.0, 6: 1.0}

    def test_analyzer_class(self, triangle):
        """The analyzer class can be used directly."""
        analyzer = ConnectivityAnalyzer(triangle)
        seen = []
        analyzer.apply_method_to_all_connected_vertices(triangle.get_vertex_by_id(2), seen.append)
        assert sorted(v.lVertexID for v in seen) == [1, 2, 3]
