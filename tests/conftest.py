"""
Pytest configuration for mathgraph tests.

Provides small graphs shared across the test modules.
"""
import pytest

from mathgraph import Graph


def build_graph(vertex_ids, edges, iFlag_directed=False):
    """
    Build a graph from explicit vertex IDs and (start, end[, weight]) tuples.

    Edge IDs are allocated in list order starting at 0.
    """
    graph = Graph()
    for lVertexID in vertex_ids:
        graph.add_vertex(lVertexID)
    for edge in edges:
        dWeight = edge[2] if len(edge) > 2 else 1.0
        graph.add_edge(edge[0], edge[1], dWeight=dWeight, iFlag_directed=iFlag_directed)
    return graph


@pytest.fixture
def empty_graph():
    return Graph()


@pytest.fixture
def triangle():
    """Undirected triangle 1-2-3-1."""
    return build_graph([1, 2, 3], [(1, 2), (2, 3), (3, 1)])


@pytest.fixture
def tree():
    """Undirected tree with 5 vertices and 4 edges."""
    return build_graph([1, 2, 3, 4, 5], [(1, 2), (1, 3), (3, 4), (3, 5)])


@pytest.fixture
def directed_chain():
    """Directed chain 1->2->3."""
    return build_graph([1, 2, 3], [(1, 2), (2, 3)], iFlag_directed=True)


@pytest.fixture
def directed_cycle():
    """Directed 3-cycle 1->2->3->1."""
    return build_graph([1, 2, 3], [(1, 2), (2, 3), (3, 1)], iFlag_directed=True)


@pytest.fixture
def weighted_graph():
    """
    Undirected weighted graph.

        1 --4-- 2 --1-- 4
        |      /        |
        1    2          5
        |  /            |
        3 ------8------ 5

    Vertex 6 is isolated.
    """
    return build_graph(
        [1, 2, 3, 4, 5, 6],
        [(1, 2, 4.0), (1, 3, 1.0), (2, 3, 2.0), (2, 4, 1.0), (4, 5, 5.0), (3, 5, 8.0)],
    )


@pytest.fixture
def build():
    return build_graph
