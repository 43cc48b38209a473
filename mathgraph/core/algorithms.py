"""
Stateless graph algorithm functions.

This module is the single entry point for the algorithms, delegating to the
specialized analysis classes. None of the functions mutate the graph passed
in; ``get_subgraph`` and ``get_connected_subgraph`` allocate new graphs.
"""

from typing import Callable, Iterable, List, Union

import numpy as np

from ..classes.vertex import pyvertex, to_vertex_id
from .interface import IGraph
from .graph import Graph
from ..analysis.adjacency import AdjacencyBuilder
from ..analysis.pathfinding import PathFinder
from ..analysis.lookup import ShortestPathLookup
from ..analysis.connectivity import ConnectivityAnalyzer
from ..analysis.components import ComponentFinder
from ..analysis.detection import CycleDetector


# ========================================================================
# MATRICES
# ========================================================================

def compute_adjacency_matrix(graph: IGraph) -> np.ndarray:
    """Edge multiplicity matrix indexed by ascending vertex ID."""
    return AdjacencyBuilder(graph).compute_adjacency_matrix()


# ========================================================================
# PATH FINDING
# ========================================================================

def shortest_paths(graph: IGraph, source: Union[pyvertex, int]) -> ShortestPathLookup:
    """Dijkstra shortest paths from a source vertex or vertex ID."""
    return PathFinder(graph).shortest_paths(source)


def get_adjacent_vertices(graph: IGraph, vertex: Union[pyvertex, int]) -> List[pyvertex]:
    """Distinct vertices one traversable edge away from a vertex."""
    aVertexID = PathFinder(graph).get_adjacent_vertex_ids(to_vertex_id(vertex))
    return [graph.get_vertex_by_id(lVertexID) for lVertexID in aVertexID]


# ========================================================================
# CONNECTIVITY
# ========================================================================

def is_graph_connected(graph: IGraph) -> bool:
    """Check whether all vertices are connected, ignoring edge direction."""
    return ConnectivityAnalyzer(graph).is_graph_connected()


def get_connected_vertex_ids(graph: IGraph, start: Union[pyvertex, int]) -> List[int]:
    """IDs of all vertices connected to a start vertex."""
    return ConnectivityAnalyzer(graph).get_connected_vertex_ids(start)


def get_connected_subgraph(graph: IGraph, start: Union[pyvertex, int]) -> Graph:
    """New graph holding the connected component of a start vertex."""
    return ConnectivityAnalyzer(graph).get_connected_subgraph(start)


def apply_method_to_all_connected_vertices(graph: IGraph, start: Union[pyvertex, int],
                                           action: Callable[[pyvertex], None]):
    """Call an action on every vertex connected to a start vertex."""
    ConnectivityAnalyzer(graph).apply_method_to_all_connected_vertices(start, action)


def get_subgraph(graph: IGraph, vertex_ids: Iterable[int]) -> Graph:
    """New graph induced by the given vertex IDs."""
    return ConnectivityAnalyzer(graph).get_subgraph(vertex_ids)


# ========================================================================
# CYCLES & COMPONENTS
# ========================================================================

def has_cycles(graph: IGraph, iFlag_treat_as_undirected: bool = False) -> bool:
    """Check for cycles in a fully directed or fully undirected graph."""
    return CycleDetector(graph).has_cycles(iFlag_treat_as_undirected)


def find_strongly_connected_components(graph: IGraph) -> List[List[int]]:
    """Tarjan strongly connected components as lists of vertex IDs."""
    return ComponentFinder(graph).find_strongly_connected_components()
