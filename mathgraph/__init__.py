"""
mathgraph - Graph Data Structure and Algorithms Library

A Python library holding a mutable, generic graph of vertices and edges keyed
by numeric IDs, together with classical graph algorithms: shortest paths,
connectivity, cycle detection and strongly connected components.

Main Classes:
    Graph: Mutable graph container
    pyvertex: Vertex representation in the graph
    pyedge: Edge representation between vertices
    pypath: Path returned by shortest path reconstruction
    ShortestPathLookup: Shortest paths from one source, queried on demand

Example:
    >>> from mathgraph import Graph, algorithms
    >>> graph = Graph()
    >>> a, b = graph.add_vertex(), graph.add_vertex()
    >>> edge = graph.add_edge(a.lVertexID, b.lVertexID, dWeight=2.5)
    >>> lookup = algorithms.shortest_paths(graph, a.lVertexID)
    >>> lookup.path_length_to(b.lVertexID)
    2.5
"""

__version__ = "0.1.0"

from mathgraph.classes.vertex import pyvertex
from mathgraph.classes.edge import pyedge
from mathgraph.classes.path import pypath
from mathgraph.core.graph import Graph
from mathgraph.core.interface import IGraph
from mathgraph.core.exceptions import (
    GraphError,
    GraphNotFoundError,
    VertexNotFoundError,
    EdgeNotFoundError,
    InvalidGraphInputError,
    DuplicateIdError,
    NegativeEdgeWeightError,
    MixedEdgeKindError,
    UnreachableTargetError,
)
from mathgraph.analysis.lookup import ShortestPathLookup
from mathgraph.core import algorithms

__all__ = [
    'Graph',
    'IGraph',
    'pyvertex',
    'pyedge',
    'pypath',
    'ShortestPathLookup',
    'algorithms',
    'GraphError',
    'GraphNotFoundError',
    'VertexNotFoundError',
    'EdgeNotFoundError',
    'InvalidGraphInputError',
    'DuplicateIdError',
    'NegativeEdgeWeightError',
    'MixedEdgeKindError',
    'UnreachableTargetError',
]
