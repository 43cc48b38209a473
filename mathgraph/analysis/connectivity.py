"""
Connectivity analysis and subgraph extraction.

This module provides depth-first reachability and the extraction of
independent subgraphs.
"""

import logging
from typing import Callable, Iterable, Iterator, List, Set, Tuple, Union

from ..classes.vertex import pyvertex, to_vertex_id
from ..core.interface import IGraph
from ..core.graph import Graph

logger = logging.getLogger(__name__)


class ConnectivityAnalyzer:
    """
    Reachability analysis ignoring edge direction.

    This class provides methods for:
    - Collecting the vertices connected to a start vertex
    - Extracting connected or arbitrary subgraphs
    - Checking whether the whole graph is connected
    """

    def __init__(self, graph: IGraph):
        """
        Initialize the connectivity analyzer.

        Args:
            graph: Graph to analyze
        """
        self.graph = graph

    def get_connected_vertex_ids(self, start: Union[pyvertex, int]) -> List[int]:
        """
        Collect all vertices connected to a start vertex.

        Uses an explicit stack of (vertex, remaining edges) frames, so depth is
        not limited by the interpreter's recursion limit. Edges are followed in
        both directions whatever their kind.

        Args:
            start: Start vertex or vertex ID

        Returns:
            Connected vertex IDs in depth-first post-order, start vertex last
        """
        lVertexID_start = to_vertex_id(start)
        pVertex_start = self.graph.get_vertex_by_id(lVertexID_start)

        visited: Set[int] = {lVertexID_start}
        aVertexID_connected: List[int] = []
        stack: List[Tuple[int, Iterator[int]]] = [(lVertexID_start, iter(list(pVertex_start.aEdgeID)))]

        while stack:
            lVertexID_current, edge_iter = stack[-1]
            lVertexID_next = None
            for lEdgeID in edge_iter:
                pEdge = self.graph.get_edge_by_id(lEdgeID)
                lVertexID_other = pEdge.get_other_vertex_id(lVertexID_current)
                if lVertexID_other not in visited:
                    lVertexID_next = lVertexID_other
                    break

            if lVertexID_next is None:
                stack.pop()
                aVertexID_connected.append(lVertexID_current)
                continue

            visited.add(lVertexID_next)
            pVertex_next = self.graph.get_vertex_by_id(lVertexID_next)
            stack.append((lVertexID_next, iter(list(pVertex_next.aEdgeID))))

        logger.debug(f"Found {len(aVertexID_connected)} vertices connected to vertex {lVertexID_start}")
        return aVertexID_connected

    def get_connected_subgraph(self, start: Union[pyvertex, int]) -> Graph:
        """
        Extract the connected component containing a start vertex.

        Args:
            start: Start vertex or vertex ID

        Returns:
            New independent graph holding the component
        """
        return self.get_subgraph(self.get_connected_vertex_ids(start))

    def is_graph_connected(self) -> bool:
        """
        Check whether every vertex is reachable from every other.

        The empty graph and a single vertex count as connected.
        """
        aVertex = self.graph.aVertex
        if not aVertex:
            return True
        aVertexID_connected = self.get_connected_vertex_ids(aVertex[0].lVertexID)
        return len(aVertexID_connected) == len(aVertex)

    def apply_method_to_all_connected_vertices(self, start: Union[pyvertex, int],
                                               action: Callable[[pyvertex], None]):
        """
        Call an action on every vertex connected to a start vertex.

        The action receives the graph's own vertex objects, not copies.

        Args:
            start: Start vertex or vertex ID
            action: Callable taking one vertex
        """
        for lVertexID in self.get_connected_vertex_ids(start):
            action(self.graph.get_vertex_by_id(lVertexID))

    def get_subgraph(self, vertex_ids: Iterable[int]) -> Graph:
        """
        Extract the subgraph induced by a set of vertices.

        Vertices are copied with empty edge lists, then every edge with both
        endpoints in the set is copied in; edges leaving the set are dropped.
        The result shares no entity objects with the source graph.

        Args:
            vertex_ids: IDs of the vertices to keep, duplicates ignored

        Returns:
            New independent graph

        Raises:
            VertexNotFoundError: If an ID is not in the source graph
        """
        aVertexID: List[int] = []
        vertex_id_set: Set[int] = set()
        for lVertexID in vertex_ids:
            if lVertexID not in vertex_id_set:
                vertex_id_set.add(lVertexID)
                aVertexID.append(lVertexID)

        aVertex_copy = []
        for lVertexID in aVertexID:
            pVertex_copy = self.graph.get_vertex_by_id(lVertexID).copy()
            pVertex_copy.aEdgeID.clear()
            aVertex_copy.append(pVertex_copy)

        aEdge_copy = [pEdge.copy() for pEdge in self.graph.aEdge
                      if pEdge.lVertexID_start in vertex_id_set and pEdge.lVertexID_end in vertex_id_set]

        pSubgraph = Graph(aVertex_copy, aEdge_copy)
        logger.debug(f"Extracted subgraph with {len(aVertex_copy)} vertices and {len(aEdge_copy)} edges")
        return pSubgraph
