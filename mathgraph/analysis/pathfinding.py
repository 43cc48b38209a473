"""
Single-source shortest paths.

This module provides Dijkstra's algorithm over the graph capability surface.
"""

import heapq
import logging
from typing import Dict, List, Set, Tuple, Union

from ..classes.vertex import pyvertex, to_vertex_id
from ..core.interface import IGraph
from ..core.exceptions import NegativeEdgeWeightError, VertexNotFoundError
from .lookup import ShortestPathLookup

logger = logging.getLogger(__name__)


class PathFinder:
    """
    Shortest path search for graphs with non-negative edge weights.

    This class provides methods for:
    - Computing shortest distances from a source (Dijkstra)
    - Listing the neighbours reachable over one edge
    """

    def __init__(self, graph: IGraph):
        """
        Initialize the path finder.

        Args:
            graph: Graph to search
        """
        self.graph = graph

    def get_adjacent_vertex_ids(self, vertex_id: int) -> List[int]:
        """
        Get the vertices one traversable edge away.

        Directed edges count only when leaving this vertex; undirected edges
        count both ways.

        Args:
            vertex_id: Vertex ID

        Returns:
            Distinct neighbour IDs in the vertex's edge order
        """
        pVertex = self.graph.get_vertex_by_id(vertex_id)
        aVertexID_adjacent = []
        seen: Set[int] = set()
        for lEdgeID in pVertex.aEdgeID:
            pEdge = self.graph.get_edge_by_id(lEdgeID)
            if not pEdge.is_traversable_from(vertex_id):
                continue
            lVertexID_other = pEdge.get_other_vertex_id(vertex_id)
            if lVertexID_other not in seen:
                seen.add(lVertexID_other)
                aVertexID_adjacent.append(lVertexID_other)
        return aVertexID_adjacent

    def shortest_paths(self, source: Union[pyvertex, int]) -> ShortestPathLookup:
        """
        Run Dijkstra's algorithm from a source vertex.

        The next vertex to settle is the unvisited one with the smallest known
        distance, ties going to the lowest vertex ID. When a neighbour is
        reached again at an equal distance, its predecessor is replaced by the
        vertex being settled. Vertices that cannot be reached are left out of
        the result; that is not an error.

        Args:
            source: Source vertex or vertex ID

        Returns:
            ShortestPathLookup bound to the source

        Raises:
            VertexNotFoundError: If the source is not in the graph
            NegativeEdgeWeightError: If any edge weight is negative or NaN
        """
        lVertexID_source = to_vertex_id(source)
        if not self.graph.has_vertex(lVertexID_source):
            raise VertexNotFoundError(f"Source vertex {lVertexID_source} not found in graph")
        aEdge_negative = [pEdge.lEdgeID for pEdge in self.graph.aEdge if not pEdge.dWeight >= 0]
        if aEdge_negative:
            raise NegativeEdgeWeightError(
                f"No shortest path algorithm is implemented for graphs with negative edge weights "
                f"(edges {aEdge_negative})")

        pVertex_source = self.graph.get_vertex_by_id(lVertexID_source)
        path_lengths: Dict[int, float] = {lVertexID_source: 0.0}
        backtrace_map: Dict[int, int] = {}
        visited: Set[int] = set()
        heap: List[Tuple[float, int]] = [(0.0, lVertexID_source)]

        while heap:
            dDistance_current, lVertexID_current = heapq.heappop(heap)
            if lVertexID_current in visited or dDistance_current > path_lengths[lVertexID_current]:
                continue
            visited.add(lVertexID_current)

            pVertex_current = self.graph.get_vertex_by_id(lVertexID_current)
            for lEdgeID in pVertex_current.aEdgeID:
                pEdge = self.graph.get_edge_by_id(lEdgeID)
                if not pEdge.is_traversable_from(lVertexID_current):
                    continue
                lVertexID_adjacent = pEdge.get_other_vertex_id(lVertexID_current)
                if lVertexID_adjacent in visited:
                    continue
                dDistance_new = dDistance_current + pEdge.dWeight
                dDistance_known = path_lengths.get(lVertexID_adjacent)
                if dDistance_known is not None and dDistance_known < dDistance_new:
                    continue
                backtrace_map[lVertexID_adjacent] = lVertexID_current
                if dDistance_known is None or dDistance_new < dDistance_known:
                    path_lengths[lVertexID_adjacent] = dDistance_new
                    heapq.heappush(heap, (dDistance_new, lVertexID_adjacent))

        nVertex = len(self.graph.aVertex)
        if len(visited) < nVertex:
            logger.debug(f"Graph not connected from vertex {lVertexID_source}: "
                         f"reached {len(visited)} of {nVertex} vertices")
        logger.info(f"Shortest paths from vertex {lVertexID_source} computed for {len(path_lengths)} vertices")

        return ShortestPathLookup(self.graph, pVertex_source, backtrace_map, path_lengths)
