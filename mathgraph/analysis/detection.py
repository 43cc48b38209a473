"""
Cycle detection.

This module decides once, from the edge kinds present, which cycle test
applies: strongly connected components for fully directed graphs or an
edge-stack traversal for undirected ones.
"""

import logging
from enum import Enum
from typing import List, Set

from ..classes.edge import pyedge
from ..core.interface import IGraph
from ..core.exceptions import MixedEdgeKindError
from .components import ComponentFinder

logger = logging.getLogger(__name__)


class EdgeKind(Enum):
    """Edge kinds present in a graph."""
    NONE = 0
    DIRECTED = 1
    UNDIRECTED = 2
    MIXED = 3


def classify_edges(aEdge: List[pyedge]) -> EdgeKind:
    """
    Classify a collection of edges by direction.

    Args:
        aEdge: Edges to inspect

    Returns:
        EdgeKind.NONE for no edges, MIXED when both kinds occur
    """
    iFlag_directed = any(pEdge.iFlag_directed for pEdge in aEdge)
    iFlag_undirected = any(not pEdge.iFlag_directed for pEdge in aEdge)
    if iFlag_directed and iFlag_undirected:
        return EdgeKind.MIXED
    if iFlag_directed:
        return EdgeKind.DIRECTED
    if iFlag_undirected:
        return EdgeKind.UNDIRECTED
    return EdgeKind.NONE


class CycleDetector:
    """
    Detects whether a graph contains a cycle.

    Fully directed graphs always use the strongly connected component test;
    mixed graphs are only supported when every edge is treated as undirected.
    """

    def __init__(self, graph: IGraph):
        """
        Initialize the cycle detector.

        Args:
            graph: Graph to inspect
        """
        self.graph = graph

    def has_cycles(self, iFlag_treat_as_undirected: bool = False) -> bool:
        """
        Check the graph for cycles.

        Args:
            iFlag_treat_as_undirected: Ignore edge direction in mixed graphs

        Returns:
            True if at least one cycle exists

        Raises:
            MixedEdgeKindError: If directed and undirected edges are mixed
                and no override is given
        """
        aEdge = self.graph.aEdge
        eKind = classify_edges(aEdge)
        logger.debug(f"Cycle detection on {len(aEdge)} edges of kind {eKind.name}")

        if eKind == EdgeKind.NONE:
            return False
        if eKind == EdgeKind.DIRECTED:
            return self._has_directed_cycles(aEdge)
        if iFlag_treat_as_undirected or eKind == EdgeKind.UNDIRECTED:
            return self._has_undirected_cycles()
        raise MixedEdgeKindError(
            "Finding cycles is only supported for graphs with all edges being directed or all being undirected")

    def _has_directed_cycles(self, aEdge: List[pyedge]) -> bool:
        for pEdge in aEdge:
            if pEdge.is_self_loop():
                logger.debug(f"Detected self-loop on vertex {pEdge.lVertexID_start}")
                return True
        components = ComponentFinder(self.graph).find_strongly_connected_components()
        return len(components) < len(self.graph.aVertex)

    def _has_undirected_cycles(self) -> bool:
        """
        Edge-stack traversal treating every edge as undirected.

        Popping an edge whose two endpoints were both visited already means the
        second endpoint was reached along another route, i.e. a cycle.
        """
        visited_vertices: Set[int] = set()
        visited_edges: Set[int] = set()

        for pVertex in self.graph.aVertex:
            if pVertex.lVertexID in visited_vertices:
                continue
            visited_vertices.add(pVertex.lVertexID)
            edge_stack: List[pyedge] = [self.graph.get_edge_by_id(lEdgeID) for lEdgeID in pVertex.aEdgeID]

            while edge_stack:
                pEdge = edge_stack.pop()
                visited_edges.add(pEdge.lEdgeID)
                lVertexID = pEdge.lVertexID_start
                if lVertexID in visited_vertices:
                    lVertexID = pEdge.lVertexID_end
                    if lVertexID in visited_vertices:
                        logger.debug(f"Detected cycle closed by edge {pEdge.lEdgeID}")
                        return True
                visited_vertices.add(lVertexID)
                for lEdgeID in self.graph.get_vertex_by_id(lVertexID).aEdgeID:
                    if lEdgeID not in visited_edges:
                        edge_stack.append(self.graph.get_edge_by_id(lEdgeID))

        return False
